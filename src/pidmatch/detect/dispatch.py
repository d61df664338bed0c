"""First-character dispatch index over the rule table.

Most inputs can only match a handful of rules: a value starting with ``h``
is a URL of some kind, a value starting with a digit is a bare DOI, ISBN,
ISSN and so on. The index maps each lowercase first character to the
ordered subset of rules whose hints admit it, so classification only runs
the patterns that could possibly match. Global precedence is preserved
because every bucket keeps the order of ``RULES``.
"""

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from pidmatch.detect.rules import RULES, Rule, compact

__all__ = ["DispatchIndex", "INDEX", "first_match", "scan"]


class DispatchIndex:
    """Immutable lookup from first character to candidate rules.

    Parameters
    ----------
    rules : Sequence[Rule]
        Rules in precedence order.
    """

    def __init__(self, rules: Sequence[Rule]) -> None:
        self.rules: tuple[Rule, ...] = tuple(rules)

        keys: set[str] = set()
        for rule in self.rules:
            chars = rule.first_chars
            if chars is not None:
                keys.update(chars)

        buckets = {
            key: tuple(r for r in self.rules if r.first_chars is None or key in r.first_chars)
            for key in sorted(keys)
        }
        self._buckets: Mapping[str, tuple[Rule, ...]] = MappingProxyType(buckets)
        # Rules without hints apply to every first character
        self._unhinted: tuple[Rule, ...] = tuple(r for r in self.rules if r.first_chars is None)

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def candidates(self, value: str) -> tuple[Rule, ...]:
        """Return the rules that may match a trimmed value, in precedence order."""
        return self._buckets.get(value[:1].lower(), self._unhinted)


INDEX = DispatchIndex(RULES)


def _first(rules: Sequence[Rule], value: str) -> Rule | None:
    lowered = value.lower()
    compacted: str | None = None
    for rule in rules:
        if rule.on_compact and compacted is None:
            compacted = compact(value)
        if rule.matches(value, lowered, compacted):
            return rule
    return None


def first_match(value: str, index: DispatchIndex = INDEX) -> Rule | None:
    """Return the highest-precedence rule matching a trimmed value, if any."""
    if not value:
        return None
    return _first(index.candidates(value), value)


def scan(value: str, rules: Sequence[Rule] = RULES) -> Rule | None:
    """Linear scan over every rule; reference behaviour for the index."""
    return _first(rules, value)

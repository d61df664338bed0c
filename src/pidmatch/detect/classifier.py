"""Identifier type detection.

``detect`` is total: every string, including the empty string, gets a type.
When no rule matches, a value that contains a slash and no space is assumed
to be a DOI; anything else is treated as a URL.
"""

from dataclasses import dataclass

from pidmatch.detect.dispatch import first_match
from pidmatch.models.enums import IdentifierType
from pidmatch.utils.text import trim

__all__ = ["Classification", "detect", "explain"]


@dataclass(frozen=True)
class Classification:
    """Detected type together with the rule that decided it.

    Attributes
    ----------
    identifier_type : IdentifierType
        Detected identifier scheme.
    rule : str | None
        Name of the winning rule, or None when the fallback applied.
    """

    identifier_type: IdentifierType
    rule: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary."""
        return {"identifier_type": self.identifier_type.value, "rule": self.rule}


def _fallback(value: str) -> IdentifierType:
    if "/" in value and " " not in value:
        return IdentifierType.DOI
    return IdentifierType.URL


def explain(value: str) -> Classification:
    """Classify a value and report which rule matched.

    Parameters
    ----------
    value : str
        Raw user input. Leading and trailing whitespace is ignored.

    Returns
    -------
    Classification
        Detected type and winning rule name.

    Examples
    --------
        >>> explain("10.1594/WDCC/CERA-DB")
        Classification(identifier_type=<IdentifierType.HANDLE: 'Handle'>, rule='handle_wdcc')
    """
    trimmed = trim(value)
    rule = first_match(trimmed)
    if rule is None:
        return Classification(_fallback(trimmed), None)
    return Classification(rule.identifier_type, rule.name)


def detect(value: str) -> IdentifierType:
    """Return the identifier type of a raw value.

    Parameters
    ----------
    value : str
        Raw user input.

    Returns
    -------
    IdentifierType
        Detected identifier scheme. Never raises.
    """
    return explain(value).identifier_type

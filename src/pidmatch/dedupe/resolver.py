"""Duplicate checks against an existing related-work list.

Two entries are duplicates when they share identifier type, relation type
and normalized identifier (compared case-insensitively). The same
identifier with a different relation type is a distinct entry.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from pidmatch.dedupe.keys import equivalence_key
from pidmatch.models.enums import IdentifierType, RelationType

__all__ = ["RelatedIdentifierLike", "find_duplicate", "is_duplicate"]


class RelatedIdentifierLike(Protocol):
    """Anything carrying an identifier, its type and a relation type."""

    identifier: str
    identifier_type: IdentifierType
    relation_type: RelationType


T = TypeVar("T", bound=RelatedIdentifierLike)


def find_duplicate(
    identifier: str,
    identifier_type: IdentifierType | str,
    relation_type: RelationType | str,
    existing: Iterable[T],
) -> T | None:
    """Return the first existing entry that duplicates the candidate.

    Parameters
    ----------
    identifier : str
        Candidate identifier as entered.
    identifier_type : IdentifierType | str
        Candidate identifier scheme.
    relation_type : RelationType | str
        Candidate relation type.
    existing : Iterable
        Entries already in the list.

    Returns
    -------
    RelatedIdentifierLike | None
        Colliding entry, or None.
    """
    key = equivalence_key(identifier, identifier_type, relation_type)
    for item in existing:
        # Cheap field comparison before normalizing the stored identifier
        if str(item.identifier_type) != key[0] or str(item.relation_type) != key[1]:
            continue
        if equivalence_key(item.identifier, item.identifier_type, item.relation_type) == key:
            return item
    return None


def is_duplicate(
    identifier: str,
    identifier_type: IdentifierType | str,
    relation_type: RelationType | str,
    existing: Iterable[RelatedIdentifierLike],
) -> bool:
    """Return True when the candidate already exists in ``existing``.

    Examples
    --------
        >>> rec = RelatedIdentifierRecord("10.5880/GFZ.1.1", IdentifierType.DOI, RelationType.CITES)
        >>> is_duplicate("https://doi.org/10.5880/gfz.1.1", "DOI", "Cites", [rec])
        True
        >>> is_duplicate("10.5880/GFZ.1.1", "DOI", "References", [rec])
        False
    """
    return find_duplicate(identifier, identifier_type, relation_type, existing) is not None

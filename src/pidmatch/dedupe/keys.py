"""Equivalence keys for related identifiers."""

from pidmatch.models.enums import IdentifierType, RelationType
from pidmatch.normalize import normalize_identifier

__all__ = ["EquivalenceKey", "equivalence_key"]

EquivalenceKey = tuple[str, str, str]


def equivalence_key(
    identifier: str,
    identifier_type: IdentifierType | str,
    relation_type: RelationType | str,
) -> EquivalenceKey:
    """Build the key two entries share exactly when they are duplicates.

    Parameters
    ----------
    identifier : str
        Identifier as entered.
    identifier_type : IdentifierType | str
        Identifier scheme.
    relation_type : RelationType | str
        Relation type.

    Returns
    -------
    tuple[str, str, str]
        ``(type, relation, lowercased normalized identifier)``.
    """
    normalized = normalize_identifier(identifier, identifier_type)
    return (str(identifier_type), str(relation_type), normalized.lower())

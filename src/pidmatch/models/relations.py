"""Relation type catalogue.

Grouping, inverse pairs and descriptions used by entry forms to present
the DataCite relation types. Every ``RelationType`` member appears in
exactly one group.
"""

from pidmatch.models.enums import RelationType as R

__all__ = [
    "RELATION_TYPES_GROUPED",
    "MOST_USED_RELATION_TYPES",
    "BIDIRECTIONAL_PAIRS",
    "RELATION_TYPE_DESCRIPTIONS",
    "all_relation_types",
    "opposite_relation_type",
]

RELATION_TYPES_GROUPED: dict[str, tuple[R, ...]] = {
    "Citation": (R.CITES, R.IS_CITED_BY, R.REFERENCES, R.IS_REFERENCED_BY),
    "Documentation": (R.DOCUMENTS, R.IS_DOCUMENTED_BY, R.DESCRIBES, R.IS_DESCRIBED_BY),
    "Versions": (
        R.IS_NEW_VERSION_OF,
        R.IS_PREVIOUS_VERSION_OF,
        R.HAS_VERSION,
        R.IS_VERSION_OF,
        R.CONTINUES,
        R.IS_CONTINUED_BY,
        R.OBSOLETES,
        R.IS_OBSOLETED_BY,
        R.IS_VARIANT_FORM_OF,
        R.IS_ORIGINAL_FORM_OF,
    ),
    "Compilation": (
        R.HAS_PART,
        R.IS_PART_OF,
        R.COMPILES,
        R.IS_COMPILED_BY,
        R.COLLECTS,
        R.IS_COLLECTED_BY,
    ),
    "Derivation": (R.IS_DERIVED_FROM, R.IS_SOURCE_OF, R.HAS_TRANSLATION, R.IS_TRANSLATION_OF),
    "Supplement": (R.IS_SUPPLEMENT_TO, R.IS_SUPPLEMENTED_BY),
    "Software": (R.REQUIRES, R.IS_REQUIRED_BY),
    "Metadata": (R.HAS_METADATA, R.IS_METADATA_FOR),
    "Reviews": (R.REVIEWS, R.IS_REVIEWED_BY),
    "Other": (R.IS_PUBLISHED_IN, R.IS_IDENTICAL_TO),
}

# Offered by the quick-add form
MOST_USED_RELATION_TYPES: tuple[R, ...] = (
    R.CITES,
    R.REFERENCES,
    R.IS_DERIVED_FROM,
    R.IS_SUPPLEMENT_TO,
    R.IS_PART_OF,
    R.IS_NEW_VERSION_OF,
    R.IS_PREVIOUS_VERSION_OF,
)

_INVERSE_PAIRS: tuple[tuple[R, R], ...] = (
    (R.CITES, R.IS_CITED_BY),
    (R.REFERENCES, R.IS_REFERENCED_BY),
    (R.DOCUMENTS, R.IS_DOCUMENTED_BY),
    (R.DESCRIBES, R.IS_DESCRIBED_BY),
    (R.IS_NEW_VERSION_OF, R.IS_PREVIOUS_VERSION_OF),
    (R.HAS_VERSION, R.IS_VERSION_OF),
    (R.CONTINUES, R.IS_CONTINUED_BY),
    (R.OBSOLETES, R.IS_OBSOLETED_BY),
    (R.IS_VARIANT_FORM_OF, R.IS_ORIGINAL_FORM_OF),
    (R.HAS_PART, R.IS_PART_OF),
    (R.COMPILES, R.IS_COMPILED_BY),
    (R.COLLECTS, R.IS_COLLECTED_BY),
    (R.IS_DERIVED_FROM, R.IS_SOURCE_OF),
    (R.HAS_TRANSLATION, R.IS_TRANSLATION_OF),
    (R.IS_SUPPLEMENT_TO, R.IS_SUPPLEMENTED_BY),
    (R.REQUIRES, R.IS_REQUIRED_BY),
    (R.HAS_METADATA, R.IS_METADATA_FOR),
    (R.REVIEWS, R.IS_REVIEWED_BY),
)

_UNIDIRECTIONAL: tuple[R, ...] = (R.IS_PUBLISHED_IN, R.IS_IDENTICAL_TO)


def _build_pairs() -> dict[R, R]:
    pairs: dict[R, R] = {}
    for forward, backward in _INVERSE_PAIRS:
        pairs[forward] = backward
        pairs[backward] = forward
    for relation in _UNIDIRECTIONAL:
        pairs[relation] = relation
    return pairs


BIDIRECTIONAL_PAIRS: dict[R, R] = _build_pairs()

RELATION_TYPE_DESCRIPTIONS: dict[R, str] = {
    R.CITES: "This resource cites the related work",
    R.IS_CITED_BY: "This resource is cited by the related work",
    R.REFERENCES: "This resource references the related work",
    R.IS_REFERENCED_BY: "This resource is referenced by the related work",
    R.DOCUMENTS: "This resource documents the related work",
    R.IS_DOCUMENTED_BY: "This resource is documented by the related work",
    R.DESCRIBES: "This resource describes the related work",
    R.IS_DESCRIBED_BY: "This resource is described by the related work",
    R.IS_NEW_VERSION_OF: "This resource is a new version of the related work",
    R.IS_PREVIOUS_VERSION_OF: "This resource is a previous version of the related work",
    R.HAS_VERSION: "This resource has the related work as a version",
    R.IS_VERSION_OF: "This resource is a version of the related work",
    R.CONTINUES: "This resource continues the related work",
    R.IS_CONTINUED_BY: "This resource is continued by the related work",
    R.OBSOLETES: "This resource replaces the related work",
    R.IS_OBSOLETED_BY: "This resource is replaced by the related work",
    R.IS_VARIANT_FORM_OF: "This resource is a variant form of the related work",
    R.IS_ORIGINAL_FORM_OF: "This resource is the original form of the related work",
    R.HAS_PART: "This resource has the related work as a part",
    R.IS_PART_OF: "This resource is part of the related work",
    R.COMPILES: "This resource is a compilation that includes the related work",
    R.IS_COMPILED_BY: "This resource is compiled into the related work",
    R.COLLECTS: "This resource is a collection that contains the related work",
    R.IS_COLLECTED_BY: "This resource is included in the related collection",
    R.IS_DERIVED_FROM: "This resource is derived from the related work",
    R.IS_SOURCE_OF: "This resource is the source the related work is derived from",
    R.HAS_TRANSLATION: "This resource has the related work as a translation",
    R.IS_TRANSLATION_OF: "This resource is a translation of the related work",
    R.IS_SUPPLEMENT_TO: "This resource is a supplement to the related work",
    R.IS_SUPPLEMENTED_BY: "This resource is supplemented by the related work",
    R.REQUIRES: "This resource requires the related work to run or compile",
    R.IS_REQUIRED_BY: "This resource is required by the related work",
    R.HAS_METADATA: "This resource has additional metadata in the related work",
    R.IS_METADATA_FOR: "This resource is metadata describing the related work",
    R.REVIEWS: "This resource is a review of the related work",
    R.IS_REVIEWED_BY: "This resource is reviewed by the related work",
    R.IS_PUBLISHED_IN: "This resource is published inside the related work",
    R.IS_IDENTICAL_TO: "This resource is identical to the related work",
}


def all_relation_types() -> list[R]:
    """Return every relation type in catalogue order, without duplicates."""
    seen: dict[R, None] = {}
    for relations in RELATION_TYPES_GROUPED.values():
        for relation in relations:
            seen.setdefault(relation, None)
    return list(seen)


def opposite_relation_type(relation_type: R | str) -> R | None:
    """Return the inverse relation, or None for unidirectional relations.

    Parameters
    ----------
    relation_type : RelationType | str
        Relation type member or value.

    Returns
    -------
    RelationType | None
        Inverse relation type.

    Raises
    ------
    ValueError
        If ``relation_type`` is not a known relation type.
    """
    relation = R.parse(relation_type)
    opposite = BIDIRECTIONAL_PAIRS[relation]
    return None if opposite == relation else opposite

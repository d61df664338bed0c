"""Shared data types for pidmatch.

This package contains the closed vocabularies, the related identifier
record types, and the relation type catalogue consumed across the package.
"""

from pidmatch.models.enums import DATACITE_SCHEMA_VERSION, IdentifierType, RelationType
from pidmatch.models.records import (
    RECORD_SCHEMA,
    RecordFormatError,
    RelatedIdentifierDraft,
    RelatedIdentifierRecord,
    validate_record_dict,
)
from pidmatch.models.relations import (
    BIDIRECTIONAL_PAIRS,
    MOST_USED_RELATION_TYPES,
    RELATION_TYPE_DESCRIPTIONS,
    RELATION_TYPES_GROUPED,
    all_relation_types,
    opposite_relation_type,
)

__all__ = [
    # Vocabularies
    "DATACITE_SCHEMA_VERSION",
    "IdentifierType",
    "RelationType",
    # Records
    "RECORD_SCHEMA",
    "RecordFormatError",
    "RelatedIdentifierDraft",
    "RelatedIdentifierRecord",
    "validate_record_dict",
    # Relation catalogue
    "RELATION_TYPES_GROUPED",
    "MOST_USED_RELATION_TYPES",
    "BIDIRECTIONAL_PAIRS",
    "RELATION_TYPE_DESCRIPTIONS",
    "all_relation_types",
    "opposite_relation_type",
]

"""Related identifier record models.

A ``RelatedIdentifierRecord`` is one entry of a resource's related-work
list. Records are immutable; list operations build new records when
positions change.
"""

from dataclasses import dataclass, field, replace
from typing import Any

import jsonschema

from pidmatch.models.enums import IdentifierType, RelationType

__all__ = [
    "RECORD_SCHEMA",
    "RecordFormatError",
    "RelatedIdentifierDraft",
    "RelatedIdentifierRecord",
    "validate_record_dict",
]

RECORD_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "RelatedIdentifierRecord",
    "type": "object",
    "required": ["identifier", "identifier_type", "relation_type"],
    "properties": {
        "identifier": {"type": "string", "minLength": 1},
        "identifier_type": {"enum": IdentifierType.values()},
        "relation_type": {"enum": RelationType.values()},
        "position": {"type": "integer", "minimum": 0},
        "related_title": {"type": ["string", "null"]},
        "related_metadata": {"type": ["object", "null"]},
    },
    "additionalProperties": False,
}


class RecordFormatError(ValueError):
    """Raised when a serialized record does not match the record schema."""

    def __init__(self, message: str, line: int | None = None) -> None:
        """Initialize record format error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line number in the source file, if known.
        """
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


def validate_record_dict(data: Any) -> None:
    """Validate a decoded JSON object against ``RECORD_SCHEMA``.

    Raises
    ------
    RecordFormatError
        If validation fails.
    """
    try:
        jsonschema.validate(instance=data, schema=RECORD_SCHEMA)
    except jsonschema.ValidationError as e:
        raise RecordFormatError(e.message) from e


@dataclass(frozen=True)
class RelatedIdentifierDraft:
    """Identifier/type/relation triple submitted by a form or CSV row.

    Attributes
    ----------
    identifier : str
        Identifier as typed or imported.
    identifier_type : IdentifierType
        Detected or manually selected scheme.
    relation_type : RelationType
        Relation to the described resource.
    related_title : str | None
        Optional title of the related work.
    """

    identifier: str
    identifier_type: IdentifierType
    relation_type: RelationType
    related_title: str | None = None


@dataclass(frozen=True)
class RelatedIdentifierRecord:
    """Stored related-work entry.

    Attributes
    ----------
    identifier : str
        Identifier as entered (trimmed, not normalized).
    identifier_type : IdentifierType
        Identifier scheme.
    relation_type : RelationType
        Relation to the described resource.
    position : int
        Dense, zero-based position in the list.
    related_title : str | None
        Optional title of the related work.
    related_metadata : dict[str, Any] | None
        Optional free-form metadata about the related work.
    """

    identifier: str
    identifier_type: IdentifierType
    relation_type: RelationType
    position: int = 0
    related_title: str | None = None
    related_metadata: dict[str, Any] | None = field(default=None, compare=False)

    def with_position(self, position: int) -> "RelatedIdentifierRecord":
        """Return a copy at another position."""
        return replace(self, position=position)

    def to_dict(self) -> dict[str, Any]:
        """Convert record to a JSON-compatible dictionary.

        Returns
        -------
        dict[str, Any]
            Dictionary with enum members replaced by their values.
        """
        return {
            "identifier": self.identifier,
            "identifier_type": self.identifier_type.value,
            "relation_type": self.relation_type.value,
            "position": self.position,
            "related_title": self.related_title,
            "related_metadata": self.related_metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RelatedIdentifierRecord":
        """Reconstruct a record from a dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary (e.g. from JSON) with record fields.

        Returns
        -------
        RelatedIdentifierRecord
            Reconstructed record.

        Raises
        ------
        RecordFormatError
            If the dictionary does not match ``RECORD_SCHEMA``.
        """
        validate_record_dict(data)
        return cls(
            identifier=data["identifier"],
            identifier_type=IdentifierType(data["identifier_type"]),
            relation_type=RelationType(data["relation_type"]),
            position=data.get("position", 0),
            related_title=data.get("related_title"),
            related_metadata=data.get("related_metadata"),
        )

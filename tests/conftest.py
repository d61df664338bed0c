"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from pidmatch.models import (  # noqa: E402
    IdentifierType,
    RelatedIdentifierDraft,
    RelatedIdentifierRecord,
    RelationType,
)


@pytest.fixture
def make_record() -> Callable[..., RelatedIdentifierRecord]:
    """Factory for related identifier records with minimal boilerplate."""

    def _factory(
        identifier: str = "10.5880/GFZ.1.1",
        identifier_type: IdentifierType | str = IdentifierType.DOI,
        relation_type: RelationType | str = RelationType.CITES,
        *,
        position: int = 0,
        related_title: str | None = None,
        related_metadata: dict[str, Any] | None = None,
    ) -> RelatedIdentifierRecord:
        return RelatedIdentifierRecord(
            identifier=identifier,
            identifier_type=IdentifierType(identifier_type),
            relation_type=RelationType(relation_type),
            position=position,
            related_title=related_title,
            related_metadata=related_metadata,
        )

    return _factory


@pytest.fixture
def make_draft() -> Callable[..., RelatedIdentifierDraft]:
    """Factory for CSV-style drafts."""

    def _factory(
        identifier: str,
        identifier_type: IdentifierType | str = IdentifierType.DOI,
        relation_type: RelationType | str = RelationType.CITES,
    ) -> RelatedIdentifierDraft:
        return RelatedIdentifierDraft(
            identifier=identifier,
            identifier_type=IdentifierType(identifier_type),
            relation_type=RelationType(relation_type),
        )

    return _factory


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write CSV text to a file under tmp_path."""

    def _write(text: str, name: str = "related.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[..., Path]:
    """Write record dictionaries as JSONL under tmp_path."""

    def _write(records: list[RelatedIdentifierRecord], name: str = "existing.jsonl") -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(record.to_dict()) + "\n")
        return path

    return _write

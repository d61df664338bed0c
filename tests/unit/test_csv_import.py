"""Tests for related-works CSV parsing."""

from collections.abc import Callable
from pathlib import Path

import pytest

from pidmatch.models import IdentifierType, RelatedIdentifierDraft, RelationType
from pidmatch.parse import EXAMPLE_CSV, RowError, parse_related_works_csv, read_related_works_csv

# ---------------------------------------------------------------------------
# Valid input
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_example_template_parses_cleanly() -> None:
    """Test the bundled template has four valid rows."""
    items, errors = parse_related_works_csv(EXAMPLE_CSV)

    assert errors == []
    assert [item.relation_type for item in items] == [
        RelationType.CITES,
        RelationType.REFERENCES,
        RelationType.IS_SUPPLEMENT_TO,
        RelationType.IS_DERIVED_FROM,
    ]
    assert items[2] == RelatedIdentifierDraft(
        "https://example.org/dataset/123", IdentifierType.URL, RelationType.IS_SUPPLEMENT_TO
    )


@pytest.mark.unit
def test_header_case_and_column_order() -> None:
    """Test header matching ignores case and column order."""
    text = "Relation_Type, IDENTIFIER ,identifier_type\nCites,10.1/x,DOI\n"

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert items == [RelatedIdentifierDraft("10.1/x", IdentifierType.DOI, RelationType.CITES)]


@pytest.mark.unit
def test_values_are_trimmed_and_blank_lines_skipped() -> None:
    """Test cell whitespace and blank lines are ignored."""
    text = "identifier,identifier_type,relation_type\n\n  10.1/x  , DOI , Cites \n   \n"

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert items[0].identifier == "10.1/x"


@pytest.mark.unit
def test_quoted_values_with_commas() -> None:
    """Test quoted cells may contain commas."""
    text = (
        "identifier,identifier_type,relation_type,related_title\n"
        '"https://example.org/a,b",URL,References,"Title, with comma"\n'
    )

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert items[0].identifier == "https://example.org/a,b"
    assert items[0].related_title == "Title, with comma"


@pytest.mark.unit
def test_optional_title_missing_or_empty() -> None:
    """Test related_title is None when absent or blank."""
    text = "identifier,identifier_type,relation_type,related_title\n10.1/x,DOI,Cites,\n10.1/y,DOI,Cites\n"

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert [item.related_title for item in items] == [None, None]


@pytest.mark.unit
def test_extra_columns_ignored() -> None:
    """Test unknown columns are ignored."""
    text = "identifier,note,identifier_type,relation_type\n10.1/x,hello,DOI,Cites\n"

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert items[0].identifier_type == IdentifierType.DOI


# ---------------------------------------------------------------------------
# File-level errors
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "\n\n", "identifier,identifier_type,relation_type\n"])
def test_empty_file(text: str) -> None:
    """Test files without data rows are rejected."""
    items, errors = parse_related_works_csv(text)

    assert items == []
    assert errors == [RowError(0, "file", "", "CSV file is empty or has no data rows")]


@pytest.mark.unit
def test_missing_required_columns() -> None:
    """Test missing columns are reported once, at row 0."""
    items, errors = parse_related_works_csv("identifier,type\n10.1/x,DOI\n")

    assert items == []
    assert len(errors) == 1
    assert errors[0].row == 0
    assert errors[0].field == "header"
    assert errors[0].message == "Missing required columns: identifier_type, relation_type"


# ---------------------------------------------------------------------------
# Row-level errors
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_invalid_rows_reported_with_row_numbers() -> None:
    """Test each bad value yields an error with its 1-based row number."""
    text = (
        "identifier,identifier_type,relation_type\n"
        "10.1/ok,DOI,Cites\n"
        ",DOI,Cites\n"
        "10.1/x,doi,Cites\n"
        "10.1/y,DOI,cites\n"
        "10.1/z\n"
    )

    items, errors = parse_related_works_csv(text)

    assert [item.identifier for item in items] == ["10.1/ok"]
    assert [(e.row, e.field) for e in errors] == [
        (3, "identifier"),
        (4, "identifier_type"),
        (5, "relation_type"),
        (6, "row"),
    ]
    assert errors[0].message == "Identifier is required"
    assert errors[1].message.startswith("Invalid identifier type. Must be one of: ARK, arXiv")
    assert errors[2].message == "Invalid relation type. Must be one of DataCite Schema 4.6 types"
    assert errors[3].message == "Row has insufficient columns"


@pytest.mark.unit
def test_row_with_several_errors() -> None:
    """Test all problems of one row are reported and the row is dropped."""
    items, errors = parse_related_works_csv("identifier,identifier_type,relation_type\n ,X,Y\n")

    assert items == []
    assert [e.field for e in errors] == ["identifier", "identifier_type", "relation_type"]
    assert {e.row for e in errors} == {2}


@pytest.mark.unit
def test_malformed_quoting() -> None:
    """Test unbalanced quotes produce a row error instead of an exception."""
    text = 'identifier,identifier_type,relation_type\n"10.1/x,DOI,Cites\n10.1/y,DOI,Cites\n'

    items, errors = parse_related_works_csv(text)

    assert [item.identifier for item in items] == ["10.1/y"]
    assert errors == [RowError(2, "row", '"10.1/x,DOI,Cites', "Row is not valid CSV")]


@pytest.mark.unit
def test_row_error_to_dict() -> None:
    """Test RowError serializes to a plain dictionary."""
    err = RowError(3, "identifier", "", "Identifier is required")

    assert err.to_dict() == {
        "row": 3,
        "field": "identifier",
        "value": "",
        "message": "Identifier is required",
    }


@pytest.mark.unit
@pytest.mark.parametrize("type_value", ["CSTR", "RRID", "ISSN", "w3id"])
def test_full_identifier_vocabulary_accepted(type_value: str) -> None:
    """Test every identifier type value is accepted."""
    items, errors = parse_related_works_csv(
        f"identifier,identifier_type,relation_type\nabc,{type_value},HasTranslation\n"
    )

    assert errors == []
    assert items[0].identifier_type == IdentifierType(type_value)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_read_tolerates_bom(tmp_path: Path) -> None:
    """Test a UTF-8 byte order mark does not break the header."""
    path = tmp_path / "bom.csv"
    path.write_bytes(("\ufeff" + EXAMPLE_CSV).encode("utf-8"))

    items, errors = read_related_works_csv(path)

    assert errors == []
    assert len(items) == 4


@pytest.mark.unit
def test_read_crlf_line_endings(write_csv: Callable[..., Path]) -> None:
    """Test Windows line endings are handled."""
    path = write_csv("identifier,identifier_type,relation_type\r\n10.1/x,DOI,Cites\r\n")

    items, errors = read_related_works_csv(path)

    assert errors == []
    assert items[0].relation_type == RelationType.CITES


@pytest.mark.unit
def test_read_missing_file(tmp_path: Path) -> None:
    """Test reading a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="File not found"):
        read_related_works_csv(tmp_path / "missing.csv")


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_unicode_separators_stay_inside_fields() -> None:
    """Test only newline ends a row; other separators remain in the value."""
    text = (
        "identifier,identifier_type,relation_type\n"
        "10.1/a\u2028b,DOI,Cites\n"
        "10.1/c\x1cd,DOI,Cites\n"
        "10.1/e\x85f,DOI,Cites\n"
    )

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert [item.identifier for item in items] == ["10.1/a\u2028b", "10.1/c\x1cd", "10.1/e\x85f"]


@pytest.mark.unit
def test_vertical_tab_does_not_shift_row_numbers() -> None:
    """Test a trailing vertical tab is trimmed and not treated as a line break."""
    text = "identifier,identifier_type,relation_type\n10.1/a\v,DOI,Cites\n,DOI,Cites\n"

    items, errors = parse_related_works_csv(text)

    assert [item.identifier for item in items] == ["10.1/a"]
    assert [(e.row, e.field) for e in errors] == [(3, "identifier")]


@pytest.mark.unit
def test_values_trimmed_of_unicode_whitespace() -> None:
    """Test no-break spaces and BOMs around cells are removed."""
    text = "identifier,identifier_type,relation_type\n\u00a010.1/x\ufeff,\u00a0DOI,Cites\u3000\n"

    items, errors = parse_related_works_csv(text)

    assert errors == []
    assert items == [RelatedIdentifierDraft("10.1/x", IdentifierType.DOI, RelationType.CITES)]


@pytest.mark.unit
def test_read_keeps_line_separator_in_identifier(write_csv: Callable[..., Path]) -> None:
    """Test reading a file does not split rows on Unicode line separators."""
    path = write_csv("identifier,identifier_type,relation_type\r\nhttps://example.org/a\u2028b,URL,Cites\r\n")

    items, errors = read_related_works_csv(path)

    assert errors == []
    assert [item.identifier for item in items] == ["https://example.org/a\u2028b"]

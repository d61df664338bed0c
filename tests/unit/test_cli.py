"""Tests for CLI module."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from pidmatch.cli.main import cli
from pidmatch.models import RelatedIdentifierRecord


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


@pytest.fixture
def existing(write_records: Callable[..., Path], make_record: Callable[..., RelatedIdentifierRecord]) -> Path:
    """JSONL list with one DOI citation."""
    return write_records([make_record("10.5880/GFZ.1.1")])


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "pidmatch" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("detect", "normalize", "check", "import"):
        assert command in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# detect command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_detect_multiple_values(runner: CliRunner) -> None:
    """Test detect prints one tab-separated line per value."""
    result = runner.invoke(cli, ["detect", "10.5880/GFZ.1.1", "arXiv:2501.13958"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["10.5880/GFZ.1.1\tDOI", "arXiv:2501.13958\tarXiv"]


@pytest.mark.unit
def test_detect_explain(runner: CliRunner) -> None:
    """Test --explain adds the rule name or fallback marker."""
    result = runner.invoke(cli, ["detect", "--explain", "10.1594/WDCC/X", "plain"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "10.1594/WDCC/X\tHandle\thandle_wdcc",
        "plain\tURL\t(fallback)",
    ]


@pytest.mark.unit
def test_detect_json(runner: CliRunner) -> None:
    """Test --json prints one object per value."""
    result = runner.invoke(cli, ["detect", "--json", "ark:/13960/t5z64fc55"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "value": "ark:/13960/t5z64fc55",
        "identifier_type": "ARK",
        "rule": "ark",
    }


@pytest.mark.unit
def test_detect_requires_value(runner: CliRunner) -> None:
    """Test detect without values is a usage error."""
    result = runner.invoke(cli, ["detect"])

    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["https://doi.org/10.5880/GFZ.1.1"], "10.5880/GFZ.1.1"),
        (["doi:10.1/x", "--type", "DOI"], "10.1/x"),
        (["doi:10.1/x", "-t", "url"], "doi:10.1/x"),
        (["  https://example.org/a  "], "https://example.org/a"),
    ],
)
def test_normalize(runner: CliRunner, args: list[str], expected: str) -> None:
    """Test normalize prints the canonical form."""
    result = runner.invoke(cli, ["normalize", *args])

    assert result.exit_code == 0
    assert result.output == expected + "\n"


@pytest.mark.unit
def test_normalize_rejects_unknown_type(runner: CliRunner) -> None:
    """Test unknown --type values are usage errors."""
    result = runner.invoke(cli, ["normalize", "x", "--type", "ISBN13"])

    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_check_duplicate(runner: CliRunner, existing: Path) -> None:
    """Test check exits 1 and names the matching entry."""
    result = runner.invoke(
        cli, ["check", "https://doi.org/10.5880/gfz.1.1", "-r", "Cites", "-e", str(existing)]
    )

    assert result.exit_code == 1
    assert "Duplicate" in result.output
    assert "position 0" in result.output


@pytest.mark.unit
def test_check_not_duplicate_other_relation(runner: CliRunner, existing: Path) -> None:
    """Test same identifier with another relation passes."""
    result = runner.invoke(cli, ["check", "10.5880/GFZ.1.1", "-r", "references", "-e", str(existing)])

    assert result.exit_code == 0
    assert "Not a duplicate" in result.output
    assert "References" in result.output


@pytest.mark.unit
def test_check_explicit_type(runner: CliRunner, existing: Path) -> None:
    """Test --type overrides detection."""
    result = runner.invoke(
        cli, ["check", "10.5880/GFZ.1.1", "-r", "Cites", "-t", "URL", "-e", str(existing)]
    )

    assert result.exit_code == 0


@pytest.mark.unit
def test_check_bad_existing_file(runner: CliRunner, tmp_path: Path) -> None:
    """Test an unreadable list reports an error."""
    bad = tmp_path / "bad.jsonl"
    bad.write_text("not json\n", encoding="utf-8")

    result = runner.invoke(cli, ["check", "10.1/x", "-r", "Cites", "-e", str(bad)])

    assert result.exit_code == 1
    assert "Error: line 1" in result.output


# ---------------------------------------------------------------------------
# import command
# ---------------------------------------------------------------------------


@pytest.mark.integration
def test_import_writes_output(runner: CliRunner, write_csv: Callable[..., Path], tmp_path: Path) -> None:
    """Test import writes merged JSONL and reports counts."""
    csv_path = write_csv(
        "identifier,identifier_type,relation_type\n10.1/a,DOI,Cites\nhttps://doi.org/10.1/A,DOI,Cites\n"
    )
    output = tmp_path / "out" / "works.jsonl"

    result = runner.invoke(cli, ["import", str(csv_path), "-o", str(output)])

    assert result.exit_code == 0
    assert "Imported 1 related work(s), skipped 1 duplicate(s)" in result.output
    assert "Skipped 1 duplicate(s) from CSV import" in result.output
    assert len(output.read_text(encoding="utf-8").splitlines()) == 1


@pytest.mark.integration
def test_import_with_existing_and_log(
    runner: CliRunner, write_csv: Callable[..., Path], existing: Path, tmp_path: Path
) -> None:
    """Test import merges into an existing list and writes an audit log."""
    csv_path = write_csv("identifier,identifier_type,relation_type\n10.5880/GFZ.1.1,DOI,IsCitedBy\n")
    output = tmp_path / "works.jsonl"
    log_file = tmp_path / "logs" / "import.jsonl"

    result = runner.invoke(
        cli,
        ["import", str(csv_path), "-e", str(existing), "-o", str(output), "--log-file", str(log_file), "-v"],
    )

    assert result.exit_code == 0
    assert "Imported 1 related work(s), skipped 0 duplicate(s); 2 in" in result.output
    assert "Existing list:" in result.output
    lines = output.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["position"] for line in lines] == [0, 1]
    events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert events[0] == "run_started"
    assert events[-1] == "run_finished"


@pytest.mark.integration
def test_import_invalid_rows_abort(runner: CliRunner, write_csv: Callable[..., Path], tmp_path: Path) -> None:
    """Test invalid rows abort the import unless skipped explicitly."""
    csv_path = write_csv("identifier,identifier_type,relation_type\n10.1/a,DOI,Cites\n10.1/b,XYZ,Cites\n")
    output = tmp_path / "works.jsonl"

    result = runner.invoke(cli, ["import", str(csv_path), "-o", str(output)])

    assert result.exit_code == 1
    assert "row 3: Invalid identifier type" in result.output
    assert "Import failed" in result.output
    assert not output.exists()

    result = runner.invoke(cli, ["import", str(csv_path), "-o", str(output), "--skip-invalid-rows"])

    assert result.exit_code == 0
    assert "Imported 1 related work(s)" in result.output


@pytest.mark.unit
def test_import_missing_csv(runner: CliRunner, tmp_path: Path) -> None:
    """Test a missing CSV file is a usage error."""
    result = runner.invoke(cli, ["import", str(tmp_path / "nope.csv"), "-o", str(tmp_path / "o.jsonl")])

    assert result.exit_code == 2

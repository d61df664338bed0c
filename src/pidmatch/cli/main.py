"""Command-line interface for pidmatch.

Provides CLI commands for identifier detection, normalization, duplicate
checks and CSV import.
"""

import importlib.metadata
import json
import sys
from pathlib import Path

import click

from pidmatch.models.enums import IdentifierType, RelationType

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("pidmatch")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_TYPE_CHOICE = click.Choice(IdentifierType.values(), case_sensitive=False)
_RELATION_CHOICE = click.Choice(RelationType.values(), case_sensitive=False)


@click.group()
@click.version_option(version=__version__, prog_name="pidmatch")
def cli() -> None:
    """Classify, normalize and deduplicate persistent identifiers.

    Use 'pidmatch COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option("--explain", "show_rule", is_flag=True, help="Show the rule that decided the type")
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per value")
def detect(values: tuple[str, ...], show_rule: bool, as_json: bool) -> None:
    """Detect the identifier type of each VALUE.

    Examples
    --------
        pidmatch detect 10.5880/GFZ.1.1 arXiv:2501.13958
        pidmatch detect "hep-th/9901001" --explain
    """
    from pidmatch.detect import explain

    for value in values:
        result = explain(value)
        if as_json:
            click.echo(json.dumps({"value": value, **result.to_dict()}, ensure_ascii=False))
        elif show_rule:
            click.echo(f"{value}\t{result.identifier_type}\t{result.rule or '(fallback)'}")
        else:
            click.echo(f"{value}\t{result.identifier_type}")


@cli.command()
@click.argument("value")
@click.option(
    "--type",
    "-t",
    "identifier_type",
    type=_TYPE_CHOICE,
    default=None,
    help="Identifier type (default: detected)",
)
def normalize(value: str, identifier_type: str | None) -> None:
    """Print the canonical form of VALUE.

    Examples
    --------
        pidmatch normalize https://doi.org/10.5880/GFZ.1.1 --type DOI
    """
    from pidmatch.detect import detect as detect_type
    from pidmatch.normalize import normalize_identifier

    id_type = IdentifierType(identifier_type) if identifier_type else detect_type(value)
    click.echo(normalize_identifier(value, id_type))


@cli.command()
@click.argument("value")
@click.option(
    "--relation",
    "-r",
    "relation_type",
    type=_RELATION_CHOICE,
    required=True,
    help="Relation type of the candidate entry",
)
@click.option(
    "--type",
    "-t",
    "identifier_type",
    type=_TYPE_CHOICE,
    default=None,
    help="Identifier type (default: detected)",
)
@click.option(
    "--existing",
    "-e",
    "existing_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="JSONL file with the current related-work list",
)
def check(value: str, relation_type: str, identifier_type: str | None, existing_path: str) -> None:
    """Check whether VALUE is already in a related-work list.

    Exits with status 1 when the entry is a duplicate.

    Examples
    --------
        pidmatch check https://doi.org/10.5880/gfz.1.1 -r Cites -e works.jsonl
    """
    from pidmatch import find_duplicate, load_records
    from pidmatch.detect import detect as detect_type

    try:
        records = load_records(existing_path)
    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    id_type = IdentifierType(identifier_type) if identifier_type else detect_type(value)
    relation = RelationType(relation_type)
    match = find_duplicate(value, id_type, relation, records)

    if match is not None:
        click.secho(
            f"Duplicate: {value} ({relation}) matches position {match.position}: {match.identifier}",
            fg="yellow",
        )
        sys.exit(1)

    click.secho(f"✓ Not a duplicate: {value} ({id_type}, {relation})", fg="green")


@cli.command(name="import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output JSONL file for the merged list",
)
@click.option(
    "--existing",
    "-e",
    "existing_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSONL file with the current related-work list",
)
@click.option(
    "--skip-invalid-rows",
    is_flag=True,
    help="Import valid rows even when other rows fail validation",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append a JSONL audit trail to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def import_(
    csv_file: str,
    output: str,
    existing_path: str | None,
    skip_invalid_rows: bool,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Import related works from CSV_FILE and write the merged list.

    CSV_FILE needs the columns identifier, identifier_type and relation_type.
    Entries already in the list (same normalized identifier, type and
    relation) are skipped.

    Examples
    --------
        pidmatch import related.csv -o works.jsonl
        pidmatch import related.csv -e works.jsonl -o works.jsonl --log-file import.jsonl
    """
    from pidmatch.audit import AuditLogger, generate_run_id
    from pidmatch.engine import ImportConfig, run_import

    if verbose:
        click.echo(f"Importing: {csv_file}", err=True)
        if existing_path:
            click.echo(f"  Existing list: {existing_path}", err=True)
        click.echo(f"  Output: {output}", err=True)

    logger = AuditLogger(generate_run_id(), Path(log_file)) if log_file else None
    try:
        config = ImportConfig(skip_invalid_rows=skip_invalid_rows)
        result = run_import(
            csv_file,
            existing_path=existing_path,
            output_path=output,
            config=config,
            audit_logger=logger,
        )
    finally:
        if logger:
            logger.close()

    for err in result.row_errors:
        location = f"row {err.row}" if err.row else err.field
        click.secho(f"  {location}: {err.message} ({err.value!r})", fg="yellow", err=True)

    if not result.success:
        click.secho(f"✗ Import failed: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    if result.notice:
        click.secho(result.notice, fg="yellow", err=True)

    click.secho(
        f"✓ Imported {result.accepted} related work(s), skipped {result.skipped} duplicate(s); "
        f"{len(result.records)} in {output}",
        fg="green",
    )


if __name__ == "__main__":
    cli()

"""Ordered related-work list with duplicate protection.

Adding a single entry is a hard block on duplicates; bulk merges (CSV
import) skip duplicates softly and report them in a notice. Positions are
dense and zero-based at all times.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pidmatch.dedupe.resolver import find_duplicate
from pidmatch.exceptions import DuplicateRelationError
from pidmatch.models.enums import IdentifierType, RelationType
from pidmatch.models.records import RelatedIdentifierDraft, RelatedIdentifierRecord
from pidmatch.utils.text import trim

if TYPE_CHECKING:
    from pidmatch.engine.config import ImportConfig

__all__ = ["MergeResult", "Notice", "RelatedWorkList"]


@dataclass(frozen=True)
class Notice:
    """Transient message for the user.

    Attributes
    ----------
    message : str
        Text to display.
    clear_after : float
        Seconds after which the message should be dismissed.
    """

    message: str
    clear_after: float


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a bulk merge.

    Attributes
    ----------
    accepted : tuple[RelatedIdentifierRecord, ...]
        Newly appended records, in input order.
    skipped : tuple[RelatedIdentifierDraft, ...]
        Inputs dropped as duplicates, in input order.
    notice : Notice | None
        Summary of skipped entries, or None when nothing was skipped.
    """

    accepted: tuple[RelatedIdentifierRecord, ...] = ()
    skipped: tuple[RelatedIdentifierDraft, ...] = ()
    notice: Notice | None = None

    @property
    def skipped_labels(self) -> list[str]:
        """Skipped entries formatted as ``identifier (relation)``."""
        return [_label(item) for item in self.skipped]


def _label(item: RelatedIdentifierDraft) -> str:
    return f"{item.identifier} ({item.relation_type})"


class RelatedWorkList:
    """Mutable, ordered list of related identifier records.

    Parameters
    ----------
    records : Iterable[RelatedIdentifierRecord], optional
        Initial records. Positions are reassigned densely in the given order.
    config : ImportConfig | None, optional
        Notice durations and preview limit. Defaults to ``ImportConfig()``.

    Examples
    --------
        >>> works = RelatedWorkList()
        >>> works.add("10.5880/GFZ.1.1", "DOI", "Cites").position
        0
        >>> result = works.merge([RelatedIdentifierDraft("https://doi.org/10.5880/gfz.1.1", IdentifierType.DOI, RelationType.CITES)])
        >>> result.notice.message
        'Skipped 1 duplicate(s) from CSV import: https://doi.org/10.5880/gfz.1.1 (Cites)'
    """

    def __init__(
        self,
        records: Iterable[RelatedIdentifierRecord] = (),
        config: ImportConfig | None = None,
    ) -> None:
        if config is None:
            from pidmatch.engine.config import ImportConfig

            config = ImportConfig()
        self.config = config
        self._records = [rec.with_position(i) for i, rec in enumerate(records)]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RelatedIdentifierRecord]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> RelatedIdentifierRecord:
        return self._records[index]

    @property
    def records(self) -> tuple[RelatedIdentifierRecord, ...]:
        """Snapshot of the current records."""
        return tuple(self._records)

    def to_dicts(self) -> list[dict[str, Any]]:
        """Convert all records to JSON-compatible dictionaries."""
        return [rec.to_dict() for rec in self._records]

    def add(
        self,
        identifier: str,
        identifier_type: IdentifierType | str,
        relation_type: RelationType | str,
        *,
        related_title: str | None = None,
        related_metadata: dict[str, Any] | None = None,
    ) -> RelatedIdentifierRecord:
        """Append a single entry.

        Parameters
        ----------
        identifier : str
            Identifier as entered; surrounding whitespace is removed.
        identifier_type : IdentifierType | str
            Identifier scheme.
        relation_type : RelationType | str
            Relation type.
        related_title : str | None, optional
            Title of the related work.
        related_metadata : dict[str, Any] | None, optional
            Free-form metadata about the related work.

        Returns
        -------
        RelatedIdentifierRecord
            The stored record.

        Raises
        ------
        DuplicateRelationError
            If the same identifier with the same relation type is present.
        ValueError
            If the type or relation is not part of its vocabulary.
        """
        id_type = IdentifierType.parse(identifier_type)
        relation = RelationType.parse(relation_type)
        value = trim(identifier)

        if find_duplicate(value, id_type, relation, self._records) is not None:
            raise DuplicateRelationError(
                value, relation.value, clear_after=self.config.duplicate_notice_seconds
            )

        record = RelatedIdentifierRecord(
            identifier=value,
            identifier_type=id_type,
            relation_type=relation,
            position=len(self._records),
            related_title=related_title,
            related_metadata=related_metadata,
        )
        self._records.append(record)
        return record

    def add_detected(
        self,
        identifier: str,
        relation_type: RelationType | str,
        **kwargs: Any,
    ) -> RelatedIdentifierRecord:
        """Append an entry whose type is detected from the identifier."""
        from pidmatch.detect import detect

        return self.add(identifier, detect(identifier), relation_type, **kwargs)

    def remove(self, index: int) -> RelatedIdentifierRecord:
        """Remove the record at ``index`` and renumber the rest.

        Raises
        ------
        IndexError
            If ``index`` is out of range.
        """
        if not 0 <= index < len(self._records):
            raise IndexError(f"No related work at position {index} (list has {len(self._records)})")
        removed = self._records.pop(index)
        self._records = [rec.with_position(i) for i, rec in enumerate(self._records)]
        return removed

    def merge(self, items: Iterable[RelatedIdentifierDraft]) -> MergeResult:
        """Append many entries, skipping duplicates.

        Each item is checked against the list as it grows, so duplicates
        inside ``items`` are skipped as well (the first occurrence wins).

        Parameters
        ----------
        items : Iterable[RelatedIdentifierDraft]
            Entries to merge, e.g. from CSV import.

        Returns
        -------
        MergeResult
            Accepted records, skipped items and the notice to show.
        """
        accepted: list[RelatedIdentifierRecord] = []
        skipped: list[RelatedIdentifierDraft] = []

        for item in items:
            value = trim(item.identifier)
            if find_duplicate(value, item.identifier_type, item.relation_type, self._records) is not None:
                skipped.append(item)
                continue
            record = RelatedIdentifierRecord(
                identifier=value,
                identifier_type=item.identifier_type,
                relation_type=item.relation_type,
                position=len(self._records),
                related_title=item.related_title,
            )
            self._records.append(record)
            accepted.append(record)

        notice = None
        if skipped:
            limit = self.config.skipped_preview_limit
            preview = ", ".join(_label(item) for item in skipped[:limit])
            ellipsis = "..." if len(skipped) > limit else ""
            notice = Notice(
                message=f"Skipped {len(skipped)} duplicate(s) from CSV import: {preview}{ellipsis}",
                clear_after=self.config.import_notice_seconds,
            )

        return MergeResult(accepted=tuple(accepted), skipped=tuple(skipped), notice=notice)

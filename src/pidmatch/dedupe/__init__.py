"""Duplicate detection for related-work lists.

Main Components
---------------
- is_duplicate / find_duplicate: Check a candidate against existing entries
- equivalence_key: Comparison key shared by duplicates
- RelatedWorkList: Ordered list with add, remove and bulk merge
"""

from pidmatch.dedupe.collection import MergeResult, Notice, RelatedWorkList
from pidmatch.dedupe.keys import EquivalenceKey, equivalence_key
from pidmatch.dedupe.resolver import RelatedIdentifierLike, find_duplicate, is_duplicate

__all__ = [
    "EquivalenceKey",
    "equivalence_key",
    "RelatedIdentifierLike",
    "find_duplicate",
    "is_duplicate",
    "MergeResult",
    "Notice",
    "RelatedWorkList",
]

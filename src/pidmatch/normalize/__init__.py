"""Identifier normalization.

Normalized forms are used for duplicate detection only; stored records keep
the identifier as entered.
"""

from pidmatch.normalize.normalizer import normalize_doi, normalize_identifier

# Short alias used by the public API
normalize = normalize_identifier

__all__ = ["normalize", "normalize_doi", "normalize_identifier"]

"""Canonical forms of identifiers for equality comparison.

Only DOIs have alternative spellings that are stripped here: resolver URLs
(``https://doi.org/``, ``https://dx.doi.org/``) and the ``doi:`` scheme
prefix. Every other type is compared on its trimmed form. All functions are
pure and never raise for string input.
"""

from pidmatch.models.enums import IdentifierType
from pidmatch.utils.text import trim

from ._helpers import DOI_RESOLVER_RE, DOI_SCHEME_RE, strip_prefix

__all__ = ["normalize_doi", "normalize_identifier"]


def normalize_doi(value: str) -> str:
    """Strip resolver URL and ``doi:`` prefixes from a DOI.

    Parameters
    ----------
    value : str
        DOI in any accepted spelling.

    Returns
    -------
    str
        Bare DOI (e.g. ``10.5880/GFZ.1.1``). Case is preserved.

    Notes
    -----
    Prefix stripping repeats until the value stops changing, so stacked
    spellings such as ``doi:https://doi.org/10.1/x`` reduce to the bare DOI
    and the function is idempotent.
    """
    current = trim(value)
    while True:
        stripped = trim(strip_prefix(DOI_RESOLVER_RE, current))
        stripped = trim(strip_prefix(DOI_SCHEME_RE, stripped))
        if stripped == current:
            return current
        current = stripped


def normalize_identifier(identifier: str, identifier_type: IdentifierType | str) -> str:
    """Return the canonical form of an identifier of the given type.

    Parameters
    ----------
    identifier : str
        Identifier as entered.
    identifier_type : IdentifierType | str
        Identifier scheme (member or value). Unknown values are treated
        like any non-DOI type.

    Returns
    -------
    str
        Canonical identifier.

    Examples
    --------
        >>> normalize_identifier("https://dx.doi.org/10.5880/GFZ.1.1", IdentifierType.DOI)
        '10.5880/GFZ.1.1'
        >>> normalize_identifier("  https://example.org/a ", "URL")
        'https://example.org/a'
    """
    if identifier_type == IdentifierType.DOI:
        return normalize_doi(identifier)
    return trim(identifier)

"""Compiled regex patterns for identifier normalization."""

import re

# Resolver URL and scheme prefixes stripped from DOIs (only when a suffix follows)
DOI_RESOLVER_RE = re.compile(r"^https?://(?:doi\.org|dx\.doi\.org)/(.+)", re.IGNORECASE)
DOI_SCHEME_RE = re.compile(r"^doi:(.+)", re.IGNORECASE)


def strip_prefix(pattern: re.Pattern[str], value: str) -> str:
    """Return the first capture group when ``pattern`` matches, else ``value``."""
    match = pattern.match(value)
    return match.group(1) if match else value

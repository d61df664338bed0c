"""Ordered identifier classification rules.

``RULES`` lists every classification rule in precedence order: when several
rules could match a value, the earliest one wins. Each rule carries cheap
hints used by the dispatch index to skip it without running its pattern:

* ``prefixes``: lowercase literal prefixes; the value (lowercased) must
  start with one of them.
* ``leads``: lowercase first characters the value may start with, for rules
  whose shape has no fixed literal prefix.

Hints must never reject a value the pattern would accept. All patterns are
compiled once at import time with ASCII character classes, except that the
whitespace escapes stand for the set in ``pidmatch.utils.text``, so pasted
no-break spaces count as spaces.
"""

import re
import string
from collections.abc import Callable
from dataclasses import dataclass

from pidmatch.models.enums import IdentifierType as T
from pidmatch.utils.text import WHITESPACE_CLASS

__all__ = ["RULES", "Rule", "compact", "rules_for"]

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_lowercase)
EXTENDED_HEX = DIGITS | frozenset("abcdefghij")

IGSN_DOI_PREFIXES = ("60516", "58052", "60510", "58108", "58095")

_WHITESPACE_ESCAPE_RE = re.compile(r"\\.|\[\^?\]?|\]")


def _expand_whitespace(regex: str) -> str:
    """Rewrite ``\\s`` and ``\\S`` in ``regex`` to the shared whitespace set."""
    in_class = False

    def replace(match: re.Match[str]) -> str:
        nonlocal in_class
        token = match.group()
        if token == r"\s":
            return WHITESPACE_CLASS if in_class else f"[{WHITESPACE_CLASS}]"
        if token == r"\S":
            if in_class:
                raise ValueError(f"\\S inside a character class is not supported: {regex!r}")
            return f"[^{WHITESPACE_CLASS}]"
        if token.startswith("["):
            in_class = True
        elif token == "]":
            in_class = False
        return token

    return _WHITESPACE_ESCAPE_RE.sub(replace, regex)


_COMPACT_RE = re.compile(_expand_whitespace(r"[-\s]"))

# Shared fragments
_ISSN = r"\d{4}-?\d{3}[\dXx]"
_LSID_TAIL = r"[a-z0-9.-]+:[a-z0-9._-]+:[a-z0-9._-]+(?::\d+)?"
_URN_NID = r"urn:[a-z0-9][a-z0-9-]{0,31}:\S+"
_RRID_TAIL = r"[a-z]+[_:]?[a-z0-9_:-]+"
_XHEX = "[0-9A-Ja-j]"


def compact(value: str) -> str:
    """Remove hyphens and whitespace (barcode-style numbers)."""
    return _COMPACT_RE.sub("", value)


@dataclass(frozen=True)
class Rule:
    """Single classification rule.

    Attributes
    ----------
    name : str
        Stable rule identifier reported by ``explain``.
    identifier_type : IdentifierType
        Type assigned when the rule matches.
    pattern : re.Pattern[str]
        Anchored pattern applied with ``match``.
    prefixes : tuple[str, ...]
        Lowercase literal prefixes required before the pattern runs.
    leads : frozenset[str] | None
        Allowed lowercase first characters when there is no literal prefix.
    on_compact : bool
        Apply the pattern to the value with hyphens and whitespace removed.
    check : Callable[[re.Match[str]], bool] | None
        Extra predicate on the match object.
    """

    name: str
    identifier_type: T
    pattern: re.Pattern[str]
    prefixes: tuple[str, ...] = ()
    leads: frozenset[str] | None = None
    on_compact: bool = False
    check: Callable[[re.Match[str]], bool] | None = None

    @property
    def first_chars(self) -> frozenset[str] | None:
        """Lowercase characters a matching value can start with (None = any)."""
        if self.prefixes:
            return frozenset(p[0] for p in self.prefixes)
        return self.leads

    def matches(self, value: str, lowered: str, compacted: str | None = None) -> bool:
        """Return True when the rule accepts the trimmed value.

        Parameters
        ----------
        value : str
            Trimmed input.
        lowered : str
            ``value.lower()``, used for prefix hints.
        compacted : str | None, optional
            ``compact(value)``; computed here when needed and not supplied.
        """
        if self.prefixes and not lowered.startswith(self.prefixes):
            return False
        if self.on_compact:
            target = compacted if compacted is not None else compact(value)
        else:
            target = value
        match = self.pattern.match(target)
        if match is None:
            return False
        return self.check is None or self.check(match)


def _url(*hosts: str) -> tuple[str, ...]:
    """Expand host/path prefixes to their http and https forms."""
    return tuple(f"{scheme}://{host}" for host in hosts for scheme in ("http", "https"))


def _rule(
    name: str,
    identifier_type: T,
    regex: str,
    *,
    ignore_case: bool = False,
    prefixes: tuple[str, ...] = (),
    leads: frozenset[str] | None = None,
    on_compact: bool = False,
    check: Callable[[re.Match[str]], bool] | None = None,
) -> Rule:
    flags = re.ASCII | (re.IGNORECASE if ignore_case else 0)
    return Rule(
        name=name,
        identifier_type=identifier_type,
        pattern=re.compile(_expand_whitespace(regex), flags),
        prefixes=prefixes,
        leads=leads,
        on_compact=on_compact,
        check=check,
    )


def _has_twelve_digits(match: re.Match[str]) -> bool:
    return sum(c.isdigit() for c in match.group(1)) == 12


RULES: tuple[Rule, ...] = (
    # "10.5880 with spaces" is free text, not a DOI
    _rule("doi_with_space", T.URL, r"^10\.\d+\s+\S", prefixes=("10.",)),
    # IGSN allocators registered under DOI prefixes, checked before DOI
    _rule(
        "igsn_doi_url",
        T.IGSN,
        r"^https?://(?:doi\.org|dx\.doi\.org)/10\.(?:60516|58052|60510|58108|58095)/\S+",
        ignore_case=True,
        prefixes=_url(*(f"{h}/10.{p}/" for h in ("doi.org", "dx.doi.org") for p in IGSN_DOI_PREFIXES)),
    ),
    _rule(
        "igsn_legacy_handle_url",
        T.IGSN,
        r"^https?://igsn\.org/10\.273/\S+",
        ignore_case=True,
        prefixes=_url("igsn.org/10.273/"),
    ),
    _rule(
        "igsn_doi",
        T.IGSN,
        r"^10\.(?:60516|58052|60510|58108|58095)/\S+$",
        prefixes=tuple(f"10.{p}/" for p in IGSN_DOI_PREFIXES),
    ),
    _rule("igsn_legacy_handle", T.IGSN, r"^10\.273/\S+$", prefixes=("10.273/",)),
    _rule("igsn_prefixed", T.IGSN, r"^igsn:?\s*[A-Za-z0-9]+$", ignore_case=True, prefixes=("igsn",)),
    _rule("igsn_urn", T.IGSN, r"^urn:igsn:[A-Za-z0-9]+$", ignore_case=True, prefixes=("urn:igsn:",)),
    # WDCC is registered as a Handle prefix although it looks like a DOI
    _rule("handle_wdcc", T.HANDLE, r"^10\.1594/\S+$", prefixes=("10.1594/",)),
    # DOI
    _rule(
        "doi_url",
        T.DOI,
        r"^https?://(?:doi\.org|dx\.doi\.org)/(.+)",
        ignore_case=True,
        prefixes=_url("doi.org/", "dx.doi.org/"),
    ),
    _rule("doi_prefixed", T.DOI, r"^doi:", ignore_case=True, prefixes=("doi:",)),
    _rule("doi", T.DOI, r"^10\.\d{4,}", prefixes=("10.",)),
    # arXiv
    _rule(
        "arxiv_url",
        T.ARXIV,
        r"^https?://arxiv\.org/(?:abs|pdf|html|src)/\S+",
        ignore_case=True,
        prefixes=_url("arxiv.org/"),
    ),
    _rule("arxiv_prefixed", T.ARXIV, r"^arxiv:", ignore_case=True, prefixes=("arxiv:",)),
    _rule("arxiv_new_scheme", T.ARXIV, r"^\d{4}\.\d{4,5}(v\d+)?$", leads=DIGITS),
    _rule(
        "arxiv_old_scheme",
        T.ARXIV,
        r"^[a-z-]+/\d{7}$",
        ignore_case=True,
        leads=LETTERS | {"-"},
    ),
    # bibcode
    _rule(
        "bibcode_url",
        T.BIBCODE,
        r"^https?://(?:ui\.)?adsabs\.harvard\.edu/abs/\S+",
        ignore_case=True,
        prefixes=_url("adsabs.harvard.edu/abs/", "ui.adsabs.harvard.edu/abs/"),
    ),
    _rule(
        "bibcode",
        T.BIBCODE,
        r"^\d{4}[A-Za-z&.]{5}[A-Za-z0-9.]{4}[A-Za-z.][A-Za-z0-9.]{4}[A-Za-z]$",
        ignore_case=True,
        leads=DIGITS,
    ),
    _rule(
        "bibcode_special_source",
        T.BIBCODE,
        r"^\d{4}(?:arXiv|jwst\.prop|PhDT|Sci|Natur)\S+[A-Za-z]$",
        ignore_case=True,
        leads=DIGITS,
    ),
    # CSTR
    _rule(
        "cstr_url",
        T.CSTR,
        r"^https?://(?:identifiers\.org|bioregistry\.io)/cstr:",
        ignore_case=True,
        prefixes=_url("identifiers.org/cstr:", "bioregistry.io/cstr:"),
    ),
    _rule("cstr_prefixed", T.CSTR, r"^cstr:\d{5}\.\d{2}\.\S+", ignore_case=True, prefixes=("cstr:",)),
    _rule("cstr", T.CSTR, r"^\d{5}\.\d{2}\.[A-Za-z_][A-Za-z0-9_.~-]*\.\S+$", leads=DIGITS),
    # ISBN, checked before EAN-13 (Bookland 978/979 range)
    _rule(
        "isbn_openedition_url",
        T.ISBN,
        r"^https?://isbn\.openedition\.org/97[89]",
        ignore_case=True,
        prefixes=_url("isbn.openedition.org/97"),
    ),
    _rule(
        "isbn_openedition_books_url",
        T.ISBN,
        r"^https?://books\.openedition\.org/isbn/97[89]",
        ignore_case=True,
        prefixes=_url("books.openedition.org/isbn/97"),
    ),
    _rule("isbn_urn", T.ISBN, r"^urn:isbn:", ignore_case=True, prefixes=("urn:isbn:",)),
    _rule(
        "isbn_prefixed",
        T.ISBN,
        r"^isbn(?:-?(?:13|10))?[:\s]+",
        ignore_case=True,
        prefixes=("isbn",),
    ),
    _rule("isbn13", T.ISBN, r"^97[89]\d{10}$", leads=DIGITS | {"-"}, on_compact=True),
    _rule("isbn10", T.ISBN, r"^\d{9}[\dXx]$", leads=DIGITS | {"-"}, on_compact=True),
    # EAN-13
    _rule(
        "ean13_url",
        T.EAN13,
        r"^https?://(?:identifiers\.org/ean13:|gs1\.[^/]+/01/)",
        ignore_case=True,
        prefixes=_url("identifiers.org/ean13:", "gs1."),
    ),
    _rule(
        "ean13_urn",
        T.EAN13,
        r"^urn:(?:ean13|gtin(?:-13)?):[\d-]+$",
        ignore_case=True,
        prefixes=("urn:ean13:", "urn:gtin:", "urn:gtin-13:"),
    ),
    _rule("ean13", T.EAN13, r"^(?!97[89])\d{13}$", leads=DIGITS | {"-"}, on_compact=True),
    # LSID
    _rule("lsid_urn", T.LSID, rf"^urn:lsid:{_LSID_TAIL}$", ignore_case=True, prefixes=("urn:lsid:",)),
    _rule(
        "lsid_io_url",
        T.LSID,
        rf"^https?://lsid\.io/urn:lsid:{_LSID_TAIL}$",
        ignore_case=True,
        prefixes=_url("lsid.io/urn:lsid:"),
    ),
    _rule(
        "lsid_service_locator_url",
        T.LSID,
        rf"^https?://[a-z0-9.-]+/ws/services/ServiceLocator\?lsid=urn:lsid:{_LSID_TAIL}$",
        ignore_case=True,
        prefixes=_url(""),
    ),
    _rule(
        "lsid_zoobank_url",
        T.LSID,
        r"^https?://zoobank\.org/urn:lsid:zoobank\.org:[a-z0-9._-]+:[a-z0-9._-]+$",
        ignore_case=True,
        prefixes=_url("zoobank.org/urn:lsid:zoobank.org:"),
    ),
    # PMID
    _rule(
        "pmid_url",
        T.PMID,
        r"^https?://pubmed\.ncbi\.nlm\.nih\.gov/\d{1,9}$",
        ignore_case=True,
        prefixes=_url("pubmed.ncbi.nlm.nih.gov/"),
    ),
    _rule(
        "pmid_legacy_url",
        T.PMID,
        r"^https?://(?:www\.)?ncbi\.nlm\.nih\.gov/pubmed/\d{1,9}$",
        ignore_case=True,
        prefixes=_url("ncbi.nlm.nih.gov/pubmed/", "www.ncbi.nlm.nih.gov/pubmed/"),
    ),
    _rule(
        "pmid_prefixed",
        T.PMID,
        r"^(?:pmid|pubmed\s*id):?\s*\d{1,9}$",
        ignore_case=True,
        prefixes=("pmid", "pubmed"),
    ),
    _rule("pmid_search_field", T.PMID, r"^\d{1,9}\s*\[(?:pmid|uid)\]$", ignore_case=True, leads=DIGITS),
    # w3id, checked before PURL
    _rule(
        "w3id_url",
        T.W3ID,
        r"^https?://w3id\.org/[a-z0-9._/-]+(?:#[a-z0-9._-]*)?$",
        ignore_case=True,
        prefixes=_url("w3id.org/"),
    ),
    # PURL
    _rule(
        "purl_org_url",
        T.PURL,
        r"^https?://purl\.org/[a-z0-9._/-]+$",
        ignore_case=True,
        prefixes=_url("purl.org/"),
    ),
    _rule(
        "purl_oclc_url",
        T.PURL,
        r"^https?://purl\.oclc\.org/[a-z0-9._/-]+$",
        ignore_case=True,
        prefixes=_url("purl.oclc.org/"),
    ),
    _rule(
        "purl_library_url",
        T.PURL,
        r"^https?://purl\.lib\.[a-z0-9.-]+/[a-z0-9._/?=&-]+$",
        ignore_case=True,
        prefixes=_url("purl.lib."),
    ),
    _rule(
        "purl_institutional_url",
        T.PURL,
        r"^https?://purl\.[a-z0-9.-]+\.(?:org|edu)/[a-z0-9._/-]+$",
        ignore_case=True,
        prefixes=_url("purl."),
    ),
    # RRID
    _rule("rrid_prefixed", T.RRID, rf"^rrid:?\s*{_RRID_TAIL}$", ignore_case=True, prefixes=("rrid",)),
    _rule(
        "rrid_scicrunch_url",
        T.RRID,
        rf"^https?://scicrunch\.org/resolver/RRID:{_RRID_TAIL}$",
        ignore_case=True,
        prefixes=_url("scicrunch.org/resolver/rrid:"),
    ),
    _rule(
        "rrid_site_url",
        T.RRID,
        rf"^https?://rrid\.site/RRID:{_RRID_TAIL}$",
        ignore_case=True,
        prefixes=_url("rrid.site/rrid:"),
    ),
    # UPC
    _rule(
        "upc_prefixed",
        T.UPC,
        r"^(?:upc-?a?|gtin-?12):?\s*(\d[\d\s-]{10,14}\d)$",
        ignore_case=True,
        prefixes=("upc", "gtin"),
        check=_has_twelve_digits,
    ),
    _rule("upc_e_prefixed", T.UPC, r"^upc-?e:?\s*\d{8}$", ignore_case=True, prefixes=("upc",)),
    # LISSN, checked before EISSN
    _rule(
        "lissn_url",
        T.LISSN,
        rf"^https?://portal\.issn\.org/resource/ISSN-L/{_ISSN}$",
        ignore_case=True,
        prefixes=_url("portal.issn.org/resource/issn-l/"),
    ),
    _rule(
        "lissn_prefixed",
        T.LISSN,
        rf"^(?:lissn|issn-l):?\s*{_ISSN}$",
        ignore_case=True,
        prefixes=("lissn", "issn-l"),
    ),
    # ISSN family (print and electronic ISSNs are both reported as EISSN)
    _rule(
        "eissn_url",
        T.EISSN,
        rf"^https?://(?:portal\.issn\.org/resource/ISSN/|identifiers\.org/issn:|www\.worldcat\.org/issn/){_ISSN}$",
        ignore_case=True,
        prefixes=_url("portal.issn.org/resource/issn/", "identifiers.org/issn:", "www.worldcat.org/issn/"),
    ),
    _rule("eissn_urn", T.EISSN, rf"^urn:issn:{_ISSN}$", ignore_case=True, prefixes=("urn:issn:",)),
    _rule(
        "eissn_prefixed",
        T.EISSN,
        rf"^(?:e-?issn|p-?issn|issn):?\s*{_ISSN}$",
        ignore_case=True,
        prefixes=("eissn", "e-issn", "pissn", "p-issn", "issn"),
    ),
    _rule(
        "eissn_medium_suffix",
        T.EISSN,
        rf"^issn\s+{_ISSN}\s*\((?:online|print)\)$",
        ignore_case=True,
        prefixes=("issn",),
    ),
    _rule("issn", T.EISSN, r"^\d{4}-\d{3}[\dXx]$", leads=DIGITS),
    _rule("issn_compact", T.EISSN, r"^\d{7}[\dXx]$", ignore_case=True, leads=DIGITS),
    # ISTC (extended hex digits 0-9, A-J)
    _rule("istc_urn", T.ISTC, r"^urn:istc:[0-9A-Ja-j-]+$", ignore_case=True, prefixes=("urn:istc:",)),
    _rule(
        "istc_prefixed",
        T.ISTC,
        rf"^istc\s*(?:\([^)]+\))?:?\s*{_XHEX}{{3}}-?[0-9]{{4}}-?{_XHEX}{{4}}-?{_XHEX}{{4}}-?{_XHEX}$",
        ignore_case=True,
        prefixes=("istc",),
    ),
    _rule(
        "istc",
        T.ISTC,
        rf"^{_XHEX}{{3}}-[0-9]{{4}}-{_XHEX}{{4}}-{_XHEX}{{4}}-{_XHEX}$",
        ignore_case=True,
        leads=EXTENDED_HEX,
    ),
    _rule(
        "istc_compact",
        T.ISTC,
        rf"^{_XHEX}{{3}}[0-9]{{4}}{_XHEX}{{9}}$",
        ignore_case=True,
        leads=EXTENDED_HEX,
    ),
    # ARK
    _rule(
        "ark_url",
        T.ARK,
        r"^https?://[^/]+(?:/[^/]+)*/ark:/?\d{5,}/\S+",
        ignore_case=True,
        prefixes=_url(""),
    ),
    _rule("ark", T.ARK, r"^ark:/?\d{5,}/\S+", ignore_case=True, prefixes=("ark:",)),
    # Handle
    _rule(
        "handle_url",
        T.HANDLE,
        r"^https?://hdl\.handle\.net/(?:api/handles/)?\S+",
        ignore_case=True,
        prefixes=_url("hdl.handle.net/"),
    ),
    _rule("handle_scheme", T.HANDLE, r"^hdl://\S+", ignore_case=True, prefixes=("hdl://",)),
    _rule("handle_urn", T.HANDLE, r"^urn:handle:\S+", ignore_case=True, prefixes=("urn:handle:",)),
    _rule(
        "handle_custom_resolver_url",
        T.HANDLE,
        r"^https?://[^/]+/objects/\d+(?:\.\w+)?/\S+",
        ignore_case=True,
        prefixes=_url(""),
    ),
    # IGSN bare codes by allocating agent; heuristic
    _rule(
        "igsn_allocator_code",
        T.IGSN,
        r"^(?:AU|SSH|BGR[A-Z]?|ICDP|CSR[A-Z]?|GFZ|MBCR|ARDC)[A-Z0-9]{2,12}$",
        ignore_case=True,
        prefixes=("au", "ssh", "bgr", "icdp", "csr", "gfz", "mbcr", "ardc"),
    ),
    # URN national resolvers
    _rule(
        "urn_nbn_de_resolver_url",
        T.URN,
        rf"^https?://nbn-resolving\.(?:de|org)/{_URN_NID}$",
        ignore_case=True,
        prefixes=_url("nbn-resolving.de/urn:", "nbn-resolving.org/urn:"),
    ),
    _rule(
        "urn_fi_resolver_url",
        T.URN,
        rf"^https?://urn\.fi/{_URN_NID}$",
        ignore_case=True,
        prefixes=_url("urn.fi/urn:"),
    ),
    _rule(
        "urn_se_resolver_url",
        T.URN,
        rf"^https?://urn\.kb\.se/resolve\?urn={_URN_NID}$",
        ignore_case=True,
        prefixes=_url("urn.kb.se/resolve?urn=urn:"),
    ),
    _rule(
        "urn_nl_resolver_url",
        T.URN,
        rf"^https?://persistent-identifier\.nl/{_URN_NID}$",
        ignore_case=True,
        prefixes=_url("persistent-identifier.nl/urn:"),
    ),
    _rule(
        "urn_n2t_resolver_url",
        T.URN,
        rf"^https?://n2t\.net/{_URN_NID}$",
        ignore_case=True,
        prefixes=_url("n2t.net/urn:"),
    ),
    # Namespaces claimed by the specific schemes above are excluded
    _rule(
        "urn",
        T.URN,
        r"^urn:(?!isbn:|lsid:|igsn:|issn:|istc:|handle:)[a-z0-9][a-z0-9-]{0,31}:\S+$",
        ignore_case=True,
        prefixes=("urn:",),
    ),
    _rule("url", T.URL, r"^https?://", ignore_case=True, prefixes=_url("")),
    # Bare handle: 2142/103380, 21.T11998/abc
    _rule("handle", T.HANDLE, r"^\d+(?:\.\w+)?/\S+$", leads=DIGITS),
)


def rules_for(identifier_type: T) -> tuple[Rule, ...]:
    """Return the rules that assign ``identifier_type``, in precedence order."""
    return tuple(rule for rule in RULES if rule.identifier_type == identifier_type)

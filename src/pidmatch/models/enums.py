"""Closed vocabularies for related identifiers.

Both enumerations follow DataCite Metadata Schema 4.6. Values are the exact
strings stored in metadata records and accepted by CSV import.
"""

from enum import StrEnum

__all__ = ["DATACITE_SCHEMA_VERSION", "IdentifierType", "RelationType"]

DATACITE_SCHEMA_VERSION = "4.6"


class _ClosedVocabulary(StrEnum):
    """StrEnum with a strict ``parse`` for external input."""

    @classmethod
    def parse(cls, value: "str | _ClosedVocabulary") -> "_ClosedVocabulary":
        """Convert a raw value to a member.

        Parameters
        ----------
        value : str | StrEnum
            Exact member value (case-sensitive), or a member.

        Returns
        -------
        StrEnum
            Matching member.

        Raises
        ------
        ValueError
            If the value is not part of the vocabulary.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown {cls.__name__} {value!r}. Valid values: {valid}"
            ) from None

    @classmethod
    def values(cls) -> list[str]:
        """Return all member values in declaration order."""
        return [m.value for m in cls]


class IdentifierType(_ClosedVocabulary):
    """Persistent identifier schemes (DataCite ``relatedIdentifierType``).

    ``ISSN`` is accepted for stored and imported records; the classifier
    reports every ISSN variant as ``EISSN`` (or ``LISSN`` for linking ISSNs).
    """

    ARK = "ARK"
    ARXIV = "arXiv"
    BIBCODE = "bibcode"
    CSTR = "CSTR"
    DOI = "DOI"
    EAN13 = "EAN13"
    EISSN = "EISSN"
    HANDLE = "Handle"
    IGSN = "IGSN"
    ISBN = "ISBN"
    ISSN = "ISSN"
    ISTC = "ISTC"
    LISSN = "LISSN"
    LSID = "LSID"
    PMID = "PMID"
    PURL = "PURL"
    RRID = "RRID"
    UPC = "UPC"
    URL = "URL"
    URN = "URN"
    W3ID = "w3id"


class RelationType(_ClosedVocabulary):
    """Semantic relation between the described resource and a related one."""

    IS_CITED_BY = "IsCitedBy"
    CITES = "Cites"
    IS_SUPPLEMENT_TO = "IsSupplementTo"
    IS_SUPPLEMENTED_BY = "IsSupplementedBy"
    IS_CONTINUED_BY = "IsContinuedBy"
    CONTINUES = "Continues"
    IS_DESCRIBED_BY = "IsDescribedBy"
    DESCRIBES = "Describes"
    HAS_METADATA = "HasMetadata"
    IS_METADATA_FOR = "IsMetadataFor"
    HAS_VERSION = "HasVersion"
    IS_VERSION_OF = "IsVersionOf"
    IS_NEW_VERSION_OF = "IsNewVersionOf"
    IS_PREVIOUS_VERSION_OF = "IsPreviousVersionOf"
    IS_PART_OF = "IsPartOf"
    HAS_PART = "HasPart"
    IS_PUBLISHED_IN = "IsPublishedIn"
    IS_REFERENCED_BY = "IsReferencedBy"
    REFERENCES = "References"
    IS_DOCUMENTED_BY = "IsDocumentedBy"
    DOCUMENTS = "Documents"
    IS_COMPILED_BY = "IsCompiledBy"
    COMPILES = "Compiles"
    IS_VARIANT_FORM_OF = "IsVariantFormOf"
    IS_ORIGINAL_FORM_OF = "IsOriginalFormOf"
    IS_IDENTICAL_TO = "IsIdenticalTo"
    IS_REVIEWED_BY = "IsReviewedBy"
    REVIEWS = "Reviews"
    IS_DERIVED_FROM = "IsDerivedFrom"
    IS_SOURCE_OF = "IsSourceOf"
    IS_REQUIRED_BY = "IsRequiredBy"
    REQUIRES = "Requires"
    IS_OBSOLETED_BY = "IsObsoletedBy"
    OBSOLETES = "Obsoletes"
    IS_COLLECTED_BY = "IsCollectedBy"
    COLLECTS = "Collects"
    IS_TRANSLATION_OF = "IsTranslationOf"
    HAS_TRANSLATION = "HasTranslation"

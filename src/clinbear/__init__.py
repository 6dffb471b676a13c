"""Top-level API for Clinbear.

`ClinvarAnnotator` runs a whole annotation; the matching and transfer
functions are exposed for use on individual records.
"""

from clinbear.annotators import Annotator, ClinvarAnnotator
from clinbear.errors import (
    ClinbearError,
    MissingHeaderLineError,
    MissingIndexError,
    MultiAllelicReferenceError,
)
from clinbear.header import build_output_header, validate_reference_header
from clinbear.matching import MatchResult, match_alleles
from clinbear.schema import CLINVAR_INFO, OUTPUT_FIELDS, OutputField
from clinbear.summary import AnnotationSummary
from clinbear.transfer import annotate_value, assemble_fields, transfer_annotations

__all__ = [
    "Annotator", "ClinvarAnnotator", "AnnotationSummary",
    "ClinbearError", "MissingHeaderLineError", "MissingIndexError", "MultiAllelicReferenceError",
    "build_output_header", "validate_reference_header",
    "MatchResult", "match_alleles",
    "CLINVAR_INFO", "OUTPUT_FIELDS", "OutputField",
    "annotate_value", "assemble_fields", "transfer_annotations",
]

"""
Clinbear annotators.

`Annotator` is the generic callable base; `ClinvarAnnotator` streams a VCF
through the ClinVar allele matcher and writes the annotated records.
"""

from clinbear.annotators.base_annotator import Annotator
from clinbear.annotators.clinvar_annotator import ClinvarAnnotator, emit_record

__all__ = ["Annotator", "ClinvarAnnotator", "emit_record"]

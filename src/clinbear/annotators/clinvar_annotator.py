from pathlib import Path
from typing import Any, Mapping, Optional, Union

import pysam
from eliot import start_action

from clinbear.annotators.base_annotator import Annotator
from clinbear.header import build_output_header, validate_reference_header
from clinbear.io import ReferenceLookup, open_variants, open_writer, scan_header
from clinbear.matching import match_alleles
from clinbear.summary import AnnotationSummary, AnnotationTable
from clinbear.transfer import assemble_fields, split_alleles


def emit_record(writer: pysam.VariantFile, record: pysam.VariantRecord, assembled: Mapping[str, str]) -> None:
    """
    Write a copy of ``record`` carrying the assembled ClinVar INFO values.

    Position, alleles and every original field are left as they are.
    """
    annotated = record.copy()
    annotated.translate(writer.header)
    for info_id, value in assembled.items():
        # Number=R values are passed per allele; pysam joins them with ','
        annotated.info[info_id] = split_alleles(value)
    writer.write(annotated)


class ClinvarAnnotator(Annotator[Path, AnnotationSummary]):
    """
    Annotate a VCF with clinically relevant variants from NCBI's ClinVar vcf_2.0.

    The input header is completed by a first read of the file; the records
    are then streamed once. Every variant is looked up in the indexed ClinVar
    VCF; variants with at least one ALT allele matching a ClinVar record are
    written with per-allele CLN_* INFO fields, the others are dropped unless
    ``keep_unannotated`` is set.
    """

    def __init__(
        self,
        clinvar_path: Union[str, Path],
        output_path: Union[str, Path],
        keep_unannotated: bool = False,
        summary_parquet: Optional[Union[str, Path]] = None,
        name: str = "clinvar_annotator",
    ) -> None:
        """
        Args:
            clinvar_path: bgzipped and tabix-indexed ClinVar vcf_2.0 file
            output_path: annotated VCF to write (.vcf, .vcf.gz or .bcf)
            keep_unannotated: write variants without a ClinVar match unchanged instead of dropping them
            summary_parquet: where to save one row per written variant, None to skip
            name: eliot action type of a run
        """
        super().__init__(name)
        self.clinvar_path = Path(clinvar_path)
        self.output_path = Path(output_path)
        self.keep_unannotated = keep_unannotated
        self.summary_parquet = Path(summary_parquet) if summary_parquet is not None else None

    def annotate(self, data: Union[str, Path], **kwargs: Any) -> AnnotationSummary:
        """
        Annotate the VCF at ``data`` and write the result to ``output_path``.

        Raises:
            MissingIndexError: the ClinVar VCF is not indexed
            MissingHeaderLineError: the ClinVar VCF lacks a required INFO line
            MultiAllelicReferenceError: a ClinVar record overlapping a variant has more than one ALT
        """
        with start_action(
            action_type="annotate_with_clinvar",
            variants=str(data),
            clinvar=str(self.clinvar_path),
            output=str(self.output_path),
            keep_unannotated=self.keep_unannotated
        ) as action:
            summary = AnnotationSummary()
            table = AnnotationTable() if self.summary_parquet is not None else None

            reference = ReferenceLookup(self.clinvar_path)
            variants: Optional[pysam.VariantFile] = None
            writer: Optional[pysam.VariantFile] = None
            try:
                validate_reference_header(reference.header)
                primary_header = scan_header(data)
                variants = open_variants(data)
                writer = open_writer(self.output_path, build_output_header(primary_header))

                for record in variants:
                    summary.observe(record)
                    result = match_alleles(record, reference.overlapping(record))
                    summary.candidates_skipped += result.skipped

                    if not result.found:
                        if self.keep_unannotated:
                            emit_record(writer, record, {})
                            summary.records_passed += 1
                        else:
                            summary.records_dropped += 1
                        continue

                    assembled = assemble_fields(record.alleles, result.annotations)
                    emit_record(writer, record, assembled)
                    summary.records_annotated += 1
                    summary.count_significance(assembled)
                    if table is not None:
                        table.add(record, assembled)
            finally:
                if writer is not None:
                    writer.close()
                if variants is not None:
                    variants.close()
                reference.close()

            if table is not None:
                table.write_parquet(self.summary_parquet)

            action.log(
                message_type="info",
                step="annotation_complete",
                last_contig=summary.last_contig,
                last_position=summary.last_position
            )
            action.add_success_fields(**summary.model_dump(exclude={"last_contig", "last_position"}))
            return summary

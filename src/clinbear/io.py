from pathlib import Path
from typing import Union

import pysam
from eliot import start_action

from clinbear.errors import MissingIndexError


def open_variants(file_path: Union[str, Path]) -> pysam.VariantFile:
    """
    Open the VCF/BCF to annotate for sequential reading.

    Plain and bgzipped files are both accepted; no index is needed.
    """
    with start_action(action_type="open_variants", file_path=str(file_path)) as action:
        variants = pysam.VariantFile(str(file_path))
        action.add_success_fields(samples=len(variants.header.samples))
        return variants


def scan_header(file_path: Union[str, Path]) -> pysam.VariantHeader:
    """
    Header of the VCF to annotate, completed by reading all of its records.

    htslib declares contigs, INFO and FORMAT keys that records use without a
    meta line only when it parses those records. The output header is built
    from this one so that every record can be written.
    """
    with start_action(action_type="scan_header", file_path=str(file_path)) as action:
        with pysam.VariantFile(str(file_path)) as variants:
            declared = set(variants.header.contigs)
            for _ in variants:
                pass
            header = variants.header.copy()
        added = [contig for contig in header.contigs if contig not in declared]
        if added:
            action.log(message_type="warning", undeclared_contigs=added)
        return header


def open_writer(file_path: Union[str, Path], header: pysam.VariantHeader) -> pysam.VariantFile:
    """
    Open the annotated output for writing.

    The header is written before the first record. The format follows the
    suffix: .vcf.gz is bgzipped, .bcf is BCF, anything else plain VCF text.
    """
    file_path = Path(file_path)
    name_lower = file_path.name.lower()
    if name_lower.endswith(".bcf"):
        mode = "wb"
    elif name_lower.endswith(".gz"):
        mode = "wz"
    else:
        mode = "w"

    with start_action(action_type="open_writer", file_path=str(file_path), mode=mode):
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return pysam.VariantFile(str(file_path), mode, header=header)


class ReferenceLookup:
    """
    Region queries into an indexed ClinVar VCF.

    Read-only; one instance is reused for every variant of a run.
    """

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)
        with start_action(action_type="open_clinvar", file_path=str(self.file_path)) as action:
            self._vcf = pysam.VariantFile(str(self.file_path))
            if self._vcf.index is None:
                self._vcf.close()
                raise MissingIndexError(str(self.file_path))
            action.add_success_fields(indexed_contigs=len(self._vcf.index))

    @property
    def header(self) -> pysam.VariantHeader:
        return self._vcf.header

    def overlapping(self, record: pysam.VariantRecord) -> list[pysam.VariantRecord]:
        """ClinVar records overlapping ``record``, in file order."""
        if record.chrom not in self._vcf.index:
            return []
        return list(self._vcf.fetch(record.chrom, record.start, record.stop))

    def close(self) -> None:
        self._vcf.close()

    def __enter__(self) -> "ReferenceLookup":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

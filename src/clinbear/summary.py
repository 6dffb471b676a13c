"""
Run statistics and a tabular view of the annotated variants.
"""

from collections import Counter
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import polars as pl
from eliot import start_action
from pydantic import BaseModel, Field

from clinbear.schema import OUTPUT_FIELD_IDS
from clinbear.transfer import split_alleles

SIGNIFICANCE_FIELD = "CLN_SIG"


class AnnotationSummary(BaseModel):
    """Counters reported at the end of an annotation run."""

    records_read: int = 0
    records_annotated: int = 0
    records_dropped: int = 0
    records_passed: int = 0
    candidates_skipped: int = 0
    last_contig: Optional[str] = None
    last_position: Optional[int] = None
    significance_counts: dict[str, int] = Field(default_factory=dict)

    def observe(self, record: Any) -> None:
        """Count a variant read from the input and remember where the stream is."""
        self.records_read += 1
        self.last_contig = record.chrom
        self.last_position = record.pos

    def count_significance(self, assembled: Mapping[str, str]) -> None:
        """Tally the clinical significance written for each annotated allele."""
        value = assembled.get(SIGNIFICANCE_FIELD)
        if not value:
            return
        counts = Counter(self.significance_counts)
        counts.update(slot for slot in split_alleles(value) if slot)
        self.significance_counts = dict(sorted(counts.items()))


class AnnotationTable:
    """Collects one row per written variant for export with polars."""

    def __init__(self) -> None:
        self._rows: list[dict[str, Optional[Union[str, int]]]] = []

    def __len__(self) -> int:
        return len(self._rows)

    def add(self, record: Any, assembled: Mapping[str, str]) -> None:
        row: dict[str, Optional[Union[str, int]]] = {
            "chrom": record.chrom,
            "pos": record.pos,
            "ref": record.ref,
            "alts": ",".join(record.alts or ()),
        }
        for info_id in OUTPUT_FIELD_IDS:
            row[info_id] = assembled.get(info_id)
        self._rows.append(row)

    def to_frame(self) -> pl.DataFrame:
        schema = {"chrom": pl.Utf8, "pos": pl.Int64, "ref": pl.Utf8, "alts": pl.Utf8}
        schema.update({info_id: pl.Utf8 for info_id in OUTPUT_FIELD_IDS})
        return pl.DataFrame(self._rows, schema=schema)

    def write_parquet(self, parquet_path: Union[str, Path], compression: str = "zstd") -> Path:
        with start_action(action_type="save_annotation_table", parquet_path=str(parquet_path)) as action:
            parquet_path = Path(parquet_path)
            parquet_path.parent.mkdir(parents=True, exist_ok=True)
            self.to_frame().write_parquet(parquet_path, compression=compression)
            action.add_success_fields(rows=len(self._rows))
            return parquet_path

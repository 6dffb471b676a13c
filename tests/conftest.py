"""Shared fixtures: small VCF files written on the fly and an eliot message sink."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Generator, Optional

import pytest
from eliot import add_destinations, remove_destination
from pycomfort.logging import to_nice_stdout

from vcf_data import CLINVAR_HEADER, CLINVAR_ROWS, VARIANTS_HEADER, VARIANT_ROWS, index_vcf, write_vcf


@dataclass
class FakeRecord:
    """Stand-in for pysam.VariantRecord carrying the attributes the matcher reads."""

    chrom: str
    pos: int
    ref: str
    alts: Optional[tuple[str, ...]]
    info: dict[str, Any] = field(default_factory=dict)
    stop: Optional[int] = None

    def __post_init__(self) -> None:
        if self.stop is None:
            self.stop = self.pos + len(self.ref) - 1

    @property
    def alleles(self) -> tuple[str, ...]:
        return (self.ref,) + tuple(self.alts or ())


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> Generator[None, None, None]:
    """Setup logging for all tests using pycomfort."""
    to_nice_stdout()
    yield


@pytest.fixture
def make_record() -> Callable[..., FakeRecord]:
    def _make(pos: int, ref: str, alts: Optional[tuple[str, ...]], chrom: str = "1",
              stop: Optional[int] = None, **info: Any) -> FakeRecord:
        return FakeRecord(chrom=chrom, pos=pos, ref=ref, alts=alts, info=info, stop=stop)
    return _make


@pytest.fixture
def eliot_messages() -> Generator[list[dict[str, Any]], None, None]:
    """Collect the eliot messages logged while the test runs."""
    messages: list[dict[str, Any]] = []
    destination = messages.append
    add_destinations(destination)
    messages.clear()
    yield messages
    remove_destination(destination)


@pytest.fixture
def clinvar_vcf(tmp_path: Path) -> Path:
    return index_vcf(write_vcf(tmp_path / "clinvar.vcf", CLINVAR_HEADER, CLINVAR_ROWS))


@pytest.fixture
def variants_vcf(tmp_path: Path) -> Path:
    return write_vcf(tmp_path / "input.vcf", VARIANTS_HEADER, VARIANT_ROWS)

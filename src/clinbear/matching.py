"""
Match the ALT alleles of a variant against the ClinVar records overlapping it.

ClinVar vcf_2.0 carries one ALT allele per record, so a multi-allelic site in
the annotated VCF is matched allele by allele against several ClinVar records.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from eliot import start_action

from clinbear.errors import MultiAllelicReferenceError
from clinbear.transfer import transfer_annotations

# ALT allele -> output INFO ID -> transferred value
AnnotationMap = dict[str, dict[str, Optional[str]]]


@dataclass
class MatchResult:
    """Annotations collected for one variant."""

    annotations: AnnotationMap = field(default_factory=dict)
    found: bool = False
    skipped: int = 0


def describe(record: Any) -> str:
    """chr:startPos:endPos Ref[ALTs] description used in log messages and errors."""
    alts = ", ".join(record.alts or ())
    return f"{record.chrom}:{record.pos}:{record.stop}\t{record.ref}[{alts}]"


def _mismatch(record: Any, candidate: Any) -> Optional[str]:
    if record.ref != candidate.ref:
        return "reference_not_equal"
    if record.pos != candidate.pos:
        return "start_position_not_equal"
    if record.stop != candidate.stop:
        return "end_position_not_equal"
    return None


def match_alleles(record: Any, candidates: Iterable[Any]) -> MatchResult:
    """
    Collect ClinVar annotations for every ALT allele of ``record``.

    Candidates are checked in the order given. A candidate whose REF, start or
    end differs from the variant is skipped with a warning. When several
    candidates match the same ALT allele the last one wins.

    Args:
        record: variant being annotated (pysam.VariantRecord or anything with
            chrom, pos, stop, ref, alts and info)
        candidates: ClinVar records overlapping the variant

    Returns:
        MatchResult with the per-allele annotations and whether any allele matched

    Raises:
        MultiAllelicReferenceError: a candidate does not have exactly one ALT allele
    """
    result = MatchResult()
    candidates = list(candidates)
    if not candidates:
        return result

    with start_action(action_type="match_alleles", variant=describe(record),
                      candidates=len(candidates)) as action:
        alts = record.alts or ()
        for candidate in candidates:
            if len(candidate.alts or ()) != 1:
                raise MultiAllelicReferenceError(describe(candidate))

            reason = _mismatch(record, candidate)
            if reason is not None:
                action.log(
                    message_type="warning",
                    reason=reason,
                    variant=describe(record),
                    clinvar=describe(candidate)
                )
                result.skipped += 1
                continue

            clinvar_alt = candidate.alts[0]
            for alt in alts:
                if alt == clinvar_alt:
                    result.found = True
                    result.annotations[alt] = transfer_annotations(candidate, alt)

        action.add_success_fields(found=result.found, matched_alleles=len(result.annotations),
                                  skipped=result.skipped)
        return result

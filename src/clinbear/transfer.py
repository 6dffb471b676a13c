"""
Transfer ClinVar INFO values onto the alleles of an annotated variant.

Example: the ALT allele C matches, so its ClinVar annotations go to the C slot.

    Annotate this VCF:   REF T, ALT A,C
    ClinVar vcf_2.0:     REF T, ALT C; ALLELEID=1111
                         REF T, ALT G; ALLELEID=2222

    annotations: {"C": {"CLN_ALLELE": "C", "CLN_ALLELEID": "1111", ...}}
    written:     CLN_ALLELE=,,C;CLN_ALLELEID=,,1111
"""

from typing import Any, Iterable, Mapping, Optional, Sequence

from clinbear.schema import OUTPUT_FIELDS, OutputField

# Multi-valued ClinVar INFO values are joined with '|' so that ',' stays the allele separator
VALUE_SEPARATOR = "|"
ALLELE_SEPARATOR = ","


def annotate_value(source: Any, info_id: str) -> Optional[str]:
    """
    Obtain the value of one ClinVar INFO field as a single string.

    Lists are joined by '|' instead of ',':
    CLNDISDB=MedGen:C0751882,Orphanet:ORPHA590 becomes MedGen:C0751882|Orphanet:ORPHA590

    Returns:
        None when the record does not carry the field
    """
    value = source.info.get(info_id)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return VALUE_SEPARATOR.join(str(item) for item in value)
    return str(value)


def transfer_annotations(
    source: Any,
    alt: str,
    fields: Iterable[OutputField] = OUTPUT_FIELDS
) -> dict[str, Optional[str]]:
    """Map every output INFO ID to the value ClinVar record ``source`` holds for allele ``alt``."""
    annotations: dict[str, Optional[str]] = {}
    for field in fields:
        if field.source is None:
            annotations[field.id] = alt
        else:
            annotations[field.id] = annotate_value(source, field.source)
    return annotations


def assemble_fields(
    alleles: Sequence[str],
    annotations: Mapping[str, Mapping[str, Optional[str]]],
    fields: Iterable[OutputField] = OUTPUT_FIELDS
) -> dict[str, str]:
    """
    Build the per-allele INFO values of one variant.

    ``alleles`` is the full allele list, REF first. Slot 0 belongs to the
    reference allele and is always empty; ALT slots hold the value transferred
    for that allele or an empty string. Fields empty for every allele are left out.

    Returns:
        output INFO ID -> comma-joined per-allele values, in output field order
    """
    assembled: dict[str, str] = {}
    for field in fields:
        slots: list[str] = []
        non_empty = 0
        for index, allele in enumerate(alleles):
            value = annotations[allele].get(field.id) if index > 0 and allele in annotations else None
            if value:
                slots.append(value)
                non_empty += 1
            else:
                slots.append("")

        # Only include annotations with values
        if non_empty > 0:
            assembled[field.id] = ALLELE_SEPARATOR.join(slots)
    return assembled


def split_alleles(value: str) -> tuple[str, ...]:
    """Per-allele slots of an assembled value."""
    return tuple(value.split(ALLELE_SEPARATOR))


"""Check the ClinVar header contract and build the annotated VCF header."""

from typing import Iterable

import pysam
from eliot import start_action

from clinbear.errors import MissingHeaderLineError
from clinbear.schema import CLINVAR_INFO, OUTPUT_FIELDS, OutputField


def validate_reference_header(
    header: pysam.VariantHeader,
    required: Iterable[str] = CLINVAR_INFO
) -> None:
    """
    Ensure the ClinVar header declares every INFO field that gets transferred.

    Raises:
        MissingHeaderLineError: naming the first INFO ID that is not declared
    """
    with start_action(action_type="validate_clinvar_header") as action:
        required = list(required)
        for info_id in required:
            if info_id not in header.info:
                action.log(message_type="error", missing_info=info_id)
                raise MissingHeaderLineError(info_id)
        action.add_success_fields(checked_fields=len(required))


def info_line(field: OutputField) -> str:
    """##INFO meta line declaring ``field``."""
    return (
        f'##INFO=<ID={field.id},Number={field.number},Type={field.type},'
        f'Description="{field.description}">'
    )


def build_output_header(
    primary_header: pysam.VariantHeader,
    fields: Iterable[OutputField] = OUTPUT_FIELDS
) -> pysam.VariantHeader:
    """
    Copy the header of the VCF being annotated and append the ClinVar INFO lines.

    The primary header is not modified. An INFO ID it already declares is
    replaced by the per-allele declaration.
    """
    with start_action(action_type="build_output_header") as action:
        header = primary_header.copy()
        replaced = []
        for field in fields:
            if field.id in header.info:
                header.info.remove_header(field.id)
                replaced.append(field.id)
            # info.add only knows Flag, Integer, Float and String
            header.add_line(info_line(field))
        if replaced:
            action.log(message_type="warning", replaced_info=replaced)
        return header

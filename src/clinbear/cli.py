from __future__ import annotations

from pathlib import Path
from typing import Optional
import sys

import typer
from dotenv import load_dotenv
from eliot import start_action
from pycomfort.logging import to_nice_file, to_nice_stdout
from rich.console import Console
from rich.table import Table

from clinbear.annotators import ClinvarAnnotator
from clinbear.config import get_keep_unannotated, get_log_dir
from clinbear.schema import OUTPUT_FIELDS
from clinbear.summary import AnnotationSummary

load_dotenv()

# Create the main CLI app
app = typer.Typer(
    name="clinbear",
    help="Annotate a VCF with clinical variants using ClinVar vcf_2.0",
    rich_markup_mode="rich",
    no_args_is_help=True
)

console = Console()


def _summary_table(summary: AnnotationSummary) -> Table:
    table = Table(title="ClinVar annotation")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Variants read", str(summary.records_read))
    table.add_row("Variants annotated", str(summary.records_annotated))
    table.add_row("Variants dropped", str(summary.records_dropped))
    table.add_row("Variants passed unannotated", str(summary.records_passed))
    table.add_row("ClinVar records skipped", str(summary.candidates_skipped))
    if summary.last_position is not None:
        table.add_row("Last position", f"{summary.last_contig}:{summary.last_position}")
    for significance, count in summary.significance_counts.items():
        table.add_row(f"CLN_SIG {significance}", str(count))
    return table


@app.command()
def annotate(
    variant: Path = typer.Option(
        ...,
        "--variant", "-V",
        help="VCF file to annotate"
    ),
    clinvar: Path = typer.Option(
        ...,
        "--clinvar",
        help="ClinVar vcf_2.0 file, bgzipped and tabix-indexed"
    ),
    output: Path = typer.Option(
        ...,
        "--output", "-O",
        help="File to which variants should be written (.vcf, .vcf.gz or .bcf)"
    ),
    keep_unannotated: Optional[bool] = typer.Option(
        None,
        "--keep-unannotated/--drop-unannotated",
        help="Write variants without a ClinVar match unchanged (default: CLINBEAR_KEEP_UNANNOTATED or drop)"
    ),
    summary_parquet: Optional[Path] = typer.Option(
        None,
        "--summary-parquet",
        help="Also save one row per written variant with its CLN_* values to this parquet file"
    ),
    log: bool = typer.Option(
        True,
        "--log/--no-log",
        help="Enable detailed logging to files"
    ),
):
    """
    Annotate a VCF file with clinically relevant human variants from NCBI's ClinVar vcf_2.0.

    Variants whose ALT alleles match a ClinVar record at the same position and
    REF get per-allele CLN_* INFO fields.
    """
    if log:
        logs = get_log_dir()
        logs.mkdir(exist_ok=True, parents=True)
        to_nice_file(logs / "annotate.json", logs / "annotate.log")
        to_nice_stdout()

    if keep_unannotated is None:
        keep_unannotated = get_keep_unannotated()

    with start_action(action_type="annotate_command") as action:
        action.log(
            message_type="info",
            variant=str(variant),
            clinvar=str(clinvar),
            output=str(output),
            keep_unannotated=keep_unannotated,
            summary_parquet=str(summary_parquet) if summary_parquet else None
        )

        annotator = ClinvarAnnotator(
            clinvar_path=clinvar,
            output_path=output,
            keep_unannotated=keep_unannotated,
            summary_parquet=summary_parquet
        )
        try:
            summary = annotator(variant)
        except Exception as e:
            action.log(message_type="error", error=str(e))
            console.print(f"❌ Error: {e}", style="red")
            sys.exit(1)

        console.print(_summary_table(summary))
        console.print(f"✅ Annotated VCF written to [bold blue]{output}[/bold blue]")
        if summary_parquet is not None:
            console.print(f"📊 Annotation table saved to [bold blue]{summary_parquet}[/bold blue]")


@app.command()
def fields():
    """Show the INFO fields added to annotated VCFs."""
    table = Table(title="ClinVar output fields")
    table.add_column("ID", style="bold", no_wrap=True)
    table.add_column("Source", no_wrap=True)
    table.add_column("Number", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Description")
    for field in OUTPUT_FIELDS:
        table.add_row(field.id, field.source or "ALT", field.number, field.type, field.description)
    console.print(table)


@app.command()
def version():
    """Show version information."""
    # Import here to avoid circular imports
    try:
        import importlib.metadata
        version = importlib.metadata.version("clinbear")
        console.print(f"clinbear version: [bold green]{version}[/bold green]")
    except importlib.metadata.PackageNotFoundError:
        console.print("clinbear version: [yellow]development[/yellow]")


if __name__ == "__main__":
    app()

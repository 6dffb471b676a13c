"""
ClinVar INFO fields consumed by the annotator and the INFO fields it writes.

Every output field is declared ``Number=R``: one value per allele, the
reference allele first.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OutputField(BaseModel):
    """One INFO line added to the annotated VCF."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="INFO ID written to the output VCF")
    source: Optional[str] = Field(
        default=None,
        description="ClinVar INFO ID the value is copied from; None for the matched allele itself"
    )
    number: str = Field(default="R", description="VCF Number of the INFO line")
    type: str = Field(default="String", description="VCF Type of the INFO line")
    description: str


# INFO header fields in ClinVar VCF
CLINVAR_INFO: tuple[str, ...] = (
    "ALLELEID",
    "CLNDN",
    "CLNDNINCL",
    "CLNDISDB",
    "CLNDISDBINCL",
    "CLNHGVS",
    "CLNREVSTAT",
    "CLNSIG",
    "CLNSIGINCL",
    "CLNVC",
    "CLNVCSO",
    "CLNVI",
    "DBVARID",
    "GENEINFO",
    "MC",
    "ORIGIN",
    "RS",
    "SSR",
)

ALLELE_FIELD = "CLN_ALLELE"

# Output order of the INFO lines and of the attributes on each record.
# CLN_ALLELEID is a String: unmatched alleles leave an empty slot, which is not a valid Integer.
OUTPUT_FIELDS: tuple[OutputField, ...] = (
    OutputField(id=ALLELE_FIELD, type="Character", description="Alternate alleles from Clinvar"),
    OutputField(id="CLN_ALLELEID", source="ALLELEID", description="the ClinVar Allele ID"),
    OutputField(
        id="CLN_DN", source="CLNDN",
        description="ClinVar's preferred disease name for the concept specified by disease identifiers in CLNDISDB"
    ),
    OutputField(
        id="CLN_DNINCL", source="CLNDNINCL",
        description="For included Variant : ClinVar's preferred disease name for the concept specified by disease identifiers in CLNDISDB"
    ),
    OutputField(
        id="CLN_DISDB", source="CLNDISDB",
        description="Tag-value pairs of disease database name and identifier, e.g. OMIM:NNNNNN"
    ),
    OutputField(
        id="CLN_DISDBINCL", source="CLNDISDBINCL",
        description="For included Variant: Tag-value pairs of disease database name and identifier, e.g. OMIM:NNNNNN"
    ),
    OutputField(
        id="CLN_HGVS", source="CLNHGVS",
        description="Top-level (primary assembly, alt, or patch) HGVS expression."
    ),
    OutputField(id="CLN_REVSTAT", source="CLNREVSTAT", description="ClinVar review status for the Variation ID"),
    OutputField(id="CLN_SIG", source="CLNSIG", description="Clinical significance for this single variant"),
    OutputField(
        id="CLN_SIGINCL", source="CLNSIGINCL",
        description="Clinical significance for a haplotype or genotype that includes this variant. "
                    "Reported as pairs of VariationID:clinical significance."
    ),
    OutputField(id="CLN_VC", source="CLNVC", description="Variant type"),
    OutputField(id="CLN_VCSO", source="CLNVCSO", description="Sequence Ontology id for variant type"),
    OutputField(
        id="CLN_VI", source="CLNVI",
        description="the variant's clinical sources reported as tag-value pairs of database and variant identifier"
    ),
    OutputField(id="CLN_DBVARID", source="DBVARID", description="nsv accessions from dbVar for the variant"),
    OutputField(
        id="CLN_GENEINFO", source="GENEINFO",
        description="Gene(s) for the variant reported as gene symbol:gene id. The gene symbol and id are "
                    "delimited by a colon (:) and each pair is delimited by a vertical bar (|)"
    ),
    OutputField(
        id="CLN_MC", source="MC",
        description="comma separated list of molecular consequence in the form of Sequence Ontology ID|molecular_consequence"
    ),
    OutputField(
        id="CLN_ORIGIN", source="ORIGIN",
        description="Allele origin. One or more of the following values may be added: 0 - unknown; 1 - germline; "
                    "2 - somatic; 4 - inherited; 8 - paternal; 16 - maternal; 32 - de-novo; 64 - biparental; "
                    "128 - uniparental; 256 - not-tested; 512 - tested-inconclusive; 1073741824 - other"
    ),
    OutputField(id="CLN_RS", source="RS", description="dbSNP ID (i.e. rs number)"),
    OutputField(
        id="CLN_SSR", source="SSR",
        description="Variant Suspect Reason Codes. One or more of the following values may be added: "
                    "0 - unspecified, 1 - Paralog, 2 - byEST, 4 - oldAlign, 8 - Para_EST, 16 - 1kg_failed, 1024 - other"
    ),
)

OUTPUT_FIELD_IDS: tuple[str, ...] = tuple(field.id for field in OUTPUT_FIELDS)

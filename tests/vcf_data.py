"""Small VCF fixtures shared by the test modules."""

from pathlib import Path
from typing import Any

import pysam


CLINVAR_HEADER = [
    "##fileformat=VCFv4.1",
    "##contig=<ID=1,length=248956422>",
    '##INFO=<ID=END,Number=1,Type=Integer,Description="End position of the variant">',
    '##INFO=<ID=ALLELEID,Number=1,Type=Integer,Description="the ClinVar Allele ID">',
    '##INFO=<ID=CLNDN,Number=.,Type=String,Description="ClinVar\'s preferred disease name">',
    '##INFO=<ID=CLNDNINCL,Number=.,Type=String,Description="For included Variant: disease name">',
    '##INFO=<ID=CLNDISDB,Number=.,Type=String,Description="Tag-value pairs of disease database name and identifier">',
    '##INFO=<ID=CLNDISDBINCL,Number=.,Type=String,Description="For included Variant: disease database pairs">',
    '##INFO=<ID=CLNHGVS,Number=.,Type=String,Description="Top-level HGVS expression">',
    '##INFO=<ID=CLNREVSTAT,Number=.,Type=String,Description="ClinVar review status">',
    '##INFO=<ID=CLNSIG,Number=.,Type=String,Description="Clinical significance for this single variant">',
    '##INFO=<ID=CLNSIGINCL,Number=.,Type=String,Description="Clinical significance for a haplotype">',
    '##INFO=<ID=CLNVC,Number=1,Type=String,Description="Variant type">',
    '##INFO=<ID=CLNVCSO,Number=1,Type=String,Description="Sequence Ontology id for variant type">',
    '##INFO=<ID=CLNVI,Number=.,Type=String,Description="Clinical sources">',
    '##INFO=<ID=DBVARID,Number=.,Type=String,Description="nsv accessions from dbVar">',
    '##INFO=<ID=GENEINFO,Number=1,Type=String,Description="Gene(s) for the variant">',
    '##INFO=<ID=MC,Number=.,Type=String,Description="Molecular consequence">',
    '##INFO=<ID=ORIGIN,Number=.,Type=String,Description="Allele origin">',
    '##INFO=<ID=RS,Number=.,Type=String,Description="dbSNP ID">',
    '##INFO=<ID=SSR,Number=1,Type=Integer,Description="Variant Suspect Reason Codes">',
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO",
]

VARIANTS_HEADER = [
    "##fileformat=VCFv4.2",
    "##contig=<ID=1,length=248956422>",
    "##contig=<ID=2,length=242193529>",
    '##INFO=<ID=DP,Number=1,Type=Integer,Description="Total depth">',
    '##FORMAT=<ID=GT,Number=1,Type=String,Description="Genotype">',
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tSAMPLE1",
]

# pos 100: C matches ALLELEID 1111, G is not in the variant
# pos 200: REF differs (deletion in ClinVar)
# pos 300: first record ends at 305 and is skipped, second matches
# pos 400: only an END mismatch, nothing matches
CLINVAR_ROWS = [
    "1\t100\t1111\tT\tC\t.\t.\tALLELEID=1111;CLNDN=Hereditary_cancer-predisposing_syndrome;"
    "CLNDISDB=MedGen:C0751882,Orphanet:ORPHA590;CLNSIG=Pathogenic;CLNREVSTAT=criteria_provided,_single_submitter;"
    "CLNVC=single_nucleotide_variant;GENEINFO=BRCA1:672;RS=80357000",
    "1\t100\t2222\tT\tG\t.\t.\tALLELEID=2222;CLNSIG=Benign;GENEINFO=BRCA1:672",
    "1\t200\t3333\tAT\tA\t.\t.\tALLELEID=3333;CLNSIG=Uncertain_significance",
    "1\t300\t4444\tG\tA\t.\t.\tALLELEID=4444;END=305;CLNSIG=Pathogenic",
    "1\t300\t5555\tG\tA\t.\t.\tALLELEID=5555;CLNSIG=Likely_benign",
    "1\t400\t6666\tC\tT\t.\t.\tALLELEID=6666;END=402;CLNSIG=Benign",
]

VARIANT_ROWS = [
    "1\t100\t.\tT\tA,C\t50\tPASS\tDP=10\tGT\t1/2",
    "1\t150\t.\tG\tA\t50\tPASS\tDP=11\tGT\t0/1",
    "1\t200\t.\tA\tG\t50\tPASS\tDP=12\tGT\t0/1",
    "1\t300\t.\tG\tA\t50\tPASS\tDP=13\tGT\t1/1",
    "1\t400\t.\tC\tT\t50\tPASS\tDP=14\tGT\t0/1",
    "2\t500\t.\tA\tC\t50\tPASS\tDP=15\tGT\t0/1",
]


def write_vcf(path: Path, header: list[str], rows: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(header + rows) + "\n")
    return path


def index_vcf(path: Path) -> Path:
    """bgzip and tabix-index a plain VCF, returning the compressed path."""
    return Path(pysam.tabix_index(str(path), preset="vcf", force=True))


def read_records(path: Path) -> list[dict[str, Any]]:
    """Parse the body of a plain-text VCF into dicts with a parsed INFO column."""
    records = []
    for line in path.read_text().splitlines():
        if not line or line.startswith("#"):
            continue
        columns = line.split("\t")
        info = {}
        if columns[7] != ".":
            for item in columns[7].split(";"):
                key, _, value = item.partition("=")
                info[key] = value
        records.append({
            "chrom": columns[0],
            "pos": int(columns[1]),
            "ref": columns[3],
            "alt": columns[4],
            "info": info,
            "sample": columns[9:],
        })
    return records

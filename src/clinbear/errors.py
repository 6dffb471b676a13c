"""Errors that abort an annotation run."""


class ClinbearError(Exception):
    """Base class for fatal annotation errors."""


class MissingHeaderLineError(ClinbearError):
    """The ClinVar VCF does not declare an INFO field the annotator reads."""

    def __init__(self, info_id: str):
        self.info_id = info_id
        super().__init__(f"Clinvar missing expected header line: {info_id}")


class MultiAllelicReferenceError(ClinbearError):
    """A ClinVar record overlapping a variant has more or fewer than one ALT allele."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(
            f"Expected exactly 1 alternate allele in ClinVar record {description}, "
            "please use clinvar vcf_2.0 with 1 alt allele per position"
        )


class MissingIndexError(ClinbearError):
    """The ClinVar VCF cannot be queried by region."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"ClinVar VCF has no tabix/CSI index: {path} (bgzip it and run 'tabix -p vcf' first)"
        )

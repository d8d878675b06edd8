"""Property and document input generators."""

from dataclasses import dataclass
from datetime import date

from deed_registry.config import LimitsConfig
from deed_registry.generators.base import BaseGenerator

# Upper bound for generated document dates
LATEST_DOCUMENT_DATE = date(2025, 12, 31)


@dataclass(frozen=True)
class PropertyDraft:
    """Arguments for a registration, minus caller and owner."""

    title: str
    description: str
    location: str
    category: str
    area: int
    unit: str


@dataclass(frozen=True)
class DocumentDraft:
    """Arguments for a document attachment, minus caller and property."""

    title: str
    document_type: str
    document_hash: str
    description: str


class PropertyGenerator(BaseGenerator):
    """Generate realistic deed registrations within the configured limits."""

    CATEGORIES = ["Residential", "Commercial", "Agricultural", "Industrial", "Mixed Use"]
    UNITS = {"sqft": (500, 12000), "sqm": (50, 1100), "acre": (1, 640)}
    FEATURES = [
        "garden",
        "garage",
        "pool",
        "river frontage",
        "mature trees",
        "paved access road",
        "water well",
        "solar panels",
    ]

    def __init__(self, seed: int | None = None, limits: LimitsConfig | None = None) -> None:
        super().__init__(seed)
        self.limits = limits or LimitsConfig()

    def generate(self) -> PropertyDraft:
        """Generate a property draft.

        Returns
        -------
        PropertyDraft
            Generated registration inputs.
        """
        category = self.random.choice(self.CATEGORIES)
        unit = self.random.choice(list(self.UNITS))
        low, high = self.UNITS[unit]
        features = self.random.sample(self.FEATURES, k=2)
        street = self.fake.street_name()

        return PropertyDraft(
            title=f"{street} {category} Lot {self.random.randint(1, 999)}"[: self.limits.title],
            description=(
                f"{category} parcel with {features[0]} and {features[1]}. "
                f"{self.fake.sentence(nb_words=10)}"
            )[: self.limits.description],
            location=self.fake.address().replace("\n", ", ")[: self.limits.location],
            category=category[: self.limits.category],
            area=self.random.randint(low, high),
            unit=unit[: self.limits.unit],
        )


class DocumentGenerator(BaseGenerator):
    """Generate document attachments with sha256-style fingerprints."""

    DOCUMENT_TYPES = ["Deed", "Survey", "Title Insurance", "Tax Receipt", "Appraisal", "Permit"]

    def __init__(self, seed: int | None = None, limits: LimitsConfig | None = None) -> None:
        super().__init__(seed)
        self.limits = limits or LimitsConfig()

    def generate(self) -> DocumentDraft:
        document_type = self.random.choice(self.DOCUMENT_TYPES)
        issued = self.fake.date(pattern="%Y-%m-%d", end_datetime=LATEST_DOCUMENT_DATE)
        return DocumentDraft(
            title=f"{document_type} {issued}"[: self.limits.title],
            document_type=document_type[: self.limits.category],
            document_hash=self.fake.sha256()[: self.limits.document_hash],
            description=self.fake.sentence(nb_words=8)[: self.limits.description],
        )

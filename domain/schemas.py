"""Pydantic models for taxonomy records and resolution results."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BeckerMode = bool | Literal["all"]


class TaxonomicRecord(BaseModel):
    """One row of the reference taxonomy table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mo: str = Field(..., description="Short fixed-format identifier, unique across the table.")
    fullname: str = Field(..., description="Genus + species (+ subspecies), unique across the table.")

    kingdom: str | None = None
    subkingdom: str | None = None
    phylum: str | None = None
    class_: str | None = Field(default=None, alias="class")
    order: str | None = None
    family: str | None = None
    genus: str | None = None
    species: str | None = None
    subspecies: str | None = None

    authors: str | None = None
    year: int | None = None

    type: str | None = Field(default=None, description="Bacteria, Fungi, Protozoa, ...")
    gramstain: str | None = Field(default=None, description="'Gram negative', 'Gram positive' or empty.")


class GroupingOptions(BaseModel):
    """Per-call switches for the post-resolution grouping stage."""

    model_config = ConfigDict(frozen=True)

    becker: BeckerMode = Field(
        default=False,
        description="Group Staphylococci into CoNS/CoPS. 'all' also moves S. aureus into CoPS.",
    )
    lancefield: bool = Field(
        default=False,
        description="Group beta-haemolytic Streptococci into their (first) Lancefield group.",
    )

    @property
    def enabled(self) -> bool:
        return bool(self.becker) or self.lancefield


class Resolution(BaseModel):
    """Result of one resolver call, aligned with the input order."""

    mo: list[str | None] = Field(
        ...,
        description="One identifier per input value, None where the value could not be resolved.",
    )
    failures: list[str] = Field(
        default_factory=list,
        description="Distinct input values that could not be resolved, in order of first appearance.",
    )

    @property
    def n_resolved(self) -> int:
        return sum(1 for mo in self.mo if mo is not None)

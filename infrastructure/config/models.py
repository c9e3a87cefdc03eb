"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.schemas import BeckerMode
from infrastructure.constants import SITE_CODES_FILE, TAXONOMY_FILE


class ResolverConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from resolver.yaml
    - Paths are resolved relative to the YAML file by the loader
    - Consumed by the resolver factory and the CLI
    """

    taxonomy_file: Path = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="CSV/Excel reference taxonomy table.",
    )
    site_codes_file: Path | None = Field(
        default_factory=lambda: SITE_CODES_FILE,
        description="Optional CSV/Excel table of site-specific codes (columns: code, mo).",
    )

    # Columns
    input_columns: list[str] = Field(
        default_factory=lambda: ["microorganism"],
        description="One column of free text, or two columns (genus, species) joined with a space.",
    )
    output_column: str = Field(default="mo", description="Column receiving the identifiers.")

    # Grouping flags
    becker: BeckerMode = Field(
        default=False,
        description="Group Staphylococci into CoNS/CoPS; 'all' also groups S. aureus as CoPS.",
    )
    lancefield: bool = Field(
        default=False,
        description="Group beta-haemolytic Streptococci into Lancefield groups.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "ResolverConfig":
        self.input_columns = [str(c).strip() for c in self.input_columns if str(c).strip()]
        if not self.input_columns:
            raise ValueError("input_columns must name one or two columns")
        if len(self.input_columns) > 2:
            raise ValueError(f"input_columns can be 2 columns at most, got {len(self.input_columns)}")

        if not str(self.output_column).strip():
            raise ValueError("output_column must not be empty")
        self.output_column = str(self.output_column).strip()

        if self.site_codes_file is not None and not str(self.site_codes_file).strip():
            self.site_codes_file = None

        return self

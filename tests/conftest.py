import pandas as pd
import pytest

from domain.resolution import MicroorganismResolver
from domain.taxonomy import SiteCodeTable, TaxonomyTable, parse_taxonomy_frame
from infrastructure.config import load_site_codes, load_taxonomy_table
from infrastructure.constants import SITE_CODES_FILE, TAXONOMY_FILE


@pytest.fixture(scope="session")
def taxonomy_table() -> TaxonomyTable:
    return load_taxonomy_table(TAXONOMY_FILE)


@pytest.fixture(scope="session")
def site_codes() -> SiteCodeTable:
    return load_site_codes(SITE_CODES_FILE)


@pytest.fixture(scope="session")
def resolver(taxonomy_table: TaxonomyTable, site_codes: SiteCodeTable) -> MicroorganismResolver:
    return MicroorganismResolver(taxonomy_table, site_codes)


@pytest.fixture
def tiny_table() -> TaxonomyTable:
    # deliberately unsorted
    df = pd.DataFrame(
        {
            "mo": ["STAAUR", "_FAM.STAPHY", "ESCCOL", "ENMCOL", "STA"],
            "fullname": [
                "Staphylococcus aureus",
                "(unknown Staphylococcaceae)",
                "Escherichia coli",
                "Entamoeba coli",
                "Staphylococcus species",
            ],
            "genus": ["Staphylococcus", None, "Escherichia", "Entamoeba", "Staphylococcus"],
            "species": ["aureus", None, "coli", "coli", "species"],
        }
    )
    return parse_taxonomy_frame(df)

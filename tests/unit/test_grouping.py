import pytest

from domain.resolution import GroupingClassifier
from domain.schemas import GroupingOptions


def test_epidermidis_stays_species_without_becker(resolver) -> None:
    assert resolver.resolve(["S. epidermidis"]).mo == ["STAEPI"]


def test_epidermidis_becomes_cons_with_becker(resolver) -> None:
    assert resolver.resolve(["S. epidermidis"], becker=True).mo == ["STACNS"]


def test_aureus_only_grouped_with_becker_all(resolver) -> None:
    assert resolver.resolve(["MRSA"], becker=True).mo == ["STAAUR"]
    assert resolver.resolve(["MRSA"], becker="all").mo == ["STACPS"]


def test_coagulase_positive_species(resolver) -> None:
    assert resolver.resolve(["S. pseudintermedius"], becker=True).mo == ["STACPS"]


def test_pyogenes_lancefield(resolver) -> None:
    assert resolver.resolve(["S. pyogenes"]).mo == ["STCPYO"]
    assert resolver.resolve(["S. pyogenes"], lancefield=True).mo == ["STCGRA"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Streptococcus agalactiae", "STCGRB"),
        ("Streptococcus dysgalactiae", "STCGRC"),
        ("Streptococcus equi", "STCGRC"),
        ("Streptococcus anginosus", "STCGRF"),
        ("Streptococcus sanguis", "STCGRH"),
        ("Streptococcus salivarius", "STCGRK"),
    ],
)
def test_lancefield_groups(resolver, value, expected) -> None:
    assert resolver.resolve([value], lancefield=True).mo == [expected]


def test_ungrouped_streptococci_keep_their_species(resolver) -> None:
    assert resolver.resolve(["S. pneumoniae"], lancefield=True).mo == ["STCPNE"]
    assert resolver.resolve(["Streptococcus"], lancefield=True).mo == ["STC"]


def test_flags_are_independent(resolver) -> None:
    values = ["S. epidermidis", "S. pyogenes"]
    assert resolver.resolve(values, becker=True).mo == ["STACNS", "STCPYO"]
    assert resolver.resolve(values, lancefield=True).mo == ["STAEPI", "STCGRA"]
    assert resolver.resolve(values, becker=True, lancefield=True).mo == ["STACNS", "STCGRA"]


def test_grouping_leaves_other_genera_alone(taxonomy_table) -> None:
    classifier = GroupingClassifier(taxonomy_table)
    options = GroupingOptions(becker="all", lancefield=True)

    assert classifier.reclassify("ESCCOL", options) == "ESCCOL"
    assert classifier.reclassify("STACNS", options) == "STACNS"
    assert classifier.reclassify("STA", options) == "STA"

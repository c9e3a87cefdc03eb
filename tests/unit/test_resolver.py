import warnings

import pytest

from domain.resolution import MicroorganismResolver, MoCoercionWarning
from domain.taxonomy.normalizer import SearchForms


def _resolve(resolver: MicroorganismResolver, value: str, **kwargs) -> str | None:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MoCoercionWarning)
        return resolver.resolve([value], **kwargs).mo[0]


@pytest.mark.parametrize(
    "value",
    ["stau", "STAU", "staaur", "S. aureus", "S aureus", "Staphylococcus aureus", "MRSA", "VISA", "VRSA"],
)
def test_staphylococcus_aureus_spellings(resolver, value) -> None:
    assert _resolve(resolver, value) == "STAAUR"


def test_e_coli_is_not_entamoeba(resolver) -> None:
    assert _resolve(resolver, "E. coli") == "ESCCOL"
    assert _resolve(resolver, "e coli") == "ESCCOL"
    # without the override, plain search prefers the genus that sorts first
    assert resolver.table.first_match("^E.* coli$") == "ENMCOL"


def test_other_disambiguation_traps(resolver) -> None:
    assert _resolve(resolver, "H. influenzae") == "HAEINF"
    assert _resolve(resolver, "p aer") == "PSEAER"
    assert _resolve(resolver, "P. aeruginosa") == "PSEAER"


def test_valid_identifier_passes_through(resolver) -> None:
    for mo in ("ESCCOL", "KLE", "_FAM.ENTBAC", "STACNS", "STCGRB"):
        assert _resolve(resolver, mo) == mo


def test_acronyms(resolver) -> None:
    assert _resolve(resolver, "mrse") == "STAEPI"
    assert _resolve(resolver, "VRE") == "ENC"
    assert _resolve(resolver, "MRPA") == "PSEAER"
    for acronym in ("PISP", "PRSP", "VISP", "VRSP"):
        assert _resolve(resolver, acronym) == "STCPNE"


def test_coagulase_free_text(resolver) -> None:
    assert _resolve(resolver, "CoNS") == "STACNS"
    assert _resolve(resolver, "CNS") == "STACNS"
    assert _resolve(resolver, "coagulase-negative staphylococci") == "STACNS"
    assert _resolve(resolver, "Coagulase positive staph") == "STACPS"


@pytest.mark.parametrize("value", ["MRCoNS", "MR-CoNS", "MRCNS", "mr cons", "CoNS MR"])
def test_coagulase_with_resistance_prefix(resolver, value) -> None:
    assert _resolve(resolver, value) == "STACNS"


def test_coagulase_words_do_not_match_inside_species_names(resolver) -> None:
    assert _resolve(resolver, "S. constellatus") == "STCCON"


def test_genus_only_resolves_to_species_row(resolver) -> None:
    assert _resolve(resolver, "Klebsiella") == "KLE"
    assert _resolve(resolver, "klebsiella") == "KLE"


def test_genus_only_does_not_hit_longer_genus(resolver) -> None:
    # 'Peptostreptococcus species' sorts before 'Streptococcus species'
    assert _resolve(resolver, "Streptococcus") == "STC"


def test_split_bridge_abbreviations(resolver) -> None:
    assert _resolve(resolver, "klpn") == "KLEPNE"
    assert _resolve(resolver, "esco") == "ESCCOL"
    assert _resolve(resolver, "S. aga") == "STCAGA"


def test_site_codes(resolver) -> None:
    assert _resolve(resolver, "kpn1") == "KLEPNE"


def test_gram_stain_input(resolver) -> None:
    assert _resolve(resolver, "Gram negative rods") == "GNR"
    assert _resolve(resolver, "GNR") == "GNR"
    assert _resolve(resolver, "negative rods") == "GNR"
    assert _resolve(resolver, "gram pos cocci") == "GPC"


def test_resolve_is_deterministic(resolver) -> None:
    values = ["S. aureus", "klpn", "Gram negative rods", "nonsense123", "E. coli"]
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MoCoercionWarning)
        first = resolver.resolve(values)
        second = resolver.resolve(values)
    assert first == second


def test_output_keeps_input_order_and_length(resolver) -> None:
    values = ["E. coli", "S. aureus", "E. coli", None, "Klebsiella"]
    res = resolver.resolve(values)

    assert res.mo == ["ESCCOL", "STAAUR", "ESCCOL", None, "KLE"]
    assert res.failures == []


def test_failures_are_reported_once(resolver) -> None:
    values = ["xyz123", "E. coli", "xyz123", "xyz123", "qqq"]
    with pytest.warns(MoCoercionWarning) as record:
        res = resolver.resolve(values)

    assert res.mo == [None, "ESCCOL", None, None, None]
    assert res.failures == ["xyz123", "qqq"]
    assert len(record) == 1
    message = str(record[0].message)
    assert message.count('"xyz123"') == 1
    assert '"qqq"' in message


def test_empty_after_normalization_is_unresolved(resolver) -> None:
    with pytest.warns(MoCoercionWarning):
        res = resolver.resolve(["...", "E. coli"])
    assert res.mo == [None, "ESCCOL"]
    assert res.failures == ["..."]


def test_missing_values_are_not_failures(resolver) -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", MoCoercionWarning)
        res = resolver.resolve([None, float("nan")])
    assert res.mo == [None, None]
    assert res.failures == []


def test_identically_normalized_inputs_share_one_search(taxonomy_table) -> None:
    calls: list[str] = []

    class _Counting(MicroorganismResolver):
        def resolve_one(self, value: object) -> str | None:
            calls.append(str(value))
            return super().resolve_one(value)

    res = _Counting(taxonomy_table).resolve(["S. aureus", "S aureus", "S.  aureus"])

    assert res.mo == ["STAAUR", "STAAUR", "STAAUR"]
    assert calls == ["S. aureus"]


def test_custom_matcher_list(taxonomy_table) -> None:
    from domain.resolution.base import Matcher

    class _Always(Matcher):
        name = "always"

        def match(self, forms: SearchForms) -> str | None:
            return "ESCCOL"

    res = MicroorganismResolver(taxonomy_table, matchers=[_Always()]).resolve(["anything"])
    assert res.mo == ["ESCCOL"]

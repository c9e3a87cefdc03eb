from domain.taxonomy.normalizer import normalize_input, trim_input


def test_trim_removes_punctuation_and_outer_spaces() -> None:
    assert trim_input("  E. coli ") == "E coli"
    assert trim_input("S.aureus!") == "Saureus"


def test_trim_collapses_internal_whitespace() -> None:
    assert trim_input("Staphylococcus \t  aureus") == "Staphylococcus aureus"


def test_trim_none_is_empty() -> None:
    assert trim_input(None) == ""


def test_search_forms_for_abbreviated_name() -> None:
    forms = normalize_input("S. aureus")

    assert forms.raw == "S. aureus"
    assert forms.trimmed == "S aureus"
    assert forms.collapsed == "^S.* aureus$"
    assert forms.wildcarded == "^S.*aureus$"
    assert forms.species_suffixed == "S aureus species"
    assert forms.species_wildcarded == "S.*aureus species"


def test_genus_only_species_forms() -> None:
    forms = normalize_input("Klebsiella")

    assert forms.collapsed == "^Klebsiella$"
    assert forms.species_suffixed == "Klebsiella species"


def test_punctuation_only_input_is_empty() -> None:
    assert normalize_input("?!.").is_empty
    assert normalize_input("   ").is_empty
    assert not normalize_input("x").is_empty

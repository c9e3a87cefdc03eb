"""
Clinical override table.

Literal rules evaluated before any taxonomy search: identifier passthrough,
disambiguation traps, coagulase free text and well-known acronyms.
"""

import re

from domain.resolution.base import Matcher
from domain.taxonomy.groups import CONS, COPS
from domain.taxonomy.normalizer import SearchForms
from domain.taxonomy.table import TaxonomyTable

# Inputs that would otherwise hit an organism that sorts earlier.
# Patterns are matched in full against the lower-cased trimmed input.
DISAMBIGUATION_TRAPS: tuple[tuple[str, str], ...] = (
    (r"e ?coli", "ESCCOL"),  # not Entamoeba coli
    (r"h ?influenzae", "HAEINF"),  # not Haematobacter influenzae
    (r"st ?au|staaur", "STAAUR"),  # not Staphylococcus auricularis
    (r"p ?aer", "PSEAER"),  # not Pasteurella aerogenes
)

# "cns"/"cons" must end a word, so "constellatus" is not CoNS; a fused
# resistance prefix is allowed ("MRCoNS", "MR-CoNS", "MRCNS").
COAGULASE_PATTERNS: tuple[tuple[str, str], ...] = (
    (r"coagulase ?negative|(?:\b|mr)co?ns\b", CONS),
    (r"coagulase ?positive|(?:\b|mr)cops\b", COPS),
)

ACRONYMS: dict[str, str] = {
    # methicillin resistant / vancomycin intermediate / vancomycin resistant S. aureus
    "MRSA": "STAAUR",
    "VISA": "STAAUR",
    "VRSA": "STAAUR",
    "MRSE": "STAEPI",
    "VRE": "ENC",
    "MRPA": "PSEAER",
    # penicillin / vancomycin intermediate or resistant S. pneumoniae
    "PISP": "STCPNE",
    "PRSP": "STCPNE",
    "VISP": "STCPNE",
    "VRSP": "STCPNE",
}


class IdentifierPassthrough(Matcher):
    """Return the input unchanged when it already is a valid identifier."""

    name = "identifier"

    def __init__(self, table: TaxonomyTable) -> None:
        self.table = table

    def match(self, forms: SearchForms) -> str | None:
        for candidate in (forms.raw, forms.trimmed):
            if candidate and self.table.is_valid(candidate):
                return candidate
        return None


class _RegexRuleMatcher(Matcher):
    rules: tuple[tuple[str, str], ...] = ()
    fullmatch: bool = True

    def __init__(self) -> None:
        self._compiled = [(re.compile(p), mo) for p, mo in self.rules]

    def match(self, forms: SearchForms) -> str | None:
        text = forms.trimmed.lower()
        for rx, mo in self._compiled:
            hit = rx.fullmatch(text) if self.fullmatch else rx.search(text)
            if hit:
                return mo
        return None


class DisambiguationTrapMatcher(_RegexRuleMatcher):
    name = "disambiguation"
    rules = DISAMBIGUATION_TRAPS
    fullmatch = True


class CoagulaseTextMatcher(_RegexRuleMatcher):
    """Free-text coagulase status, e.g. 'coagulase negative staphylococci' or 'CoNS'."""

    name = "coagulase"
    rules = COAGULASE_PATTERNS
    fullmatch = False


class AcronymMatcher(Matcher):
    name = "acronym"

    def __init__(self, acronyms: dict[str, str] | None = None) -> None:
        source = ACRONYMS if acronyms is None else acronyms
        self.acronyms = {k.upper(): v for k, v in source.items()}

    def match(self, forms: SearchForms) -> str | None:
        return self.acronyms.get(forms.trimmed.upper())

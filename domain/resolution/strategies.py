"""Taxonomy search strategies, in the order the resolver tries them."""

import re

from domain.resolution.base import Matcher
from domain.taxonomy.normalizer import SearchForms, trim_input, wildcard
from domain.taxonomy.table import SiteCodeTable, TaxonomyTable

_LEADING_GRAM = re.compile(r"^gram", re.IGNORECASE)


class _FullnameSearch(Matcher):
    """Regex search over the taxonomy fullname column; subclasses build the pattern."""

    def __init__(self, table: TaxonomyTable) -> None:
        self.table = table

    def pattern(self, forms: SearchForms) -> str | None:
        raise NotImplementedError

    def match(self, forms: SearchForms) -> str | None:
        pattern = self.pattern(forms)
        if not pattern:
            return None
        return self.table.first_match(pattern)


class CollapsedNameSearch(_FullnameSearch):
    """'S aureus' -> ^S.* aureus$ (abbreviated genus, full species)."""

    name = "collapsed"

    def pattern(self, forms: SearchForms) -> str | None:
        return forms.collapsed


class WildcardNameSearch(_FullnameSearch):
    """Same as the collapsed search, without requiring the space."""

    name = "wildcarded"

    def pattern(self, forms: SearchForms) -> str | None:
        return forms.wildcarded


class GenusSpeciesExact(Matcher):
    """
    Bare genus -> '<genus> species' row.

    Runs before any loose search so 'Streptococcus' cannot land on
    'Peptostreptococcus species', which sorts first.
    """

    name = "genus_species_exact"

    def __init__(self, table: TaxonomyTable) -> None:
        self.table = table

    def match(self, forms: SearchForms) -> str | None:
        return self.table.first_equal(forms.species_suffixed)


class GenusSpeciesSearch(_FullnameSearch):
    name = "genus_species_search"

    def pattern(self, forms: SearchForms) -> str | None:
        return forms.species_wildcarded


class SiteCodeLookup(Matcher):
    name = "site_code"

    def __init__(self, codes: SiteCodeTable) -> None:
        self.codes = codes

    def match(self, forms: SearchForms) -> str | None:
        return self.codes.lookup(forms.trimmed)


class SplitBridgeSearch(_FullnameSearch):
    """
    Concatenated abbreviations: split the input in half and bridge genus and species.

    'klpn' -> ^kl.* pn (Klebsiella pneumoniae), 'esco' -> ^es.* co (Escherichia coli).
    """

    name = "split_bridge"

    def pattern(self, forms: SearchForms) -> str | None:
        half = len(forms.trimmed) // 2
        left = forms.trimmed[:half].strip()
        right = forms.trimmed[half:].strip()
        if not left or not right:
            return None
        return f"^{left}.* {right}"


class GramStainSearch(_FullnameSearch):
    """'Gram negative rods' / 'negative rods' -> the Gram stain pseudo-record."""

    name = "gram_stain"

    def pattern(self, forms: SearchForms) -> str | None:
        text = trim_input(_LEADING_GRAM.sub("", forms.trimmed))
        if not text:
            return None
        return wildcard(text, keep_space=False)

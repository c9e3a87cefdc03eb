"""Base interface for resolution strategies."""

from abc import ABC, abstractmethod

from domain.taxonomy.normalizer import SearchForms


class Matcher(ABC):
    """
    One rung of the resolution cascade.

    The resolver evaluates its matchers in order and stops at the first one
    that returns an identifier. Adding a new rule means inserting a matcher
    at the right position in the list, not editing the others.
    """

    name: str = "matcher"

    @abstractmethod
    def match(self, forms: SearchForms) -> str | None:
        """Return an identifier for `forms`, or None to pass to the next matcher."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

"""
DomainName Value Object

Immutable, normalized representation of a user-supplied domain name.
"""

import re
from dataclasses import dataclass
from typing import List

from constants import DomainRules

_LABEL_RE = re.compile(DomainRules.LABEL_PATTERN)
_TLD_RE = re.compile(DomainRules.TLD_PATTERN)
_SCHEME_RE = re.compile(DomainRules.SCHEME_PATTERN)


@dataclass(frozen=True)
class DomainName:
    """
    Domain name value object.

    The value is stripped and lower-cased on construction so that two names
    differing only in case compare equal.
    """

    value: str

    def __post_init__(self):
        """Normalize the stored value."""
        if not isinstance(self.value, str):
            raise TypeError(f"DomainName expects a string, got {type(self.value).__name__}")
        object.__setattr__(self, "value", self.value.strip().lower())

    @property
    def labels(self) -> List[str]:
        """Dot-separated labels, empty labels included."""
        return self.value.split(".")

    def is_empty(self) -> bool:
        return self.value == ""

    def is_too_long(self) -> bool:
        return len(self.value) > DomainRules.MAX_LENGTH

    def has_scheme(self) -> bool:
        """Check for a URI scheme prefix such as https://"""
        return bool(_SCHEME_RE.match(self.value)) or "://" in self.value

    def is_fqdn(self) -> bool:
        """
        Check that the name is a fully qualified domain name.

        Requires at least two labels, every label 1-63 chars of [a-z0-9-]
        without leading/trailing hyphen, and an alphabetic TLD. A trailing dot
        leaves an empty last label and is rejected.

        Returns:
            True if the name is a well-formed FQDN
        """
        if self.is_empty() or self.is_too_long():
            return False

        labels = self.labels
        if len(labels) < 2:
            return False

        if not all(_LABEL_RE.match(label) for label in labels):
            return False

        return bool(_TLD_RE.match(labels[-1]))

    def is_within(self, other: str) -> bool:
        """
        Check whether this name equals or ends with another domain.

        Plain suffix match, so "subdomainexample.com" is within "example.com".

        Args:
            other: Domain to compare against (case-insensitive)
        """
        other = other.strip().lower()
        if not other:
            return False
        return self.value == other or self.value.endswith(other)

    def __str__(self) -> str:
        return self.value

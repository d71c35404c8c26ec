"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- DomainName: Normalized domain name with FQDN checks
"""

from .domain_name import DomainName

__all__ = ["DomainName"]

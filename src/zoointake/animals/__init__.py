"""Animals domain package.

This package contains the arriving animal record and its loader:
- Animal: One arriving animal, enriched with a name before reporting
- ArrivalLoader: Parses the arrivals records file into Animal instances
- ArrivalParseError: Raised for a record whose numeric fields cannot be parsed
"""

from zoointake.animals.arrivals import ArrivalLoader, ArrivalParseError
from zoointake.animals.models import Animal

__all__ = [
    "Animal",
    "ArrivalLoader",
    "ArrivalParseError",
]

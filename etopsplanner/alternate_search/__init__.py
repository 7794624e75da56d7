# etopsplanner/alternate_search/__init__.py
"""
Alternate airport search: scans an airport catalog for diversion candidates
around a position, nearest first.
"""
from .core import AlternateFinder, filter_etops_suitable
from .data_models import Airport, AirportCategory, AlternateCandidate

__all__ = [
    "AlternateFinder",
    "filter_etops_suitable",
    "Airport",
    "AirportCategory",
    "AlternateCandidate"
]

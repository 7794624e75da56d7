# etopsplanner/alternate_search/data_models.py
"""
Defines the airport record held in the airport catalog and the ephemeral
candidate record produced by each alternate search.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..geodesy.data_models import GeoPoint

_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0", ""}

def _parse_flag(value: Any, code: str) -> bool:
    """Reads a catalog flag that may be a JSON boolean or a string such as "false"."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Unrecognised suitable_for_etops value '{value}' for {code}")
    if value is None:
        return False
    return bool(value)

class AirportCategory(str, Enum):
    """Coarse airport classification used by display layers."""
    MAJOR = "major"
    ALTERNATE = "alternate"
    OTHER = "other"

@dataclass(frozen=True)
class Airport:
    """A catalog airport. Coordinates are validated on construction."""
    code: str
    name: str
    lat: float
    lng: float
    category: AirportCategory = AirportCategory.OTHER
    suitable_for_etops: bool = False

    def __post_init__(self):
        point = GeoPoint(self.lat, self.lng)
        object.__setattr__(self, 'lat', point.lat)
        object.__setattr__(self, 'lng', point.lng)
        if not isinstance(self.category, AirportCategory):
            try:
                object.__setattr__(self, 'category', AirportCategory(str(self.category).lower()))
            except ValueError:
                raise ValueError(f"Unknown airport category '{self.category}' for {self.code}") from None

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)

    @classmethod
    def from_dict(cls, code: str, record: Dict[str, Any]) -> "Airport":
        """Builds an Airport from a plain record such as an entry of airports.json."""
        suitable = record.get('suitable_for_etops', record.get('suitableForETOPS', False))
        return cls(
            code=code,
            name=record.get('name', code),
            lat=record.get('lat'),
            lng=record.get('lng', record.get('lon')),
            category=record.get('category') or AirportCategory.OTHER,
            suitable_for_etops=_parse_flag(suitable, code)
        )

@dataclass
class AlternateCandidate:
    """An airport found within range of a position, with its distance."""
    code: str
    name: str
    distance_nm: float
    position: GeoPoint

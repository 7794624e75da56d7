# etopsplanner/alternate_search/core.py
"""
Alternate airport search. The finder holds a column-wise snapshot of an
airport catalog so every query is a single vectorised distance pass.
"""
import logging
from collections.abc import Mapping
from typing import Dict, List

import numpy as np

from .data_models import Airport, AlternateCandidate
from ..geodesy.constants import GeodesyConstants
from ..geodesy.coordinates import as_geo_point, haversine_distance_nm, haversine_distance_nm_array

logger = logging.getLogger(__name__)

class AlternateFinder:
    """Finds every catalog airport within a given range of a position."""

    def __init__(self, airports: Mapping):
        self._airports: List[Airport] = list(airports.values())
        self._lats = np.array([airport.lat for airport in self._airports], dtype=float)
        self._lngs = np.array([airport.lng for airport in self._airports], dtype=float)
        logger.debug(f"AlternateFinder indexed {len(self._airports)} airports.")

    def __len__(self) -> int:
        return len(self._airports)

    def find_alternates(self, position, max_distance_nm: float) -> List[AlternateCandidate]:
        """
        Returns all airports within ``max_distance_nm`` of ``position``,
        nearest first. Ties are broken by airport code. The ETOPS
        suitability flag is not applied here.
        """
        point = as_geo_point(position)
        if not self._airports:
            return []

        # The array pass only narrows the catalog; the range test itself uses
        # the scalar distance so results agree with haversine_distance_nm.
        rough = haversine_distance_nm_array(point.lat, point.lng, self._lats, self._lngs)
        nearby = np.flatnonzero(rough <= max_distance_nm + GeodesyConstants.ARRAY_DISTANCE_TOLERANCE_NM)

        in_range = []
        for i in nearby:
            airport = self._airports[i]
            distance = haversine_distance_nm(point, airport.position)
            if distance <= max_distance_nm:
                in_range.append((distance, airport))
        in_range.sort(key=lambda item: (item[0], item[1].code))

        alternates = []
        for distance, airport in in_range:
            alternates.append(AlternateCandidate(
                code=airport.code,
                name=airport.name,
                distance_nm=distance,
                position=airport.position
            ))
        logger.debug(f"{len(alternates)} alternates within {max_distance_nm:.0f}nm of ({point.lat:.4f}, {point.lng:.4f})")
        return alternates

def filter_etops_suitable(airports: Mapping) -> Dict[str, Airport]:
    """Returns the part of an airport catalog flagged as suitable for ETOPS diversions."""
    return {code: airport for code, airport in airports.items() if airport.suitable_for_etops}

# etopsplanner/route_planner/catalog_loader.py
"""
Loads aircraft and airport catalogs from disk.

JSON catalogs use the layout of the bundled data files: a single object keyed
by aircraft-type or airport code. Airport catalogs can also be imported from
an OurAirports-style CSV export.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

import pandas as pd

from .config import PlannerConfig
from .constants import CatalogFields
from .data_models import Aircraft
from .exceptions import CatalogError
from ..alternate_search.data_models import Airport, AirportCategory

logger = logging.getLogger(__name__)

class CatalogLoader:
    """Reads catalog files into Aircraft and Airport records."""

    CSV_COLUMNS = {'ident', 'name', 'latitude_deg', 'longitude_deg', 'type'}

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    def load_aircraft(self, path: Optional[Path] = None) -> Dict[str, Aircraft]:
        path = Path(path) if path else self.config.aircraft_path
        records = self._read_json(path)
        catalog = {}
        for code, record in records.items():
            try:
                catalog[code] = Aircraft.from_dict(record)
            except (ValueError, TypeError, AttributeError) as e:
                logger.error(f"Invalid aircraft record '{code}' in {path}: {e}")
                raise CatalogError(str(path), f"Invalid aircraft record '{code}': {e}") from e
        logger.info(f"Loaded {len(catalog)} aircraft types from {path}.")
        return catalog

    def load_airports(self, path: Optional[Path] = None) -> Dict[str, Airport]:
        path = Path(path) if path else self.config.airports_path
        records = self._read_json(path)
        catalog = {}
        for code, record in records.items():
            try:
                catalog[code] = Airport.from_dict(code, record)
            except (ValueError, TypeError, AttributeError) as e:
                logger.error(f"Invalid airport record '{code}' in {path}: {e}")
                raise CatalogError(str(path), f"Invalid airport record '{code}': {e}") from e
        logger.info(f"Loaded {len(catalog)} airports from {path}.")
        return catalog

    def load_airports_csv(self, path: Path, codes: Optional[Iterable[str]] = None) -> Dict[str, Airport]:
        """
        Imports airports from an OurAirports-style CSV. Rows are keyed by IATA
        code when present, otherwise by ident. Large airports become 'major',
        medium airports 'alternate'; both are marked suitable for ETOPS.
        """
        path = Path(path)
        try:
            df = pd.read_csv(path, low_memory=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            logger.error(f"Failed to read airport CSV {path}: {e}")
            raise CatalogError(str(path), f"Unreadable airport CSV: {e}") from e

        missing = self.CSV_COLUMNS - set(df.columns)
        if missing:
            raise CatalogError(str(path), f"Missing CSV columns {sorted(missing)}")

        wanted = {code.strip().upper() for code in codes} if codes is not None else None
        catalog = {}
        for row in df.to_dict('records'):
            ident = str(row['ident']).strip().upper()
            iata = row.get('iata_code')
            code = str(iata).strip().upper() if pd.notna(iata) and str(iata).strip() else ident
            if wanted is not None and code not in wanted and ident not in wanted:
                continue
            if code in catalog:
                continue

            airport_type = row['type']
            if airport_type in CatalogFields.CSV_MAJOR_TYPES:
                category = AirportCategory.MAJOR
            elif airport_type in CatalogFields.CSV_ALTERNATE_TYPES:
                category = AirportCategory.ALTERNATE
            else:
                category = AirportCategory.OTHER

            try:
                catalog[code] = Airport(
                    code=code,
                    name=row['name'] if pd.notna(row['name']) else code,
                    lat=row['latitude_deg'],
                    lng=row['longitude_deg'],
                    category=category,
                    suitable_for_etops=category is not AirportCategory.OTHER
                )
            except ValueError as e:
                raise CatalogError(str(path), f"Invalid airport row '{ident}': {e}") from e

        logger.info(f"Imported {len(catalog)} airports from {path}.")
        return catalog

    def load_into(self, calculator) -> None:
        """Loads both configured JSON catalogs and installs them on a calculator."""
        calculator.set_aircraft_data(self.load_aircraft())
        calculator.set_airport_data(self.load_airports())

    def _read_json(self, path: Path) -> dict:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            logger.error(f"Failed to open catalog file {path}: {e}")
            raise CatalogError(str(path), f"Cannot read catalog file: {e}") from e
        except json.JSONDecodeError as e:
            logger.error(f"Failed to decode JSON catalog {path}: {e}")
            raise CatalogError(str(path), f"Malformed JSON: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(str(path), "Catalog must be a JSON object keyed by code")
        return data

"""Airport lookup by IATA or ICAO code, built from a comma-delimited table."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Optional, Sequence, Union

logger = logging.getLogger(__name__)

IATA_COLUMN = "iata_code"
ICAO_COLUMN = "icao_code"
NAME_COLUMN = "name"
CITY_COLUMN = "municipality"
REQUIRED_COLUMNS = (IATA_COLUMN, ICAO_COLUMN, NAME_COLUMN, CITY_COLUMN)

Field = Literal["name", "city"]


class MalformedLookup(ValueError):
    """Raised when the airport lookup table is missing columns or has bad rows."""


@dataclass(frozen=True)
class AirportRecord:
    """Airport details shared by its IATA and ICAO codes."""

    name: str
    city: str


class LookupTable:
    """Read-only mapping from airport code to AirportRecord."""

    def __init__(self, records: Optional[Dict[str, AirportRecord]] = None):
        self._records: Dict[str, AirportRecord] = dict(records or {})

    @classmethod
    def build(cls, rows: Iterable[Sequence[str]], header: Sequence[str]) -> "LookupTable":
        """
        Build a table from header + data rows.

        Each row registers its IATA and ICAO code against the same record.
        The first bad row aborts the build. Later rows overwrite earlier
        ones for duplicate codes.
        """
        columns = [h.strip() for h in header]
        missing = [c for c in REQUIRED_COLUMNS if c not in columns]
        if missing:
            raise MalformedLookup(f"Missing required columns: {', '.join(missing)}")

        iata_idx = columns.index(IATA_COLUMN)
        icao_idx = columns.index(ICAO_COLUMN)
        name_idx = columns.index(NAME_COLUMN)
        city_idx = columns.index(CITY_COLUMN)

        records: Dict[str, AirportRecord] = {}
        for row_no, row in enumerate(rows, start=1):
            if len(row) < len(columns):
                raise MalformedLookup(
                    f"Row {row_no}: expected {len(columns)} fields, got {len(row)}"
                )
            iata = row[iata_idx].strip()
            icao = row[icao_idx].strip()
            name = row[name_idx].strip()
            city = row[city_idx].strip()
            if not (iata and icao and name and city):
                raise MalformedLookup(f"Row {row_no}: blank iata_code, icao_code, name or municipality")

            record = AirportRecord(name=name, city=city)
            records[iata] = record
            records[icao] = record

        logger.debug("Loaded %d airport codes", len(records))
        return cls(records)

    @classmethod
    def from_text(cls, text: str) -> "LookupTable":
        """Parse comma-delimited text (no quoting). First line is the header."""
        lines: List[str] = text.splitlines()
        if not lines or not lines[0].strip():
            raise MalformedLookup("Lookup table has no header")
        header = lines[0].split(",")
        rows = (line.split(",") for line in lines[1:])
        return cls.build(rows, header)

    def get(self, code: str) -> Optional[AirportRecord]:
        """Look up airport by code (case-sensitive). Returns None if not found."""
        return self._records.get(code)

    def lookup(self, code: str, field: Field) -> Optional[str]:
        """Return the record's name or city for code, or None if the code is unknown."""
        if field not in ("name", "city"):
            raise ValueError(f"Unknown lookup field: {field}")
        record = self._records.get(code)
        if record is None:
            return None
        return getattr(record, field)

    def __contains__(self, code: object) -> bool:
        return code in self._records

    def __len__(self) -> int:
        return len(self._records)


def load_lookup(path: Union[str, Path]) -> LookupTable:
    """Load a lookup table from a UTF-8 CSV file."""
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedLookup(f"Lookup table is not valid UTF-8: {e}") from e
    return LookupTable.from_text(text)

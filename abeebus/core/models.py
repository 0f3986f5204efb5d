"""
Data models for Abeebus
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Mapping

NOT_AVAILABLE = "N/A"

REPORT_HEADER = (
    "IP Address", "Hostname", "Country", "Region", "City",
    "Postal Code", "Latitude", "Longitude", "ASN", "Count",
)

class Severity(Enum):
    """Presentation tag for a user-facing notice"""
    INFO = "info"
    SUCCESS = "success"
    HIGHLIGHT = "highlight"
    ERROR = "error"

@dataclass(frozen=True)
class Notice:
    """A message for the user, rendered by the console layer"""
    text: str
    severity: Severity = Severity.INFO

@dataclass
class AddressTally:
    """Occurrence counts over every extracted address"""
    counts: Dict[str, int] = field(default_factory=dict)
    unique: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

@dataclass
class GeoRecord:
    """GeoIP information for one address"""
    ip: str = NOT_AVAILABLE
    hostname: str = NOT_AVAILABLE
    country: str = NOT_AVAILABLE
    region: str = NOT_AVAILABLE
    city: str = NOT_AVAILABLE
    postal: str = NOT_AVAILABLE
    latitude: str = NOT_AVAILABLE
    longitude: str = NOT_AVAILABLE
    org: str = NOT_AVAILABLE

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "GeoRecord":
        """
        Decode an IPinfo-style JSON object

        Args:
            data: Parsed JSON response

        Returns:
            GeoRecord with every field set to a value or NOT_AVAILABLE
        """
        def text(key):
            value = data.get(key)
            if value is None:
                return NOT_AVAILABLE
            # Commas would break the comma-separated report
            return str(value).replace(",", "")

        record = cls(
            ip=text("ip"),
            hostname=text("hostname"),
            country=text("country"),
            region=text("region"),
            city=text("city"),
            postal=text("postal"),
            org=text("org"),
        )

        loc = data.get("loc")
        if loc is not None:
            # Only the first two components are kept
            parts = str(loc).split(",")
            record.latitude = parts[0].strip() or NOT_AVAILABLE
            if len(parts) > 1:
                record.longitude = parts[1].strip() or NOT_AVAILABLE
        return record

@dataclass
class ReportRow:
    """A resolved address with its occurrence count"""
    record: GeoRecord
    count: int

    def fields(self) -> List[str]:
        r = self.record
        return [
            r.ip, r.hostname, r.country, r.region, r.city,
            r.postal, r.latitude, r.longitude, r.org, str(self.count),
        ]

@dataclass
class Report:
    """Header plus rows sorted by count"""
    rows: List[ReportRow] = field(default_factory=list)
    header: tuple = REPORT_HEADER

    def table(self) -> List[List[str]]:
        return [list(self.header)] + [row.fields() for row in self.rows]

    def lines(self) -> List[str]:
        return [",".join(cells) for cells in self.table()]

"""Data models for meet listing processing."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RawListing:
    """Raw meet listing from the USA Weightlifting API."""
    external_id: Optional[str]
    name: str
    address: str
    subtitle: str


@dataclass
class ParsedAddress:
    """Address components extracted from a free-text address."""
    venue_name: str
    street: str
    city: str
    state: str
    zip: str


@dataclass
class ParsedDateRange:
    """ISO start/end dates, both None when the range could not be parsed."""
    start_date: Optional[str]
    end_date: Optional[str]


@dataclass
class MeetRecord:
    """Normalized meet, ready to be stored."""
    name: str
    venue_name: str
    venue_street: str
    venue_city: str
    venue_state: str
    venue_zip: str
    time_zone: str
    start_date: Optional[str]
    end_date: Optional[str]
    status: str = 'upcoming'
    external_id: Optional[str] = None


@dataclass
class SyncResult:
    """Result of sync operation."""
    inserted: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

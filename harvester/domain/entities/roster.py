"""
Roster - ordered, immutable collection of CompanyList records.
Every operation returns a new Roster; the owner swaps its reference.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Optional, Tuple

from .company_list import CompanyList


@dataclass(frozen=True)
class RosterStats:
    """Header numbers shown above the lists table."""

    total_contacts: int = 0
    total_emails_logged: int = 0
    active_lists: int = 0
    last_scan: Optional[date] = None

    @property
    def last_scan_label(self) -> str:
        return self.last_scan.isoformat() if self.last_scan else "N/A"


@dataclass(frozen=True)
class Roster:
    lists: Tuple[CompanyList, ...] = field(default_factory=tuple)

    def __post_init__(self):
        lists = tuple(self.lists)
        ids = [entry.id for entry in lists]
        if len(set(ids)) != len(ids):
            raise ValueError("Duplicate CompanyList id in roster")
        object.__setattr__(self, "lists", lists)

    def __len__(self) -> int:
        return len(self.lists)

    def __iter__(self) -> Iterator[CompanyList]:
        return iter(self.lists)

    def __contains__(self, list_id: object) -> bool:
        return any(entry.id == list_id for entry in self.lists)

    def get(self, list_id: str) -> Optional[CompanyList]:
        for entry in self.lists:
            if entry.id == list_id:
                return entry
        return None

    def find_by_name(self, list_name: str) -> Optional[CompanyList]:
        """Case-sensitive exact match on the list name."""
        for entry in self.lists:
            if entry.list_name == list_name:
                return entry
        return None

    def with_list(self, entry: CompanyList) -> "Roster":
        if entry.id in self:
            raise ValueError(f"CompanyList id {entry.id!r} already in roster")
        return Roster(lists=self.lists + (entry,))

    def replace(self, entry: CompanyList) -> "Roster":
        """Swap the record with the same id, keeping its position."""
        if entry.id not in self:
            raise KeyError(entry.id)
        return Roster(
            lists=tuple(entry if e.id == entry.id else e for e in self.lists)
        )

    def without(self, list_id: str) -> "Roster":
        """Drop a record. Unknown ids return the roster unchanged."""
        if list_id not in self:
            return self
        return Roster(lists=tuple(e for e in self.lists if e.id != list_id))

    @property
    def stats(self) -> RosterStats:
        scanned = [e.last_scan for e in self.lists if e.last_scan is not None]
        return RosterStats(
            total_contacts=sum(e.contacts for e in self.lists),
            total_emails_logged=sum(e.emails_logged for e in self.lists),
            active_lists=sum(1 for e in self.lists if e.is_active),
            last_scan=max(scanned) if scanned else None,
        )

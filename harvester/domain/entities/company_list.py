"""
CompanyList Entity - one roster row on the dashboard.
Summarizes the latest successful harvest for a named list.
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Optional, Tuple


class ListStatus(str, Enum):
    ACTIVE = "active"
    SCANNING = "scanning"
    ERROR = "error"


@dataclass(frozen=True)
class CompanyList:
    """
    Summary record owned by the Roster.
    There is no "deleted" status: deleting a list removes the record.
    """

    id: str
    list_name: str
    domains: Tuple[str, ...] = field(default_factory=tuple)
    contacts: int = 0
    emails_logged: int = 0
    last_scan: Optional[date] = None
    status: ListStatus = ListStatus.ACTIVE
    notion_url: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "domains", tuple(self.domains))

    @classmethod
    def create(
        cls,
        list_name: str,
        contacts: int,
        emails_logged: int,
        last_scan: Optional[date] = None,
        notion_url: Optional[str] = None,
    ) -> "CompanyList":
        """Factory method to create a new list with a generated ID."""
        return cls(
            id=str(uuid.uuid4()),
            list_name=list_name,
            contacts=contacts,
            emails_logged=emails_logged,
            last_scan=last_scan,
            notion_url=notion_url,
        )

    def refreshed(
        self,
        contacts: int,
        emails_logged: int,
        last_scan: date,
        notion_url: Optional[str],
    ) -> "CompanyList":
        """Copy with harvest totals overwritten and status back to active."""
        return replace(
            self,
            contacts=contacts,
            emails_logged=emails_logged,
            last_scan=last_scan,
            notion_url=notion_url,
            status=ListStatus.ACTIVE,
        )

    @property
    def is_active(self) -> bool:
        return self.status == ListStatus.ACTIVE

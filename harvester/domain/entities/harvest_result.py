"""
HarvestResult - normalized output of one successful agent run.
Only the most recent one is kept (see DashboardState).
"""

from dataclasses import dataclass, field
from typing import Tuple

from .contact import Contact
from .scan_date_range import ScanDateRange


@dataclass(frozen=True)
class HarvestResult:
    """
    Totals reported by the agent plus the contacts it touched.

    contacts_added are strictly new; contacts_updated may overlap contacts
    already known from earlier harvests. Both are bounded by total_contacts.
    """

    list_name: str
    notion_database_url: str
    contacts_added: int
    contacts_updated: int
    total_contacts: int
    total_emails_logged: int
    scan_date_range: ScanDateRange
    contacts: Tuple[Contact, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Callers may pass any sequence; stored as a tuple.
        object.__setattr__(self, "contacts", tuple(self.contacts))

        if self.total_contacts != len(self.contacts):
            raise ValueError(
                f"total_contacts={self.total_contacts} but "
                f"{len(self.contacts)} contacts were returned"
            )
        if self.contacts_added + self.contacts_updated > self.total_contacts:
            raise ValueError(
                f"contacts_added + contacts_updated "
                f"({self.contacts_added} + {self.contacts_updated}) "
                f"exceeds total_contacts={self.total_contacts}"
            )
        emails = [c.email for c in self.contacts]
        if len(set(emails)) != len(emails):
            raise ValueError("Duplicate contact email in harvest result")

    def find_contact(self, email: str) -> Contact:
        for contact in self.contacts:
            if contact.email == email:
                return contact
        raise KeyError(email)

    def summary(self) -> str:
        """Success line shown once the scan completes."""
        return (
            f'Scan completed successfully for "{self.list_name}": '
            f"{self.contacts_added} new contacts added, "
            f"{self.contacts_updated} updated. "
            f"Total: {self.total_contacts} contacts, "
            f"{self.total_emails_logged} emails logged."
        )

    def to_dict(self) -> dict:
        return {
            "list_name": self.list_name,
            "notion_database_url": self.notion_database_url,
            "contacts_added": self.contacts_added,
            "contacts_updated": self.contacts_updated,
            "total_contacts": self.total_contacts,
            "total_emails_logged": self.total_emails_logged,
            "scan_date_range": self.scan_date_range.to_dict(),
            "contacts": [c.to_dict() for c in self.contacts],
        }

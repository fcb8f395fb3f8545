"""
Contact Entity - one person found by a harvest.
Immutable snapshot: a newer harvest replaces it wholesale.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """A tracked person at one of the harvested company domains."""

    name: str
    email: str  # Unique within a single harvest
    company: str
    email_count: int
    last_interaction: str
    notion_page_url: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "company": self.company,
            "email_count": self.email_count,
            "last_interaction": self.last_interaction,
            "notion_page_url": self.notion_page_url,
        }

"""
Wire schemas for the harvest agent's result payload.

Validation is strict: a field of the wrong JSON type is a contract
violation, not something to coerce.
"""

from typing import List

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator, model_validator

from ..domain.entities.contact import Contact
from ..domain.entities.harvest_result import HarvestResult
from ..domain.entities.scan_date_range import ISO_DATE_PATTERN, ScanDateRange, parse_iso_date


class ContactPayload(BaseModel):
    name: StrictStr
    email: StrictStr
    company: StrictStr
    email_count: StrictInt = Field(ge=0)
    last_interaction: StrictStr
    notion_page_url: StrictStr

    def to_entity(self) -> Contact:
        return Contact(
            name=self.name,
            email=self.email,
            company=self.company,
            email_count=self.email_count,
            last_interaction=self.last_interaction,
            notion_page_url=self.notion_page_url,
        )


class ScanDateRangePayload(BaseModel):
    start: StrictStr = Field(pattern=ISO_DATE_PATTERN)
    end: StrictStr = Field(pattern=ISO_DATE_PATTERN)

    @field_validator("start", "end")
    @classmethod
    def check_iso_date(cls, value: str) -> str:
        parse_iso_date(value)
        return value

    @model_validator(mode="after")
    def check_order(self) -> "ScanDateRangePayload":
        if parse_iso_date(self.start) > parse_iso_date(self.end):
            raise ValueError("scan_date_range start is after end")
        return self

    def to_entity(self) -> ScanDateRange:
        return ScanDateRange(
            start=parse_iso_date(self.start),
            end=parse_iso_date(self.end),
        )


class HarvestResultPayload(BaseModel):
    list_name: StrictStr
    notion_database_url: StrictStr
    contacts_added: StrictInt = Field(ge=0)
    contacts_updated: StrictInt = Field(ge=0)
    total_contacts: StrictInt = Field(ge=0)
    total_emails_logged: StrictInt = Field(ge=0)
    scan_date_range: ScanDateRangePayload
    contacts: List[ContactPayload]

    def to_entity(self) -> HarvestResult:
        """Raises ValueError when the totals contradict the contact list."""
        return HarvestResult(
            list_name=self.list_name,
            notion_database_url=self.notion_database_url,
            contacts_added=self.contacts_added,
            contacts_updated=self.contacts_updated,
            total_contacts=self.total_contacts,
            total_emails_logged=self.total_emails_logged,
            scan_date_range=self.scan_date_range.to_entity(),
            contacts=tuple(c.to_entity() for c in self.contacts),
        )

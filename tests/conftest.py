"""
Root conftest.py — shared fixtures and helpers for the entire test suite.

Provides:
- Contact / HarvestResult / CompanyList factory helpers
- Raw agent envelope factories (wire-shaped dicts)
- Mock transport and client fixtures (for use-case tests)
"""

import uuid
from datetime import date
from typing import List, Optional
from unittest.mock import AsyncMock

import pytest

from harvester.domain.entities.company_list import CompanyList, ListStatus
from harvester.domain.entities.contact import Contact
from harvester.domain.entities.harvest_result import HarvestResult
from harvester.domain.entities.roster import Roster
from harvester.domain.entities.scan_date_range import ScanDateRange
from harvester.use_cases.invoke_agent import InvocationErrorKind, InvocationResult


# ─────────────────────────────────────────────────────────────────────────────
# Domain object factories
# ─────────────────────────────────────────────────────────────────────────────


def make_contact(
    name: str = "John Smith",
    email: str = "john.smith@acme.com",
    company: str = "Acme Corp",
    email_count: int = 5,
    last_interaction: str = "2026-01-14",
    notion_page_url: str = "https://notion.so/page/john123",
) -> Contact:
    """Create a Contact with sensible test defaults."""
    return Contact(
        name=name,
        email=email,
        company=company,
        email_count=email_count,
        last_interaction=last_interaction,
        notion_page_url=notion_page_url,
    )


def make_contacts(count: int = 2) -> List[Contact]:
    return [
        make_contact(
            name=f"Person {i}",
            email=f"person{i}@acme.com",
            notion_page_url=f"https://notion.so/page/p{i}",
        )
        for i in range(count)
    ]


def make_harvest_result(
    list_name: str = "Acme Partners",
    notion_database_url: str = "https://x/db1",
    contacts_added: int = 2,
    contacts_updated: int = 0,
    total_emails_logged: int = 17,
    start: date = date(2026, 1, 1),
    end: date = date(2026, 1, 31),
    contacts: Optional[List[Contact]] = None,
) -> HarvestResult:
    """Create a HarvestResult whose totals match its contact list."""
    contacts = make_contacts(2) if contacts is None else contacts
    return HarvestResult(
        list_name=list_name,
        notion_database_url=notion_database_url,
        contacts_added=contacts_added,
        contacts_updated=contacts_updated,
        total_contacts=len(contacts),
        total_emails_logged=total_emails_logged,
        scan_date_range=ScanDateRange(start=start, end=end),
        contacts=contacts,
    )


def make_company_list(
    list_name: str = "Acme Corp",
    domains=("acme.com", "acmecorp.io"),
    contacts: int = 47,
    emails_logged: int = 234,
    last_scan: Optional[date] = date(2026, 1, 15),
    status: ListStatus = ListStatus.ACTIVE,
    notion_url: Optional[str] = "https://notion.so/database/acme123",
    list_id: Optional[str] = None,
) -> CompanyList:
    """Create a CompanyList with sensible test defaults."""
    return CompanyList(
        id=list_id or str(uuid.uuid4()),
        list_name=list_name,
        domains=domains,
        contacts=contacts,
        emails_logged=emails_logged,
        last_scan=last_scan,
        status=status,
        notion_url=notion_url,
    )


def make_roster(*entries: CompanyList) -> Roster:
    return Roster(lists=entries)


# ─────────────────────────────────────────────────────────────────────────────
# Wire-shaped payload factories
# ─────────────────────────────────────────────────────────────────────────────


def make_result_payload(**overrides) -> dict:
    """Raw result object as the agent sends it."""
    payload = {
        "list_name": "Acme Partners",
        "notion_database_url": "https://x/db1",
        "contacts_added": 2,
        "contacts_updated": 0,
        "total_contacts": 2,
        "total_emails_logged": 17,
        "scan_date_range": {"start": "2026-01-01", "end": "2026-01-31"},
        "contacts": [
            {
                "name": "John Smith",
                "email": "john.smith@acme.com",
                "company": "Acme Corp",
                "email_count": 5,
                "last_interaction": "2026-01-14",
                "notion_page_url": "https://notion.so/page/john123",
            },
            {
                "name": "Sarah Johnson",
                "email": "sarah.j@acme.com",
                "company": "Acme Corp",
                "email_count": 12,
                "last_interaction": "2026-01-13",
                "notion_page_url": "https://notion.so/page/sarah456",
            },
        ],
    }
    payload.update(overrides)
    return payload


def make_success_envelope(**overrides) -> dict:
    return {"status": "success", "result": make_result_payload(**overrides)}


def make_failure(
    kind: InvocationErrorKind = InvocationErrorKind.REJECTED,
    message: str = "Domain not allowed",
) -> InvocationResult:
    return InvocationResult.failure(kind, message=message)


# ─────────────────────────────────────────────────────────────────────────────
# Mock fixtures (inject into use-case tests)
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def mock_transport():
    """AsyncMock for IAgentTransport. Defaults to a successful envelope."""
    mock = AsyncMock()
    mock.send.return_value = make_success_envelope()
    return mock


@pytest.fixture
def mock_client():
    """AsyncMock for AgentInvocationClient. Defaults to a successful harvest."""
    mock = AsyncMock()
    mock.invoke.return_value = InvocationResult.ok(make_harvest_result())
    return mock


@pytest.fixture
def sample_result():
    return make_harvest_result()

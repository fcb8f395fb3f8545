"""
Tests for the Contact and CompanyList entities.
"""

import dataclasses
import uuid
from datetime import date

import pytest

from harvester.domain.entities.company_list import CompanyList, ListStatus
from tests.conftest import make_company_list, make_contact


# ─────────────────────────────────────────────────────────────────────────────
# Contact
# ─────────────────────────────────────────────────────────────────────────────


class TestContact:
    def test_contact_is_immutable(self):
        contact = make_contact()
        with pytest.raises(dataclasses.FrozenInstanceError):
            contact.email_count = 99  # type: ignore

    def test_to_dict_matches_wire_shape(self):
        contact = make_contact(
            name="Sarah Johnson",
            email="sarah.j@acme.com",
            email_count=12,
            last_interaction="2026-01-13",
            notion_page_url="https://notion.so/page/sarah456",
        )
        assert contact.to_dict() == {
            "name": "Sarah Johnson",
            "email": "sarah.j@acme.com",
            "company": "Acme Corp",
            "email_count": 12,
            "last_interaction": "2026-01-13",
            "notion_page_url": "https://notion.so/page/sarah456",
        }

    def test_equal_snapshots_compare_equal(self):
        assert make_contact() == make_contact()


# ─────────────────────────────────────────────────────────────────────────────
# CompanyList
# ─────────────────────────────────────────────────────────────────────────────


class TestCompanyListCreate:
    def test_create_generates_uuid(self):
        entry = CompanyList.create(list_name="Acme", contacts=1, emails_logged=2)
        uuid.UUID(entry.id)

    def test_create_generates_unique_ids(self):
        ids = {CompanyList.create("Acme", 0, 0).id for _ in range(50)}
        assert len(ids) == 50

    def test_create_defaults_to_active_with_no_domains(self):
        entry = CompanyList.create(list_name="Acme", contacts=1, emails_logged=2)
        assert entry.status == ListStatus.ACTIVE
        assert entry.domains == ()
        assert entry.is_active is True

    def test_domains_stored_as_tuple(self):
        entry = make_company_list(domains=["a.com", "b.com"])
        assert entry.domains == ("a.com", "b.com")


class TestCompanyListRefreshed:
    def test_overwrites_counts(self):
        entry = make_company_list(contacts=47, emails_logged=234)
        updated = entry.refreshed(
            contacts=3, emails_logged=9, last_scan=date(2026, 2, 1), notion_url="https://n/db"
        )
        assert updated.contacts == 3
        assert updated.emails_logged == 9

    def test_keeps_identity_and_domains(self):
        entry = make_company_list()
        updated = entry.refreshed(3, 9, date(2026, 2, 1), "https://n/db")
        assert updated.id == entry.id
        assert updated.list_name == entry.list_name
        assert updated.domains == entry.domains

    @pytest.mark.parametrize("status", [ListStatus.SCANNING, ListStatus.ERROR])
    def test_forces_status_active(self, status):
        entry = make_company_list(status=status)
        updated = entry.refreshed(3, 9, date(2026, 2, 1), "https://n/db")
        assert updated.status == ListStatus.ACTIVE

    def test_does_not_mutate_original(self):
        entry = make_company_list(contacts=47)
        entry.refreshed(3, 9, date(2026, 2, 1), "https://n/db")
        assert entry.contacts == 47

    def test_status_values_match_wire_strings(self):
        assert [s.value for s in ListStatus] == ["active", "scanning", "error"]

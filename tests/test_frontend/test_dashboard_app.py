"""
Tests for the Streamlit dashboard page, driven through streamlit's AppTest.
Only the Add Company List form is exercised; no scan is submitted.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[2] / "harvester" / "frontend" / "app.py"

REQUIRED_ENV = {
    "AGENT_API_URL": "https://agents.example.com/v3/inference/chat/",
    "AGENT_API_KEY": "key-123",
    "AGENT_ID": "agent-abc",
}


@pytest.fixture
def app(monkeypatch):
    for key, val in REQUIRED_ENV.items():
        monkeypatch.setenv(key, val)
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def click(at: AppTest, label: str) -> AppTest:
    button = next(b for b in at.button if b.label == label)
    return button.click().run()


class TestAddDomain:
    def test_adds_domain_to_pending_list(self, app):
        app.text_input(key="domain_input").input(" acme.com ")
        click(app, "Add domain")
        assert app.session_state["pending_domains"] == ["acme.com"]

    def test_clears_domain_input_after_adding(self, app):
        app.text_input(key="domain_input").input("acme.com")
        click(app, "Add domain")
        assert app.text_input(key="domain_input").value == ""

    def test_duplicate_domain_not_added_twice(self, app):
        for _ in range(2):
            app.text_input(key="domain_input").input("acme.com")
            click(app, "Add domain")
        assert app.session_state["pending_domains"] == ["acme.com"]

    def test_blank_domain_ignored(self, app):
        app.text_input(key="domain_input").input("   ")
        click(app, "Add domain")
        assert app.session_state["pending_domains"] == []


class TestCloseAddForm:
    def test_close_flag_clears_form_on_next_run(self, app):
        app.text_input(key="list_name_input").input("Acme Partners")
        app.text_input(key="domain_input").input("acme.com")
        click(app, "Add domain")

        app.session_state["clear_add_form"] = True
        app.run()

        assert app.session_state["pending_domains"] == []
        assert app.text_input(key="list_name_input").value == ""

"""
Email Harvester Dashboard — Streamlit Frontend
Two views:
  1. Company Lists: roster table, stats and the "Add Company List" form
  2. Scan Results: contacts from the latest harvest plus a detail panel
"""

import asyncio
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Allow running from any directory
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from harvester.domain.entities.company_list import ListStatus
from harvester.infrastructure.config import Config
from harvester.infrastructure.container import Container
from harvester.use_cases.dashboard_state import VIEW_LISTS, VIEW_SCAN_RESULTS
from harvester.use_cases.request_lifecycle import (
    HarvestRequest,
    LifecycleState,
    normalize_domains,
)
from harvester.use_cases.resolve_date_range import CUSTOM_PRESET, DATE_PRESETS

# ─────────────────────────────────────────────────────────────────────────────
# Page config
# ─────────────────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Email Harvester",
    page_icon="📇",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def close_add_form() -> None:
    """Clear the Add Company List form on the next run, before its widgets render."""
    st.session_state["clear_add_form"] = True


def get_container() -> Container:
    """One container per browser session; the roster lives inside it."""
    if "container" not in st.session_state:
        st.session_state["container"] = Container(Config.from_env(), on_close=close_add_form)
    return st.session_state["container"]


def add_pending_domain() -> None:
    st.session_state["pending_domains"] = normalize_domains(
        st.session_state["pending_domains"] + [st.session_state["domain_input"]]
    )
    st.session_state["domain_input"] = ""


def run_async(coro):
    """Run an async coroutine from sync Streamlit context."""
    try:
        loop = asyncio.get_event_loop()
        if loop.is_closed():
            raise RuntimeError
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
    return loop.run_until_complete(coro)


STATUS_ICONS = {
    ListStatus.ACTIVE: "🟢",
    ListStatus.SCANNING: "🔄",
    ListStatus.ERROR: "🔴",
}

VIEW_LABELS = {
    VIEW_LISTS: "Company Lists",
    VIEW_SCAN_RESULTS: "Scan Results",
}


try:
    container = get_container()
except EnvironmentError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

dashboard = container.dashboard
controller = container.lifecycle
st.session_state.setdefault("pending_domains", [])
if st.session_state.pop("clear_add_form", False):
    st.session_state["pending_domains"] = []
    st.session_state["list_name_input"] = ""

# ─────────────────────────────────────────────────────────────────────────────
# Sidebar Navigation
# ─────────────────────────────────────────────────────────────────────────────
st.sidebar.title("📇 Email Harvester")
st.sidebar.caption("Contacts from your email history, synced to Notion")
st.sidebar.divider()

views = list(VIEW_LABELS)
page = st.sidebar.radio(
    "Navigate",
    views,
    index=views.index(dashboard.active_view),
    format_func=VIEW_LABELS.get,
)
dashboard.show(page)

# ─────────────────────────────────────────────────────────────────────────────
# Stats
# ─────────────────────────────────────────────────────────────────────────────
st.title(VIEW_LABELS[page])

stats = dashboard.stats
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Contacts", stats.total_contacts)
c2.metric("Active Lists", stats.active_lists)
c3.metric("Last Scan", stats.last_scan_label)
c4.metric("Emails Logged", stats.total_emails_logged)

st.divider()

# ─────────────────────────────────────────────────────────────────────────────
# Page: Company Lists
# ─────────────────────────────────────────────────────────────────────────────
if page == VIEW_LISTS:
    st.caption("Manage your email harvesting lists and view contact databases")

    with st.expander("➕ Add Company List", expanded=controller.state != LifecycleState.IDLE):
        list_name = st.text_input(
            "List Name", placeholder="e.g., Acme Corp Partners", key="list_name_input"
        )

        d1, d2 = st.columns([4, 1])
        with d1:
            st.text_input("Company Domains", placeholder="e.g., acme.com", key="domain_input")
        with d2:
            st.write("")
            st.button("Add domain", on_click=add_pending_domain)

        for domain in list(st.session_state["pending_domains"]):
            if st.button(f"✕ {domain}", key=f"remove-{domain}"):
                st.session_state["pending_domains"].remove(domain)
                st.rerun()

        preset = st.selectbox(
            "Date Range",
            list(DATE_PRESETS),
            format_func=DATE_PRESETS.get,
        )
        custom_start = custom_end = None
        if preset == CUSTOM_PRESET:
            r1, r2 = st.columns(2)
            custom_start = r1.date_input("Start Date", value=None)
            custom_end = r2.date_input("End Date", value=None)

        ready = bool(list_name.strip()) and bool(st.session_state["pending_domains"])
        if st.button(
            "Create & Scan",
            type="primary",
            use_container_width=True,
            disabled=not ready or controller.in_flight,
        ):
            with st.spinner("Creating & Scanning..."):
                run_async(
                    controller.submit(
                        HarvestRequest(
                            list_name=list_name,
                            domains=st.session_state["pending_domains"],
                            preset=preset,
                            custom_start=custom_start,
                            custom_end=custom_end,
                        )
                    )
                )

        if controller.state == LifecycleState.SUCCEEDED:
            st.success(controller.message)
            # The auto-reset timer only fires while the event loop runs.
            run_async(asyncio.sleep(controller.reset_delay))
            if controller.state == LifecycleState.SUCCEEDED:
                controller.reset()
                close_add_form()
            st.rerun()
        elif controller.state == LifecycleState.FAILED:
            st.error(controller.message)
            if st.button("Dismiss"):
                controller.reset()
                st.rerun()

    if not len(dashboard.roster):
        st.info("No company lists yet. Add one above to run your first scan.")
        st.stop()

    header = st.columns([3, 3, 1, 1, 2, 1, 2, 1])
    for col, label in zip(
        header,
        ["List Name", "Domains", "Contacts", "Emails", "Last Scan", "Status", "Notion", ""],
    ):
        col.markdown(f"**{label}**")

    for entry in dashboard.roster:
        row = st.columns([3, 3, 1, 1, 2, 1, 2, 1])
        row[0].write(entry.list_name)
        row[1].write(", ".join(entry.domains) or "—")
        row[2].write(entry.contacts)
        row[3].write(entry.emails_logged)
        row[4].write(entry.last_scan.isoformat() if entry.last_scan else "—")
        row[5].write(f"{STATUS_ICONS.get(entry.status, '❓')} {entry.status.value}")
        if entry.notion_url:
            row[6].markdown(f"[Open in Notion]({entry.notion_url})")
        if row[7].button("🗑", key=f"delete-{entry.id}"):
            dashboard.delete_list(entry.id)
            st.rerun()

# ─────────────────────────────────────────────────────────────────────────────
# Page: Scan Results
# ─────────────────────────────────────────────────────────────────────────────
elif page == VIEW_SCAN_RESULTS:
    st.caption("View detailed scan results and contact information")

    result = dashboard.last_result
    if result is None:
        st.info("No scan has been run in this session. Go to **Company Lists** to start one.")
        st.stop()

    st.success(result.summary())
    st.markdown(f"[View Notion Database]({result.notion_database_url})")

    left, right = st.columns([2, 1])
    with left:
        st.subheader(f"{result.total_contacts} contacts found")
        df = pd.DataFrame(
            [
                {
                    "Name": c.name,
                    "Email": c.email,
                    "Company": c.company,
                    "Emails": c.email_count,
                    "Last Interaction": c.last_interaction,
                }
                for c in result.contacts
            ]
        )
        st.dataframe(df, use_container_width=True, hide_index=True)

        emails = [c.email for c in result.contacts]
        if emails:
            chosen = st.selectbox("Contact details", emails)
            dashboard.select_contact(chosen)

    with right:
        contact = dashboard.selected_contact
        if contact is None:
            st.info("Select a contact to preview their email log.")
        else:
            st.subheader(contact.name)
            st.write(contact.email)
            st.write(f"**Company:** {contact.company}")
            st.metric("Emails", contact.email_count)
            st.write(f"**Last interaction:** {contact.last_interaction}")
            st.markdown(f"[View full email log in Notion]({contact.notion_page_url})")

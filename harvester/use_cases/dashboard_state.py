"""
DashboardState - the single owner of everything the dashboard displays.

Writers:
  apply_harvest() : roster harvest fields + the last scan result
  delete_list()   : roster removals
  select_contact() / show(): view-only selections
"""

import logging
from typing import Optional

from ..domain.entities.contact import Contact
from ..domain.entities.harvest_result import HarvestResult
from ..domain.entities.roster import Roster, RosterStats
from .merge_harvest_result import merge_harvest_result

logger = logging.getLogger(__name__)

VIEW_LISTS = "lists"
VIEW_SCAN_RESULTS = "scan-results"


class DashboardState:
    def __init__(self, roster: Optional[Roster] = None):
        self.roster = roster if roster is not None else Roster()
        self.last_result: Optional[HarvestResult] = None
        self.selected_contact: Optional[Contact] = None
        self.active_view = VIEW_LISTS

    def apply_harvest(self, result: HarvestResult) -> None:
        self.roster, self.last_result = merge_harvest_result(self.roster, result)
        self.selected_contact = None
        self.active_view = VIEW_SCAN_RESULTS

    def delete_list(self, list_id: str) -> None:
        entry = self.roster.get(list_id)
        if entry is None:
            logger.debug(f"[Dashboard] delete_list: no list with id={list_id}")
            return
        self.roster = self.roster.without(list_id)
        logger.info(f"[Dashboard] Deleted list {entry.list_name!r} | id={list_id}")

    def select_contact(self, email: str) -> Contact:
        """Pick a contact from the last scan result for the detail panel."""
        if self.last_result is None:
            raise KeyError(email)
        self.selected_contact = self.last_result.find_contact(email)
        return self.selected_contact

    def show(self, view: str) -> None:
        if view not in (VIEW_LISTS, VIEW_SCAN_RESULTS):
            raise ValueError(f"Unknown view {view!r}")
        self.active_view = view

    @property
    def stats(self) -> RosterStats:
        return self.roster.stats

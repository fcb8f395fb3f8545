"""
HarvestResultMerger - folds a successful harvest into the roster.

The agent reports cumulative totals, not deltas, so an existing list's
counts are overwritten rather than summed.
"""

import logging
import uuid
from typing import Callable, Optional, Tuple

from ..domain.entities.company_list import CompanyList, ListStatus
from ..domain.entities.harvest_result import HarvestResult
from ..domain.entities.roster import Roster

logger = logging.getLogger(__name__)


def _new_list_id() -> str:
    return str(uuid.uuid4())


def merge_harvest_result(
    roster: Roster,
    result: HarvestResult,
    new_id: Optional[Callable[[], str]] = None,
) -> Tuple[Roster, HarvestResult]:
    """
    Returns (updated roster, result to display). Never fails for a
    HarvestResult that passed validation.
    """
    existing = roster.find_by_name(result.list_name)

    if existing is None:
        entry = CompanyList(
            id=(new_id or _new_list_id)(),
            list_name=result.list_name,
            domains=(),
            contacts=result.total_contacts,
            emails_logged=result.total_emails_logged,
            last_scan=result.scan_date_range.end,
            status=ListStatus.ACTIVE,
            notion_url=result.notion_database_url,
        )
        logger.info(
            f"[Merge] New list {entry.list_name!r} | id={entry.id} | "
            f"contacts={entry.contacts} | emails_logged={entry.emails_logged}"
        )
        return roster.with_list(entry), result

    entry = existing.refreshed(
        contacts=result.total_contacts,
        emails_logged=result.total_emails_logged,
        last_scan=result.scan_date_range.end,
        notion_url=result.notion_database_url,
    )
    logger.info(
        f"[Merge] Refreshed list {entry.list_name!r} | id={entry.id} | "
        f"contacts {existing.contacts}→{entry.contacts} | "
        f"emails_logged {existing.emails_logged}→{entry.emails_logged}"
    )
    return roster.replace(entry), result

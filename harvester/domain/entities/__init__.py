from .contact import Contact
from .scan_date_range import ScanDateRange, InvalidRangeError
from .harvest_result import HarvestResult
from .company_list import CompanyList, ListStatus
from .roster import Roster, RosterStats

__all__ = [
    "Contact",
    "ScanDateRange",
    "InvalidRangeError",
    "HarvestResult",
    "CompanyList",
    "ListStatus",
    "Roster",
    "RosterStats",
]

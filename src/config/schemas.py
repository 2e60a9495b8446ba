"""Schema definitions for payloads returned by the Registration Statistics Service."""

from typing import TypedDict, List


class TotalRegistrations(TypedDict):
    total: int


class ProgrammeCount(TypedDict):
    study_programme: str
    count: int


class YearCount(TypedDict):
    academic_year: str
    count: int


class SchoolCount(TypedDict):
    secondary_school: str
    count: int


ProgrammeBreakdown = List[ProgrammeCount]
YearBreakdown = List[YearCount]
TopSchools = List[SchoolCount]  # at most TOP_SCHOOLS_LIMIT entries

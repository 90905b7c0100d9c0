import logging
from typing import Any, Iterable, List, Optional, Sequence, Union

from ..models import SurveyRow, TutorAvailability, WeeklyShifts
from ..survey import MERGED_DAYS, decode_survey_row

logger = logging.getLogger(__name__)

RawRow = Union[SurveyRow, Sequence[Any]]


def merge_day_hours(individual: Optional[str], group: Optional[str]) -> str:
    """Combine individual and group hours for one day, individual hours first."""
    if not individual and not group:
        return ""
    if not group:
        return individual
    if not individual:
        return group
    return f"{individual}, {group}"


def normalize_shift_list(raw_field: str) -> List[str]:
    """'9-10 AM, 10-11 AM' -> ['9-10', '10-11']"""
    if not raw_field:
        return []
    return [entry.split(" ", 1)[0] for entry in raw_field.split(", ")]


def split_courses(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    # order of first appearance is kept
    return list(dict.fromkeys(raw.split()))


def build_tutor_availability(row: RawRow, row_label: Optional[str] = None) -> TutorAvailability:
    if not isinstance(row, SurveyRow):
        row = decode_survey_row(row, row_label=row_label)

    merged = [merge_day_hours(getattr(row, ind), getattr(row, grp)) for _, ind, grp in MERGED_DAYS]
    merged.append(row.friday)
    merged.insert(0, row.sunday)

    shifts = {
        day: normalize_shift_list(hours) if hours else []
        for day, hours in zip(WeeklyShifts.days(), merged)
    }
    return TutorAvailability(
        name=row.name,
        email=row.email,
        major=row.major,
        level=row.level,
        courses=split_courses(row.courses),
        shifts=WeeklyShifts(**shifts),
    )


def parse_all_respondents(rows: Iterable[RawRow], first_row: int = 2) -> List[TutorAvailability]:
    """Build one `TutorAvailability` per survey row, in input order.

    `first_row` is the sheet row number of the first entry and is only used
    to label diagnostics.
    """
    tutors = [
        build_tutor_availability(row, row_label=str(first_row + i))
        for i, row in enumerate(rows)
    ]
    if not tutors:
        logger.info("No survey rows found; nothing to parse")
    else:
        logger.debug("Parsed %d respondents", len(tutors))
    return tutors

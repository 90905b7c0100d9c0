from typing import List

from .config import ScheduleConfig
from .grid.validation import region_spans_ok, regions_complete, regions_disjoint
from .models import ShiftRegion, TutorAvailability, WeeklyShifts


def availability_counts(tutors: List[TutorAvailability]):
    """Number of tutors with at least one shift, per day."""
    return {day: sum(1 for t in tutors if t.shifts[day]) for day in WeeklyShifts.days()}


def summary(regions: List[ShiftRegion], tutors: List[TutorAvailability], config: ScheduleConfig) -> str:
    ok_complete = regions_complete(regions, config)
    ok_disjoint = regions_disjoint(regions)
    ok_spans = region_spans_ok(regions, config)
    counts = availability_counts(tutors)
    per_day = "  ".join(f"{day.capitalize()[:3]}: {n}" for day, n in counts.items())
    warning = ""
    if not tutors:
        warning = "Warning: no survey responses found; grid left blank.\n"
    return (
        f"Days: {len(config.days)}  Shifts: {len(config.shifts)}  Slots per shift: {config.max_tutors}\n"
        f"Regions: {len(regions)}  Rows: {config.starting_row}-{config.last_row}\n"
        f"Valid (complete): {ok_complete}  Valid (disjoint): {ok_disjoint}  Valid (spans): {ok_spans}\n"
        f"Tutors: {len(tutors)}\n"
        f"Available per day: {per_day}\n"
        f"{warning}"
    )

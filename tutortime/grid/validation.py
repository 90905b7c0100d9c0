from typing import List, Set, Tuple

from ..config import ScheduleConfig
from ..models import ShiftRegion


def regions_disjoint(regions: List[ShiftRegion]) -> bool:
    by_column = {}
    for r in regions:
        by_column.setdefault(r.column, []).append(r)
    for column_regions in by_column.values():
        column_regions.sort(key=lambda r: r.start_row)
        for prev, cur in zip(column_regions, column_regions[1:]):
            if prev.overlaps(cur):
                return False
    return True


def regions_complete(regions: List[ShiftRegion], config: ScheduleConfig) -> bool:
    """True when each (day, shift) pair appears once, in day-major order."""
    expected = [(d, t) for d in config.days for t in config.shifts]
    return [(r.day, r.time) for r in regions] == expected


def region_spans_ok(regions: List[ShiftRegion], config: ScheduleConfig) -> bool:
    seen: Set[Tuple[str, int]] = set()
    for r in regions:
        if r.end_row - r.start_row + 1 != config.max_tutors:
            return False
        if r.start_row < config.starting_row or r.end_row > config.last_row:
            return False
        key = (r.column, r.start_row)
        if key in seen:
            return False
        seen.add(key)
    return True

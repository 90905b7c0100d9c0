from typing import List

from ..config import DEFAULT_CONFIG, ScheduleConfig
from ..models import ShiftRegion


def a1_range(column: str, start_row: int, end_row: int) -> str:
    return f"{column}{start_row}:{column}{end_row}"


def generate_all_shift_regions(config: ScheduleConfig = DEFAULT_CONFIG) -> List[ShiftRegion]:
    """Every (day, shift) block of the grid, day-major then shift-minor.

    Callers zip this list with per-region formatting, so the order must follow
    `config.days` and `config.shifts` exactly.
    """
    regions: List[ShiftRegion] = []
    for i, day in enumerate(config.days):
        column = config.columns[i]
        start_row = config.starting_row
        for time in config.shifts:
            end_row = start_row + config.max_tutors - 1
            regions.append(ShiftRegion(
                day=day,
                time=time,
                cell_range=a1_range(column, start_row, end_row),
                column=column,
                start_row=start_row,
                end_row=end_row,
            ))
            start_row += config.max_tutors
    return regions

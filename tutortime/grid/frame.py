from typing import List

import pandas as pd

from ..config import DEFAULT_CONFIG, ScheduleConfig
from ..models import TutorAvailability, WeeklyShifts
from .layout import generate_all_shift_regions

HEADER_ROW = 1
TUTOR_COLUMNS = ["name", "email", "major", "level", "courses"]


def build_grid_frame(config: ScheduleConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """Blank calendar sheet indexed by sheet row number.

    Row 1 holds the header (unless the grid itself starts there); the first row of every region carries its shift
    label in the time column. Every other cell is an empty string.
    """
    columns = [config.time_column] + list(config.columns)
    rows = range(HEADER_ROW, config.last_row + 1)
    df = pd.DataFrame("", index=pd.Index(rows, name="row"), columns=columns)
    if config.starting_row > HEADER_ROW:
        df.loc[HEADER_ROW, config.time_column] = "Time"
        for column, title in zip(config.columns, config.day_titles):
            df.loc[HEADER_ROW, column] = title
    for region in generate_all_shift_regions(config):
        # all days share the same row bands, so labelling once per band is enough
        if region.day == config.days[0]:
            df.loc[region.start_row, config.time_column] = region.time
    return df


def tutors_frame(tutors: List[TutorAvailability]) -> pd.DataFrame:
    days = list(WeeklyShifts.days())
    records = []
    for t in tutors:
        rec = {
            "name": t.name,
            "email": t.email,
            "major": t.major,
            "level": t.level,
            "courses": " ".join(t.courses),
        }
        for day, labels in t.shifts.as_dict().items():
            rec[day] = ", ".join(labels)
        records.append(rec)
    return pd.DataFrame(records, columns=TUTOR_COLUMNS + days)

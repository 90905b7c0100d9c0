import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Tuple, Union

DAYS: Tuple[str, ...] = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday")

SHIFTS: Tuple[str, ...] = (
    "9-10", "10-11", "11-12", "12-1", "1-2", "2-3",
    "3-4", "4-5", "5-6", "6-7", "7-8", "8-9",
)


@dataclass(frozen=True)
class ScheduleConfig:
    """Fixed dimensions of the weekly grid.

    `columns[i]` is the sheet column holding `days[i]`. Each shift occupies
    `max_tutors` consecutive rows, the first shift starting at `starting_row`.
    """
    days: Tuple[str, ...] = DAYS
    day_titles: Tuple[str, ...] = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
    shifts: Tuple[str, ...] = SHIFTS
    columns: Tuple[str, ...] = ("B", "C", "D", "E", "F", "G")
    time_column: str = "A"
    starting_row: int = 2
    max_tutors: int = 4

    def __post_init__(self):
        # lists from JSON or callers are frozen into tuples
        for name in ("days", "day_titles", "shifts", "columns"):
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{name} must be a list of strings, got {value!r}")
            object.__setattr__(self, name, tuple(value))
        for name in ("starting_row", "max_tutors"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.time_column, str) or not self.time_column:
            raise ValueError(f"time_column must be a column letter, got {self.time_column!r}")
        if not self.days:
            raise ValueError("days must not be empty")
        if not self.shifts:
            raise ValueError("shifts must not be empty")
        if len(self.columns) != len(self.days):
            raise ValueError(f"expected one column per day ({len(self.days)}), got {len(self.columns)}")
        if len(self.day_titles) != len(self.days):
            raise ValueError(f"expected one title per day ({len(self.days)}), got {len(self.day_titles)}")
        if len(set(self.columns) | {self.time_column}) != len(self.columns) + 1:
            raise ValueError("day columns and time column must all be distinct")
        if self.max_tutors < 1:
            raise ValueError("max_tutors must be positive")
        if self.starting_row < 1:
            raise ValueError("starting_row must be >= 1")

    @property
    def last_row(self) -> int:
        return self.starting_row + len(self.shifts) * self.max_tutors - 1


DEFAULT_CONFIG = ScheduleConfig()


def load_config(path: Union[str, os.PathLike], base: ScheduleConfig = DEFAULT_CONFIG) -> ScheduleConfig:
    """Load a JSON object whose keys override fields of `base`."""
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Could not parse config {path}: {e}") from e
    return config_from_dict(data, base)


def config_from_dict(data: Any, base: ScheduleConfig = DEFAULT_CONFIG) -> ScheduleConfig:
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")
    known = {f.name for f in fields(ScheduleConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return replace(base, **data)

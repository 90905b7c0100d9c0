from dataclasses import dataclass, field, fields
from typing import Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class ShiftRegion:
    day: str
    time: str
    cell_range: str  # A1 notation, e.g. "B2:B5"
    column: str
    start_row: int
    end_row: int

    def overlaps(self, other: "ShiftRegion") -> bool:
        if self.column != other.column:
            return False
        return self.start_row <= other.end_row and other.start_row <= self.end_row


@dataclass(frozen=True)
class WeeklyShifts:
    """Shift labels a tutor can work, per day. Saturday is never surveyed."""
    sunday: List[str] = field(default_factory=list)
    monday: List[str] = field(default_factory=list)
    tuesday: List[str] = field(default_factory=list)
    wednesday: List[str] = field(default_factory=list)
    thursday: List[str] = field(default_factory=list)
    friday: List[str] = field(default_factory=list)

    def __getitem__(self, day: str) -> List[str]:
        if day not in self.days():
            raise KeyError(day)
        return getattr(self, day)

    @classmethod
    def days(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for day in self.days():
            yield day, getattr(self, day)

    def as_dict(self) -> Dict[str, List[str]]:
        return {day: list(labels) for day, labels in self.items()}


@dataclass(frozen=True)
class SurveyRow:
    name: str = ""
    email: str = ""
    major: str = ""
    level: str = ""
    courses: str = ""
    sunday: str = ""
    monday_individual: str = ""
    tuesday_individual: str = ""
    wednesday_individual: str = ""
    thursday_individual: str = ""
    friday: str = ""
    monday_group: str = ""
    tuesday_group: str = ""
    wednesday_group: str = ""
    thursday_group: str = ""


@dataclass(frozen=True)
class TutorAvailability:
    name: str
    email: str
    major: str
    level: str
    courses: List[str] = field(default_factory=list)
    shifts: WeeklyShifts = field(default_factory=WeeklyShifts)

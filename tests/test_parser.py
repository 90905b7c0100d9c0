import logging
import math

import pytest

from tutortime.availability.parser import (
    build_tutor_availability, merge_day_hours, normalize_shift_list,
    parse_all_respondents, split_courses,
)
from tutortime.models import SurveyRow, WeeklyShifts
from tutortime.survey import SURVEY_FIELDS, cell_text, decode_survey_row

DAYS = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday"]


def make_row(**hours):
    """Raw 16-field row with profile data and any named hour fields set."""
    fields = ["Ada Lovelace", "ada@example.edu", "Mathematics", "Senior", "MATH101 CS201"]
    fields += [""] * (len(SURVEY_FIELDS) - len(fields))
    for name, value in hours.items():
        fields[SURVEY_FIELDS.index(name)] = value
    return fields


@pytest.mark.parametrize("individual,group,expected", [
    ("", "", ""),
    (None, None, ""),
    ("9-10 AM", "", "9-10 AM"),
    ("9-10 AM", None, "9-10 AM"),
    ("", "2-3 PM", "2-3 PM"),
    (None, "2-3 PM", "2-3 PM"),
    ("9-10 AM", "2-3 PM", "9-10 AM, 2-3 PM"),
    ("9-10 AM", "9-10 AM", "9-10 AM, 9-10 AM"),
])
def test_merge_day_hours(individual, group, expected):
    assert merge_day_hours(individual, group) == expected


def test_normalize_shift_list():
    assert normalize_shift_list("9-10 AM, 10-11 AM") == ["9-10", "10-11"]
    assert normalize_shift_list("") == []
    assert normalize_shift_list("12-1 PM") == ["12-1"]
    assert normalize_shift_list("3-4") == ["3-4"]


def test_normalize_keeps_order_and_duplicates():
    assert normalize_shift_list("2-3 PM, 9-10 AM, 2-3 PM") == ["2-3", "9-10", "2-3"]


def test_split_courses():
    assert split_courses("MATH101  CS201\tPHYS110") == ["MATH101", "CS201", "PHYS110"]
    assert split_courses("CS201 CS201 MATH101") == ["CS201", "MATH101"]
    assert split_courses("") == []
    assert split_courses(None) == []


def test_end_to_end_single_row():
    row = make_row(sunday="9-10 AM", monday_individual="10-11 AM", monday_group="2-3 PM")
    tutor = build_tutor_availability(row)
    assert tutor.name == "Ada Lovelace"
    assert tutor.email == "ada@example.edu"
    assert tutor.major == "Mathematics"
    assert tutor.level == "Senior"
    assert tutor.courses == ["MATH101", "CS201"]
    assert tutor.shifts.sunday == ["9-10"]
    assert tutor.shifts.monday == ["10-11", "2-3"]
    assert tutor.shifts.tuesday == []
    assert tutor.shifts.wednesday == []
    assert tutor.shifts.thursday == []
    assert tutor.shifts.friday == []


def test_friday_not_merged_and_group_only_day():
    row = make_row(friday="11-12 PM, 12-1 PM", thursday_group="4-5 PM")
    shifts = build_tutor_availability(row).shifts
    assert shifts.friday == ["11-12", "12-1"]
    assert shifts.thursday == ["4-5"]


def test_gap_field_is_ignored():
    row = make_row()
    row[SURVEY_FIELDS.index(None)] = "9-10 AM"
    tutor = build_tutor_availability(row)
    assert all(labels == [] for _, labels in tutor.shifts.items())


def test_all_six_days_always_present():
    tutor = build_tutor_availability([""] * len(SURVEY_FIELDS))
    assert list(tutor.shifts.as_dict()) == DAYS
    assert tutor.shifts.as_dict() == {d: [] for d in DAYS}
    assert tutor.courses == []


def test_short_row_is_recovered(caplog):
    with caplog.at_level(logging.WARNING):
        tutor = build_tutor_availability(["Grace Hopper", "grace@example.edu"], row_label="7")
    assert tutor.name == "Grace Hopper"
    assert tutor.major == ""
    assert tutor.courses == []
    assert tutor.shifts == WeeklyShifts()
    assert "Survey row 7" in caplog.text


def test_blank_cells_from_pandas():
    row = make_row(sunday=float("nan"))
    row[4] = math.nan
    tutor = build_tutor_availability(row)
    assert tutor.courses == []
    assert tutor.shifts.sunday == []


def test_accepts_decoded_row():
    decoded = SurveyRow(name="Alan", courses="CS101", tuesday_individual="1-2 PM", tuesday_group="3-4 PM")
    tutor = build_tutor_availability(decoded)
    assert tutor.shifts.tuesday == ["1-2", "3-4"]
    assert tutor.courses == ["CS101"]


def test_decode_ignores_extra_fields():
    decoded = decode_survey_row(make_row(thursday_group="5-6 PM") + ["extra", "more"])
    assert decoded.thursday_group == "5-6 PM"


def test_parse_all_respondents_preserves_order():
    rows = [make_row(sunday="9-10 AM"), make_row(friday="3-4 PM")]
    rows[1][0] = "Second"
    tutors = parse_all_respondents(rows)
    assert [t.name for t in tutors] == ["Ada Lovelace", "Second"]
    assert tutors[0].shifts.sunday == ["9-10"]
    assert tutors[1].shifts.friday == ["3-4"]


def test_parse_all_respondents_empty(caplog):
    with caplog.at_level(logging.INFO):
        assert parse_all_respondents([]) == []
    assert "No survey rows found" in caplog.text


def test_parse_all_respondents_idempotent():
    rows = [make_row(monday_individual="9-10 AM", monday_group="10-11 AM")]
    assert parse_all_respondents(rows) == parse_all_respondents(rows)


def test_weekly_shifts_rejects_unknown_day():
    with pytest.raises(KeyError):
        WeeklyShifts()["saturday"]


def test_whitespace_only_cells_are_blank():
    row = make_row(monday_individual=" ", monday_group="2-3 PM", friday="  ")
    row[4] = "   "
    tutor = build_tutor_availability(row)
    assert tutor.shifts.monday == ["2-3"]
    assert tutor.shifts.friday == []
    assert tutor.courses == []


def test_cell_text_keeps_non_blank_values_verbatim():
    assert cell_text("  Ada ") == "  Ada "
    assert cell_text("\t") == ""
    assert cell_text(3) == "3"

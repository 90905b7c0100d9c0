"""Decoding of raw survey-response rows.

The survey form exports one row per respondent. Starting at sheet column B the
fields are laid out as below; `None` marks the unused column between the
Friday field and the group-availability fields. This table is the only place
that knows field positions.
"""
import logging
from typing import Any, Optional, Sequence, Tuple

import pandas as pd

from .models import SurveyRow

logger = logging.getLogger(__name__)

SURVEY_FIELDS: Tuple[Optional[str], ...] = (
    "name",
    "email",
    "major",
    "level",
    "courses",
    "sunday",
    "monday_individual",
    "tuesday_individual",
    "wednesday_individual",
    "thursday_individual",
    "friday",
    None,
    "monday_group",
    "tuesday_group",
    "wednesday_group",
    "thursday_group",
)

# (individual, group) field pairs for the days surveyed twice
MERGED_DAYS: Tuple[Tuple[str, str, str], ...] = (
    ("monday", "monday_individual", "monday_group"),
    ("tuesday", "tuesday_individual", "tuesday_group"),
    ("wednesday", "wednesday_individual", "wednesday_group"),
    ("thursday", "thursday_individual", "thursday_group"),
)


def cell_text(value: Any) -> str:
    """Blank cells (None, NaN from pandas, whitespace only) become ""; anything else is str()."""
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    text = str(value)
    return text if text.strip() else ""


def decode_survey_row(fields: Sequence[Any], row_label: Optional[str] = None) -> SurveyRow:
    """Map a positional field sequence onto a `SurveyRow`.

    Missing trailing fields are treated as blank so one short row does not
    abort a batch; extra fields past the layout are ignored.
    """
    values = list(fields)
    if len(values) < len(SURVEY_FIELDS):
        logger.warning(
            "Survey row %s has %d of %d fields; missing fields treated as blank",
            row_label if row_label is not None else "?", len(values), len(SURVEY_FIELDS),
        )
    kwargs = {}
    for idx, name in enumerate(SURVEY_FIELDS):
        if name is None:
            continue
        kwargs[name] = cell_text(values[idx]) if idx < len(values) else ""
    return SurveyRow(**kwargs)

import csv
import io
import logging
import os
from typing import IO, List, Union

import pandas as pd

from .survey import SURVEY_FIELDS

logger = logging.getLogger(__name__)

TextOrPath = Union[str, os.PathLike, IO]

# column A of the survey export is the submission timestamp
SURVEY_FIRST_COLUMN = 1


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    Ensures CSV readers get strings, not bytes.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='', encoding='utf-8-sig')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8-sig', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def load_survey_rows(src: TextOrPath, first_row: int = 2) -> List[List[str]]:
    """Read the survey export and return one raw field list per respondent.

    `first_row` is the 1-based sheet row of the first response. Each returned
    row starts at column B and holds the fields listed in `SURVEY_FIELDS`.
    Blank rows after the last response are dropped.
    """
    if first_row < 1:
        raise ValueError("first_row must be >= 1")
    width = len(SURVEY_FIELDS)
    rows: List[List[str]] = []
    f, should_close = _open_text(src)
    try:
        reader = csv.reader(f)
        for sheet_row, record in enumerate(reader, start=1):
            if sheet_row < first_row:
                continue
            rows.append(record[SURVEY_FIRST_COLUMN:SURVEY_FIRST_COLUMN + width])
    finally:
        if should_close:
            f.close()
    while rows and not any(cell.strip() for cell in rows[-1]):
        rows.pop()
    logger.info("Loaded %d survey rows", len(rows))
    return rows


def _ensure_parent(path: Union[str, os.PathLike]):
    parent = os.path.dirname(os.fspath(path))
    if parent and not os.path.isdir(parent):
        logger.info("Creating output directory %s", parent)
        os.makedirs(parent, exist_ok=True)


def save_grid_csv(path: Union[str, os.PathLike], grid: pd.DataFrame):
    """Write the sheet grid without pandas' index or header; row 1 is the sheet header."""
    _ensure_parent(path)
    grid.to_csv(path, index=False, header=False)


def save_tutors_csv(path: Union[str, os.PathLike], tutors: pd.DataFrame):
    _ensure_parent(path)
    tutors.to_csv(path, index=False)

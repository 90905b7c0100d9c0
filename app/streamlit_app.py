import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import json
import logging

import streamlit as st

from tutortime.config import DEFAULT_CONFIG, config_from_dict
from tutortime.io_utils import load_survey_rows
from tutortime.grid.layout import generate_all_shift_regions
from tutortime.grid.frame import build_grid_frame, tutors_frame
from tutortime.availability.parser import parse_all_respondents
from tutortime.evaluation import summary

logging.basicConfig(level=logging.INFO)

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="Schedule Helper", layout="wide")
st.title("Schedule Helper")

# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def load_survey_cached(survey_bytes: bytes, first_row: int):
    return load_survey_rows(io.BytesIO(survey_bytes), first_row=first_row)

def _config_of(upload):
    if upload is None:
        return DEFAULT_CONFIG
    return config_from_dict(json.loads(upload.getvalue().decode("utf-8")))

# ---------------------------------------------------------------------
# Form Inputs
# ---------------------------------------------------------------------
with st.form("controls"):
    c1, c2 = st.columns(2)
    survey_file = c1.file_uploader("Survey responses CSV", type=["csv"])
    config_file = c2.file_uploader("(Optional) Grid config JSON", type=["json"])
    first_row = st.number_input("First response row", 1, 1000, 2, step=1)
    submitted = st.form_submit_button("Generate schedule")

# ---------------------------------------------------------------------
# Run on Submit
# ---------------------------------------------------------------------
if submitted:
    try:
        config = _config_of(config_file)
    except (ValueError, TypeError, json.JSONDecodeError) as e:
        st.error(f"Invalid config: {e}")
        st.stop()

    regions = generate_all_shift_regions(config)
    grid = build_grid_frame(config)

    rows = load_survey_cached(survey_file.getvalue(), int(first_row)) if survey_file is not None else []
    tutors = parse_all_respondents(rows, first_row=int(first_row))

    st.subheader("Summary")
    st.text(summary(regions, tutors, config))
    if not tutors:
        st.warning("No survey responses found.")

    st.subheader("Schedule grid")
    st.dataframe(grid, use_container_width=True)
    st.download_button("Download grid.csv", grid.to_csv(index=False, header=False),
                       file_name="grid.csv", mime="text/csv")

    st.subheader("Tutor availability")
    tdf = tutors_frame(tutors)
    st.dataframe(tdf, use_container_width=True)
    st.download_button("Download tutors.csv", tdf.to_csv(index=False),
                       file_name="tutors.csv", mime="text/csv")
    st.success("Schedule grid generated.")

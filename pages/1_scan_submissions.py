# pages/1_scan_submissions.py
# Scan a local assignment directory -> show found submissions and students without a submission

import json
import os
import re
from pathlib import Path

import pandas as pd
import streamlit as st

from pages.config import PAGE_TITLE, PAGE_ICON, DEFAULT_ROOT
from submission_utils import config
from submission_utils.errors import InvalidStructureError, MaximumDirectoryDepthExceededError
from submission_utils.models import ScanResult, StructureTemplate
from submission_utils.tokenizer import SubmissionTokenizer

st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
st.title(f"{PAGE_ICON} Submission Scanner")

st.caption(
    "Point the scanner at an assignment folder and describe how submissions are nested, "
    "e.g. **assignment1/SUBMISSION**. Archives found at the submission level are expanded in place."
)

root = st.text_input("Root directory", value=DEFAULT_ROOT)
structure = st.text_input("Folder structure", value=config.DEFAULT_STRUCTURE)

with st.expander("File patterns", expanded=False):
    source_regex = st.text_input("Source files (regex)", value=config.SOURCE_SUFFIX_REGEX)
    archive_regex = st.text_input("Archives (regex)", value=config.ARCHIVE_REGEX)

if not root:
    st.info("Enter the directory that holds the submissions.")
    st.stop()

if not os.path.isdir(root):
    st.error(f"❌ Not a directory: `{root}`")
    st.stop()

if not st.button("Scan"):
    st.stop()

# ---- Run one scan
try:
    template = StructureTemplate.parse(structure)
    tokenizer = SubmissionTokenizer(
        source_regex,
        archive_regex,
        max_directory_depth=config.MAX_DIRECTORY_DEPTH,
        archive_nesting_depth=config.ARCHIVE_NESTING_DEPTH,
    )
    with st.spinner("Scanning…"):
        result: ScanResult = tokenizer.scan_result(template, Path(root))
except (InvalidStructureError, MaximumDirectoryDepthExceededError) as e:
    st.error(f"❌ Scan aborted:\n\n{e}")
    st.stop()
except re.error as e:
    st.error(f"❌ Invalid file pattern: {e}")
    st.stop()

# Cache for other pages
st.session_state["scan_result"] = result.to_dict()

st.success(
    f"✅ Found **{len(result.submissions)}** submissions, "
    f"**{len(result.empty_locations)}** folders without a submission."
)

st.markdown("---")
st.subheader("Submissions")
if result.submissions:
    df = pd.DataFrame(
        [{"student": s.student.name, "location": str(s.location)} for s in result.submissions]
    )
    st.dataframe(df)
else:
    st.info("No submissions found.")

st.subheader("No submission")
if result.empty_locations:
    st.dataframe(pd.DataFrame({"location": [str(p) for p in result.empty_locations]}))
else:
    st.write("— none —")

st.download_button(
    "Download manifest (JSON)",
    data=json.dumps(result.to_dict(), ensure_ascii=False, indent=2),
    file_name="scan_manifest.json",
    mime="application/json",
)

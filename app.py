"""
Smart Recharge Data Extractor
=============================

Paste recharge voucher text, extract one row per voucher and export to Excel.
Extracted fields:
1. Category (Orange, Zain, Umniah)
2. Brand
3. Denomination
4. Recharge PIN (14 digits)
5. Serial Number

Technology: regex extraction, pandas + openpyxl for the spreadsheet.
"""

import logging

import streamlit as st

from exporter import NothingToExportError, build_csv, records_to_dataframe
from extractor import category_summary
from messages import EXAMPLE_TEXT
from settings import (
    CATEGORY_COLORS,
    EXCEL_MIME,
    PAGE_ICON,
    PAGE_LAYOUT,
    PAGE_TITLE,
    TEXT_AREA_HEIGHT,
    configure_logging,
)
from state import (
    RECORDS_KEY,
    TEXT_KEY,
    clear_all,
    export_from,
    extract_into,
    init_state,
    load_example,
)

# ---------------- CONFIG ----------------
configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title=PAGE_TITLE, layout=PAGE_LAYOUT, page_icon=PAGE_ICON)
st.title(PAGE_TITLE)
st.markdown("Automatically extracts Category, Brand, Denomination, Recharge PIN, and Serial Number")

init_state(st.session_state)


def show_notice(notice):
    getattr(st, notice.level)(notice.text)


# ---------------- CONTROLS ----------------
col1, col2, col3, col4 = st.columns(4)

with col1:
    extract_clicked = st.button("Extract Data", type="primary", use_container_width=True)
with col2:
    export_clicked = st.button("Export to Excel", use_container_width=True)
with col3:
    st.button("Clear All", on_click=clear_all, args=(st.session_state,), use_container_width=True)
with col4:
    st.button("Load Example", on_click=load_example, args=(st.session_state,), use_container_width=True)

st.text_area(
    "Paste your recharge data here:",
    key=TEXT_KEY,
    height=TEXT_AREA_HEIGHT,
    placeholder=f"Paste your recharge data here... Example format:\n\n{EXAMPLE_TEXT}",
)

if extract_clicked:
    show_notice(extract_into(st.session_state))

# ---------------- EXPORT ----------------
if export_clicked:
    try:
        with st.spinner("Building Excel file..."):
            excel_export = export_from(st.session_state)
            csv_data = build_csv(st.session_state[RECORDS_KEY])
    except NothingToExportError as e:
        st.warning(str(e))
    except Exception as e:
        st.error(f"Failed to generate Excel file: {str(e)}")
        logger.error(f"Excel generation error: {str(e)}", exc_info=True)
    else:
        st.subheader("Export Options")
        dl1, dl2 = st.columns(2)
        with dl1:
            st.download_button(
                label="Download Excel",
                data=excel_export.data,
                file_name=excel_export.file_name,
                mime=EXCEL_MIME,
                use_container_width=True,
            )
        with dl2:
            st.download_button(
                label="Download CSV",
                data=csv_data,
                file_name=excel_export.file_name.replace(".xlsx", ".csv"),
                mime="text/csv",
                use_container_width=True,
            )

# ---------------- RESULTS ----------------
records = st.session_state[RECORDS_KEY]

if records:
    st.divider()
    st.subheader(f"Extracted Data ({len(records)} records found):")

    st.markdown("**Category Summary:**")
    badges = [
        f":{CATEGORY_COLORS.get(category, 'gray')}[**{category}: {count}**]"
        for category, count in category_summary(records).items()
    ]
    st.markdown("&nbsp;&nbsp;".join(badges))

    st.dataframe(records_to_dataframe(records), use_container_width=True, hide_index=True)

    with st.expander("View JSON Structure", expanded=False):
        st.json([record.to_row() for record in records])

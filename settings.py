"""
Application settings for the Smart Recharge Data Extractor.

Everything here is a plain module-level constant; Streamlit server and theme
options live in .streamlit/config.toml.
"""

import logging
import os

# ---------------- PAGE ----------------
PAGE_TITLE = "Smart Recharge Data Extractor"
PAGE_ICON = "📶"
PAGE_LAYOUT = "wide"
TEXT_AREA_HEIGHT = 400

# Streamlit markdown color per category badge
CATEGORY_COLORS = {
    "Orange": "orange",
    "Zain": "violet",
    "Umniah": "red",
    "Unknown": "gray",
}

# ---------------- EXPORT ----------------
SHEET_NAME = "Recharge Data"
EXPORT_FILE_PATTERN = "recharge_data_{date}.xlsx"
EXCEL_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Column label -> display width in character units, in sheet order
EXPORT_COLUMNS = [
    ("id", 5),
    ("Category", 10),
    ("Brand", 15),
    ("Denomination", 15),
    ("Recharge PIN", 20),
    ("Serial Number", 25),
]

# ---------------- LOGGING ----------------
LOG_LEVEL = os.environ.get("RECHARGE_LOG_LEVEL", "INFO").upper()


def configure_logging():
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level)

# --- Configuration Constants ---
# Every value can be overridden through the environment variable of the same name.
import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
INVENTORY_DATA_FILE = os.getenv("INVENTORY_DATA_FILE", "inventory_data.json")
GRADING_INPUT_FILE = os.getenv("GRADING_INPUT_FILE", "students.txt")
GRADING_REPORT_FILE = os.getenv("GRADING_REPORT_FILE", "report.txt")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

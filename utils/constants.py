import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
SHIFT_FILE = _constants["SHIFT_FILE"]
MEDICAL_TEST_FILE = _constants["MEDICAL_TEST_FILE"]

TIME_FORMAT = _constants["TIME_FORMAT"]
DATE_FORMAT = _constants["DATE_FORMAT"]

LOG_LEVEL = _constants["LOG_LEVEL"]
CONSOLE_LOG_LEVEL = _constants["CONSOLE_LOG_LEVEL"]

PROMPT = _constants["PROMPT"]
EXIT_COMMANDS = tuple(_constants["EXIT_COMMANDS"])

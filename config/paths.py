from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
DATA_DIR = PROJECT_ROOT / "data"
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT / "logs"

# === Default file paths ===
LOG_PATH = LOG_DIR / "nursesched.log"
CONSTANTS_PATH = CONFIG_DIR / "constants.json"

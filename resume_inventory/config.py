import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from appdirs import user_config_dir

# Constants
APP_NAME = "Resume Inventory"

def _source_project_root() -> Path:
	return Path(__file__).resolve().parent.parent

# Load .env in dev mode (from repository root) for convenience
_DEV_ENV = _source_project_root() / ".env"
if _DEV_ENV.exists():
	load_dotenv(_DEV_ENV)

# Per-user config location; only read from, never created here
USER_CONFIG_DIR = Path(user_config_dir(APP_NAME))

def _int_env(name: str, default: int) -> int:
	raw = (os.getenv(name) or "").strip()
	if not raw:
		return default
	try:
		value = int(raw)
	except ValueError:
		print(f"[warn] {name}={raw!r} is not an integer; using {default}", file=sys.stderr)
		return default
	return value if value > 0 else default

LOG_LEVEL = (os.getenv("RESUME_INVENTORY_LOG_LEVEL") or "WARNING").strip().upper()
if LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
	print(f"[warn] unknown RESUME_INVENTORY_LOG_LEVEL={LOG_LEVEL!r}; using WARNING", file=sys.stderr)
	LOG_LEVEL = "WARNING"

# Number of ranked bullets that feed each search blob
MAX_BULLETS = _int_env("RESUME_INVENTORY_MAX_BULLETS", 3)

# Optional JSON list of extra technology tokens
TECH_TOKENS_PATH = Path(os.getenv("RESUME_INVENTORY_TECH_TOKENS") or USER_CONFIG_DIR / "tech_tokens.json")

# Increment per release
APP_VERSION = "0.1.0"

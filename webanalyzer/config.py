import os
import logging
from pathlib import Path

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def log_level() -> str:
	return (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()

import json
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from md2mrkdwn.constants import DEFAULT_CONFIG_FILE, OUTPUT_MODES, OUTPUT_TEXT
from md2mrkdwn.logger import logger

load_dotenv()

# ============================================================
# Defaults
# ============================================================
DEFAULT_SETTINGS: Dict[str, Any] = {
    # "text" (escaped mrkdwn string) or "blocks" (Block Kit JSON)
    "output": OUTPUT_TEXT,
    # Undo escaping in text output
    "plain": False,
    # Indentation for Block Kit JSON, compact when None
    "json_indent": None,
    "log_level": "WARNING",
}

# Environment overrides, applied on top of the config file
ENV_KEYS = {
    "output": "MD2MRKDWN_OUTPUT",
    "plain": "MD2MRKDWN_PLAIN",
    "json_indent": "MD2MRKDWN_JSON_INDENT",
    "log_level": "MD2MRKDWN_LOG_LEVEL",
}


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _to_indent(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid json_indent {value!r}, using compact output")
        return None


def _apply(settings: Dict[str, Any], key: str, value: Any) -> None:
    if key == "output":
        value = str(value).strip().lower()
        if value not in OUTPUT_MODES:
            logger.warning(f"Unsupported output mode {value!r}, expected one of {OUTPUT_MODES}")
            return
    elif key == "plain":
        value = _to_bool(value)
    elif key == "json_indent":
        value = _to_indent(value)
    elif key == "log_level":
        value = str(value).strip().upper()
    settings[key] = value


def _read_config_file(config_path: str) -> Dict[str, Any]:
    """Read the JSON config file; problems are logged and yield an empty dict."""
    if not os.path.exists(config_path):
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Config file is not valid JSON: {e}")
        return {}
    except OSError as e:
        logger.error(f"Failed to read config file: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Config file {config_path} must contain a JSON object, ignoring it")
        return {}
    return data


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load CLI settings.

    Precedence, lowest first: built-in defaults, the JSON config file,
    MD2MRKDWN_* environment variables (a .env file is honoured).

    Args:
        config_path: JSON file to read. Defaults to $MD2MRKDWN_CONFIG or
            md2mrkdwn.json in the working directory.

    Returns:
        Dict with the keys of DEFAULT_SETTINGS
    """
    if config_path is None:
        config_path = os.getenv("MD2MRKDWN_CONFIG", DEFAULT_CONFIG_FILE)

    settings = dict(DEFAULT_SETTINGS)

    for key, value in _read_config_file(config_path).items():
        if key not in DEFAULT_SETTINGS:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        _apply(settings, key, value)

    for key, env_name in ENV_KEYS.items():
        value = os.getenv(env_name)
        if value is not None:
            _apply(settings, key, value)

    return settings

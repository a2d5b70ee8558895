# utils.py
"""
Utility functions for the card effect application.

This module provides helpers shared by the entry point and the tests:
logging setup, config file loading, and resolution of the per-card effect
options from the loaded config.
"""
import logging
import logging.handlers
import json
import os
from typing import Any, Dict, List

from constants import CARD_PRESETS

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: The loaded config; its optional "logging" section may set
#       "level", "format" and "log_file".
#   - Side Effects: Replaces the root logger's handlers with a console
#     handler and a rotating file handler. Creates the log directory.
#
# load_config(path: str) -> Dict[str, Any]:
#   - Raises: FileNotFoundError, json.JSONDecodeError (both logged first).
#
# effect_options(config: Dict[str, Any]) -> List[Dict[str, Any]]:
#   - Outputs: One options dict per card, from config["effects"] if present,
#     otherwise copies of CARD_PRESETS.

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEFAULT_LOG_FILE = 'logs/cards.log'
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 5


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the root logger for console and rotating-file output.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_file_path = log_config.get('log_file', DEFAULT_LOG_FILE)
    formatter = logging.Formatter(log_config.get('format', DEFAULT_LOG_FORMAT))

    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Re-running setup must not stack handlers
    root.handlers.clear()

    handlers = [
        logging.StreamHandler(),
        logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        ),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.info(f"Logging initialized at {log_level}, writing to {log_file_path}.")


def load_config(path: str) -> Dict[str, Any]:
    """Reads the JSON config file at `path`."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError as e:
        logging.error(f"Invalid JSON in {path}: {e}")
        raise
    logging.info("Configuration loaded successfully.")
    return config


def effect_options(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Returns the list of per-card option dicts to build cards from.

    Falls back to the built-in presets when the config has no "effects" list.
    """
    effects = config.get('effects')
    if not effects:
        logging.info(f"No effects found in config. Using {len(CARD_PRESETS)} built-in presets.")
        return [dict(preset) for preset in CARD_PRESETS]
    logging.info(f"Loaded {len(effects)} card effects from configuration.")
    return [dict(entry) for entry in effects]

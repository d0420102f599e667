# securepass/config.py
"""
Simple settings persistence for SecurePass.
Settings saved as JSON in $SECUREPASS_CONFIG, %APPDATA%/SecurePass/config.json (Windows)
or ~/.securepass/config.json (fallback).
"""

import os
import json
import logging
from typing import Dict, Any

from .generator import GenerationRequest, DEFAULT_LENGTH

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": DEFAULT_LENGTH,
    "count": 1,
    "strength": False,  # print the strength tier next to each password
    "lowercase": True,
    "uppercase": True,
    "numbers": True,
    "symbols": True,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "SecurePass")
    return os.path.join(os.path.expanduser("~"), ".securepass")

def config_path() -> str:
    override = os.getenv("SECUREPASS_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    """Return DEFAULTS merged with the settings file; never raises."""
    p = config_path()
    out = DEFAULTS.copy()
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config file %s: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("ignoring config file %s: expected a JSON object", p)
        return out
    for key, value in data.items():
        if key not in DEFAULTS:
            logger.warning("ignoring unknown config key %r in %s", key, p)
            continue
        expected = type(DEFAULTS[key])
        if type(value) is not expected:
            logger.warning("ignoring config key %r in %s: expected %s, got %s",
                           key, p, expected.__name__, type(value).__name__)
            continue
        out[key] = value
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def request_from_config(cfg: Dict[str, Any]) -> GenerationRequest:
    return GenerationRequest(
        length=cfg.get("length", DEFAULTS["length"]),
        lowercase=bool(cfg.get("lowercase", True)),
        uppercase=bool(cfg.get("uppercase", True)),
        numbers=bool(cfg.get("numbers", True)),
        symbols=bool(cfg.get("symbols", True)),
    )

"""Environment helpers (.env parsing and max listener settings)"""
import math
import os
import logging
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_MAX_LISTENERS = 10
MAX_LISTENERS_ENV = "EMITTER_MAX_LISTENERS"
UNBOUNDED_VALUES = {"inf", "infinity", "unbounded"}


def read_env_file(filepath: str = ".env") -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return values
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            if "=" not in line:
                continue
            key, val = line.split("=", 1)
            val = val.strip()
            if (val.startswith('"') and val.endswith('"')) or (val.startswith("'") and val.endswith("'")):
                val = val[1:-1]
            values[key.strip()] = val
    return values


def parse_max_listeners(raw: str) -> Union[int, float]:
    """Parse a max listeners setting. Raises ValueError on anything but a non-negative int or an unbounded keyword."""
    value = raw.strip().lower()
    if value in UNBOUNDED_VALUES:
        return math.inf
    n = int(value)
    if n < 0:
        raise ValueError(f"negative max listeners: {n}")
    return n


def get_env_max_listeners(env_file: Optional[str] = None) -> Union[int, float]:
    raw = os.environ.get(MAX_LISTENERS_ENV)
    if raw is None and env_file:
        raw = read_env_file(env_file).get(MAX_LISTENERS_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_LISTENERS
    try:
        return parse_max_listeners(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s value: %r", MAX_LISTENERS_ENV, raw)
        return DEFAULT_MAX_LISTENERS

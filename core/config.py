"""Calculator configuration.

Import-safe module constants. Each can be overridden from the environment
(``DCCABLE_*``) so a deployment can raise the voltage ceiling or tighten the
fuse margin without editing code. Overrides that do not parse, are not
finite or are not positive are logged and the default is kept.
"""

import logging
import math
import os

log = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value <= 0:
        log.warning("Ignoring %s=%r (not a positive number), using %s", name, raw, default)
        return default
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        log.warning("Ignoring %s=%r (unknown log level), using %s", name, raw, default)
        return default
    return level


# Maximum system voltage accepted by the front ends (V).
# Low-voltage DC installations: 12/24/48 V systems, ceiling 60 V.
MAX_VOLTAGE: float = _env_float("DCCABLE_MAX_VOLTAGE", 60.0)

DEFAULT_VOLTAGE_DROP_PERCENT: float = 3.0
MAX_VOLTAGE_DROP_PERCENT: float = 10.0

# Used by the front ends when no ambient temperature is given (degC)
DEFAULT_AMBIENT_TEMP: float = 20.0

# Fuse must not exceed this fraction of the cable ampacity
FUSE_SAFETY_FACTOR: float = _env_float("DCCABLE_FUSE_SAFETY_FACTOR", 0.85)

# Minimum safe size must carry the load current times this margin
AMPACITY_SAFETY_MARGIN: float = _env_float("DCCABLE_AMPACITY_SAFETY_MARGIN", 1.1)

LOG_LEVEL: str = _env_log_level("DCCABLE_LOG_LEVEL", "WARNING")

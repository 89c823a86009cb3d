"""
Central configuration for gline tunables and shared constants.
"""

import logging
import math
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("GLINE_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

LOG_LEVEL_DEFAULT: str = "INFO"


def env_bool_optional(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    s = raw.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    return None


def env_positive_float_optional(name: str) -> float | None:
    """
    Read a strictly positive float from the environment.

    Args:
        name: Environment variable name

    Returns:
        The parsed value, or None when unset, unparsable or not > 0
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number")
        return None
    if math.isnan(value) or value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be greater than zero")
        return None
    return value


# Case normalization before grammar matching (raw text is always kept as given)
UPPERCASE_DEFAULT: bool = bool(env_bool_optional("GLINE_UPPERCASE"))

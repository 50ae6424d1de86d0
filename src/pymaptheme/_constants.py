"""Internal constants shared across the library."""

ENV_PREFIX = "MAPTHEME_"

# Re-check cadence for the Auto / NavAuto themes (seconds).
DEFAULT_AUTO_CHECK_INTERVAL = 30 * 60.0

# Sun elevation (degrees) at sunrise/sunset, refraction and solar disc included.
DEFAULT_SUN_HORIZON_DEGREES = -0.833

# Threshold to distinguish epoch seconds from milliseconds.
MS_TIMESTAMP_THRESHOLD = 1_000_000_000_000

"""
kernel/config.py — Endpoints and benchmark configuration constants.

All fixed settings live here. There are no command-line flags and nothing
is read from the environment or a configuration file.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Fixture endpoints
# ---------------------------------------------------------------------------

API_ROOT = "https://api.nobelprize.org/2.0"

# Prizes awarded 2000-2005, first page only (no pagination handling).
LAUREATES_URL = f"{API_ROOT}/laureates?nobelPrizeYear=2000&yearTo=2005&limit=100"
PRIZES_URL = f"{API_ROOT}/nobelPrizes?nobelPrizeYear=2000&yearTo=2005&limit=100"

# Seconds before a fixture request is abandoned
FETCH_TIMEOUT = 30.0

# ---------------------------------------------------------------------------
# Sampler
# ---------------------------------------------------------------------------

# Minimum duration of a single timed cycle (seconds)
MIN_CYCLE_TIME = 0.05

# Sampling budget per callable (seconds)
MAX_SAMPLE_TIME = 5.0

# Samples required before the sampler may stop
MIN_SAMPLES = 5

# Stop early once the relative margin of error (%) drops below this; 0 = never
MAX_RME = 0.0

# Hard ceiling on invocations per cycle during calibration
MAX_LOOPS = 10_000_000

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

# Depth used when printing the first laureate / prize
SAMPLE_DEPTH = 5

# Depth used when dumping mismatched outputs
MISMATCH_DEPTH = 8

# Console backend: "auto" picks rich on a TTY, plain otherwise
CONSOLE_BACKEND = "auto"

# Level of the diagnostic log on stderr
LOG_LEVEL = "INFO"

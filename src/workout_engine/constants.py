"""Numeric constants for plans, phases, energy accounting and defaults."""

# ---------------------------------------------------------------------------
# Plan and phase constants
# ---------------------------------------------------------------------------

INTENSITY_STEP_PER_DAY = 0.05  # +5% reps per day, linear and unbounded
PHASE_LENGTH_DAYS = 30
RECENT_ACTIVITY_LIMIT = 6

# Calories are charged per exercise at a flat nominal duration, not the
# time actually spent on it.
NOMINAL_EXERCISE_DURATION_S = 60
SECONDS_PER_HOUR = 3600

# ---------------------------------------------------------------------------
# Workout configuration defaults and UI ranges (min, max, step)
# ---------------------------------------------------------------------------

DEFAULT_SESSION_DURATION_MIN = 30
DEFAULT_REST_DURATION_S = 30
SESSION_DURATION_RANGE_MIN = (10, 120, 5)
REST_DURATION_RANGE_S = (10, 90, 5)

# ---------------------------------------------------------------------------
# Profile defaults
# ---------------------------------------------------------------------------

DEFAULT_HEIGHT_CM = 175.0
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_DOB = "1995-01-01"
HEIGHT_RANGE_CM = (100.0, 250.0)
WEIGHT_RANGE_KG = (30.0, 250.0)

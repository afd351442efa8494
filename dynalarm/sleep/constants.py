"""Sleep pattern constants - single source of truth.

Ratios are fractions of the sequence length ``n``.
"""

MIN_LIGHT_COUNT = 5
LIGHT_RATIO = 0.15
DEEP_RATIO = 0.45
FIRST_HALF_RATIO = 0.6

# Leading share of deep-sleep budget emitted as DEEP without a draw
DETERMINISTIC_DEEP_SHARE = 0.7

EARLY_DEEP_PROBABILITY = 0.6
LATE_REM_PROBABILITY = 0.7

SECONDS_PER_SAMPLE = 2

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RATING_DIMENSIONS = ("quality", "productivity", "teamwork", "communication", "leadership")
RATING_MIN = 1
RATING_MAX = 10
SCORE_DECIMAL_PLACES = 2

DEFAULT_MONEY_DECIMAL_PLACES = 2
SUPPORTED_MONEY_DECIMAL_PLACES = (0, 2)

GOAL_PROGRESS_MIN = 0
GOAL_PROGRESS_MAX = 100

# Payslip auto-fill template (fractions of basic salary or flat amounts).
DEFAULT_HRA_RATE = "0.10"
DEFAULT_TRANSPORT_ALLOWANCE = 2000
DEFAULT_MEDICAL_ALLOWANCE = 1000
DEFAULT_TAX_RATE = "0.06"
DEFAULT_PF_RATE = "0.04"

EXCELLENT_SCORE = 8
GOOD_SCORE = 6

"""Application constants."""

# Tanner mid-parental height
SEX_ADJUSTMENT_CM = 13.0
MARGIN_OF_ERROR_CM = 8.5  # ± around the mid-parental height

# Progress indicator
PROGRESS_FLOOR_PCT = 10
PROGRESS_CEILING_PCT = 100
PROGRESS_FLOOR_BELOW_MIN_CM = 30  # at or below range.min - 30 → floor

# Average parental height thresholds (cm) for the genetic note
PARENT_AVG_TALL_CM = 175.0
PARENT_AVG_AVERAGE_CM = 165.0

# Growth spurt windows by sex (inclusive ages)
SPURT_WINDOW_MALE = (12, 16)
SPURT_WINDOW_FEMALE = (10, 14)

# Accepted input bounds (inclusive) enforced by the form / API schema
AGE_MIN, AGE_MAX = 8, 20
CURRENT_HEIGHT_MIN_CM, CURRENT_HEIGHT_MAX_CM = 100.0, 220.0
FATHER_HEIGHT_MIN_CM, FATHER_HEIGHT_MAX_CM = 140.0, 220.0
MOTHER_HEIGHT_MIN_CM, MOTHER_HEIGHT_MAX_CM = 140.0, 200.0

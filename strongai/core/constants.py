"""Application constants."""

from strongai.core.enums import ActivityLevel

# Rest timer presets offered after completing a set (seconds)
REST_DURATIONS = (30, 60, 90, 120, 150, 180)
REST_TIMER_ADD_SECONDS = 30

# Routines
DEFAULT_ROUTINE_FOLDER = "My Routines"
ROUTINE_COPY_SUFFIX = " (Copy)"

# Weekly consistency
DEFAULT_WORKOUTS_PER_WEEK_GOAL = 5
MEASUREMENT_TREND_LIMIT = 30

# Mifflin-St Jeor sex constants (kcal/day)
BMR_MALE_OFFSET = 5
BMR_FEMALE_OFFSET = -161

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# 1 lb of body weight per week ~ 500 kcal/day
KCAL_PER_WEEKLY_LB = 500
MIN_DAILY_CALORIES = 1200

# Macro split per lb of body weight
PROTEIN_GRAMS_PER_LB = 1.0
FAT_GRAMS_PER_LB = 0.4
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

# Unit conversions
LB_TO_KG = 0.453592
KG_TO_LB = 2.20462
INCH_TO_CM = 2.54

# Widget placeholder when a metric has no data
NO_DATA_DISPLAY = "--"

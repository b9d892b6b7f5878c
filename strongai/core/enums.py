"""Shared enums for domain records, ORM models and API."""

from enum import Enum


class ExerciseType(str, Enum):
    """Equipment / category of an exercise."""

    BARBELL = "Barbell"
    DUMBBELL = "Dumbbell"
    MACHINE = "Machine"
    WEIGHTED_BODYWEIGHT = "Weighted Bodyweight"
    ASSISTED_BODYWEIGHT = "Assisted Bodyweight"
    REPS_ONLY = "Reps Only"
    CARDIO = "Cardio"
    DURATION = "Duration"
    OTHER = "Other"


class BodyPart(str, Enum):
    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    ARMS = "Arms"
    SHOULDERS = "Shoulders"
    CORE = "Core"
    CARDIO = "Cardio"
    OTHER = "Other"


class SetType(str, Enum):
    """Kind of a performed set. Warmup sets are excluded from working-set numbering."""

    NORMAL = "Normal"
    WARMUP = "Warmup"
    DROP = "Drop"
    FAILURE = "Failure"


class MeasurementType(str, Enum):
    WEIGHT = "Weight"
    BODY_FAT = "Body Fat"
    LEFT_BICEP = "Left Bicep"
    RIGHT_BICEP = "Right Bicep"
    LEFT_FOREARM = "Left Forearm"
    RIGHT_FOREARM = "Right Forearm"
    CHEST = "Chest"
    WAIST = "Waist"
    HIPS = "Hips"
    LEFT_THIGH = "Left Thigh"
    RIGHT_THIGH = "Right Thigh"
    LEFT_CALF = "Left Calf"
    RIGHT_CALF = "Right Calf"
    NECK = "Neck"
    SHOULDERS = "Shoulders"
    LEFT_WRIST = "Left Wrist"
    RIGHT_WRIST = "Right Wrist"


class MeasurementUnit(str, Enum):
    LB = "lb"
    KG = "kg"
    PERCENT = "%"
    INCH = "in"
    CM = "cm"


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class WidgetType(str, Enum):
    """Dashboard tile kind."""

    WORKOUTS = "workouts"
    MACROS = "macros"
    MEASUREMENT = "measurement"
    EXERCISE = "exercise"


class ExerciseMetric(str, Enum):
    ESTIMATED_1RM = "Est. 1RM"
    MAX_WEIGHT = "Max Weight"
    VOLUME = "Volume"
    BEST_SET = "Best Set"
    MAX_REPS = "Max Reps"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class GoalType(str, Enum):
    LOSE = "Lose"
    MAINTAIN = "Maintain"
    GAIN = "Gain"


class ActivityLevel(str, Enum):
    SEDENTARY = "Sedentary"
    LIGHT = "Light"
    MODERATE = "Moderate"
    ACTIVE = "Active"
    VERY_ACTIVE = "Very Active"

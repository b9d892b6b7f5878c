"""ORM models - import all so Base.metadata is complete for migrations."""

from strongai.models.exercise import ExerciseRecord
from strongai.models.measurement import MeasurementRecord
from strongai.models.profile import UserProfileRecord
from strongai.models.routine import RoutineExerciseRecord, RoutineRecord, RoutineSetRecord
from strongai.models.widget import WidgetRecord
from strongai.models.workout import WorkoutRecord, WorkoutSetRecord

__all__ = [
    "ExerciseRecord",
    "MeasurementRecord",
    "RoutineExerciseRecord",
    "RoutineRecord",
    "RoutineSetRecord",
    "UserProfileRecord",
    "WidgetRecord",
    "WorkoutRecord",
    "WorkoutSetRecord",
]

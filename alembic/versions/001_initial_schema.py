"""Initial schema: exercises, workouts, routines, measurements, widgets, profile.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

EXERCISE_TYPES = (
    "Barbell", "Dumbbell", "Machine", "Weighted Bodyweight", "Assisted Bodyweight",
    "Reps Only", "Cardio", "Duration", "Other",
)
BODY_PARTS = ("Chest", "Back", "Legs", "Arms", "Shoulders", "Core", "Cardio", "Other")
SET_TYPES = ("Normal", "Warmup", "Drop", "Failure")
MEASUREMENT_TYPES = (
    "Weight", "Body Fat", "Left Bicep", "Right Bicep", "Left Forearm", "Right Forearm",
    "Chest", "Waist", "Hips", "Left Thigh", "Right Thigh", "Left Calf", "Right Calf",
    "Neck", "Shoulders", "Left Wrist", "Right Wrist",
)
MEASUREMENT_UNITS = ("lb", "kg", "%", "in", "cm")
WIDGET_TYPES = ("workouts", "macros", "measurement", "exercise")
EXERCISE_METRICS = ("Est. 1RM", "Max Weight", "Volume", "Best Set", "Max Reps")


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.Enum(*EXERCISE_TYPES, name="exercisetype"), nullable=False),
        sa.Column("body_part", sa.Enum(*BODY_PARTS, name="bodypart"), nullable=False),
        sa.Column("instructions", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)

    op.create_table(
        "workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_start_time", "workouts", ["start_time"], unique=False)

    op.create_table(
        "workout_sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("workout_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("set_order", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("rpe", sa.Float(), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("type", sa.Enum(*SET_TYPES, name="settype"), nullable=False),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sets_workout_id", "workout_sets", ["workout_id"], unique=False)
    op.create_index("ix_workout_sets_exercise_id", "workout_sets", ["exercise_id"], unique=False)

    op.create_table(
        "routines",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("folder", sa.String(length=255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_routines_name"), "routines", ["name"], unique=False)

    op.create_table(
        "routine_exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("routine_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("order_in_routine", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["routine_id"], ["routines.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_routine_exercises_routine_id"), "routine_exercises", ["routine_id"], unique=False
    )

    op.create_table(
        "routine_sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("routine_exercise_id", sa.Uuid(), nullable=False),
        sa.Column("order_in_exercise", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("rpe", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(
            ["routine_exercise_id"], ["routine_exercises.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_routine_sets_routine_exercise_id"),
        "routine_sets",
        ["routine_exercise_id"],
        unique=False,
    )

    op.create_table(
        "measurements",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("type", sa.Enum(*MEASUREMENT_TYPES, name="measurementtype"), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("unit", sa.Enum(*MEASUREMENT_UNITS, name="measurementunit"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_measurements_type_date", "measurements", ["type", "date"], unique=False)

    op.create_table(
        "widgets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.Enum(*WIDGET_TYPES, name="widgettype"), nullable=False),
        sa.Column(
            "measurement_type",
            sa.Enum(*MEASUREMENT_TYPES, name="measurementtype"),
            nullable=True,
        ),
        sa.Column("exercise_id", sa.Uuid(), nullable=True),
        sa.Column("exercise_metric", sa.Enum(*EXERCISE_METRICS, name="exercisemetric"), nullable=True),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "user_profile",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("gender", sa.Enum("Male", "Female", name="gender"), nullable=False),
        sa.Column("birthday", sa.Date(), nullable=False),
        sa.Column("goal_type", sa.Enum("Lose", "Maintain", "Gain", name="goaltype"), nullable=False),
        sa.Column("target_weekly_rate", sa.Float(), nullable=False),
        sa.Column(
            "activity_level",
            sa.Enum("Sedentary", "Light", "Moderate", "Active", "Very Active", name="activitylevel"),
            nullable=False,
        ),
        sa.Column("workouts_per_week_goal", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("user_profile")
    op.drop_table("widgets")
    op.drop_index("ix_measurements_type_date", table_name="measurements")
    op.drop_table("measurements")
    op.drop_table("routine_sets")
    op.drop_table("routine_exercises")
    op.drop_index(op.f("ix_routines_name"), table_name="routines")
    op.drop_table("routines")
    op.drop_table("workout_sets")
    op.drop_index("ix_workouts_start_time", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")

"""Dashboard tiles: one display string per configured widget."""

from __future__ import annotations

from datetime import date, datetime

from strongai.core.config import Settings
from strongai.core.constants import NO_DATA_DISPLAY
from strongai.core.enums import UnitSystem, WidgetType
from strongai.schemas.analytics import MacroTargets, WidgetValue
from strongai.schemas.profile import UserProfile
from strongai.schemas.widget import WidgetConfiguration
from strongai.services import analytics
from strongai.services.nutrition import calculate_daily_macros, current_body_weight_lbs
from strongai.services.store import FitnessStore


def weight_unit(settings: Settings) -> str:
    return "kg" if settings.unit_system == UnitSystem.METRIC else "lbs"


def daily_macros(
    store: FitnessStore,
    settings: Settings,
    height_inches: float | None = None,
    weight_lbs: float | None = None,
    today: date | None = None,
) -> MacroTargets:
    """Macro targets from the profile (defaults if unset) and the latest logged weight."""
    profile = store.profile or UserProfile()
    if weight_lbs is None:
        weight_lbs = current_body_weight_lbs(store.measurements, settings.default_body_weight_lbs)
    return calculate_daily_macros(
        profile,
        weight_lbs,
        height_inches if height_inches is not None else settings.default_height_inches,
        today=today,
    )


def widget_value(
    widget: WidgetConfiguration,
    store: FitnessStore,
    settings: Settings,
    now: datetime | None = None,
) -> WidgetValue:
    if widget.type == WidgetType.WORKOUTS:
        weekly = analytics.weekly_workouts(
            store.sessions, store.profile, weeks=settings.weekly_window_weeks, now=now
        )
        return WidgetValue(
            widget_id=widget.id,
            label="Workouts this week",
            value=f"{weekly.current_week_count}/{weekly.goal}",
        )
    if widget.type == WidgetType.MACROS:
        macros = daily_macros(store, settings, today=now.date() if now else None)
        return WidgetValue(widget_id=widget.id, label="Daily calories", value=f"{macros.calories} kcal")
    if widget.type == WidgetType.MEASUREMENT:
        trend = analytics.measurement_trend(store.measurements, widget.measurement_type, limit=1)
        value = NO_DATA_DISPLAY if trend.latest is None else f"{trend.latest} {trend.unit.value}"
        return WidgetValue(widget_id=widget.id, label=widget.measurement_type.value, value=value)

    exercise = store.get_exercise(widget.exercise_id)
    name = exercise.name if exercise is not None else "Exercise"
    return WidgetValue(
        widget_id=widget.id,
        label=f"{name} {widget.exercise_metric.value}",
        value=analytics.exercise_widget_value(
            store.sessions, widget.exercise_id, widget.exercise_metric, unit=weight_unit(settings)
        ),
    )


def widget_values(
    store: FitnessStore, settings: Settings, now: datetime | None = None
) -> list[WidgetValue]:
    return [widget_value(w, store, settings, now) for w in store.widgets]

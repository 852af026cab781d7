"""Threshold classification with hysteresis."""

from enum import Enum

from .events import EventKind


class Classification(str, Enum):
    """Result of classifying one sample against the thresholds."""

    EMERGENCY = "emergency"
    WARNING = "warning"
    BELOW_WARNING_AFTER_WARNING = "below_warning_after_warning"
    NO_CHANGE = "no_change"

    @property
    def event_kind(self) -> EventKind | None:
        """Return the event this classification publishes, if any."""
        return _EVENT_KINDS.get(self)


_EVENT_KINDS = {
    Classification.EMERGENCY: EventKind.REACHED_EMERGENCY,
    Classification.WARNING: EventKind.REACHED_WARNING,
    Classification.BELOW_WARNING_AFTER_WARNING: EventKind.FELL_BELOW_WARNING,
}


def classify(
    value: float,
    warning_level: float,
    emergency_level: float,
    has_reached_warning: bool,
) -> tuple[Classification, bool]:
    """Classify a temperature and compute the next hysteresis flag.

    Checks run in a fixed order. Emergency is tested first so it
    dominates warning. Warning and emergency fire on every sample at
    or above their level. Falling below warning fires only on the first
    low sample after the flag was set, never again until the next
    excursion.

    Args:
        value: Temperature to classify
        warning_level: Inclusive warning boundary
        emergency_level: Inclusive emergency boundary
        has_reached_warning: Current hysteresis flag

    Returns:
        The classification and the updated flag

    """
    if value >= emergency_level:
        # Emergency implies the warning level was passed too
        return Classification.EMERGENCY, True
    if value >= warning_level:
        return Classification.WARNING, True
    if has_reached_warning:
        return Classification.BELOW_WARNING_AFTER_WARNING, False
    return Classification.NO_CHANGE, False

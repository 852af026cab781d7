"""Tests for EmergencyShutdown."""

import logging

from thermowatch import EmergencyShutdown, EventKind, TransitionEvent


def emergency(value: float = 90.0) -> TransitionEvent:
    return TransitionEvent(
        kind=EventKind.REACHED_EMERGENCY, value=value, timestamp=1
    )


class TestEmergencyShutdown:
    """Test escalation and one-shot shutdown."""

    def test_escalate_shuts_down_once(self) -> None:
        """Test repeated escalation runs the shutdown action once."""
        shutdowns = []
        sink = EmergencyShutdown(
            name="estop", shutdown_action=lambda: shutdowns.append(1)
        )

        sink.escalate(emergency(80))
        sink.escalate(emergency(95))
        sink.escalate()

        assert shutdowns == [1]
        assert sink.is_shut_down is True
        assert sink.escalation_count == 3

    def test_notifies_every_time(self) -> None:
        """Test every escalation sends a notification."""
        notified = []
        sink = EmergencyShutdown(name="estop", notifier=notified.append)

        sink.escalate(emergency(80))
        sink.escalate(emergency(95))

        assert [e.value for e in notified] == [80.0, 95.0]

    def test_escalate_without_event(self) -> None:
        """Test escalate() can be called without an event."""
        notified = []
        sink = EmergencyShutdown(name="estop", notifier=notified.append)

        sink.escalate()

        assert notified == [None]
        assert sink.is_shut_down is True

    def test_on_event_escalates(self) -> None:
        """Test on_event() escalates."""
        sink = EmergencyShutdown(name="estop")

        sink.on_event(emergency())

        assert sink.escalation_count == 1

    def test_logs_critical(self, caplog) -> None:
        """Test escalation is logged at CRITICAL."""
        sink = EmergencyShutdown(name="estop")

        with caplog.at_level(logging.CRITICAL):
            sink.escalate(emergency())

        assert "Shutting down device" in caplog.text

    def test_only_emergencies(self) -> None:
        """Test the sink listens to emergencies only."""
        assert EmergencyShutdown.event_kinds == (
            EventKind.REACHED_EMERGENCY,
        )

"""Sensor monitor: the hysteresis state machine and event dispatch."""

import logging
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import ConfigDict, Field

from .classifier import classify
from .entity import Entity
from .errors import SourceReadError, SubscriberError
from .events import EventKind, Handler, Subscription, TransitionEvent
from .sample import TemperatureSample, Thresholds
from .source import TemperatureSource


class FailurePolicy(str, Enum):
    """What the monitor does when a subscribed handler raises.

    ISOLATE logs the failure and keeps going: the remaining handlers
    for the same event still run and later samples are processed.
    ABORT wraps the failure in a SubscriberError and ends the run.
    """

    ISOLATE = "isolate"
    ABORT = "abort"


class SensorMonitor(Entity):
    """Classifies a stream of temperatures and publishes transitions.

    The monitor pulls samples from its source one at a time, classifies
    each against its thresholds, and hands any resulting event to every
    handler subscribed to that event kind. Handlers run synchronously
    in subscription order; the next sample is not read until every
    handler has returned.

    Runtime state (not serialized):
    - the hysteresis flag, set while the temperature is at or above
      the warning level, and committed before any handler runs
    - the subscription registry, one ordered list per event kind
    - the cooperative stop request

    The monitor never actuates anything itself. Cooling, escalation and
    display are left to subscribers.
    """

    model_config = ConfigDict(frozen=False)

    thresholds: Thresholds = Field(
        description="Warning and emergency levels, fixed for the lifetime "
        "of the monitor"
    )
    source: TemperatureSource = Field(
        description="Where samples come from"
    )
    failure_policy: FailurePolicy = Field(
        default=FailurePolicy.ISOLATE,
        description="Whether a failing handler is logged or ends the run",
    )

    sample_count: int = Field(
        default=0, description="Number of samples classified so far"
    )
    event_count: int = Field(
        default=0, description="Number of events published so far"
    )

    def __init__(self, **data: Any) -> None:
        """Initialize monitor with an empty registry and a clear flag."""
        super().__init__(**data)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )
        self._subscriptions: dict[EventKind, list[Subscription]] = {
            kind: [] for kind in EventKind
        }
        self._active_tokens: set[UUID] = set()
        self._has_reached_warning = False
        self._stop_requested = False

    @property
    def has_reached_warning(self) -> bool:
        """Whether the last classified sample left the flag set."""
        return self._has_reached_warning

    def subscribe(
        self, kind: EventKind | str, handler: Handler
    ) -> Subscription:
        """Register a handler for one kind of event.

        The same handler may be registered more than once; it is then
        called once per registration.

        Args:
            kind: Event kind to receive (enum member or its value)
            handler: Callable taking a TransitionEvent

        Returns:
            Handle for unsubscribe()

        """
        subscription = Subscription(kind=EventKind(kind), handler=handler)
        self._subscriptions[subscription.kind].append(subscription)
        self._active_tokens.add(subscription.token)
        self._logger.debug(
            f"Subscribed {subscription.token} to {subscription.kind.value}"
        )
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Remove a previously registered handler.

        Unknown or already-removed handles are ignored.

        Returns:
            True if the handle was registered and has been removed

        """
        registered = self._subscriptions[subscription.kind]
        for index, candidate in enumerate(registered):
            if candidate is subscription:
                del registered[index]
                self._active_tokens.discard(subscription.token)
                self._logger.debug(
                    f"Unsubscribed {subscription.token} from "
                    f"{subscription.kind.value}"
                )
                return True
        return False

    def subscriber_count(self, kind: EventKind | str | None = None) -> int:
        """Count registered handlers for one kind, or for all kinds."""
        if kind is not None:
            return len(self._subscriptions[EventKind(kind)])
        return sum(len(handlers) for handlers in self._subscriptions.values())

    def process_sample(
        self, sample: TemperatureSample
    ) -> TransitionEvent | None:
        """Classify one sample and publish the resulting event.

        Args:
            sample: Sample to classify

        Returns:
            The published event, or None if the sample crossed nothing

        Raises:
            SubscriberError: If a handler fails under FailurePolicy.ABORT

        """
        self._logger.debug(
            f"Temperature {sample.value} at {sample.timestamp}"
        )
        classification, self._has_reached_warning = classify(
            sample.value,
            self.thresholds.warning_level,
            self.thresholds.emergency_level,
            self._has_reached_warning,
        )
        self.sample_count += 1

        kind = classification.event_kind
        if kind is None:
            return None

        event = TransitionEvent.from_sample(kind, sample)
        self.event_count += 1
        self._logger.info(f"Temperature {event.value} {kind.value}")
        self._dispatch(event)
        return event

    def run(self) -> None:
        """Drain the source, classifying every sample.

        Blocks until the source is exhausted or stop() is called. An
        empty source returns immediately, as does a monitor whose stop
        was requested before run(). The stop request is cleared on
        return so the monitor can be run again.

        Raises:
            SourceReadError: If the source fails while producing samples
            SubscriberError: If a handler fails under FailurePolicy.ABORT

        """
        self._logger.info(f"Monitoring {self.source.name}")

        iterator = iter(self.source.samples())
        try:
            while not self._stop_requested:
                try:
                    sample = next(iterator)
                except StopIteration:
                    break
                except Exception as e:
                    self._logger.error(
                        f"Reading from {self.source.name} failed: {e}"
                    )
                    msg = (
                        f"source {self.source.name} failed after "
                        f"{self.sample_count} samples"
                    )
                    raise SourceReadError(msg) from e
                self.process_sample(sample)
        finally:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()
            self._stop_requested = False
            self._logger.info(
                f"Monitoring of {self.source.name} ended after "
                f"{self.sample_count} samples"
            )

    def stop(self) -> None:
        """Ask a running monitor to stop before the next sample.

        Safe to call from a handler or from another thread.
        """
        self._stop_requested = True

    def clear_stop(self) -> None:
        """Drop a stop request that arrived after the last run ended."""
        self._stop_requested = False

    def reset(self) -> None:
        """Clear the hysteresis flag and the counters."""
        self._has_reached_warning = False
        self.sample_count = 0
        self.event_count = 0

    def _dispatch(self, event: TransitionEvent) -> None:
        """Call every handler subscribed to the event's kind."""
        registered = self._subscriptions[event.kind]
        # Snapshot so handlers may subscribe or unsubscribe while running
        for subscription in list(registered):
            if subscription.token not in self._active_tokens:
                continue
            try:
                subscription.handler(event)
            except Exception as e:
                if self.failure_policy is FailurePolicy.ABORT:
                    raise SubscriberError(event, subscription) from e
                self._logger.error(
                    f"Handler for {event.kind.value} failed: {e}",
                    exc_info=True,
                )

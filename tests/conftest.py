"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime

import pytest

from payment_orchestrator.config import ProcessorSettings
from payment_orchestrator.infrastructure.event_sinks import InMemoryEventSink
from payment_orchestrator.infrastructure.payment_gateway import InMemoryPaymentGateway
from payment_orchestrator.infrastructure.time_provider import FixedTimeProvider
from payment_orchestrator.processor import PaymentProcessor


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def gateway() -> InMemoryPaymentGateway:
    """A gateway that accepts and records every post."""
    return InMemoryPaymentGateway()


@pytest.fixture
def event_sink() -> InMemoryEventSink:
    """A sink that keeps emitted events for inspection."""
    return InMemoryEventSink()


@pytest.fixture
def settings() -> ProcessorSettings:
    """Default settings, independent of the test environment."""
    return ProcessorSettings(_env_file=None)


@pytest.fixture
def processor(
    gateway: InMemoryPaymentGateway,
    settings: ProcessorSettings,
    event_sink: InMemoryEventSink,
    time_provider: FixedTimeProvider,
) -> PaymentProcessor:
    return PaymentProcessor(
        gateway,
        settings,
        event_sink=event_sink,
        time_provider=time_provider,
    )


@pytest.fixture
def card_metadata() -> dict[str, str]:
    return {"cardNumber": "123", "expiry": "12/25"}

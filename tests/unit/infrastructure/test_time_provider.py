"""Tests for the system and fixed clocks used to stamp records."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from payment_orchestrator.infrastructure.time_provider import (
    FixedTimeProvider,
    SystemTimeProvider,
)


class TestSystemTimeProvider:
    def test_now_is_current_utc(self) -> None:
        before = datetime.now(UTC)

        result = SystemTimeProvider().now()

        assert result.tzinfo is UTC
        assert before <= result <= datetime.now(UTC)


class TestFixedTimeProvider:
    def test_stands_still_until_advanced(self, fixed_time: datetime) -> None:
        clock = FixedTimeProvider(fixed_time)

        assert clock.now() == clock.now() == fixed_time

        clock.advance(timedelta(seconds=30))
        clock.advance(timedelta(seconds=30))

        assert clock.now() == fixed_time + timedelta(minutes=1)

    @pytest.mark.parametrize(
        "tzinfo", [None, timezone(timedelta(hours=6))], ids=["naive", "offset"]
    )
    def test_rejects_non_utc_start(self, tzinfo: timezone | None) -> None:
        with pytest.raises(ValueError, match="must be UTC"):
            FixedTimeProvider(datetime(2024, 1, 1, 12, 0, tzinfo=tzinfo))

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for the clock used to stamp transactions and refunds.

    Contract:
    - now() MUST return a datetime with tzinfo=datetime.UTC
    - now() is read once per record, at build time (not at request time)
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current UTC datetime (tzinfo=datetime.UTC)."""
        ...

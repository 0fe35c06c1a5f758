"""
People API - Clock Abstraction
==============================

What:  The single source of "now" for persistence code.
How:   Repositories and the AuditInterceptor receive a Clock instance; nothing
       below the route layer calls datetime.now() directly.
Who:   SystemClock is wired in by people_api.dependencies; tests substitute a
       fake clock that returns preset instants.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Return the current instant.

        Returns:
            A timezone-aware datetime in UTC. Never naive.
        """
        ...


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


# Shared instance; stateless
system_clock = SystemClock()

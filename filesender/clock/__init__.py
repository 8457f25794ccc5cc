from filesender.clock.base import BaseClock
from filesender.clock.system_clock import SystemClock

__all__ = ["BaseClock", "SystemClock"]

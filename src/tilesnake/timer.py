# timer.py
"""Fixed-interval tick scheduling on the pygame event queue."""
import logging
from typing import Callable, Optional, Protocol

import pygame  # type: ignore

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> TickHandle: ...


class PygameTickHandle:
    def __init__(self, scheduler: "PygameScheduler", callback: Callable[[], None], serial: int):
        self._scheduler = scheduler
        self.callback = callback
        self.serial = serial
        self.active = True

    @property
    def event(self) -> pygame.event.Event:
        """The tick event this handle's timer posts."""
        return pygame.event.Event(self._scheduler.event_type, handle_id=self.serial)

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._scheduler._release(self)


class PygameScheduler:
    """
    Drives ticks with pygame.time.set_timer. Only one handle is armed at a
    time; scheduling again replaces (and cancels) the previous one. Each
    timer posts events tagged with its handle's serial, and dispatch() drops
    any tick that does not belong to the live handle.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self._live: Optional[PygameTickHandle] = None
        self._serial = 0

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> PygameTickHandle:
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        if self._live is not None:
            self._live.cancel()
        self._serial += 1
        handle = PygameTickHandle(self, callback, self._serial)
        self._live = handle
        pygame.time.set_timer(handle.event, interval_ms)
        logger.debug(f"Tick timer {handle.serial} armed at {interval_ms}ms")
        return handle

    def _release(self, handle: PygameTickHandle) -> None:
        if self._live is handle:
            self._live = None
            pygame.time.set_timer(self.event_type, 0)
            pygame.event.clear(self.event_type)
            logger.debug(f"Tick timer {handle.serial} disarmed")

    def dispatch(self, event) -> bool:
        """Run the live callback for a tick event. Returns True if the event was a tick."""
        if event.type != self.event_type:
            return False
        live = self._live
        if live is not None and getattr(event, "handle_id", None) == live.serial:
            live.callback()
        return True

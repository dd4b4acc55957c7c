from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from .geometry import ORIGIN, Point

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass
class TrackingState:
    """
    Shared cell written by the drag tracker and read by the magnifier/indicator.

    Only the Tk event-dispatch thread touches it.
    """

    # last resolved sample (kept when the pointer leaves the plot)
    current_index: int = 0
    current_value: float = 0.0

    # 0 = idle (readout hidden), 1 = tracking
    opacity: float = 0.0

    # pointer location in container coords, and where the indicator is drawn
    drag_location: Point = ORIGIN
    indicator_location: Point = ORIGIN
    # pixel position returned by the resolver (ORIGIN when the pointer missed)
    closest_point: Point = ORIGIN

    _listeners: List[Callable[["TrackingState"], None]] = field(default_factory=list, repr=False, compare=False)

    @property
    def tracking(self) -> bool:
        return self.opacity > 0

    def subscribe(self, listener: Callable[["TrackingState"], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def reset(self) -> None:
        self.opacity = 0.0
        self.drag_location = ORIGIN
        self.indicator_location = ORIGIN
        self.closest_point = ORIGIN
        logger.debug("tracking reset (index=%s)", self.current_index)
        self.notify()

from __future__ import annotations

from typing import Protocol


class Cadence(Protocol):
    active: bool

    def start(self) -> None: ...

    def cancel(self) -> None: ...


class ManualCadence:
    """Cadence for headless drivers and tests; the caller invokes tick() itself."""

    def __init__(self) -> None:
        self.active = False
        self.starts = 0
        self.cancels = 0

    def start(self) -> None:
        self.active = True
        self.starts += 1

    def cancel(self) -> None:
        if self.active:
            self.cancels += 1
        self.active = False

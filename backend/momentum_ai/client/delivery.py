"""Simulated typing for an answer that has already arrived in full.

The simulator is a small state machine::

    PENDING -> WAITING -> STREAMING -> DONE
                  |            |
                  |            +-> CANCELLED   (teardown)
                  +-> PENDING | CANCELLED     (reset / teardown)

One character of the known answer is revealed per tick. ``run`` drives the
ticks from an asyncio loop; ``launch`` wraps it in the single task the
simulator owns so ``cancel`` can stop it when the hosting view goes away.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

DEFAULT_INTERVAL = 0.005


class DeliveryState(str, Enum):
    PENDING = "pending"
    WAITING = "waiting"
    STREAMING = "streaming"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass
class DisplayMessage:
    role: str
    content: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SimulatorBusy(RuntimeError):
    pass


UpdateCallback = Callable[[DisplayMessage], None]


class DeliverySimulator:
    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL,
        on_update: UpdateCallback | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.interval = interval
        self.on_update = on_update
        self._sleep = sleep
        self.state = DeliveryState.PENDING
        self.message: DisplayMessage | None = None
        self._full_text = ""
        self._revealed = 0
        self._task: asyncio.Task | None = None

    @property
    def busy(self) -> bool:
        return self.state in (DeliveryState.WAITING, DeliveryState.STREAMING)

    def begin_wait(self) -> None:
        if self.busy:
            raise SimulatorBusy(f"cannot start a new answer while {self.state.value}")
        self.state = DeliveryState.WAITING
        self.message = None
        self._full_text = ""
        self._revealed = 0

    def reset(self) -> None:
        if self.state is DeliveryState.STREAMING:
            raise SimulatorBusy("reset is only valid before streaming starts")
        self.state = DeliveryState.PENDING

    def start(self, full_text: str) -> DisplayMessage:
        if self.state is not DeliveryState.WAITING:
            raise SimulatorBusy(f"start requires waiting state, got {self.state.value}")
        self._full_text = full_text
        self._revealed = 0
        self.message = DisplayMessage(role="assistant", content="")
        self.state = DeliveryState.STREAMING if full_text else DeliveryState.DONE
        return self.message

    def tick(self) -> bool:
        if self.state is not DeliveryState.STREAMING or self.message is None:
            return False
        self._revealed += 1
        self.message.content = self._full_text[: self._revealed]
        if self._revealed >= len(self._full_text):
            self.state = DeliveryState.DONE
        if self.on_update is not None:
            self.on_update(self.message)
        return True

    async def run(self) -> None:
        while self.state is DeliveryState.STREAMING:
            await self._sleep(self.interval)
            self.tick()

    def launch(self) -> asyncio.Task:
        if self._task is not None and not self._task.done():
            raise SimulatorBusy("a reveal task is already running")
        self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    async def wait(self) -> None:
        if self._task is None:
            return
        # asyncio.wait does not re-raise the reveal task's cancellation.
        await asyncio.wait({self._task})
        if not self._task.cancelled():
            self._task.result()

    def cancel(self) -> None:
        if self.busy:
            self.state = DeliveryState.CANCELLED
        if self._task is not None and not self._task.done():
            self._task.cancel()

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from momentum_ai.client.api import AskAIClient
from momentum_ai.client.delivery import DeliverySimulator, DeliveryState, DisplayMessage

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I'm your AI companion specialized in entrepreneurship and learning. "
    "How can I help you today?"
)
RESPONSE_FAILED = "Failed to get response from AI"
SEND_FAILED = "Failed to send message"


def _log_notice(text: str) -> None:
    logger.warning(text)


class ChatSession:
    """Single-user chat state: the visible messages plus the reveal of the latest answer."""

    def __init__(
        self,
        client: AskAIClient,
        simulator: DeliverySimulator | None = None,
        notify: Callable[[str], None] = _log_notice,
    ) -> None:
        self.client = client
        self.simulator = simulator or DeliverySimulator()
        self.notify = notify
        self.messages: list[DisplayMessage] = [DisplayMessage(role="assistant", content=GREETING)]

    @property
    def busy(self) -> bool:
        return self.simulator.busy

    async def send(self, text: str) -> bool:
        """Submit a question; returns False when the submission was ignored."""
        if not text.strip() or self.busy:
            return False

        self.messages.append(DisplayMessage(role="user", content=text))
        self.simulator.begin_wait()
        try:
            reply = await self.client.ask(text)
        except asyncio.CancelledError:
            self._abort_wait()
            raise
        except Exception:
            logger.exception("Error sending message")
            self._abort_wait()
            self.notify(SEND_FAILED)
            return True

        if self.simulator.state is not DeliveryState.WAITING:
            # closed while the request was in flight
            return True

        if not reply.success or reply.data is None:
            self.simulator.reset()
            self.notify(RESPONSE_FAILED)
            return True

        self.messages.append(self.simulator.start(reply.data.message))
        self.simulator.launch()
        return True

    def _abort_wait(self) -> None:
        if self.simulator.state is DeliveryState.WAITING:
            self.simulator.reset()

    async def wait_idle(self) -> None:
        await self.simulator.wait()

    def close(self) -> None:
        self.simulator.cancel()

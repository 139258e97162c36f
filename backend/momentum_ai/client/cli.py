from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable
from typing import TextIO

from momentum_ai.client.api import AskAIClient
from momentum_ai.client.delivery import DeliverySimulator, DisplayMessage
from momentum_ai.client.session import ChatSession
from momentum_ai.config import ClientSettings
from momentum_ai.logging_config import setup_logging

EXIT_COMMANDS = {"exit", "quit", ":q"}


class TypingPrinter:
    def __init__(self, out: TextIO) -> None:
        self.out = out
        self._printed = 0

    def begin(self) -> None:
        self._printed = 0
        self.out.write("AI: ")
        self.out.flush()

    def __call__(self, message: DisplayMessage) -> None:
        self.out.write(message.content[self._printed :])
        self.out.flush()
        self._printed = len(message.content)


async def chat_loop(
    session: ChatSession,
    printer: TypingPrinter,
    read_line: Callable[[str], str] = input,
) -> None:
    out = printer.out
    out.write(f"AI: {session.messages[0].content}\n")
    try:
        while True:
            try:
                line = await asyncio.to_thread(read_line, "You: ")
            except EOFError:
                break
            if line.strip().lower() in EXIT_COMMANDS:
                break
            if not line.strip():
                continue
            printer.begin()
            await session.send(line)
            await session.wait_idle()
            out.write("\n")
    finally:
        session.close()


def _parse_args(argv: list[str] | None, defaults: ClientSettings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="momentum-ask", description="Chat with Momentum AI from the terminal.")
    parser.add_argument("--url", default=defaults.api_url, help="Base URL of the Ask AI API")
    parser.add_argument("--token", default=defaults.api_token, help="Bearer token of a VIEWER account")
    parser.add_argument(
        "--interval",
        type=float,
        default=defaults.reveal_interval_seconds,
        help="Seconds between revealed characters",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    defaults = ClientSettings()
    args = _parse_args(argv, defaults)
    setup_logging(args.log_level)
    printer = TypingPrinter(sys.stdout)
    session = ChatSession(
        client=AskAIClient(args.url, token=args.token, timeout=defaults.request_timeout_seconds),
        simulator=DeliverySimulator(interval=args.interval, on_update=printer),
        notify=lambda text: print(f"\n[!] {text}", file=sys.stderr),
    )
    try:
        asyncio.run(chat_loop(session, printer))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

# src/task_board/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_board
from ..core.state import BoardState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


async def _run_command(state: BoardState, line: str) -> None:
    try:
        reply = await command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed: %s", line)
        reply = "Internal error while handling a command."

    if reply is None:
        reply = "Commands start with '/'. Use /help to list them."
    _print_ts(reply)


async def run_console_loop(state: BoardState) -> None:
    """
    Read commands from stdin until /exit or EOF.

    Each command runs as its own asyncio task, so a slow request does not block
    typing the next one. Replies are printed as they complete, which is not
    necessarily the order they were typed in.
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands, /board to see the board, /exit to quit.\n")

    pending: set[asyncio.Task[None]] = set()

    while True:
        try:
            user_input = (await asyncio.to_thread(input, ">>> ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        job = asyncio.create_task(_run_command(state, user_input))
        pending.add(job)
        job.add_done_callback(pending.discard)

    if pending:
        logger.info("Waiting for %d in-flight command(s)...", len(pending))
        await asyncio.gather(*pending, return_exceptions=True)

    logger.info("Console connector finished.")


async def print_initial_board(state: BoardState) -> None:
    await state.store.load()
    if state.store.error:
        _print_ts(f"Error: {state.store.error}")
    _print_ts("\n" + render_board(state))

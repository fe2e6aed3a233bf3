"""Command line front end for the tone adjustment service."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Callable

import aiohttp

from client.api import ToneAdjustmentClient
from client.session import EditorSession
from shared.exceptions import ToneAPIError

HELP_TEXT = """Commands:
  :slider X Y   move the slider to (X, Y) in [0, 1] and adjust
  :tone N       set the tone level (0 formal .. 100 casual) and adjust
  :style N      set the style level (0 concise .. 100 expanded) and adjust
  :undo         step back in history
  :redo         step forward in history
  :reset        restore the original text and centre the slider
  :show         print the current text and slider
  :quit         leave the editor
Any other line replaces the text."""


def _level(raw: str) -> int:
    value = int(raw)
    if value < 0 or value > 100:
        raise argparse.ArgumentTypeError("level must be between 0 and 100")
    return value


def _describe(session: EditorSession) -> str:
    lines = [
        session.text or "(empty)",
        f"[tone {session.slider.tone_level}, style {session.slider.style_level}, "
        f"history {session.history_index + 1}/{len(session.history)}]",
    ]
    if session.error:
        lines.append(f"error: {session.error}")
    return "\n".join(lines)


async def handle_command(session: EditorSession, line: str, output: Callable[[str], None] = print) -> bool:
    """Apply one editor command; returns False when the editor should exit."""
    parts = line.strip().split()
    command = parts[0] if parts else ""

    if not line.startswith(":"):
        session.type_text(line)
        return True
    if command == ":quit":
        return False
    if command == ":help":
        output(HELP_TEXT)
        return True

    try:
        if command == ":slider" and len(parts) == 3:
            await session.set_slider(float(parts[1]), float(parts[2]))
        elif command == ":tone" and len(parts) == 2:
            await session.set_slider(session.slider.x, _level(parts[1]) / 100)
        elif command == ":style" and len(parts) == 2:
            await session.set_slider(_level(parts[1]) / 100, session.slider.y)
        elif command == ":undo":
            session.undo()
        elif command == ":redo":
            session.redo()
        elif command == ":reset":
            session.reset()
        elif command != ":show":
            output(f"Unknown command: {line.strip()} (try :help)")
            return True
    except (ValueError, argparse.ArgumentTypeError) as exc:
        output(f"Invalid argument: {exc}")
        return True

    output(_describe(session))
    return True


async def run_editor(client: ToneAdjustmentClient, initial_text: str = "") -> None:
    session = EditorSession(client.adjust, initial_text=initial_text)
    print(HELP_TEXT)
    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except EOFError:
            break
        if not await handle_command(session, line):
            break


async def run_adjust(client: ToneAdjustmentClient, text: str, tone: int, style: int) -> int:
    try:
        result = await client.adjust(text, tone, style)
    except ToneAPIError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(result.adjusted_text)
    return 0


async def run_health(client: ToneAdjustmentClient) -> int:
    try:
        status = await client.health()
    except (aiohttp.ClientError, TimeoutError) as exc:
        print(f"Error: tone service unreachable: {exc}", file=sys.stderr)
        return 1
    print(status.get("status", "unknown"))
    for name, state in (status.get("dependencies") or {}).items():
        print(f"  {name}: {state}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tone-slider", description="Adjust the tone and style of text.")
    parser.add_argument("--url", default=None, help="Tone service base URL (default: TONE_API_URL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    adjust = subparsers.add_parser("adjust", help="Adjust a piece of text once")
    adjust.add_argument("text", help="Text to adjust")
    adjust.add_argument("--tone", type=_level, default=50, help="Tone level, 0 formal .. 100 casual")
    adjust.add_argument("--style", type=_level, default=50, help="Style level, 0 concise .. 100 expanded")

    edit = subparsers.add_parser("edit", help="Interactive editor with undo/redo")
    edit.add_argument("--text", default="", help="Initial text")

    subparsers.add_parser("health", help="Check that the tone service is up")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    client = ToneAdjustmentClient(base_url=args.url)
    if args.command == "adjust":
        return asyncio.run(run_adjust(client, args.text, args.tone, args.style))
    if args.command == "health":
        return asyncio.run(run_health(client))
    asyncio.run(run_editor(client, args.text))
    return 0


if __name__ == "__main__":
    sys.exit(main())

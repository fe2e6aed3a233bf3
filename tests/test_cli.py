"""Tests for the tone-slider command line client."""

from unittest.mock import AsyncMock

import aiohttp
import pytest

from client.cli import build_parser, handle_command, run_adjust, run_health
from client.session import EditorSession
from shared.exceptions import ToneAPIError
from shared.models import AdjustmentResponse


def _response(text: str) -> AdjustmentResponse:
    return AdjustmentResponse(adjusted_text=text)


@pytest.mark.asyncio
async def test_plain_line_replaces_text():
    session = EditorSession(AsyncMock(), initial_text="a")

    assert await handle_command(session, "ab", output=lambda _: None)
    assert session.history == ["a", "ab"]


@pytest.mark.asyncio
async def test_tone_command_keeps_style_axis():
    adjuster = AsyncMock(return_value=_response("Formal."))
    session = EditorSession(adjuster, initial_text="hey")
    printed = []

    await handle_command(session, ":tone 20", output=printed.append)

    adjuster.assert_awaited_once_with("hey", 20, 50)
    assert session.text == "Formal."
    assert "Formal." in printed[-1]


@pytest.mark.asyncio
async def test_undo_and_redo_commands():
    session = EditorSession(AsyncMock(), initial_text="a")
    session.type_text("b")

    await handle_command(session, ":undo", output=lambda _: None)
    assert session.text == "a"
    await handle_command(session, ":redo", output=lambda _: None)
    assert session.text == "b"


@pytest.mark.asyncio
async def test_invalid_level_is_reported():
    adjuster = AsyncMock()
    session = EditorSession(adjuster, initial_text="hey")
    printed = []

    assert await handle_command(session, ":style 140", output=printed.append)

    adjuster.assert_not_awaited()
    assert printed[-1].startswith("Invalid argument")


@pytest.mark.asyncio
async def test_unknown_command_and_quit():
    session = EditorSession(AsyncMock(), initial_text="hey")
    printed = []

    assert await handle_command(session, ":bogus", output=printed.append)
    assert "Unknown command" in printed[-1]
    assert not await handle_command(session, ":quit", output=printed.append)


@pytest.mark.asyncio
async def test_run_adjust_prints_result(capsys):
    client = AsyncMock()
    client.adjust.return_value = _response("Good afternoon.")

    assert await run_adjust(client, "hi", 10, 80) == 0
    assert capsys.readouterr().out.strip() == "Good afternoon."


@pytest.mark.asyncio
async def test_run_adjust_reports_errors(capsys):
    client = AsyncMock()
    client.adjust.side_effect = ToneAPIError("Invalid text input", status=400)

    assert await run_adjust(client, "", 10, 80) == 1
    assert "Invalid text input" in capsys.readouterr().err


def test_parser_rejects_out_of_range_levels():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["adjust", "hi", "--tone", "101"])


def test_parser_defaults():
    args = build_parser().parse_args(["adjust", "hi"])
    assert (args.text, args.tone, args.style) == ("hi", 50, 50)


@pytest.mark.asyncio
async def test_run_health_prints_status(capsys):
    client = AsyncMock()
    client.health.return_value = {
        "status": "healthy",
        "dependencies": {"cache": "redis", "llm_driver": "configured"},
    }

    assert await run_health(client) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "healthy"
    assert "cache: redis" in out


@pytest.mark.asyncio
async def test_run_health_reports_unreachable_service(capsys):
    client = AsyncMock()
    client.health.side_effect = aiohttp.ClientConnectionError("refused")

    assert await run_health(client) == 1
    assert "unreachable" in capsys.readouterr().err


def test_parser_accepts_health_command():
    args = build_parser().parse_args(["--url", "http://tone.local", "health"])
    assert (args.command, args.url) == ("health", "http://tone.local")

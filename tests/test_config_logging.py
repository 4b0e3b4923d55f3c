"""Tests for configuration and the colour-tagged search trace."""

from __future__ import annotations

import contextlib
import io

import pytest

from isoboard.board import ROOK_MOVES, BoardMap, NoTerrain
from isoboard.config import Config
from isoboard.logging_utils import (
    LOG_TAG_DETERMINISTIC,
    Color,
    colored,
    log_error,
)


def _capture(fn, *args, **kwargs):
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        result = fn(*args, **kwargs)
    return result, buffer.getvalue()


def test_colored_wraps_text_when_enabled(monkeypatch):
    monkeypatch.setattr(Config, "NO_COLOR", False)
    monkeypatch.delenv("ISOBOARD_NO_COLOR", raising=False)

    text = colored("hello", Color.GREEN, bold=True)

    assert text.startswith(Color.BOLD.value + Color.GREEN.value)
    assert text.endswith(Color.RESET.value)


def test_colored_respects_env_toggle(monkeypatch):
    monkeypatch.setattr(Config, "NO_COLOR", False)
    monkeypatch.setenv("ISOBOARD_NO_COLOR", "1")

    assert colored("hello", Color.RED) == "hello"


def test_log_error_prints_tagged_line(monkeypatch):
    monkeypatch.setattr(Config, "NO_COLOR", True)

    _, output = _capture(log_error, "boom")

    assert output == "[!] boom\n"


def test_searches_are_silent_without_debug(monkeypatch):
    monkeypatch.setattr(Config, "DEBUG_SEARCH", False)
    monkeypatch.delenv("ISOBOARD_DEBUG_SEARCH", raising=False)
    board = BoardMap((5, 5))

    _, output = _capture(board.pathfind, (0, 0), (2, 0), ROOK_MOVES, False, NoTerrain())

    assert output == ""


def test_search_trace_when_debug_enabled(monkeypatch):
    monkeypatch.setattr(Config, "DEBUG_SEARCH", True)
    monkeypatch.setattr(Config, "NO_COLOR", True)
    board = BoardMap((5, 5))
    board.occupants.set((4, 4), "enemy")

    _, path_output = _capture(board.pathfind, (0, 0), (2, 0), ROOK_MOVES, False, NoTerrain())
    _, miss_output = _capture(board.pathfind, (0, 0), (4, 4), ROOK_MOVES, False, NoTerrain())
    _, flood_output = _capture(board.flood, (0, 0), 1, ROOK_MOVES, False, NoTerrain())
    _, heat_output = _capture(board.generate_heat_map)

    assert f"{LOG_TAG_DETERMINISTIC} [Pathfind] (0, 0) -> (2, 0): cost 2" in path_output
    assert "no path" in miss_output
    assert "[Flood] (0, 0) within 1: 3 tiles" in flood_output
    assert "[HeatMap] Regenerated 5x5 from 1 occupants" in heat_output


def test_validate_rejects_negative_move_range(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_MOVE_RANGE", -1)

    with pytest.raises(ValueError):
        Config.validate()


def test_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_MOVE_RANGE", 6)
    monkeypatch.setattr(Config, "DEBUG_SEARCH", False)

    text = Config.display()

    assert "Default Move Range: 6" in text
    assert "Debug Search: off" in text

"""
End-to-end tests for the demonstration program and snapshot output.
"""

from __future__ import annotations

from pathlib import Path

import main
from config import get_active_params
from terminal.screen_buffer import ScreenBuffer
from utils.snapshot_io import save_snapshot, snapshot_name


def static_params():
    return dict(get_active_params(), PROMPT_BETWEEN_SCENES=False,
                FRAME_DELAY_SECONDS=0, LINE_SHOW_SECONDS=None)


def test_demo_runs_without_errors(term, screen, handler) -> None:
    main.run_demo(term, static_params())

    assert handler.errors == []
    # last scene: the Bresenham segment and the circle
    assert screen.glyph_at(5, 4) == "*"
    assert screen.glyph_at(40, 18) == "*"
    assert screen.glyph_at(66, 12) == "o"


def test_headless_main_writes_snapshot(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    assert main.main(["--headless", "--name", "scene"]) == 0

    snapshot = Path("output") / "scene.txt"
    assert snapshot.exists()
    assert "Bresenham segment and circle" in snapshot.read_text(encoding="utf-8")
    assert "[OK] Snapshot written to" in capsys.readouterr().out


def test_snapshot_name_suffix() -> None:
    assert snapshot_name("boxes") == "boxes.txt"
    assert snapshot_name("boxes.txt") == "boxes.txt"


def test_save_snapshot_creates_directories(tmp_path) -> None:
    screen = ScreenBuffer(5, 2)
    screen.write("hi")

    path = save_snapshot(str(tmp_path / "a" / "b" / "hi.txt"), screen)

    assert Path(path).read_text(encoding="utf-8") == "hi\n\n"

"""
Snapshot I/O utilities for headless rendering.

This module provides:
    • ensure_output_dir(path)
    • snapshot_name(name)
    • save_snapshot(path, screen)

A snapshot is the plain-text rendering of a ScreenBuffer.
"""

import os

from config import SNAPSHOT_SUFFIX


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def snapshot_name(name: str) -> str:
    """
    Appends the snapshot suffix unless already present.

    Example:
        'boxes' → 'boxes.txt'
    """
    return name if name.endswith(SNAPSHOT_SUFFIX) else name + SNAPSHOT_SUFFIX


# -------------------------------------------------------------------------
#  SNAPSHOT SAVING
# -------------------------------------------------------------------------

def save_snapshot(path: str, screen) -> str:
    """
    Write screen.to_text() to disk (UTF-8), ensuring the directory exists.
    Returns the path written.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(screen.to_text())
        fh.write("\n")
    return path

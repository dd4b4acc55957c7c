from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT))


@pytest.fixture
def tk_root():
    """A withdrawn Tk root; tests using it skip when no display is available."""
    import tkinter as tk

    try:
        root = tk.Tk()
    except tk.TclError as e:
        pytest.skip(f"Tk display not available: {e}")
    root.withdraw()
    yield root
    root.destroy()

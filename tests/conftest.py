"""
Shared pytest fixtures and helpers.

Pytest automatically discovers this file and makes the fixtures available
to all tests in this folder.
"""

import sys
from pathlib import Path

import pytest


ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
# Allow tests to import the package from src/ without installing it first.
sys.path.insert(0, str(SRC_DIR))


def pytest_configure(config):
    config.addinivalue_line("markers", "dispatch: vtable lookup and downcasting")
    config.addinivalue_line("markers", "shapes: rectangle and circle variants")
    config.addinivalue_line("markers", "cli: the demo entry point")


@pytest.fixture()
def drawn_lines(capsys):
    # Draw each figure and return the stdout lines it produced, in order.
    from figures.dispatch import call_draw

    def _draw(*figures):
        for figure in figures:
            call_draw(figure)
        return capsys.readouterr().out.splitlines()

    return _draw

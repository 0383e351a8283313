"""Pytest configuration to make the project root importable.

Lets ``import shell`` work when tests are run without installing the package.
"""

import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest


@pytest.fixture
def feed():
    """Return a function that turns bytes into a readable fd holding them."""
    opened = []

    def _feed(data):
        r, w = os.pipe()
        os.write(w, data)
        os.close(w)
        opened.append(r)
        return r

    yield _feed
    for fd in opened:
        os.close(fd)

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgrid.core.board import Board


@pytest.fixture
def board() -> Board:
    """Board in the standard starting position."""
    return Board()


@pytest.fixture
def empty_board() -> Board:
    return Board(populate=False)

"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmoves.core.board import Board


@pytest.fixture
def empty_board() -> Board:
    """A board with no pieces on it."""
    return Board()


@pytest.fixture
def start_board() -> Board:
    """A board in the standard starting position."""
    return Board.initial()

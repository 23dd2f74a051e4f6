"""Shared fixtures for the puzzle solver tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

SCHEMATIC_ROWS: List[str] = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]

GAME_LINES: List[str] = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]

CARD_LINES: List[str] = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[List[str]], Path]:
    """Write lines to a temp file and return its path."""

    def _write(lines: List[str], name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def schematic_rows() -> List[str]:
    return list(SCHEMATIC_ROWS)


@pytest.fixture
def game_lines() -> List[str]:
    return list(GAME_LINES)


@pytest.fixture
def card_lines() -> List[str]:
    return list(CARD_LINES)

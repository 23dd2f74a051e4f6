"""
Test Suite for the cube game solver
===================================
"""

from __future__ import annotations

import pytest

from puzzles.cubes import (
    build_round_table,
    max_counts,
    parse_game,
    parse_games,
    score_game_powers,
    score_possible_games,
    sum_game_powers,
    sum_possible_game_ids,
)
from puzzles.errors import InputFormatError
from puzzles.types import Round


class TestParseGame:
    """Test parse_game / parse_games."""

    def test_rounds(self):
        game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        assert game.game_id == 1
        assert game.rounds == [
            Round(red=4, blue=3),
            Round(red=1, green=2, blue=6),
            Round(green=2),
        ]

    def test_repeated_color_is_summed(self):
        game = parse_game("Game 7: 1 red, 2 red")
        assert game.rounds == [Round(red=3)]

    def test_no_rounds(self):
        assert parse_game("Game 9:").rounds == []

    def test_bad_header(self):
        with pytest.raises(InputFormatError):
            parse_game("Gaem 1: 3 blue")

    def test_unknown_color(self):
        with pytest.raises(InputFormatError, match="purple"):
            parse_game("Game 1: 3 purple")

    def test_malformed_draw_reports_line(self):
        with pytest.raises(InputFormatError, match="line 2"):
            parse_games(["Game 1: 1 red", "Game 2: red 1"])

    def test_blank_lines_skipped(self, game_lines):
        assert len(parse_games(game_lines + ["", "  "])) == 5


class TestCubeScoring:
    """Test the round table and both scores."""

    def test_round_table(self, game_lines):
        table = build_round_table(parse_games(game_lines))
        assert len(table) == 14
        assert list(table.columns) == ["game_no", "game_id", "round", "red", "green", "blue"]
        assert table["game_no"].tolist()[:4] == [0, 0, 0, 1]

    def test_max_counts(self, game_lines):
        maxima = max_counts(parse_games(game_lines))
        row = maxima.iloc[2]
        assert (row["game_id"], row["red"], row["green"], row["blue"]) == (3, 20, 13, 6)

    def test_possible_games(self, game_lines):
        assert score_possible_games(parse_games(game_lines)) == 8

    def test_custom_limits(self, game_lines):
        games = parse_games(game_lines)
        assert score_possible_games(games, {"red": 100, "green": 100, "blue": 100}) == 15

    def test_powers(self, game_lines):
        assert score_game_powers(parse_games(game_lines)) == 2286

    def test_game_without_rounds(self):
        games = parse_games(["Game 4:", "Game 5: 1 red, 1 green, 1 blue"])
        assert score_possible_games(games) == 9
        assert score_game_powers(games) == 1

    def test_empty(self):
        assert score_possible_games([]) == 0
        assert score_game_powers([]) == 0

    def test_from_file(self, write_input, game_lines):
        path = write_input(game_lines)
        assert sum_possible_game_ids(path) == 8
        assert sum_game_powers(path) == 2286

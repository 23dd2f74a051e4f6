"""
Test Suite for the solver registry and HTTP API
===============================================
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from puzzles import PUZZLES, solve_all, solve_file, solve_lines
from puzzles.api import app


# ═══════════════════════════════════════════════════════════════════════════════
# REGISTRY TESTS
# ═══════════════════════════════════════════════════════════════════════════════


class TestRegistry:
    """Test solve_lines / solve_file / solve_all."""

    def test_names(self):
        assert set(PUZZLES) == {
            "schematic.part_numbers",
            "schematic.gear_ratios",
            "cubes.possible_games",
            "cubes.power",
            "scratchcards.points",
            "scratchcards.total_cards",
        }

    def test_solve_lines(self, schematic_rows, game_lines, card_lines):
        assert solve_lines("schematic.part_numbers", schematic_rows) == 4361
        assert solve_lines("schematic.gear_ratios", schematic_rows) == 467835
        assert solve_lines("cubes.possible_games", game_lines) == 8
        assert solve_lines("cubes.power", game_lines) == 2286
        assert solve_lines("scratchcards.points", card_lines) == 13
        assert solve_lines("scratchcards.total_cards", card_lines) == 30

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="known"):
            solve_lines("nope", [])

    def test_solve_file(self, write_input, schematic_rows):
        assert solve_file("schematic.gear_ratios", write_input(schematic_rows)) == 467835

    def test_solve_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            solve_file("cubes.power", tmp_path / "missing.txt")

    def test_solve_all(self, write_input, schematic_rows, card_lines):
        schematic = write_input(schematic_rows, "schematic.txt")
        cards = write_input(card_lines, "cards.txt")
        answers = solve_all({
            "schematic.part_numbers": schematic,
            "scratchcards.total_cards": cards,
        })
        assert answers == {"schematic.part_numbers": 4361, "scratchcards.total_cards": 30}


# ═══════════════════════════════════════════════════════════════════════════════
# API TESTS
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestApi:
    """Test the FastAPI endpoints."""

    def test_list_puzzles(self, client):
        response = client.get("/api/puzzles")
        assert response.status_code == 200
        assert response.json() == sorted(PUZZLES)

    def test_solve(self, client, schematic_rows):
        response = client.post(
            "/api/solve",
            json={"puzzle": "schematic.gear_ratios", "text": "\n".join(schematic_rows)},
        )
        assert response.status_code == 200
        assert response.json() == {"puzzle": "schematic.gear_ratios", "answer": 467835}

    def test_unknown_puzzle(self, client):
        response = client.post("/api/solve", json={"puzzle": "nope", "text": ""})
        assert response.status_code == 404

    def test_malformed_input(self, client):
        response = client.post(
            "/api/solve",
            json={"puzzle": "schematic.part_numbers", "text": "...\n.."},
        )
        assert response.status_code == 400
        assert "row 2" in response.json()["detail"]

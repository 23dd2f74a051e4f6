# puzzles/__init__.py
# -*- coding: utf-8 -*-
"""
puzzles パッケージの入口となるモジュールです。

各ソルバーは「行を解析する関数」と「解析結果から答えを計算する関数」の
組として PUZZLES に登録されています。

    from puzzles import solve_file

    solve_file("schematic.gear_ratios", "input.txt")

のように名前を指定して呼び出します。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Tuple

from .cubes import parse_games, score_game_powers, score_possible_games
from .io_utils import read_lines
from .logging_utils import get_logger
from .schematic import grid_from_lines, score_gear_ratios, score_part_numbers
from .scratchcards import count_total_cards, parse_cards, score_card_points

logger = get_logger()

Parser = Callable[[Iterable[str]], Any]
Scorer = Callable[[Any], int]

PUZZLES: Dict[str, Tuple[Parser, Scorer]] = {
    "schematic.part_numbers": (grid_from_lines, score_part_numbers),
    "schematic.gear_ratios": (grid_from_lines, score_gear_ratios),
    "cubes.possible_games": (parse_games, score_possible_games),
    "cubes.power": (parse_games, score_game_powers),
    "scratchcards.points": (parse_cards, score_card_points),
    "scratchcards.total_cards": (parse_cards, count_total_cards),
}


def _lookup(name: str) -> Tuple[Parser, Scorer]:
    try:
        return PUZZLES[name]
    except KeyError:
        raise KeyError(f"Unknown puzzle {name!r}; known: {', '.join(sorted(PUZZLES))}") from None


def solve_lines(name: str, lines: Iterable[str]) -> int:
    """すでに読み込んだ行を使って、name のソルバーを実行します。"""
    parse, score = _lookup(name)
    return score(parse(lines))


def solve_file(name: str, path: str | Path) -> int:
    """ファイルを読み込み、name のソルバーを実行します。"""
    _lookup(name)
    answer = solve_lines(name, read_lines(path))
    logger.info("%s -> %d", name, answer)
    return answer


def solve_all(paths: Dict[str, str | Path]) -> Dict[str, int]:
    """
    {パズル名: 入力ファイル} をまとめて解きます。

    どれか 1 つでも失敗した場合は、その例外をそのまま送出します。
    """
    logger.info("=== solve_all() START ===")
    answers = {name: solve_file(name, path) for name, path in paths.items()}
    logger.info("=== solve_all() END ===")
    return answers


__all__ = ["PUZZLES", "solve_all", "solve_file", "solve_lines"]

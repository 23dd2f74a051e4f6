# -*- coding: utf-8 -*-
"""
puzzles.cubes パッケージ

袋から取り出した色付きキューブの記録（"Game <id>: ..." 行）を扱います。
- parser.py  : 行を Game / Round に変換
- scoring.py : 上限を超えないゲームの ID 合計、各ゲームのパワーの合計
"""

from __future__ import annotations

from pathlib import Path

from ..io_utils import read_lines
from .parser import parse_game, parse_games
from .scoring import build_round_table, max_counts, score_game_powers, score_possible_games


def sum_possible_game_ids(path: str | Path) -> int:
    """ファイルを読み込み、上限内に収まるゲームの ID 合計を返します。"""
    return score_possible_games(parse_games(read_lines(path)))


def sum_game_powers(path: str | Path) -> int:
    """ファイルを読み込み、各ゲームのパワー（色ごとの最大数の積）の合計を返します。"""
    return score_game_powers(parse_games(read_lines(path)))


__all__ = [
    "build_round_table",
    "max_counts",
    "parse_game",
    "parse_games",
    "score_game_powers",
    "score_possible_games",
    "sum_game_powers",
    "sum_possible_game_ids",
]

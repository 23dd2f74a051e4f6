# -*- coding: utf-8 -*-
"""
puzzles.schematic パッケージ

エンジン回路図（数字と記号の 2 次元盤面）を扱うサブパッケージです。
- loader.py    : 入力行を 1 次元のバイト配列（Grid）に変換
- numbers.py   : 数字列の抽出と、任意の数字マスからの逆引き
- neighbors.py : 周囲 8 マスのインデックス計算
- scoring.py   : 部品番号の合計・歯車比の合計
"""

from __future__ import annotations

from pathlib import Path

from .loader import Grid, grid_from_lines, load_grid
from .scoring import score_gear_ratios, score_part_numbers


def sum_part_numbers(path: str | Path) -> int:
    """ファイルを読み込み、記号に隣接する数字の合計を返します。"""
    return score_part_numbers(load_grid(path))


def sum_gear_ratios(path: str | Path) -> int:
    """ファイルを読み込み、歯車比の合計を返します。"""
    return score_gear_ratios(load_grid(path))


__all__ = [
    "Grid",
    "grid_from_lines",
    "load_grid",
    "score_gear_ratios",
    "score_part_numbers",
    "sum_gear_ratios",
    "sum_part_numbers",
]

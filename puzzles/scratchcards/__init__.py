# -*- coding: utf-8 -*-
"""
puzzles.scratchcards パッケージ

スクラッチカード（"Card <id>: <当たり番号> | <手持ち番号>" 行）を扱います。
- parser.py  : 行を Card に変換
- scoring.py : 点数の合計、コピーの連鎖を含めた最終的なカード枚数
"""

from __future__ import annotations

from pathlib import Path

from ..io_utils import read_lines
from .parser import parse_card, parse_cards
from .scoring import (
    build_card_table,
    card_copies,
    card_points,
    count_matches,
    count_total_cards,
    score_card_points,
)


def sum_card_points(path: str | Path) -> int:
    """ファイルを読み込み、カードの点数の合計を返します。"""
    return score_card_points(parse_cards(read_lines(path)))


def total_scratchcards(path: str | Path) -> int:
    """ファイルを読み込み、コピーを含めた最終的なカード枚数を返します。"""
    return count_total_cards(parse_cards(read_lines(path)))


__all__ = [
    "build_card_table",
    "card_copies",
    "card_points",
    "count_matches",
    "count_total_cards",
    "parse_card",
    "parse_cards",
    "score_card_points",
    "sum_card_points",
    "total_scratchcards",
]

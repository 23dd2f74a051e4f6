# -*- coding: utf-8 -*-
"""
回路図の 2 種類の集計を行うモジュールです。

- 記号に隣接する数字（部品番号）の合計
- ちょうど 2 つの数字に隣接する "*"（歯車）の比の合計

どちらも盤面を読むだけで書き換えないので、同じ Grid を共有できます。
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from ..config import GEAR_CHAR, GEAR_NEIGHBOR_COUNT
from ..logging_utils import get_logger
from ..types import Gear, NumberToken, Span
from .loader import Grid
from .neighbors import is_symbol, valid_neighbors
from .numbers import iter_numbers, number_at

logger = get_logger()


def touches_symbol(grid: Grid, token: NumberToken) -> bool:
    """数字列のどこか 1 マスでも記号に隣接していれば True。"""
    buf = grid.raw
    for pos in token.positions():
        for n in valid_neighbors(pos, grid.width, grid.size):
            if is_symbol(buf[n]):
                return True
    return False


def find_part_numbers(grid: Grid) -> List[NumberToken]:
    """記号に隣接する数字列を、盤面上の出現順に返します。"""
    if not grid.symbols.any():
        logger.debug("No symbols in grid; no part numbers.")
        return []

    parts: List[NumberToken] = []
    for token in iter_numbers(grid):
        if touches_symbol(grid, token):
            logger.debug("part number %d at %s", token.value, grid.coords(token.start))
            parts.append(token)
    return parts


def score_part_numbers(grid: Grid) -> int:
    """部品番号の合計を返します。"""
    total = sum(token.value for token in find_part_numbers(grid))
    logger.info("Part number sum: %d", total)
    return total


def adjacent_numbers(grid: Grid, index: int) -> List[NumberToken]:
    """
    マス index に隣接する数字列を、重複なしで返します。

    1 つの数字列が複数の近傍マスにまたがっていても 1 回だけ数えます。
    隣り合うインデックスの数字マスでも、同じ数字列に属するときだけまとめます。
    順番は数字列の先頭インデックスの昇順です。
    """
    seen: Dict[Span, NumberToken] = {}
    for n in sorted(valid_neighbors(index, grid.width, grid.size)):
        if not grid.digits[n]:
            continue
        token = number_at(grid, n)
        seen.setdefault(token.span, token)
    return sorted(seen.values(), key=lambda t: t.start)


def find_gears(grid: Grid) -> List[Gear]:
    """
    ちょうど 2 つの数字列に隣接する "*" を列挙します。

    隣接する数字が 0 個・1 個・3 個以上の "*" は歯車ではありません。
    """
    gears: List[Gear] = []
    for index in np.flatnonzero(grid.cells == ord(GEAR_CHAR)):
        index = int(index)
        numbers = adjacent_numbers(grid, index)
        if len(numbers) != GEAR_NEIGHBOR_COUNT:
            continue
        gear = Gear(index=index, numbers=(numbers[0], numbers[1]))
        logger.debug(
            "gear at %s: %d * %d = %d",
            grid.coords(index), numbers[0].value, numbers[1].value, gear.ratio,
        )
        gears.append(gear)
    return gears


def score_gear_ratios(grid: Grid) -> int:
    """歯車比の合計を返します。"""
    total = sum(gear.ratio for gear in find_gears(grid))
    logger.info("Gear ratio sum: %d", total)
    return total

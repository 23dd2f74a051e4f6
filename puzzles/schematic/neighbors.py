# -*- coding: utf-8 -*-
"""
フラットインデックス上で、周囲 8 マス（ムーア近傍）を求めるモジュールです。

盤面の外（上下の端・左右の端）にあたる近傍は None で表します。
左右の端で隣の行に回り込むことはありません。
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import SPECIAL_CHARS

# (dx, dy) の組。dx が外側のループ。
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)

_SPECIAL_BYTES = frozenset(ord(ch) for ch in SPECIAL_CHARS)


def neighbors(index: int, width: int, size: int) -> List[Optional[int]]:
    """
    index の周囲 8 マスのフラットインデックスを返します。

    Parameters
    ----------
    index : int
        中心マスのフラットインデックス。
    width : int
        行幅。
    size : int
        盤面全体のマス数。

    Returns
    -------
    list of int or None
        NEIGHBOR_OFFSETS の順に 8 個。盤面外は None。
    """
    if width <= 0 or not 0 <= index < size:
        raise IndexError(f"index {index} is outside a grid of size {size}")

    row, col = divmod(index, width)
    result: List[Optional[int]] = []
    for dx, dy in NEIGHBOR_OFFSETS:
        r, c = row + dy, col + dx
        if r < 0 or not 0 <= c < width:
            result.append(None)
            continue
        flat = r * width + c
        result.append(flat if flat < size else None)
    return result


def valid_neighbors(index: int, width: int, size: int) -> List[int]:
    """:func:`neighbors` から None を取り除いたもの。"""
    return [n for n in neighbors(index, width, size) if n is not None]


def is_symbol(byte: int) -> bool:
    return byte in _SPECIAL_BYTES

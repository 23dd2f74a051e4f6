# -*- coding: utf-8 -*-
"""
回路図（schematic）の入力を、フラットなバイト配列に変換するモジュールです。

主な役割:
- 各行を区切り文字なしで連結し、1 次元の numpy 配列（uint8）にする
- 1 行目の長さを行幅として採用し、残りの行がすべて同じ幅か検証する
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np

from ..config import SPECIAL_CHARS
from ..errors import GridFormatError
from ..io_utils import read_lines
from ..logging_utils import get_logger

logger = get_logger()

ASCII_ZERO = ord("0")
ASCII_NINE = ord("9")

# 記号文字のバイト値（numpy.isin 用）
SPECIAL_BYTES = np.array(sorted(ord(ch) for ch in SPECIAL_CHARS), dtype=np.uint8)


@dataclass(frozen=True, eq=False)
class Grid:
    """
    盤面全体を 1 次元に並べたバイト列と、行幅の組です。

    (row, col) のマスはフラットインデックス ``row * width + col`` に対応します。

    Attributes
    ----------
    cells : numpy.ndarray
        shape = (height * width,) の uint8 配列。書き込み不可。
    width : int
        1 行あたりの文字数。
    """

    cells: np.ndarray
    width: int

    @property
    def size(self) -> int:
        return int(self.cells.size)

    @property
    def height(self) -> int:
        return self.size // self.width if self.width else 0

    @cached_property
    def raw(self) -> bytes:
        """走査用の bytes。添字アクセスで int が返ります。"""
        return self.cells.tobytes()

    @cached_property
    def digits(self) -> np.ndarray:
        """ASCII 数字のマスが True になる bool 配列。"""
        return (self.cells >= ASCII_ZERO) & (self.cells <= ASCII_NINE)

    @cached_property
    def symbols(self) -> np.ndarray:
        """記号（SPECIAL_CHARS）のマスが True になる bool 配列。"""
        return np.isin(self.cells, SPECIAL_BYTES)

    def coords(self, index: int) -> Tuple[int, int]:
        """フラットインデックスを (row, col) に変換します。"""
        return divmod(index, self.width)

    def index(self, row: int, col: int) -> int:
        return row * self.width + col

    def row_bounds(self, index: int) -> Tuple[int, int]:
        """index を含む行の [先頭, 末尾+1) を返します。"""
        start = (index // self.width) * self.width
        return start, start + self.width

    def to_matrix(self) -> np.ndarray:
        """shape = (height, width) の 2 次元ビューを返します。"""
        return self.cells.reshape(self.height, self.width)


def grid_from_lines(lines: Iterable[str]) -> Grid:
    """
    行のリストから :class:`Grid` を作ります。

    末尾の空行は無視します。途中の空行や、1 行目と長さの違う行があれば
    その場で :class:`GridFormatError` を送出します。

    Parameters
    ----------
    lines : iterable of str
        盤面の各行。末尾の改行コードは取り除かれます。

    Returns
    -------
    Grid
    """
    texts: List[str] = [line.rstrip("\r\n") for line in lines]
    while texts and not texts[-1]:
        texts.pop()

    if not texts:
        return Grid(cells=_freeze(b""), width=0)

    width = len(texts[0])
    if width == 0:
        raise GridFormatError("row 1 is empty")

    rows: List[bytes] = []
    for row_no, text in enumerate(texts, start=1):
        if len(text) != width:
            raise GridFormatError(
                f"row {row_no} has width {len(text)}, expected {width}"
            )
        try:
            rows.append(text.encode("ascii"))
        except UnicodeEncodeError as e:
            raise GridFormatError(f"row {row_no} contains non-ASCII text") from e

    grid = Grid(cells=_freeze(b"".join(rows)), width=width)
    logger.debug("Grid built: %d rows x %d cols", grid.height, grid.width)
    return grid


def load_grid(path: str | Path) -> Grid:
    """
    ファイルから盤面を読み込みます。

    ファイルが開けない場合の FileNotFoundError / OSError は
    走査を始める前にそのまま呼び出し元へ伝わります。
    """
    grid = grid_from_lines(read_lines(path))
    logger.info("Grid loaded: %d rows x %d cols", grid.height, grid.width)
    return grid


def _freeze(data: bytes) -> np.ndarray:
    cells = np.array(bytearray(data), dtype=np.uint8)
    cells.setflags(write=False)
    return cells

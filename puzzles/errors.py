# -*- coding: utf-8 -*-
"""
入力の不正を表す例外クラスです。

ファイルが無い・読めないといった I/O エラーは組み込みの
FileNotFoundError / OSError をそのまま使います。
"""

from __future__ import annotations


class PuzzleError(Exception):
    """puzzles パッケージが送出する例外の基底クラス。"""


class GridFormatError(PuzzleError, ValueError):
    """盤面の行幅がそろっていない、などの形式エラー。"""


class NumberParseError(PuzzleError, ValueError):
    """数字列として解釈できないバイト列が渡された。"""


class InputFormatError(PuzzleError, ValueError):
    """行単位の入力（Game / Card 行）が想定の形式になっていない。"""

    def __init__(self, message: str, line_no: int | None = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no

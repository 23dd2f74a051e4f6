# -*- coding: utf-8 -*-
"""
盤面から「数字の並び」を取り出すモジュールです。

- iter_numbers   : 左上から順に数字列を列挙する
- number_span_at : 任意の数字マスから、その数字列全体の範囲を求める
- parse_digits   : ASCII 数字のバイト列を整数に変換する
"""

from __future__ import annotations

from typing import Iterator, Sequence

from ..errors import NumberParseError
from ..types import NumberToken, Span
from .loader import ASCII_NINE, ASCII_ZERO, Grid


def is_digit(byte: int) -> bool:
    return ASCII_ZERO <= byte <= ASCII_NINE


def parse_digits(buf: Sequence[int]) -> int:
    """
    ASCII 数字のバイト列を 10 進数として解釈します。

    桁数の上限はありません。空の列や数字以外のバイトが含まれる場合は
    走査ロジック側の不整合なので :class:`NumberParseError` を送出します。
    """
    if len(buf) == 0:
        raise NumberParseError("empty digit run")

    value = 0
    for byte in buf:
        if not is_digit(byte):
            raise NumberParseError(f"non-digit byte {byte!r} in {bytes(buf)!r}")
        value = value * 10 + (byte - ASCII_ZERO)
    return value


def iter_numbers(grid: Grid) -> Iterator[NumberToken]:
    """
    盤面を先頭から 1 回だけ走査し、数字列を :class:`NumberToken` として返します。

    数字列は行の終わりで必ず切れます（次の行の先頭とはつながりません）。
    返す順番は盤面上の出現順（上の行から、左から）です。
    """
    buf = grid.raw
    size = len(buf)
    i = 0
    while i < size:
        if not is_digit(buf[i]):
            # "." も記号もそれ以外の文字も 1 マス進むだけ
            i += 1
            continue

        start = i
        _, row_end = grid.row_bounds(start)
        end = start + 1
        while end < row_end and is_digit(buf[end]):
            end += 1

        yield NumberToken(value=parse_digits(buf[start:end]), start=start, end=end)
        i = end


def number_span_at(grid: Grid, index: int) -> Span:
    """
    数字マス index を含む数字列の範囲 [start, end) を返します。

    同じ行の中だけで左右に広げます。
    """
    buf = grid.raw
    if not 0 <= index < len(buf) or not is_digit(buf[index]):
        raise NumberParseError(f"no digit at index {index}")

    row_start, row_end = grid.row_bounds(index)
    start = index
    while start > row_start and is_digit(buf[start - 1]):
        start -= 1
    end = index + 1
    while end < row_end and is_digit(buf[end]):
        end += 1
    return start, end


def number_at(grid: Grid, index: int) -> NumberToken:
    """数字マス index を含む数字列全体を :class:`NumberToken` として返します。"""
    start, end = number_span_at(grid, index)
    return NumberToken(value=parse_digits(grid.raw[start:end]), start=start, end=end)

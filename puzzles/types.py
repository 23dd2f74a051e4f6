# -*- coding: utf-8 -*-
"""
各ソルバーで使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# 盤面上のフラットなインデックス範囲 [start, end)
Span = Tuple[int, int]


@dataclass(frozen=True)
class NumberToken:
    """
    盤面上の「数字の並び」を表すクラスです。

    Attributes
    ----------
    value : int
        数字列を 10 進数として解釈した値。
    start : int
        先頭マスのフラットインデックス。
    end : int
        末尾マスの次のフラットインデックス（半開区間）。
    """

    value: int
    start: int
    end: int

    @property
    def span(self) -> Span:
        return (self.start, self.end)

    @property
    def length(self) -> int:
        """桁数（マス数）を返します。"""
        return self.end - self.start

    def positions(self) -> range:
        return range(self.start, self.end)


@dataclass(frozen=True)
class Gear:
    """
    ちょうど 2 つの数字に隣接した "*" を表すクラスです。

    Attributes
    ----------
    index : int
        "*" のフラットインデックス。
    numbers : tuple of NumberToken
        隣接する 2 つの数字（左上から順）。
    """

    index: int
    numbers: Tuple[NumberToken, NumberToken]

    @property
    def ratio(self) -> int:
        first, second = self.numbers
        return first.value * second.value


@dataclass
class Round:
    """キューブゲーム 1 ラウンド分の、色ごとの個数。"""

    red: int = 0
    green: int = 0
    blue: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"red": self.red, "green": self.green, "blue": self.blue}


@dataclass
class Game:
    """
    キューブゲーム 1 行分（"Game <id>: ..."）を表すクラスです。

    Attributes
    ----------
    game_id : int
        ゲーム番号。
    rounds : list of Round
        ";" で区切られた各ラウンド。
    """

    game_id: int
    rounds: List[Round] = field(default_factory=list)


@dataclass
class Card:
    """
    スクラッチカード 1 行分（"Card <id>: ... | ..."）を表すクラスです。

    Attributes
    ----------
    card_id : int
        カード番号。
    winning : list of int
        "|" の左側、当たり番号。
    numbers : list of int
        "|" の右側、手持ちの番号。
    """

    card_id: int
    winning: List[int]
    numbers: List[int]

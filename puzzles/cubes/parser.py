# -*- coding: utf-8 -*-
"""
"Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green" のような行を
:class:`Game` に変換するモジュールです。
"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..config import CUBE_COLORS
from ..errors import InputFormatError
from ..types import Game, Round

GAME_RE = re.compile(r"^\s*Game\s+(\d+)\s*:(.*)$")
DRAW_RE = re.compile(r"^\s*(\d+)\s+([a-z]+)\s*$")


def parse_game(line: str, line_no: int | None = None) -> Game:
    """
    1 行分のゲーム記録を解析します。

    ";" でラウンド、"," で色ごとの個数を区切ります。
    同じラウンドに同じ色が 2 回出てきた場合は足し合わせます。
    """
    m = GAME_RE.match(line)
    if m is None:
        raise InputFormatError(f"expected 'Game <id>: ...', got {line!r}", line_no)

    game = Game(game_id=int(m.group(1)))
    body = m.group(2)
    if not body.strip():
        return game

    for chunk in body.split(";"):
        rnd = Round()
        for draw in chunk.split(","):
            d = DRAW_RE.match(draw)
            if d is None:
                raise InputFormatError(f"malformed draw {draw.strip()!r}", line_no)
            count, color = int(d.group(1)), d.group(2)
            if color not in CUBE_COLORS:
                raise InputFormatError(f"unknown color {color!r}", line_no)
            setattr(rnd, color, getattr(rnd, color) + count)
        game.rounds.append(rnd)

    return game


def parse_games(lines: Iterable[str]) -> List[Game]:
    """空行を飛ばして、すべての行を解析します。"""
    return [
        parse_game(line, line_no)
        for line_no, line in enumerate(lines, start=1)
        if line.strip()
    ]

# -*- coding: utf-8 -*-
"""
"Card   1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53" のような行を
:class:`Card` に変換するモジュールです。
"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..errors import InputFormatError
from ..types import Card

CARD_RE = re.compile(r"^\s*Card\s+(\d+)\s*:([^|]*)\|([^|]*)$")
NUMBER_RE = re.compile(r"[0-9]+")


def _parse_numbers(text: str, line_no: int | None) -> List[int]:
    numbers: List[int] = []
    for tok in text.split():
        if NUMBER_RE.fullmatch(tok) is None:
            raise InputFormatError(f"not a number: {tok!r}", line_no)
        numbers.append(int(tok))
    return numbers


def parse_card(line: str, line_no: int | None = None) -> Card:
    """1 行分のカードを解析します。カード番号の前の空白はいくつあっても構いません。"""
    m = CARD_RE.match(line)
    if m is None:
        raise InputFormatError(f"expected 'Card <id>: ... | ...', got {line!r}", line_no)

    return Card(
        card_id=int(m.group(1)),
        winning=_parse_numbers(m.group(2), line_no),
        numbers=_parse_numbers(m.group(3), line_no),
    )


def parse_cards(lines: Iterable[str]) -> List[Card]:
    """空行を飛ばして、すべての行を解析します。"""
    return [
        parse_card(line, line_no)
        for line_no, line in enumerate(lines, start=1)
        if line.strip()
    ]

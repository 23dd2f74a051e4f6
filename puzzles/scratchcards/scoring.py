# -*- coding: utf-8 -*-
"""
スクラッチカードの集計を行うモジュールです。

- 点数: 一致数 m が 1 以上なら 2^(m-1)、0 なら 0
- 枚数: カード i の一致数が m なら、続く m 枚のカードに
  「カード i の現在の枚数」ずつコピーが追加される
"""

from __future__ import annotations

from typing import Dict, List

import pandas as pd

from ..logging_utils import get_logger
from ..types import Card

logger = get_logger()


def count_matches(card: Card) -> int:
    """当たり番号のうち、手持ち番号にも含まれるものの個数。"""
    mine = set(card.numbers)
    return sum(1 for n in card.winning if n in mine)


def card_points(card: Card) -> int:
    matches = count_matches(card)
    return 2 ** (matches - 1) if matches > 0 else 0


def card_copies(cards: List[Card]) -> List[int]:
    """
    コピーの連鎖を反映した、カードごとの最終枚数を返します。

    最後のカードを越える分のコピーは捨てます。
    """
    copies = [1] * len(cards)
    for i, card in enumerate(cards):
        matches = count_matches(card)
        if matches == 0:
            continue

        last = i + matches
        if last >= len(cards):
            logger.debug(
                "card %d wins %d copies past the end of the table",
                card.card_id, last - len(cards) + 1,
            )
            last = len(cards) - 1

        for j in range(i + 1, last + 1):
            copies[j] += copies[i]
    return copies


def build_card_table(cards: List[Card]) -> pd.DataFrame:
    """
    1 カード 1 行のテーブルを作ります。

    Returns
    -------
    pandas.DataFrame
        'card_id', 'matches', 'points', 'copies' 列。
    """
    copies = card_copies(cards)
    rows: List[Dict[str, int]] = [
        {
            "card_id": card.card_id,
            "matches": count_matches(card),
            "points": card_points(card),
            "copies": n,
        }
        for card, n in zip(cards, copies)
    ]
    return pd.DataFrame(rows, columns=["card_id", "matches", "points", "copies"]).astype("int64")


def score_card_points(cards: List[Card]) -> int:
    total = int(build_card_table(cards)["points"].sum())
    logger.info("Scratchcard points: %d (%d cards)", total, len(cards))
    return total


def count_total_cards(cards: List[Card]) -> int:
    total = int(build_card_table(cards)["copies"].sum())
    logger.info("Scratchcards after copies: %d (from %d originals)", total, len(cards))
    return total

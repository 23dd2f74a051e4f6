# -*- coding: utf-8 -*-
"""
キューブゲームの集計を行うモジュールです。

ラウンド単位の記録を pandas.DataFrame にまとめ、
ゲームごとの色別最大数から 2 種類の答えを計算します。
"""

from __future__ import annotations

from typing import Dict, List, Mapping

import pandas as pd

from ..config import CUBE_COLORS, CUBE_LIMITS
from ..logging_utils import get_logger
from ..types import Game

logger = get_logger()

COLOR_COLUMNS: List[str] = list(CUBE_COLORS)


def build_round_table(games: List[Game]) -> pd.DataFrame:
    """
    1 ラウンド 1 行のテーブルを作ります。

    Returns
    -------
    pandas.DataFrame
        'game_no'（入力中の順番）, 'game_id', 'round', 'red', 'green', 'blue' 列。
    """
    rows: List[Dict[str, int]] = []
    for game_no, game in enumerate(games):
        for round_no, rnd in enumerate(game.rounds):
            rows.append({"game_no": game_no, "game_id": game.game_id, "round": round_no, **rnd.as_dict()})

    columns = ["game_no", "game_id", "round", *COLOR_COLUMNS]
    return pd.DataFrame(rows, columns=columns).astype("int64")


def max_counts(games: List[Game]) -> pd.DataFrame:
    """
    ゲームごとに、各色の最大個数を求めます。

    ラウンドが 1 つもないゲームはすべて 0 になります。
    """
    table = build_round_table(games)
    maxima = table.groupby("game_no")[COLOR_COLUMNS].max()
    maxima = maxima.reindex(range(len(games)), fill_value=0)
    maxima.insert(0, "game_id", [g.game_id for g in games])
    return maxima


def score_possible_games(games: List[Game], limits: Mapping[str, int] = CUBE_LIMITS) -> int:
    """
    すべてのラウンドが上限（既定: red 12 / green 13 / blue 14）以内の
    ゲームについて、ID の合計を返します。
    """
    maxima = max_counts(games)
    caps = pd.Series({color: limits[color] for color in COLOR_COLUMNS})
    possible = (maxima[COLOR_COLUMNS] <= caps).all(axis=1)

    total = int(maxima.loc[possible, "game_id"].sum())
    logger.info("Possible games: %d / %d, id sum: %d", int(possible.sum()), len(games), total)
    return total


def score_game_powers(games: List[Game]) -> int:
    """各ゲームの max_red * max_green * max_blue の合計を返します。"""
    maxima = max_counts(games)
    total = int(maxima[COLOR_COLUMNS].prod(axis=1).sum())
    logger.info("Game power sum: %d", total)
    return total

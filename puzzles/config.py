# -*- coding: utf-8 -*-
"""
puzzles 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 「記号」とみなす文字の集合
- キューブゲームの色ごとの上限
- ログレベル
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import Dict, FrozenSet, Tuple

# ==== 入力ファイル関連 =====================================================

# 入力ファイルの文字コード
INPUT_ENCODING: str = "utf-8"

# ==== 回路図（schematic）関連 ==============================================

# 歯車の記号（SPECIAL_CHARS の一部）
GEAR_CHAR: str = "*"

# 「記号」とみなす文字。"." と数字は決して記号にならない。
SPECIAL_CHARS: FrozenSet[str] = frozenset("*&+-=/%$@#")

# 歯車として数えるのに必要な隣接数字の個数
GEAR_NEIGHBOR_COUNT: int = 2

# ==== キューブゲーム関連 ===================================================

# 色の並び順（テーブルの列順にも使う）
CUBE_COLORS: Tuple[str, ...] = ("red", "green", "blue")

# 1ラウンドで許される色ごとの最大個数
CUBE_LIMITS: Dict[str, int] = {"red": 12, "green": 13, "blue": 14}

# ==== ログ関連 =============================================================

# 環境変数 PUZZLES_LOG_LEVEL で上書き可能
LOG_LEVEL: str = os.getenv("PUZZLES_LOG_LEVEL", "INFO")

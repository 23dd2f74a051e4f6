# -*- coding: utf-8 -*-
"""
パズル入力ファイルを読み込むモジュールです。
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import INPUT_ENCODING
from .logging_utils import get_logger

logger = get_logger()


def read_lines(path: str | Path) -> List[str]:
    """
    テキストファイルを読み込み、改行を除いた行のリストを返します。

    Parameters
    ----------
    path : str or Path
        入力ファイルのパス。

    Returns
    -------
    list of str
        各行の文字列（改行コードは含まない）。

    Raises
    ------
    FileNotFoundError
        ファイルが存在しない場合。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle input not found: {p}")

    lines = p.read_text(encoding=INPUT_ENCODING).splitlines()
    logger.info("Loaded %d lines from %s", len(lines), p)
    return lines

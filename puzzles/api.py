# -*- coding: utf-8 -*-
"""
各ソルバーを HTTP 経由で呼び出すための FastAPI アプリです。

    uvicorn puzzles.api:app --reload
"""

from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import PUZZLES, solve_lines
from .errors import PuzzleError
from .logging_utils import get_logger

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    puzzle: str  # PUZZLES のキー（例: "schematic.gear_ratios"）
    text: str  # 入力ファイルの中身


class SolveResponse(BaseModel):
    puzzle: str
    answer: int


@app.get("/api/puzzles")
async def api_puzzles() -> List[str]:
    return sorted(PUZZLES)


@app.post("/api/solve", response_model=SolveResponse)
async def api_solve(request: SolveRequest) -> SolveResponse:
    """
    Solver API endpoint.
    Receives the raw puzzle input as text and returns the numeric answer.
    """
    if request.puzzle not in PUZZLES:
        raise HTTPException(status_code=404, detail=f"Unknown puzzle: {request.puzzle}")

    try:
        answer = solve_lines(request.puzzle, request.text.splitlines())
    except PuzzleError as e:
        logger.warning("Rejected input for %s: %s", request.puzzle, e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    return SolveResponse(puzzle=request.puzzle, answer=answer)

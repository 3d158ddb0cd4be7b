"""FastAPI REST interface for the knight's tour search."""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from tour_engine.config import CONFIG
from tour_engine.core.strategy import STRATEGIES
from tour_engine.diagnostics import OOM_ADVICE, memory_report_lines
from tour_engine.errors import ConfigurationError
from tour_engine.main import run_search
from tour_engine.render import board_lines, square_name

logger = logging.getLogger(__name__)

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")


class SearchRequest(BaseModel):
    board_size: Optional[int] = None
    strategy: Optional[str] = None
    time_limit_ms: Optional[int] = None


class StepModel(BaseModel):
    step: int
    row: int
    col: int
    square: str


class SearchResponse(BaseModel):
    status: str
    strategy: str
    board_size: int
    nodes_expanded: int
    elapsed_ms: float
    path: List[StepModel]
    board: List[str]


@app.get("/strategies")
def list_strategies():
    return {"strategies": list(STRATEGIES)}


@app.post("/search", response_model=SearchResponse)
def search_tour(req: SearchRequest = SearchRequest()):
    board_size = req.board_size if req.board_size is not None else CONFIG.search.board_size
    strategy = req.strategy or CONFIG.search.strategy
    time_limit_ms = req.time_limit_ms if req.time_limit_ms is not None else CONFIG.search.time_limit_ms

    if board_size > CONFIG.ui.max_api_board_size:
        raise HTTPException(
            status_code=400,
            detail=f"Board size {board_size} exceeds the limit of {CONFIG.ui.max_api_board_size}",
        )
    out_of_memory = False
    try:
        outcome = run_search(board_size, strategy, time_limit_ms)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MemoryError:
        out_of_memory = True

    if out_of_memory:
        # reported after the except block so the frontier has been released
        logger.error("Search ran out of memory: %s", "; ".join(memory_report_lines()[1:-1]))
        raise HTTPException(status_code=507, detail=OOM_ADVICE)

    path = outcome.path
    return SearchResponse(
        status=outcome.status.value,
        strategy=outcome.strategy,
        board_size=outcome.board_size,
        nodes_expanded=outcome.nodes_expanded,
        elapsed_ms=outcome.elapsed_ms,
        path=[StepModel(step=d, row=r, col=c, square=square_name(r, c)) for r, c, d in path],
        board=board_lines(path, outcome.board_size) if path else [],
    )

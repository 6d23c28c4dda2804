#!/usr/bin/env python3
"""HTTP API for dealing and classifying five-card hands.

Routes:
- GET  /api/v1/hand      deal a random hand and classify it
- POST /api/v1/hand      classify {"cards": ["kh", "qh", "5s", "3r", "kr"]}
- GET  /api/v1/rankings  list every ranking, weakest first

Usage:
    poker-ranker-server
    POKER_RANKER_PORT=8080 python -m poker_ranker.playground.web_server
"""

import logging
import os
from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from poker_ranker import __version__
from poker_ranker.rules import (
    CardError,
    Eval,
    HandError,
    describe_hand_rankings,
    format_cards,
    get_hand_rankings,
    new_hand,
    parse_cards,
)

logger = logging.getLogger(__name__)

HOST = os.getenv("POKER_RANKER_HOST", "0.0.0.0")
PORT = int(os.getenv("POKER_RANKER_PORT", "3000"))
API_TOKEN = os.getenv("POKER_RANKER_API_TOKEN")
LOG_LEVEL = os.getenv("POKER_RANKER_LOG_LEVEL", "INFO")

INTERNAL_ERROR_DETAIL = "Internal server error, sorry about that"

app = FastAPI(title="Poker Ranker", version=__version__)


class HandRequest(BaseModel):
    cards: List[str]


class HandResponse(BaseModel):
    rank: str


class DealResponse(BaseModel):
    hand: List[str]
    rank: str


@app.middleware("http")
async def token_middleware(request: Request, call_next):
    if API_TOKEN and request.url.path.startswith("/api"):
        token = request.headers.get("X-API-Token")
        if token != API_TOKEN:
            return JSONResponse(status_code=401, content={"detail": "Unauthorized"})
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed or mistyped bodies never reach the classifier
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


@app.get("/api/v1/hand", response_model=DealResponse)
def api_deal_hand():
    cards = new_hand()
    tokens = format_cards(cards)
    try:
        ranking = Eval(cards).evaluate()
    except HandError:
        logger.exception("Dealt hand %s failed classification", tokens)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_DETAIL)
    return DealResponse(hand=tokens, rank=str(ranking))


@app.post("/api/v1/hand", response_model=HandResponse)
def api_evaluate_hand(req: HandRequest):
    try:
        cards = parse_cards(req.cards)
        ranking = Eval(cards).evaluate()
    except (CardError, HandError) as e:
        logger.info("Rejected hand %s: %s", req.cards, e)
        raise HTTPException(status_code=400, detail=str(e))
    return HandResponse(rank=str(ranking))


@app.get("/api/v1/rankings")
def api_rankings():
    descriptions = describe_hand_rankings()
    return [
        {
            "rank": ranking.display_name,
            "strength": int(ranking),
            "description": descriptions[ranking],
        }
        for ranking in get_hand_rankings()
    ]


def main():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        logger.info("Starting server at http://%s:%d", HOST, PORT)
        uvicorn.run(app, host=HOST, port=PORT)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

import logging

from fastapi import APIRouter, HTTPException

from pokerhands.poker.cards import CardParseError, parse_cards
from pokerhands.poker.deck import draw_random_hand
from pokerhands.poker.hand import HandError, build_hand
from pokerhands.poker.hand_evaluator import classify
from . import schemas

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hands"])


@router.get("/draw", response_model=schemas.HandAnalysis)
def draw_and_analyze():
    """Draw five cards from a fresh deck and classify them."""

    logger.debug("serving /draw")
    hand = draw_random_hand()
    return schemas.HandAnalysis.from_hand(hand, classify(hand))


@router.get("/analyze/{cards}", response_model=schemas.HandAnalysis)
def analyze(cards: str):
    """Classify a comma-separated list of five card codes.

    Example: ``/analyze/tr,jr,qr,kr,1r`` is a straight flush.
    """

    logger.debug("serving /analyze/%s", cards)
    try:
        parsed = parse_cards(cards)
    except CardParseError as exc:
        logger.warning("rejected card text %r: %s", cards, exc)
        raise HTTPException(status_code=400, detail=f"card is invalid: {exc}")

    try:
        hand = build_hand(parsed)
    except HandError as exc:
        logger.warning("rejected hand %r: %s", cards, exc)
        raise HTTPException(status_code=400, detail=f"hand is invalid: {exc}")

    return schemas.HandAnalysis.from_hand(hand, classify(hand))

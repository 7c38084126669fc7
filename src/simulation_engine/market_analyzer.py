"""Short-window positional trend detection."""

import logging
from typing import List

from src.simulation_engine.config import (
    TRACKED_TREND_POSITIONS,
    TREND_CONFIDENCE,
    TREND_MIN_PICKS,
    TREND_WINDOW_SIZE,
)
from src.simulation_engine.models import DraftContext, MarketTrend, TrendDirection

logger = logging.getLogger(__name__)


class MarketAnalyzer:
    """Detect positional runs from the most recent picks.

    A position is trending up when at least ``TREND_MIN_PICKS`` of the
    trailing ``TREND_WINDOW_SIZE`` picks went to it. Stateless.
    """

    def analyze_trends(self, context: DraftContext) -> List[MarketTrend]:
        window = context.recent_picks[-TREND_WINDOW_SIZE:]
        if not window:
            return []

        trends: List[MarketTrend] = []
        for position in TRACKED_TREND_POSITIONS:
            position_picks = sum(
                1 for pick in window if pick.candidate.position == position
            )
            if position_picks < TREND_MIN_PICKS:
                continue

            trends.append(
                MarketTrend(
                    position=position,
                    direction=TrendDirection.UP,
                    magnitude=position_picks / len(window),
                    confidence=TREND_CONFIDENCE,
                    time_window=TREND_WINDOW_SIZE,
                    caused_by=(
                        f"{position_picks} {position} picks in last "
                        f"{TREND_WINDOW_SIZE} selections",
                    ),
                )
            )
            logger.debug(
                "Detected %s run: %d of last %d picks",
                position, position_picks, len(window),
            )

        return trends

"""Sanctuary app bootstrap."""

import logging
import random
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from sanctuary_app.config import SanctuaryConfig
from sanctuary_app.logging_config import configure_logging, get_logger, log_event
from logic.random_source import IdFactory, RandomSource
from tools.sanctuary_tools import SanctuaryTools


LOGGER = get_logger(__name__)


class SanctuaryApp:
    """Wires together configuration, logging, the random source and the engine tools."""

    def __init__(
        self,
        config: SanctuaryConfig | None = None,
        rng: Optional[RandomSource] = None,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config or SanctuaryConfig.from_env()
        configure_logging(self.config.log_level)
        self.rng = rng or self._build_random_source()
        self.tools = SanctuaryTools(
            rng=self.rng,
            id_factory=id_factory,
            clock=clock,
            recency_days=self.config.recency_days,
        )
        log_event(LOGGER, logging.INFO, "app_initialised", **self.config.as_log_fields())

    def _build_random_source(self) -> RandomSource:
        """Seeded generator when configured, otherwise OS entropy."""

        if self.config.random_seed is not None:
            return random.Random(self.config.random_seed)
        return random.SystemRandom()

    def recommend(self, wardrobe: List[Dict[str, Any]], mood: str, seed: Optional[int] = None) -> Dict[str, Any]:
        return self.tools.generate_outfit(wardrobe=wardrobe, mood=mood, seed=seed)

    def daily_outfits(self, wardrobe: List[Dict[str, Any]], seed: Optional[int] = None) -> Dict[str, Any]:
        return self.tools.generate_daily_outfits(
            wardrobe=wardrobe, count=self.config.daily_outfit_count, seed=seed
        )

    def insights(self, wardrobe: List[Dict[str, Any]], seed: Optional[int] = None) -> Dict[str, Any]:
        return self.tools.wardrobe_insights(wardrobe=wardrobe, seed=seed)

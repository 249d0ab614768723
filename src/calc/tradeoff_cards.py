"""Catalog of two-option lifestyle tradeoff cards.

Each card pairs two choices (for example owning a car versus public
transit) with a typical monthly cost impact for someone earning the
catalog's baseline salary. Impacts can be scaled to the user's salary:
scale = max(minimum_scale, annual_salary / baseline_salary), and each
impact is rounded to whole dollars after scaling.

Scaling is only applied to the cards. The tradeoff comparisons in
planning_calculator use flat dollar amounts.
"""

import json
import math
import os
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'tradeoff-cards.json'))
BASELINE_SALARY = 50000
MINIMUM_SCALE = 0.5


@dataclass(frozen=True)
class TradeoffOption:
    title: str
    description: str
    monthly_impact: float  # Negative numbers are monthly costs

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "monthlyImpact": self.monthly_impact,
        }


@dataclass(frozen=True)
class TradeoffCard:
    id: str
    title: str
    category: str
    option_a: TradeoffOption
    option_b: TradeoffOption

    @property
    def difference(self) -> float:
        """Monthly impact of choosing option B over option A."""
        return self.option_b.monthly_impact - self.option_a.monthly_impact

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "optionA": self.option_a.to_dict(),
            "optionB": self.option_b.to_dict(),
            "difference": self.difference,
        }


def _option_from_dict(data: dict) -> TradeoffOption:
    return TradeoffOption(
        title=data['title'],
        description=data.get('description', ''),
        monthly_impact=data.get('monthlyImpact', 0),
    )


class TradeoffCardCatalog:
    """Ordered, id-addressable set of tradeoff cards."""

    def __init__(self, cards: List[TradeoffCard], baseline_salary: float = BASELINE_SALARY,
                 minimum_scale: float = MINIMUM_SCALE):
        self.cards = list(cards)
        self.baseline_salary = baseline_salary
        self.minimum_scale = minimum_scale
        self._by_id: Dict[str, TradeoffCard] = {c.id: c for c in self.cards}
        if len(self._by_id) != len(self.cards):
            raise ValueError("Tradeoff card ids must be unique")

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'TradeoffCardCatalog':
        ref_path = path or DEFAULT_PATH
        with open(ref_path, 'r') as f:
            data = json.load(f)
        cards = [
            TradeoffCard(
                id=c['id'],
                title=c['title'],
                category=c.get('category', 'lifestyle'),
                option_a=_option_from_dict(c['optionA']),
                option_b=_option_from_dict(c['optionB']),
            )
            for c in data.get('cards', [])
        ]
        logger.debug("tradeoff_cards_loaded", path=ref_path, cards=len(cards))
        return cls(
            cards,
            baseline_salary=data.get('baselineSalary', BASELINE_SALARY),
            minimum_scale=data.get('minimumScale', MINIMUM_SCALE),
        )

    def scale_factor(self, annual_salary: float) -> float:
        return max(self.minimum_scale, annual_salary / self.baseline_salary)

    def scaled_impact(self, base_impact: float, annual_salary: float) -> int:
        # Halves round toward positive infinity
        return math.floor(base_impact * self.scale_factor(annual_salary) + 0.5)

    def get(self, card_id: str) -> TradeoffCard:
        if card_id not in self._by_id:
            raise KeyError(f"Unknown tradeoff card '{card_id}'. Available cards: {list(self._by_id)}")
        return self._by_id[card_id]

    def categories(self) -> List[str]:
        seen = []
        for c in self.cards:
            if c.category not in seen:
                seen.append(c.category)
        return seen

    def cards_for(self, annual_salary: Optional[float] = None, category: Optional[str] = None) -> List[TradeoffCard]:
        """Cards in catalog order, optionally filtered and scaled to a salary."""
        cards = [c for c in self.cards if category is None or c.category == category]
        if annual_salary is None:
            return cards
        return [
            replace(
                c,
                option_a=replace(c.option_a, monthly_impact=self.scaled_impact(c.option_a.monthly_impact, annual_salary)),
                option_b=replace(c.option_b, monthly_impact=self.scaled_impact(c.option_b.monthly_impact, annual_salary)),
            )
            for c in cards
        ]

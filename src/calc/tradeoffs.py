"""Lifestyle tradeoff scenarios compared against the current take-home pay.

Scenarios are read from reference/tradeoff-scenarios.json. Three kinds are
supported:

- netFraction: adds `fraction` of the baseline monthly net (negative for
  scenarios that set money aside, such as Aggressive Savings)
- benefitsFraction: adds back `fraction` of the monthly benefit deductions
- costSwap: adds the difference between a current monthly cost and a
  cheaper alternative

Dollar amounts are flat assumptions; they are not scaled by income or
location.
"""

import json
import os
from dataclasses import dataclass
from typing import List, Optional

from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'tradeoff-scenarios.json'))

NET_FRACTION = 'netFraction'
BENEFITS_FRACTION = 'benefitsFraction'
COST_SWAP = 'costSwap'
SCENARIO_KINDS = (NET_FRACTION, BENEFITS_FRACTION, COST_SWAP)


@dataclass(frozen=True)
class TradeoffScenario:
    scenario: str
    kind: str
    description: str
    fraction: float = 0.0
    current_cost: float = 0.0
    alternative_cost: float = 0.0

    def monthly_adjustment(self, baseline_monthly_net: float, monthly_benefits: float) -> float:
        """Change to the baseline monthly net under this scenario."""
        if self.kind == NET_FRACTION:
            return baseline_monthly_net * self.fraction
        if self.kind == BENEFITS_FRACTION:
            return monthly_benefits * self.fraction
        return self.current_cost - self.alternative_cost

    @classmethod
    def from_dict(cls, data: dict) -> 'TradeoffScenario':
        kind = data.get('kind')
        if kind not in SCENARIO_KINDS:
            raise ValueError(f"Unknown tradeoff scenario kind '{kind}' for '{data.get('scenario')}'. Expected one of {SCENARIO_KINDS}")
        return cls(
            scenario=data['scenario'],
            kind=kind,
            description=data.get('description', ''),
            fraction=data.get('fraction', 0.0),
            current_cost=data.get('currentCost', 0.0),
            alternative_cost=data.get('alternativeCost', 0.0),
        )


@dataclass(frozen=True)
class TradeoffScenarios:
    """The ordered scenario table plus the label of the baseline entry."""
    scenarios: List[TradeoffScenario]
    baseline_name: str = 'Current'
    baseline_description: str = 'Your current take-home pay'

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'TradeoffScenarios':
        ref_path = path or DEFAULT_PATH
        with open(ref_path, 'r') as f:
            data = json.load(f)
        baseline = data.get('baseline', {})
        scenarios = [TradeoffScenario.from_dict(s) for s in data.get('scenarios', [])]
        logger.debug("tradeoff_scenarios_loaded", path=ref_path, scenarios=len(scenarios))
        return cls(
            scenarios=scenarios,
            baseline_name=baseline.get('scenario', 'Current'),
            baseline_description=baseline.get('description', 'Your current take-home pay'),
        )

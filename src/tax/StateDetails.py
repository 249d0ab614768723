import os
import json
from typing import Dict, Optional

from logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'state-tax-rates.json'))
DEFAULT_RATE = 0.05


class StateDetails:
    """Flat effective state income tax rates keyed by full state name.

    Names are matched exactly. Unknown or misspelled names silently use the
    default rate; callers that care can check is_known() first.
    """

    def __init__(self, rates: Dict[str, float], default_rate: float = DEFAULT_RATE):
        self.rates = dict(rates)
        self.default_rate = default_rate

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'StateDetails':
        """Load the rate table from reference/state-tax-rates.json (or the given path)."""
        ref_path = path or DEFAULT_PATH
        with open(ref_path, 'r') as f:
            data = json.load(f)
        rates = data.get('rates')
        if not rates:
            raise ValueError("state-tax-rates.json must contain a non-empty 'rates' object")
        details = cls(rates, data.get('defaultRate', DEFAULT_RATE))
        logger.debug("state_rates_loaded", path=ref_path, states=len(details.rates))
        return details

    def is_known(self, state: str) -> bool:
        return state in self.rates

    def rateFor(self, state: str) -> float:
        if state in self.rates:
            return self.rates[state]
        logger.debug("state_rate_defaulted", state=state, rate=self.default_rate)
        return self.default_rate

    def taxBurden(self, gross_pay: float, state: str) -> float:
        """Calculate state tax for one paycheck.

        There is no bracket logic and no proration: the flat rate applies
        directly to the period's gross pay.
        """
        return gross_pay * self.rateFor(state)

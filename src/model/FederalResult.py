from dataclasses import dataclass


@dataclass
class FederalResult:
    """Annual federal income tax for one salary."""
    annual_income: float
    total_federal_tax: float
    marginal_bracket: float

    @property
    def effective_rate(self) -> float:
        if self.annual_income <= 0:
            return 0.0
        return self.total_federal_tax / self.annual_income

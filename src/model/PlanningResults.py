"""Result records produced by the planning calculator.

Every record is rebuilt from scratch on each call; none of them are cached
or updated in place. Renderers and the MCP tools read these fields directly
or through to_dict(), which uses the same camelCase names as the profile
files.
"""

from dataclasses import dataclass
from typing import Optional


MONTH_NAMES = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]


@dataclass(frozen=True)
class MonthlyProjection:
    """One projected month of pay."""
    month: int  # 1-based offset from the start month
    month_name: str
    gross_pay: float
    net_pay: float
    taxes: float
    benefits: float
    cumulative_net: float  # Running sum of net_pay through this month

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "monthName": self.month_name,
            "grossPay": self.gross_pay,
            "netPay": self.net_pay,
            "taxes": self.taxes,
            "benefits": self.benefits,
            "cumulativeNet": self.cumulative_net,
        }


@dataclass(frozen=True)
class AnnualEarnings:
    """Annualized earnings summary. Rates are percentages (0-100)."""
    annual_gross: float
    annual_net: float
    annual_taxes: float
    annual_benefits: float
    tax_rate: float
    take_home_rate: float

    def to_dict(self) -> dict:
        return {
            "annualGross": self.annual_gross,
            "annualNet": self.annual_net,
            "annualTaxes": self.annual_taxes,
            "annualBenefits": self.annual_benefits,
            "taxRate": self.tax_rate,
            "takeHomeRate": self.take_home_rate,
        }


@dataclass(frozen=True)
class TradeoffComparison:
    """A lifestyle scenario compared against the baseline.

    monthly_savings is None for the baseline entry.
    """
    scenario: str
    monthly_net: float
    annual_net: float
    description: str
    monthly_savings: Optional[float] = None

    @property
    def is_baseline(self) -> bool:
        return self.monthly_savings is None

    def to_dict(self) -> dict:
        result = {
            "scenario": self.scenario,
            "monthlyNet": self.monthly_net,
            "annualNet": self.annual_net,
            "description": self.description,
        }
        if self.monthly_savings is not None:
            result["monthlySavings"] = self.monthly_savings
        return result


@dataclass(frozen=True)
class ExpenseAccumulation:
    """Running savings after a constant monthly expense.

    remaining_balance and savings_rate are floored at zero, so once the
    balance goes negative the size of the deficit is not visible here.
    """
    month: int
    month_name: str
    total_expenses: float
    remaining_balance: float
    savings_rate: float

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "monthName": self.month_name,
            "totalExpenses": self.total_expenses,
            "remainingBalance": self.remaining_balance,
            "savingsRate": self.savings_rate,
        }


@dataclass(frozen=True)
class MonthlyBreakdown:
    """Where one month of gross pay goes, including living expenses."""
    gross: float
    federal_tax: float
    state_tax: float
    fica: float
    total_benefits: float
    expenses: float
    net: float  # Floored at zero

    def to_dict(self) -> dict:
        return {
            "gross": self.gross,
            "federalTax": self.federal_tax,
            "stateTax": self.state_tax,
            "fica": self.fica,
            "totalBenefits": self.total_benefits,
            "expenses": self.expenses,
            "net": self.net,
        }

"""Bundle every planning view for one salary so renderers and tools can share it."""

from dataclasses import dataclass, field
from typing import List, Optional

from calc.planning_calculator import PlanningCalculator, default_planner
from calc.tradeoff_cards import TradeoffCard, TradeoffCardCatalog
from model.PaycheckBreakdown import PaycheckBreakdown
from model.PlanningResults import (
    AnnualEarnings,
    ExpenseAccumulation,
    MonthlyBreakdown,
    MonthlyProjection,
    TradeoffComparison,
)
from model.SalaryInput import SalaryInput


@dataclass
class PlanReport:
    """All results for one salary input."""
    salary_input: SalaryInput
    paycheck: PaycheckBreakdown
    periods_per_year: float
    annual: AnnualEarnings
    projections: List[MonthlyProjection]
    tradeoffs: List[TradeoffComparison]
    monthly_breakdown: MonthlyBreakdown
    monthly_expenses: float = 0.0
    # Empty when no monthly expenses were supplied
    expense_accumulation: List[ExpenseAccumulation] = field(default_factory=list)
    tradeoff_cards: List[TradeoffCard] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "salary": self.salary_input.to_dict(),
            "paycheck": self.paycheck.to_dict(),
            "periodsPerYear": self.periods_per_year,
            "annual": self.annual.to_dict(),
            "projections": [p.to_dict() for p in self.projections],
            "tradeoffs": [t.to_dict() for t in self.tradeoffs],
            "monthlyBreakdown": self.monthly_breakdown.to_dict(),
            "monthlyExpenses": self.monthly_expenses,
            "expenseAccumulation": [e.to_dict() for e in self.expense_accumulation],
            "tradeoffCards": [c.to_dict() for c in self.tradeoff_cards],
        }


def build_report(salary_input: SalaryInput, months: int = 12, monthly_expenses: float = 0.0,
                 start_month: Optional[int] = None,
                 planner: Optional[PlanningCalculator] = None,
                 cards: Optional[TradeoffCardCatalog] = None) -> PlanReport:
    """Run every planning calculation for one salary.

    Args:
        salary_input: The salary to report on
        months: Projection length in months
        monthly_expenses: Recurring monthly expenses; 0 skips the accumulation schedule
        start_month: Calendar month (1-12) of the first projected month
        planner: Planner to use (defaults to one built from the reference tables)
        cards: Card catalog; when given, cards are scaled to the salary
    """
    planner = planner or default_planner()
    expense_accumulation = []
    if monthly_expenses > 0:
        expense_accumulation = planner.expense_accumulation(salary_input, monthly_expenses, months, start_month)

    return PlanReport(
        salary_input=salary_input,
        paycheck=planner.take_home.estimate(salary_input),
        periods_per_year=planner.take_home.periods_per_year(salary_input),
        annual=planner.annual_earnings(salary_input),
        projections=planner.monthly_projections(salary_input, months, start_month),
        tradeoffs=planner.tradeoff_comparisons(salary_input),
        monthly_breakdown=planner.monthly_breakdown(salary_input, monthly_expenses),
        monthly_expenses=monthly_expenses,
        expense_accumulation=expense_accumulation,
        tradeoff_cards=cards.cards_for(salary_input.annual_salary) if cards else [],
    )

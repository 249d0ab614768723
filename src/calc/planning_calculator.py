"""Planning calculator that extrapolates a paycheck into months and years.

Every method estimates the paycheck once through the injected
TakeHomeCalculator and then only transforms that breakdown:

1. Monthly projections with cumulative net pay
2. Annualized earnings summary
3. Lifestyle tradeoff comparisons against the current baseline
4. Savings accumulation under a constant monthly expense
5. A single month's breakdown including expenses
"""

from datetime import date
from typing import List, Optional

from calc.take_home import TakeHomeCalculator, default_calculator, standard_periods_per_year
from calc.tradeoffs import TradeoffScenarios
from model.PlanningResults import (
    MONTH_NAMES,
    AnnualEarnings,
    ExpenseAccumulation,
    MonthlyBreakdown,
    MonthlyProjection,
    TradeoffComparison,
)
from model.SalaryInput import SalaryInput, WEEKLY, BIWEEKLY, SEMIMONTHLY, MONTHLY


# Averaged paychecks per month, not calendar-exact. Changing these changes
# every projection figure.
PAY_PERIODS_PER_MONTH = {
    WEEKLY: 4.33,
    BIWEEKLY: 2.17,
    SEMIMONTHLY: 2,
    MONTHLY: 1,
}
DEFAULT_PAY_PERIODS_PER_MONTH = 1


def month_name(start_month: int, offset: int) -> str:
    """Name of the month `offset` months after `start_month` (1-12)."""
    return MONTH_NAMES[(start_month - 1 + offset) % 12]


class PlanningCalculator:
    """Calculator that turns one paycheck estimate into planning views."""

    def __init__(self, take_home: TakeHomeCalculator, scenarios: TradeoffScenarios):
        self.take_home = take_home
        self.scenarios = scenarios

    def pay_periods_per_month(self, salary_input: SalaryInput) -> float:
        """Paychecks per month used to convert per-check amounts to monthly ones.

        Keyed on pay_frequency alone; a custom pay-period count does not
        change it.
        """
        return PAY_PERIODS_PER_MONTH.get(salary_input.pay_frequency, DEFAULT_PAY_PERIODS_PER_MONTH)

    def breakdown_periods_per_month(self, salary_input: SalaryInput) -> float:
        """Multiplier for monthly_breakdown, where a custom count N spreads as N / 12."""
        if salary_input.has_custom_periods:
            return salary_input.pay_periods_per_year / 12
        return self.pay_periods_per_month(salary_input)

    def monthly_net(self, salary_input: SalaryInput) -> float:
        breakdown = self.take_home.estimate(salary_input)
        return breakdown.take_home_pay * self.pay_periods_per_month(salary_input)

    @staticmethod
    def _resolve_start_month(start_month: Optional[int]) -> int:
        if start_month is None:
            return date.today().month
        if not 1 <= start_month <= 12:
            raise ValueError(f"start_month must be between 1 and 12, got {start_month}")
        return start_month

    @staticmethod
    def _check_expenses(monthly_expenses: float) -> None:
        if monthly_expenses < 0:
            raise ValueError(f"monthly_expenses must not be negative, got {monthly_expenses}")

    @staticmethod
    def _check_months(months: int) -> None:
        if months < 0:
            raise ValueError(f"months must not be negative, got {months}")

    def monthly_projections(self, salary_input: SalaryInput, months: int = 12,
                            start_month: Optional[int] = None) -> List[MonthlyProjection]:
        """Project monthly pay for `months` months.

        Args:
            salary_input: The salary to project
            months: Number of months to return
            start_month: Calendar month (1-12) of the first entry; defaults to the current month

        Returns:
            One MonthlyProjection per month, cumulative_net running from month 1
        """
        self._check_months(months)
        start = self._resolve_start_month(start_month)
        breakdown = self.take_home.estimate(salary_input)
        per_month = self.pay_periods_per_month(salary_input)

        monthly_gross = breakdown.gross_pay * per_month
        monthly_net = breakdown.take_home_pay * per_month
        monthly_taxes = breakdown.taxes.total * per_month
        monthly_benefits = breakdown.benefits.total * per_month

        projections = []
        cumulative_net = 0.0
        for i in range(months):
            cumulative_net += monthly_net
            projections.append(MonthlyProjection(
                month=i + 1,
                month_name=month_name(start, i),
                gross_pay=monthly_gross,
                net_pay=monthly_net,
                taxes=monthly_taxes,
                benefits=monthly_benefits,
                cumulative_net=cumulative_net,
            ))
        return projections

    def annual_earnings(self, salary_input: SalaryInput) -> AnnualEarnings:
        """Annualize one paycheck.

        annual_gross is the salary as entered, not a sum of periods; the
        other totals are per-check values times 52/26/24/12 by frequency.
        """
        breakdown = self.take_home.estimate(salary_input)
        periods = standard_periods_per_year(salary_input.pay_frequency)
        annual_gross = salary_input.annual_salary
        annual_net = breakdown.take_home_pay * periods
        annual_taxes = breakdown.taxes.total * periods
        annual_benefits = breakdown.benefits.total * periods

        return AnnualEarnings(
            annual_gross=annual_gross,
            annual_net=annual_net,
            annual_taxes=annual_taxes,
            annual_benefits=annual_benefits,
            tax_rate=annual_taxes / annual_gross * 100,
            take_home_rate=annual_net / annual_gross * 100,
        )

    def tradeoff_comparisons(self, salary_input: SalaryInput) -> List[TradeoffComparison]:
        """Compare the current monthly net against each lifestyle scenario.

        The first entry is always the baseline with no savings figure. For
        every other entry monthly_savings = monthly_net - baseline monthly_net,
        and annual_net = monthly_net * 12 for all entries.
        """
        breakdown = self.take_home.estimate(salary_input)
        per_month = self.pay_periods_per_month(salary_input)
        baseline_net = breakdown.take_home_pay * per_month
        monthly_benefits = breakdown.benefits.total * per_month

        comparisons = [TradeoffComparison(
            scenario=self.scenarios.baseline_name,
            monthly_net=baseline_net,
            annual_net=baseline_net * 12,
            description=self.scenarios.baseline_description,
        )]
        for s in self.scenarios.scenarios:
            scenario_net = baseline_net + s.monthly_adjustment(baseline_net, monthly_benefits)
            comparisons.append(TradeoffComparison(
                scenario=s.scenario,
                monthly_net=scenario_net,
                annual_net=scenario_net * 12,
                description=s.description,
                monthly_savings=scenario_net - baseline_net,
            ))
        return comparisons

    def expense_accumulation(self, salary_input: SalaryInput, monthly_expenses: float,
                             months: int = 12, start_month: Optional[int] = None) -> List[ExpenseAccumulation]:
        """Track savings month by month after a constant recurring expense.

        The running balance starts at zero, gains the monthly net and loses
        the expense each month. The reported balance and savings rate are
        floored at zero.
        """
        self._check_months(months)
        self._check_expenses(monthly_expenses)
        start = self._resolve_start_month(start_month)
        monthly_net = self.monthly_net(salary_input)

        if monthly_expenses > 0 and monthly_net <= 0:
            # Nothing is saved when there is no positive income to save from
            savings_rate = 0.0
        elif monthly_expenses > 0:
            savings_rate = (monthly_net - monthly_expenses) / monthly_net * 100
        else:
            savings_rate = 100.0

        accumulations = []
        balance = 0.0
        for i in range(months):
            balance += monthly_net
            balance -= monthly_expenses
            accumulations.append(ExpenseAccumulation(
                month=i + 1,
                month_name=month_name(start, i),
                total_expenses=monthly_expenses * (i + 1),
                remaining_balance=max(0.0, balance),
                savings_rate=max(0.0, savings_rate),
            ))
        return accumulations

    def monthly_breakdown(self, salary_input: SalaryInput, monthly_expenses: float = 0.0) -> MonthlyBreakdown:
        """Split one month of gross pay into taxes, benefits, expenses and what is left."""
        self._check_expenses(monthly_expenses)
        breakdown = self.take_home.estimate(salary_input)
        per_month = self.breakdown_periods_per_month(salary_input)

        gross = breakdown.gross_pay * per_month
        federal_tax = breakdown.taxes.federal * per_month
        state_tax = breakdown.taxes.state * per_month
        fica = breakdown.taxes.fica * per_month
        total_benefits = breakdown.benefits.total * per_month
        net = gross - (federal_tax + state_tax + fica + total_benefits + monthly_expenses)

        return MonthlyBreakdown(
            gross=gross,
            federal_tax=federal_tax,
            state_tax=state_tax,
            fica=fica,
            total_benefits=total_benefits,
            expenses=monthly_expenses,
            net=max(0.0, net),
        )


_default_planner: Optional[PlanningCalculator] = None


def default_planner() -> PlanningCalculator:
    """Return a planner built from the reference tables, loading them once."""
    global _default_planner
    if _default_planner is None:
        _default_planner = PlanningCalculator(default_calculator(), TradeoffScenarios.load())
    return _default_planner


def calculate_monthly_projections(salary_input: SalaryInput, months: int = 12,
                                  start_month: Optional[int] = None) -> List[MonthlyProjection]:
    return default_planner().monthly_projections(salary_input, months, start_month)


def calculate_annual_earnings(salary_input: SalaryInput) -> AnnualEarnings:
    return default_planner().annual_earnings(salary_input)


def calculate_tradeoff_comparisons(salary_input: SalaryInput) -> List[TradeoffComparison]:
    return default_planner().tradeoff_comparisons(salary_input)


def calculate_expense_accumulation(salary_input: SalaryInput, monthly_expenses: float,
                                   months: int = 12, start_month: Optional[int] = None) -> List[ExpenseAccumulation]:
    return default_planner().expense_accumulation(salary_input, monthly_expenses, months, start_month)


def calculate_monthly_breakdown(salary_input: SalaryInput, monthly_expenses: float = 0.0) -> MonthlyBreakdown:
    return default_planner().monthly_breakdown(salary_input, monthly_expenses)

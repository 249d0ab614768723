"""Renderer classes for displaying paycheck and planning results.

This module contains renderer classes that handle the presentation logic
for the different planning outputs. Each renderer takes the PlanReport
built for one salary and prints the part it is responsible for.
"""

from abc import ABC, abstractmethod
from typing import List

from calc.report import PlanReport
from model.field_metadata import get_short_name, wrap_header


def format_multiline_headers(columns: List[tuple], label: str = 'Month', label_width: int = 6) -> tuple[List[str], str]:
    """Format column headers with multi-line wrapping support.

    Args:
        columns: List of (header_text, width) tuples for each column
        label: Header of the leading row-label column
        label_width: Width of the leading column

    Returns:
        Tuple of (list of header lines, separator line)
    """
    wrapped_headers = [(wrap_header(header, width), width) for header, width in columns]

    max_lines = max(len(lines) for lines, _ in wrapped_headers) if wrapped_headers else 1

    # Pad all headers to have the same number of lines (pad at top)
    for lines, _ in wrapped_headers:
        while len(lines) < max_lines:
            lines.insert(0, "")

    header_lines = []
    for line_idx in range(max_lines):
        if line_idx == max_lines - 1:
            header_line = f"  {label:<{label_width}}"
        else:
            header_line = f"  {'':<{label_width}}"

        for lines, width in wrapped_headers:
            header_line += f" {lines[line_idx]:>{width}}"
        header_lines.append(header_line)

    sep_line = f"  {'-' * label_width}"
    for _, width in wrapped_headers:
        sep_line += f" {'-' * width}"

    return header_lines, sep_line


def print_banner(title: str, width: int = 60) -> None:
    print()
    print("=" * width)
    print(f"{title:^{width}}")
    print("=" * width)


class BaseRenderer(ABC):
    """Abstract base class for all renderers."""

    @abstractmethod
    def render(self, data: PlanReport) -> None:
        """Render the data to output.

        Args:
            data: The PlanReport containing all calculations
        """
        pass


class PaycheckRenderer(BaseRenderer):
    """Renderer for a single paycheck breakdown."""

    def render(self, data: PlanReport) -> None:
        pc = data.paycheck
        salary = data.salary_input

        print_banner("PAYCHECK BREAKDOWN")
        print(f"  {'Annual Salary:':<40} ${salary.annual_salary:>14,.2f}")
        print(f"  {'Pay Frequency:':<40} {salary.pay_frequency:>15}")
        print(f"  {'Paychecks Per Year:':<40} {data.periods_per_year:>15g}")
        print(f"  {'State:':<40} {salary.state or '(not set)':>15}")

        print()
        print("-" * 60)
        print("TAXES")
        print("-" * 60)
        print(f"  {'Federal Tax:':<40} ${pc.taxes.federal:>14,.2f}")
        print(f"  {'State Tax:':<40} ${pc.taxes.state:>14,.2f}")
        print(f"  {'FICA (Social Security + Medicare):':<40} ${pc.taxes.fica:>14,.2f}")
        print(f"  {'-' * 40}")
        print(f"  {'Total Taxes:':<40} ${pc.taxes.total:>14,.2f}")

        print()
        print("-" * 60)
        print("BENEFITS")
        print("-" * 60)
        print(f"  {'Health Insurance:':<40} ${pc.benefits.health_insurance:>14,.2f}")
        print(f"  {'Retirement (401k):':<40} ${pc.benefits.retirement:>14,.2f}")
        if pc.benefits.other:
            print(f"  {'Other:':<40} ${pc.benefits.other:>14,.2f}")
        print(f"  {'-' * 40}")
        print(f"  {'Total Benefits:':<40} ${pc.benefits.total:>14,.2f}")

        print()
        print("=" * 60)
        print(f"  {'Gross Pay:':<40} ${pc.gross_pay:>14,.2f}")
        print(f"{'TAKE HOME PAY:':^44} ${pc.take_home_pay:>14,.2f}")
        if pc.take_home_pay < 0:
            print("  Warning: deductions exceed gross pay for this pay schedule")
        print("=" * 60)
        print()


class ProjectionRenderer(BaseRenderer):
    """Renderer for month-by-month pay projections."""

    def render(self, data: PlanReport) -> None:
        width = 96
        print_banner(f"{len(data.projections)}-MONTH PROJECTION", width)
        print()

        columns = [
            (get_short_name("gross_pay"), 14),
            (get_short_name("taxes"), 12),
            (get_short_name("benefits"), 12),
            (get_short_name("net_pay"), 14),
            (get_short_name("cumulative_net"), 16),
        ]
        header_lines, sep_line = format_multiline_headers(columns, label='Month', label_width=10)
        for line in header_lines:
            print(line)
        print(sep_line)

        for p in data.projections:
            label = f"{p.month:>2} {p.month_name}"
            print(f"  {label:<10} ${p.gross_pay:>12,.2f} ${p.taxes:>10,.2f} ${p.benefits:>10,.2f} ${p.net_pay:>12,.2f} ${p.cumulative_net:>14,.2f}")

        print()
        print("=" * width)
        print()


class AnnualSummaryRenderer(BaseRenderer):
    """Renderer for the annualized earnings summary."""

    def render(self, data: PlanReport) -> None:
        a = data.annual
        print_banner("ANNUAL EARNINGS")
        print(f"  {'Annual Gross:':<40} ${a.annual_gross:>14,.2f}")
        print(f"  {'Annual Taxes:':<40} ${a.annual_taxes:>14,.2f}")
        print(f"  {'Annual Benefits:':<40} ${a.annual_benefits:>14,.2f}")
        print(f"  {'-' * 40}")
        print(f"  {'Annual Net:':<40} ${a.annual_net:>14,.2f}")
        print()
        print(f"  {'Tax Rate:':<40} {a.tax_rate:>14.1f}%")
        print(f"  {'Take Home Rate:':<40} {a.take_home_rate:>14.1f}%")
        print("=" * 60)
        print()


class TradeoffRenderer(BaseRenderer):
    """Renderer for lifestyle tradeoff comparisons."""

    def render(self, data: PlanReport) -> None:
        width = 84
        print_banner("TRADEOFF COMPARISONS", width)
        print()
        print(f"  {'Scenario':<32} {'Monthly Net':>14} {'Annual Net':>16} {'vs Current':>14}")
        print(f"  {'-' * 32} {'-' * 14} {'-' * 16} {'-' * 14}")
        for t in data.tradeoffs:
            delta = "" if t.is_baseline else f"{t.monthly_savings:+,.2f}"
            print(f"  {t.scenario:<32} ${t.monthly_net:>13,.2f} ${t.annual_net:>15,.2f} {delta:>14}")
        print()
        for t in data.tradeoffs:
            print(f"  {t.scenario}: {t.description}")
        print()
        print("=" * width)
        print()


class ExpenseRenderer(BaseRenderer):
    """Renderer for savings accumulation under recurring monthly expenses."""

    def render(self, data: PlanReport) -> None:
        width = 80
        print_banner("EXPENSES AND SAVINGS", width)
        b = data.monthly_breakdown
        print()
        print(f"  {'Monthly Gross:':<40} ${b.gross:>14,.2f}")
        print(f"  {'Federal Tax:':<40} ${b.federal_tax:>14,.2f}")
        print(f"  {'State Tax:':<40} ${b.state_tax:>14,.2f}")
        print(f"  {'FICA:':<40} ${b.fica:>14,.2f}")
        print(f"  {'Benefits:':<40} ${b.total_benefits:>14,.2f}")
        print(f"  {'Expenses:':<40} ${b.expenses:>14,.2f}")
        print(f"  {'-' * 40}")
        print(f"  {'Left Over:':<40} ${b.net:>14,.2f}")
        print()

        if not data.expense_accumulation:
            print("  No monthly expenses entered.")
            print()
            return

        columns = [
            (get_short_name("total_expenses"), 16),
            (get_short_name("remaining_balance"), 16),
            (get_short_name("savings_rate"), 12),
        ]
        header_lines, sep_line = format_multiline_headers(columns, label='Month', label_width=10)
        for line in header_lines:
            print(line)
        print(sep_line)
        for e in data.expense_accumulation:
            label = f"{e.month:>2} {e.month_name}"
            print(f"  {label:<10} ${e.total_expenses:>14,.2f} ${e.remaining_balance:>14,.2f} {e.savings_rate:>11.1f}%")
        print()
        print("=" * width)
        print()


class TradeoffCardsRenderer(BaseRenderer):
    """Renderer for the two-option tradeoff cards, scaled to the salary."""

    def render(self, data: PlanReport) -> None:
        width = 80
        print_banner("LIFESTYLE TRADEOFFS", width)
        if not data.tradeoff_cards:
            print("  No tradeoff cards available.")
            print()
            return
        for card in data.tradeoff_cards:
            print()
            print(f"  {card.title} ({card.category})")
            print(f"    A: {card.option_a.title:<40} ${card.option_a.monthly_impact:>+9,.0f}/mo")
            print(f"       {card.option_a.description}")
            print(f"    B: {card.option_b.title:<40} ${card.option_b.monthly_impact:>+9,.0f}/mo")
            print(f"       {card.option_b.description}")
            print(f"    Choosing B changes your month by ${card.difference:+,.0f}")
        print()
        print("=" * width)
        print()


class AllRenderer(BaseRenderer):
    """Renders every report section in order."""

    def render(self, data: PlanReport) -> None:
        for renderer_cls in (PaycheckRenderer, AnnualSummaryRenderer, ProjectionRenderer,
                             TradeoffRenderer, ExpenseRenderer):
            renderer_cls().render(data)


RENDERER_REGISTRY = {
    'Paycheck': PaycheckRenderer,
    'Projections': ProjectionRenderer,
    'AnnualSummary': AnnualSummaryRenderer,
    'Tradeoffs': TradeoffRenderer,
    'Expenses': ExpenseRenderer,
    'TradeoffCards': TradeoffCardsRenderer,
    'All': AllRenderer,
}

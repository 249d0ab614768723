"""Tests for the report renderers."""

import pytest
import sys
import os
from io import StringIO

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from calc.report import build_report
from calc.tradeoff_cards import TradeoffCardCatalog
from model.SalaryInput import SalaryInput
from render.renderers import (
    AllRenderer,
    AnnualSummaryRenderer,
    ExpenseRenderer,
    PaycheckRenderer,
    ProjectionRenderer,
    RENDERER_REGISTRY,
    TradeoffCardsRenderer,
    TradeoffRenderer,
    format_multiline_headers,
)


def render_to_string(renderer, report) -> str:
    output = StringIO()
    old_stdout = sys.stdout
    sys.stdout = output
    try:
        renderer.render(report)
    finally:
        sys.stdout = old_stdout
    return output.getvalue()


@pytest.fixture(scope="module")
def report():
    salary = SalaryInput(annual_salary=60000, pay_frequency='monthly', state='Texas')
    return build_report(salary, months=6, monthly_expenses=2500, start_month=1)


@pytest.fixture(scope="module")
def report_without_expenses():
    salary = SalaryInput(annual_salary=60000, pay_frequency='monthly', state='Texas')
    return build_report(salary, months=3, start_month=1)


class TestRendererRegistry:

    def test_all_modes_registered(self):
        assert set(RENDERER_REGISTRY) == {
            'Paycheck', 'Projections', 'AnnualSummary', 'Tradeoffs', 'Expenses', 'TradeoffCards', 'All'
        }

    def test_registry_returns_correct_class(self):
        assert RENDERER_REGISTRY['Paycheck'] == PaycheckRenderer
        assert RENDERER_REGISTRY['Projections'] == ProjectionRenderer


class TestPaycheckRenderer:

    def test_shows_breakdown(self, report):
        result = render_to_string(PaycheckRenderer(), report)
        assert 'PAYCHECK BREAKDOWN' in result
        assert '$     60,000.00' in result
        assert '687.75' in result
        assert '382.50' in result
        assert '3,529.75' in result
        assert 'Texas' in result

    def test_no_warning_for_positive_take_home(self, report):
        result = render_to_string(PaycheckRenderer(), report)
        assert 'Warning' not in result

    def test_missing_state_label(self):
        report = build_report(SalaryInput(60000), months=1, start_month=1)
        result = render_to_string(PaycheckRenderer(), report)
        assert '(not set)' in result


class TestProjectionRenderer:

    def test_one_row_per_month(self, report):
        result = render_to_string(ProjectionRenderer(), report)
        assert '6-MONTH PROJECTION' in result
        for name in ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun'):
            assert name in result
        assert 'Jul' not in result
        # Cumulative net after six months
        assert '21,178.50' in result


class TestAnnualSummaryRenderer:

    def test_shows_rates(self, report):
        result = render_to_string(AnnualSummaryRenderer(), report)
        assert 'ANNUAL EARNINGS' in result
        assert '42,357.00' in result
        assert '21.4%' in result
        assert '70.6%' in result


class TestTradeoffRenderer:

    def test_lists_scenarios(self, report):
        result = render_to_string(TradeoffRenderer(), report)
        assert 'TRADEOFF COMPARISONS' in result
        assert 'With Roommates' in result
        assert '+882.44' in result
        assert '-352.9' in result


class TestExpenseRenderer:

    def test_shows_schedule(self, report):
        result = render_to_string(ExpenseRenderer(), report)
        assert 'EXPENSES AND SAVINGS' in result
        assert '1,029.75' in result
        assert '29.2%' in result

    def test_without_expenses(self, report_without_expenses):
        result = render_to_string(ExpenseRenderer(), report_without_expenses)
        assert 'No monthly expenses entered.' in result


class TestTradeoffCardsRenderer:

    def test_without_cards(self, report):
        result = render_to_string(TradeoffCardsRenderer(), report)
        assert 'No tradeoff cards available.' in result

    def test_scaled_cards(self):
        salary = SalaryInput(annual_salary=100000, pay_frequency='monthly', state='Texas')
        report = build_report(salary, months=1, start_month=1, cards=TradeoffCardCatalog.load())
        result = render_to_string(TradeoffCardsRenderer(), report)
        assert 'Live Alone' in result
        assert '-3,000' in result
        assert '+1,400' in result


class TestAllRenderer:

    def test_renders_every_section(self, report):
        result = render_to_string(AllRenderer(), report)
        for heading in ('PAYCHECK BREAKDOWN', 'ANNUAL EARNINGS', '6-MONTH PROJECTION',
                        'TRADEOFF COMPARISONS', 'EXPENSES AND SAVINGS'):
            assert heading in result


class TestFormatMultilineHeaders:

    def test_wraps_long_headers(self):
        header_lines, sep_line = format_multiline_headers([('Cumulative Net', 8), ('Taxes', 8)])
        assert len(header_lines) == 2
        assert 'Month' in header_lines[-1]
        assert sep_line.count('-') == 6 + 8 + 8

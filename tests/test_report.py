"""Tests for the combined plan report."""

import pytest

from calc.report import build_report
from calc.tradeoff_cards import TradeoffCardCatalog
from model.SalaryInput import InvalidSalaryError, SalaryInput


class TestBuildReport:

    def test_sections(self, planner, texas_60k):
        report = build_report(texas_60k, months=4, monthly_expenses=2500, start_month=2, planner=planner)
        assert report.periods_per_year == 12
        assert report.paycheck.take_home_pay == pytest.approx(3529.75)
        assert report.annual.annual_net == pytest.approx(42357.0)
        assert len(report.projections) == 4
        assert report.projections[0].month_name == 'Feb'
        assert len(report.tradeoffs) == 9
        assert len(report.expense_accumulation) == 4
        assert report.monthly_breakdown.net == pytest.approx(1029.75)
        assert report.tradeoff_cards == []

    def test_no_expense_schedule_without_expenses(self, planner, texas_60k):
        report = build_report(texas_60k, months=3, start_month=1, planner=planner)
        assert report.expense_accumulation == []
        assert report.monthly_expenses == 0

    def test_cards_scaled_to_salary(self, planner):
        report = build_report(SalaryInput(100000, 'monthly', 'Texas'), months=1, start_month=1,
                              planner=planner, cards=TradeoffCardCatalog.load())
        assert report.tradeoff_cards[0].option_a.monthly_impact == -3000

    def test_to_dict(self, planner, texas_60k):
        data = build_report(texas_60k, months=2, monthly_expenses=100, start_month=1, planner=planner).to_dict()
        assert data['salary'] == {'annualSalary': 60000, 'payFrequency': 'monthly', 'state': 'Texas'}
        assert data['paycheck']['takeHomePay'] == pytest.approx(3529.75)
        assert data['projections'][1]['cumulativeNet'] == pytest.approx(7059.5)
        assert 'monthlySavings' not in data['tradeoffs'][0]
        assert len(data['expenseAccumulation']) == 2

    def test_invalid_salary(self, planner):
        with pytest.raises(InvalidSalaryError):
            build_report(SalaryInput(0), start_month=1, planner=planner)

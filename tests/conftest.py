"""Pytest configuration for the paycheck-planner test suite."""

import os
import sys

import pytest

SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from calc.planning_calculator import PlanningCalculator
from calc.take_home import TakeHomeCalculator
from calc.tradeoffs import TradeoffScenarios
from logging_config import configure_logging
from model.SalaryInput import SalaryInput
from tax.FederalDetails import FederalDetails
from tax.StateDetails import StateDetails
from tax.flat_tax_details import load_flat_tax_details


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an async test"
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind log output to the real stderr once capsys has released it."""
    yield
    configure_logging()


@pytest.fixture(scope="session")
def take_home():
    """TakeHomeCalculator hydrated from the reference tables."""
    social_security, medicare, benefits = load_flat_tax_details()
    return TakeHomeCalculator(FederalDetails.load(), StateDetails.load(), social_security, medicare, benefits)


@pytest.fixture(scope="session")
def planner(take_home):
    return PlanningCalculator(take_home, TradeoffScenarios.load())


@pytest.fixture
def texas_60k():
    """$60,000 paid monthly in a no-income-tax state."""
    return SalaryInput(annual_salary=60000, pay_frequency='monthly', state='Texas')

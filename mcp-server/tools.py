"""Paycheck Planner Tools for MCP Server.

This module provides the tool implementations that wrap the paycheck
estimator and planning calculator and expose their results through MCP.
"""

import os
import sys
from typing import Any, Dict, List, Optional

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from calc.planning_calculator import PlanningCalculator, default_planner
from calc.tradeoff_cards import TradeoffCardCatalog
from logging_config import get_logger
from model.field_metadata import find_fields, get_description, get_short_name
from model.SalaryInput import SalaryInput
from profiles import SalaryProfile, discover_profiles

logger = get_logger(__name__)


class PaycheckPlannerTools:
    """Tools that wrap the calculators for one salary input."""

    def __init__(self, salary_input: SalaryInput, planner: Optional[PlanningCalculator] = None,
                 cards: Optional[TradeoffCardCatalog] = None):
        self.salary_input = salary_input
        self.planner = planner or default_planner()
        self.cards = cards

    def estimate_paycheck(self) -> dict:
        breakdown = self.planner.take_home.estimate(self.salary_input)
        result = breakdown.to_dict()
        result["periodsPerYear"] = self.planner.take_home.periods_per_year(self.salary_input)
        result["annualTakeHome"] = self.planner.take_home.annualize(breakdown.take_home_pay, self.salary_input)
        result["stateRecognized"] = self.planner.take_home.state.is_known(self.salary_input.state)
        return result

    def get_monthly_projections(self, months: int = 12, start_month: Optional[int] = None) -> dict:
        projections = self.planner.monthly_projections(self.salary_input, months, start_month)
        return {
            "months": months,
            "projections": [p.to_dict() for p in projections],
            "totalNet": projections[-1].cumulative_net if projections else 0.0,
        }

    def get_annual_earnings(self) -> dict:
        return self.planner.annual_earnings(self.salary_input).to_dict()

    def get_tradeoff_comparisons(self) -> dict:
        comparisons = self.planner.tradeoff_comparisons(self.salary_input)
        best = max(comparisons[1:], key=lambda c: c.monthly_savings, default=None)
        return {
            "comparisons": [c.to_dict() for c in comparisons],
            "largestSaving": best.scenario if best else None,
        }

    def get_expense_accumulation(self, monthly_expenses: float, months: int = 12,
                                 start_month: Optional[int] = None) -> dict:
        schedule = self.planner.expense_accumulation(self.salary_input, monthly_expenses, months, start_month)
        return {
            "monthlyExpenses": monthly_expenses,
            "monthlyBreakdown": self.planner.monthly_breakdown(self.salary_input, monthly_expenses).to_dict(),
            "schedule": [e.to_dict() for e in schedule],
        }

    def get_tradeoff_cards(self, category: Optional[str] = None, scaled: bool = True) -> dict:
        catalog = self.cards or TradeoffCardCatalog.load()
        salary = self.salary_input.annual_salary if scaled else None
        cards = catalog.cards_for(salary, category)
        return {
            "scaleFactor": catalog.scale_factor(self.salary_input.annual_salary) if scaled else 1.0,
            "categories": catalog.categories(),
            "cards": [c.to_dict() for c in cards],
        }

    def search_paycheck_data(self, query: str) -> dict:
        """Look up result fields matching a free-text query, e.g. 'state tax' or 'cumulative'."""
        matches = find_fields(query)
        if not matches:
            return {"query": query, "results": [], "message": "No matching fields found"}

        breakdown = self.planner.take_home.estimate(self.salary_input)
        annual = self.planner.annual_earnings(self.salary_input)
        per_month = self.planner.pay_periods_per_month(self.salary_input)
        values: Dict[str, Any] = {
            "gross_pay": breakdown.gross_pay,
            "federal_tax": breakdown.taxes.federal,
            "state_tax": breakdown.taxes.state,
            "fica": breakdown.taxes.fica,
            "total_taxes": breakdown.taxes.total,
            "health_insurance": breakdown.benefits.health_insurance,
            "retirement": breakdown.benefits.retirement,
            "other_benefits": breakdown.benefits.other,
            "total_benefits": breakdown.benefits.total,
            "take_home_pay": breakdown.take_home_pay,
            "net_pay": breakdown.take_home_pay * per_month,
            "taxes": breakdown.taxes.total * per_month,
            "benefits": breakdown.benefits.total * per_month,
            "monthly_net": breakdown.take_home_pay * per_month,
        }
        values.update({
            "annual_gross": annual.annual_gross,
            "annual_net": annual.annual_net,
            "annual_taxes": annual.annual_taxes,
            "annual_benefits": annual.annual_benefits,
            "tax_rate": annual.tax_rate,
            "take_home_rate": annual.take_home_rate,
        })

        results = []
        for name in matches:
            results.append({
                "field": name,
                "name": get_short_name(name),
                "description": get_description(name),
                "value": values.get(name),
            })
        return {"query": query, "results": results}


class MultiProfileTools:
    """Manager for saved salary profiles.

    Discovers all profiles under input-parameters and resolves each tool
    call either to a profile or to inline salary arguments.
    """

    def __init__(self, base_path: str, default_profile: Optional[str] = None):
        """Initialize and discover all available profiles.

        Args:
            base_path: Path to the project root directory
            default_profile: Default profile to use when none is specified
        """
        self.base_path = base_path
        self.profiles: Dict[str, SalaryProfile] = {}
        self.default_profile = default_profile
        self._explicit_default = default_profile
        self._discover_profiles()

    def _discover_profiles(self):
        self.profiles = discover_profiles(self.base_path)
        logger.info("profiles_discovered", base_path=self.base_path, profiles=list(self.profiles))
        if self.default_profile is None and self.profiles:
            self.default_profile = next(iter(self.profiles))

    def list_profiles(self) -> dict:
        profiles_info = {}
        for name, profile in self.profiles.items():
            profiles_info[name] = {
                "annual_salary": profile.salary_input.annual_salary,
                "pay_frequency": profile.salary_input.pay_frequency,
                "state": profile.salary_input.state,
                "monthly_expenses": profile.monthly_expenses,
            }
        return {
            "available_profiles": list(self.profiles.keys()),
            "default_profile": self.default_profile,
            "profiles_info": profiles_info
        }

    def reload_profiles(self) -> dict:
        """Reload all profiles from disk, refreshing the cache."""
        old_profiles = set(self.profiles.keys())
        self.default_profile = self._explicit_default
        self._discover_profiles()
        new_profiles = set(self.profiles.keys())

        return {
            "status": "success",
            "message": f"Reloaded {len(self.profiles)} profiles",
            "profiles_loaded": list(self.profiles.keys()),
            "default_profile": self.default_profile,
            "changes": {
                "added": sorted(new_profiles - old_profiles),
                "removed": sorted(old_profiles - new_profiles),
                "reloaded": sorted(old_profiles & new_profiles)
            }
        }

    def _get_profile(self, profile: Optional[str] = None) -> SalaryProfile:
        profile_name = profile or self.default_profile
        if profile_name not in self.profiles:
            available = list(self.profiles.keys())
            raise ValueError(
                f"Profile '{profile_name}' not found. Available profiles: {available}"
            )
        return self.profiles[profile_name]

    def resolve(self, arguments: Dict[str, Any]) -> PaycheckPlannerTools:
        """Build tools for inline salary arguments, or for the named/default profile."""
        if arguments.get("annualSalary") is not None:
            return PaycheckPlannerTools(SalaryInput.from_dict(arguments))
        return PaycheckPlannerTools(self._get_profile(arguments.get("profile")).salary_input)

    def profile_defaults(self, arguments: Dict[str, Any]) -> SalaryProfile | None:
        """The saved profile behind a call, if the call did not pass inline salary data."""
        if arguments.get("annualSalary") is not None:
            return None
        return self._get_profile(arguments.get("profile"))

    def estimate_paycheck(self, arguments: Dict[str, Any]) -> dict:
        return self.resolve(arguments).estimate_paycheck()

    def get_monthly_projections(self, arguments: Dict[str, Any]) -> dict:
        profile = self.profile_defaults(arguments)
        months = arguments.get("months", profile.months if profile else 12)
        return self.resolve(arguments).get_monthly_projections(months, arguments.get("startMonth"))

    def get_annual_earnings(self, arguments: Dict[str, Any]) -> dict:
        return self.resolve(arguments).get_annual_earnings()

    def get_tradeoff_comparisons(self, arguments: Dict[str, Any]) -> dict:
        return self.resolve(arguments).get_tradeoff_comparisons()

    def get_expense_accumulation(self, arguments: Dict[str, Any]) -> dict:
        profile = self.profile_defaults(arguments)
        expenses = arguments.get("monthlyExpenses", profile.monthly_expenses if profile else None)
        if expenses is None:
            raise ValueError("monthlyExpenses is required when no profile is used")
        months = arguments.get("months", profile.months if profile else 12)
        return self.resolve(arguments).get_expense_accumulation(expenses, months, arguments.get("startMonth"))

    def get_tradeoff_cards(self, arguments: Dict[str, Any]) -> dict:
        return self.resolve(arguments).get_tradeoff_cards(arguments.get("category"), arguments.get("scaled", True))

    def search_paycheck_data(self, arguments: Dict[str, Any]) -> dict:
        return self.resolve(arguments).search_paycheck_data(arguments["query"])

    def tool_names(self) -> List[str]:
        return [
            "estimate_paycheck",
            "get_monthly_projections",
            "get_annual_earnings",
            "get_tradeoff_comparisons",
            "get_expense_accumulation",
            "get_tradeoff_cards",
            "search_paycheck_data",
        ]

"""Salary input supplied by the caller (onboarding form, saved profile, CLI).

The estimator and planning calculators only ever read these values; nothing
in the calculation layer mutates or stores them.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple


WEEKLY = 'weekly'
BIWEEKLY = 'biweekly'
SEMIMONTHLY = 'semimonthly'
MONTHLY = 'monthly'
OTHER = 'other'

PAY_FREQUENCIES = (WEEKLY, BIWEEKLY, SEMIMONTHLY, MONTHLY, OTHER)


class InvalidSalaryError(ValueError):
    """Raised when a salary input cannot produce a meaningful breakdown."""


@dataclass(frozen=True)
class CustomBenefit:
    """A user-edited deduction line item. `id` is stable across edits."""
    id: str
    name: str
    amount: float

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "amount": self.amount}


@dataclass(frozen=True)
class SalaryInput:
    annual_salary: float
    pay_frequency: str = MONTHLY
    state: str = ''
    pay_periods_per_year: Optional[float] = None
    # Reconciled by the presentation layer; the estimator does not read it.
    custom_benefits: Tuple[CustomBenefit, ...] = field(default_factory=tuple)

    @property
    def has_custom_periods(self) -> bool:
        """True when a positive custom pay-period count overrides the frequency."""
        periods = self.pay_periods_per_year
        if isinstance(periods, bool) or not isinstance(periods, (int, float)):
            return False
        return periods > 0

    def validate(self) -> None:
        """Reject salaries that would poison every downstream figure.

        Raises:
            InvalidSalaryError: if annual_salary is not a finite number > 0, or
                pay_periods_per_year is set but is not a finite number
        """
        salary = self.annual_salary
        if isinstance(salary, bool) or not isinstance(salary, (int, float)):
            raise InvalidSalaryError(f"Annual salary must be a number, got {salary!r}")
        if math.isnan(salary) or math.isinf(salary):
            raise InvalidSalaryError(f"Annual salary must be finite, got {salary!r}")
        if salary <= 0:
            raise InvalidSalaryError(f"Annual salary must be greater than zero, got {salary!r}")
        periods = self.pay_periods_per_year
        if periods is None:
            return
        if isinstance(periods, bool) or not isinstance(periods, (int, float)):
            raise InvalidSalaryError(f"Pay periods per year must be a number, got {periods!r}")
        if math.isnan(periods) or math.isinf(periods):
            raise InvalidSalaryError(f"Pay periods per year must be finite, got {periods!r}")

    @classmethod
    def from_dict(cls, data: dict) -> 'SalaryInput':
        """Build from the camelCase profile shape used in profile.json files."""
        if 'annualSalary' not in data:
            raise InvalidSalaryError("Salary data must contain 'annualSalary'")
        benefits = tuple(
            CustomBenefit(id=str(b.get('id', '')), name=b.get('name', ''), amount=b.get('amount', 0))
            for b in data.get('customBenefits', []) or []
        )
        return cls(
            annual_salary=data['annualSalary'],
            pay_frequency=data.get('payFrequency') or MONTHLY,
            state=data.get('state', ''),
            pay_periods_per_year=data.get('payPeriodsPerYear'),
            custom_benefits=benefits,
        )

    def to_dict(self) -> dict:
        result = {
            "annualSalary": self.annual_salary,
            "payFrequency": self.pay_frequency,
            "state": self.state,
        }
        if self.pay_periods_per_year is not None:
            result["payPeriodsPerYear"] = self.pay_periods_per_year
        if self.custom_benefits:
            result["customBenefits"] = [b.to_dict() for b in self.custom_benefits]
        return result

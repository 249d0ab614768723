from typing import Optional

from model.PaycheckBreakdown import PaycheckBreakdown, TaxBreakdown
from model.SalaryInput import SalaryInput, WEEKLY, BIWEEKLY, SEMIMONTHLY, MONTHLY
from tax.FederalDetails import FederalDetails
from tax.StateDetails import StateDetails
from tax.SocialSecurityDetails import SocialSecurityDetails
from tax.MedicareDetails import MedicareDetails
from tax.BenefitsDetails import BenefitsDetails
from tax.flat_tax_details import load_flat_tax_details


# Paychecks per year by frequency; anything unrecognized is treated as monthly
PERIODS_PER_YEAR = {
    WEEKLY: 52,
    BIWEEKLY: 26,
    SEMIMONTHLY: 24,
    MONTHLY: 12,
}
DEFAULT_PERIODS_PER_YEAR = 12


def standard_periods_per_year(pay_frequency: str) -> int:
    return PERIODS_PER_YEAR.get(pay_frequency, DEFAULT_PERIODS_PER_YEAR)


class TakeHomeCalculator:
    """Calculator that estimates a single paycheck using injected detail providers.

    Pass hydrated instances of the tax and benefit details into the
    constructor. This keeps file I/O in the caller (see `default_calculator`)
    and makes the calculation logic easy to unit test.
    """

    def __init__(self, federal: FederalDetails, state: StateDetails,
                 social_security: SocialSecurityDetails, medicare: MedicareDetails,
                 benefits: BenefitsDetails):
        self.federal = federal
        self.state = state
        self.social_security = social_security
        self.medicare = medicare
        self.benefits = benefits

    def periods_per_year(self, salary_input: SalaryInput) -> float:
        """Number of paychecks per year; a positive custom count wins over the frequency."""
        if salary_input.has_custom_periods:
            return salary_input.pay_periods_per_year
        return standard_periods_per_year(salary_input.pay_frequency)

    def gross_pay(self, salary_input: SalaryInput) -> float:
        return salary_input.annual_salary / self.periods_per_year(salary_input)

    def federal_tax(self, gross_pay: float, annual_salary: float) -> float:
        """Annual bracket tax prorated to one paycheck.

        The ratio gross_pay / annual_salary is 1 / periods under normal inputs,
        but is taken from the actual values so it stays consistent with a
        custom pay-period count.
        """
        annual_tax = self.federal.taxBurden(annual_salary).total_federal_tax
        return annual_tax * (gross_pay / annual_salary)

    def fica(self, gross_pay: float, annual_salary: float) -> float:
        return (self.social_security.contribution(gross_pay, annual_salary)
                + self.medicare.contribution(gross_pay))

    def estimate(self, salary_input: SalaryInput) -> PaycheckBreakdown:
        """Estimate one paycheck for the given salary.

        Args:
            salary_input: Annual salary, pay frequency and state

        Returns:
            PaycheckBreakdown with per-period taxes, benefits and take-home pay

        Raises:
            InvalidSalaryError: if the annual salary is not a positive finite number
        """
        salary_input.validate()
        annual_salary = salary_input.annual_salary
        gross = self.gross_pay(salary_input)

        taxes = TaxBreakdown(
            federal=self.federal_tax(gross, annual_salary),
            state=self.state.taxBurden(gross, salary_input.state),
            fica=self.fica(gross, annual_salary),
        )
        # custom_benefits is deliberately not consulted here
        benefits = self.benefits.breakdown(gross)

        return PaycheckBreakdown(gross_pay=gross, taxes=taxes, benefits=benefits)

    def annualize(self, per_check_amount: float, salary_input: SalaryInput) -> float:
        """Scale a per-paycheck amount to a year using the frequency's paycheck count.

        A custom pay-period count only changes the size of each paycheck;
        the annual multiplier is 52/26/24/12 by frequency (12 for other).
        """
        return per_check_amount * standard_periods_per_year(salary_input.pay_frequency)


_default_calculator: Optional[TakeHomeCalculator] = None


def default_calculator() -> TakeHomeCalculator:
    """Return a calculator built from the reference tables, loading them once."""
    global _default_calculator
    if _default_calculator is None:
        social_security, medicare, benefits = load_flat_tax_details()
        _default_calculator = TakeHomeCalculator(
            FederalDetails.load(),
            StateDetails.load(),
            social_security,
            medicare,
            benefits
        )
    return _default_calculator


def estimate_take_home(salary_input: SalaryInput) -> PaycheckBreakdown:
    return default_calculator().estimate(salary_input)


def annualize_take_home(per_check_take_home: float, salary_input: SalaryInput) -> float:
    return default_calculator().annualize(per_check_take_home, salary_input)

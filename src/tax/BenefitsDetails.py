from model.PaycheckBreakdown import BenefitsBreakdown


class BenefitsDetails:
    """Fixed benefit deduction estimates as fractions of gross pay.

    Health insurance defaults to 5% and retirement (401k) to 3%. `other`
    is always zero here; user-entered custom benefits are reconciled by
    the caller, not by the estimator.
    """

    def __init__(self, health_insurance_rate: float = 0.05, retirement_rate: float = 0.03):
        self.health_insurance_rate = health_insurance_rate
        self.retirement_rate = retirement_rate

    @property
    def combined_rate(self) -> float:
        return self.health_insurance_rate + self.retirement_rate

    def breakdown(self, gross_pay: float) -> BenefitsBreakdown:
        return BenefitsBreakdown(
            health_insurance=gross_pay * self.health_insurance_rate,
            retirement=gross_pay * self.retirement_rate,
            other=0.0,
        )

"""Per-paycheck breakdown returned by the take-home estimator.

Totals are derived properties rather than stored fields, so
taxes.total == federal + state + fica and
benefits.total == health_insurance + retirement + other always hold,
and take_home_pay is always gross_pay - taxes.total - benefits.total.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxBreakdown:
    federal: float
    state: float
    fica: float

    @property
    def total(self) -> float:
        return self.federal + self.state + self.fica

    def to_dict(self) -> dict:
        return {
            "federal": self.federal,
            "state": self.state,
            "fica": self.fica,
            "total": self.total,
        }


@dataclass(frozen=True)
class BenefitsBreakdown:
    health_insurance: float
    retirement: float
    other: float = 0.0

    @property
    def total(self) -> float:
        return self.health_insurance + self.retirement + self.other

    def to_dict(self) -> dict:
        return {
            "healthInsurance": self.health_insurance,
            "retirement": self.retirement,
            "other": self.other,
            "total": self.total,
        }


@dataclass(frozen=True)
class PaycheckBreakdown:
    """A single paycheck: gross pay, taxes, benefits and what is left.

    take_home_pay is never floored; a negative value signals a
    pathological input that the caller should flag.
    """
    gross_pay: float
    taxes: TaxBreakdown
    benefits: BenefitsBreakdown

    @property
    def take_home_pay(self) -> float:
        return self.gross_pay - self.taxes.total - self.benefits.total

    def to_dict(self) -> dict:
        return {
            "grossPay": self.gross_pay,
            "taxes": self.taxes.to_dict(),
            "benefits": self.benefits.to_dict(),
            "takeHomePay": self.take_home_pay,
        }

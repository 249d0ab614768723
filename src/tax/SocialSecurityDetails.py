class SocialSecurityDetails:
    """Holds the Social Security employee rate and wage base.

    The wage base is applied as an all-or-nothing switch on the annual
    salary: at or below it every paycheck carries the full rate, above it
    no paycheck does. There is no mid-year proration.
    """

    def __init__(self, employee_portion: float = 0.062, wage_base: float = 168600):
        """Initialize with statutory details.

        Args:
            employee_portion: Employee Social Security rate.
            wage_base: Annual income threshold above which the rate drops to zero.
        """
        self.employee_portion = employee_portion
        self.wage_base = wage_base

    def rate_for(self, annual_salary: float) -> float:
        """Return the Social Security rate that applies for this annual salary."""
        return self.employee_portion if annual_salary <= self.wage_base else 0.0

    def contribution(self, gross_pay: float, annual_salary: float) -> float:
        """Calculate Social Security tax for one paycheck.

        Args:
            gross_pay: Gross pay for the period.
            annual_salary: Annual salary used for the wage-base check.

        Returns:
            The Social Security amount for the period.
        """
        return gross_pay * self.rate_for(annual_salary)

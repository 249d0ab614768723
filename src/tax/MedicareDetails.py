class MedicareDetails:
    """Holds the Medicare rate and computes contributions.

    Medicare is uncapped; the additional high-income surtax is not modelled.
    """

    def __init__(self, medicare_rate: float = 0.0145):
        """Initialize with statutory details.

        Args:
            medicare_rate: The Medicare tax rate.
        """
        self.medicare_rate = medicare_rate

    def contribution(self, gross_pay: float) -> float:
        """Calculate Medicare tax for one paycheck."""
        return gross_pay * self.medicare_rate

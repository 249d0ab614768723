import json
import os
from typing import List, Optional

from logging_config import get_logger
from model.FederalResult import FederalResult

logger = get_logger(__name__)

DEFAULT_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '../../reference/federal-details.json'))


class FederalDetails:
	def __init__(self, brackets: List[dict], tax_year: Optional[int] = None):
		"""
		brackets: ordered list of {"maxIncome": ceiling or None, "rate": fraction or percent}.
		The last bracket must be unbounded (maxIncome None).
		"""
		self.tax_year = tax_year
		self.brackets = self._build_brackets(brackets)

	@classmethod
	def load(cls, path: Optional[str] = None) -> 'FederalDetails':
		"""Load the bracket table from reference/federal-details.json (or the given path)."""
		ref_path = path or DEFAULT_PATH
		with open(ref_path, 'r') as f:
			data = json.load(f)
		details = cls(data.get("brackets", []), data.get("taxYear"))
		logger.debug("federal_brackets_loaded", path=ref_path, tax_year=details.tax_year, brackets=len(details.brackets))
		return details

	@staticmethod
	def _build_brackets(raw_brackets: List[dict]) -> List[dict]:
		if not raw_brackets:
			raise ValueError("Federal bracket table must contain at least one bracket")

		brackets = []
		floor = 0.0
		for i, b in enumerate(raw_brackets):
			rate = b["rate"]
			if rate > 1:
				rate = rate / 100.0
			ceiling = b.get("maxIncome")
			if ceiling is None:
				if i != len(raw_brackets) - 1:
					raise ValueError("Only the last federal bracket may be unbounded")
				ceiling = float('inf')
			if ceiling <= floor:
				raise ValueError(f"Federal brackets must be sorted by ceiling. Bracket {i} ends at {ceiling} but starts at {floor}")
			brackets.append({
				"minIncome": floor,
				"maxIncome": ceiling,
				"rate": rate
			})
			floor = ceiling

		if brackets[-1]["maxIncome"] != float('inf'):
			raise ValueError("The last federal bracket must be unbounded (maxIncome null)")
		return brackets

	def bracketFor(self, income: float) -> dict:
		"""Returns the bracket that contains the topmost dollar of income."""
		for b in self.brackets:
			if income <= b["maxIncome"]:
				return b
		# Only reachable for NaN income
		return self.brackets[-1]

	def taxBurden(self, income: float) -> FederalResult:
		"""
		Returns a FederalResult with the annual federal tax and marginal bracket for a given annual income.

		Each bracket whose floor lies below the income taxes the slice
		(min(income, ceiling) - floor) at the bracket rate; the slices are summed.
		"""
		total_tax = 0.0
		for b in self.brackets:
			if income > b["minIncome"]:
				total_tax += (min(income, b["maxIncome"]) - b["minIncome"]) * b["rate"]
		return FederalResult(
			annual_income=income,
			total_federal_tax=total_tax,
			marginal_bracket=self.bracketFor(income)["rate"]
		)

import json
import os
import sys
import tempfile
import unittest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
from tax.FederalDetails import FederalDetails

class TestFederalDetails(unittest.TestCase):
    def setUp(self):
        # 2024 single filer brackets from reference/federal-details.json
        self.fed = FederalDetails.load()

    def test_loads_seven_brackets(self):
        self.assertEqual(len(self.fed.brackets), 7)
        self.assertEqual(self.fed.tax_year, 2024)
        # Percent rates in the JSON are converted to fractions
        self.assertAlmostEqual(self.fed.brackets[0]["rate"], 0.10)
        self.assertAlmostEqual(self.fed.brackets[-1]["rate"], 0.37)
        self.assertEqual(self.fed.brackets[-1]["maxIncome"], float('inf'))

    def test_first_bracket_boundary(self):
        # Exactly at the first ceiling: no spillover into 12%
        result = self.fed.taxBurden(11600)
        self.assertAlmostEqual(result.total_federal_tax, 1160.0, places=2)
        self.assertAlmostEqual(result.marginal_bracket, 0.10)

    def test_second_bracket_boundary(self):
        result = self.fed.taxBurden(47150)
        self.assertAlmostEqual(result.total_federal_tax, 1160 + (47150 - 11600) * 0.12, places=2)
        self.assertAlmostEqual(result.marginal_bracket, 0.12)

    def test_sixty_thousand(self):
        result = self.fed.taxBurden(60000)
        self.assertAlmostEqual(result.total_federal_tax, 1160 + 4266 + 2827, places=2)
        self.assertAlmostEqual(result.marginal_bracket, 0.22)

    def test_top_bracket(self):
        income = 700000
        expected = (11600 * 0.10 + (47150 - 11600) * 0.12 + (100525 - 47150) * 0.22
                    + (191950 - 100525) * 0.24 + (243725 - 191950) * 0.32
                    + (609350 - 243725) * 0.35 + (income - 609350) * 0.37)
        result = self.fed.taxBurden(income)
        self.assertAlmostEqual(result.total_federal_tax, expected, places=2)
        self.assertAlmostEqual(result.marginal_bracket, 0.37)

    def test_monotonic_in_income(self):
        previous = 0.0
        for income in range(0, 800001, 5000):
            tax = self.fed.taxBurden(income).total_federal_tax
            self.assertGreaterEqual(tax, previous)
            previous = tax

    def test_marginal_rate_applies_to_top_dollar(self):
        for income in (5000, 30000, 80000, 150000, 200000, 300000, 650000):
            result = self.fed.taxBurden(income)
            one_more = self.fed.taxBurden(income + 1).total_federal_tax - result.total_federal_tax
            self.assertAlmostEqual(one_more, result.marginal_bracket, places=6)

    def test_zero_income(self):
        result = self.fed.taxBurden(0)
        self.assertEqual(result.total_federal_tax, 0.0)
        self.assertEqual(result.effective_rate, 0.0)

    def test_effective_rate(self):
        result = self.fed.taxBurden(60000)
        self.assertAlmostEqual(result.effective_rate, 8253 / 60000)

    def test_fraction_rates_accepted(self):
        fed = FederalDetails([
            {"maxIncome": 10000, "rate": 0.1},
            {"maxIncome": None, "rate": 0.2},
        ])
        self.assertAlmostEqual(fed.taxBurden(15000).total_federal_tax, 1000 + 1000)

    def test_empty_table_rejected(self):
        with self.assertRaises(ValueError):
            FederalDetails([])

    def test_unsorted_table_rejected(self):
        with self.assertRaises(ValueError):
            FederalDetails([
                {"maxIncome": 20000, "rate": 10},
                {"maxIncome": 10000, "rate": 12},
                {"maxIncome": None, "rate": 22},
            ])

    def test_bounded_top_bracket_rejected(self):
        with self.assertRaises(ValueError):
            FederalDetails([{"maxIncome": 10000, "rate": 10}])

    def test_load_from_custom_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'federal.json')
            with open(path, 'w') as f:
                json.dump({"taxYear": 2025, "brackets": [
                    {"maxIncome": 1000, "rate": 50},
                    {"maxIncome": None, "rate": 100},
                ]}, f)
            fed = FederalDetails.load(path)
        self.assertEqual(fed.tax_year, 2025)
        self.assertAlmostEqual(fed.taxBurden(1500).total_federal_tax, 500 + 500)

if __name__ == '__main__':
    unittest.main()

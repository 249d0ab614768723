import os
import sys
import unittest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))
from tax.StateDetails import StateDetails


class TestStateDetails(unittest.TestCase):
    def setUp(self):
        self.state = StateDetails.load()

    def test_no_tax_states(self):
        for name in ('Alaska', 'Florida', 'Nevada', 'New Hampshire', 'South Dakota',
                     'Tennessee', 'Texas', 'Washington', 'Wyoming'):
            self.assertEqual(self.state.rateFor(name), 0)
            self.assertEqual(self.state.taxBurden(5000, name), 0)

    def test_listed_rates(self):
        self.assertAlmostEqual(self.state.rateFor('California'), 0.09)
        self.assertAlmostEqual(self.state.rateFor('Illinois'), 0.0495)
        self.assertAlmostEqual(self.state.rateFor('New York'), 0.065)
        self.assertAlmostEqual(self.state.rateFor('District of Columbia'), 0.08)

    def test_table_size_and_range(self):
        self.assertGreaterEqual(len(self.state.rates), 40)
        for rate in self.state.rates.values():
            self.assertGreaterEqual(rate, 0)
            self.assertLessEqual(rate, 0.09)

    def test_unknown_state_uses_default(self):
        self.assertAlmostEqual(self.state.rateFor('Atlantis'), 0.05)
        self.assertFalse(self.state.is_known('Atlantis'))

    def test_names_match_exactly(self):
        # Misspelled or differently cased names fall back to the default
        self.assertAlmostEqual(self.state.rateFor('texas'), 0.05)
        self.assertAlmostEqual(self.state.rateFor(''), 0.05)
        self.assertTrue(self.state.is_known('Texas'))

    def test_flat_rate_on_gross(self):
        self.assertAlmostEqual(self.state.taxBurden(2000, 'California'), 180.0)
        self.assertAlmostEqual(self.state.taxBurden(2000, 'Nowhere'), 100.0)

    def test_in_memory_table(self):
        state = StateDetails({'Somewhere': 0.02}, default_rate=0.01)
        self.assertAlmostEqual(state.taxBurden(1000, 'Somewhere'), 20.0)
        self.assertAlmostEqual(state.taxBurden(1000, 'Elsewhere'), 10.0)


if __name__ == '__main__':
    unittest.main()

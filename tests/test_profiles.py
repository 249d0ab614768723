"""Tests for saved salary profiles."""

import json
import os
import shutil
import tempfile

import pytest

from model.SalaryInput import InvalidSalaryError
from profiles import discover_profiles, load_profile, profile_path


@pytest.fixture
def base_path():
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


def write_profile(base_path, name, data):
    folder = os.path.join(base_path, 'input-parameters', name)
    os.makedirs(folder, exist_ok=True)
    with open(os.path.join(folder, 'profile.json'), 'w') as f:
        if isinstance(data, str):
            f.write(data)
        else:
            json.dump(data, f)


class TestLoadProfile:

    def test_bundled_example(self):
        profile = load_profile('example')
        assert profile.name == 'example'
        assert profile.salary_input.annual_salary == 60000
        assert profile.salary_input.state == 'Texas'
        assert profile.monthly_expenses == 2500
        assert profile.months == 12

    def test_bundled_high_earner_custom_benefits(self):
        profile = load_profile('highearner')
        assert profile.salary_input.pay_frequency == 'biweekly'
        assert [b.name for b in profile.salary_input.custom_benefits] == ['Dental', 'Vision']
        assert profile.months == 6

    def test_defaults(self, base_path):
        write_profile(base_path, 'bare', {"annualSalary": 45000})
        profile = load_profile('bare', base_path)
        assert profile.salary_input.pay_frequency == 'monthly'
        assert profile.salary_input.state == ''
        assert profile.monthly_expenses == 0
        assert profile.months == 12

    def test_missing_profile(self, base_path):
        with pytest.raises(FileNotFoundError):
            load_profile('nobody', base_path)

    def test_missing_salary(self, base_path):
        write_profile(base_path, 'nosalary', {"state": "Ohio"})
        with pytest.raises(InvalidSalaryError):
            load_profile('nosalary', base_path)

    def test_profile_path(self, base_path):
        assert profile_path('abc', base_path) == os.path.join(base_path, 'input-parameters', 'abc', 'profile.json')


class TestDiscoverProfiles:

    def test_skips_broken_profiles(self, base_path):
        write_profile(base_path, 'good', {"annualSalary": 70000, "state": "Ohio"})
        write_profile(base_path, 'nosalary', {"state": "Ohio"})
        write_profile(base_path, 'garbled', "{not json")
        os.makedirs(os.path.join(base_path, 'input-parameters', 'empty-folder'))
        profiles = discover_profiles(base_path)
        assert list(profiles) == ['good']

    def test_sorted_by_name(self, base_path):
        for name in ('zeta', 'alpha', 'mid'):
            write_profile(base_path, name, {"annualSalary": 50000})
        assert list(discover_profiles(base_path)) == ['alpha', 'mid', 'zeta']

    def test_no_profile_directory(self, base_path):
        assert discover_profiles(base_path) == {}

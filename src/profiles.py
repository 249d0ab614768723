"""Saved salary profiles stored as input-parameters/<name>/profile.json."""

import json
import os
from dataclasses import dataclass
from typing import Dict, Optional

from logging_config import get_logger
from model.SalaryInput import SalaryInput

logger = get_logger(__name__)

PROFILE_DIR = 'input-parameters'
PROFILE_FILE = 'profile.json'
DEFAULT_BASE_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..'))


@dataclass(frozen=True)
class SalaryProfile:
    name: str
    salary_input: SalaryInput
    monthly_expenses: float = 0.0
    months: int = 12

    @classmethod
    def from_dict(cls, name: str, data: dict) -> 'SalaryProfile':
        return cls(
            name=name,
            salary_input=SalaryInput.from_dict(data),
            monthly_expenses=data.get('monthlyExpenses', 0.0),
            months=data.get('months', 12),
        )


def profile_path(name: str, base_path: Optional[str] = None) -> str:
    return os.path.join(base_path or DEFAULT_BASE_PATH, PROFILE_DIR, name, PROFILE_FILE)


def load_profile(name: str, base_path: Optional[str] = None) -> SalaryProfile:
    """Load one profile by folder name.

    Raises:
        FileNotFoundError: if the profile folder has no profile.json
        InvalidSalaryError: if the file has no annualSalary
    """
    path = profile_path(name, base_path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Profile file not found: {path}")
    with open(path, 'r') as f:
        data = json.load(f)
    return SalaryProfile.from_dict(name, data)


def discover_profiles(base_path: Optional[str] = None) -> Dict[str, SalaryProfile]:
    """Load every profile under input-parameters, skipping ones that fail to parse."""
    profiles_root = os.path.join(base_path or DEFAULT_BASE_PATH, PROFILE_DIR)
    profiles: Dict[str, SalaryProfile] = {}
    if not os.path.isdir(profiles_root):
        return profiles

    for name in sorted(os.listdir(profiles_root)):
        if not os.path.exists(profile_path(name, base_path)):
            continue
        try:
            profiles[name] = load_profile(name, base_path)
        except (ValueError, KeyError) as e:
            # json.JSONDecodeError and InvalidSalaryError are both ValueErrors
            logger.warning("profile_load_failed", profile=name, error=str(e))
    return profiles

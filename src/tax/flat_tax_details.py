import json
import os
from typing import Optional, Tuple

from logging_config import get_logger
from tax.BenefitsDetails import BenefitsDetails
from tax.MedicareDetails import MedicareDetails
from tax.SocialSecurityDetails import SocialSecurityDetails

logger = get_logger(__name__)

DEFAULT_PATH = os.path.normpath(os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'flat-tax-details.json'))


def load_flat_tax_details(path: Optional[str] = None) -> Tuple[SocialSecurityDetails, MedicareDetails, BenefitsDetails]:
    """Read FICA and benefit estimate rates from reference/flat-tax-details.json.

    Missing keys fall back to the 2024 defaults of each details class.
    """
    ref_path = path or DEFAULT_PATH
    with open(ref_path, 'r') as f:
        data = json.load(f)

    ss = data.get('socialSecurity', {})
    social_security = SocialSecurityDetails(
        employee_portion=ss.get('employeePortion', 0.062),
        wage_base=ss.get('wageBase', 168600)
    )
    medicare = MedicareDetails(medicare_rate=data.get('medicare', 0.0145))
    benefits_data = data.get('benefits', {})
    benefits = BenefitsDetails(
        health_insurance_rate=benefits_data.get('healthInsurance', 0.05),
        retirement_rate=benefits_data.get('retirement', 0.03)
    )
    logger.debug("flat_tax_details_loaded", path=ref_path, tax_year=data.get('taxYear'))
    return social_security, medicare, benefits

"""Field metadata for paycheck and planning result fields.

This module provides descriptions and short names for the fields of the
result records. Short names are used as column headers in rendered tables
and as the search vocabulary of the MCP tools.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class FieldInfo:
    """Display name and help text for one result field."""
    short_name: str  # Table column header
    description: str


FIELD_METADATA: Dict[str, FieldInfo] = {
    # Paycheck
    "gross_pay": FieldInfo("Gross Pay", "Pay for one period before any deduction"),
    "federal_tax": FieldInfo("Federal Tax", "Federal income tax prorated to the period"),
    "state_tax": FieldInfo("State Tax", "Flat-rate state income tax for the period"),
    "fica": FieldInfo("FICA", "Social Security and Medicare payroll tax"),
    "total_taxes": FieldInfo("Total Taxes", "Federal + state + FICA"),
    "health_insurance": FieldInfo("Health Insurance", "Estimated health insurance premium"),
    "retirement": FieldInfo("Retirement", "Estimated 401(k) contribution"),
    "other_benefits": FieldInfo("Other Benefits", "Other benefit deductions"),
    "total_benefits": FieldInfo("Total Benefits", "Health insurance + retirement + other"),
    "take_home_pay": FieldInfo("Take Home", "Gross pay minus taxes and benefits"),

    # Monthly projections
    "month": FieldInfo("Month", "Month number counted from the start month"),
    "month_name": FieldInfo("Name", "Calendar month abbreviation"),
    "net_pay": FieldInfo("Net Pay", "Take-home pay for the month"),
    "taxes": FieldInfo("Taxes", "Total taxes for the month"),
    "benefits": FieldInfo("Benefits", "Total benefit deductions for the month"),
    "cumulative_net": FieldInfo("Cumulative Net", "Running total of monthly net pay"),

    # Annual earnings
    "annual_gross": FieldInfo("Annual Gross", "Annual salary before deductions"),
    "annual_net": FieldInfo("Annual Net", "Annualized take-home pay"),
    "annual_taxes": FieldInfo("Annual Taxes", "Annualized taxes"),
    "annual_benefits": FieldInfo("Annual Benefits", "Annualized benefit deductions"),
    "tax_rate": FieldInfo("Tax Rate", "Annual taxes as a percentage of gross"),
    "take_home_rate": FieldInfo("Take Home Rate", "Annual net as a percentage of gross"),

    # Tradeoffs
    "scenario": FieldInfo("Scenario", "Lifestyle scenario name"),
    "monthly_net": FieldInfo("Monthly Net", "Monthly money left under the scenario"),
    "monthly_savings": FieldInfo("Monthly Savings", "Difference from the current monthly net"),

    # Expense accumulation
    "total_expenses": FieldInfo("Total Expenses", "Expenses accumulated so far"),
    "remaining_balance": FieldInfo("Balance", "Savings after expenses (never below zero)"),
    "savings_rate": FieldInfo("Savings Rate", "Share of monthly net left after expenses"),
}


def get_field_info(field_name: str) -> FieldInfo | None:
    return FIELD_METADATA.get(field_name)


def get_short_name(field_name: str) -> str:
    """Column header for a result field; unknown fields keep their own name."""
    info = get_field_info(field_name)
    return info.short_name if info else field_name


def get_description(field_name: str) -> str:
    info = get_field_info(field_name)
    return info.description if info else ""


def find_fields(query: str) -> Dict[str, FieldInfo]:
    """Return fields whose name, short name or description mention every word of query."""
    words = [w for w in query.lower().replace('-', ' ').split() if w]
    matches = {}
    for name, info in FIELD_METADATA.items():
        haystack = f"{name.replace('_', ' ')} {info.short_name} {info.description}".lower()
        if words and all(w in haystack for w in words):
            matches[name] = info
    return matches


def wrap_header(text: str, max_width: int) -> list[str]:
    """Split a column header on spaces so each line fits in max_width.

    A single word longer than max_width stays on its own line.
    """
    lines: list[str] = []
    for word in text.split():
        if lines and len(lines[-1]) + 1 + len(word) <= max_width:
            lines[-1] = f"{lines[-1]} {word}"
        else:
            lines.append(word)
    return lines or [text]

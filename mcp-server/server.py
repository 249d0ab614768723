#!/usr/bin/env python3
"""MCP Server for Paycheck Planner.

This server exposes the paycheck estimator and planning calculations as MCP
tools, allowing AI assistants to answer questions about take-home pay,
projections and lifestyle tradeoffs.
"""

import os
import sys
import json
import asyncio
from typing import Any

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from logging_config import configure_logging, get_logger
from tools import MultiProfileTools

logger = get_logger(__name__)

# Create the MCP server
server = Server("paycheck-planner")

# Global tools instance (initialized on first use)
tools: MultiProfileTools | None = None


def get_tools() -> MultiProfileTools:
    """Get or initialize the tools instance."""
    global tools
    if tools is None:
        # Default profile can be set via PAYCHECK_PLANNER_PROFILE env var
        default_profile = os.environ.get('PAYCHECK_PLANNER_PROFILE')
        base_path = os.path.join(os.path.dirname(__file__), '..')
        tools = MultiProfileTools(base_path, default_profile)
    return tools


# Common salary parameters: either a saved profile or inline salary data
SALARY_PARAMS = {
    "profile": {
        "type": "string",
        "description": "Saved profile name (folder in input-parameters). Ignored when annualSalary is given. Use list_profiles to see available profiles."
    },
    "annualSalary": {
        "type": "number",
        "description": "Annual salary before deductions. When given, the inline salary fields are used instead of a profile."
    },
    "payFrequency": {
        "type": "string",
        "enum": ["weekly", "biweekly", "semimonthly", "monthly", "other"],
        "description": "How often the salary is paid (default monthly)"
    },
    "state": {
        "type": "string",
        "description": "Full US state name, e.g. 'Texas'. Unknown names use a 5% flat rate."
    },
    "payPeriodsPerYear": {
        "type": "number",
        "description": "Custom number of paychecks per year; overrides payFrequency"
    }
}

MONTH_PARAMS = {
    "months": {
        "type": "integer",
        "description": "Number of months to project (default: profile value or 12)"
    },
    "startMonth": {
        "type": "integer",
        "description": "Calendar month (1-12) of the first projected month; defaults to the current month"
    }
}


def salary_schema(extra: dict | None = None, required: list | None = None) -> dict:
    properties = dict(SALARY_PARAMS)
    properties.update(extra or {})
    return {
        "type": "object",
        "properties": properties,
        "required": required or []
    }


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available paycheck planning tools."""
    return [
        Tool(
            name="list_profiles",
            description="List all saved salary profiles with their salary, pay frequency, state and monthly expenses.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="reload_profiles",
            description="Reload all salary profiles from disk. Use this after adding, modifying, or removing profile.json files.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="estimate_paycheck",
            description="Estimate a single paycheck: gross pay, federal, state and FICA taxes, health and retirement deductions, and take-home pay.",
            inputSchema=salary_schema()
        ),
        Tool(
            name="get_monthly_projections",
            description="Project monthly gross pay, taxes, benefits, net pay and cumulative net pay for a number of months.",
            inputSchema=salary_schema(MONTH_PARAMS)
        ),
        Tool(
            name="get_annual_earnings",
            description="Get annualized gross, net, taxes and benefits with the overall tax rate and take-home rate.",
            inputSchema=salary_schema()
        ),
        Tool(
            name="get_tradeoff_comparisons",
            description="Compare current monthly take-home pay with lifestyle scenarios such as living with roommates, public transit or cooking at home.",
            inputSchema=salary_schema()
        ),
        Tool(
            name="get_expense_accumulation",
            description="Show how savings build up month by month after a recurring monthly expense, with the savings rate.",
            inputSchema=salary_schema(dict(MONTH_PARAMS, monthlyExpenses={
                "type": "number",
                "description": "Recurring monthly expenses (default: profile value)"
            }))
        ),
        Tool(
            name="get_tradeoff_cards",
            description="List two-option lifestyle tradeoff cards with monthly cost impacts scaled to the salary.",
            inputSchema=salary_schema({
                "category": {
                    "type": "string",
                    "description": "Optional: only cards in this category (housing, savings, debt, lifestyle)"
                },
                "scaled": {
                    "type": "boolean",
                    "description": "Scale impacts to the salary (default true)"
                }
            })
        ),
        Tool(
            name="search_paycheck_data",
            description="Search for specific paycheck or annual figures by name, e.g. 'state tax', 'take home', 'annual net'.",
            inputSchema=salary_schema({
                "query": {
                    "type": "string",
                    "description": "Free-text description of the figure to look up"
                }
            }, required=["query"])
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        pp_tools = get_tools()
        arguments = arguments or {}

        if name == "list_profiles":
            result = pp_tools.list_profiles()
        elif name == "reload_profiles":
            result = pp_tools.reload_profiles()
        elif name in pp_tools.tool_names():
            result = getattr(pp_tools, name)(arguments)
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, default=str)
        )]
    except Exception as e:
        logger.warning("tool_call_failed", tool=name, error=str(e))
        return [TextContent(
            type="text",
            text=json.dumps({"error": str(e)}, indent=2)
        )]


async def main():
    """Run the MCP server."""
    configure_logging()
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())

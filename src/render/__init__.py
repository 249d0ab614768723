"""Render module for paycheck and planning output display."""

from render.renderers import (
    BaseRenderer,
    PaycheckRenderer,
    ProjectionRenderer,
    AnnualSummaryRenderer,
    TradeoffRenderer,
    ExpenseRenderer,
    TradeoffCardsRenderer,
    AllRenderer,
    RENDERER_REGISTRY,
)

__all__ = [
    'BaseRenderer',
    'PaycheckRenderer',
    'ProjectionRenderer',
    'AnnualSummaryRenderer',
    'TradeoffRenderer',
    'ExpenseRenderer',
    'TradeoffCardsRenderer',
    'AllRenderer',
    'RENDERER_REGISTRY',
]

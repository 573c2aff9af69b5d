"""Deep research: template query planning and sequential execution."""

from .machine import ResearchMachine
from .models import ResearchEntry, ResearchReport
from .planner import BASE_TEMPLATES, COMPREHENSIVE_TEMPLATES, plan_queries

__all__ = [
    "BASE_TEMPLATES",
    "COMPREHENSIVE_TEMPLATES",
    "ResearchEntry",
    "ResearchMachine",
    "ResearchReport",
    "plan_queries",
]

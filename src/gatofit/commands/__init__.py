"""CLI commands for gatofit."""

from .analyze import analyze
from .chart import chart, summary
from .entries import add, history, remove
from .init import init
from .serve import serve

__all__ = [
    "add",
    "analyze",
    "chart",
    "history",
    "init",
    "remove",
    "serve",
    "summary",
]

"""
Monke, a small personal expense tracker for the terminal.

Expenses are stored in a local SQLite file and shown as tables, totals
and per-category breakdowns.
"""

__version__ = "0.3.0"

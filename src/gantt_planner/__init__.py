"""Spreadsheet-style Gantt project planner with LLM-assisted task generation."""

__version__ = "0.1.0"

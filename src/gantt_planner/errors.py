# src/gantt_planner/errors.py

from __future__ import annotations


class PlannerError(Exception):
    """Base class for planner errors that callers are expected to handle."""


class TaskValidationError(PlannerError, ValueError):
    """A task record (or a field edit) does not match the Task shape."""


class StorageError(PlannerError):
    """Persisted task list could not be read or written."""


class GenerationError(PlannerError):
    """The generative population call produced no usable task list."""

"""
task_manager

Top-level package for the Task Manager REST service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"

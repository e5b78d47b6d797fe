"""
task_manager.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
- Error reporting (Sentry) setup.
"""

# Package marker.

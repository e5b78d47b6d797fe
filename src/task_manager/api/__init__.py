"""
task_manager.api

API package for the Task Manager service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and exception translation.
"""

# Package marker.

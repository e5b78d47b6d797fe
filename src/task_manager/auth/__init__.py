"""
task_manager.auth

Authentication/authorization package.

Responsibilities:
- Password hashing.
- JWT issuing and validation.
- FastAPI auth dependencies (Principal, current user, ownership checks).
"""

# Package marker.

"""
task_manager.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, repositories and the startup data initializer.
"""

# Package marker.

"""
task_manager.schemas

Request/response models (Pydantic) and their ORM mappers.

Responsibilities:
- Validate inbound JSON payloads; JSON field names are camelCase where the API uses them.
- Map ORM entities to response DTOs (`from_model`) without exposing secrets.
"""

# Package marker.

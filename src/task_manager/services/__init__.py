"""
task_manager.services

Service layer: business rules, transaction boundaries and domain logging.
"""

# Package marker.

"""
Core app - Shared abstractions and utilities.

This app provides:
- Task execution (TaskService) over local, Celery or Lambda/SQS backends
- Service error types and their translation into API responses

These abstractions allow switching between:
- Local development (sync execution)
- AWS Lambda + SQS (production)
- Celery + Redis (fallback)
"""

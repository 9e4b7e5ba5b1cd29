"""
ASGI config for Two Cents Club.

Serves the API through Uvicorn/Daphne locally and through Mangum on AWS Lambda.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Initialize Django at import time so Lambda pays the cost on container start,
# not on the first request.
from django.core.asgi import get_asgi_application

application = get_asgi_application()


def get_lambda_handler():
    """Return a Mangum-wrapped handler; lambda_handlers.api_handler is the Lambda entry point."""
    from mangum import Mangum
    return Mangum(application, lifespan="off")

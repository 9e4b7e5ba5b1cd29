"""
Lambda Handlers - Entry points for AWS Lambda functions.

1. SQS task processing - consumes messages queued by LambdaTaskService
2. Django API (via Mangum) - HTTP requests through API Gateway
3. Scheduled events - EventBridge triggers
"""

import os
import json
import logging

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

import django
django.setup()

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def sqs_task_handler(event, context):
    """
    Process task messages from the queue.

    Event structure:
    {
        "Records": [
            {"body": "{\"task_id\": \"...\", \"task_name\": \"...\", \"payload\": {...}}"}
        ]
    }

    A failing message is re-raised so SQS retries it and eventually moves it
    to the dead-letter queue.
    """
    from apps.core.backends.local_backend import TASK_HANDLERS

    processed = 0
    skipped = 0

    for record in event.get('Records', []):
        message = json.loads(record['body'])
        task_id = message.get('task_id', 'unknown')
        task_name = message['task_name']
        payload = message.get('payload', {})

        handler = TASK_HANDLERS.get(task_name)
        if handler is None:
            logger.error(f"No handler for task: {task_name} (id={task_id})")
            skipped += 1
            continue

        logger.info(f"Processing task {task_name} (id={task_id})")
        try:
            result = handler(**payload)
        except Exception as e:
            logger.exception(f"Task {task_name} (id={task_id}) failed: {e}")
            raise
        logger.info(f"Task {task_name} completed: {result}")
        processed += 1

    return {
        'statusCode': 200,
        'body': json.dumps({'processed': processed, 'skipped': skipped}),
    }


def scheduled_purge_expired_otps(event, context):
    """
    EventBridge scheduled handler: delete expired and consumed sign-in codes.

    Schedule: daily at 03:00
    """
    from apps.identity.otp_service import purge_expired_otps

    logger.info("Running scheduled purge_expired_otps")
    count = purge_expired_otps()

    return {
        'statusCode': 200,
        'body': json.dumps({'purged_count': count}),
    }


# =============================================================================
# Django API Handler (Mangum)
# =============================================================================

_asgi_handler = None


def api_handler(event, context):
    """HTTP requests via API Gateway, served by Django's ASGI app wrapped in Mangum."""
    global _asgi_handler

    if _asgi_handler is None:
        from config.asgi import get_lambda_handler
        _asgi_handler = get_lambda_handler()

    return _asgi_handler(event, context)

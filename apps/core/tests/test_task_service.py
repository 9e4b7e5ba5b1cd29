"""
Tests for the task service facade, its backends and the SQS Lambda consumer.
"""
import json
from unittest import mock

from django.core import mail
from django.test import TestCase, override_settings

from apps.core.task_service import TaskService
from apps.core.backends.lambda_backend import LambdaTaskService
from apps.identity.models import EmailOTP


class LocalBackendTest(TestCase):

    @override_settings(TASK_BACKEND='local')
    def test_send_otp_email_runs_immediately(self):
        task_id = TaskService.send_otp_email(email="member@example.com", code="123456")
        self.assertTrue(task_id)
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("123456", mail.outbox[0].body)

    @override_settings(TASK_BACKEND='carrier-pigeon')
    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            TaskService.purge_expired_otps()


class CeleryBackendTest(TestCase):

    @override_settings(TASK_BACKEND='celery')
    def test_queues_mapped_task(self):
        task = mock.Mock()
        with mock.patch('apps.core.backends.celery_backend._get_celery_task', return_value=task) as lookup:
            task_id = TaskService.send_otp_email(email="member@example.com", code="654321")

        lookup.assert_called_once_with("send_otp_email")
        task.apply_async.assert_called_once_with(
            kwargs={"email": "member@example.com", "code": "654321"},
            task_id=task_id,
        )
        self.assertEqual(mail.outbox, [])


class LambdaBackendTest(TestCase):

    def test_sends_sqs_message(self):
        sqs = mock.Mock()
        sqs.send_message.return_value = {'MessageId': 'msg-1'}
        with mock.patch.dict('os.environ', {'TASK_QUEUE_URL': 'https://sqs.example/queue'}):
            backend = LambdaTaskService(sqs_client=sqs)
            task_id = backend.send_task("purge_expired_otps", {})

        kwargs = sqs.send_message.call_args.kwargs
        self.assertEqual(kwargs['QueueUrl'], 'https://sqs.example/queue')
        body = json.loads(kwargs['MessageBody'])
        self.assertEqual(body, {"task_id": task_id, "task_name": "purge_expired_otps", "payload": {}})

    def test_requires_queue_url(self):
        with mock.patch.dict('os.environ', {}, clear=True):
            backend = LambdaTaskService(sqs_client=mock.Mock())
            with self.assertRaises(RuntimeError):
                backend.send_task("purge_expired_otps", {})


class SqsTaskHandlerTest(TestCase):

    def event(self, *messages):
        return {'Records': [{'body': json.dumps(message)} for message in messages]}

    def test_dispatches_to_task_handlers(self):
        from lambda_handlers import sqs_task_handler

        result = sqs_task_handler(self.event(
            {"task_id": "1", "task_name": "send_otp_email",
             "payload": {"email": "member@example.com", "code": "111222"}},
            {"task_id": "2", "task_name": "no_such_task", "payload": {}},
        ), None)

        self.assertEqual(json.loads(result['body']), {'processed': 1, 'skipped': 1})
        self.assertEqual(len(mail.outbox), 1)

    def test_scheduled_purge(self):
        from django.utils import timezone
        from lambda_handlers import scheduled_purge_expired_otps

        EmailOTP.objects.create(email="a@example.com", code_hash="x", expires_at=timezone.now())
        result = scheduled_purge_expired_otps({}, None)
        self.assertEqual(json.loads(result['body']), {'purged_count': 1})


class ApiHandlerTest(TestCase):

    def setUp(self):
        import lambda_handlers
        self.addCleanup(setattr, lambda_handlers, '_asgi_handler', lambda_handlers._asgi_handler)
        lambda_handlers._asgi_handler = None

    def test_wraps_asgi_app_once(self):
        from lambda_handlers import api_handler

        handler = mock.Mock(return_value={'statusCode': 200})
        with mock.patch('config.asgi.get_lambda_handler', return_value=handler) as factory:
            api_handler({'path': '/api/health'}, None)
            result = api_handler({'path': '/api/health'}, None)

        self.assertEqual(result, {'statusCode': 200})
        factory.assert_called_once_with()
        handler.assert_called_with({'path': '/api/health'}, None)
        self.assertEqual(handler.call_count, 2)

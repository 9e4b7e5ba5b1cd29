"""
Celery configuration for Two Cents Club.
"""
import os
from celery import Celery
from celery.schedules import crontab

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('config')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()

# Celery Beat Schedule
app.conf.beat_schedule = {
    'purge-expired-otps': {
        'task': 'apps.identity.tasks.purge_expired_otps',
        'schedule': crontab(hour='3', minute='0'),  # Daily, off-peak
    },
}

import uuid
from django.db import models


class ClassLevel(models.TextChoices):
    BEGINNER = 'Beginner', 'Beginner'
    INTERMEDIATE = 'Intermediate', 'Intermediate'
    ADVANCED = 'Advanced', 'Advanced'


class LocationTag(models.TextChoices):
    DTLA = 'DTLA', 'Downtown LA'


class LearningClass(models.Model):
    """
    A multi-week class taught by a member.

    Meets once a week between start_date and end_date; `weeks` is the number
    of scheduled sessions.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    host_id = models.UUIDField(null=True, blank=True, db_index=True)  # No FK - modular boundary

    title = models.CharField(max_length=200)
    image_url = models.URLField(max_length=500, null=True, blank=True)
    level = models.CharField(max_length=20, choices=ClassLevel.choices)
    weeks = models.PositiveIntegerField()
    total_spots = models.PositiveIntegerField()

    # Schedule
    start_date = models.DateField()
    end_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    meeting_days = models.CharField(max_length=100)
    schedule_summary = models.CharField(max_length=200)

    # Location
    location_tag = models.CharField(max_length=20, choices=LocationTag.choices, default=LocationTag.DTLA)
    location_details = models.CharField(max_length=255)

    requirements = models.TextField(null=True, blank=True)
    host_blurb = models.TextField(null=True, blank=True)
    description = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'classes'
        ordering = ['start_date', 'start_time']
        verbose_name = "Class"
        verbose_name_plural = "Classes"

    def __str__(self):
        return f"{self.title} ({self.start_date} - {self.end_date})"


class ClassRegistration(models.Model):
    """A member's seat in a class. One per member per class."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    learning_class = models.ForeignKey(
        LearningClass,
        on_delete=models.CASCADE,
        related_name='registrations',
    )
    user_id = models.UUIDField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'class_registrations'
        ordering = ['created_at']
        unique_together = ['learning_class', 'user_id']

    def __str__(self):
        return f"{self.user_id} in {self.learning_class_id}"

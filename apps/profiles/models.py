from django.db import models


class Profile(models.Model):
    """
    What other members see about a member, plus their onboarding answers.

    The primary key is the member's user id (no FK - modular boundary).
    """
    id = models.UUIDField(primary_key=True, editable=False)
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    username = models.CharField(max_length=50, unique=True, null=True, blank=True)

    knowledge = models.JSONField(default=list, blank=True, help_text="Topics the member can teach")
    curious_about = models.JSONField(default=list, blank=True, help_text="Topics the member wants to learn")
    personality_answers = models.JSONField(default=list, blank=True, help_text="Option index per personality question")
    want_to_learn_role = models.CharField(max_length=50, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['first_name', 'last_name']

    def __str__(self):
        return self.username or f"{self.first_name} {self.last_name}".strip() or str(self.id)

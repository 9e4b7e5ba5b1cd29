from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.classes.models import LearningClass, ClassRegistration
from apps.identity.models import User


class SeedClubCommandTest(TestCase):

    def test_seed_is_repeatable(self):
        call_command('seed_club', stdout=StringIO())
        call_command('seed_club', stdout=StringIO())

        self.assertEqual(User.objects.filter(onboarded=True).count(), 2)
        self.assertEqual(LearningClass.objects.count(), 4)
        self.assertEqual(ClassRegistration.objects.count(), 2)

from datetime import time, timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from apps.classes.models import LearningClass, ClassRegistration, ClassLevel, LocationTag
from apps.classes.progress import today
from apps.profiles.models import Profile

User = get_user_model()

MEMBERS = [
    {
        'email': "host@example.com",
        'first_name': "Rosa",
        'last_name': "Alvarez",
        'username': "rosa",
        'knowledge': ["Candlemaking", "Flower Arranging"],
        'curious_about': ["Dance"],
    },
    {
        'email': "member@example.com",
        'first_name': "Sam",
        'last_name': "Lee",
        'username': "samlee",
        'knowledge': ["Crosswords"],
        'curious_about': ["Candlemaking", "Film"],
    },
]

# (title, level, weeks, spots, start offset in days from today, meeting days, time, description)
CLASSES = [
    ("Soy Candles from Scratch", ClassLevel.BEGINNER, 4, 8, 10, "Mondays", (18, 0, 19, 30),
     "Pour, scent and wick your own soy candles."),
    ("Seasonal Bouquets", ClassLevel.BEGINNER, 3, 6, -7, "Saturdays", (10, 0, 11, 30),
     "Build arrangements from whatever the flower market has this week."),
    ("Writing Short Fiction", ClassLevel.INTERMEDIATE, 6, 12, 21, "Wednesdays", (19, 0, 20, 30),
     "Draft and workshop a short story over six weeks."),
    ("Physics of Everyday Things", ClassLevel.ADVANCED, 2, 10, -60, "Thursdays", (18, 30, 20, 0),
     "Why bikes stay upright, and other questions."),
]


class Command(BaseCommand):
    help = 'Seeds the database with sample members and classes.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing classes and non-staff members before seeding',
        )

    def handle(self, *args, **options):
        if options['clean']:
            self.stdout.write(self.style.WARNING('Cleaning database...'))
            self._clean_database()
            self.stdout.write(self.style.SUCCESS('Database cleaned.'))

        members = self._seed_members()
        self._seed_classes(host=members[0], member=members[1])

        self.stdout.write(self.style.SUCCESS('Seeding completed successfully.'))

    def _clean_database(self):
        LearningClass.objects.all().delete()
        Profile.objects.all().delete()
        User.objects.exclude(is_staff=True).delete()

    def _seed_members(self):
        self.stdout.write('Seeding Members...')
        members = []
        for data in MEMBERS:
            user, created = User.objects.get_or_create(
                email=data['email'],
                defaults={
                    'username': data['email'],
                    'first_name': data['first_name'],
                    'last_name': data['last_name'],
                    'onboarded': True,
                },
            )
            if created:
                user.set_unusable_password()
                user.save()
                self.stdout.write(f" - Created {user.email}")

            Profile.objects.update_or_create(
                id=user.id,
                defaults={
                    'first_name': data['first_name'],
                    'last_name': data['last_name'],
                    'username': data['username'],
                    'knowledge': data['knowledge'],
                    'curious_about': data['curious_about'],
                    'personality_answers': [0],
                },
            )
            members.append(user)
        return members

    def _seed_classes(self, host, member):
        self.stdout.write('Seeding Classes...')
        start_day = today()

        for title, level, weeks, spots, offset, days, hours, description in CLASSES:
            start = start_day + timedelta(days=offset)
            start_hour, start_minute, end_hour, end_minute = hours
            record, created = LearningClass.objects.get_or_create(
                title=title,
                host_id=host.id,
                defaults={
                    'level': level,
                    'weeks': weeks,
                    'total_spots': spots,
                    'start_date': start,
                    'end_date': start + timedelta(weeks=weeks - 1),
                    'start_time': time(start_hour, start_minute),
                    'end_time': time(end_hour, end_minute),
                    'meeting_days': days,
                    'schedule_summary': f"{days}, {weeks} weeks",
                    'location_tag': LocationTag.DTLA,
                    'location_details': "Downtown LA (details sent after registering)",
                    'host_blurb': f"{host.first_name} has been teaching neighbors for years.",
                    'description': description,
                },
            )
            if created:
                self.stdout.write(f" - Created class: {title}")

            # Sample member takes every class that has already started
            if record.start_date <= start_day:
                ClassRegistration.objects.get_or_create(learning_class=record, user_id=member.id)

        self.stdout.write(f" - {LearningClass.objects.count()} classes in total")

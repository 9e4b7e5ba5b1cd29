"""
Tests for onboarding and profile services.
"""
from uuid import uuid4

from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.core.exceptions import ConflictError
from apps.identity.models import User
from apps.profiles import services
from apps.profiles.dtos import OnboardingIn, ProfileUpdateIn
from apps.profiles.models import Profile


def make_user(email=None, **fields):
    email = email or f"member_{uuid4().hex[:8]}@test.com"
    return User.objects.create(username=email, email=email, **fields)


class OnboardingTest(TestCase):

    def setUp(self):
        self.user = make_user()

    def test_complete_onboarding(self):
        profile = services.complete_onboarding(self.user, OnboardingIn(
            first_name=" Octavia ",
            last_name="Butler",
            curious_about=["Dance", "Astrology", "Dance", "Film"],
            knowledge=["Fiction Writing"],
            personality_answers=[2],
        ))

        self.assertEqual(profile.first_name, "Octavia")
        self.assertEqual(profile.curious_about, ["Dance", "Film"])
        self.assertEqual(profile.knowledge, ["Fiction Writing"])

        self.user.refresh_from_db()
        self.assertTrue(self.user.onboarded)
        self.assertEqual(self.user.first_name, "Octavia")
        self.assertEqual(Profile.objects.get(id=self.user.id).personality_answers, [2])

    def test_names_required(self):
        with self.assertRaisesMessage(ValidationError, "Name cannot be empty."):
            services.complete_onboarding(self.user, OnboardingIn(
                first_name="Octavia", last_name=" ", personality_answers=[0],
            ))
        self.user.refresh_from_db()
        self.assertFalse(self.user.onboarded)

    def test_every_question_answered(self):
        with self.assertRaisesMessage(ValidationError, "Answer every question to finish."):
            services.complete_onboarding(self.user, OnboardingIn(
                first_name="Octavia", last_name="Butler", personality_answers=[],
            ))

    def test_answer_must_be_an_option(self):
        with self.assertRaisesMessage(ValidationError, "Select a valid answer."):
            services.complete_onboarding(self.user, OnboardingIn(
                first_name="Octavia", last_name="Butler", personality_answers=[4],
            ))

    def test_onboarding_twice_updates_profile(self):
        form = dict(first_name="Octavia", last_name="Butler", personality_answers=[0])
        services.complete_onboarding(self.user, OnboardingIn(**form))
        services.complete_onboarding(self.user, OnboardingIn(**{**form, 'first_name': "Tavi"}))
        self.assertEqual(Profile.objects.count(), 1)
        self.assertEqual(Profile.objects.get().first_name, "Tavi")


class UpdateProfileTest(TestCase):

    def setUp(self):
        self.user = make_user(onboarded=True)
        Profile.objects.create(id=self.user.id, first_name="Old", last_name="Name", username="old")

    def test_update_profile(self):
        profile = services.update_profile(self.user, ProfileUpdateIn(
            first_name="Mae",
            last_name="Jemison",
            username="  ",
            knowledge=["Physics", "Physics", "Rocketry"],
            want_to_learn_role="Hands-on Builder",
        ))
        self.assertIsNone(profile.username)
        self.assertEqual(profile.knowledge, ["Physics"])
        self.assertEqual(profile.want_to_learn_role, "Hands-on Builder")

        self.user.refresh_from_db()
        self.assertEqual(self.user.last_name, "Jemison")

    def test_names_required(self):
        with self.assertRaisesMessage(ValidationError, "Name cannot be empty."):
            services.update_profile(self.user, ProfileUpdateIn(first_name="", last_name="Jemison"))

    def test_role_must_be_known(self):
        with self.assertRaisesMessage(ValidationError, "Select a valid learning role."):
            services.update_profile(self.user, ProfileUpdateIn(
                first_name="Mae", last_name="Jemison", want_to_learn_role="Astronaut",
            ))

    def test_blank_role_is_allowed(self):
        profile = services.update_profile(self.user, ProfileUpdateIn(first_name="Mae", last_name="Jemison"))
        self.assertIsNone(profile.want_to_learn_role)

    def test_duplicate_username(self):
        other = make_user()
        Profile.objects.create(id=other.id, first_name="Taken", last_name="User", username="mae")
        with self.assertRaisesMessage(ConflictError, "That username is already taken."):
            services.update_profile(self.user, ProfileUpdateIn(
                first_name="Mae", last_name="Jemison", username="mae",
            ))
        self.assertEqual(Profile.objects.get(id=self.user.id).username, "old")


class ResolveFirstNameTest(TestCase):

    def test_prefers_profile_name(self):
        user = make_user(first_name="Account")
        profile = services.get_profile_dto(
            Profile.objects.create(id=user.id, first_name=" Profile ", last_name="X").id
        )
        self.assertEqual(services.resolve_first_name(user, profile), "Profile")

    def test_falls_back_to_account_name(self):
        user = make_user(first_name="Account")
        self.assertEqual(services.resolve_first_name(user), "Account")

    def test_falls_back_to_email(self):
        user = make_user(email="stargazer@example.com")
        self.assertEqual(services.resolve_first_name(user), "stargazer")

    def test_friend_as_last_resort(self):
        user = User(username="nobody", email="")
        self.assertEqual(services.resolve_first_name(user), "Friend")


class ProfileFormTest(TestCase):

    def test_form_without_profile_uses_account(self):
        user = make_user(first_name="Ada", last_name="Lovelace")
        form = services.get_profile_form(user)
        self.assertEqual(form.first_name, "Ada")
        self.assertEqual(form.last_name, "Lovelace")
        self.assertIsNone(form.username)
        self.assertEqual(form.knowledge, [])

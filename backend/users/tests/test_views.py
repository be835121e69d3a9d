# users/tests/test_views.py

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from users.models import UserProfile

from .factories import UserProfileFactory, provider_token


class BaseUserAPITestCase(APITestCase):
    """Base test case authenticating as one provider identity."""

    identity_id = "3c2b1a09-8f7e-4d6c-b5a4-938271605f4e"

    def setUp(self):
        token = provider_token(self.identity_id, email="ana@example.com", name="Ana Souza")
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        self.me_url = reverse("users:me")
        self.preferences_url = reverse("users:preferences")


class CurrentUserViewTests(BaseUserAPITestCase):
    def test_profile_is_created_from_token_claims(self):
        response = self.client.get(self.me_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.json()["data"]
        self.assertEqual(data["id"], self.identity_id)
        self.assertEqual(data["name"], "Ana Souza")
        self.assertEqual(data["email"], "ana@example.com")
        self.assertEqual(
            data["preferences"], {"currency": "BRL", "theme": "LIGHT", "language": "en"}
        )
        self.assertTrue(UserProfile.objects.filter(pk=self.identity_id).exists())

    def test_existing_profile_is_returned(self):
        UserProfileFactory(id=self.identity_id, name="Ana S.", currency="EUR")

        response = self.client.get(self.me_url)

        data = response.json()["data"]
        self.assertEqual(data["name"], "Ana S.")
        self.assertEqual(data["preferences"]["currency"], "EUR")
        self.assertEqual(UserProfile.objects.count(), 1)

    def test_update_name(self):
        response = self.client.put(self.me_url, {"name": "  Ana Maria  "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["message"], "Profile updated successfully")
        self.assertEqual(body["data"]["name"], "Ana Maria")

    def test_blank_name_is_rejected(self):
        response = self.client.put(self.me_url, {"name": "   "}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.json()["errors"])

    def test_invalid_email_is_rejected(self):
        response = self.client.put(self.me_url, {"email": "not-an-email"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_id_cannot_be_changed(self):
        response = self.client.put(self.me_url, {"id": "someone-else"}, format="json")

        self.assertEqual(response.json()["data"]["id"], self.identity_id)
        self.assertFalse(UserProfile.objects.filter(pk="someone-else").exists())


class PreferencesViewTests(BaseUserAPITestCase):
    def test_update_preferences(self):
        response = self.client.put(
            self.preferences_url,
            {"currency": "USD", "theme": "DARK", "language": "pt-br"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["message"], "Preferences updated successfully")
        self.assertEqual(
            body["data"]["preferences"],
            {"currency": "USD", "theme": "DARK", "language": "pt-br"},
        )

    def test_partial_update_keeps_other_preferences(self):
        UserProfileFactory(id=self.identity_id, currency="PLN")

        response = self.client.put(self.preferences_url, {"theme": "DARK"}, format="json")

        preferences = response.json()["data"]["preferences"]
        self.assertEqual(preferences["currency"], "PLN")
        self.assertEqual(preferences["theme"], "DARK")

    def test_unsupported_values_are_rejected(self):
        for payload in ({"currency": "XYZ"}, {"theme": "BLUE"}, {"language": "klingon"}):
            with self.subTest(payload=payload):
                response = self.client.put(self.preferences_url, payload, format="json")

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.json()["message"], "Validation failed")

    def test_requires_authentication(self):
        self.client.credentials()

        response = self.client.put(self.preferences_url, {"theme": "DARK"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

# accounts/tests/test_auth.py

from django.test import TestCase
from rest_framework.test import APIClient

from accounts.models import Account


class RegisterLoginTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_register_creates_account_and_returns_redirect(self):
        resp = self.client.post(
            "/api/register",
            {"name": "Jane Doe", "email": "jane@example.com", "password": "secret1", "role": "user"},
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["redirect"], "/auth?section=login&role=user")
        self.assertEqual(resp.data["user"]["email"], "jane@example.com")

        account = Account.objects.get(email="jane@example.com")
        self.assertEqual(account.role, Account.ROLE_USER)
        # Stored hashed, never in clear text
        self.assertNotEqual(account.password, "secret1")
        self.assertTrue(account.check_password("secret1"))

    def test_register_rejects_existing_email(self):
        Account.objects.create_user(email="jane@example.com", password="secret1", name="Jane")
        resp = self.client.post(
            "/api/register",
            {"name": "Other Jane", "email": "jane@example.com", "password": "secret2", "role": "user"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("User already exists", str(resp.data["email"]))

    def test_register_validates_role_and_password(self):
        resp = self.client.post(
            "/api/register",
            {"name": "Jane", "email": "jane@example.com", "password": "123", "role": "owner"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("password", resp.data)
        self.assertIn("role", resp.data)
        self.assertFalse(Account.objects.exists())

    def test_login_redirect_depends_on_role(self):
        Account.objects.create_user(email="m@example.com", password="secret1", name="M", role=Account.ROLE_ADMIN)
        Account.objects.create_user(email="u@example.com", password="secret1", name="U", role=Account.ROLE_USER)

        resp = self.client.post("/api/login", {"email": "m@example.com", "password": "secret1"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["redirect"], "/manager-dashboard")

        resp = APIClient().post("/api/login", {"email": "u@example.com", "password": "secret1"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["redirect"], "/user-dashboard")

    def test_login_with_mixed_case_email_used_at_registration(self):
        resp = self.client.post(
            "/api/register",
            {"name": "Jane", "email": "Jane@Example.COM", "password": "secret1", "role": "user"},
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertTrue(Account.objects.filter(email="Jane@example.com").exists())

        resp = APIClient().post(
            "/api/login", {"email": "Jane@Example.COM", "password": "secret1"}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["user"]["email"], "Jane@example.com")

    def test_login_with_wrong_password(self):
        Account.objects.create_user(email="u@example.com", password="secret1", name="U")
        resp = self.client.post("/api/login", {"email": "u@example.com", "password": "nope123"}, format="json")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.data["detail"], "Invalid credentials")

    def test_logout(self):
        account = Account.objects.create_user(email="u@example.com", password="secret1", name="U")
        self.client.force_authenticate(account)
        resp = self.client.post("/api/logout")
        self.assertEqual(resp.status_code, 200)


class UpdateProfileTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = Account.objects.create_user(email="u@example.com", password="secret1", name="U")
        self.other = Account.objects.create_user(email="taken@example.com", password="secret1", name="T")
        self.manager = Account.objects.create_user(
            email="m@example.com", password="secret1", name="M", role=Account.ROLE_ADMIN
        )

    def test_update_profile(self):
        self.client.force_authenticate(self.user)
        resp = self.client.post("/api/update-profile", {"name": "New Name", "email": "new@example.com"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "New Name")
        self.assertEqual(self.user.email, "new@example.com")

    def test_keeping_own_email_is_allowed(self):
        self.client.force_authenticate(self.user)
        resp = self.client.post("/api/update-profile", {"name": "U2", "email": "u@example.com"}, format="json")
        self.assertEqual(resp.status_code, 200)

    def test_updated_email_is_normalized(self):
        self.client.force_authenticate(self.user)
        resp = self.client.post("/api/update-profile", {"name": "U", "email": "New@Example.COM"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.user.refresh_from_db()
        self.assertEqual(self.user.email, "New@example.com")

        resp = APIClient().post("/api/login", {"email": "New@Example.COM", "password": "secret1"}, format="json")
        self.assertEqual(resp.status_code, 200)

    def test_email_in_use_by_someone_else(self):
        self.client.force_authenticate(self.user)
        resp = self.client.post("/api/update-profile", {"name": "U", "email": "taken@example.com"}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Email already in use", str(resp.data["email"]))

    def test_managers_cannot_use_couple_endpoint(self):
        self.client.force_authenticate(self.manager)
        resp = self.client.post("/api/update-profile", {"name": "M", "email": "m@example.com"}, format="json")
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.data["detail"], "Access denied. user role required")

    def test_anonymous_is_rejected(self):
        resp = self.client.post("/api/update-profile", {"name": "U", "email": "u@example.com"}, format="json")
        self.assertEqual(resp.status_code, 403)

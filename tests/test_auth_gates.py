"""Tests for the authentication and authorization gates, directly and over HTTP."""

import unittest
from datetime import timedelta

from fastapi.security import HTTPAuthorizationCredentials
from fastapi.testclient import TestClient

from app.api.v1.auth import authenticate, require_admin, require_roles
from app.core.errors import GateRejection
from app.core.security import create_access_token
from app.core.store import get_user_store
from app.main import app
from app.schemas.auth import TokenClaims
from app.services.user_store import UserStore, seed_default_users

# (method, path, allowed roles or None for "any authenticated caller")
PROTECTED_ROUTES = (
    ("GET", "/users", {"admin"}),
    ("POST", "/users", {"admin"}),
    ("PUT", "/users/1", {"admin"}),
    ("DELETE", "/users/1", {"admin"}),
    ("GET", "/users/export", {"admin"}),
    ("GET", "/stats", None),
    ("GET", "/reports", {"admin"}),
    ("GET", "/calendar", None),
    ("GET", "/chat", None),
    ("GET", "/payments", {"admin"}),
)

PUBLIC_ROUTES = ("/weather", "/social", "/public/users", "/health")


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def _claims(role: str) -> TokenClaims:
    token = create_access_token(sub=1, role=role)
    return authenticate(_bearer(token))


class TestAuthenticateGate(unittest.TestCase):
    """authenticate: 401 without a credential, 403 for any unverifiable token."""

    def test_missing_credentials(self) -> None:
        with self.assertRaises(GateRejection) as ctx:
            authenticate(None)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_invalid_token(self) -> None:
        with self.assertRaises(GateRejection) as ctx:
            authenticate(_bearer("garbage"))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_expired_token(self) -> None:
        token = create_access_token(sub=1, role="admin", expires_delta=timedelta(minutes=-5))
        with self.assertRaises(GateRejection) as ctx:
            authenticate(_bearer(token))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_valid_token_returns_claims(self) -> None:
        claims = _claims("user")
        self.assertEqual((claims.id, claims.role), (1, "user"))


class TestRoleGate(unittest.TestCase):
    """require_roles admits members of the allow-set and rejects others with 403."""

    def test_member_passes(self) -> None:
        claims = _claims("admin")
        self.assertIs(require_admin(claims), claims)

    def test_non_member_rejected(self) -> None:
        with self.assertRaises(GateRejection) as ctx:
            require_admin(_claims("user"))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_multi_role_allow_set(self) -> None:
        gate = require_roles("admin", "auditor")
        claims = _claims("auditor")
        self.assertIs(gate(claims), claims)
        with self.assertRaises(GateRejection):
            gate(_claims("user"))

    def test_role_match_is_exact(self) -> None:
        with self.assertRaises(GateRejection):
            require_admin(_claims("Admin"))


class TestGatesOverHttp(unittest.TestCase):
    """Every protected route applies the gate chain before its handler runs."""

    def setUp(self) -> None:
        self.store = seed_default_users(UserStore())
        app.dependency_overrides[get_user_store] = lambda: self.store
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def _call(self, method: str, path: str, token: str | None = None):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        json_body = None
        if method == "POST":
            json_body = {"name": "N", "username": "new", "password": "pw", "role": "user"}
        elif method == "PUT":
            json_body = {"name": "N"}
        return self.client.request(method, path, headers=headers, json=json_body)

    def test_missing_token_is_401_with_empty_body(self) -> None:
        for method, path, _roles in PROTECTED_ROUTES:
            with self.subTest(method=method, path=path):
                response = self._call(method, path)
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.content, b"")
                self.assertEqual(response.headers.get("www-authenticate"), "Bearer")

    def test_non_bearer_scheme_is_401(self) -> None:
        token = create_access_token(sub=1, role="admin")
        response = self.client.get("/users", headers={"Authorization": f"Basic {token}"})
        self.assertEqual(response.status_code, 401)

    def test_invalid_token_is_403_with_empty_body(self) -> None:
        for method, path, _roles in PROTECTED_ROUTES:
            with self.subTest(method=method, path=path):
                response = self._call(method, path, token="not-a-token")
                self.assertEqual(response.status_code, 403)
                self.assertEqual(response.content, b"")

    def test_expired_token_rejected_everywhere(self) -> None:
        token = create_access_token(sub=1, role="admin", expires_delta=timedelta(hours=-1))
        for method, path, _roles in PROTECTED_ROUTES:
            with self.subTest(method=method, path=path):
                self.assertEqual(self._call(method, path, token=token).status_code, 403)
        self.assertEqual(self.store.count(), 2)

    def test_role_mismatch_is_403_and_handler_not_run(self) -> None:
        token = create_access_token(sub=2, role="user")
        for method, path, roles in PROTECTED_ROUTES:
            if roles is None:
                continue
            with self.subTest(method=method, path=path):
                response = self._call(method, path, token=token)
                self.assertEqual(response.status_code, 403)
                self.assertEqual(response.content, b"")
        self.assertEqual([u.name for u in self.store.list()], ["Admin", "User"])

    def test_any_role_routes_accept_user(self) -> None:
        token = create_access_token(sub=2, role="user")
        for method, path, roles in PROTECTED_ROUTES:
            if roles is not None:
                continue
            with self.subTest(path=path):
                self.assertEqual(self._call(method, path, token=token).status_code, 200)

    def test_public_routes_need_no_token(self) -> None:
        for path in PUBLIC_ROUTES:
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path).status_code, 200)

    def test_token_survives_account_deletion(self) -> None:
        token = create_access_token(sub=1, role="admin")
        self.store.delete(1)
        self.assertEqual(self._call("GET", "/users", token=token).status_code, 200)


if __name__ == "__main__":
    unittest.main()

"""
Tests for building the per-request context from the Authorization header.
"""

from catalog.api.auth.token import sign_token
from catalog.api.context import build_context, extract_bearer_token


class TestExtractBearerToken:
    def test_missing_header(self):
        assert extract_bearer_token(None) is None
        assert extract_bearer_token("") is None

    def test_other_scheme(self):
        assert extract_bearer_token("Basic dXNlcjpwYXNz") is None

    def test_scheme_is_case_insensitive(self):
        assert extract_bearer_token("Bearer abc") == "abc"
        assert extract_bearer_token("bearer abc") == "abc"
        assert extract_bearer_token("BEARER abc") == "abc"

    def test_prefix_only(self):
        assert extract_bearer_token("Bearer ") is None


class TestBuildContext:
    def test_anonymous_without_header(self, repository):
        context = build_context(None, repository)

        assert context["current_user"] is None
        assert context["repository"] is repository

    def test_valid_token_loads_user(self, repository, user, token):
        context = build_context(f"Bearer {token}", repository)

        assert context["current_user"].username == "ada"
        assert context["current_user"].id == user.id

    def test_lowercase_scheme_loads_user(self, repository, user, token):
        context = build_context(f"bearer {token}", repository)

        assert context["current_user"].id == user.id

    def test_invalid_token_is_anonymous(self, repository, user):
        context = build_context("Bearer not-a-token", repository)

        assert context["current_user"] is None

    def test_token_for_missing_user_is_anonymous(self, repository):
        token = sign_token({"username": "ghost", "id": "5f1d7f0e2b9d3c0012345678"})

        context = build_context(f"Bearer {token}", repository)

        assert context["current_user"] is None

    def test_notifier_attached(self, repository, notifier):
        context = build_context(None, repository, notifier=notifier)

        assert context["notifier"] is notifier

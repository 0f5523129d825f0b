"""Tests for the users resource of the Management API."""

import pytest

from auth0kit.core.exceptions import APIError, ValidationError
from auth0kit.management import ManagementApiClient
from auth0kit.models import PaginationInfo, UserCreateRequest, UserUpdateRequest

API = "https://tenant.auth0.com/api/v2"


@pytest.fixture
def management():
    return ManagementApiClient("mgmt_token", "tenant.auth0.com")


def _sent(mock_request):
    return mock_request.call_args.kwargs


class TestUsers:
    """Test user operations end to end through the REST client."""

    def test_get_encodes_user_id(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"user_id": "auth0|123", "email": "john@example.com"}
        )

        user = management.users.get("auth0|123", fields=["email"])

        assert user.email == "john@example.com"
        sent = _sent(mock_request)
        assert sent["url"] == f"{API}/users/auth0%7C123"
        assert sent["params"] == {"fields": "email", "include_fields": "true"}
        assert sent["headers"]["Authorization"] == "Bearer mgmt_token"

    def test_get_empty_id_sends_nothing(self, management, mock_request):
        with pytest.raises(ValidationError):
            management.users.get("")
        mock_request.assert_not_called()

    def test_get_all_with_totals(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200,
            {
                "start": 0,
                "limit": 2,
                "length": 1,
                "total": 1,
                "users": [{"user_id": "auth0|1", "email": "a@example.com"}],
            },
        )

        users = management.users.get_all(
            pagination=PaginationInfo(per_page=2), q='email:"a@example.com"'
        )

        assert len(users) == 1
        assert users.paging.total == 1
        params = _sent(mock_request)["params"]
        assert params["q"] == 'email:"a@example.com"'
        assert params["search_engine"] == "v3"
        assert params["per_page"] == "2"
        assert params["include_totals"] == "true"

    def test_get_users_by_email(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, [{"user_id": "auth0|1"}, {"user_id": "google-oauth2|1"}]
        )

        users = management.users.get_users_by_email("john@example.com")

        assert [u.user_id for u in users] == ["auth0|1", "google-oauth2|1"]
        sent = _sent(mock_request)
        assert sent["url"] == f"{API}/users-by-email"
        assert sent["params"] == {"email": "john@example.com"}

    def test_get_users_by_email_empty(self, management):
        with pytest.raises(ValidationError):
            management.users.get_users_by_email("  ")

    def test_create(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(201, {"user_id": "auth0|new"})

        user = management.users.create(
            UserCreateRequest(
                connection="Username-Password-Authentication",
                email="new@example.com",
                password="S3cret!",
            )
        )

        assert user.user_id == "auth0|new"
        sent = _sent(mock_request)
        assert sent["method"] == "POST"
        assert sent["json"]["connection"] == "Username-Password-Authentication"

    def test_update(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200, {"user_id": "auth0|1", "blocked": True}
        )

        user = management.users.update("auth0|1", UserUpdateRequest(blocked=True))

        assert user.blocked is True
        sent = _sent(mock_request)
        assert sent["method"] == "PATCH"
        assert sent["json"] == {"blocked": True}

    def test_delete_not_found(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(
            404,
            {
                "statusCode": 404,
                "error": "Not Found",
                "message": "The user does not exist.",
                "errorCode": "inexistent_user",
            },
        )

        with pytest.raises(APIError) as exc_info:
            management.users.delete("auth0|missing")

        assert exc_info.value.error_code == "inexistent_user"
        assert exc_info.value.endpoint == "/users/auth0%7Cmissing"

    def test_link_and_unlink(self, management, mock_request, mock_response):
        identities = [
            {"provider": "auth0", "user_id": "1", "connection": "db"},
            {"provider": "github", "user_id": "2", "connection": "github"},
        ]
        mock_request.return_value = mock_response(201, identities)

        linked = management.users.link_account(
            "auth0|1", {"provider": "github", "user_id": "2"}
        )
        assert [i.provider for i in linked] == ["auth0", "github"]
        assert _sent(mock_request)["url"] == f"{API}/users/auth0%7C1/identities"

        mock_request.return_value = mock_response(200, identities[:1])
        remaining = management.users.unlink_account("auth0|1", "github", "2")

        assert len(remaining) == 1
        sent = _sent(mock_request)
        assert sent["method"] == "DELETE"
        assert sent["url"] == f"{API}/users/auth0%7C1/identities/github/2"

    def test_roles(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(204)

        management.users.assign_roles("auth0|1", ["rol_1", "rol_2"])
        assert _sent(mock_request)["json"] == {"roles": ["rol_1", "rol_2"]}

        management.users.remove_roles("auth0|1", ["rol_1"])
        sent = _sent(mock_request)
        assert sent["method"] == "DELETE"
        assert sent["json"] == {"roles": ["rol_1"]}

        mock_request.return_value = mock_response(200, [{"id": "rol_2", "name": "admin"}])
        roles = management.users.get_roles("auth0|1")
        assert roles[0].name == "admin"

    def test_permissions_logs_enrollments(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(
            200,
            [{"resource_server_identifier": "https://api", "permission_name": "read"}],
        )
        permissions = management.users.get_permissions("auth0|1")
        assert permissions[0].permission_name == "read"

        mock_request.return_value = mock_response(200, [{"log_id": "9", "type": "s"}])
        logs = management.users.get_logs("auth0|1", sort="date:-1")
        assert logs[0].log_id == "9"
        assert _sent(mock_request)["params"] == {"sort": "date:-1"}

        mock_request.return_value = mock_response(200, [{"id": "dev_1"}])
        enrollments = management.users.get_enrollments("auth0|1")
        assert enrollments[0].id == "dev_1"
        assert _sent(mock_request)["url"] == f"{API}/users/auth0%7C1/enrollments"

    def test_multifactor(self, management, mock_request, mock_response):
        mock_request.return_value = mock_response(204)

        management.users.delete_multifactor_provider("auth0|1", "duo")
        assert _sent(mock_request)["url"] == f"{API}/users/auth0%7C1/multifactor/duo"

        management.users.invalidate_remember_browser("auth0|1")
        assert _sent(mock_request)["url"] == (
            f"{API}/users/auth0%7C1/multifactor/actions/invalidate-remember-browser"
        )

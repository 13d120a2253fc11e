"""Tests for the authenticator."""

from __future__ import annotations

import json

import pytest
import requests

from litmus_sdk.auth import authenticate, extract_error_message, username_from_token
from litmus_sdk.exceptions import AuthenticationError, LoginValidationError, TransportError, ValidationError


class TestAuthenticate:
    def test_correct_password_returns_credentials(self, session, mock_response, endpoint, token):
        session.request.return_value = mock_response({"accessToken": token, "projectID": "p-default", "expiresIn": 86400})

        credentials = authenticate(endpoint, "admin", "correct-pw", session=session)

        assert credentials.token == token
        assert credentials.endpoint == endpoint
        assert credentials.project_id == "p-default"
        assert credentials.username == "admin"

    def test_posts_credentials_to_login_endpoint(self, session, mock_response, request_body, endpoint, token):
        session.request.return_value = mock_response({"accessToken": token})

        authenticate(endpoint + "/", "admin", "correct-pw", session=session, timeout=4)

        session.request.assert_called_once()
        args, kwargs = session.request.call_args
        assert args == ("POST", f"{endpoint}/auth/login")
        assert "Authorization" not in kwargs["headers"]
        assert kwargs["timeout"] == 4
        assert request_body(session) == {"username": "admin", "password": "correct-pw"}

    def test_explicit_project_wins_over_login_default(self, session, mock_response, endpoint, token):
        session.request.return_value = mock_response({"accessToken": token, "projectID": "p-default"})

        credentials = authenticate(endpoint, "admin", "pw", project_id="p-chosen", session=session)

        assert credentials.project_id == "p-chosen"

    def test_wrong_password_is_authentication_error(self, session, mock_response, endpoint):
        session.request.return_value = mock_response(
            {"error": "invalid_credentials", "errorDescription": "Invalid Credentials"}, status_code=401
        )

        with pytest.raises(AuthenticationError) as exc_info:
            authenticate(endpoint, "admin", "wrong-pw", session=session)

        assert exc_info.value.message == "invalid_credentials: Invalid Credentials"
        assert str(exc_info.value).startswith("authentication failed: ")
        assert exc_info.value.context["status_code"] == 401
        assert isinstance(exc_info.value.__cause__, TransportError)

    def test_errors_list_on_success_status(self, session, mock_response, endpoint):
        session.request.return_value = mock_response({"errors": [{"message": "user is deactivated"}]})

        with pytest.raises(AuthenticationError, match="user is deactivated"):
            authenticate(endpoint, "admin", "pw", session=session)

    def test_missing_access_token(self, session, mock_response, endpoint):
        session.request.return_value = mock_response({"projectID": "p1"})

        with pytest.raises(AuthenticationError, match="did not include an access token"):
            authenticate(endpoint, "admin", "pw", session=session)

    def test_unreachable_server(self, session, endpoint):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(AuthenticationError, match="connection refused") as exc_info:
            authenticate(endpoint, "admin", "pw", session=session)

        assert not isinstance(exc_info.value, ValidationError)

    def test_token_not_logged(self, session, mock_response, endpoint, token, caplog):
        session.request.return_value = mock_response({"accessToken": token})

        with caplog.at_level("DEBUG", logger="litmus_sdk"):
            authenticate(endpoint, "admin", "correct-pw", session=session)

        assert token not in caplog.text
        assert "correct-pw" not in caplog.text


class TestLoginInputValidation:
    @pytest.mark.parametrize(
        "endpoint, username, password, match",
        [
            ("", "admin", "pw", "invalid endpoint URL"),
            ("not a url", "admin", "pw", "invalid endpoint URL"),
            ("http://localhost:8080", "", "pw", "username cannot be empty"),
            ("http://localhost:8080", "admin", "", "password cannot be empty"),
        ],
    )
    def test_malformed_input_fails_without_network_call(self, session, endpoint, username, password, match):
        with pytest.raises(LoginValidationError, match=match) as exc_info:
            authenticate(endpoint, username, password, session=session)

        assert isinstance(exc_info.value, AuthenticationError)
        session.request.assert_not_called()


class TestErrorExtraction:
    def test_errors_list(self):
        assert extract_error_message(json.dumps({"errors": [{"message": "a"}, {"message": "b"}]})) == "a"

    def test_error_description_only(self):
        assert extract_error_message(json.dumps({"errorDescription": "Invalid Credentials"})) == "Invalid Credentials"

    def test_plain_text(self):
        assert extract_error_message("  upstream timeout\n") == "upstream timeout"


class TestUsernameFromToken:
    def test_reads_username_claim(self, token_for):
        assert username_from_token(token_for("ops-user")) == "ops-user"

    def test_garbage_token(self):
        with pytest.raises(AuthenticationError, match="could not be decoded"):
            username_from_token("not-a-jwt")

    def test_missing_claim(self):
        import jwt

        token = jwt.encode({"sub": "x"}, "litmus-sdk-test-secret-with-enough-length", algorithm="HS256")

        with pytest.raises(AuthenticationError, match="username claim"):
            username_from_token(token)

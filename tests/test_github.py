"""Tests for the GitHub issue lookup client."""

from unittest.mock import Mock

import pytest

from ghshorthand.github import DEFAULT_TIMEOUT, GitHubAPIError, GitHubClient


def _response(status_code, payload=None, text="", headers=None):
    response = Mock(status_code=status_code, text=text, headers=headers or {})
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    session = Mock()
    session.headers = {}
    return session


class TestGitHubClient:
    def test_sets_auth_headers(self, session):
        GitHubClient("abc", session=session)
        assert session.headers["Authorization"] == "token abc"
        assert session.headers["User-Agent"].startswith("gh-shorthand/")

    def test_issue_title(self, session):
        session.get.return_value = _response(200, {"title": "Fix the thing"})
        client = GitHubClient("abc", session=session)
        assert client.issue_title("zerowidth/dotfiles", "12") == "Fix the thing"
        session.get.assert_called_once_with(
            "https://api.github.com/repos/zerowidth/dotfiles/issues/12",
            timeout=DEFAULT_TIMEOUT,
        )

    def test_custom_base_url(self, session):
        session.get.return_value = _response(200, {"title": "t"})
        client = GitHubClient("abc", base_url="https://ghe.example.com/api/v3/", session=session)
        client.issue_title("a/b", 1)
        assert session.get.call_args[0][0] == "https://ghe.example.com/api/v3/repos/a/b/issues/1"

    def test_missing_issue(self, session):
        session.get.return_value = _response(404, {"message": "Not Found"})
        assert GitHubClient("abc", session=session).issue_title("a/b", "1") is None

    def test_unauthorized(self, session):
        session.get.return_value = _response(401, {"message": "Bad credentials"})
        with pytest.raises(GitHubAPIError, match="401"):
            GitHubClient("abc", session=session).issue_title("a/b", "1")

    def test_error_message_from_payload(self, session):
        session.get.return_value = _response(500, {"message": "boom"})
        with pytest.raises(GitHubAPIError, match="500: boom"):
            GitHubClient("abc", session=session).issue_title("a/b", "1")

    def test_error_message_from_text(self, session):
        session.get.return_value = _response(502, text="Bad Gateway")
        with pytest.raises(GitHubAPIError, match="Bad Gateway"):
            GitHubClient("abc", session=session).issue_title("a/b", "1")

    def test_retries_when_rate_limited(self, session, monkeypatch):
        sleeps = []
        monkeypatch.setattr("ghshorthand.github.time.sleep", sleeps.append)
        session.get.side_effect = [
            _response(403, text="API rate limit exceeded"),
            _response(200, {"title": "Eventually"}),
        ]
        assert GitHubClient("abc", session=session).issue_title("a/b", "1") == "Eventually"
        assert sleeps == [2]

    def test_gives_up_after_retries(self, session, monkeypatch):
        monkeypatch.setattr("ghshorthand.github.time.sleep", lambda seconds: None)
        session.get.return_value = _response(
            403, text="forbidden", headers={"X-RateLimit-Remaining": "0"}
        )
        with pytest.raises(GitHubAPIError, match="Retry limit"):
            GitHubClient("abc", session=session).issue_title("a/b", "1")

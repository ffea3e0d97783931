"""测试公共夹具"""

import json
from unittest.mock import Mock

import pytest
import requests

from github_request.config.settings import GitHubConfig
from github_request.services.request_client import RequestClient


def build_response(
    status_code: int = 200,
    json_data=None,
    text: str | None = None,
    headers: dict | None = None,
    url: str = "https://api.github.com/",
) -> requests.Response:
    """构造真实的 requests.Response"""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.reason = "OK" if status_code < 400 else "Error"
    resp.encoding = "utf-8"
    if json_data is not None:
        resp._content = json.dumps(json_data).encode("utf-8")
        resp.headers["Content-Type"] = "application/json; charset=utf-8"
    elif text is not None:
        resp._content = text.encode("utf-8")
        resp.headers["Content-Type"] = "text/plain; charset=utf-8"
    else:
        resp._content = b""
    resp.headers.update(headers or {})
    return resp


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def github_config():
    return GitHubConfig(
        host="https://api.github.com",
        owner="octocat",
        repo="hello-world",
        token="secret-token",
        debug=False,
    )


@pytest.fixture
def session():
    mock_session = Mock(spec=requests.Session)
    mock_session.request.return_value = build_response(json_data={"ok": True})
    return mock_session


@pytest.fixture
def client(github_config, session):
    return RequestClient(github_config, session=session)

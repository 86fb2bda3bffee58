from unittest.mock import MagicMock, patch

import pytest
import requests

from optimized_images.clients.remote import get_remote_file_size


def response_with(headers):
    response = MagicMock()
    response.headers = headers
    return response


@pytest.fixture
def head():
    with patch("optimized_images.clients.remote.requests.head") as head:
        head.return_value = response_with({"Content-Length": "1500"})
        yield head


def test_formatted_size(head):
    assert get_remote_file_size("https://cdn.example.com/a.jpg") == "1.5K"
    head.assert_called_once_with(
        "https://cdn.example.com/a.jpg", allow_redirects=True, verify=False, timeout=10.0
    )


def test_size_in_bytes(head):
    assert get_remote_file_size("https://cdn.example.com/a.jpg", format_size=False) == 1500


def test_missing_content_length(head):
    head.return_value = response_with({})
    assert get_remote_file_size("https://cdn.example.com/a.jpg", format_size=False) == -1
    assert get_remote_file_size("https://cdn.example.com/a.jpg") == "unknown"


def test_request_error(head):
    head.side_effect = requests.ConnectionError("refused")
    assert get_remote_file_size("https://cdn.example.com/a.jpg", format_size=False) == -1


def test_relative_url_uses_site_url(head):
    get_remote_file_size("/images/a.jpg", site_url="https://example.com/", timeout=2)
    head.assert_called_once_with(
        "https://example.com/images/a.jpg", allow_redirects=True, verify=False, timeout=2
    )


def test_get_request():
    with patch("optimized_images.clients.remote.requests.get") as get:
        get.return_value = response_with({"Content-Length": "2048"})
        assert get_remote_file_size("https://cdn.example.com/a.jpg", format_size=False, use_head=False) == 2048

    get.assert_called_once_with(
        "https://cdn.example.com/a.jpg", allow_redirects=True, verify=False, timeout=10.0, stream=True
    )

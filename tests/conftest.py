"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def sample_post_request() -> str:
    """POST request with headers and a form body."""
    return (
        "POST /users/3 HTTP/1.1\n"
        "Connection: keep-alive\n"
        "Accept: text/*\n"
        "\n"
        "first_name=john&last_name=doe"
    )


@pytest.fixture
def sample_full_request() -> str:
    """Request exercising spacing and duplicate header rules."""
    return (
        "POST /users/3 HTTP/1.1\n"
        "Connection: keep-alive\n"
        "Accept: text/*\n"
        "Host:   github.com\n"
        " Spaced Header  Example  : example value\n"
        "Duplicate Header: value 1\n"
        "Duplicate Header: value 2\n"
        "\n"
        "first_name=john&last_name=doe"
    )


@pytest.fixture
def sample_response() -> str:
    """Response with headers and a JSON body."""
    return (
        "HTTP/0.9 200 OK\n"
        "Server: nginx/1.14.0 (Ubuntu)\n"
        "Date: Mon, 14 Dec 2020 12:40:51 GMT\n"
        "Content-type: text/html; charset=UTF-8\n"
        "Connection: close\n"
        " Spaced Header  Example  : example value\n"
        "\n"
        '{"ok": true}'
    )

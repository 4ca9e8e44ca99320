import pytest
import requests
import responses

from nrclaunch.download import (
    USER_AGENT,
    download_file,
    download_file_untracked,
    download_private_file_untracked,
    http_session,
)

URL = "https://files.example.com/file.bin"


def test_session_is_shared_and_carries_agent():
    assert http_session() is http_session()
    assert http_session().headers["User-Agent"] == USER_AGENT


def test_download_file_returns_body_and_reports_progress():
    body = b"x" * 200_000
    calls = []
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=body)
        result = download_file(f"  {URL}\n", lambda done, total: calls.append((done, total)))
    assert result == body
    assert calls[0][0] == 0
    assert calls[-1][0] == calls[-1][1]
    done_values = [done for done, _ in calls[1:-1]]
    assert done_values == sorted(done_values)
    assert done_values[-1] == len(body)


def test_download_file_sends_user_agent():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"data")
        result = download_file(URL, lambda done, total: None)
        assert rsps.calls[0].request.headers["User-Agent"] == USER_AGENT
    assert result == b"data"


def test_download_file_http_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=404)
        with pytest.raises(requests.HTTPError):
            download_file(URL, lambda done, total: None)


def test_untracked_writes_file(tmp_path):
    target = tmp_path / "out.bin"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"content")
        download_file_untracked(URL, target)
    assert target.read_bytes() == b"content"


def test_untracked_error_writes_nothing(tmp_path):
    target = tmp_path / "out.bin"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=500)
        with pytest.raises(requests.HTTPError):
            download_file_untracked(URL, target)
    assert not target.exists()


def test_private_download_sends_bearer(tmp_path):
    target = tmp_path / "private.bin"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"secret-data")
        download_private_file_untracked(URL, "token", target)
        assert rsps.calls[0].request.headers["Authorization"] == "Bearer token"
    assert target.read_bytes() == b"secret-data"
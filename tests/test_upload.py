import pytest
import requests
import responses

from postcart.upload import (
    TMPFILES_API_URL,
    UploadError,
    to_download_url,
    upload_image,
    upload_to_tmpfiles,
)


def test_to_download_url_inserts_dl_and_https():
    assert (
        to_download_url("http://tmpfiles.org/123/output.jpg")
        == "https://tmpfiles.org/dl/123/output.jpg"
    )


def test_to_download_url_replaces_only_first_occurrence():
    result = to_download_url("http://tmpfiles.org/1/tmpfiles.org/x")
    assert result.count("/dl/") == 1
    assert result.startswith("https://")


def test_to_download_url_leaves_other_urls():
    url = "https://example.com/file.jpg"
    assert to_download_url(url) == url


def test_upload_success_returns_download_url():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            TMPFILES_API_URL,
            json={"status": "success", "data": {"url": "http://tmpfiles.org/42/a.jpg"}},
            status=200,
        )
        url = upload_to_tmpfiles(b"imagebytes", "a.jpg")
        body = rsps.calls[0].request.body
    assert url == to_download_url("http://tmpfiles.org/42/a.jpg")
    assert b'name="file"' in body
    assert b'filename="a.jpg"' in body
    assert b"imagebytes" in body


def test_upload_image_uses_default_filename():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            TMPFILES_API_URL,
            json={"data": {"url": "http://tmpfiles.org/7/output.jpg"}},
        )
        url = upload_image(b"\xff\xd8jpeg")
        body = rsps.calls[0].request.body
    assert b'filename="output.jpg"' in body
    assert url.startswith("https://tmpfiles.org/dl/")


def test_upload_bad_status_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, TMPFILES_API_URL, body="nope", status=500)
        with pytest.raises(UploadError, match="unexpected status code: 500"):
            upload_to_tmpfiles(b"x", "x.jpg")


def test_upload_invalid_json_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, TMPFILES_API_URL, body="not json", status=200)
        with pytest.raises(UploadError, match="failed to parse response"):
            upload_to_tmpfiles(b"x", "x.jpg")


def test_upload_connection_error_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.POST,
            TMPFILES_API_URL,
            body=requests.ConnectionError("down"),
        )
        with pytest.raises(UploadError, match="failed to send request"):
            upload_to_tmpfiles(b"x", "x.jpg")


def test_upload_missing_url_gives_empty_string():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, TMPFILES_API_URL, json={"data": {}})
        assert upload_to_tmpfiles(b"x", "x.jpg") == ""
"""Upload images to a temporary file host and return a download URL."""

from __future__ import annotations

import requests

TMPFILES_API_URL = "https://tmpfiles.org/api/v1/upload"
_RESULT_PATH = "tmpfiles.org/"
_DOWNLOAD_PATH = "tmpfiles.org/dl/"
_DEFAULT_FILENAME = "output.jpg"


class UploadError(Exception):
    """Raised when an image upload fails."""


def to_download_url(url: str) -> str:
    """Turn a tmpfiles page URL into a direct HTTPS download URL."""
    return url.replace(_RESULT_PATH, _DOWNLOAD_PATH, 1).replace("http://", "https://", 1)


def _fail(reason: str) -> UploadError:
    return UploadError(f"upload to tmpfiles.org err: {reason}")


def upload_to_tmpfiles(data: bytes, filename: str) -> str:
    """Upload bytes as a multipart file field and return the download URL."""
    try:
        response = requests.post(TMPFILES_API_URL, files={"file": (filename, data)})
    except requests.RequestException as exc:
        raise _fail(f"failed to send request: {exc}") from exc

    print(f"[{response.status_code}] {TMPFILES_API_URL}")
    if response.status_code != 200:
        raise _fail(f"unexpected status code: {response.status_code}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise _fail(f"failed to parse response: {exc}") from exc

    if not isinstance(payload, dict):
        raise _fail("failed to parse response: expected an object")
    result = payload.get("data") or {}
    if not isinstance(result, dict):
        raise _fail("failed to parse response: data is not an object")
    url = result.get("url") or ""
    if not isinstance(url, str):
        raise _fail("failed to parse response: url is not a string")

    return to_download_url(url)


def upload_image(data: bytes) -> str:
    """Upload a rendered image and return a URL it can be fetched from."""
    return upload_to_tmpfiles(data, _DEFAULT_FILENAME)
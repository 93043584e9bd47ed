"""Submission of URL batches to the IndexNow API."""

from __future__ import annotations

from dataclasses import dataclass

import requests

from .console import cprint_error
from .models import IndexNowRequest

INDEXNOW_ENDPOINT = "https://api.indexnow.org/IndexNow"
REQUEST_TIMEOUT_SECONDS = 10
CONTENT_TYPE = "application/json; charset=utf-8"

# Response codes documented by the API:
#   200 OK                    URLs submitted successfully
#   400 Bad request           invalid format
#   403 Forbidden             key not valid (not found, or not in the key file)
#   422 Unprocessable Entity  URLs not on the host, or key does not match the schema
#   429 Too Many Requests     potential spam


@dataclass(frozen=True)
class SubmissionResult:
    """The HTTP status line and body returned by the API."""

    status: str
    body: str


def post_to_indexnow(domain: str, key: str, page_urls) -> SubmissionResult:
    """POST ``page_urls`` for ``domain`` to IndexNow and return the response.

    Network failures are reported on stderr and re-raised.
    """
    payload = IndexNowRequest.for_site(domain, key, page_urls)
    data = payload.to_json().encode("utf-8")

    try:
        response = requests.post(
            INDEXNOW_ENDPOINT,
            data=data,
            headers={"Content-Type": CONTENT_TYPE},
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        cprint_error("error posting data:", exc)
        raise

    try:
        body = response.text
    except (requests.RequestException, UnicodeDecodeError) as exc:
        cprint_error("error reading response data:", exc)
        raise
    finally:
        response.close()

    status = f"{response.status_code} {response.reason or ''}".rstrip()
    return SubmissionResult(status=status, body=body)
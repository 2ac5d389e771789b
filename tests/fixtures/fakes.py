"""Stand-ins for the S3 client and the requests session."""
import json
from typing import Any, Dict, List, Optional, Tuple

import requests


class FakeS3Client:
    """Records every call; optionally fails them all."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def put_object(self, **kwargs):
        self.calls.append(("put_object", kwargs))
        if self.error:
            raise self.error
        return {"ETag": '"d41d8cd98f00b204e9800998ecf8427e"'}

    def delete_object(self, **kwargs):
        self.calls.append(("delete_object", kwargs))
        if self.error:
            raise self.error
        return {"DeleteMarker": False}


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


class FakeSession:
    """Returns queued responses in order and records each request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: List[Dict[str, Any]] = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.requests.append(
            {"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout}
        )
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

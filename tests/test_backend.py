import json

import pytest
import requests

from shopsphere.backend import ApperClient
from shopsphere.errors import RecordServiceError


def _response(status=200, body=None, raw=None):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Server Error"
    if raw is not None:
        resp._content = raw
    else:
        resp._content = json.dumps(body).encode("utf-8") if body is not None else b""
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


def _client(session):
    return ApperClient(
        project_id="proj",
        public_key="key",
        base_url="https://backend.test/",
        timeout=3,
        session=session,
    )


def test_headers_identify_project():
    session = FakeSession(_response(body={"data": []}))
    _client(session)
    assert session.headers["X-Apper-Project-Id"] == "proj"
    assert session.headers["Authorization"] == "Bearer key"


def test_fetch_posts_query():
    session = FakeSession(_response(body={"data": [{"Id": 1}]}))
    body = _client(session).fetch_records("destination", {"Fields": []})
    assert body == {"data": [{"Id": 1}]}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://backend.test/tables/destination/query"
    assert call["timeout"] == 3


def test_get_uses_record_url():
    session = FakeSession(_response(body={"data": {"Id": 5}}))
    _client(session).get_record_by_id("passenger1", 5)
    assert session.calls[0]["url"] == "https://backend.test/tables/passenger1/records/5"
    assert session.calls[0]["method"] == "GET"


def test_error_status_raises():
    session = FakeSession(_response(status=500, body={"message": "nope"}))
    with pytest.raises(RecordServiceError) as excinfo:
        _client(session).delete_record("trip_plan1", {"RecordIds": [1]})
    assert excinfo.value.status_code == 500
    assert excinfo.value.operation == "delete"


def test_transport_error_raises():
    session = FakeSession(exc=requests.ConnectionError("refused"))
    with pytest.raises(RecordServiceError) as excinfo:
        _client(session).create_record("destination", {"record": {}})
    assert excinfo.value.table == "destination"


def test_non_json_body_raises():
    session = FakeSession(_response(raw=b"<html>oops</html>"))
    with pytest.raises(RecordServiceError):
        _client(session).update_record("destination", {"record": {"Id": 1}})


def test_empty_body_is_empty_dict():
    session = FakeSession(_response())
    assert _client(session).delete_record("destination", {"RecordIds": [1]}) == {}

import json

import pytest
import responses

from teamcityapi.rest import RestClient, TeamCityError

BASE = "http://teamcity.test/app/rest/"


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def rest():
    return RestClient(BASE)


def test_get_returns_parsed_json(mock, rest):
    mock.add(responses.GET, BASE + "thing", json={"id": "abc", "count": 2})
    assert rest.get("thing", "thing") == {"id": "abc", "count": 2}
    assert mock.calls[0].request.headers["Accept"] == "application/json"


def test_base_without_trailing_slash_is_normalized(mock):
    client = RestClient(BASE.rstrip("/"))
    mock.add(responses.GET, BASE + "thing", json={"ok": True})
    assert client.get("thing", "thing") == {"ok": True}


def test_scoped_prefixes_paths(mock, rest):
    mock.add(responses.GET, BASE + "projects/x", json={"id": "x"})
    scoped = rest.scoped("projects/")
    assert scoped.base_url == BASE + "projects/"
    assert scoped.get("x", "project") == {"id": "x"}
    assert mock.calls[0].request.url == BASE + "projects/x"


def test_post_sends_json_body(mock, rest):
    mock.add(responses.POST, BASE + "items/", json={"id": "new"})
    body = {"name": "item", "value": "v"}
    assert rest.scoped("items/").post("", body, "item") == {"id": "new"}
    assert json.loads(mock.calls[0].request.body) == body


def test_put_sends_json_body(mock, rest):
    mock.add(responses.PUT, BASE + "items/1", json={"done": True})
    assert rest.put("items/1", {"a": "b"}, "item") == {"done": True}
    assert json.loads(mock.calls[0].request.body) == {"a": "b"}


def test_put_text_sends_plain_text(mock, rest):
    mock.add(responses.PUT, BASE + "items/1/name", body="New name")
    assert rest.put_text("items/1/name", "New name", "item name") == "New name"
    request = mock.calls[0].request
    assert request.body == b"New name"
    assert request.headers["Content-Type"] == "text/plain"


def test_error_status_raises(mock, rest):
    mock.add(responses.GET, BASE + "missing", status=404, body="nothing here")
    with pytest.raises(TeamCityError) as info:
        rest.get("missing", "thing")
    assert info.value.status_code == 404
    assert "404" in str(info.value)
    assert "nothing here" in str(info.value)


def test_delete_accepts_no_content(mock, rest):
    mock.add(responses.DELETE, BASE + "items/1", status=204)
    result = rest.delete("items/1", "item")
    assert result is None
    assert mock.calls[0].request.method == "DELETE"
    assert len(mock.calls) == 1


def test_delete_error_raises(mock, rest):
    mock.add(responses.DELETE, BASE + "items/1", status=500, body="boom")
    with pytest.raises(TeamCityError) as info:
        rest.delete("items/1", "item")
    assert info.value.status_code == 500


def test_connection_error_is_wrapped(mock, rest):
    with pytest.raises(TeamCityError) as info:
        rest.get("unregistered", "thing")
    assert info.value.status_code is None
    assert "thing" in str(info.value)
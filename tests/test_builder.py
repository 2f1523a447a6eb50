"""Tests for request construction."""
import pytest

from translator.http import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    RequestOptions,
    config_request,
    parse_url,
)
from translator.http.builder import encode_json

URL = parse_url("https://api.example.com/p")


class TestBodyEncoding:
    """Body selection for POST, PUT and PATCH."""

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "post"])
    def test_json_body(self, method):
        prepared = config_request(URL, RequestOptions(method=method, json={"a": 1, "b": "x"}))
        assert prepared.method == method.upper()
        assert prepared.headers["Content-Type"] == JSON_CONTENT_TYPE
        assert prepared.body == encode_json({"a": 1, "b": "x"})
        assert prepared.body == '{"a":1,"b":"x"}'

    def test_json_list_body(self):
        prepared = config_request(URL, RequestOptions(method="POST", json=[{"Text": "hi"}]))
        assert prepared.body == '[{"Text":"hi"}]'

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
    def test_form_body(self, method):
        prepared = config_request(URL, RequestOptions(method=method, form={"x": "1", "y": "two words"}))
        assert prepared.headers["Content-Type"] == FORM_CONTENT_TYPE
        assert prepared.body == "x=1&y=two+words"

    def test_json_wins_over_form_and_data(self):
        options = RequestOptions(method="POST", json={"j": 1}, form={"f": 1}, data={"d": 1})
        prepared = config_request(URL, options)
        assert prepared.body == '{"j":1}'

    def test_form_wins_over_data(self):
        prepared = config_request(URL, RequestOptions(method="POST", form={"f": 1}, data={"d": 1}))
        assert prepared.body == "f=1"

    def test_mapping_data_is_form_encoded(self):
        prepared = config_request(URL, RequestOptions(method="POST", data={"q": "a", "key": "k"}))
        assert prepared.body == "q=a&key=k"
        assert prepared.headers["Content-Type"] == FORM_CONTENT_TYPE

    def test_raw_string_data_has_no_content_type(self):
        prepared = config_request(URL, RequestOptions(method="POST", data="raw payload"))
        assert prepared.body == "raw payload"
        assert "Content-Type" not in prepared.headers

    def test_body_data_is_not_added_to_query(self):
        prepared = config_request(URL, RequestOptions(method="POST", data={"q": "a"}))
        assert prepared.path == "/p"

    def test_empty_body_sends_nothing(self):
        prepared = config_request(URL, RequestOptions(method="POST", json={}))
        assert prepared.body is None
        assert prepared.headers == {}


class TestPathBuilding:
    def test_get_data_becomes_query(self):
        prepared = config_request(URL, RequestOptions(method="GET", data={"x": "1", "dt": ["a", "b"]}))
        assert prepared.path == "/p?x=1&dt=a&dt=b"
        assert prepared.body is None

    def test_existing_query_uses_ampersand(self):
        info = parse_url("https://api.example.com/p?a=1")
        prepared = config_request(info, RequestOptions(data={"x": "1"}))
        assert prepared.path == "/p?a=1&x=1"

    def test_data_segment_comes_before_explicit_query(self):
        prepared = config_request(URL, RequestOptions(method="GET", data={"d": "1"}, query={"q": "2"}))
        assert prepared.path == "/p?d=1&q=2"

    def test_query_only_is_appended_once(self):
        prepared = config_request(URL, RequestOptions(method="DELETE", query={"q": "2"}))
        assert prepared.path == "/p?q=2"

    def test_query_with_json_body(self):
        info = parse_url("https://api.example.com/translate?api-version=3.0")
        prepared = config_request(info, RequestOptions(method="POST", json=[{"Text": "a"}], query={"to": "en"}))
        assert prepared.path == "/translate?api-version=3.0&to=en"
        assert prepared.body == '[{"Text":"a"}]'

    def test_string_query_passes_through(self):
        prepared = config_request(URL, RequestOptions(query="a=1&a=2"))
        assert prepared.path == "/p?a=1&a=2"

    def test_method_defaults_to_get(self):
        assert config_request(URL, RequestOptions()).method == "GET"


class TestHeadersAndTuning:
    def test_caller_headers_override_content_type(self):
        options = RequestOptions(method="POST", json={"a": 1}, headers={"content-type": "text/plain"})
        prepared = config_request(URL, options)
        assert prepared.headers == {"content-type": "text/plain"}

    def test_cookies_and_settings_are_forwarded(self):
        options = RequestOptions(cookies={"sid": "1"}, settings={"timeout": 3})
        prepared = config_request(URL, options)
        assert prepared.cookies == {"sid": "1"}
        assert prepared.settings == {"timeout": 3}


class TestRequestOptionsMerge:
    def test_call_values_win(self):
        base = RequestOptions(headers={"A": "1", "B": "1"}, settings={"timeout": 5}, data="base")
        merged = base.merge(RequestOptions(headers={"B": "2"}, data="call"))
        assert merged.headers == {"A": "1", "B": "2"}
        assert merged.settings == {"timeout": 5}
        assert merged.data == "call"

    def test_base_is_not_mutated(self):
        base = RequestOptions(headers={"A": "1"})
        base.merge(RequestOptions(headers={"A": "2"}))
        assert base.headers == {"A": "1"}

"""
Outcome classification tests.

Covered:
    - every shape on matching and non-matching responses
    - malformed and empty bodies never raise
    - exact, type-sensitive status matching
    - body stays readable after classification
"""

import pytest

from chomikuj.core.exceptions import RequestFailedError
from chomikuj.core.interfaces import OutcomeShape, Response
from chomikuj.core.outcome import _RULES, classify, ensure_success

from tests.conftest import json_response

JSON_SHAPES = [
    OutcomeShape.JSON_DATA_STATUS_OK,
    OutcomeShape.JSON_DATA_STATUS_ZERO,
    OutcomeShape.JSON_URL,
    OutcomeShape.JSON_ISSUCCESS_ONE,
]


class TestJsonShapes:
    """JSON-based success rules"""

    def test_data_status_ok(self):
        assert classify(json_response({"Data": {"Status": "OK"}}), OutcomeShape.JSON_DATA_STATUS_OK)

    def test_data_status_ok_is_case_sensitive(self):
        response = json_response({"Data": {"Status": "ok"}})
        assert classify(response, OutcomeShape.JSON_DATA_STATUS_OK) is False

    def test_data_status_zero(self):
        assert classify(json_response({"Data": {"Status": 0}}), OutcomeShape.JSON_DATA_STATUS_ZERO)

    @pytest.mark.parametrize("status", ["0", False, 0.0, 1, "OK"])
    def test_data_status_zero_requires_integer_zero(self, status):
        response = json_response({"Data": {"Status": status}})
        assert classify(response, OutcomeShape.JSON_DATA_STATUS_ZERO) is False

    def test_ok_and_zero_are_different_encodings(self):
        assert classify(json_response({"Data": {"Status": 0}}), OutcomeShape.JSON_DATA_STATUS_OK) is False
        assert classify(json_response({"Data": {"Status": "OK"}}), OutcomeShape.JSON_DATA_STATUS_ZERO) is False

    def test_url_present_with_any_value(self):
        assert classify(json_response({"Url": "https://s1.chomikuj.pl/upload"}), OutcomeShape.JSON_URL)
        assert classify(json_response({"Url": ""}), OutcomeShape.JSON_URL)

    def test_url_null_counts_as_absent(self):
        assert classify(json_response({"Url": None}), OutcomeShape.JSON_URL) is False

    def test_is_success_true(self):
        assert classify(json_response({"IsSuccess": True}), OutcomeShape.JSON_ISSUCCESS_ONE)

    @pytest.mark.parametrize("value", [1, "true", False])
    def test_is_success_requires_boolean_true(self, value):
        response = json_response({"IsSuccess": value})
        assert classify(response, OutcomeShape.JSON_ISSUCCESS_ONE) is False

    @pytest.mark.parametrize("shape", JSON_SHAPES)
    def test_missing_field_is_not_success(self, shape):
        assert classify(json_response({"Other": 1}), shape) is False

    @pytest.mark.parametrize("shape", JSON_SHAPES)
    @pytest.mark.parametrize(
        "body",
        [b"", b"<html>Error</html>", b"{not json", b"[1, 2]", b'"OK"', b"null", b"\xff\xfe\x00", b"[" * 100000],
    )
    def test_malformed_body_never_raises(self, shape, body):
        assert classify(Response(status_code=200, body=body), shape) is False

    def test_data_not_an_object(self):
        response = json_response({"Data": ["Status", "OK"]})
        assert classify(response, OutcomeShape.JSON_DATA_STATUS_OK) is False

    def test_json_shapes_ignore_status_code(self):
        response = json_response({"IsSuccess": True}, status_code=500)
        assert classify(response, OutcomeShape.JSON_ISSUCCESS_ONE)


class TestStatusShapes:
    """Status-code success rules"""

    def test_status_200(self):
        assert classify(Response(status_code=200), OutcomeShape.STATUS_200)
        assert classify(Response(status_code=500), OutcomeShape.STATUS_200) is False

    def test_status_400(self):
        assert classify(Response(status_code=400), OutcomeShape.STATUS_400)
        assert classify(Response(status_code=200), OutcomeShape.STATUS_400) is False

    def test_status_shapes_ignore_body(self):
        response = Response(status_code=200, body=b'{"IsSuccess": false}')
        assert classify(response, OutcomeShape.STATUS_200)


class TestClassifierContract:
    """Cross-cutting guarantees"""

    def test_every_shape_has_a_rule(self):
        assert set(_RULES) == set(OutcomeShape)

    @pytest.mark.parametrize("shape", list(OutcomeShape))
    def test_body_readable_after_classification(self, shape):
        body = b'{"Url": "https://upload.example/abc"}'
        response = Response(status_code=200, body=body)

        classify(response, shape)

        assert response.body == body
        assert response.json()["Url"] == "https://upload.example/abc"

    def test_ensure_success_returns_response(self):
        response = json_response({"Data": {"Status": "OK"}})
        assert ensure_success(response, OutcomeShape.JSON_DATA_STATUS_OK) is response

    def test_ensure_success_raises(self):
        with pytest.raises(RequestFailedError, match="Request failed."):
            ensure_success(Response(status_code=302), OutcomeShape.STATUS_200)

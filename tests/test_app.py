"""
Tests for the HTTP interface.
"""

from unittest.mock import patch

import pytest

from radix_calc.app import create_app
from radix_calc.exceptions import ChartRenderError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestOperationEndpoints:
    """Test the calculation endpoints."""

    def test_decimal_add(self, client):
        response = client.post("/add", json={"num1": 1, "num2": 2})
        assert response.status_code == 200
        assert response.get_json() == {"result": "3"}

    def test_decimal_divide(self, client):
        response = client.post("/divide", json={"num1": 6, "num2": 3, "system": None})
        assert response.get_json() == {"result": "2"}

    def test_decimal_modulus(self, client):
        response = client.post("/modulus", json={"num1": 7, "num2": 3})
        assert response.get_json() == {"result": "1"}

    def test_hexadecimal_add(self, client):
        response = client.post("/add", json={"num1": 10, "num2": 5, "system": "hexadecimal"})
        assert response.status_code == 200
        assert response.get_json() == {"result": "15"}

    @pytest.mark.parametrize("operation, expected", [("subtract", "10"), ("multiply", "11")])
    def test_remaining_operations(self, client, operation, expected):
        response = client.post(f"/{operation}", json={"num1": 11, "num2": 1, "system": "binary"})
        assert response.status_code == 200
        assert response.get_json() == {"result": expected}

    def test_null_body_uses_zero_operands(self, client):
        response = client.post("/add", data="null", content_type="application/json")
        assert response.get_json() == {"result": "0"}

    def test_division_by_zero(self, client):
        response = client.post("/divide", json={"num1": 1, "num2": 0})
        assert response.status_code == 400
        assert response.mimetype == "text/plain"
        assert b"division by zero" in response.data

    def test_invalid_system(self, client):
        response = client.post("/add", json={"num1": 1, "num2": 2, "system": "roman"})
        assert response.status_code == 400
        assert b"invalid system" in response.data

    def test_invalid_numeral(self, client):
        response = client.post("/add", json={"num1": 9, "num2": 1, "system": "octal"})
        assert response.status_code == 400
        assert b"Invalid character '9' for base 8" in response.data

    def test_malformed_body(self, client):
        response = client.post("/add", data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.mimetype == "text/plain"
        assert response.data.startswith(b"Failed to decode JSON object: ")
        assert b"Expecting property name enclosed in double quotes" in response.data

    def test_empty_body(self, client):
        response = client.post("/add")
        assert response.status_code == 400
        assert b"Failed to decode JSON object: Expecting value" in response.data

    def test_invalid_utf8_body(self, client):
        response = client.post("/add", data=b"{\x80}", content_type="application/json")
        assert response.status_code == 400
        assert response.data.startswith(b"Failed to decode JSON object: ")

    def test_get_is_accepted(self, client):
        response = client.get("/add", json={"num1": 1, "num2": 2})
        assert response.status_code == 200
        assert response.get_json() == {"result": "3"}

    def test_wrong_field_type(self, client):
        response = client.post("/add", json={"num1": "1", "num2": 2})
        assert response.status_code == 400
        assert b"'num1' must be a number" in response.data

    def test_unknown_operation(self, client):
        response = client.post("/power", json={"num1": 2, "num2": 8})
        assert response.status_code == 404

    def test_successful_requests_are_recorded(self, client, usage_log):
        client.post("/add", json={"num1": 10, "num2": 5, "system": "hexadecimal"})
        client.post("/add", json={"num1": 1, "num2": 1})
        client.post("/divide", json={"num1": 1, "num2": 0})
        client.post("/add", json={"num1": 1, "num2": 1, "system": "roman"})

        records = usage_log.snapshot()
        assert [r.system for r in records] == ["hexadecimal", "decimal"]
        assert records[0].num1 == 10
        assert records[0].num2 == 5


class TestChartEndpoint:
    """Test the chart endpoint."""

    def test_chart_without_requests(self, client):
        response = client.get("/chart")
        assert response.status_code == 200
        assert response.mimetype == "image/png"
        assert response.data.startswith(PNG_SIGNATURE)

    def test_chart_counts_every_request(self, client, usage_log):
        bodies = [
            {"num1": 1, "num2": 2},
            {"num1": 1, "num2": 1, "system": "binary"},
            {"num1": 7, "num2": 1, "system": "octal"},
            {"num1": 3, "num2": 4, "system": "decimal"},
        ]
        for body in bodies:
            assert client.post("/add", json=body).status_code == 200

        with patch("radix_calc.app.render_frequency_chart", return_value=b"png") as render:
            response = client.get("/chart")

        frequency = render.call_args[0][0]
        assert frequency == {"decimal": 2, "binary": 1, "octal": 1}
        assert sum(frequency.values()) == len(bodies)
        assert response.data == b"png"

    def test_real_chart_after_requests(self, client):
        client.post("/add", json={"num1": 1, "num2": 2, "system": "hexadecimal"})
        response = client.get("/chart")
        assert response.data.startswith(PNG_SIGNATURE)

    def test_bar_chart(self, client):
        client.post("/add", json={"num1": 1, "num2": 2})
        response = client.get("/chart?kind=bar")
        assert response.status_code == 200
        assert response.data.startswith(PNG_SIGNATURE)

    def test_unknown_chart_kind(self, client):
        response = client.get("/chart?kind=donut")
        assert response.status_code == 400

    def test_misconfigured_chart_kind_fails_at_startup(self, usage_log):
        with pytest.raises(ValueError):
            create_app(usage_log=usage_log, config={"CHART_KIND": "donut"})

    def test_render_failure_is_server_error(self, client):
        with patch("radix_calc.app.render_frequency_chart", side_effect=ChartRenderError("boom")):
            response = client.get("/chart")
        assert response.status_code == 500
        assert b"boom" in response.data

"""Tests for JSON-RPC envelope encoding/decoding."""

import json

import pytest

from zabbix_rpc.protocol import Request, Response, RpcError, decode_request, decode_response, encode_request


class TestRequestEncoding:
    """encode_request wire form."""

    def test_fields(self):
        """Envelope carries version, method, params, auth and id."""
        obj = json.loads(encode_request(Request(method="host.get", params={"output": "extend"}, id=7, auth="tok")))
        assert obj == {"jsonrpc": "2.0", "method": "host.get", "params": {"output": "extend"}, "auth": "tok", "id": 7}

    def test_auth_none_is_omitted(self):
        """No auth member at all when auth is None."""
        obj = json.loads(encode_request(Request(method="user.login", params={}, id=0)))
        assert "auth" not in obj

    def test_empty_auth_is_kept(self):
        """An empty token is still sent."""
        obj = json.loads(encode_request(Request(method="host.get", params={}, id=0, auth="")))
        assert obj["auth"] == ""

    def test_round_trip(self):
        """Encode → decode preserves method and params."""
        req = Request(method="history.get", params={"itemids": ["1", "2"], "limit": 5}, id=3, auth="t")
        decoded = decode_request(encode_request(req))
        assert decoded == req

    def test_unserializable_params(self):
        """Params that JSON cannot represent raise TypeError."""
        with pytest.raises(TypeError):
            encode_request(Request(method="host.get", params={"x": object()}, id=0))

    def test_nan_params(self):
        """NaN is not valid JSON and is rejected."""
        with pytest.raises(ValueError):
            encode_request(Request(method="host.get", params={"x": float("nan")}, id=0))


class TestResponseDecoding:
    """decode_response envelope parsing."""

    def test_success(self):
        """Result and id are taken verbatim; error defaults to code 0."""
        resp = decode_response(b'{"jsonrpc": "2.0", "result": "abc123token", "id": 0}')
        assert resp.result == "abc123token"
        assert resp.id == 0
        assert resp.jsonrpc == "2.0"
        assert resp.error == RpcError()
        assert not resp.error.failed

    def test_error(self):
        """Error object fields are decoded and the result stays None."""
        body = json.dumps(
            {
                "jsonrpc": "2.0",
                "error": {"code": -32602, "message": "Invalid params", "data": "Login name or password is incorrect"},
                "id": 1,
            }
        ).encode()
        resp = decode_response(body)
        assert resp.error.failed
        assert resp.error.code == -32602
        assert resp.error.message == "Invalid params"
        assert resp.error.data == "Login name or password is incorrect"
        assert resp.result is None

    def test_error_missing_data(self):
        """Missing message/data default to empty strings."""
        resp = decode_response(b'{"error": {"code": -32500}, "id": 1}')
        assert resp.error == RpcError(code=-32500)

    def test_result_stays_opaque(self):
        """Nested result values are not reshaped."""
        result = [{"hostid": "10084", "groups": [{"groupid": "4"}], "flags": 0}]
        resp = decode_response(json.dumps({"jsonrpc": "2.0", "result": result, "id": 2}).encode())
        assert resp.result == result

    def test_string_numbers_keep_precision(self):
        """Text values are never converted to floats."""
        resp = decode_response(b'{"result": [{"clock": "1700000000", "value": "3.14159265358979", "itemid": "1"}], "id": 0}')
        assert resp.result[0]["value"] == "3.14159265358979"

    def test_zero_value(self):
        """Default Response is the zero-value envelope."""
        resp = Response()
        assert resp.jsonrpc == ""
        assert resp.result is None
        assert resp.id == 0
        assert not resp.error.failed


class TestDecodeEdgeCases:
    """Malformed bodies raise ValueError."""

    @pytest.mark.parametrize("body", [b"", b"not json", b'{"result": ', b"[1, 2]", b'"text"', b"\xff\xfe"])
    def test_malformed(self, body: bytes):
        """Non-JSON and non-object bodies are rejected."""
        with pytest.raises(ValueError):
            decode_response(body)

    def test_error_not_object(self):
        """A string error member is rejected."""
        with pytest.raises(ValueError):
            decode_response(b'{"error": "boom", "id": 0}')

    def test_error_code_not_int(self):
        """A non-integer error code is rejected."""
        with pytest.raises(ValueError):
            decode_response(b'{"error": {"code": "x"}, "id": 0}')

    def test_null_error(self):
        """A null error member means success."""
        resp = decode_response(b'{"error": null, "result": [], "id": 4}')
        assert not resp.error.failed
        assert resp.id == 4

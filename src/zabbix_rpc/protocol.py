"""JSON-RPC 2.0 envelopes as spoken by the Zabbix API.

Request:  {"jsonrpc": "2.0", "method": "host.get", "params": {...}, "auth": "token", "id": 1}
Response: {"jsonrpc": "2.0", "result": [...], "id": 1}
Error:    {"jsonrpc": "2.0", "error": {"code": -32602, "message": "Invalid params", "data": "..."}, "id": 1}

The "auth" member is omitted entirely when a request carries no token
(user.login must be sent without it).
"""

import json
from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class Request:
    """Outgoing envelope. `auth=None` drops the member from the wire form."""

    method: str
    params: Any
    id: int
    auth: str | None = None


@dataclass(frozen=True)
class RpcError:
    """Server error object. Code 0 means no error."""

    code: int = 0
    message: str = ""
    data: str = ""

    @property
    def failed(self) -> bool:
        """True when the server reported a failure."""
        return self.code != 0


@dataclass(frozen=True)
class Response:
    """Incoming envelope. `result` stays opaque until a caller narrows it."""

    jsonrpc: str = ""
    error: RpcError = field(default_factory=RpcError)
    result: Any = None
    id: int = 0


def encode_request(req: Request) -> bytes:
    """Serialize a Request to JSON bytes.

    Raises:
        TypeError, ValueError: If params are not JSON-serializable.

    """
    payload: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": req.method, "params": req.params}
    if req.auth is not None:
        payload["auth"] = req.auth
    payload["id"] = req.id
    return json.dumps(payload, allow_nan=False).encode()


def decode_request(data: bytes) -> Request:
    """Deserialize JSON bytes into a Request.

    The inverse of encode_request, for servers and test doubles that read requests.
    """
    obj = json.loads(data)
    return Request(method=obj["method"], params=obj.get("params"), id=obj["id"], auth=obj.get("auth"))


def _decode_error(obj: object) -> RpcError:
    if obj is None:
        return RpcError()
    if not isinstance(obj, dict):
        raise ValueError(f"error member must be an object, got {type(obj).__name__}")
    code = obj.get("code", 0)
    if not isinstance(code, int) or isinstance(code, bool):
        raise ValueError(f"error code must be an integer, got {code!r}")
    return RpcError(code=code, message=str(obj.get("message") or ""), data=str(obj.get("data") or ""))


def decode_response(data: bytes) -> Response:
    """Deserialize a complete response body into a Response.

    Raises:
        ValueError: If the body is not a JSON object or the error member is malformed.

    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError(f"response must be a JSON object, got {type(obj).__name__}")
    resp_id = obj.get("id")
    return Response(
        jsonrpc=str(obj.get("jsonrpc") or ""),
        error=_decode_error(obj.get("error")),
        result=obj.get("result"),
        id=resp_id if isinstance(resp_id, int) and not isinstance(resp_id, bool) else 0,
    )

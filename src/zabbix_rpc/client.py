"""Synchronous session client for the Zabbix JSON-RPC API.

Each call opens its own HTTP connection and blocks until the full response
is read. Only one request is in flight per session, so responses never need
to be matched against a table of pending ids.
"""

import logging
from types import TracebackType
from typing import Any, Self, TypeVar

import httpx
from pydantic import TypeAdapter

from zabbix_rpc import records
from zabbix_rpc.errors import DecodingError, EncodingError, ProtocolError, TransportError, ZabbixAPIError
from zabbix_rpc.protocol import Request, Response, decode_response, encode_request
from zabbix_rpc.records import Graph, GraphItem, HistoryItem, Host

logger = logging.getLogger(__name__)

T = TypeVar("T")

_HEADERS = {"Content-Type": "application/json-rpc"}

# Methods the server rejects when an "auth" member is present.
_ANONYMOUS_METHODS = frozenset({"user.login"})


class ZabbixAPI:
    """One authenticated conversation with a Zabbix server.

    Owns the endpoint, credentials, request id counter and auth token.
    Instances are not safe to share between threads; use one per caller.
    """

    def __init__(
        self,
        url: str,
        user: str,
        password: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize an unauthenticated session.

        Args:
            url: JSON-RPC endpoint, e.g. ``https://zabbix.example.com/api_jsonrpc.php``.
            user: Login name.
            password: Login password.
            timeout: Per-call network timeout in seconds.
            transport: Optional httpx transport (tests plug in ``httpx.MockTransport``).

        """
        self._url = url
        self._user = user
        self._password = password
        self._timeout = timeout
        self._transport = transport
        self._id = 0
        self._auth = ""

    def __enter__(self) -> Self:
        self.login()
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        if not self.is_authenticated:
            return
        if exc_type is None:
            self.logout()
            return
        # Keep the body's failure; a failed logout must not replace it.
        try:
            self.logout()
        except ZabbixAPIError as e:
            logger.warning("Logout after failed call did not succeed: %s", e)

    @property
    def auth(self) -> str:
        """Current session token, empty before login and after logout."""
        return self._auth

    @property
    def is_authenticated(self) -> bool:
        return self._auth != ""

    # --- Transport ---

    def request(self, method: str, params: Any) -> Response:
        """Send one call and return the decoded envelope without checking its error.

        The id counter advances exactly once per call, whatever the outcome.
        Every method except user.login carries the current token, even an empty
        one before login, so "auth" is only omitted for user.login.

        Raises:
            EncodingError: If params cannot be serialized.
            TransportError: If the server cannot be reached or the body cannot be read.
            DecodingError: If the body is not a JSON-RPC envelope.

        """
        request_id = self._id
        self._id += 1
        auth = None if method in _ANONYMOUS_METHODS else self._auth
        try:
            body = encode_request(Request(method=method, params=params, id=request_id, auth=auth))
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"cannot encode params for {method}: {e}") from e

        logger.debug("Request id=%d method=%s", request_id, method)
        data = self._post(body)
        try:
            return decode_response(data)
        except (ValueError, RecursionError) as e:
            raise DecodingError(f"malformed response to {method}: {e}") from e

    def _post(self, body: bytes) -> bytes:
        """POST a request body and return the complete response body.

        The body is streamed into memory because large results are sent
        chunked, without a Content-Length.
        """
        try:
            with (
                httpx.Client(transport=self._transport, timeout=self._timeout) as client,
                client.stream("POST", self._url, content=body, headers=_HEADERS) as response,
            ):
                data = response.read()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{self._url}: {e}") from e
        if not response.is_success:
            logger.warning("HTTP %d from %s", response.status_code, self._url)
        return data

    def _checked(self, method: str, params: Any) -> Response:
        resp = self.request(method, {} if params is None else params)
        if resp.error.failed:
            raise ProtocolError(resp.error)
        return resp

    def call(self, method: str, params: Any = None) -> Any:
        """Send one call and return its opaque result.

        Raises:
            ProtocolError: If the server reports an error.

        """
        return self._checked(method, params).result

    def _narrow(self, method: str, params: Any, adapter: TypeAdapter[T]) -> T:
        resp = self._checked(method, params)
        try:
            return records.narrow(adapter, resp.result)
        except ValueError as e:
            raise DecodingError(f"{method}: {e}", resp) from e

    # --- Session ---

    def login(self) -> str:
        """Authenticate and store the session token.

        Raises:
            ProtocolError: If the credentials are rejected. The token stays unset.
            DecodingError: If the server returns something other than a token string.

        """
        resp = self.request("user.login", {"user": self._user, "password": self._password})
        if resp.error.failed:
            logger.info("Login failed for %s: %s", self._user, resp.error.data)
            raise ProtocolError(resp.error)
        if not isinstance(resp.result, str):
            raise DecodingError("user.login: result is not a token string", resp)
        self._auth = resp.result
        logger.info("Logged in as %s", self._user)
        return self._auth

    def logout(self) -> None:
        """End the session on the server and forget the token."""
        self.call("user.logout")
        self._auth = ""
        logger.info("Logged out %s", self._user)

    def version(self) -> str:
        """Return the server API version string."""
        resp = self._checked("APIInfo.version", None)
        if not isinstance(resp.result, str):
            raise DecodingError("APIInfo.version: result is not a string", resp)
        return resp.result

    # --- Resources ---

    def user(self, action: str, params: Any = None) -> list[Any]:
        """Call ``user.<action>``."""
        return self._narrow(f"user.{action}", params, records.USERS)

    def host(self, action: str, params: Any = None) -> list[Host]:
        """Call ``host.<action>``."""
        return self._narrow(f"host.{action}", params, records.HOSTS)

    def graph(self, action: str, params: Any = None) -> list[Graph]:
        """Call ``graph.<action>``."""
        return self._narrow(f"graph.{action}", params, records.GRAPHS)

    def graph_item(self, action: str, params: Any = None) -> list[GraphItem]:
        """Call ``graphitem.<action>``."""
        return self._narrow(f"graphitem.{action}", params, records.GRAPH_ITEMS)

    def history(self, action: str, params: Any = None) -> list[HistoryItem]:
        """Call ``history.<action>``."""
        return self._narrow(f"history.{action}", params, records.HISTORY)

"""Failure taxonomy for API calls."""

from zabbix_rpc.protocol import Response, RpcError


class ZabbixAPIError(Exception):
    """Base class for every failure raised by the client."""

    kind = "error"


class TransportError(ZabbixAPIError):
    """The connection could not be established or the body could not be read."""

    kind = "transport_error"


class EncodingError(ZabbixAPIError):
    """Request parameters could not be serialized. No network call was made."""

    kind = "encoding_error"


class DecodingError(ZabbixAPIError):
    """The response body or its result could not be decoded."""

    kind = "decoding_error"

    def __init__(self, message: str, response: Response | None = None) -> None:
        """Initialize with a description and the envelope decoded so far.

        Args:
            message: Human-readable error description.
            response: Envelope available to the caller. A zero-value envelope
                when the body itself was unreadable.

        """
        super().__init__(message)
        self.response = response if response is not None else Response()


class ProtocolError(ZabbixAPIError):
    """The server answered with a non-zero error code."""

    kind = "protocol_error"

    def __init__(self, error: RpcError) -> None:
        """Initialize from the server's error object.

        Args:
            error: Error object from the response envelope.

        """
        super().__init__(error.data or error.message)
        self.error = error

    @property
    def code(self) -> int:
        """Server error code."""
        return self.error.code

    @property
    def message(self) -> str:
        """Short server error message."""
        return self.error.message

    @property
    def data(self) -> str:
        """Detailed server explanation."""
        return self.error.data

"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from typing import Any, NoReturn

import typer


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_version(self, version: str) -> None:
        """Print the server API version."""
        self._success({"version": version}, version)

    def print_login_ok(self, user: str) -> None:
        """Print credential check confirmation."""
        self._success({"user": user}, f"Logged in as '{user}'.")

    def print_records(self, method: str, items: list[Any]) -> None:
        """Print records returned by a resource call, one JSON document per line."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"method": method, "result": items}}))
        else:
            for item in items:
                print(json.dumps(item, ensure_ascii=False))

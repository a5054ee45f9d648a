"""Show the server API version."""

import typer

from zabbix_rpc.app_context import use_context
from zabbix_rpc.errors import ZabbixAPIError


def version(ctx: typer.Context) -> None:
    """Show the server API version (no login needed)."""
    app = use_context(ctx)
    try:
        result = app.session().version()
    except ZabbixAPIError as e:
        app.out.print_error_and_exit(e.kind, str(e))
    app.out.print_version(result)

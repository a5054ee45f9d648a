"""Verify credentials."""

import typer

from zabbix_rpc.app_context import use_context
from zabbix_rpc.errors import ZabbixAPIError


def login(ctx: typer.Context) -> None:
    """Log in and out again to verify the configured credentials."""
    app = use_context(ctx)
    try:
        api = app.session()
        api.login()
        api.logout()
    except ZabbixAPIError as e:
        app.out.print_error_and_exit(e.kind, str(e))
    app.out.print_login_ok(app.cfg.user)

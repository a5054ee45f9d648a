"""Query resource families: user, host, graph, graph item, history."""

import json
from collections.abc import Callable
from typing import Any

import typer
from pydantic import BaseModel

from zabbix_rpc.app_context import AppContext, use_context
from zabbix_rpc.client import ZabbixAPI
from zabbix_rpc.errors import ZabbixAPIError

PARAMS_HELP = 'Call parameters as a JSON value, e.g. \'{"output": "extend"}\''


def _parse_params(app: AppContext, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        app.out.print_error_and_exit("invalid_params", f"--params is not valid JSON: {e}")


def _run(
    ctx: typer.Context, family: str, action: str, raw_params: str, accessor: Callable[[ZabbixAPI, str, Any], list[Any]]
) -> None:
    """Log in, call one resource action, log out, and print the records."""
    app = use_context(ctx)
    params = _parse_params(app, raw_params)
    try:
        with app.session() as api:
            items = accessor(api, action, params)
    except ZabbixAPIError as e:
        app.out.print_error_and_exit(e.kind, str(e))
    dumped = [item.model_dump() if isinstance(item, BaseModel) else item for item in items]
    app.out.print_records(f"{family}.{action}", dumped)


def user(ctx: typer.Context, action: str, params: str = typer.Option("{}", help=PARAMS_HELP)) -> None:
    """Call user.ACTION."""
    _run(ctx, "user", action, params, ZabbixAPI.user)


def host(ctx: typer.Context, action: str, params: str = typer.Option("{}", help=PARAMS_HELP)) -> None:
    """Call host.ACTION."""
    _run(ctx, "host", action, params, ZabbixAPI.host)


def graph(ctx: typer.Context, action: str, params: str = typer.Option("{}", help=PARAMS_HELP)) -> None:
    """Call graph.ACTION."""
    _run(ctx, "graph", action, params, ZabbixAPI.graph)


def graph_item(ctx: typer.Context, action: str, params: str = typer.Option("{}", help=PARAMS_HELP)) -> None:
    """Call graphitem.ACTION."""
    _run(ctx, "graphitem", action, params, ZabbixAPI.graph_item)


def history(ctx: typer.Context, action: str, params: str = typer.Option("{}", help=PARAMS_HELP)) -> None:
    """Call history.ACTION."""
    _run(ctx, "history", action, params, ZabbixAPI.history)

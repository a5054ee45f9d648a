"""CLI entry point for zabbix-rpc."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from zabbix_rpc.app_context import AppContext
from zabbix_rpc.commands.login import login
from zabbix_rpc.commands.resources import graph, graph_item, history, host, user
from zabbix_rpc.commands.version import version
from zabbix_rpc.config import Config
from zabbix_rpc.log import setup_logging
from zabbix_rpc.output import Output

app = TyperPlus(package_name="zabbix-rpc")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
    url: Annotated[str | None, typer.Option("--url", help="JSON-RPC endpoint URL.")] = None,
    user_: Annotated[str | None, typer.Option("--user", help="Login name.")] = None,
    password: Annotated[str | None, typer.Option("--password", help="Login password.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log requests and HTTP details.")] = False,
) -> None:
    """Query a Zabbix server through its JSON-RPC API."""
    cfg = Config.build(data_dir, url=url, user=user_, password=password)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, verbose=verbose)
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


# Session
app.command(aliases=["v"])(version)
app.command()(login)

# Resources
app.command(aliases=["u"])(user)
app.command(aliases=["h"])(host)
app.command(aliases=["g"])(graph)
app.command("graph-item")(graph_item)
app.command(aliases=["hist"])(history)

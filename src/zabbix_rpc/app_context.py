"""Application context shared across CLI commands."""

from dataclasses import dataclass

import typer

from zabbix_rpc.client import ZabbixAPI
from zabbix_rpc.config import Config
from zabbix_rpc.output import Output


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config

    def session(self) -> ZabbixAPI:
        """Create a fresh, unauthenticated API session from the configuration."""
        if not self.cfg.url:
            self.out.print_error_and_exit("missing_url", "Server URL is not set (use --url or config.toml).")
        return ZabbixAPI(self.cfg.url, self.cfg.user, self.cfg.password, timeout=self.cfg.timeout)


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result

"""Per-invocation CLI state: who is calling and with which settings."""

from __future__ import annotations

from dataclasses import dataclass

import click

from limestore.infrastructure.settings import Settings


@dataclass(frozen=True)
class CliContext:

    caller: str | None
    settings: Settings

    def require_caller(self) -> str:
        if not self.caller:
            raise click.UsageError("This command needs a caller: pass --as IDENTITY")
        return self.caller


pass_cli_context = click.make_pass_decorator(CliContext)

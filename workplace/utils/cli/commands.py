# -*- coding: utf-8 -*-
"""
commands

Click command factories for the workplace CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import click

from ...conf import WorkplaceSettings
from ...core.context import WorkplaceContext
from ...core.exceptions import ConfigurationError


def _open_workplace(config: str, *, context_path: Optional[str] = None,
                    bundle_dirs: Sequence[str] = ()) -> WorkplaceContext:
    """Return an initialized workplace for ``config`` or exit with status 1."""

    settings = WorkplaceSettings(
        context_path=context_path if context_path is not None else "/opencms",
        config_path=Path(config),
        bundle_dirs=[Path(item) for item in bundle_dirs],
    )
    workplace = WorkplaceContext(settings)
    try:
        return workplace.initialize()
    except ConfigurationError as error:
        click.secho(str(error), fg="red", err=True)
        raise click.exceptions.Exit(1) from error


class MenuScriptCommand:
    """Produce the `menu-script` command printing the context menu script."""

    def execute(
        self,
        config: str,
        locale: Optional[str],
        context_path: Optional[str],
        bundle_dir: Sequence[str],
    ) -> None:
        """Print the script of every configured context menu."""
        workplace = _open_workplace(config, context_path=context_path, bundle_dirs=bundle_dir)
        try:
            script = workplace.menus.generate_script(workplace.catalog(locale))
        finally:
            workplace.shutdown()
        click.echo(script, nl=False)

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for script generation."""
        return click.Command(
            name="menu-script",
            callback=self.execute,
            params=[
                click.Argument(["config"], type=click.Path(exists=True, dir_okay=False)),
                click.Option(["--locale"], default=None, help="Locale of the menu labels"),
                click.Option(["--context-path"], default=None, help="Prefix of generated links"),
                click.Option(
                    ["--bundle-dir"],
                    multiple=True,
                    type=click.Path(file_okay=False),
                    help="Additional message bundle directory",
                ),
            ],
            help="Print the explorer context menu script for a configuration.",
        )


class CheckConfigCommand:
    """Produce the `check-config` command validating a configuration."""

    def execute(self, config: str) -> None:
        """Load ``config`` and report what it declares."""
        workplace = _open_workplace(config)
        try:
            for menu in workplace.menus:
                click.echo(f"menu {menu.type_name} ({menu.type_id}): {len(menu.entries)} entries")
            for key in workplace.handlers.keys():
                click.echo(f"dialog handler {key}")
            for block in workplace.userinfo.blocks:
                click.echo(f"user info block {block.title}: {len(block.entries)} entries")
            for info in workplace.account_infos:
                click.echo(f"account field {info.label_key}")
        finally:
            workplace.shutdown()
        click.secho(f"Configuration {config} is valid.", fg="green")

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for configuration checks."""
        return click.Command(
            name="check-config",
            callback=self.execute,
            params=[click.Argument(["config"], type=click.Path(exists=True, dir_okay=False))],
            help="Validate a workplace configuration document.",
        )


# The End

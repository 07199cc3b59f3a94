# -*- coding: utf-8 -*-
"""
cli

Click entry point for the workplace tools.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import click

from .commands import CheckConfigCommand, MenuScriptCommand


class WorkplaceCLI:
    """Aggregate all CLI commands exposed by the package."""

    def __init__(self) -> None:
        """Create command instances required to build the CLI group."""
        self._menu_script_command = MenuScriptCommand()
        self._check_config_command = CheckConfigCommand()

    def create_cli(self) -> click.Group:
        """Build the Click group with all registered commands."""
        group = click.Group(
            name="workplace",
            help="Command line tools for workplace configurations.",
        )
        group.add_command(self._menu_script_command.to_click_command())
        group.add_command(self._check_config_command.to_click_command())
        return group


cli = WorkplaceCLI().create_cli()


# The End

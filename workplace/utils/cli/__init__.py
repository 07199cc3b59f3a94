# -*- coding: utf-8 -*-
"""
cli

CLI utilities for the workplace package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .commands import CheckConfigCommand, MenuScriptCommand
from .entrypoint import WorkplaceCLI, cli

__all__ = ["CheckConfigCommand", "MenuScriptCommand", "WorkplaceCLI", "cli"]


# The End

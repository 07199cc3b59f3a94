# -*- coding: utf-8 -*-
"""
cli

Entry point for the workplace CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .utils.cli import WorkplaceCLI, cli

__all__ = ["WorkplaceCLI", "cli"]


# The End

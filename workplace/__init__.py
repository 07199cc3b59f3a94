"""
__init__

Workplace module entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .application import ApplicationFactory
from .conf import WorkplaceSettings, configure, current_settings
from .core.context import WorkplaceContext
from .meta import __version__

# The End

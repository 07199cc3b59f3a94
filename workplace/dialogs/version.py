# -*- coding: utf-8 -*-
"""
version

Fetch the content of a historical resource version.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Tuple, TYPE_CHECKING

from ..core.exceptions import ValidationError
from ..core.models import ResourceVersion

if TYPE_CHECKING:  # pragma: no cover
    from ..core.context import WorkplaceContext


logger = logging.getLogger(__name__)


def parse_version_param(value: str | None) -> Tuple[str, int]:
    """Split ``"<path>:<version>"`` at the last colon."""

    token = (value or "").strip()
    path, separator, number = token.rpartition(":")
    if not separator or not path:
        raise ValidationError(f"Expected '<resource>:<version>', got {token!r}")
    try:
        version = int(number)
    except ValueError as exc:
        raise ValidationError(f"Version {number!r} is not a number") from exc
    return path, version


class VersionFetch:
    """Read one historical version through the repository adapter."""

    def __init__(self, workplace: "WorkplaceContext") -> None:
        self.workplace = workplace

    def fetch(self, resource_param: str | None) -> ResourceVersion:
        """Return the version named by ``resource_param``.

        Raises ``ValidationError`` for malformed parameters and
        ``ResourceNotFound`` when the repository has no such version.
        """

        path, version = parse_version_param(resource_param)
        logger.debug("Fetching version %d of %s", version, path)
        return self.workplace.repository.read_version(path, version)


__all__ = ["parse_version_param", "VersionFetch"]


# The End

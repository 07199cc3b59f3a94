# -*- coding: utf-8 -*-
"""
accounts

Account info fields and their lookup on user accounts.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import UserAccount
from .settings.choices import StrChoices


class AccountField(StrChoices):
    """Profile fields an account info entry may point to."""

    ADDINFO = ("addinfo", "Additional info")
    ADDRESS = ("address", "Address")
    CITY = ("city", "City")
    COUNTRY = ("country", "Country")
    EMAIL = ("email", "Email")
    FIRSTNAME = ("firstname", "First name")
    INSTITUTION = ("institution", "Institution")
    LASTNAME = ("lastname", "Last name")
    ZIPCODE = ("zipcode", "Zip code")


class AccountFieldAccessor:
    """Read account info values from user accounts."""

    def __init__(self) -> None:
        """Bind the accessor logger."""

        self.logger = logging.getLogger(__name__)

    def get_value(self, user: UserAccount, info: "AccountInfo") -> str | None:
        """Return the value ``info`` describes on ``user``.

        Additional info fields read ``user.additional_info``; all other fields
        read the attribute named after the field. Lookup failures are logged
        and yield ``None``.
        """

        if info.is_additional_info():
            value = user.additional_info.get(info.add_info_key)
            return None if value is None else str(value)
        try:
            value = getattr(user, info.field.value)
        except AttributeError as exc:
            self.logger.warning(
                "Cannot read account field %s of user %s: %s",
                info.field.value,
                getattr(user, "name", "?"),
                exc,
            )
            return None
        return "" if value is None else str(value)


_accessor = AccountFieldAccessor()


@dataclass(frozen=True)
class AccountInfo:
    """One configured account info field."""

    field: AccountField
    add_info_key: str | None = None
    editable: bool = True

    @classmethod
    def from_strings(
        cls,
        field: str,
        add_info_key: str | None = None,
        editable: str | bool | None = None,
    ) -> "AccountInfo":
        """Parse ``field`` and ``editable`` as read from configuration.

        Raises ``ValueError`` when ``field`` names no known account field.
        """

        token = (field or "").strip().lower()
        if token not in AccountField.values():
            raise ValueError(f"Unknown account info field {field!r}")
        if isinstance(editable, bool):
            flag = editable
        elif editable is None or not str(editable).strip():
            flag = True
        else:
            flag = str(editable).strip().lower() == "true"
        key = add_info_key.strip() if add_info_key else None
        return cls(field=AccountField(token), add_info_key=key or None, editable=flag)

    def is_additional_info(self) -> bool:
        """Return ``True`` when the value lives in the additional info table."""

        return self.field == AccountField.ADDINFO and bool(self.add_info_key)

    @property
    def label_key(self) -> str:
        """Return the message key used to label this field."""

        if self.is_additional_info():
            return f"account.addinfo.{self.add_info_key}"
        return f"account.field.{self.field.value}"

    def get_value(self, user: UserAccount) -> str | None:
        """Return the value of this field for ``user``."""

        return _accessor.get_value(user, self)


__all__ = ["AccountField", "AccountFieldAccessor", "AccountInfo"]


# The End

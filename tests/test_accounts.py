# -*- coding: utf-8 -*-
"""Tests for account info fields and user info descriptions."""

from __future__ import annotations

from decimal import Decimal

import pytest

from workplace.core.accounts import AccountField, AccountFieldAccessor, AccountInfo
from workplace.core.exceptions import UnknownTypeError
from workplace.core.models import UserAccount
from workplace.core.userinfo import UserInfoBlock, UserInfoConfiguration, UserInfoEntry
from workplace.widgets import CheckboxWidget, SelectWidget, TextWidget


@pytest.fixture
def user() -> UserAccount:
    return UserAccount(
        "editor",
        "Eddie",
        "Editor",
        "",
        "Main Street 1",
        {"USER_TOWN": "Berlin", "USER_PHONE": 5551234},
    )


def test_from_strings_parses_field_and_flag() -> None:
    info = AccountInfo.from_strings("FirstName", None, "false")

    assert info.field == AccountField.FIRSTNAME
    assert info.editable is False
    assert AccountInfo.from_strings("email").editable is True


def test_from_strings_rejects_unknown_field() -> None:
    with pytest.raises(ValueError):
        AccountInfo.from_strings("password")


def test_additional_info_detection() -> None:
    assert AccountInfo.from_strings("addinfo", "USER_PHONE").is_additional_info()
    assert not AccountInfo.from_strings("addinfo", "  ").is_additional_info()
    assert not AccountInfo.from_strings("city").is_additional_info()


def test_get_value_reads_fields(user: UserAccount) -> None:
    assert AccountInfo.from_strings("firstname").get_value(user) == "Eddie"
    assert AccountInfo.from_strings("city").get_value(user) == "Berlin"
    assert AccountInfo.from_strings("email").get_value(user) == ""
    assert AccountInfo.from_strings("country").get_value(user) == ""
    assert AccountInfo.from_strings("addinfo", "USER_PHONE").get_value(user) == "5551234"
    assert AccountInfo.from_strings("addinfo", "USER_FAX").get_value(user) is None


def test_get_value_logs_lookup_failures(caplog) -> None:
    info = AccountInfo.from_strings("institution")

    with caplog.at_level("WARNING"):
        assert AccountFieldAccessor().get_value(object(), info) is None  # type: ignore[arg-type]
    assert "Cannot read account field institution" in caplog.text


def test_label_keys() -> None:
    assert AccountInfo.from_strings("zipcode").label_key == "account.field.zipcode"
    assert AccountInfo.from_strings("addinfo", "USER_PHONE").label_key == "account.addinfo.USER_PHONE"


def test_user_info_entry_value_types() -> None:
    assert UserInfoEntry(key="age", type_name="java.lang.Integer").convert("42") == 42
    assert UserInfoEntry(key="rate", type_name="decimal").convert("1.5") == Decimal("1.5")
    assert UserInfoEntry(key="flag", type_name="bool").convert("yes") is True
    assert UserInfoEntry(key="name").convert("") is None


def test_user_info_widget_fallbacks() -> None:
    assert isinstance(UserInfoEntry(key="a", widget_name="checkbox").build_widget(), CheckboxWidget)
    assert isinstance(UserInfoEntry(key="a", widget_name="spinner").build_widget(), TextWidget)
    assert isinstance(UserInfoEntry(key="a", widget_name="select").build_widget(), TextWidget)
    assert isinstance(
        UserInfoEntry(key="a", widget_name="select", params="m:Male|f:Female").build_widget(),
        SelectWidget,
    )


def test_user_info_configuration_rejects_unknown_types() -> None:
    config = UserInfoConfiguration()

    with pytest.raises(UnknownTypeError):
        config.add_block(UserInfoBlock(title="x", entries=[UserInfoEntry(key="a", type_name="java.awt.Color")]))
    assert config.blocks == ()


def test_user_info_schema() -> None:
    config = UserInfoConfiguration(
        [
            UserInfoBlock(
                title="Contact",
                entries=[
                    UserInfoEntry(key="phone", optional=True),
                    UserInfoEntry(key="gender", widget_name="select", params="m:Male|f:Female"),
                    UserInfoEntry(key="newsletter", widget_name="checkbox", optional=True),
                ],
            )
        ]
    )

    schema = config.build_schema({"phone": " 555 ", "newsletter": "yes"})

    assert schema["required"] == ["gender"]
    assert schema["properties"]["gender"]["enum"] == ["m", "f"]
    assert schema["properties"]["phone"]["group"] == "Contact"
    assert schema["properties"]["phone"]["default"] == "555"
    assert schema["properties"]["newsletter"]["default"] is True
    assert "default" not in schema["properties"]["gender"]
    assert config.get_entry("phone").optional is True
    assert config.get_entry("fax") is None
    assert [entry.key for entry in config.iter_entries()] == ["phone", "gender", "newsletter"]


def test_user_info_schema_readonly_keys() -> None:
    config = UserInfoConfiguration(
        [UserInfoBlock(title="Contact", entries=[UserInfoEntry(key="phone"), UserInfoEntry(key="fax")])]
    )

    schema = config.build_schema(readonly=["fax"])

    assert schema["properties"]["fax"]["readonly"] is True
    assert "readonly" not in schema["properties"]["phone"]
    assert UserInfoEntry(key="a", widget_name="checkbox").build_widget(readonly=True).get_schema()["readonly"]


# The End

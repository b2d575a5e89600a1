from __future__ import annotations

import pytest

from plugforge.naming import to_kebab_case, to_snake_case


@pytest.mark.parametrize(
    "value, expected",
    [
        ("MyPlugin", "my-plugin"),
        ("myPluginName", "my-plugin-name"),
        ("my plugin", "my-plugin"),
        ("my_plugin", "my-plugin"),
        ("my  \t_plugin", "my-plugin"),
        ("already-kebab", "already-kebab"),
        ("HTTPServer", "httpserver"),
        ("v2Plugin", "v2plugin"),
    ],
)
def test_to_kebab_case(value, expected):
    assert to_kebab_case(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("MyPlugin", "my_plugin"),
        ("myPluginName", "my_plugin_name"),
        ("my-plugin", "my_plugin"),
        ("my - plugin", "my_plugin"),
        ("already_snake", "already_snake"),
    ],
)
def test_to_snake_case(value, expected):
    assert to_snake_case(value) == expected


@pytest.mark.parametrize("value", ["MyPlugin", "care-fe.Plugin", "My Cool_Plugin", "abc", "ABC"])
def test_kebab_case_is_lowercase_and_idempotent(value):
    kebab = to_kebab_case(value)
    assert kebab == kebab.lower()
    assert not any(char.isspace() for char in kebab)
    assert to_kebab_case(kebab) == kebab


def test_empty_input_returns_empty_string():
    assert to_kebab_case("") == ""
    assert to_snake_case("") == ""

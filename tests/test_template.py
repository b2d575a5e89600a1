from __future__ import annotations

from pathlib import Path

import pytest

from plugforge.schema import ReplacementMap
from plugforge.template import PlaceholderSubstitutor, substitute


@pytest.fixture()
def replacements() -> ReplacementMap:
    return ReplacementMap(project_name="MyPlugin", kebab="my-plugin", snake="my_plugin", port=10120)


@pytest.fixture()
def substitutor() -> PlaceholderSubstitutor:
    return PlaceholderSubstitutor()


def test_substitute_replaces_every_occurrence(replacements: ReplacementMap):
    text = "{{PORT}} / {{PORT}} / {{PORT}}"
    assert substitute(text, replacements) == "10120 / 10120 / 10120"


def test_substitute_handles_all_tokens(replacements: ReplacementMap):
    text = "{{PROJECT_NAME}} {{PROJECT_NAME_KEBAB}} {{PROJECT_NAME_SNAKE}} {{PORT}}"
    assert substitute(text, replacements) == "MyPlugin my-plugin my_plugin 10120"


def test_substitute_leaves_other_braces_alone(replacements: ReplacementMap):
    text = "{{ PROJECT_NAME }} {{project_name}} {{PROJECT_NAME_CAMEL}} {PORT} ${{PORT}}"
    assert substitute(text, replacements) == "{{ PROJECT_NAME }} {{project_name}} {{PROJECT_NAME_CAMEL}} {PORT} $10120"


def test_substitute_without_tokens_is_identity(replacements: ReplacementMap):
    text = "const x = { a: 1 };\n"
    assert substitute(text, replacements) == text


def test_substitute_treats_values_literally():
    replacements = ReplacementMap(project_name=r"A.b\1", kebab="a.b", snake="a.b", port=2048)
    assert substitute("{{PROJECT_NAME}}", replacements) == r"A.b\1"


def test_render_file_rewrites_text(tmp_path: Path, substitutor: PlaceholderSubstitutor, replacements: ReplacementMap):
    path = tmp_path / "manifest.ts"
    path.write_bytes(b'plugin: "{{PROJECT_NAME_KEBAB}}",\r\nport: {{PORT}}\r\n')

    assert substitutor.render_file(path, replacements) is True
    assert path.read_bytes() == b'plugin: "my-plugin",\r\nport: 10120\r\n'


def test_render_file_keeps_untouched_file_identical(
    tmp_path: Path, substitutor: PlaceholderSubstitutor, replacements: ReplacementMap
):
    path = tmp_path / "plain.txt"
    path.write_text("nothing to see\n", encoding="utf-8")
    before = path.stat().st_mtime_ns

    assert substitutor.render_file(path, replacements) is True
    assert path.read_text(encoding="utf-8") == "nothing to see\n"
    assert path.stat().st_mtime_ns == before


def test_render_file_skips_binary_content(
    tmp_path: Path, substitutor: PlaceholderSubstitutor, replacements: ReplacementMap
):
    payload = b"\xff\xfe{{PORT}}\x00\x81"
    path = tmp_path / "image.bin"
    path.write_bytes(payload)

    assert substitutor.render_file(path, replacements) is False
    assert path.read_bytes() == payload


def test_render_file_propagates_missing_file(
    tmp_path: Path, substitutor: PlaceholderSubstitutor, replacements: ReplacementMap
):
    with pytest.raises(FileNotFoundError):
        substitutor.render_file(tmp_path / "missing.txt", replacements)

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

MANIFEST = """const manifest = {
  plugin: "{{PROJECT_NAME_KEBAB}}",
  remote: "{{PROJECT_NAME_SNAKE}}",
  title: "{{PROJECT_NAME}}",
  port: {{PORT}},
} as const;

export default manifest;
"""


@pytest.fixture()
def template_tree(tmp_path: Path) -> Path:
    """A small template containing excluded and binary entries."""

    root = tmp_path / "template"
    (root / "src" / "lib").mkdir(parents=True)
    (root / "src" / "manifest.ts").write_text(MANIFEST, encoding="utf-8")
    (root / "src" / "lib" / "request.ts").write_text(
        'export const base = "http://localhost:{{PORT}}";\n', encoding="utf-8"
    )
    (root / "README.md").write_text("# {{PROJECT_NAME}}\n\nKeep {{UNKNOWN}} as is.\n", encoding="utf-8")
    (root / "package.json").write_text('{"name": "{{PROJECT_NAME_KEBAB}}"}\n', encoding="utf-8")
    (root / "package-lock.json").write_text("{}\n", encoding="utf-8")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe{{PORT}}\x00")

    (root / ".git" / "objects").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    (root / "src" / "node_modules" / "react").mkdir(parents=True)
    (root / "src" / "node_modules" / "react" / "index.js").write_text("module.exports = {};\n", encoding="utf-8")
    return root

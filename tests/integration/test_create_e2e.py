"""End-to-end runs of ``rcgen create`` against temporary workspaces.

Exercises the full chain: CLI parsing -> workspace lookup -> convention
scan -> generation -> barrel update -> exit status.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rcgen.pipeline import main

pytestmark = pytest.mark.integration


def _run(*argv: str) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code


class TestCreateScenarios:
    def test_foo_bar_typed_sass(self, workspace: Path, monkeypatch):
        target = workspace / "src" / "components"
        target.mkdir()
        monkeypatch.chdir(workspace)

        assert _run("create", "foo-bar", "--path", str(target), "--isTs", "--isScss") == 0

        component = target / "FooBar"
        assert sorted(p.name for p in component.iterdir()) == [
            "FooBar.scss",
            "FooBar.stories.tsx",
            "FooBar.test.tsx",
            "FooBar.tsx",
            "index.ts",
        ]
        assert 'export { default as FooBar } from "./FooBar"' in (
            target / "index.ts"
        ).read_text(encoding="utf-8")
        assert 'import "./FooBar.scss"' in (component / "FooBar.tsx").read_text(encoding="utf-8")

    def test_inference_from_ts_file(self, ts_workspace: Path, monkeypatch):
        monkeypatch.chdir(ts_workspace)

        assert _run("create", "foo") == 0

        component = ts_workspace / "Foo"
        assert (component / "Foo.tsx").is_file()
        assert (component / "Foo.css").is_file()
        assert (component / "index.ts").is_file()
        assert (ts_workspace / "index.ts").is_file()

    def test_inference_from_nested_directory(self, ts_workspace: Path, components_dir: Path, monkeypatch):
        monkeypatch.chdir(components_dir)

        assert _run("create", "card") == 0

        assert (components_dir / "Card" / "Card.tsx").is_file()

    def test_plain_workspace_is_untyped(self, workspace: Path, monkeypatch):
        monkeypatch.chdir(workspace)

        assert _run("create", "card") == 0

        assert sorted(p.name for p in (workspace / "Card").iterdir()) == [
            "Card.css",
            "Card.jsx",
            "Card.stories.jsx",
            "Card.test.jsx",
            "index.js",
        ]
        assert (workspace / "index.js").read_text(encoding="utf-8") == (
            'export { default as Card } from "./Card"'
        )

    def test_second_create_is_rejected_without_changes(self, workspace: Path, monkeypatch, snapshot):
        monkeypatch.chdir(workspace)

        assert _run("create", "card", "-ts") == 0
        after_first = snapshot(workspace)

        assert _run("create", "card", "-ts") == 1
        assert snapshot(workspace) == after_first

    def test_two_components_share_barrel(self, workspace: Path, monkeypatch):
        monkeypatch.chdir(workspace)

        assert _run("create", "card", "-ts", "-scss") == 0
        assert _run("create", "primary-button", "-ts", "-scss") == 0

        assert (workspace / "index.ts").read_text(encoding="utf-8").splitlines() == [
            'export { default as Card } from "./Card"',
            'export { default as PrimaryButton } from "./PrimaryButton"',
        ]

    def test_missing_name_writes_nothing(self, workspace: Path, monkeypatch, snapshot):
        monkeypatch.chdir(workspace)
        before = snapshot(workspace)

        assert _run("create") == 1
        assert snapshot(workspace) == before

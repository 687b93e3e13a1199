"""Tests covering output target plugins and the generate workflow."""

from __future__ import annotations

import types
from pathlib import Path

import pytest
from tagicons.app import AppContext
from tagicons.config import TagIconsConfig
from tagicons.generator import MalformedTagError
from tagicons.plugins import SnippetTarget, hookimpl
from tagicons.plugins import manager as plugin_manager
from tagicons.services import generate as generate_service
from tagicons.services.generate import TargetError, generate_snippet
from tagicons.settings import Settings, SettingsStore, TagIconPair
from tagicons.snippets import SnippetError, read_snippet


@pytest.fixture(autouse=True)
def reset_target_registry() -> None:
    """Ensure plugin discovery cache is cleared between tests."""

    generate_service.clear_target_registry_cache()
    yield
    generate_service.clear_target_registry_cache()


def _app(tmp_path: Path, *pairs: TagIconPair, **overrides) -> AppContext:
    config = TagIconsConfig(vault_dir=tmp_path / "vault", **overrides)
    store = SettingsStore(config.settings_path)
    store.save(Settings(tag_icon_pairs=list(pairs)))
    return AppContext(config=config, store=store)


def _add_plugin_module(monkeypatch, module: types.ModuleType) -> None:
    original_iter = plugin_manager._builtin_plugin_modules

    def _combined() -> tuple[object, ...]:
        return original_iter() + (module,)

    monkeypatch.setattr(plugin_manager, "iter_plugin_modules", _combined)


def test_builtin_targets_are_listed(tmp_path: Path) -> None:
    app = _app(tmp_path)

    descriptions = dict(generate_service.get_target_descriptions(app.config))

    assert set(descriptions) == {"snippet", "stdout"}
    assert "tags.css" in descriptions["snippet"]


def test_generate_writes_vault_snippet(tmp_path: Path) -> None:
    app = _app(tmp_path, TagIconPair("task/inbox", "📥"))

    result = generate_snippet(app)

    assert result.ok
    assert result.path == tmp_path / "vault" / ".obsidian" / "snippets" / "tags.css"
    assert read_snippet(result.path) == result.css
    assert 'content: "📥";' in result.css


def test_generate_to_stdout_writes_nothing(tmp_path: Path, capsys) -> None:
    app = _app(tmp_path, TagIconPair("a/b", "X"))

    result = generate_snippet(app, target_id="STDOUT")

    assert result.path is None
    assert capsys.readouterr().out == result.css
    assert not app.config.snippets_dir.exists()


def test_write_failure_is_logged_and_reported(tmp_path: Path, caplog) -> None:
    app = _app(tmp_path, TagIconPair("a/b", "X"))
    app.config.snippets_dir.write_text("blocking file", encoding="utf-8")

    with caplog.at_level("ERROR", logger="tagicons.services.generate"):
        result = generate_snippet(app)

    assert not result.ok
    assert isinstance(result.error, SnippetError)
    assert "Error writing CSS file" in caplog.text


def test_malformed_tag_propagates_unless_skipped(tmp_path: Path) -> None:
    app = _app(tmp_path, TagIconPair("broken", "X"), TagIconPair("a/b", "Y"))
    with pytest.raises(MalformedTagError):
        generate_snippet(app)

    lenient = _app(
        tmp_path, TagIconPair("broken", "X"), TagIconPair("a/b", "Y"), skip_malformed=True
    )
    result = generate_snippet(lenient)
    assert ".cm-tag-ab" in result.css
    assert "broken" not in result.css


def test_unknown_target_raises(tmp_path: Path) -> None:
    app = _app(tmp_path)

    with pytest.raises(TargetError) as excinfo:
        generate_snippet(app, target_id="nope")

    assert "snippet, stdout" in str(excinfo.value)


def test_custom_plugin_target_is_used(tmp_path: Path, monkeypatch) -> None:
    state: dict[str, object] = {}
    module = types.ModuleType("tagicons_test_plugin")

    @hookimpl
    def snippet_targets(config: TagIconsConfig) -> tuple[SnippetTarget, ...]:
        def writer(*, css: str, config: TagIconsConfig) -> Path:
            state["css"] = css
            return config.vault_dir / "custom.css"

        return (SnippetTarget(target_id="custom", writer=writer, description="Custom"),)

    module.snippet_targets = snippet_targets
    _add_plugin_module(monkeypatch, module)

    app = _app(tmp_path, TagIconPair("a/b", "X"))
    result = generate_snippet(app, target_id="custom")

    assert result.path == app.config.vault_dir / "custom.css"
    assert state["css"] == result.css


def test_duplicate_target_ids_are_rejected(tmp_path: Path, monkeypatch) -> None:
    module = types.ModuleType("tagicons_duplicate_plugin")

    @hookimpl
    def snippet_targets() -> SnippetTarget:
        return SnippetTarget(
            target_id="Snippet", writer=lambda **_: None, description="dup"
        )

    module.snippet_targets = snippet_targets
    _add_plugin_module(monkeypatch, module)

    app = _app(tmp_path)
    with pytest.raises(TargetError):
        generate_service.get_target_descriptions(app.config)


def test_snippet_filename_override_from_plugin_table(tmp_path: Path) -> None:
    app = _app(
        tmp_path,
        TagIconPair("a/b", "X"),
        plugins={"snippet": {"filename": "icons.css"}},
    )

    descriptions = dict(generate_service.get_target_descriptions(app.config))
    result = generate_snippet(app)

    assert "icons.css" in descriptions["snippet"]
    assert result.path == app.config.snippets_dir / "icons.css"
    assert read_snippet(result.path) == result.css
    assert not app.config.snippet_path.exists()


@pytest.mark.parametrize("filename", ["", "../escape.css", 3])
def test_invalid_snippet_filename_override_is_rejected(
    tmp_path: Path, filename: object
) -> None:
    app = _app(tmp_path, plugins={"snippet": {"filename": filename}})

    with pytest.raises(TargetError):
        generate_snippet(app)

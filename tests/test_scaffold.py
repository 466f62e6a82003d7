from __future__ import annotations

import json
from pathlib import Path

import pytest

from orderly_plugin_gen.errors import DirectoryExistsError, WriteFailureError
from orderly_plugin_gen.scaffold import PluginScaffolder
from orderly_plugin_gen.schema import PluginRequest


@pytest.fixture()
def scaffolder(fake_entropy) -> PluginScaffolder:
    return PluginScaffolder(entropy=fake_entropy)


def _all_files(root: Path) -> set[str]:
    return {path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file()}


def test_widget_end_to_end(tmp_path: Path, scaffolder: PluginScaffolder):
    request = PluginRequest.build("pnl-card", "widget", tmp_path)
    report = scaffolder.create(request)

    plugin_dir = tmp_path.resolve() / "plugin-pnl-card"
    assert report.target_dir == plugin_dir
    assert report.dry_run is False
    assert _all_files(plugin_dir) == {
        "package.json",
        "tsconfig.json",
        "tsup.config.ts",
        "src/index.tsx",
        "src/components/pnlCardWidget.tsx",
        "src/components/.gitkeep",
    }
    assert set(report.paths) == _all_files(plugin_dir)

    index = (plugin_dir / "src" / "index.tsx").read_text(encoding="utf-8")
    assert "export function registerPnlCardPlugin(" in index
    component = (plugin_dir / "src" / "components" / "pnlCardWidget.tsx").read_text(encoding="utf-8")
    assert "export const PnlCardWidget:" in component
    manifest = json.loads((plugin_dir / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "@orderly.network/plugin-pnl-card"
    assert (plugin_dir / "src" / "components" / ".gitkeep").read_text(encoding="utf-8") == ""


def test_page_end_to_end(tmp_path: Path, scaffolder: PluginScaffolder):
    report = scaffolder.create(PluginRequest.build("pnl-card", "page", tmp_path))

    assert "src/components/pnlCardPage.tsx" in report.paths
    index = (report.target_dir / "src" / "index.tsx").read_text(encoding="utf-8")
    assert "createInterceptor" not in index
    assert "export { PnlCardPage }" in index


def test_written_content_matches_plan(tmp_path: Path, scaffolder: PluginScaffolder):
    request = PluginRequest.build("order-book", "layout", tmp_path)
    plan = scaffolder.plan(request)
    scaffolder.execute(plan)

    for planned in plan.files:
        written = (plan.target_dir / planned.relative_path).read_text(encoding="utf-8")
        assert written == planned.content
    assert plan.bundle.plugin_id in (plan.target_dir / "src" / "index.tsx").read_text(encoding="utf-8")


def test_plan_derives_identifiers_once(tmp_path: Path, scaffolder: PluginScaffolder, fake_entropy):
    plan = scaffolder.plan(PluginRequest.build("pnl-card", "widget", tmp_path))
    assert fake_entropy.calls == [8]
    assert plan.bundle.plugin_id == "orderly-plugin-pnl-card-fb82d80d"


def test_dry_run_writes_nothing(tmp_path: Path, scaffolder: PluginScaffolder):
    request = PluginRequest.build("pnl-card", "widget", tmp_path, dry_run=True)
    report = scaffolder.create(request)

    assert report.dry_run is True
    assert list(tmp_path.iterdir()) == []
    assert list(report.paths) == scaffolder.plan(request).relative_paths


def test_dry_run_reports_same_paths_as_live_run(tmp_path: Path, scaffolder: PluginScaffolder):
    dry = scaffolder.create(PluginRequest.build("pnl-card", "layout", tmp_path, dry_run=True))
    live = scaffolder.create(PluginRequest.build("pnl-card", "layout", tmp_path))
    assert dry.paths == live.paths


@pytest.mark.parametrize("dry_run", [False, True])
def test_existing_directory_is_rejected(tmp_path: Path, scaffolder: PluginScaffolder, dry_run: bool):
    existing = tmp_path / "plugin-pnl-card"
    existing.mkdir()
    (existing / "keep.txt").write_text("mine", encoding="utf-8")

    with pytest.raises(DirectoryExistsError) as exc:
        scaffolder.create(PluginRequest.build("pnl-card", "widget", tmp_path, dry_run=dry_run))

    assert exc.value.path == existing.resolve()
    assert _all_files(existing) == {"keep.txt"}


def test_existing_file_at_target_is_rejected(tmp_path: Path, scaffolder: PluginScaffolder):
    (tmp_path / "plugin-pnl-card").write_text("", encoding="utf-8")
    with pytest.raises(DirectoryExistsError):
        scaffolder.create(PluginRequest.build("pnl-card", "widget", tmp_path))


def test_write_failure_keeps_files_already_written(
    tmp_path: Path, scaffolder: PluginScaffolder, monkeypatch: pytest.MonkeyPatch
):
    original_write_text = Path.write_text

    def failing_write_text(self: Path, data: str, *args, **kwargs):
        if self.name == "index.tsx":
            raise PermissionError(13, "Permission denied")
        return original_write_text(self, data, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", failing_write_text)

    with pytest.raises(WriteFailureError) as exc:
        scaffolder.create(PluginRequest.build("pnl-card", "widget", tmp_path))

    plugin_dir = tmp_path.resolve() / "plugin-pnl-card"
    assert exc.value.path == plugin_dir / "src" / "index.tsx"
    assert exc.value.written == ("package.json", "tsconfig.json", "tsup.config.ts")
    assert "Permission denied" in str(exc.value)
    assert _all_files(plugin_dir) == {"package.json", "tsconfig.json", "tsup.config.ts"}

"""Tests for destination resolution."""

from pathlib import Path

from scrum_skill.core.types import InstallConfig, InstallMode
from scrum_skill.installer.resolver import find_install_root, resolve_destination


class TestGlobalMode:
    def test_home_skills_dir(self):
        config = InstallConfig(home=Path("/u"), mode=InstallMode.GLOBAL)
        assert resolve_destination(config, Path("/a/b/node_modules/pkg")) == Path("/u/.claude/skills")

    def test_ignores_project_root(self):
        config = InstallConfig(
            home=Path("/u"), mode=InstallMode.GLOBAL, project_root=Path("/proj")
        )
        assert resolve_destination(config, Path("/x/y/pkg")) == Path("/u/.claude/skills")


class TestLocalMode:
    def test_node_modules_parent(self):
        config = InstallConfig(home=Path("/u"))
        assert resolve_destination(config, Path("/a/b/node_modules/pkg")) == Path("/a/b/.claude/skills")

    def test_nearest_anchor_wins(self):
        config = InstallConfig(home=Path("/u"))
        pkg = Path("/a/node_modules/b/node_modules/pkg")
        assert resolve_destination(config, pkg) == Path("/a/node_modules/b/.claude/skills")

    def test_venv_anchor(self):
        config = InstallConfig(home=Path("/u"))
        pkg = Path("/work/app/.venv/lib/python3.12/site-packages/scrum_skill")
        assert resolve_destination(config, pkg) == Path("/work/app/.claude/skills")

    def test_fallback_without_anchor(self):
        config = InstallConfig(home=Path("/u"))
        assert resolve_destination(config, Path("/x/y/pkg")) == Path("/x/.claude/skills")

    def test_explicit_project_root(self):
        config = InstallConfig(home=Path("/u"), project_root=Path("/proj"))
        assert resolve_destination(config, Path("/a/b/node_modules/pkg")) == Path("/proj/.claude/skills")

    def test_custom_anchor_names(self):
        config = InstallConfig(home=Path("/u"), anchor_names=("vendor",))
        assert resolve_destination(config, Path("/r/vendor/pkg")) == Path("/r/.claude/skills")

    def test_result_is_absolute(self):
        config = InstallConfig(home=Path("/u"))
        assert resolve_destination(config, Path("node_modules/pkg")).is_absolute()

    def test_does_not_touch_filesystem(self, tmp_path: Path):
        pkg = tmp_path / "proj" / "node_modules" / "pkg"
        dest = resolve_destination(InstallConfig(home=tmp_path), pkg)
        assert dest == tmp_path / "proj" / ".claude" / "skills"
        assert not (tmp_path / "proj").exists()


class TestFindInstallRoot:
    def test_anchor_is_start_dir(self):
        assert find_install_root(Path("/a/node_modules"), ["node_modules"]) == Path("/a")

    def test_no_anchor(self):
        assert find_install_root(Path("/x/y/pkg"), ["node_modules"]) is None

    def test_name_must_match_exactly(self):
        assert find_install_root(Path("/a/my_node_modules/pkg"), ["node_modules"]) is None

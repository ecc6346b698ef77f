"""Tests for the argument-free update script."""

from __future__ import annotations

import importlib.util
import shutil
from pathlib import Path
from types import ModuleType

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "update_readme.py"


def _load_script(project: Path) -> ModuleType:
    """Copy the script into ``project/scripts`` and import it from there."""
    scripts_dir = project / "scripts"
    scripts_dir.mkdir()
    target = scripts_dir / SCRIPT.name
    shutil.copyfile(SCRIPT, target)

    spec = importlib.util.spec_from_file_location("update_readme_under_test", target)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestUpdateReadmeScript:
    """Tests for scripts/update_readme.py."""

    def test_targets_parent_of_scripts_dir(self, project: Path, make_dir, link) -> None:
        """The script resolves the project root from its own location."""
        make_dir(project, "boxing", "Hello")
        module = _load_script(project)

        assert module.PROJECT_ROOT == project.resolve()
        assert module.main() == 0

        text = (project / "README.md").read_text(encoding="utf-8")
        assert link("boxing") in text
        assert link("scripts") in text
        assert text.endswith("### boxing\n---\nHello\n")

    def test_missing_marker_fails(self, tmp_path: Path) -> None:
        """A README without the marker makes the script exit non-zero."""
        readme = tmp_path / "README.md"
        readme.write_text("# Notes\n", encoding="utf-8")
        module = _load_script(tmp_path)

        assert module.main() == 2
        assert readme.read_text(encoding="utf-8") == "# Notes\n"

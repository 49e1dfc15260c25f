import logging
from pathlib import Path

import pytest

from sass_lint_vue.discovery import iter_vue_files


def test_iter_vue_files_walks_directories_in_order(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "b" / "Two.vue").write_text("", encoding="utf-8")
    (tmp_path / "a" / "One.vue").write_text("", encoding="utf-8")
    (tmp_path / "a" / "main.js").write_text("", encoding="utf-8")
    (tmp_path / "Root.vue").write_text("", encoding="utf-8")

    found = list(iter_vue_files([tmp_path]))

    assert found == [tmp_path / "Root.vue", tmp_path / "a" / "One.vue", tmp_path / "b" / "Two.vue"]


def test_iter_vue_files_filters_direct_files_by_suffix(tmp_path: Path) -> None:
    component = tmp_path / "App.vue"
    script = tmp_path / "main.js"
    component.write_text("", encoding="utf-8")
    script.write_text("", encoding="utf-8")

    assert list(iter_vue_files([script, component])) == [component]


def test_iter_vue_files_logs_invalid_path_and_continues(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    component = tmp_path / "App.vue"
    component.write_text("", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        found = list(iter_vue_files([tmp_path / "missing", component]))

    assert found == [component]
    assert "missing" in caplog.text

"""Tests for directory walking and project detection."""

from __future__ import annotations

import os

import swim_clean_all.core.scanner as scanner
from swim_clean_all.core.scanner import find_projects, is_project, walk


class TestIsProject:
    def test_marker_and_build(self, tmp_path, make_project):
        assert is_project(make_project(tmp_path))

    def test_marker_only(self, tmp_path):
        (tmp_path / "swim.toml").write_text("")
        assert not is_project(tmp_path)

    def test_build_only(self, tmp_path):
        (tmp_path / "build").mkdir()
        assert not is_project(tmp_path)

    def test_file_is_not_a_project(self, tmp_path):
        f = tmp_path / "swim.toml"
        f.write_text("")
        assert not is_project(f)


class TestFindProjects:
    def test_spec_example(self, tmp_path, make_project, search_config):
        project = make_project(tmp_path)
        found = find_projects(search_config())
        assert [p.path for p in found] == [project.resolve()]
        assert found[0].build_dir == project.resolve() / "build"

    def test_nested_projects_at_any_depth(self, tmp_path, make_project, search_config):
        shallow = make_project(tmp_path, "a")
        deep = make_project(tmp_path / "x" / "y" / "z", "b")
        inner = make_project(shallow, "inner")

        found = {p.path for p in find_projects(search_config())}
        assert found == {shallow.resolve(), deep.resolve(), inner.resolve()}

    def test_root_can_be_a_project(self, tmp_path, make_project, search_config):
        project = make_project(tmp_path)
        found = find_projects(search_config(root=project))
        assert [p.path for p in found] == [project.resolve()]

    def test_max_depth_zero_only_considers_root(self, tmp_path, make_project, search_config):
        make_project(tmp_path)
        assert find_projects(search_config(max_depth=0)) == []

        project = make_project(tmp_path, "rooted")
        found = find_projects(search_config(max_depth=0, root=project))
        assert [p.path for p in found] == [project.resolve()]

    def test_max_depth_limits_search(self, tmp_path, make_project, search_config):
        make_project(tmp_path / "one", "two")  # project at depth 2

        assert find_projects(search_config(max_depth=1)) == []
        assert len(find_projects(search_config(max_depth=2))) == 1

    def test_skip_excludes_subtree(self, tmp_path, make_project, search_config):
        kept = make_project(tmp_path, "kept")
        skipped_root = tmp_path / "vendor"
        make_project(skipped_root, "dep")
        make_project(skipped_root / "deeper", "dep2")

        found = find_projects(search_config(skip=(skipped_root,)))
        assert [p.path for p in found] == [kept.resolve()]

    def test_skipping_a_project_itself(self, tmp_path, make_project, search_config):
        project = make_project(tmp_path)
        assert find_projects(search_config(skip=(project,))) == []

    def test_skipped_root_yields_nothing(self, tmp_path, make_project, search_config):
        make_project(tmp_path)
        assert list(walk(search_config(skip=(tmp_path,)))) == []

    def test_sibling_with_common_prefix_not_skipped(self, tmp_path, make_project, search_config):
        make_project(tmp_path, "lib")
        other = make_project(tmp_path, "library")
        found = find_projects(search_config(skip=(tmp_path / "lib",)))
        assert [p.path for p in found] == [other.resolve()]


class TestWalk:
    def test_skipped_subtree_is_never_listed(self, tmp_path, make_project, search_config, monkeypatch):
        skipped = tmp_path / "skipped"
        make_project(skipped / "a" / "b")
        make_project(tmp_path, "visible")

        listed: list[str] = []
        real_scandir = os.scandir

        def counting_scandir(path):
            listed.append(os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(scanner.os, "scandir", counting_scandir)

        found = find_projects(search_config(skip=(skipped,)))
        assert len(found) == 1
        resolved_skipped = str(skipped.resolve())
        assert listed
        assert not any(p == resolved_skipped or p.startswith(resolved_skipped + os.sep) for p in listed)

    def test_order_is_sorted_preorder(self, tmp_path, search_config):
        for name in ("b", "a", "c"):
            (tmp_path / name).mkdir()
        (tmp_path / "a" / "inner").mkdir()

        root = tmp_path.resolve()
        paths = [e.path for e in walk(search_config())]
        assert paths == [root, root / "a", root / "a" / "inner", root / "b", root / "c"]

    def test_depths(self, tmp_path, search_config):
        (tmp_path / "a" / "b").mkdir(parents=True)
        depths = {e.path.name: e.depth for e in walk(search_config())}
        assert depths["a"] == 1
        assert depths["b"] == 2

    def test_files_are_yielded_but_not_descended(self, tmp_path, search_config):
        (tmp_path / "file.txt").write_text("x")
        entries = list(walk(search_config()))
        file_entry = next(e for e in entries if e.path.name == "file.txt")
        assert not file_entry.is_dir

    def test_symlinks_are_not_followed(self, tmp_path, make_project, search_config):
        real = make_project(tmp_path / "real")
        (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)

        found = find_projects(search_config())
        assert [p.path for p in found] == [real.resolve()]
        link_entry = next(e for e in walk(search_config()) if e.path.name == "link")
        assert not link_entry.is_dir

    def test_inaccessible_directory_is_dropped(self, tmp_path, make_project, search_config, monkeypatch):
        broken = tmp_path / "broken"
        make_project(broken)
        good = make_project(tmp_path, "good")

        real_scandir = os.scandir
        resolved_broken = str(broken.resolve())

        def failing_scandir(path):
            if os.fspath(path) == resolved_broken:
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(scanner.os, "scandir", failing_scandir)

        errors = []
        found = find_projects(search_config(), on_error=errors.append)
        assert [p.path for p in found] == [good.resolve()]
        assert len(errors) == 1
        assert errors[0].path == broken.resolve()

    def test_on_entry_observer_sees_every_entry(self, tmp_path, search_config):
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "f").write_text("")
        seen = []
        entries = list(walk(search_config(), on_entry=seen.append))
        assert seen == entries

    def test_walk_restarts_each_time(self, tmp_path, search_config):
        (tmp_path / "a").mkdir()
        config = search_config()
        assert list(walk(config)) == list(walk(config))

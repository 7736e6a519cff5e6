import pytest

from teachos.find import find, main, name_matches


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "x").write_text("top")
    (tmp_path / "y").write_text("other")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "x").write_text("nested")
    named = tmp_path / "x_dir"
    named.mkdir()
    dir_x = sub / "deeper"
    dir_x.mkdir()
    (dir_x / "x").write_text("deep")
    return tmp_path


def test_name_matches_last_component():
    assert name_matches("a/b/c", "c")
    assert not name_matches("a/b/cc", "c")
    assert name_matches("c", "c")


def test_find_reports_matching_files(tree):
    root = str(tree)
    hits = sorted(find(root, "x"))
    assert hits == sorted([f"{root}/x", f"{root}/sub/x", f"{root}/sub/deeper/x"])


def test_find_does_not_report_directories(tmp_path):
    d = tmp_path / "target"
    d.mkdir()
    (d / "target").write_text("inside")
    hits = list(find(str(tmp_path), "target"))
    assert hits == [f"{tmp_path}/target/target"]


def test_find_never_reports_start_path(tmp_path):
    f = tmp_path / "lonely"
    f.write_text("")
    assert list(find(str(f), "lonely")) == []


def test_find_no_match(tree):
    assert list(find(str(tree), "zzz")) == []


def test_find_missing_path(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert list(find(str(missing), "x")) == []
    assert f"find: cannot open {missing}" in capsys.readouterr().err


def test_main_requires_two_args():
    assert main(["."]) == 1


def test_main_prints_hits(tree, capsys):
    assert main([str(tree), "y"]) == 0
    assert capsys.readouterr().out == f"{tree}/y\n"
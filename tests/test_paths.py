import os

import pytest

from tmsu.paths import dereference, is_root, rel, rel_to, unescape_octal


@pytest.mark.parametrize(
    "to, expected",
    [
        ("/", "./some/path"),
        ("/other", "../some/path"),
        ("/other/", "../some/path"),
        ("/other/mother", "/some/path"),
        ("/other/mother/", "/some/path"),
        ("/some", "./path"),
        ("/some/", "./path"),
        ("/some/path", "."),
        ("/some/path/", "."),
        ("/some/cheese", "../path"),
        ("/some/cheese/", "../path"),
        ("/some/cheese/sandwich", "/some/path"),
        ("/some/cheese/sandwich/", "/some/path"),
    ],
)
def test_rel_to(to, expected):
    assert rel_to("/some/path", to) == expected


def test_is_root():
    assert is_root("/") is True
    assert is_root("/some") is False
    assert is_root("/some/path") is False


def test_rel_uses_working_directory(tmp_path, monkeypatch):
    child = tmp_path / "child"
    child.mkdir()
    monkeypatch.chdir(tmp_path)
    assert rel(str(child)) == "./child"
    assert rel(str(tmp_path)) == "."


def test_rel_relative_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert rel("a/b") == "./a/b"


def test_unescape_octal():
    assert unescape_octal(r"my\040file") == "my file"
    assert unescape_octal(r"tab\011here") == "tab\there"
    assert unescape_octal("plain") == "plain"


def test_unescape_octal_ignores_short_sequences():
    assert unescape_octal(r"a\04b") == r"a\04b"


def test_dereference_plain_file(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    assert dereference(str(target)) == str(target)


def test_dereference_chain(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    first = tmp_path / "link1"
    second = tmp_path / "link2"
    first.symlink_to(target)
    second.symlink_to(first)
    assert dereference(str(second)) == str(target)


def test_dereference_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        dereference(str(tmp_path / "missing"))


def test_dereference_dangling_link(tmp_path):
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        dereference(str(link))


def test_rel_to_cwd_relative(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert rel_to("x", ".") == "." + os.sep + "x"
import os
import zlib

import pytest

from goldfish.resource import Resource, ResourceError


def test_round_trip(tmp_path):
    big = bytes(range(256)) * 300
    res = Resource()
    res.add("a.txt", b"hello")
    res.add("dir/b.bin", big)
    out = tmp_path / "out.pak"
    res.write(out)

    loaded = Resource(out)
    assert loaded.names() == ["a.txt", "dir/b.bin"]
    assert loaded.get("a.txt") == b"hello"
    assert loaded.get("dir/b.bin") == big


def test_archive_layout(tmp_path):
    res = Resource()
    res.add("a.txt", b"hello")
    out = tmp_path / "out.pak"
    res.write(out)

    raw = out.read_bytes()
    assert raw[:128] == b"a.txt".ljust(128, b"\0")
    size = int.from_bytes(raw[128:132], "big")
    assert zlib.decompress(raw[132 : 132 + size]) == b"hello"
    assert raw[132 + size :] == bytes(128)


def test_empty_archive_is_terminator_only(tmp_path):
    out = tmp_path / "empty.pak"
    Resource().write(out)
    assert out.read_bytes() == bytes(128)
    assert Resource(out).names() == []


def test_get_is_cached_and_stable(tmp_path):
    res = Resource()
    res.add("x", b"data")
    out = tmp_path / "out.pak"
    res.write(out)
    loaded = Resource(out)
    first = loaded.get("x")
    second = loaded.get("x")
    assert first == b"data"
    assert second == b"data"


def test_missing_entry_raises_key_error():
    res = Resource()
    res.add("x", b"data")
    with pytest.raises(KeyError):
        res.get("y")


def test_added_entry_readable_before_write():
    res = Resource()
    res.add("x", b"data")
    assert res.get("x") == b"data"
    assert "x" in res


def test_empty_data_is_ignored():
    res = Resource()
    res.add("empty", b"")
    assert "empty" not in res


def test_re_adding_replaces_entry():
    res = Resource()
    res.add("x", b"one")
    res.add("y", b"two")
    res.add("x", b"three")
    assert res.names() == ["x", "y"]
    assert res.get("x") == b"three"


def test_name_too_long():
    with pytest.raises(ValueError):
        Resource().add("n" * 128, b"data")


def test_missing_path_raises(tmp_path):
    with pytest.raises(ResourceError):
        Resource(tmp_path / "nope.pak")


def test_corrupt_entry_raises(tmp_path):
    path = tmp_path / "bad.pak"
    path.write_bytes(b"bad".ljust(128, b"\0") + (8).to_bytes(4, "big") + b"notzlib!" + bytes(128))
    res = Resource(path)
    assert res.names() == ["bad"]
    with pytest.raises(ResourceError):
        res.get("bad")


def test_truncated_archive_raises(tmp_path):
    path = tmp_path / "short.pak"
    path.write_bytes(b"cut".ljust(128, b"\0") + (100).to_bytes(4, "big") + b"abc")
    with pytest.raises(ResourceError):
        Resource(path)


def test_progress_output(tmp_path, capsys):
    data = os.urandom(100_000)
    res = Resource()
    res.add("big.bin", data)
    out = tmp_path / "out.pak"
    res.write(out, progress=True)
    printed = capsys.readouterr().out
    assert printed.startswith("big.bin.")
    assert printed.endswith("%\n")
    assert Resource(out).get("big.bin") == data


def test_second_write_reuses_compressed_data(tmp_path, capsys):
    res = Resource()
    res.add("a", b"alpha" * 1000)
    first = tmp_path / "first.pak"
    second = tmp_path / "second.pak"
    res.write(first, progress=True)
    capsys.readouterr()
    res.write(second, progress=True)
    assert capsys.readouterr().out == ""
    assert first.read_bytes() == second.read_bytes()


def test_directory_mode(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "f.txt").write_bytes(b"content")
    res = Resource(tmp_path)
    assert res.get("sub/f.txt") == b"content"
    assert "sub/f.txt" in res
    with pytest.raises(KeyError):
        res.get("missing.txt")


def test_directory_mode_ignores_add_and_write(tmp_path):
    res = Resource(tmp_path)
    res.add("new.txt", b"data")
    assert "new.txt" not in res
    assert res.names() == []
    target = tmp_path / "out.pak"
    res.write(target)
    assert not target.exists()
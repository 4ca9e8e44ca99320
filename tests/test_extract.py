import io
import tarfile
import zipfile
from pathlib import Path

import pytest

from nrclaunch.extract import sanitize_file_path, tar_gz_extract, zip_extract


def test_sanitize_drops_dot_components_and_backslashes():
    assert sanitize_file_path("a\\b/../c/./d.txt") == Path("a", "b", "c", "d.txt")


def test_sanitize_removes_illegal_characters():
    assert sanitize_file_path('dir/we<ir>d:na*me"?.txt') == Path("dir", "weirdname.txt")


def test_sanitize_drops_windows_reserved_names():
    assert sanitize_file_path("folder/con.txt/file") == Path("folder", "file")
    assert sanitize_file_path("LPT1") == Path()


def test_sanitize_never_escapes():
    result = sanitize_file_path("../../../etc/passwd")
    assert not result.is_absolute()
    assert ".." not in result.parts


def test_sanitize_truncates_long_names():
    result = sanitize_file_path("x" * 400)
    assert len(result.name) == 255


def _zip_bytes(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return buffer.getvalue()


def test_zip_extract_round_trip(tmp_path):
    data = _zip_bytes(
        [
            ("natives/", b""),
            ("natives/lib.so", b"binary"),
            ("deep/nested/file.txt", b"hello"),
        ]
    )
    zip_extract(io.BytesIO(data), tmp_path)
    assert (tmp_path / "natives").is_dir()
    assert (tmp_path / "natives" / "lib.so").read_bytes() == b"binary"
    assert (tmp_path / "deep" / "nested" / "file.txt").read_bytes() == b"hello"


def test_zip_extract_keeps_entries_inside(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    zip_extract(_zip_bytes([("../evil.txt", b"x"), ("sub\\win.txt", b"y")]), out)
    assert (out / "evil.txt").read_bytes() == b"x"
    assert (out / "sub" / "win.txt").read_bytes() == b"y"
    assert not (tmp_path / "evil.txt").exists()


def test_zip_extract_from_path(tmp_path):
    archive = tmp_path / "a.zip"
    archive.write_bytes(_zip_bytes([("f.txt", b"content")]))
    out = tmp_path / "out"
    zip_extract(archive, out)
    assert (out / "f.txt").read_bytes() == b"content"


def test_zip_extract_rejects_garbage(tmp_path):
    with pytest.raises(zipfile.BadZipFile):
        zip_extract(b"not a zip", tmp_path)


def _tar_gz_bytes(entries):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tf:
        for name, data in entries:
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = 0o755
            tf.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def test_tar_gz_round_trip(tmp_path):
    data = _tar_gz_bytes([("jdk/bin/java", b"java"), ("jdk/release", b"JAVA_VERSION")])
    tar_gz_extract(io.BytesIO(data), tmp_path)
    assert (tmp_path / "jdk" / "bin" / "java").read_bytes() == b"java"
    assert (tmp_path / "jdk" / "release").read_bytes() == b"JAVA_VERSION"


def test_tar_gz_from_path(tmp_path):
    archive = tmp_path / "jre.tar.gz"
    archive.write_bytes(_tar_gz_bytes([("a.txt", b"one")]))
    out = tmp_path / "out"
    tar_gz_extract(archive, out)
    assert (out / "a.txt").read_bytes() == b"one"


def test_tar_gz_rejects_garbage(tmp_path):
    with pytest.raises(tarfile.TarError):
        tar_gz_extract(b"not a tarball", tmp_path)
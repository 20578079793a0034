"""
Tests for the default zip expander.
"""

import io
import zipfile
from pathlib import Path

import pytest

from submission_utils.archive_handler import ZipArchiveExpander, strip_extension
from submission_utils.errors import (
    ArchiveExpansionError,
    ArchiveNotFoundError,
    CorruptArchiveError,
    InvalidArchiveParametersError,
)

from .helpers import make_zip


def zip_bytes(members):
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        for name, data in members.items():
            z.writestr(name, data)
    return buf.getvalue()


@pytest.fixture
def expander():
    return ZipArchiveExpander()


class TestExpand:

    def test_extracts_members(self, tmp_path, expander):
        archive = make_zip(tmp_path / "handin.zip", {"Main.java": b"main", "lib/Util.java": b"util"})
        out = tmp_path / "handin"

        expander.expand(archive, 5, out)

        assert (out / "Main.java").read_bytes() == b"main"
        assert (out / "lib" / "Util.java").read_bytes() == b"util"

    def test_skips_macos_metadata(self, tmp_path, expander):
        archive = make_zip(tmp_path / "h.zip", {
            "Main.java": b"",
            "__MACOSX/._Main.java": b"",
            ".DS_Store": b"",
        })
        out = tmp_path / "h"

        expander.expand(archive, 5, out)

        assert sorted(p.name for p in out.iterdir()) == ["Main.java"]

    def test_nested_archives_expanded_next_to_themselves(self, tmp_path, expander):
        inner = zip_bytes({"Inner.java": b"inner"})
        archive = make_zip(tmp_path / "outer.zip", {"part/inner.zip": inner})
        out = tmp_path / "outer"

        expander.expand(archive, 5, out)

        assert (out / "part" / "inner.zip").is_file()
        assert (out / "part" / "inner" / "Inner.java").read_bytes() == b"inner"

    def test_nesting_limit_stops_expansion(self, tmp_path, expander):
        level2 = zip_bytes({"deep.java": b""})
        level1 = zip_bytes({"level2.zip": level2})
        archive = make_zip(tmp_path / "top.zip", {"level1.zip": level1})
        out = tmp_path / "top"

        expander.expand(archive, 1, out)

        assert (out / "level1" / "level2.zip").is_file()
        assert not (out / "level1" / "level2").exists()

    def test_zero_limit_expands_only_the_archive_itself(self, tmp_path, expander):
        archive = make_zip(tmp_path / "top.zip", {"inner.zip": zip_bytes({"a.java": b""})})
        out = tmp_path / "top"

        expander.expand(archive, 0, out)

        assert (out / "inner.zip").is_file()
        assert not (out / "inner").exists()

    def test_corrupt_nested_archive_is_kept_as_file(self, tmp_path, expander):
        archive = make_zip(tmp_path / "top.zip", {"broken.zip": b"not a zip", "a.java": b""})
        out = tmp_path / "top"

        expander.expand(archive, 5, out)

        assert (out / "broken.zip").read_bytes() == b"not a zip"
        assert (out / "a.java").exists()


class TestExpandFailures:

    def test_missing_archive(self, tmp_path, expander):
        with pytest.raises(ArchiveNotFoundError) as exc:
            expander.expand(tmp_path / "missing.zip", 5, tmp_path / "missing")
        assert exc.value.code == "archive_not_found"

    def test_directory_is_not_an_archive(self, tmp_path, expander):
        (tmp_path / "dir.zip").mkdir()
        with pytest.raises(ArchiveNotFoundError):
            expander.expand(tmp_path / "dir.zip", 5, tmp_path / "dir")

    def test_corrupt_archive(self, tmp_path, expander):
        archive = tmp_path / "bad.zip"
        archive.write_bytes(b"definitely not a zip")
        with pytest.raises(CorruptArchiveError) as exc:
            expander.expand(archive, 5, tmp_path / "bad")
        assert exc.value.archive == archive

    def test_negative_limit(self, tmp_path, expander):
        archive = make_zip(tmp_path / "a.zip", {"a.java": b""})
        with pytest.raises(InvalidArchiveParametersError):
            expander.expand(archive, -1, tmp_path / "a")

    def test_member_escaping_output_dir(self, tmp_path, expander):
        archive = make_zip(tmp_path / "evil.zip", {"../escaped.java": b""})
        with pytest.raises(CorruptArchiveError):
            expander.expand(archive, 5, tmp_path / "out" / "evil")
        assert not (tmp_path / "out" / "escaped.java").exists()

    def test_escaping_member_leaves_nothing_behind(self, tmp_path, expander):
        """Members listed before the bad one are not written either."""
        archive = make_zip(tmp_path / "evil.zip", {"Main.java": b"", "../escaped.java": b""})
        out = tmp_path / "evil"

        with pytest.raises(CorruptArchiveError):
            expander.expand(archive, 5, out)

        assert not out.exists()

    def test_encrypted_archive(self, tmp_path, expander):
        archive = make_zip(tmp_path / "enc.zip", {"a.java": b"secret"}, encrypted=True)
        with pytest.raises(CorruptArchiveError) as exc:
            expander.expand(archive, 5, tmp_path / "enc")
        assert exc.value.code == "corrupt_archive"

    def test_unsupported_compression_method(self, tmp_path, expander):
        archive = make_zip(tmp_path / "odd.zip", {"a.java": b"data"}, compress_type=99)
        with pytest.raises(CorruptArchiveError):
            expander.expand(archive, 5, tmp_path / "odd")

    def test_output_path_is_an_existing_file(self, tmp_path, expander):
        archive = make_zip(tmp_path / "handin.zip", {"a.java": b""})
        (tmp_path / "handin").write_text("plain file")

        with pytest.raises(InvalidArchiveParametersError):
            expander.expand(archive, 5, tmp_path / "handin")

        assert (tmp_path / "handin").read_text() == "plain file"

    def test_write_failure_is_an_expansion_error(self, tmp_path, expander):
        # 'lib' is a file inside the output dir, so 'lib/Util.java' cannot be created
        archive = make_zip(tmp_path / "h.zip", {"lib/Util.java": b""})
        out = tmp_path / "h"
        out.mkdir()
        (out / "lib").write_text("")

        with pytest.raises(ArchiveExpansionError):
            expander.expand(archive, 5, out)

    def test_failures_share_a_base_class(self):
        for cls in (ArchiveNotFoundError, CorruptArchiveError, InvalidArchiveParametersError):
            assert issubclass(cls, ArchiveExpansionError)


class TestStripExtension:

    def test_strips_last_extension_only(self):
        assert strip_extension(Path("a/b/code.tar.zip")) == Path("a/b/code.tar")

    def test_no_extension(self):
        assert strip_extension(Path("a/b/code")) == Path("a/b/code")

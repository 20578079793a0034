# submission_utils/archive_handler.py
import os
import zipfile
import zlib
from pathlib import Path
from typing import List

from utils.logger import logger
from .errors import (
    ArchiveExpansionError,
    ArchiveNotFoundError,
    CorruptArchiveError,
    InvalidArchiveParametersError,
)

_IGNORED_PARTS = ("__MACOSX",)
_IGNORED_FILES = (".DS_Store",)
# raised by zipfile for unreadable member data
_CORRUPT_ERRORS = (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError, EOFError)


def _is_ignored(arcname: str) -> bool:
    parts = arcname.split("/")
    return any(p in _IGNORED_PARTS for p in parts) or parts[-1] in _IGNORED_FILES


def strip_extension(path: Path) -> Path:
    """'a/b/code.zip' -> 'a/b/code' (last extension only)."""
    return Path(os.path.splitext(str(path))[0])


class ZipArchiveExpander:
    """
    Expands a zip archive into a directory. Zip members that are themselves
    zip files are expanded next to themselves, up to `nested_depth_limit` levels.
    """

    def expand(self, archive: Path, nested_depth_limit: int, output_dir: Path) -> None:
        if nested_depth_limit < 0:
            raise InvalidArchiveParametersError(
                f"Nested depth limit must be >= 0, got {nested_depth_limit}", archive
            )
        archive = Path(archive)
        output_dir = Path(output_dir)
        if not archive.is_file():
            raise ArchiveNotFoundError(f"Archive not found: {archive}", archive)
        if output_dir.exists() and not output_dir.is_dir():
            raise InvalidArchiveParametersError(
                f"Output {output_dir} exists and is not a directory", archive
            )

        try:
            with zipfile.ZipFile(archive, "r") as z:
                written = self._extract_all(z, archive, output_dir)
        except _CORRUPT_ERRORS as e:
            raise CorruptArchiveError(f"Corrupt archive {archive}: {e}", archive) from e
        except OSError as e:
            raise ArchiveExpansionError(f"Could not expand {archive}: {e}", archive) from e

        if nested_depth_limit == 0:
            return
        for member in written:
            if member.suffix.lower() != ".zip":
                continue
            try:
                self.expand(member, nested_depth_limit - 1, strip_extension(member))
            except ArchiveExpansionError as e:
                # keep the nested file as-is
                logger.warning(f"Could not expand nested archive {member}: {e}")

    def _extract_all(self, z: zipfile.ZipFile, archive: Path, output_dir: Path) -> List[Path]:
        base = output_dir.resolve()
        members = []
        # check every member before the first byte is written
        for info in z.infolist():
            arc = info.filename.replace("\\", "/")
            if not arc or _is_ignored(arc.rstrip("/")):
                continue
            target = (base / arc).resolve()
            if base != target and base not in target.parents:
                raise CorruptArchiveError(f"Member '{arc}' escapes the output directory", archive)
            members.append((info, target))

        os.makedirs(output_dir, exist_ok=True)
        written: List[Path] = []
        for info, target in members:
            if info.is_dir():
                os.makedirs(target, exist_ok=True)
                continue
            os.makedirs(target.parent, exist_ok=True)
            with z.open(info, "r") as src, open(target, "wb") as dst:
                dst.write(src.read())
            written.append(target)
        return written

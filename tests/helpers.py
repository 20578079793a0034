"""Shared builders for the scanner tests."""

import zipfile
from pathlib import Path
from typing import Dict, Optional

from submission_utils.observer import TraversalObserver

SOURCE_REGEX = r".*\.(src|java)"
ARCHIVE_REGEX = r".*\.zip"


def make_tree(root: Path, spec: Dict[str, str]) -> None:
    """Create files from {'rel/path.ext': 'content'}; keys ending in '/' become empty dirs."""
    for rel, content in spec.items():
        path = root / rel
        if rel.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def make_zip(path: Path, members: Dict[str, bytes], encrypted: bool = False,
             compress_type: Optional[int] = None) -> Path:
    """
    Write a zip. `encrypted` flags every member as password protected,
    `compress_type` overrides the method recorded in the central directory.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as z:
        for name, data in members.items():
            z.writestr(name, data)
        if encrypted:
            # the central directory is written on close and carries the flag
            for info in z.infolist():
                info.flag_bits |= 0x1
        if compress_type is not None:
            for info in z.infolist():
                info.compress_type = compress_type
    return path


class RecordingObserver(TraversalObserver):
    """Collects hook calls as (hook, path) tuples."""

    def __init__(self):
        self.events = []

    def unexpected_directory(self, location, token):
        self.events.append(("unexpected_directory", location))

    def dead_end(self, location):
        self.events.append(("dead_end", location))

    def archive_failed(self, archive, error):
        self.events.append(("archive_failed", archive))

    def irrelevant_entry(self, path):
        self.events.append(("irrelevant_entry", path))

    def empty_location(self, location):
        self.events.append(("empty_location", location))

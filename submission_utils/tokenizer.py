# submission_utils/tokenizer.py
# Walks a submission directory along a StructureTemplate and collects
# submission locations plus the bottom-level folders that held nothing.

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from . import config
from .archive_handler import ZipArchiveExpander, strip_extension
from .errors import ArchiveExpansionError, MaximumDirectoryDepthExceededError
from .models import ScanResult, StructureTemplate, Student, Submission, SubmissionLevel
from .observer import LoggingObserver, TraversalObserver

MAX_DIRECTORY_DEPTH = 10
ARCHIVE_NESTING_DEPTH = 5


@dataclass
class TraversalResult:
    locations: List[Path] = field(default_factory=list)
    empty_locations: List[Path] = field(default_factory=list)


def list_entries(location: Path) -> List[Path]:
    """Immediate entries of `location`, sorted by name. Unreadable -> []."""
    try:
        names = os.listdir(location)
    except OSError:
        return []
    return [location / n for n in sorted(names)]


class SubmissionExtractor:
    """
    Classifies the entries of a bottom-level directory: source files mark the
    directory itself as a submission, archives are expanded and their target
    directory becomes a submission, everything else is ignored.
    """

    def __init__(self, source_suffix_regex: str, archive_regex: str, expander=None,
                 observer: Optional[TraversalObserver] = None,
                 archive_nesting_depth: int = ARCHIVE_NESTING_DEPTH):
        self.source_re = re.compile(source_suffix_regex)
        self.archive_re = re.compile(archive_regex)
        self.expander = expander or ZipArchiveExpander()
        self.observer = observer or TraversalObserver()
        self.archive_nesting_depth = archive_nesting_depth

    def extract(self, location: Path) -> List[Path]:
        found: List[Path] = []
        for entry in list_entries(location):
            name = entry.name
            if self.archive_re.fullmatch(name):
                target = strip_extension(entry)
                try:
                    self.expander.expand(entry, self.archive_nesting_depth, target)
                except ArchiveExpansionError as e:
                    self.observer.archive_failed(entry, e)
                    continue
                self.observer.expanded_archive(entry, target)
                found.append(target)
            elif self.source_re.fullmatch(name):
                self.observer.found_source(entry)
                if location not in found:
                    found.append(location)
            else:
                self.observer.irrelevant_entry(entry)
        return found


class Traverser:
    """
    Depth-first walk over directories matching the template, driven by an
    explicit frame stack so the depth ceiling does not depend on the
    interpreter's recursion limit.
    """

    def __init__(self, extractor: SubmissionExtractor, observer: Optional[TraversalObserver] = None,
                 max_depth: int = MAX_DIRECTORY_DEPTH):
        self.extractor = extractor
        self.observer = observer or TraversalObserver()
        self.max_depth = max_depth

    def traverse(self, template: StructureTemplate, root: Path) -> TraversalResult:
        """
        A frame is a directory `level` steps below `root`. Directories on the
        submission level are scanned for files; every other directory
        contributes its subdirectories that match the next level's pattern.
        """
        result = TraversalResult()
        stack: List[Tuple[Path, int]] = [(Path(root), 0)]

        while stack:
            location, level = stack.pop()
            self.observer.visiting(location, level)

            if level >= self.max_depth:
                raise MaximumDirectoryDepthExceededError(location, self.max_depth)

            if level > 0 and isinstance(template.token(level), SubmissionLevel):
                self.observer.bottomed_out(location)
                found = self.extractor.extract(location)
                if not found:
                    self.observer.empty_location(location)
                    result.empty_locations.append(location)
                result.locations.extend(found)
                continue

            entries = list_entries(location)
            if not entries:
                self.observer.dead_end(location)
                continue

            token = template.token(level + 1)
            children: List[Path] = []
            for entry in entries:
                if not entry.is_dir():
                    continue
                # any directory name is accepted on the submission level
                if isinstance(token, SubmissionLevel) or token.matches(entry.name):
                    children.append(entry)
                else:
                    self.observer.unexpected_directory(entry, token)
            # reversed so the first listed child is popped first
            for child in reversed(children):
                stack.append((child, level + 1))

        return result


class SubmissionTokenizer:
    """
    Scans a directory tree for submissions following a StructureTemplate.

    Every scan resets the list of empty locations; `empty_locations` always
    reflects the most recent scan only.
    """

    def __init__(self, source_suffix_regex: str, archive_regex: str, expander=None,
                 observer: Optional[TraversalObserver] = None,
                 max_directory_depth: int = MAX_DIRECTORY_DEPTH,
                 archive_nesting_depth: int = ARCHIVE_NESTING_DEPTH):
        self.source_suffix_regex = source_suffix_regex
        self.archive_regex = archive_regex
        self.observer = observer or LoggingObserver()
        self.max_directory_depth = max_directory_depth
        self.extractor = SubmissionExtractor(
            source_suffix_regex,
            archive_regex,
            expander=expander,
            observer=self.observer,
            archive_nesting_depth=archive_nesting_depth,
        )
        self.traverser = Traverser(self.extractor, observer=self.observer, max_depth=max_directory_depth)
        self._empty_locations: List[Path] = []

    @classmethod
    def from_config(cls, expander=None, observer: Optional[TraversalObserver] = None) -> "SubmissionTokenizer":
        return cls(
            config.SOURCE_SUFFIX_REGEX,
            config.ARCHIVE_REGEX,
            expander=expander,
            observer=observer,
            max_directory_depth=config.MAX_DIRECTORY_DEPTH,
            archive_nesting_depth=config.ARCHIVE_NESTING_DEPTH,
        )

    @property
    def empty_locations(self) -> List[Path]:
        """Bottom-level directories of the last scan that yielded no submission."""
        return list(self._empty_locations)

    def scan(self, template: StructureTemplate, root: Path) -> List[Submission]:
        """
        Raises MaximumDirectoryDepthExceededError when the submission level
        lies at or below the depth ceiling; nothing on disk is touched then.
        """
        self._empty_locations = []
        root = Path(root)

        if template.submission_level >= self.max_directory_depth:
            raise MaximumDirectoryDepthExceededError(root, self.max_directory_depth)

        if not list_entries(root):
            self.observer.dead_end(root)
            return []

        traversal = self.traverser.traverse(template, root)
        self._empty_locations = traversal.empty_locations

        return [
            Submission(location=loc, student=Student.placeholder(i))
            for i, loc in enumerate(traversal.locations)
        ]

    def scan_result(self, template: StructureTemplate, root: Path) -> ScanResult:
        submissions = self.scan(template, root)
        return ScanResult(
            root=Path(root),
            structure=str(template),
            submissions=submissions,
            empty_locations=self.empty_locations,
        )

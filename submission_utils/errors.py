# submission_utils/errors.py
from pathlib import Path
from typing import Optional


class SubmissionScanError(Exception):
    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class MaximumDirectoryDepthExceededError(SubmissionScanError):
    """Raised when traversal would descend to or past the depth ceiling. Fatal for the whole scan."""

    def __init__(self, location: Path, max_depth: int) -> None:
        super().__init__(
            f"Encountered more than {max_depth} directories in {location}",
            "depth_exceeded",
        )
        self.location = location
        self.max_depth = max_depth


class InvalidStructureError(SubmissionScanError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "invalid_structure")


class ArchiveExpansionError(SubmissionScanError):
    code = "archive_error"

    def __init__(self, message: str, archive: Optional[Path] = None) -> None:
        super().__init__(message, self.code)
        self.archive = archive


class ArchiveNotFoundError(ArchiveExpansionError):
    code = "archive_not_found"


class CorruptArchiveError(ArchiveExpansionError):
    code = "corrupt_archive"


class InvalidArchiveParametersError(ArchiveExpansionError):
    code = "invalid_archive_parameters"

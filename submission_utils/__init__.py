# submission_utils/__init__.py
from .errors import (
    SubmissionScanError,
    MaximumDirectoryDepthExceededError,
    InvalidStructureError,
    ArchiveExpansionError,
    ArchiveNotFoundError,
    CorruptArchiveError,
    InvalidArchiveParametersError,
)
from .models import (
    MatchToken,
    SubmissionLevel,
    SUBMISSION_LEVEL,
    StructureTemplate,
    Student,
    Submission,
    ScanResult,
)
from .archive_handler import ZipArchiveExpander
from .observer import TraversalObserver, LoggingObserver
from .tokenizer import SubmissionExtractor, Traverser, TraversalResult, SubmissionTokenizer
from .manifest import save_manifest, load_manifest

__all__ = [
    "SubmissionScanError",
    "MaximumDirectoryDepthExceededError",
    "InvalidStructureError",
    "ArchiveExpansionError",
    "ArchiveNotFoundError",
    "CorruptArchiveError",
    "InvalidArchiveParametersError",
    "MatchToken",
    "SubmissionLevel",
    "SUBMISSION_LEVEL",
    "StructureTemplate",
    "Student",
    "Submission",
    "ScanResult",
    "ZipArchiveExpander",
    "TraversalObserver",
    "LoggingObserver",
    "SubmissionExtractor",
    "Traverser",
    "TraversalResult",
    "SubmissionTokenizer",
    "save_manifest",
    "load_manifest",
]

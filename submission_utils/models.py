# submission_utils/models.py
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Dict, Any, Sequence, Tuple, Union

from .errors import InvalidStructureError

SUBMISSION_MARKER = "SUBMISSION"


@dataclass(frozen=True)
class MatchToken:
    pattern: str                 # regex, full-matched against a directory name

    def matches(self, name: str) -> bool:
        return re.fullmatch(self.pattern, name) is not None

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class SubmissionLevel:
    """Sentinel token: stop descending, scan this directory for files."""

    def __str__(self) -> str:
        return SUBMISSION_MARKER


SUBMISSION_LEVEL = SubmissionLevel()

Token = Union[MatchToken, SubmissionLevel]


@dataclass(frozen=True)
class StructureTemplate:
    """
    Expected folder nesting from a scan root down to the submission level.
    Level 0 is the root itself; token(k) describes the directories k steps
    below the root. The last level is SUBMISSION_LEVEL: every directory at
    that depth is one student's submission folder, whatever its name.
    """
    levels: Tuple[Token, ...]

    def __post_init__(self):
        if not self.levels:
            raise InvalidStructureError("Structure needs at least the submission level")
        *matchers, last = self.levels
        if not isinstance(last, SubmissionLevel):
            raise InvalidStructureError(f"Structure must end with {SUBMISSION_MARKER}, got '{last}'")
        for tok in matchers:
            if not isinstance(tok, MatchToken):
                raise InvalidStructureError(f"{SUBMISSION_MARKER} may only appear as the last level")
            try:
                re.compile(tok.pattern)
            except re.error as e:
                raise InvalidStructureError(f"Invalid pattern '{tok.pattern}': {e}") from e

    @staticmethod
    def from_strings(tokens: Sequence[str]) -> "StructureTemplate":
        """
        Build from the conventional list form, e.g. ["", "assignment1", "SUBMISSION"].
        Index 0 stands for the root and is ignored.
        """
        levels = [
            SUBMISSION_LEVEL if t == SUBMISSION_MARKER else MatchToken(t)
            for t in list(tokens)[1:]
        ]
        return StructureTemplate(tuple(levels))

    @staticmethod
    def parse(text: str) -> "StructureTemplate":
        """Build from a slash separated pattern such as 'assignment\\d+/SUBMISSION'."""
        parts = [p for p in text.strip().strip("/").split("/") if p]
        return StructureTemplate.from_strings([""] + parts)

    def token(self, level: int) -> Token:
        if level < 1 or level > len(self.levels):
            raise IndexError(f"No structure level {level}")
        return self.levels[level - 1]

    @property
    def submission_level(self) -> int:
        return len(self.levels)

    def __len__(self) -> int:
        return len(self.levels)

    def __str__(self) -> str:
        return "/".join(str(t) for t in self.levels)


@dataclass(frozen=True)
class Student:
    name: str

    @staticmethod
    def placeholder(index: int) -> "Student":
        return Student(name=f"Unknown{index}")


@dataclass
class Submission:
    location: Path
    student: Student

    def to_dict(self) -> Dict[str, Any]:
        return {"location": str(self.location), "student": self.student.name}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Submission":
        return Submission(location=Path(d["location"]), student=Student(d.get("student") or ""))


@dataclass
class ScanResult:
    root: Path
    structure: Optional[str] = None          # textual form of the template used
    submissions: List[Submission] = field(default_factory=list)
    empty_locations: List[Path] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "structure": self.structure,
            "submissions": [s.to_dict() for s in self.submissions],
            "empty_locations": [str(p) for p in self.empty_locations],
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ScanResult":
        return ScanResult(
            root=Path(d.get("root", "")),
            structure=d.get("structure"),
            submissions=[Submission.from_dict(x) for x in d.get("submissions", [])],
            empty_locations=[Path(p) for p in d.get("empty_locations", [])],
        )

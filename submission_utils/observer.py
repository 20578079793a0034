# submission_utils/observer.py
from pathlib import Path

from utils.logger import logger
from .errors import ArchiveExpansionError
from .models import Token


class TraversalObserver:
    """Hooks called during a scan. All no-ops; override what you need."""

    def visiting(self, location: Path, level: int) -> None:
        pass

    def unexpected_directory(self, location: Path, token: Token) -> None:
        pass

    def dead_end(self, location: Path) -> None:
        pass

    def bottomed_out(self, location: Path) -> None:
        pass

    def found_source(self, path: Path) -> None:
        pass

    def expanded_archive(self, archive: Path, target: Path) -> None:
        pass

    def archive_failed(self, archive: Path, error: ArchiveExpansionError) -> None:
        pass

    def irrelevant_entry(self, path: Path) -> None:
        pass

    def empty_location(self, location: Path) -> None:
        pass


class LoggingObserver(TraversalObserver):
    """Default observer: writes traversal progress to the project logger."""

    def visiting(self, location, level):
        logger.info(f"traverse: {location} (level {level})")

    def unexpected_directory(self, location, token):
        logger.info(f"Unexpected directory: {location} does not match '{token}'")

    def dead_end(self, location):
        logger.info(f"No files in {location}")

    def bottomed_out(self, location):
        logger.debug(f"Bottomed out in {location}")

    def found_source(self, path):
        logger.info(f"Found: {path}")

    def expanded_archive(self, archive, target):
        logger.info(f"Expanded {archive} into {target}")

    def archive_failed(self, archive, error):
        logger.warning(f"Error while expanding submission archive {archive} [{error.code}]: {error}")

    def irrelevant_entry(self, path):
        logger.debug(f"Found invalid file: {path}")

    def empty_location(self, location):
        logger.info(f"Nothing found in {location}")

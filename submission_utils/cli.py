# submission_utils/cli.py
# Scan one assignment directory from the command line.

import argparse
import re
import sys
from pathlib import Path
from typing import List, Optional

from utils.logger import logger, set_level
from . import config
from .errors import InvalidStructureError, MaximumDirectoryDepthExceededError
from .manifest import save_manifest
from .models import StructureTemplate
from .tokenizer import SubmissionTokenizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Locate student submissions in a directory tree")
    parser.add_argument("root", help="directory to scan")
    parser.add_argument(
        "structure",
        nargs="?",
        default=config.DEFAULT_STRUCTURE,
        help="slash separated folder patterns ending in SUBMISSION, e.g. 'assignment1/SUBMISSION'",
    )
    parser.add_argument("--source-regex", default=config.SOURCE_SUFFIX_REGEX, help="regex for source file names")
    parser.add_argument("--archive-regex", default=config.ARCHIVE_REGEX, help="regex for archive file names")
    parser.add_argument("--manifest", help="write the scan result as JSON to this file")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_level(args.log_level)

    try:
        template = StructureTemplate.parse(args.structure)
        tokenizer = SubmissionTokenizer(
            args.source_regex,
            args.archive_regex,
            max_directory_depth=config.MAX_DIRECTORY_DEPTH,
            archive_nesting_depth=config.ARCHIVE_NESTING_DEPTH,
        )
        result = tokenizer.scan_result(template, Path(args.root))
    except (InvalidStructureError, MaximumDirectoryDepthExceededError) as e:
        logger.error(f"Scan aborted [{e.code}]: {e}")
        return 2
    except re.error as e:
        logger.error(f"Invalid file pattern: {e}")
        return 2

    for sub in result.submissions:
        print(f"{sub.student.name}\t{sub.location}")
    for loc in result.empty_locations:
        print(f"EMPTY\t{loc}")

    if args.manifest:
        save_manifest(result, args.manifest)
        logger.info(f"Manifest written to {args.manifest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

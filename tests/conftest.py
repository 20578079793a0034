import pytest

from submission_utils.tokenizer import SubmissionTokenizer

from .helpers import ARCHIVE_REGEX, SOURCE_REGEX, RecordingObserver


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def tokenizer(observer):
    """Tokenizer with the real zip expander."""
    return SubmissionTokenizer(SOURCE_REGEX, ARCHIVE_REGEX, observer=observer)

"""Pytest fixtures for akatimestamps tests."""

from typing import Any

import pytest

from akatimestamps.core.errors import ClipboardError
from akatimestamps.core.models import AnalyzeResults, DetectedTimeStamp, Episode, QuestionType


class FakeClipboard:
    """Clipboard that records writes, or fails on demand."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[str] = []

    async def write(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("clipboard unavailable")
        self.writes.append(text)


@pytest.fixture
def sample_questions() -> list[QuestionType]:
    """Create sample questions for testing."""
    return [
        QuestionType(
            full="1. How do I deal with anxiety at work?",
            searchable="how do i deal with anxiety at work",
            shortened="How do I deal with anxiety at work?",
        ),
        QuestionType(
            full="2. Is it normal to feel tired all the time?",
            searchable="is it normal to feel tired all the time",
            shortened="Is it normal to feel tired all the time?",
        ),
    ]


@pytest.fixture
def sample_results(sample_questions: list[QuestionType]) -> AnalyzeResults:
    """Analysis with a repeated detection of the first question."""
    return AnalyzeResults(
        questions=sample_questions,
        time_stamp=[
            DetectedTimeStamp(question_idx=0, at_str="01:05", found=True),
            DetectedTimeStamp(question_idx=0, at_str="01:20", found=True),
            DetectedTimeStamp(question_idx=1, at_str="14:02", found=True),
        ],
        err="",
    )


@pytest.fixture
def sample_episode(sample_results: AnalyzeResults) -> Episode:
    """Create a fully analysed episode."""
    return Episode(
        number=42,
        raw_number="042",
        name="Ask Kati Anything Ep. 42",
        found_description=True,
        found_vtt=True,
        found_results=sample_results,
    )


@pytest.fixture
def episode_payload() -> dict[str, Any]:
    """One episode as served by GET /eps."""
    return {
        "number": 42,
        "rawNumber": "042",
        "name": "Ask Kati Anything Ep. 42",
        "foundDescription": True,
        "foundVTT": True,
        "foundResults": {
            "questions": [
                {
                    "full": "1. How do I deal with anxiety at work?",
                    "searchable": "how do i deal with anxiety at work",
                    "shortent": "How do I deal with anxiety at work?",
                },
                {
                    "full": "2. Is it normal to feel tired all the time?",
                    "searchable": "is it normal to feel tired all the time",
                    "shortent": "Is it normal to feel tired all the time?",
                },
            ],
            "timeStamp": [
                {"questionIdx": 0, "atStr": "01:05", "found": True},
                {"questionIdx": 0, "atStr": "01:20", "found": True},
                {"questionIdx": 1, "atStr": "14:02", "found": True},
            ],
            "err": "",
        },
    }


@pytest.fixture
def episodes_payload(episode_payload: dict[str, Any]) -> list[dict[str, Any]]:
    """A directory listing with one analysed and one unanalysed episode."""
    return [
        episode_payload,
        {
            "number": 43,
            "rawNumber": "043",
            "name": "Ask Kati Anything Ep. 43",
            "foundDescription": True,
            "foundVTT": False,
            "foundResults": None,
        },
    ]


@pytest.fixture
def base_url() -> str:
    """Root URL of the mocked episode service."""
    return "https://eps.example.com"


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def failing_clipboard() -> FakeClipboard:
    return FakeClipboard(fail=True)

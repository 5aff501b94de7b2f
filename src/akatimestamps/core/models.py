"""Data models for akatimestamps.

Records mirror the JSON served by the episode service. They are frozen:
the client never edits an episode, it replaces the whole directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from akatimestamps.core.errors import PayloadError


def _require(data: dict[str, Any], key: str, kind: type | tuple[type, ...], record: str) -> Any:
    """Fetch a required field and check its JSON type."""
    if key not in data:
        raise PayloadError(f"{record} is missing field '{key}'")
    value = data[key]
    # bool is a subclass of int, a JSON true is never a valid number here
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise PayloadError(
            f"{record}.{key} has unexpected type {type(value).__name__}"
        )
    return value


def _require_object(data: Any, record: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise PayloadError(f"{record} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class QuestionType:
    """A question listed in an episode description."""

    full: str
    searchable: str
    shortened: str

    @classmethod
    def from_dict(cls, data: Any) -> QuestionType:
        data = _require_object(data, "QuestionType")
        # The service spells the display form "shortent"
        key = "shortent" if "shortent" in data else "shortened"
        return cls(
            full=_require(data, "full", str, "QuestionType"),
            searchable=_require(data, "searchable", str, "QuestionType"),
            shortened=_require(data, key, str, "QuestionType"),
        )


@dataclass(frozen=True)
class DetectedTimeStamp:
    """One detection of a question in the captions."""

    question_idx: int
    at_str: str  # preformatted timecode, empty when not found
    found: bool

    @classmethod
    def from_dict(cls, data: Any) -> DetectedTimeStamp:
        data = _require_object(data, "DetectedTimeStamp")
        return cls(
            question_idx=_require(data, "questionIdx", int, "DetectedTimeStamp"),
            at_str=_require(data, "atStr", str, "DetectedTimeStamp"),
            found=_require(data, "found", bool, "DetectedTimeStamp"),
        )


@dataclass(frozen=True)
class AnalyzeResults:
    """Analysis output for one episode.

    ``questions`` and ``time_stamp`` are None when the service failed before
    producing them; ``err`` then usually explains why.
    """

    questions: list[QuestionType] | None
    time_stamp: list[DetectedTimeStamp] | None
    err: str = ""

    @property
    def has_timeline(self) -> bool:
        """Whether both sequences were produced (they may still be empty)."""
        return self.questions is not None and self.time_stamp is not None

    @classmethod
    def from_dict(cls, data: Any) -> AnalyzeResults:
        data = _require_object(data, "AnalyzeResults")

        questions = data.get("questions")
        if questions is not None and not isinstance(questions, list):
            raise PayloadError("AnalyzeResults.questions must be a list")

        time_stamp = data.get("timeStamp")
        if time_stamp is not None and not isinstance(time_stamp, list):
            raise PayloadError("AnalyzeResults.timeStamp must be a list")

        err = data.get("err") or ""
        if not isinstance(err, str):
            raise PayloadError("AnalyzeResults.err must be a string")

        return cls(
            questions=None if questions is None else [QuestionType.from_dict(q) for q in questions],
            time_stamp=None
            if time_stamp is None
            else [DetectedTimeStamp.from_dict(t) for t in time_stamp],
            err=err,
        )


@dataclass(frozen=True)
class Episode:
    """A podcast episode and the status of its analysis."""

    number: int
    raw_number: str
    name: str
    found_description: bool
    found_vtt: bool
    found_results: AnalyzeResults | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Episode:
        data = _require_object(data, "Episode")
        results = data.get("foundResults")
        return cls(
            number=_require(data, "number", int, "Episode"),
            raw_number=_require(data, "rawNumber", str, "Episode"),
            name=_require(data, "name", str, "Episode"),
            found_description=_require(data, "foundDescription", bool, "Episode"),
            found_vtt=_require(data, "foundVTT", bool, "Episode"),
            found_results=None if results is None else AnalyzeResults.from_dict(results),
        )


@dataclass(frozen=True)
class RefetchResponse:
    """Outcome of a re-fetch request."""

    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def parse_episodes(data: Any) -> list[Episode]:
    """
    Parse the episode listing payload.

    Args:
        data: Decoded JSON from ``GET /eps``

    Returns:
        Episodes in the order the service listed them

    Raises:
        PayloadError: If the payload is not a list of episode records
    """
    if data is None:
        # The service encodes an empty directory as null
        return []
    if not isinstance(data, list):
        raise PayloadError(f"Episode listing must be a JSON array, got {type(data).__name__}")
    return [Episode.from_dict(item) for item in data]

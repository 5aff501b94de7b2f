"""Tests for data models and payload parsing."""

from typing import Any

import pytest

from akatimestamps.core.errors import PayloadError
from akatimestamps.core.models import (
    AnalyzeResults,
    DetectedTimeStamp,
    Episode,
    QuestionType,
    RefetchResponse,
    parse_episodes,
)


class TestQuestionType:
    """Tests for QuestionType parsing."""

    def test_reads_shortent_key(self) -> None:
        """The service's 'shortent' key maps to shortened."""
        question = QuestionType.from_dict(
            {"full": "1. Why?", "searchable": "why", "shortent": "Why?"}
        )

        assert question == QuestionType(full="1. Why?", searchable="why", shortened="Why?")

    def test_accepts_shortened_key(self) -> None:
        question = QuestionType.from_dict(
            {"full": "1. Why?", "searchable": "why", "shortened": "Why?"}
        )

        assert question.shortened == "Why?"

    def test_missing_field_raises(self) -> None:
        with pytest.raises(PayloadError, match="shortened"):
            QuestionType.from_dict({"full": "1. Why?", "searchable": "why"})


class TestDetectedTimeStamp:
    """Tests for DetectedTimeStamp parsing."""

    def test_parse(self) -> None:
        timestamp = DetectedTimeStamp.from_dict({"questionIdx": 3, "atStr": "1:02:03", "found": True})

        assert timestamp.question_idx == 3
        assert timestamp.at_str == "1:02:03"
        assert timestamp.found is True

    def test_not_found_has_empty_timecode(self) -> None:
        timestamp = DetectedTimeStamp.from_dict({"questionIdx": 0, "atStr": "", "found": False})

        assert timestamp.at_str == ""
        assert timestamp.found is False

    def test_boolean_index_rejected(self) -> None:
        with pytest.raises(PayloadError, match="questionIdx"):
            DetectedTimeStamp.from_dict({"questionIdx": True, "atStr": "", "found": False})

    def test_non_object_rejected(self) -> None:
        with pytest.raises(PayloadError):
            DetectedTimeStamp.from_dict([0, "00:10", True])


class TestAnalyzeResults:
    """Tests for AnalyzeResults parsing."""

    def test_null_sequences_have_no_timeline(self) -> None:
        """A failed analysis is served with null sequences."""
        results = AnalyzeResults.from_dict(
            {"questions": None, "timeStamp": None, "err": "open file: no such file"}
        )

        assert results.questions is None
        assert results.time_stamp is None
        assert results.err == "open file: no such file"
        assert not results.has_timeline

    def test_empty_sequences_still_have_timeline(self) -> None:
        results = AnalyzeResults.from_dict({"questions": [], "timeStamp": [], "err": ""})

        assert results.has_timeline
        assert results.questions == []

    def test_missing_err_defaults_to_empty(self) -> None:
        results = AnalyzeResults.from_dict({"questions": [], "timeStamp": []})

        assert results.err == ""

    def test_wrong_sequence_type_rejected(self) -> None:
        with pytest.raises(PayloadError, match="timeStamp"):
            AnalyzeResults.from_dict({"questions": [], "timeStamp": "00:10"})


class TestEpisode:
    """Tests for Episode parsing."""

    def test_parse_full_episode(self, episode_payload: dict[str, Any]) -> None:
        episode = Episode.from_dict(episode_payload)

        assert episode.number == 42
        assert episode.raw_number == "042"
        assert episode.name == "Ask Kati Anything Ep. 42"
        assert episode.found_description is True
        assert episode.found_vtt is True
        assert episode.found_results is not None
        assert len(episode.found_results.questions or []) == 2
        assert len(episode.found_results.time_stamp or []) == 3

    def test_absent_results(self, episode_payload: dict[str, Any]) -> None:
        del episode_payload["foundResults"]

        episode = Episode.from_dict(episode_payload)

        assert episode.found_results is None

    def test_episode_is_immutable(self, sample_episode: Episode) -> None:
        with pytest.raises(AttributeError):
            sample_episode.name = "changed"  # type: ignore[misc]


class TestParseEpisodes:
    """Tests for parse_episodes."""

    def test_preserves_order(self, episodes_payload: list[dict[str, Any]]) -> None:
        episodes = parse_episodes(episodes_payload)

        assert [ep.number for ep in episodes] == [42, 43]

    def test_null_is_empty_directory(self) -> None:
        assert parse_episodes(None) == []

    def test_object_rejected(self) -> None:
        with pytest.raises(PayloadError, match="array"):
            parse_episodes({"episodes": []})


class TestRefetchResponse:
    def test_ok_without_error(self) -> None:
        assert RefetchResponse().ok

    def test_not_ok_with_error(self) -> None:
        assert not RefetchResponse(error="Invalid key").ok

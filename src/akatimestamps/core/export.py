"""Rendering compacted timelines as copy-ready text."""

from collections.abc import Sequence

from akatimestamps.core.compactor import compact_timestamps
from akatimestamps.core.errors import QuestionLookupError
from akatimestamps.core.models import AnalyzeResults, DetectedTimeStamp, Episode, QuestionType

LOADING_MESSAGE = "loading.."
NO_DESCRIPTION_MESSAGE = "Unable to read description of episode"
NO_CAPTIONS_MESSAGE = "Unable to read captions of episode"
NO_TIMESTAMPS_MESSAGE = "Unable to get timestamps for this episode"


def question_text(questions: Sequence[QuestionType], idx: int) -> str:
    """
    Look up the shortened text of a question.

    Args:
        questions: Questions of the episode
        idx: Index referenced by a timestamp

    Returns:
        The shortened question text

    Raises:
        QuestionLookupError: If idx is not a valid index into questions
    """
    # Negative indexes must not wrap around to the end of the list
    if not 0 <= idx < len(questions):
        raise QuestionLookupError(
            f"Timestamp references question {idx}, episode has {len(questions)} questions"
        )
    return questions[idx].shortened


def timeline_lines(
    timeline: Sequence[DetectedTimeStamp],
    questions: Sequence[QuestionType],
) -> list[str]:
    """Format each timeline entry as ``"<atStr> <shortened question>"``."""
    return [f"{ts.at_str} {question_text(questions, ts.question_idx)}" for ts in timeline]


def format_timeline(
    timeline: Sequence[DetectedTimeStamp],
    questions: Sequence[QuestionType],
) -> str:
    """
    Render a compacted timeline as a single text block.

    Args:
        timeline: Compacted timestamps
        questions: Questions the timestamps refer to

    Returns:
        One line per entry, joined by newlines, without a trailing newline

    Raises:
        QuestionLookupError: If an entry references an unknown question
    """
    return "\n".join(timeline_lines(timeline, questions))


def export_results(results: AnalyzeResults) -> str:
    """Compact the timestamps of an analysis and render them for export."""
    return format_timeline(
        compact_timestamps(results.time_stamp or []),
        results.questions or [],
    )


def episode_status_message(episode: Episode | None) -> str | None:
    """
    Explain why an episode has no timeline.

    Args:
        episode: The episode, or None while the directory is still loading

    Returns:
        None when the episode has a timeline to show, otherwise a message
    """
    if episode is None:
        return LOADING_MESSAGE

    results = episode.found_results
    if results is not None and results.has_timeline:
        return None

    if not episode.found_description:
        return NO_DESCRIPTION_MESSAGE
    if not episode.found_vtt:
        return NO_CAPTIONS_MESSAGE
    if results is not None and results.err:
        return f"Analysis failed: {results.err}"
    return NO_TIMESTAMPS_MESSAGE

"""Core modules for akatimestamps."""

from akatimestamps.core.compactor import compact_timestamps
from akatimestamps.core.config import AkaConfig, load_config
from akatimestamps.core.errors import (
    AkaTimestampsError,
    ClipboardError,
    ConfigError,
    CredentialStoreError,
    EpisodeServiceError,
    PayloadError,
    QuestionLookupError,
)
from akatimestamps.core.export import (
    episode_status_message,
    export_results,
    format_timeline,
    question_text,
    timeline_lines,
)
from akatimestamps.core.models import (
    AnalyzeResults,
    DetectedTimeStamp,
    Episode,
    QuestionType,
    RefetchResponse,
    parse_episodes,
)
from akatimestamps.core.theme import PALETTES, Theme, pick_theme

__all__ = [
    "AkaConfig",
    "AkaTimestampsError",
    "AnalyzeResults",
    "ClipboardError",
    "ConfigError",
    "CredentialStoreError",
    "DetectedTimeStamp",
    "Episode",
    "EpisodeServiceError",
    "PALETTES",
    "PayloadError",
    "QuestionLookupError",
    "QuestionType",
    "RefetchResponse",
    "Theme",
    "compact_timestamps",
    "episode_status_message",
    "export_results",
    "format_timeline",
    "load_config",
    "parse_episodes",
    "pick_theme",
    "question_text",
    "timeline_lines",
]

"""Custom exceptions for akatimestamps."""


class AkaTimestampsError(Exception):
    """Base exception for all akatimestamps errors."""

    pass


class ConfigError(AkaTimestampsError):
    """Configuration-related errors."""

    pass


class EpisodeServiceError(AkaTimestampsError):
    """Episode service transport, status or decoding errors."""

    pass


class PayloadError(EpisodeServiceError):
    """Episode service payload does not match the expected schema."""

    pass


class CredentialStoreError(AkaTimestampsError):
    """Credential file cannot be read or written."""

    pass


class ClipboardError(AkaTimestampsError):
    """Writing to the platform clipboard failed."""

    pass


class QuestionLookupError(AkaTimestampsError, IndexError):
    """A timestamp references a question index that does not exist."""

    pass

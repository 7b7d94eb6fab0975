from __future__ import annotations

from .config import MSG_PARSE_ERROR, MSG_READ_ERROR


class DatasetError(Exception):
    """Fatal problem while loading the verb dataset."""


class ReadFailure(DatasetError):
    """The dataset bytes could not be read from their source."""

    def __init__(self, source: str, cause: BaseException):
        self.source = source
        self.cause = cause
        super().__init__(MSG_READ_ERROR.format(source=source, cause=cause))


class ParseFailure(DatasetError):
    """The dataset bytes were read but are not a valid list of verb records."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(MSG_PARSE_ERROR.format(cause=cause))

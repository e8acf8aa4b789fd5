"""
Error taxonomy for the backup report job.

AWS listing failures and HTTP transport failures are not wrapped: botocore and
requests exceptions reach the invoking environment unchanged. The classes below
cover the failures that only exist at the Slack protocol level.
"""

from typing import Optional


class BackupReportError(Exception):
    """Base class for errors raised by the backup report job."""


class SlackApiRequestError(BackupReportError):
    """
    Slack accepted the request but answered with ``ok: false``.

    Attributes:
        method: The Slack Web API method that was called.
        error: The error string reported by Slack (e.g. ``invalid_auth``).
    """

    def __init__(self, method: str, error: Optional[str]):
        self.method = method
        self.error = error or 'unknown_error'
        super().__init__(f'Slack API error: {self.error} ({method})')


class SlackResponseParseError(BackupReportError):
    """The Slack response body could not be parsed or lacked required fields."""

    def __init__(self, method: str, detail: str):
        self.method = method
        self.detail = detail
        super().__init__(f'Failed to parse Slack response from {method}: {detail}')


class FileTransferError(BackupReportError):
    """The raw file upload to the Slack-issued URL did not return HTTP 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f'File upload failed with status {status_code}')

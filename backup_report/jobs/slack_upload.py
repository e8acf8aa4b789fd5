"""
Slack file delivery for the AWS Backup report.

This module uploads the CSV export to a Slack channel using Slack's external
upload flow, which replaced the deprecated ``files.upload`` method:

1. files.getUploadURLExternal - request an upload slot (upload_url + file_id)
2. POST the raw CSV bytes to upload_url (the URL itself is the credential)
3. files.completeUploadExternal - finalize the file and share it to the
   channel with a summary comment

Each step depends on the previous one. A failing step raises immediately and
the later steps are never attempted; an abandoned upload slot is not cleaned
up. There is no retry and no timeout override.

Error Mapping:
- ok: false from Slack -> SlackApiRequestError (carries Slack's error string)
- unparseable body or missing fields -> SlackResponseParseError
- non-200 from the byte transfer -> FileTransferError
- transport failures (requests / urllib) propagate unchanged

Dependencies:
    - slack-sdk (WebClient for the Web API calls)
    - requests (raw byte transfer to the upload URL)

Usage:
    client = get_slack_client(settings)
    result = upload_report_to_slack(client, settings.slack_channel, csv_content, stats, window)
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional

import requests
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from slack_sdk.web import SlackResponse

from backup_report.core.config import Settings
from backup_report.core.exceptions import (
    BackupReportError,
    FileTransferError,
    SlackApiRequestError,
    SlackResponseParseError,
)
from backup_report.models import JobStatistics, ReportResult, ReportWindow, UploadSession

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

GET_UPLOAD_URL_METHOD = 'files.getUploadURLExternal'
COMPLETE_UPLOAD_METHOD = 'files.completeUploadExternal'

REPORT_FILE_NAME_TEMPLATE = 'aws-backup-report-{date}.csv'

CSV_CONTENT_TYPE = 'text/csv'

# slack_sdk reports an unparseable body as ok: false with this error prefix
NON_JSON_ERROR_PREFIX = 'Received a response in a non-JSON format'


# =============================================================================
# Slack Client
# =============================================================================

def get_slack_client(settings: Settings) -> WebClient:
    """Create a Slack WebClient authenticated with the configured bot token."""
    # Every Web API request is sent exactly once
    return WebClient(
        token=settings.slack_token,
        base_url=settings.slack_api_url,
        retry_handlers=[],
    )


def _is_non_json_reply(error: Optional[str]) -> bool:
    return bool(error) and error.startswith(NON_JSON_ERROR_PREFIX)


def _check_ok(method: str, response: Mapping[str, Any]) -> None:
    if response.get('ok'):
        return
    error = response.get('error')
    if _is_non_json_reply(error):
        raise SlackResponseParseError(method, error)
    raise SlackApiRequestError(method, error)


def _slack_error(method: str, exc: SlackApiError) -> BackupReportError:
    """Translate a slack_sdk error into the job's error taxonomy."""
    if not isinstance(exc.response, SlackResponse):
        return SlackResponseParseError(method, str(exc))
    error = exc.response.get('error')
    if _is_non_json_reply(error):
        return SlackResponseParseError(method, error)
    return SlackApiRequestError(method, error)


# =============================================================================
# Message Formatting
# =============================================================================

def build_report_filename(run_date: date) -> str:
    """Return the attachment name, e.g. ``aws-backup-report-2026-10-19.csv``."""
    return REPORT_FILE_NAME_TEMPLATE.format(date=run_date.strftime('%Y-%m-%d'))


def format_report_comment(window: ReportWindow, stats: JobStatistics) -> str:
    """
    Build the comment posted alongside the CSV file.

    Example output:
        📊 AWS Backup Report
        Period: 2026-10-12 to 2026-10-19 (7 days)
        Total: 3 jobs (✅ 1 completed, ❌ 1 failed)
    """
    start = window.start.strftime('%Y-%m-%d')
    end = window.end.strftime('%Y-%m-%d')
    return (
        f"📊 AWS Backup Report\n"
        f"Period: {start} to {end} ({window.days} days)\n"
        f"Total: {stats.total} jobs (✅ {stats.completed} completed, ❌ {stats.failed} failed)"
    )


# =============================================================================
# Upload Steps
# =============================================================================

def request_upload_slot(client: WebClient, filename: str, length: int) -> UploadSession:
    """
    Step 1: ask Slack for an upload URL and file ID.

    Args:
        client: Authenticated Slack WebClient.
        filename: Name the file will have in Slack.
        length: Size of the file content in bytes.

    Returns:
        UploadSession holding upload_url and file_id.

    Raises:
        SlackApiRequestError: If Slack answers ok: false.
        SlackResponseParseError: If the response is malformed.
    """
    try:
        response = client.files_getUploadURLExternal(filename=filename, length=length)
    except SlackApiError as e:
        raise _slack_error(GET_UPLOAD_URL_METHOD, e) from e

    _check_ok(GET_UPLOAD_URL_METHOD, response)

    upload_url = response.get('upload_url')
    file_id = response.get('file_id')
    if not upload_url or not file_id:
        raise SlackResponseParseError(
            GET_UPLOAD_URL_METHOD,
            'response is missing upload_url or file_id'
        )

    logger.info(f"Obtained Slack upload slot {file_id} for {filename} ({length} bytes)")
    return UploadSession(upload_url=upload_url, file_id=file_id)


def transfer_file_bytes(session: UploadSession, content: bytes) -> None:
    """
    Step 2: POST the raw file content to the upload URL.

    No Authorization header is sent. Only HTTP 200 counts as success.

    Raises:
        FileTransferError: If the upload URL answers with any other status.
        requests.RequestException: On connection-level failures.
    """
    response = requests.post(
        session.upload_url,
        data=content,
        headers={'Content-Type': CSV_CONTENT_TYPE},
    )

    if response.status_code != 200:
        raise FileTransferError(response.status_code)

    logger.info(f"Transferred {len(content)} bytes for Slack file {session.file_id}")


def complete_upload(
    client: WebClient,
    session: UploadSession,
    title: str,
    channel_id: str,
    initial_comment: str
) -> Mapping[str, Any]:
    """
    Step 3: finalize the upload and share the file to the channel.

    The request body is JSON: ``{"files": [{"id", "title"}], "channel_id",
    "initial_comment"}``.

    Returns:
        The Slack response data.

    Raises:
        SlackApiRequestError: If Slack answers ok: false.
        SlackResponseParseError: If the response is malformed.
    """
    payload = {
        'files': [
            {
                'id': session.file_id,
                'title': title,
            }
        ],
        'channel_id': channel_id,
        'initial_comment': initial_comment,
    }

    try:
        response = client.api_call(COMPLETE_UPLOAD_METHOD, json=payload)
    except SlackApiError as e:
        raise _slack_error(COMPLETE_UPLOAD_METHOD, e) from e

    _check_ok(COMPLETE_UPLOAD_METHOD, response)

    logger.info(f"Shared Slack file {session.file_id} to channel {channel_id}")
    return response


# =============================================================================
# Main Entry Point
# =============================================================================

def upload_report_to_slack(
    client: WebClient,
    channel_id: str,
    csv_content: str,
    stats: JobStatistics,
    window: ReportWindow
) -> ReportResult:
    """
    Upload the CSV report and share it to the channel with a summary.

    Runs the three upload steps in order. The file is named after the end
    date of the report window, which is the run date.

    Args:
        client: Authenticated Slack WebClient.
        channel_id: Destination channel ID.
        csv_content: Rendered CSV document.
        stats: Statistics used for the summary comment.
        window: Report window used for the file name and the period line.

    Returns:
        ReportResult with the job total, the file name and the Slack file ID.
    """
    filename = build_report_filename(window.end.date())
    content = csv_content.encode('utf-8')

    session = request_upload_slot(client, filename, len(content))
    transfer_file_bytes(session, content)
    complete_upload(
        client,
        session,
        title=filename,
        channel_id=channel_id,
        initial_comment=format_report_comment(window, stats),
    )

    logger.info("File uploaded to Slack successfully")
    return ReportResult(total_jobs=stats.total, filename=filename, file_id=session.file_id)

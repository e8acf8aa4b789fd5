"""
CSV rendering of backup jobs.

Produces the fixed eleven-column export attached to the Slack report. The
output is a single string: header line, one line per job in retrieval order,
lines separated by a bare ``\\n`` and no trailing newline.

Field rules:
- Missing text fields render as an empty string
- Timestamps render as ISO-8601 UTC with milliseconds (``2026-10-01T03:00:00.000Z``)
- BackupSizeInBytes renders as a decimal integer, or empty when absent
- Text containing a comma, double quote or newline is quoted, with inner
  quotes doubled; numbers and empty values are never quoted
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence, Union

from backup_report.models import BackupJobRecord


CSV_HEADERS: List[str] = [
    'BackupJobId',
    'ResourceType',
    'ResourceArn',
    'State',
    'CreationDate',
    'CompletionDate',
    'BackupSizeInBytes',
    'BackupVaultName',
    'RecoveryPointArn',
    'IamRoleArn',
    'StatusMessage',
]

_CHARS_REQUIRING_QUOTES = (',', '"', '\n')


def escape_csv_field(value: Union[str, int]) -> str:
    """
    Quote a text field when it contains a comma, double quote or newline.

    Non-text values are returned as their decimal string, unquoted.

    Example:
        >>> escape_csv_field('Backup failed, "disk" full')
        '"Backup failed, ""disk"" full"'
        >>> escape_csv_field(1024)
        '1024'
    """
    if not isinstance(value, str):
        return str(value)
    if any(char in value for char in _CHARS_REQUIRING_QUOTES):
        return '"' + value.replace('"', '""') + '"'
    return value


def format_timestamp(value: Optional[datetime]) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision, or '' if absent."""
    if value is None:
        return ''
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc_value = value.astimezone(timezone.utc)
    return utc_value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{utc_value.microsecond // 1000:03d}Z'


def _text(value: Optional[str]) -> str:
    return escape_csv_field(value or '')


def render_csv_row(job: BackupJobRecord) -> str:
    """Render one job as a CSV line matching CSV_HEADERS."""
    size = job.backup_size_in_bytes
    fields = [
        _text(job.backup_job_id),
        _text(job.resource_type),
        _text(job.resource_arn),
        _text(job.state),
        format_timestamp(job.creation_date),
        format_timestamp(job.completion_date),
        escape_csv_field(size) if size is not None else '',
        _text(job.backup_vault_name),
        _text(job.recovery_point_arn),
        _text(job.iam_role_arn),
        _text(job.status_message),
    ]
    return ','.join(fields)


def render_backup_jobs_csv(jobs: Sequence[BackupJobRecord]) -> str:
    """
    Render all jobs as a CSV document.

    Args:
        jobs: Backup jobs in retrieval order.

    Returns:
        The CSV text. With no jobs this is exactly the header line.
    """
    lines = [','.join(CSV_HEADERS)]
    lines.extend(render_csv_row(job) for job in jobs)
    return '\n'.join(lines)

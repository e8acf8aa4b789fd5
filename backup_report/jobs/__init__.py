"""
Scheduled Jobs for the AWS Backup report.

This module provides the job functions triggered by the scheduler:
- Report orchestration (backup_report.py)
- Slack file delivery via the external upload flow (slack_upload.py)

Environment Requirements:
-------------------------
- SLACK_TOKEN: Bot token with the files:write scope
- SLACK_CHANNEL: ID of the channel the report is shared to
- REPORT_PERIOD_DAYS: Lookback window in days (default 31)

Usage Examples:
---------------
    from backup_report.core import get_settings
    from backup_report.jobs import run_backup_report

    result = run_backup_report(get_settings())
    print(result.total_jobs)
"""

# =============================================================================
# Report Job Exports
# =============================================================================

from backup_report.jobs.backup_report import run_backup_report

# =============================================================================
# Slack Upload Exports
# =============================================================================

from backup_report.jobs.slack_upload import (
    build_report_filename,
    complete_upload,
    format_report_comment,
    get_slack_client,
    request_upload_slot,
    transfer_file_bytes,
    upload_report_to_slack,
)

__all__ = [
    # Orchestration
    'run_backup_report',
    # Slack delivery
    'build_report_filename',
    'complete_upload',
    'format_report_comment',
    'get_slack_client',
    'request_upload_slot',
    'transfer_file_bytes',
    'upload_report_to_slack',
]

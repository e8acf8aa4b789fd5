"""
Scheduled AWS Backup report job.

Retrieves the backup jobs of the lookback window, renders them as CSV,
summarizes them, and shares the CSV to Slack. Every run is stateless: the
window is recomputed from "now", nothing is persisted, and two overlapping
runs would both post a report.

Failure Policy:
- Any failing step aborts the run; nothing is posted for a failed run
- The error is logged with its traceback and re-raised unchanged so the
  invoking environment (the Lambda runtime) marks the invocation failed

Usage:
    # Run with settings from the environment
    result = run_backup_report(get_settings())

    # Inject clients and a fixed clock, e.g. in tests
    result = run_backup_report(settings, backup_client=stub, slack_client=stub, now=fixed_now)

See Also:
    - backup_report/services/backup_jobs.py: Paginated retrieval
    - backup_report/jobs/slack_upload.py: Three-step Slack upload
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from backup_report.core.config import Settings
from backup_report.jobs.slack_upload import get_slack_client, upload_report_to_slack
from backup_report.models import ReportResult, ReportWindow
from backup_report.services.backup_jobs import get_backup_client, list_all_backup_jobs
from backup_report.services.csv_export import render_backup_jobs_csv
from backup_report.services.statistics import calculate_job_statistics

logger = logging.getLogger(__name__)


def run_backup_report(
    settings: Settings,
    backup_client=None,
    slack_client=None,
    now: Optional[datetime] = None
) -> ReportResult:
    """
    Generate the backup report and deliver it to Slack.

    Args:
        settings: Job configuration (period, channel, token).
        backup_client: AWS Backup client; built from settings when omitted.
        slack_client: Slack WebClient; built from settings when omitted.
        now: End of the report window (default: current UTC time).

    Returns:
        ReportResult with the total number of jobs reported.

    Raises:
        Whatever the failing step raised, unchanged.
    """
    logger.info("Starting AWS Backup report generation...")

    window = ReportWindow.ending_at(now or datetime.now(timezone.utc), settings.report_period_days)
    logger.info(
        f"Report window: {window.start.date()} to {window.end.date()} ({window.days} days)"
    )

    try:
        if backup_client is None:
            backup_client = get_backup_client(settings)
        jobs = list_all_backup_jobs(backup_client, window)

        csv_content = render_backup_jobs_csv(jobs)
        logger.info(f"Generated CSV with {len(jobs)} rows")

        stats = calculate_job_statistics(jobs)
        logger.info(
            f"Job states: {stats.completed} completed, {stats.failed} failed, "
            f"{stats.in_progress} in progress, {stats.aborted} aborted, "
            f"{stats.expired} expired, {stats.total - stats.classified} other"
        )

        if slack_client is None:
            slack_client = get_slack_client(settings)
        result = upload_report_to_slack(
            slack_client,
            settings.slack_channel,
            csv_content,
            stats,
            window,
        )
    except Exception:
        logger.exception("Error generating backup report")
        raise

    logger.info(f"Successfully sent backup report to Slack. Total jobs: {result.total_jobs}")
    return result

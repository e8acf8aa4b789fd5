"""
AWS Backup job retrieval.

Pages through ``ListBackupJobs`` for the report window and accumulates every
job in memory. There is no retry and no partial result: a failing page raises
the botocore error and aborts the run before anything is uploaded.

Usage:
    client = get_backup_client(settings)
    window = ReportWindow.ending_at(datetime.now(timezone.utc), settings.report_period_days)
    jobs = list_all_backup_jobs(client, window)
"""

import logging
from typing import Any, Dict, List

import boto3

from backup_report.core.config import Settings
from backup_report.models import BackupJobRecord, ReportWindow

logger = logging.getLogger(__name__)


def get_backup_client(settings: Settings):
    """
    Create a boto3 AWS Backup client.

    Credentials come from the standard boto3 chain (the Lambda execution role
    in production). The region is only pinned when AWS_REGION is configured.
    """
    if settings.aws_region:
        return boto3.client('backup', region_name=settings.aws_region)
    return boto3.client('backup')


def list_all_backup_jobs(client, window: ReportWindow) -> List[BackupJobRecord]:
    """
    Fetch every backup job created inside the report window.

    Issues one ``list_backup_jobs`` call per page, passing back the
    ``NextToken`` of the previous page until the API stops returning one.
    Pages are concatenated in the order the API returns them; no dedup or
    sorting is applied.

    Args:
        client: boto3 ``backup`` client (or a stand-in with the same method).
        window: Creation-time range to query.

    Returns:
        All jobs of all pages, in API order.

    Raises:
        botocore.exceptions.ClientError: If any page request is rejected.
        botocore.exceptions.BotoCoreError: On transport or credential failures.
    """
    jobs: List[BackupJobRecord] = []
    next_token = None
    page_count = 0

    while True:
        request: Dict[str, Any] = {
            'ByCreatedAfter': window.start,
            'ByCreatedBefore': window.end,
        }
        # botocore rejects NextToken=None, so only send it for follow-up pages
        if next_token:
            request['NextToken'] = next_token

        page = client.list_backup_jobs(**request)
        page_count += 1

        page_jobs = page.get('BackupJobs', [])
        jobs.extend(BackupJobRecord.model_validate(job) for job in page_jobs)
        logger.debug(f"Fetched page {page_count} with {len(page_jobs)} backup jobs")

        next_token = page.get('NextToken')
        if not next_token:
            break

    logger.info(
        f"Retrieved {len(jobs)} backup jobs across {page_count} page(s) "
        f"created between {window.start.isoformat()} and {window.end.isoformat()}"
    )
    return jobs

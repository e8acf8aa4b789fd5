"""
Pydantic models for the backup report job.

This module provides the typed shapes that flow through the pipeline:
listing API records, the lookback window, the computed statistics, the
ephemeral Slack upload session and the final job result.

Source references:
- AWS Backup ListBackupJobs API: BackupJobs[] response shape
- Slack files.getUploadURLExternal: upload_url / file_id response fields

All models use Pydantic v2 syntax.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# AWS Backup Records
# =============================================================================


class BackupJobRecord(BaseModel):
    """
    One backup job as returned by ``ListBackupJobs``.

    Field aliases are the AWS response keys, so a page entry can be passed
    straight to ``model_validate``. Every field is optional because the API
    omits keys it has no value for. Keys not modelled here are kept as extras.
    Records are frozen: the job only reads and projects them.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        extra='allow',
        frozen=True,
    )

    backup_job_id: Optional[str] = Field(
        default=None,
        alias='BackupJobId',
        description="Unique identifier of the backup job"
    )
    resource_type: Optional[str] = Field(
        default=None,
        alias='ResourceType',
        description="AWS resource type (EBS, RDS, DynamoDB, EFS, ...)"
    )
    resource_arn: Optional[str] = Field(
        default=None,
        alias='ResourceArn',
        description="ARN of the protected resource"
    )
    state: Optional[str] = Field(
        default=None,
        alias='State',
        description="Job state, kept verbatim (see BackupJobState)"
    )
    creation_date: Optional[datetime] = Field(
        default=None,
        alias='CreationDate',
        description="When the backup job was created"
    )
    completion_date: Optional[datetime] = Field(
        default=None,
        alias='CompletionDate',
        description="When the backup job finished, if it has"
    )
    backup_size_in_bytes: Optional[int] = Field(
        default=None,
        alias='BackupSizeInBytes',
        description="Size of the backup in bytes"
    )
    backup_vault_name: Optional[str] = Field(
        default=None,
        alias='BackupVaultName',
        description="Vault the recovery point is stored in"
    )
    recovery_point_arn: Optional[str] = Field(
        default=None,
        alias='RecoveryPointArn',
        description="ARN of the produced recovery point"
    )
    iam_role_arn: Optional[str] = Field(
        default=None,
        alias='IamRoleArn',
        description="IAM role used to run the job"
    )
    status_message: Optional[str] = Field(
        default=None,
        alias='StatusMessage',
        description="Detail message, usually present for failed jobs"
    )


# =============================================================================
# Report Window
# =============================================================================


class ReportWindow(BaseModel):
    """
    The ``[now - days, now]`` creation-time range of a single run.

    Never persisted: every run computes a fresh window via ``ending_at``.
    """
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    days: int = Field(..., gt=0, description="Lookback length in days")

    @model_validator(mode='after')
    def _check_order(self) -> 'ReportWindow':
        if self.start > self.end:
            raise ValueError('report window start must not be after its end')
        return self

    @classmethod
    def ending_at(cls, now: datetime, days: int) -> 'ReportWindow':
        """
        Build the window that ends at ``now`` and spans ``days`` days.

        Naive datetimes are interpreted as UTC; the result is always in UTC.
        """
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        end = now.astimezone(timezone.utc)
        return cls(start=end - timedelta(days=days), end=end, days=days)


# =============================================================================
# Statistics
# =============================================================================


class JobStatistics(BaseModel):
    """
    Status bucket counts and per-resource grouping of the retrieved jobs.

    ``total`` counts every record, including states that fall in no bucket,
    so the bucket sum can be lower than ``total``.
    """
    completed: int = 0
    failed: int = 0
    in_progress: int = 0
    aborted: int = 0
    expired: int = 0
    total: int = 0
    jobs_by_resource: Dict[str, List[BackupJobRecord]] = Field(default_factory=dict)

    @property
    def classified(self) -> int:
        """Number of jobs that landed in one of the five buckets."""
        return self.completed + self.failed + self.in_progress + self.aborted + self.expired


# =============================================================================
# Slack Upload
# =============================================================================


class UploadSession(BaseModel):
    """
    Upload slot issued by ``files.getUploadURLExternal``.

    Single use: consumed by the byte transfer and the completion call of the
    same run, then discarded.
    """
    model_config = ConfigDict(frozen=True)

    upload_url: str
    file_id: str


# =============================================================================
# Job Result
# =============================================================================


class ReportResult(BaseModel):
    """Outcome of a successful run."""
    total_jobs: int
    filename: str
    file_id: str

"""
Enumeration definitions for the backup report job.

All enums inherit from both `str` and `Enum` so members compare equal to the
raw strings returned by the AWS Backup API and serialize cleanly with Pydantic.

Source references:
- AWS Backup ListBackupJobs API: BackupJob.State values
"""

from enum import Enum


class BackupJobState(str, Enum):
    """
    Lifecycle state of an AWS Backup job.

    Values mirror the ``State`` field of ``ListBackupJobs``. Records keep the
    raw string, so a state added by AWS later does not break parsing; it is
    simply absent from this enum.
    """
    CREATED = "CREATED"
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    ABORTING = "ABORTING"
    ABORTED = "ABORTED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"
    PARTIAL = "PARTIAL"


class StatusBucket(str, Enum):
    """
    Summary buckets reported in the Slack comment and statistics.

    - completed: COMPLETED
    - failed: FAILED
    - in_progress: RUNNING, CREATED, PENDING
    - aborted: ABORTED
    - expired: EXPIRED
    """
    COMPLETED = "completed"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"
    ABORTED = "aborted"
    EXPIRED = "expired"

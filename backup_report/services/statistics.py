"""
Status bucket counting and resource-type grouping for backup jobs.

Pure functions over the retrieved job list: a single pass, no I/O.
"""

from typing import Dict, List, Optional, Sequence

from backup_report.models import (
    BackupJobRecord,
    BackupJobState,
    JobStatistics,
    StatusBucket,
)


# States missing from this table (ABORTING, PARTIAL, anything AWS adds later)
# fall in no bucket but are still counted in the total.
STATE_BUCKETS: Dict[str, StatusBucket] = {
    BackupJobState.COMPLETED.value: StatusBucket.COMPLETED,
    BackupJobState.FAILED.value: StatusBucket.FAILED,
    BackupJobState.RUNNING.value: StatusBucket.IN_PROGRESS,
    BackupJobState.CREATED.value: StatusBucket.IN_PROGRESS,
    BackupJobState.PENDING.value: StatusBucket.IN_PROGRESS,
    BackupJobState.ABORTED.value: StatusBucket.ABORTED,
    BackupJobState.EXPIRED.value: StatusBucket.EXPIRED,
}


def classify_state(state: Optional[str]) -> Optional[StatusBucket]:
    """Return the bucket for a raw job state, or None if it is unclassified."""
    if state is None:
        return None
    return STATE_BUCKETS.get(state)


def calculate_job_statistics(jobs: Sequence[BackupJobRecord]) -> JobStatistics:
    """
    Count jobs per status bucket and group them by resource type.

    Args:
        jobs: Retrieved backup jobs, in retrieval order.

    Returns:
        JobStatistics with bucket counts, the total number of jobs, and a
        mapping of resource type to its jobs. Jobs without a resource type
        are counted but left out of the grouping.
    """
    counts: Dict[StatusBucket, int] = {bucket: 0 for bucket in StatusBucket}
    jobs_by_resource: Dict[str, List[BackupJobRecord]] = {}

    for job in jobs:
        bucket = classify_state(job.state)
        if bucket is not None:
            counts[bucket] += 1

        if job.resource_type:
            jobs_by_resource.setdefault(job.resource_type, []).append(job)

    return JobStatistics(
        completed=counts[StatusBucket.COMPLETED],
        failed=counts[StatusBucket.FAILED],
        in_progress=counts[StatusBucket.IN_PROGRESS],
        aborted=counts[StatusBucket.ABORTED],
        expired=counts[StatusBucket.EXPIRED],
        total=len(jobs),
        jobs_by_resource=jobs_by_resource,
    )

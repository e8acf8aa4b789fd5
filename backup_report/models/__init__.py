"""
Package initialization file for the backup report models.

Exports the enumerations and Pydantic models so other modules can import them
from backup_report.models directly:

    from backup_report.models import BackupJobRecord, JobStatistics, ReportWindow
"""

# =============================================================================
# Enums
# =============================================================================

from backup_report.models.enums import (
    BackupJobState,
    StatusBucket,
)

# =============================================================================
# Schemas
# =============================================================================

from backup_report.models.schemas import (
    BackupJobRecord,
    JobStatistics,
    ReportResult,
    ReportWindow,
    UploadSession,
)

__all__ = [
    # Enums
    'BackupJobState',
    'StatusBucket',
    # Schemas
    'BackupJobRecord',
    'JobStatistics',
    'ReportResult',
    'ReportWindow',
    'UploadSession',
]

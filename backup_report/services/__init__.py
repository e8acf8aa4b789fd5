"""
Backup Report Services Module

Stateless business logic for the report job:
- backup_jobs: Paginated retrieval of AWS Backup jobs
- statistics: Status bucket counting and resource-type grouping
- csv_export: Fixed-column CSV rendering

The jobs layer (backup_report/jobs/) chains these services and delivers the
result to Slack.
"""

# =============================================================================
# Retrieval Service Exports
# =============================================================================

from backup_report.services.backup_jobs import (
    get_backup_client,
    list_all_backup_jobs,
)

# =============================================================================
# Statistics Service Exports
# =============================================================================

from backup_report.services.statistics import (
    STATE_BUCKETS,
    calculate_job_statistics,
    classify_state,
)

# =============================================================================
# CSV Export Service Exports
# =============================================================================

from backup_report.services.csv_export import (
    CSV_HEADERS,
    escape_csv_field,
    format_timestamp,
    render_backup_jobs_csv,
    render_csv_row,
)

__all__ = [
    # Retrieval
    'get_backup_client',
    'list_all_backup_jobs',
    # Statistics
    'STATE_BUCKETS',
    'calculate_job_statistics',
    'classify_state',
    # CSV export
    'CSV_HEADERS',
    'escape_csv_field',
    'format_timestamp',
    'render_backup_jobs_csv',
    'render_csv_row',
]

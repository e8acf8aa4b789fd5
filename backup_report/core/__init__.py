"""
Core infrastructure package for the backup report job.

Provides:
- Configuration management via pydantic-settings
- The error taxonomy shared by the services and jobs

Re-exports key components so callers can write:

    from backup_report.core import get_settings, Settings

instead of importing from the individual submodules.
"""

# =============================================================================
# Re-exports from backup_report.core.config
# =============================================================================
from backup_report.core.config import (
    DEFAULT_REPORT_PERIOD_DAYS,
    Settings,
    get_settings,
)

# =============================================================================
# Re-exports from backup_report.core.exceptions
# =============================================================================
from backup_report.core.exceptions import (
    BackupReportError,
    FileTransferError,
    SlackApiRequestError,
    SlackResponseParseError,
)

__all__ = [
    # Configuration management (from config.py)
    'DEFAULT_REPORT_PERIOD_DAYS',
    'Settings',
    'get_settings',
    # Error taxonomy (from exceptions.py)
    'BackupReportError',
    'FileTransferError',
    'SlackApiRequestError',
    'SlackResponseParseError',
]

"""
Settings and environment management for the AWS Backup report job.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Lenient parsing of the lookback window (falls back to the default period)
- Singleton pattern via @lru_cache for the Lambda entry point

Environment Variables:
- SLACK_TOKEN: Slack bot token used as bearer credential (Required)
- SLACK_CHANNEL: Destination channel ID for the report (Required)
- REPORT_PERIOD_DAYS: Lookback window in days (default: 31)
- SLACK_API_URL: Slack Web API base URL (default: https://slack.com/api/)
- AWS_REGION: Region for the AWS Backup client (default: boto3 resolution chain)
- LOG_LEVEL: Root logging level for the entry point (default: INFO, unknown names fall back to INFO)

Usage:
    from backup_report.core.config import get_settings

    settings = get_settings()
    result = run_backup_report(settings)
"""

from functools import lru_cache
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Lookback window used when REPORT_PERIOD_DAYS is absent or unusable
DEFAULT_REPORT_PERIOD_DAYS = 31

DEFAULT_SLACK_API_URL = 'https://slack.com/api/'

DEFAULT_LOG_LEVEL = 'INFO'

# Names accepted by logging.Logger.setLevel
LOG_LEVEL_NAMES = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


class Settings(BaseSettings):
    """
    Job settings loaded from environment variables.

    The orchestrator receives an instance of this class explicitly, so tests
    construct one directly instead of mutating the process environment.

    Attributes:
        slack_token: Slack bot token sent as the bearer credential. Required.
        slack_channel: Channel ID the CSV report is shared to. Required.
        report_period_days: Number of days to look back from "now".
        slack_api_url: Base URL of the Slack Web API.
        aws_region: Optional AWS region override for the Backup client.
        log_level: Logging level applied by the entry point.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    # =========================================================================
    # Required Environment Variables
    # =========================================================================

    slack_token: str
    slack_channel: str

    # =========================================================================
    # Optional Environment Variables with Defaults
    # =========================================================================

    report_period_days: int = DEFAULT_REPORT_PERIOD_DAYS

    slack_api_url: str = DEFAULT_SLACK_API_URL

    # Left unset so boto3 resolves the region itself (AWS_DEFAULT_REGION, profile, Lambda env)
    aws_region: Optional[str] = None

    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator('report_period_days', mode='before')
    @classmethod
    def _fallback_to_default_period(cls, value: Any) -> int:
        """
        Coerce the lookback window, falling back to the default period.

        An empty, non-integer or non-positive value does not fail the run;
        it silently becomes DEFAULT_REPORT_PERIOD_DAYS.
        """
        try:
            days = int(value)
        except (TypeError, ValueError):
            return DEFAULT_REPORT_PERIOD_DAYS

        if days <= 0:
            return DEFAULT_REPORT_PERIOD_DAYS
        return days

    @field_validator('log_level', mode='before')
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        """Upper-case LOG_LEVEL; an unknown name becomes DEFAULT_LOG_LEVEL."""
        level = str(value or '').strip().upper()
        if level not in LOG_LEVEL_NAMES:
            return DEFAULT_LOG_LEVEL
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get the job settings singleton.

    Returns:
        Settings: The settings instance loaded from the environment.

    Raises:
        pydantic.ValidationError: If SLACK_TOKEN or SLACK_CHANNEL is missing.

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()

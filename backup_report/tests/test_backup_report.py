"""
End-to-end tests for the report job orchestration.

The AWS Backup client and the Slack client are injected mocks; requests.post
is patched. No network access is needed.
"""

import csv
import io
from datetime import datetime
from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError

from backup_report.core.config import Settings
from backup_report.core.exceptions import SlackApiRequestError
from backup_report.jobs.backup_report import run_backup_report
from backup_report.services.csv_export import CSV_HEADERS
from backup_report.tests.conftest import TEST_CHANNEL, TEST_FILE_ID


class TestRunBackupReport:
    """run_backup_report happy path and failure propagation."""

    def test_end_to_end_three_jobs_seven_days(
        self,
        settings: Settings,
        fixed_now: datetime,
        mock_backup_client: Mock,
        mock_slack_client: Mock,
        mock_requests_post: Mock
    ) -> None:
        """
        COMPLETED, FAILED and RUNNING jobs over a 7-day window produce a
        4-line CSV and the expected summary comment.
        """
        # Act
        result = run_backup_report(
            settings,
            backup_client=mock_backup_client,
            slack_client=mock_slack_client,
            now=fixed_now,
        )

        # Assert: result
        assert result.total_jobs == 3
        assert result.file_id == TEST_FILE_ID
        assert result.filename == 'aws-backup-report-2026-10-19.csv'

        # Assert: uploaded CSV
        uploaded = mock_requests_post.call_args.kwargs['data'].decode('utf-8')
        assert len(uploaded.split('\n')) == 4
        rows = list(csv.reader(io.StringIO(uploaded, newline='')))
        assert rows[0] == CSV_HEADERS
        assert [row[3] for row in rows[1:]] == ['COMPLETED', 'FAILED', 'RUNNING']

        # Assert: completion call
        payload = mock_slack_client.api_call.call_args.kwargs['json']
        assert payload['channel_id'] == TEST_CHANNEL
        assert payload['initial_comment'] == (
            '📊 AWS Backup Report\n'
            'Period: 2026-10-12 to 2026-10-19 (7 days)\n'
            'Total: 3 jobs (✅ 1 completed, ❌ 1 failed)'
        )

    def test_queries_configured_window(
        self,
        settings: Settings,
        fixed_now: datetime,
        mock_backup_client: Mock,
        mock_slack_client: Mock,
        mock_requests_post: Mock
    ) -> None:
        run_backup_report(
            settings,
            backup_client=mock_backup_client,
            slack_client=mock_slack_client,
            now=fixed_now,
        )

        kwargs = mock_backup_client.list_backup_jobs.call_args.kwargs
        assert kwargs['ByCreatedBefore'] == fixed_now
        assert (kwargs['ByCreatedBefore'] - kwargs['ByCreatedAfter']).days == 7

    def test_empty_window_still_posts_header_only_report(
        self,
        settings: Settings,
        fixed_now: datetime,
        mock_slack_client: Mock,
        mock_requests_post: Mock
    ) -> None:
        backup_client = Mock()
        backup_client.list_backup_jobs = Mock(return_value={'BackupJobs': []})

        result = run_backup_report(
            settings,
            backup_client=backup_client,
            slack_client=mock_slack_client,
            now=fixed_now,
        )

        assert result.total_jobs == 0
        uploaded = mock_requests_post.call_args.kwargs['data'].decode('utf-8')
        assert uploaded == ','.join(CSV_HEADERS)
        payload = mock_slack_client.api_call.call_args.kwargs['json']
        assert payload['initial_comment'].endswith('Total: 0 jobs (✅ 0 completed, ❌ 0 failed)')

    def test_listing_failure_aborts_before_upload(
        self,
        settings: Settings,
        fixed_now: datetime,
        mock_slack_client: Mock,
        mock_requests_post: Mock
    ) -> None:
        error = ClientError(
            {'Error': {'Code': 'ThrottlingException', 'Message': 'Rate exceeded'}},
            'ListBackupJobs',
        )
        backup_client = Mock()
        backup_client.list_backup_jobs = Mock(side_effect=error)

        with pytest.raises(ClientError) as exc_info:
            run_backup_report(
                settings,
                backup_client=backup_client,
                slack_client=mock_slack_client,
                now=fixed_now,
            )

        assert exc_info.value is error
        mock_slack_client.files_getUploadURLExternal.assert_not_called()
        mock_requests_post.assert_not_called()
        mock_slack_client.api_call.assert_not_called()

    def test_slack_rejection_propagates(
        self,
        settings: Settings,
        fixed_now: datetime,
        mock_backup_client: Mock,
        mock_slack_client: Mock,
        mock_requests_post: Mock
    ) -> None:
        mock_slack_client.api_call.return_value = {'ok': False, 'error': 'not_in_channel'}

        with pytest.raises(SlackApiRequestError, match='not_in_channel'):
            run_backup_report(
                settings,
                backup_client=mock_backup_client,
                slack_client=mock_slack_client,
                now=fixed_now,
            )

    def test_builds_clients_from_settings_when_not_injected(
        self,
        settings: Settings,
        fixed_now: datetime,
        mock_backup_client: Mock,
        mock_slack_client: Mock,
        mock_requests_post: Mock
    ) -> None:
        with patch(
            'backup_report.jobs.backup_report.get_backup_client',
            return_value=mock_backup_client,
        ) as backup_factory, patch(
            'backup_report.jobs.backup_report.get_slack_client',
            return_value=mock_slack_client,
        ) as slack_factory:
            result = run_backup_report(settings, now=fixed_now)

        backup_factory.assert_called_once_with(settings)
        slack_factory.assert_called_once_with(settings)
        assert result.total_jobs == 3

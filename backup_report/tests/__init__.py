'''
AWS Backup Report Test Suite

Test Modules:
-------------
- test_config.py: Settings loading and lookback window fallback
- test_backup_jobs.py: Paginated retrieval from AWS Backup
- test_statistics.py: Status buckets and resource grouping
- test_csv_export.py: CSV header, escaping and round-trip parsing
- test_slack_upload.py: Three-step Slack upload and error mapping
- test_backup_report.py: End-to-end orchestration
- test_main.py: Lambda handler response and failure propagation

Run with:
    pytest backup_report/tests
'''

"""
AWS Backup Report Package.

Scheduled job that lists AWS Backup jobs over a lookback window, summarizes
them, and shares a CSV export to a Slack channel.

Subpackages:
    - core: Configuration and error taxonomy
    - models: Pydantic schemas and enums
    - services: Retrieval, statistics and CSV rendering
    - jobs: Orchestration and Slack delivery
"""

__version__ = "1.0.0"

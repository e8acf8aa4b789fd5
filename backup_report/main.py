"""
AWS Lambda entry point for the AWS Backup report job.

The scheduler (an EventBridge rule) invokes ``handler`` periodically. The
event and context are not used by the job. Configuration is read once from
the environment and passed explicitly to the orchestrator.

On success the handler returns an API-Gateway-style response whose body
carries ``totalJobs``. On failure the exception propagates so the Lambda
runtime records the invocation as failed.

Local run (reads the same environment variables, including a .env file):
    python -m backup_report.main
"""

import json
import logging
from typing import Any, Dict

from backup_report.core.config import get_settings
from backup_report.jobs.backup_report import run_backup_report

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def handler(event: Any, context: Any) -> Dict[str, Any]:
    """
    Lambda handler: generate the backup report and post it to Slack.

    Args:
        event: Scheduler event (unused).
        context: Lambda context (unused).

    Returns:
        Dict with statusCode 200 and a JSON body containing totalJobs.
    """
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)

    result = run_backup_report(settings)

    return {
        "statusCode": 200,
        "body": json.dumps({
            "message": "Report sent successfully",
            "totalJobs": result.total_jobs,
        }),
    }


# Run once locally when executed directly
if __name__ == "__main__":
    response = handler({}, None)
    logger.info(f"Handler response: {response}")

"""AWS Lambda handler for USA Weightlifting Meets Sync."""
import json
import logging
import os
import sys
import time
from typing import Dict, Any

from dotenv import load_dotenv

from config import ConfigurationError, load_settings
from listings.retry import retry
from listings.usaw_client import USAWMeetsClient
from processor.meet_processor import MeetProcessor
from storage.dynamodb_manager import DynamoDBManager

# Attributes every LogRecord has; anything else came in through `extra`
_RESERVED_ATTRS = frozenset(
    logging.LogRecord('', 0, '', 0, '', (), None).__dict__
) | {'message', 'asctime'}


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, including any `extra` fields."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith('_'):
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {'statusCode': status_code, 'body': json.dumps(body)}


def _failure(message: str, error: Exception, start_time: float) -> Dict[str, Any]:
    return _response(500, {
        'message': message,
        'error': str(error),
        'error_type': type(error).__name__,
        'duration_seconds': round(time.time() - start_time, 2)
    })


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler function for the meets sync.

    Args:
        event: EventBridge event payload
        context: Lambda context object

    Returns:
        Response dict with statusCode and summary statistics
    """
    setup_logging(os.environ.get('LOG_LEVEL', 'INFO'))
    logger = logging.getLogger(__name__)
    start_time = time.time()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return _failure('Invalid configuration', e, start_time)

    logger.info(
        "Meets sync started",
        extra={
            'table_name': settings.table_name,
            'max_fetch_attempts': settings.max_fetch_attempts,
            'timeout_seconds': settings.timeout_seconds
        }
    )

    try:
        client = USAWMeetsClient(timeout=settings.timeout_seconds)
        processor = MeetProcessor()
        dynamodb_manager = DynamoDBManager(
            table_name=settings.table_name,
            endpoint_url=settings.endpoint_url,
            region_name=settings.region_name,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            aws_session_token=settings.aws_session_token,
            write_delay=settings.write_delay_seconds
        )

        try:
            logger.info("Fetching meets from USA Weightlifting")
            listings = retry(
                client.fetch_meets,
                max_attempts=settings.max_fetch_attempts
            )
        except Exception as e:
            logger.error(
                f"Failed to fetch meets after retries: {e}",
                extra={'error_type': type(e).__name__},
                exc_info=True
            )
            return _failure('Failed to fetch meets', e, start_time)

        if not listings:
            logger.info("No meets data found or API request failed")
            return _response(200, {
                'message': 'No meets to sync',
                'statistics': {
                    'listings_fetched': 0,
                    'valid_meets_processed': 0,
                    'meets_inserted': 0,
                    'meets_skipped': 0,
                    'meets_failed': 0,
                    'duration_seconds': round(time.time() - start_time, 2)
                },
                'errors': []
            })

        logger.info(f"Processing {len(listings)} listings")
        records = processor.process_listings(listings)

        logger.info("Synchronizing meets with DynamoDB")
        sync_result = dynamodb_manager.sync_meets(records)

        duration = time.time() - start_time
        logger.info(
            "Meets sync completed successfully",
            extra={
                'duration_seconds': round(duration, 2),
                'meets_inserted': sync_result.inserted,
                'meets_skipped': sync_result.skipped,
                'meets_failed': sync_result.failed
            }
        )

        return _response(200, {
            'message': 'Sync completed successfully',
            'statistics': {
                'listings_fetched': len(listings),
                'valid_meets_processed': len(records),
                'meets_inserted': sync_result.inserted,
                'meets_skipped': sync_result.skipped,
                'meets_failed': sync_result.failed,
                'duration_seconds': round(duration, 2)
            },
            'errors': sync_result.errors
        })

    except Exception as e:
        logger.error(
            f"Meets sync failed: {e}",
            extra={'error_type': type(e).__name__},
            exc_info=True
        )
        return _failure('Sync failed', e, start_time)


def main() -> int:
    """Run one sync outside Lambda; returns the process exit code."""
    load_dotenv()
    response = lambda_handler({}, None)
    return 0 if response['statusCode'] == 200 else 1


if __name__ == '__main__':
    sys.exit(main())

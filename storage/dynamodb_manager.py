"""DynamoDB manager for meet storage operations."""
import logging
import time
from dataclasses import asdict
from typing import Callable, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from processor.models import MeetRecord, SyncResult

logger = logging.getLogger(__name__)


class DynamoDBManager:
    """Manager for the meets table, keyed by meet name."""

    KEY_ATTRIBUTE = 'name'
    TRANSIENT_FIELDS = ('external_id',)

    def __init__(
        self,
        table_name: str,
        endpoint_url: Optional[str] = None,
        region_name: str = 'us-east-1',
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        aws_session_token: Optional[str] = None,
        write_delay: float = 0.5,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize DynamoDB client and table reference.

        Args:
            table_name: Name of the DynamoDB table
            endpoint_url: DynamoDB endpoint, None for the AWS default
            region_name: AWS region of the table
            aws_access_key_id: Access key id, None to use the default chain
            aws_secret_access_key: Secret access key
            aws_session_token: Session token for temporary credentials,
                such as those of a Lambda execution role
            write_delay: Seconds to wait between successive inserts
            sleep: Function used for the pacing delay
        """
        self.table_name = table_name
        self.write_delay = write_delay
        self._sleep = sleep
        self.dynamodb = boto3.resource(
            'dynamodb',
            endpoint_url=endpoint_url,
            region_name=region_name,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            aws_session_token=aws_session_token
        )
        self.table = self.dynamodb.Table(table_name)
        logger.info(f"Initialized DynamoDBManager for table: {table_name}")

    def meet_exists(self, name: str) -> bool:
        """
        Check whether a meet with this name is already stored.

        Args:
            name: Meet name

        Returns:
            True if a row exists

        Raises:
            ClientError, BotoCoreError: If the lookup fails
        """
        response = self.table.get_item(
            Key={self.KEY_ATTRIBUTE: name},
            ProjectionExpression='#name',
            ExpressionAttributeNames={'#name': self.KEY_ATTRIBUTE}
        )
        return 'Item' in response

    def insert_meet(self, record: MeetRecord) -> None:
        """
        Insert a meet, failing if the name is already taken.

        Args:
            record: MeetRecord to store

        Raises:
            ClientError: ConditionalCheckFailedException on a duplicate
                name, or any other store error
            BotoCoreError: On connection problems
        """
        self.table.put_item(
            Item=self._meet_to_item(record),
            ConditionExpression='attribute_not_exists(#name)',
            ExpressionAttributeNames={'#name': self.KEY_ATTRIBUTE}
        )

    def sync_meets(self, records: List[MeetRecord]) -> SyncResult:
        """
        Insert every meet that isn't stored yet.

        Existing rows are never updated or deleted. Store errors are handled
        per record so one bad meet doesn't stop the rest.

        Args:
            records: Processed meets, in upload order

        Returns:
            SyncResult with counts of inserted, skipped and failed meets
        """
        logger.info(f"Starting sync process with {len(records)} meets")
        result = SyncResult()
        wrote_previous = False

        for record in records:
            if self._is_stored(record):
                logger.info(f"Meet '{record.name}' already exists, skipping")
                result.skipped += 1
                continue

            if wrote_previous and self.write_delay > 0:
                self._sleep(self.write_delay)
            wrote_previous = True

            try:
                self.insert_meet(record)
                logger.info(f"Successfully inserted meet '{record.name}'")
                result.inserted += 1
            except (ClientError, BotoCoreError) as e:
                error_msg = f"Error inserting meet '{record.name}': {e}"
                logger.error(error_msg)
                result.failed += 1
                result.errors.append(error_msg)

        logger.info(
            f"Sync complete: processed {len(records)} meets, "
            f"{result.inserted} inserted, {result.skipped} skipped, "
            f"{result.failed} failed"
        )
        return result

    def _is_stored(self, record: MeetRecord) -> bool:
        try:
            exists = self.meet_exists(record.name)
        except (ClientError, BotoCoreError) as e:
            # Fall back to not-found; the conditional put rejects duplicates
            logger.error(
                f"Error checking if meet '{record.name}' exists: {e}"
            )
            return False

        if not exists:
            logger.info(
                f"Meet '{record.name}' with external ID "
                f"{record.external_id} is new"
            )
        return exists

    def _meet_to_item(self, record: MeetRecord) -> dict:
        """
        Convert MeetRecord object to DynamoDB item.

        Args:
            record: MeetRecord object

        Returns:
            DynamoDB item dictionary without transient fields
        """
        item = asdict(record)
        for field_name in self.TRANSIENT_FIELDS:
            item.pop(field_name, None)
        return item

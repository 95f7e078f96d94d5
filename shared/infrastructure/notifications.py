import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shared.domain.exceptions import PublishFailedError
from shared.domain.repositories import INotificationPublisher
from shared.utils import Logger

logger = Logger()


class SNSNotificationPublisher(INotificationPublisher):
    """
    Infrastructure Adapter for publishing notifications via Amazon SNS.
    """

    def __init__(self, client=None, region_name: str = None):
        if client is None:
            client = (
                boto3.client("sns", region_name=region_name)
                if region_name
                else boto3.client("sns")
            )
        self.client = client

    def publish(self, topic_arn: str, message: str) -> str:
        """
        Publishes a message to an SNS topic.

        Args:
            topic_arn: ARN of the destination topic.
            message: Message body.

        Returns:
            str: The MessageId assigned by SNS.

        Raises:
            PublishFailedError: SNS rejected the call or could not be reached.
        """
        try:
            response = self.client.publish(TopicArn=topic_arn, Message=message)
        except ClientError as e:
            reason = e.response.get("Error", {}).get("Message") or str(e)
            raise PublishFailedError(topic_arn, reason) from e
        except BotoCoreError as e:
            raise PublishFailedError(topic_arn, str(e)) from e

        message_id = response.get("MessageId", "")
        logger.info("Published SNS", topic_arn=topic_arn, message_id=message_id)
        return message_id

"""
Measurement Summary Services (Application Layer)

Use Case: summarize a completed measurement and fan the result out via SNS
Following Clean Architecture / Hexagonal Architecture
"""

from shared.domain.entities import SummaryStatistics, WebhookEvent
from shared.domain.exceptions import EmptySeriesError, UnsupportedEventError
from shared.domain.repositories import IMeasurementRepository, INotificationPublisher
from shared.utils import Logger

from measurement_webhook.aggregator import compute_summary


class NotificationService:
    """
    Formats summaries and publishes them to a single topic
    """

    def __init__(self, publisher: INotificationPublisher, topic_arn: str):
        self.publisher = publisher
        self.topic_arn = topic_arn
        self.logger = Logger()

    def publish_summary(self, stats: SummaryStatistics) -> str:
        """
        Publish the summary message once

        Returns:
            Message id assigned by the publisher

        Raises:
            PublishFailedError: publish call failed
        """
        message = stats.to_message()
        message_id = self.publisher.publish(self.topic_arn, message)
        self.logger.info("Published summary", topic_arn=self.topic_arn, message_id=message_id)
        return message_id


class MeasurementSummaryService:
    """
    Application service: fetch -> aggregate -> notify
    """

    def __init__(
        self,
        measurement_repository: IMeasurementRepository,
        notification_service: NotificationService
    ):
        """
        Dependency Injection: depends on abstractions, not implementations
        """
        self.measurement_repo = measurement_repository
        self.notification_service = notification_service
        self.logger = Logger()

    def summarize(self, event: WebhookEvent) -> SummaryStatistics:
        """
        Compute statistics for the measurement referenced by event

        Raises:
            UnsupportedEventError: event is not a completed measurement
            FetchFailedError: data points could not be fetched
            EmptySeriesError: the measurement has no data points
        """
        if not event.is_measurement_completed():
            raise UnsupportedEventError(event.resource_type, event.action)

        series = self.measurement_repo.fetch_data_points(event.measurement_uuid)
        self.logger.info(
            "Fetched data points",
            measurement_uuid=event.measurement_uuid,
            count=len(series)
        )
        if series.is_empty():
            raise EmptySeriesError()
        return compute_summary(series.values)

    def publish_summary(self, stats: SummaryStatistics) -> str:
        """Hand the summary to the notification service"""
        return self.notification_service.publish_summary(stats)

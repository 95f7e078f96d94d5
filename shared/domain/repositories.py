"""
Repository Interfaces (Ports)

Following Hexagonal Architecture:
- Define contracts in domain layer
- Infrastructure implements these interfaces
"""

from abc import ABC, abstractmethod

from .entities import MeasurementSeries


class IMeasurementRepository(ABC):
    """Port for reading measurement data points"""

    @abstractmethod
    def fetch_data_points(self, measurement_uuid: str) -> MeasurementSeries:
        """
        Retrieve the float data points of a measurement

        Raises:
            FetchFailedError: upstream could not deliver the series
        """
        pass


class INotificationPublisher(ABC):
    """Port for fan-out notifications"""

    @abstractmethod
    def publish(self, topic_arn: str, message: str) -> str:
        """
        Publish message to topic and return the message id

        Raises:
            PublishFailedError: the topic rejected the message
        """
        pass

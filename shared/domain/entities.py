"""
Domain Entities for the intdash measurement webhook

Following Hexagonal Architecture principles:
- Pure domain objects
- No infrastructure dependencies
- Business logic encapsulation
"""

from dataclasses import dataclass
from typing import Tuple


MEASUREMENT_RESOURCE_TYPE = "measurement"
COMPLETED_ACTION = "completed"


@dataclass(frozen=True)
class WebhookEvent:
    """Notification sent by intdash when a resource changes"""
    resource_type: str
    action: str
    measurement_uuid: str

    def is_measurement_completed(self) -> bool:
        """Business rule: only completed measurements are summarized"""
        return (
            self.resource_type == MEASUREMENT_RESOURCE_TYPE
            and self.action == COMPLETED_ACTION
        )


@dataclass(frozen=True)
class MeasurementSeries:
    """Ordered data points of a single measurement"""
    measurement_uuid: str
    values: Tuple[float, ...]

    def __post_init__(self):
        # Callers may hand over any iterable; store it immutably
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def is_empty(self) -> bool:
        return not self.values


@dataclass(frozen=True)
class SummaryStatistics:
    """Value Object for the published summary"""
    average: float
    unbiased_variance: float

    def to_message(self) -> str:
        """Render the notification body"""
        return (
            f"Average: {self.average:f}\n"
            f"Unbiased Variance: {self.unbiased_variance:f}\n"
        )

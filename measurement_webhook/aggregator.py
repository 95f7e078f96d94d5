from typing import Iterable

from shared.domain.entities import SummaryStatistics
from shared.domain.exceptions import EmptySeriesError


def compute_summary(values: Iterable[float]) -> SummaryStatistics:
    """
    Average and unbiased sample variance of values.

    Variance is 0.0 for a single value instead of dividing by zero.

    Raises:
        EmptySeriesError: values is empty
    """
    points = list(values)
    if not points:
        raise EmptySeriesError()

    count = len(points)
    average = sum(points) / count

    variance = 0.0
    if count > 1:
        # deviation sum of squares
        dss = sum((v - average) * (v - average) for v in points)
        variance = dss / (count - 1)

    return SummaryStatistics(average=average, unbiased_variance=variance)

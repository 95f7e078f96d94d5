"""
Measurement data sources (Adapter Layer)

SyntheticMeasurementRepository stands in for the intdash API until the real
integration exists. HttpMeasurementRepository reads data points over HTTP
when an upstream URL is configured.
"""

import math
import random
from typing import Any, List, Optional

import requests

from shared.domain.entities import MeasurementSeries
from shared.domain.exceptions import FetchFailedError
from shared.domain.repositories import IMeasurementRepository
from shared.utils import Logger

logger = Logger()


class SyntheticMeasurementRepository(IMeasurementRepository):
    """
    Generates data points from a normal distribution (mean 100, stddev 15).

    The generator is reseeded on every call, so every measurement yields the
    same series. This is a placeholder, not a data source.
    """

    def __init__(
        self,
        seed: int = 0,
        count: int = 1000,
        mean: float = 100.0,
        stddev: float = 15.0,
    ):
        self.seed = seed
        self.count = count
        self.mean = mean
        self.stddev = stddev

    def fetch_data_points(self, measurement_uuid: str) -> MeasurementSeries:
        rng = random.Random(self.seed)
        values = [rng.gauss(0.0, 1.0) * self.stddev + self.mean for _ in range(self.count)]
        logger.debug(
            "Generated synthetic data points",
            measurement_uuid=measurement_uuid,
            count=len(values),
        )
        return MeasurementSeries(measurement_uuid=measurement_uuid, values=values)


class HttpMeasurementRepository(IMeasurementRepository):
    """
    Reads data points from an HTTP API.

    GET {base_url}/measurements/{uuid}/data_points must answer with a JSON
    array of numbers, or an object holding such an array under "data_points".
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def fetch_data_points(self, measurement_uuid: str) -> MeasurementSeries:
        url = f"{self.base_url}/measurements/{measurement_uuid}/data_points"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise FetchFailedError(measurement_uuid, str(e)) from e
        except ValueError as e:
            raise FetchFailedError(measurement_uuid, f"invalid JSON: {e}") from e

        values = self._extract_values(measurement_uuid, payload)
        logger.info(
            "Fetched data points",
            measurement_uuid=measurement_uuid,
            count=len(values),
        )
        return MeasurementSeries(measurement_uuid=measurement_uuid, values=values)

    @staticmethod
    def _extract_values(measurement_uuid: str, payload: Any) -> List[float]:
        if isinstance(payload, dict):
            payload = payload.get("data_points")
        if not isinstance(payload, list):
            raise FetchFailedError(measurement_uuid, "response has no data point list")

        # bool is an int subclass; reject it explicitly
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in payload):
            raise FetchFailedError(measurement_uuid, "data points must be numbers")

        try:
            values = [float(v) for v in payload]
        except OverflowError as e:
            raise FetchFailedError(measurement_uuid, f"data point out of range: {e}") from e

        # NaN and Infinity are valid JSON for requests but poison the summary
        if not all(math.isfinite(v) for v in values):
            raise FetchFailedError(measurement_uuid, "data points must be finite")
        return values

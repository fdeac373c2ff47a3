"""Market observation data models."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class Observation(BaseModel):
    """A single (timestamp, price, volume) market observation."""

    model_config = ConfigDict(frozen=True)

    timestamp: int  # Unix timestamp in milliseconds
    price: float
    volume: float = 0.0


def normalize_series(observations: Iterable[Observation]) -> list[Observation]:
    """Sort observations by timestamp ascending.

    The sort is stable, so observations sharing a timestamp keep their
    input order. Duplicates are not removed and empty input is allowed.
    """
    return sorted(observations, key=lambda o: o.timestamp)


def get_prices(series: Iterable[Observation]) -> list[float]:
    """Get list of prices."""
    return [o.price for o in series]


def get_volumes(series: Iterable[Observation]) -> list[float]:
    """Get list of volumes."""
    return [o.volume for o in series]

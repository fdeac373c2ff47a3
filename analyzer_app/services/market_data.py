"""Convert raw market chart payloads into observations."""

from typing import Any, Mapping

from analyzer_core.models import Observation


class MarketDataError(RuntimeError):
    """Raised when an upstream payload does not have the expected shape."""


def _pair(entry: Any, field: str, index: int) -> tuple[int, float]:
    try:
        timestamp, value = entry
        return int(timestamp), float(value)
    except (TypeError, ValueError) as e:
        raise MarketDataError(
            f"Malformed {field} entry at index {index}: {entry!r}"
        ) from e


def observations_from_market_chart(payload: Mapping[str, Any]) -> list[Observation]:
    """
    Build observations from a market chart payload.

    Prices and volumes are paired by index position; the timestamp comes
    from the price entry.

    Args:
        payload: Mapping with "prices" and "total_volumes" lists of
            [timestamp_ms, value] pairs

    Returns:
        List of Observation in payload order (not yet normalized)

    Raises:
        MarketDataError: If the arrays are missing, misaligned, or malformed
    """
    if not isinstance(payload, Mapping):
        raise MarketDataError(f"Expected a JSON object, got {type(payload).__name__}")

    prices = payload.get("prices")
    volumes = payload.get("total_volumes")
    if not isinstance(prices, list) or not isinstance(volumes, list):
        raise MarketDataError("Payload is missing 'prices' or 'total_volumes'")
    if len(volumes) < len(prices):
        raise MarketDataError(
            f"Got {len(prices)} prices but only {len(volumes)} volumes"
        )

    observations = []
    for i, price_entry in enumerate(prices):
        timestamp, price = _pair(price_entry, "prices", i)
        _, volume = _pair(volumes[i], "total_volumes", i)
        observations.append(
            Observation(timestamp=timestamp, price=price, volume=volume)
        )

    return observations

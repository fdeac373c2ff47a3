"""Technical indicators for signal generation.

Every function takes plain sequences of floats and returns a new list.
The moving-average family (SMA, EMA, Wilder smoothing, RSI, MACD) returns
a series aligned to a suffix of the input: output index 0 corresponds to
input index ``period - 1``. When the input is shorter than the period the
result is empty rather than NaN-padded. Bollinger Bands and OBV return
one value per input point.
"""

from typing import NamedTuple, Sequence

import numpy as np


class MacdResult(NamedTuple):
    macd_line: list[float]
    signal_line: list[float]


class BollingerBands(NamedTuple):
    middle: list[float]
    upper: list[float]
    lower: list[float]


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError(f"period must be a positive integer, got {period}")


def sma(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate Simple Moving Average.

    Args:
        values: Sequence of price values
        period: SMA window

    Returns:
        List of n - period + 1 averages (empty if not enough data)
    """
    _check_period(period)
    if len(values) < period:
        return []

    arr = np.asarray(values, dtype=np.float64)
    result = np.empty(len(arr) - period + 1, dtype=np.float64)

    for i in range(period - 1, len(arr)):
        result[i - period + 1] = np.mean(arr[i - period + 1 : i + 1])

    return result.tolist()


def ema(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate Exponential Moving Average.

    Seeded with the SMA of the first ``period`` values, then
    EMA[i] = value[i] * alpha + EMA[i-1] * (1 - alpha), alpha = 2 / (period + 1).

    Args:
        values: Sequence of price values
        period: EMA period

    Returns:
        List of n - period + 1 EMA values (empty if not enough data)
    """
    _check_period(period)
    if len(values) < period:
        return []

    arr = np.asarray(values, dtype=np.float64)
    multiplier = 2.0 / (period + 1)

    result = np.empty(len(arr) - period + 1, dtype=np.float64)
    result[0] = np.mean(arr[:period])

    for i in range(period, len(arr)):
        j = i - period + 1
        result[j] = arr[i] * multiplier + result[j - 1] * (1 - multiplier)

    return result.tolist()


def smoothed_moving_average(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate Wilder's smoothed moving average (RMA).

    avg[i] = (avg[i-1] * (period - 1) + value[i]) / period, seeded with the
    plain mean of the first ``period`` values.

    Args:
        values: Sequence of values
        period: Smoothing period

    Returns:
        List of n - period + 1 smoothed values (empty if not enough data)
    """
    _check_period(period)
    if len(values) < period:
        return []

    arr = np.asarray(values, dtype=np.float64)
    result = np.empty(len(arr) - period + 1, dtype=np.float64)
    result[0] = np.mean(arr[:period])

    for i in range(period, len(arr)):
        j = i - period + 1
        result[j] = (result[j - 1] * (period - 1) + arr[i]) / period

    return result.tolist()


def rsi(prices: Sequence[float], period: int = 14) -> list[float]:
    """
    Calculate Relative Strength Index.

    The change series has one entry per price; the first entry is 0 since
    there is no prior price. Gains and losses are smoothed with Wilder's
    method. When the smoothed loss is exactly 0 the RSI is 100.

    Args:
        prices: Sequence of prices
        period: RSI period

    Returns:
        List of n - period + 1 RSI values in [0, 100]
    """
    _check_period(period)
    if len(prices) < period:
        return []

    arr = np.asarray(prices, dtype=np.float64)
    changes = np.concatenate(([0.0], np.diff(arr)))
    gains = np.maximum(changes, 0.0)
    losses = np.maximum(-changes, 0.0)

    avg_gain = smoothed_moving_average(gains, period)
    avg_loss = smoothed_moving_average(losses, period)

    result = []
    for ag, al in zip(avg_gain, avg_loss):
        if al == 0:
            result.append(100.0)
        else:
            result.append(100.0 - 100.0 / (1.0 + ag / al))
    return result


def macd(
    prices: Sequence[float],
    short_period: int = 12,
    long_period: int = 26,
    signal_period: int = 9,
) -> MacdResult:
    """
    Calculate MACD line and signal line.

    The short EMA starts ``long_period - short_period`` points earlier than
    the long EMA, so it is trimmed to the long EMA's index base before
    subtracting.

    Args:
        prices: Sequence of prices
        short_period: Fast EMA period
        long_period: Slow EMA period
        signal_period: Signal line EMA period

    Returns:
        MacdResult(macd_line, signal_line); macd_line has n - long_period + 1
        points, signal_line is the EMA of macd_line
    """
    if short_period >= long_period:
        raise ValueError(
            f"short_period must be smaller than long_period, got {short_period} >= {long_period}"
        )
    _check_period(signal_period)

    short_ema = ema(prices, short_period)
    long_ema = ema(prices, long_period)
    if not long_ema:
        return MacdResult(macd_line=[], signal_line=[])

    offset = long_period - short_period
    macd_line = [s - l for s, l in zip(short_ema[offset:], long_ema)]
    signal_line = ema(macd_line, signal_period)

    return MacdResult(macd_line=macd_line, signal_line=signal_line)


def bollinger_bands(
    prices: Sequence[float],
    period: int = 20,
    multiplier: float = 2.0,
) -> BollingerBands:
    """
    Calculate Bollinger Bands.

    Each point uses the trailing window [max(0, i - period + 1), i], so the
    first ``period - 1`` points use a shorter window instead of being
    dropped. Standard deviation is the population one (ddof=0).

    Args:
        prices: Sequence of prices
        period: Window length
        multiplier: Band width in standard deviations

    Returns:
        BollingerBands(middle, upper, lower), one value per price
    """
    _check_period(period)
    arr = np.asarray(prices, dtype=np.float64)
    n = len(arr)

    middle = np.empty(n, dtype=np.float64)
    std = np.empty(n, dtype=np.float64)

    for i in range(n):
        window = arr[max(0, i - period + 1) : i + 1]
        middle[i] = np.mean(window)
        std[i] = np.std(window)

    upper = middle + std * multiplier
    lower = middle - std * multiplier

    return BollingerBands(
        middle=middle.tolist(),
        upper=upper.tolist(),
        lower=lower.tolist(),
    )


def obv(prices: Sequence[float], volumes: Sequence[float]) -> list[float]:
    """
    Calculate On-Balance Volume.

    Seeded with the first volume; volume is added on an up move,
    subtracted on a down move, and the previous value carried when the
    price is unchanged.

    Args:
        prices: Sequence of prices
        volumes: Sequence of volumes, aligned with prices

    Returns:
        List of OBV values, one per price
    """
    if len(prices) != len(volumes):
        raise ValueError(
            f"prices and volumes must have the same length, got {len(prices)} and {len(volumes)}"
        )
    if len(prices) == 0:
        return []

    result = [float(volumes[0])]

    for i in range(1, len(prices)):
        if prices[i] > prices[i - 1]:
            result.append(result[-1] + volumes[i])
        elif prices[i] < prices[i - 1]:
            result.append(result[-1] - volumes[i])
        else:
            result.append(result[-1])

    return result

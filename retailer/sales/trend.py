"""Ordinary-least-squares trend of daily revenue against calendar date.

Dates are placed on a numeric axis as days since 1970-01-01, so the slope
reads as revenue change per day.
"""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from retailer.errors import InsufficientDataError
from retailer.utils.types import DATE_AXIS_ORIGIN, BucketFrame

logger = logging.getLogger(__name__)

MIN_POINTS = 2


def date_axis(dates: pd.Series | pd.DatetimeIndex) -> np.ndarray:
    """Days since 1970-01-01 for each date."""
    return ((pd.to_datetime(dates) - DATE_AXIS_ORIGIN) / pd.Timedelta(days=1)).to_numpy(dtype=float)


@dataclass(frozen=True)
class TrendFit:
    slope: float
    intercept: float
    r_squared: float
    n_points: int
    residuals: tuple[float, ...]

    def predict(self, when) -> float:
        """Fitted daily revenue for a date (anything pd.Timestamp accepts)."""
        x = (pd.Timestamp(when).normalize() - DATE_AXIS_ORIGIN) / pd.Timedelta(days=1)
        return self.intercept + self.slope * x


def fit_trend(daily: BucketFrame, date_col: str, value_col: str) -> TrendFit:
    """Fit value ~ date over a daily bucket frame."""
    x = date_axis(daily[date_col])
    y = daily[value_col].to_numpy(dtype=float)

    distinct = len(np.unique(x))
    if distinct < MIN_POINTS:
        raise InsufficientDataError(
            f"Need at least {MIN_POINTS} distinct days to fit a sales trend, got {distinct}"
        )

    slope, intercept = np.polyfit(x, y, 1)
    fitted = intercept + slope * x
    residuals = y - fitted

    total_ss = float(((y - y.mean()) ** 2).sum())
    residual_ss = float((residuals ** 2).sum())
    # A flat series is fitted exactly by a flat line
    r_squared = 1.0 - residual_ss / total_ss if total_ss else 1.0

    logger.debug(f"Trend over {len(x)} days: slope={slope:.4f}/day, R^2={r_squared:.3f}")
    return TrendFit(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=r_squared,
        n_points=len(x),
        residuals=tuple(float(r) for r in residuals),
    )

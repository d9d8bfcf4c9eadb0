"""Bar chart sink for hour-of-day distributions."""

from collections.abc import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from retailer.utils.types import DistributionPoint


def bar_plot(
    series: Sequence[DistributionPoint],
    ax: Axes | None = None,
    color: str = "blue",
    xlabel: str = "Time of Day",
    ylabel: str = "Avg number of items",
    title: str | None = None,
    **bar_kwargs,
) -> Axes:
    """Draw one bar per (label, value) pair, in the order given."""
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    labels = [label for label, _ in series]
    values = [value for _, value in series]
    ax.bar(labels, values, color=color, **bar_kwargs)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)

    return ax

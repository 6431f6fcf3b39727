from .chart import (
    plot_scatter,
    plot_stats_bars,
    plot_top_bar,
)

__all__ = [
    "plot_scatter",
    "plot_stats_bars",
    "plot_top_bar",
]

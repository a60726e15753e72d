"""Chart rendering of sweep results (matplotlib image or ASCII text)."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile

try:
    # Set non-GUI backend before importing pyplot to avoid Tkinter issues
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

import numpy as np

from . import config
from .logging_config import get_logger
from .types import PlotResult, Range, Sample

logger = get_logger("plotting")


def _open_file_in_viewer(file_path: str) -> bool:
    """Open a file in the system's default application (cross-platform).

    Args:
        file_path: Path to the file to open

    Returns:
        True if successful, False otherwise
    """
    try:
        if sys.platform == "win32":
            os.startfile(file_path)
        elif sys.platform == "darwin":
            subprocess.run(["open", file_path], check=True)
        else:
            subprocess.run(["xdg-open", file_path], check=True)
        return True
    except (OSError, subprocess.CalledProcessError) as e:
        logger.info(f"Could not open {file_path} in a viewer: {e}")
        return False


def _plottable(samples: list[Sample]) -> tuple[np.ndarray, np.ndarray]:
    """Return x and y arrays; failed or infinite samples become NaN gaps."""
    xs = np.array([s.x for s in samples], dtype=float)
    ys = np.array(
        [s.result.value if s.result.ok else np.nan for s in samples], dtype=float
    )
    ys[~np.isfinite(ys)] = np.nan
    return xs, ys


def ascii_plot(
    samples: list[Sample],
    rows: int | None = None,
    cols: int | None = None,
) -> PlotResult:
    """Draw the samples as a character chart.

    Args:
        samples: Sweep outcomes
        rows: Height in characters (default: config.ASCII_ROWS)
        cols: Width in characters (default: config.ASCII_COLS)

    Returns:
        PlotResult whose result is the chart text
    """
    rows = rows or config.ASCII_ROWS
    cols = cols or config.ASCII_COLS
    xs, ys = _plottable(samples)
    valid = ~np.isnan(ys)
    if not valid.any():
        return PlotResult(ok=False, error="Cannot plot: no finite values in range")

    x_min, x_max = float(xs[0]), float(xs[-1])
    x_span = x_max - x_min if x_max != x_min else 1.0
    y_min, y_max = float(ys[valid].min()), float(ys[valid].max())
    y_span = y_max - y_min if y_max != y_min else 1.0

    grid = [[" " for _ in range(cols)] for _ in range(rows)]

    # Axes first so points draw over them
    if y_min <= 0 <= y_max:
        axis_row = rows - 1 - int((0 - y_min) / y_span * (rows - 1))
        for c in range(cols):
            grid[axis_row][c] = "-"
    else:
        axis_row = -1
    if x_min <= 0 <= x_max:
        axis_col = int((0 - x_min) / x_span * (cols - 1))
        for r in range(rows):
            grid[r][axis_col] = "+" if r == axis_row else "|"

    for x, y in zip(xs[valid], ys[valid]):
        col = int((x - x_min) / x_span * (cols - 1))
        row = rows - 1 - int((y - y_min) / y_span * (rows - 1))
        grid[max(0, min(rows - 1, row))][max(0, min(cols - 1, col))] = "*"

    return PlotResult(ok=True, result="\n".join("".join(line) for line in grid))


def plot_samples(
    samples: list[Sample],
    r: Range,
    expression: str,
    output: str | None = None,
    open_viewer: bool = False,
) -> PlotResult:
    """Render the sweep as a line chart and save it as PNG.

    Failed samples leave gaps in the line. Ten x labels span the range and
    five y labels span the observed values, as ``%.2f``.

    Args:
        samples: Sweep outcomes
        r: Range the samples were taken over
        expression: Expression text for the title
        output: Destination file (default: a new temporary .png)
        open_viewer: Open the saved file in the system viewer

    Returns:
        PlotResult whose result is the saved file path
    """
    if not HAS_MATPLOTLIB:
        return PlotResult(
            ok=False, error="matplotlib not installed. Use --ascii for an ASCII chart."
        )
    if not samples:
        return PlotResult(ok=False, error="Cannot plot: range produced no samples")

    xs, ys = _plottable(samples)
    valid = ~np.isnan(ys)
    if not valid.any():
        return PlotResult(ok=False, error="Cannot plot: no finite values in range")

    fig, ax = plt.subplots(
        figsize=(config.PLOT_WIDTH / config.PLOT_DPI, config.PLOT_HEIGHT / config.PLOT_DPI),
        dpi=config.PLOT_DPI,
    )
    try:
        ax.plot(xs, ys, linewidth=2, color="#2E86AB", label=f"f(x) = {expression}")
        ax.set_xlabel("x", fontsize=12, fontweight="bold")
        ax.set_ylabel("f(x)", fontsize=12, fontweight="bold")
        ax.set_title(f"Plot of {expression}", fontsize=14, fontweight="bold")
        ax.grid(True, alpha=0.3, linestyle="--")

        x_ticks = np.linspace(r.x_min, r.x_max, config.PLOT_X_LABELS + 1)
        ax.set_xticks(x_ticks)
        ax.set_xticklabels([f"{t:.2f}" for t in x_ticks])
        y_min, y_max = float(ys[valid].min()), float(ys[valid].max())
        if y_min != y_max:
            y_ticks = np.linspace(y_min, y_max, config.PLOT_Y_LABELS)
            ax.set_yticks(y_ticks)
            ax.set_yticklabels([f"{t:.2f}" for t in y_ticks])
        if r.x_min < r.x_max:
            ax.set_xlim(r.x_min, r.x_max)
        ax.legend(loc="best", fontsize=10)
        fig.tight_layout()

        if output is None:
            fd, output = tempfile.mkstemp(suffix=".png", prefix="kurva_")
            os.close(fd)
        fig.savefig(output)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to save plot: {e}", exc_info=True)
        return PlotResult(ok=False, error=f"Failed to save plot: {e}")
    finally:
        plt.close(fig)

    logger.info("Saved plot of %r to %s", expression, output)
    if open_viewer and not _open_file_in_viewer(output):
        return PlotResult(ok=True, result=f"{output} (could not open viewer)")
    return PlotResult(ok=True, result=output)

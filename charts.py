"""
SVG line charts for the time and frequency series.

Each chart is a standalone matplotlib Figure rendered through the SVG
backend, so no pyplot global state is touched and requests can render
concurrently.
"""

import io
import logging

from matplotlib.backends.backend_svg import FigureCanvasSVG
from matplotlib.figure import Figure
from matplotlib.ticker import FormatStrFormatter
from numpy.typing import ArrayLike

import config

logger = logging.getLogger(__name__)


def line_chart_svg(x_values: ArrayLike, y_values: ArrayLike,
                   width: int = config.CHART_WIDTH,
                   height: int = config.CHART_HEIGHT) -> str:
    """
    Render one continuous line series as inline SVG markup.

    The XML prolog and doctype are stripped so the result can be embedded
    directly in an HTML page.
    """
    dpi = config.CHART_DPI
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    FigureCanvasSVG(fig)
    ax = fig.add_subplot(1, 1, 1)
    ax.plot(x_values, y_values, linewidth=1.0)
    ax.xaxis.set_major_formatter(FormatStrFormatter(config.TICK_FORMAT))
    fig.tight_layout()

    buf = io.StringIO()
    fig.savefig(buf, format="svg")
    svg = buf.getvalue()

    start = svg.find("<svg")
    return svg[start:] if start >= 0 else svg


def render_charts(time_x, time_y, frequency_x, frequency_y) -> str:
    """Time-domain chart followed by the frequency-domain chart."""
    parts = [
        line_chart_svg(time_x, time_y),
        line_chart_svg(frequency_x, frequency_y),
    ]
    logger.debug(f"Rendered charts ({sum(len(p) for p in parts)} bytes of SVG)")
    return "\n".join(parts)

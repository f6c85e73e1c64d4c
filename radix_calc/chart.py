"""
Chart rendering for the usage log.

Figures are built with matplotlib's object API on the Agg canvas; pyplot is
not used.
"""

import io
from typing import Mapping

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend
from matplotlib.figure import Figure

from .exceptions import ChartRenderError

CHART_TITLE = "Frequency of Number Systems"
CHART_KINDS = ("pie", "bar")


def _draw_pie(ax, labels, counts):
    ax.pie(counts, labels=labels, autopct="%1.0f%%", startangle=90)
    ax.axis("equal")


def _draw_bar(ax, labels, counts):
    ax.bar(labels, counts, width=0.5)
    ax.set_ylabel("Count")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def render_frequency_chart(frequency: Mapping[str, int], kind: str = "pie") -> bytes:
    """Render request counts per number system as a PNG.

    Args:
        frequency: Number system name -> request count
        kind: "pie" or "bar"

    Returns:
        PNG image bytes. With no data the image holds only the title and
        a note.

    Raises:
        ValueError: If kind is not a known chart kind
        ChartRenderError: If matplotlib fails to draw or encode the image
    """
    if kind not in CHART_KINDS:
        raise ValueError(f"Unknown chart kind '{kind}', expected one of {list(CHART_KINDS)}")

    labels = list(frequency.keys())
    counts = [frequency[label] for label in labels]

    try:
        fig = Figure(figsize=(6, 4))
        ax = fig.add_subplot()
        ax.set_title(CHART_TITLE)
        if not counts:
            ax.text(0.5, 0.5, "No requests yet", ha="center", va="center")
            ax.axis("off")
        elif kind == "pie":
            _draw_pie(ax, labels, counts)
        else:
            _draw_bar(ax, labels, counts)

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=100, bbox_inches="tight")
        buf.seek(0)
        return buf.read()
    except Exception as e:
        raise ChartRenderError(f"failed to render chart: {e}") from e

"""Translate theme.py constants into matplotlib rcParams."""

import matplotlib as mpl
import matplotlib.pyplot as plt

from .theme import CATEGORY10, COLORS, FONTS, LAYOUT

# matplotlib rcParams dict, used for the static rendition only
STYLE: dict = {
    # Figure: same pixel size as the SVG chart
    "figure.figsize": (LAYOUT["width"] / LAYOUT["dpi"], LAYOUT["height"] / LAYOUT["dpi"]),
    "figure.dpi": LAYOUT["dpi"],
    "figure.facecolor": COLORS["bg"],
    "savefig.dpi": LAYOUT["dpi"],
    "savefig.facecolor": COLORS["bg"],
    "savefig.bbox": "tight",
    "savefig.pad_inches": 0.2,

    # Axes
    "axes.facecolor": COLORS["bg"],
    "axes.edgecolor": COLORS["axis"],
    "axes.titlesize": LAYOUT["title_size"],
    "axes.titleweight": "bold",
    "axes.titlecolor": COLORS["text"],
    "axes.labelsize": LAYOUT["label_size"],
    "axes.labelcolor": COLORS["text"],
    "axes.prop_cycle": mpl.cycler(color=CATEGORY10),
    "axes.spines.top": False,
    "axes.spines.right": False,
    "axes.grid": False,

    # Ticks
    "xtick.labelsize": LAYOUT["font_size"],
    "ytick.labelsize": LAYOUT["font_size"],
    "xtick.major.size": LAYOUT["tick_size"],
    "ytick.major.size": LAYOUT["tick_size"],
    "xtick.major.pad": LAYOUT["tick_padding"],
    "ytick.major.pad": LAYOUT["tick_padding"],
    "xtick.direction": "out",
    "ytick.direction": "out",

    # Lines and dots
    "lines.linewidth": LAYOUT["line_width"],
    "lines.markersize": LAYOUT["dot_radius"] * 2,

    # Legend
    "legend.frameon": True,
    "legend.facecolor": COLORS["legend_bg"],
    "legend.edgecolor": COLORS["legend_border"],
    "legend.fontsize": LAYOUT["font_size"],

    # Font
    "font.family": "sans-serif",
    "font.sans-serif": FONTS["sans"],
    "font.size": LAYOUT["font_size"],

    # Keep text as text in SVG output
    "svg.fonttype": "none",
}


def apply() -> None:
    """Apply the chart style to matplotlib globally."""
    plt.rcParams.update(STYLE)

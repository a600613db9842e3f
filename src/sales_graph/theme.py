"""Pure data: field names, colors, fonts, and layout constants.

No library imports — the interactive SVG renderer and the matplotlib
rendition both read the chart's visual identity from these plain dicts.
"""

# Column names in the sales dataset
FIELDS = {
    "sales": "Sales Amount (k)",
    "gross": "Gross Profit (k)",
    "month": "Month",
    "product": "Product Name",
}

# Categorical palette, one color per product in dataset order
CATEGORY10 = [
    "#1f77b4",  # blue
    "#ff7f0e",  # orange
    "#2ca02c",  # green
    "#d62728",  # red
    "#9467bd",  # purple
    "#8c564b",  # brown
    "#e377c2",  # pink
    "#7f7f7f",  # gray
    "#bcbd22",  # olive
    "#17becf",  # cyan
]

COLORS = {
    "bg": "#ffffff",
    "text": "#222222",
    "muted": "#666666",
    "axis": "#000000",
    "legend_bg": "#ffffff",
    "legend_border": "#dddddd",
}

FONTS = {
    "sans": [
        "Helvetica Neue", "Helvetica", "Arial",
        "Segoe UI", "Roboto", "sans-serif",
    ],
}

# Chart layout constants (pixels unless noted)
LAYOUT = {
    "width": 960,
    "height": 400,
    "margin": {"top": 20, "right": 20, "bottom": 40, "left": 40},
    "band_padding": 0.1,
    "y_ticks": 8,
    "tick_size": 6,
    "tick_padding": 3,
    "font_size": 10,
    "label_size": 11,
    "title_size": 14,
    "line_width": 2,
    "dot_radius": 3,
    "dot_hover_radius": 5,
    "dim_opacity": 0.15,
    "duration_ms": 1000,   # line draw-in time
    "stagger_ms": 150,     # delay between successive products
    "legend_swatch": 12,
    "legend_row": 18,
    "dpi": 100,            # static rendition: 960x400px at 9.6x4.0in
}

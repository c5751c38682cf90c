CUSTOM_THEME = {
    "template": "plotly_dark",
    "color_sequence": [
        "#f5c518",  # marquee yellow
        "#3498db",  # planned blue
        "#2ecc71",  # watched green
        "#e74c3c",  # alizarin
        "#9b59b6",  # amethyst
    ],
    "font_family": "Roboto, sans-serif",
    "font_color": "#f5f6fa",
    "axis_color": "#f5f6fa"
}

# Status pill colours on the account screen
STATUS_COLORS = {
    "PLAN_TO_WATCH": "#3498db",
    "HAVE_WATCHED": "#2ecc71",
}

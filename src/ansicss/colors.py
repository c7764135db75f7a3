"""Color values for the standard and bright ANSI palettes."""

_PALETTE = (
    "#000000",  # Black
    "#e74c3c",  # Red
    "#2ecc71",  # Green
    "#f39c12",  # Yellow
    "#3498db",  # Blue
    "#9b59b6",  # Magenta
    "#1abc9c",  # Cyan
    "#ecf0f1",  # White
)

_BRIGHT_PALETTE = (
    "#7f8c8d",  # Gray
    "#ff6b6b",  # Bright Red
    "#4ecdc4",  # Bright Green
    "#ffe66d",  # Bright Yellow
    "#74b9ff",  # Bright Blue
    "#a29bfe",  # Bright Magenta
    "#6c5ce7",  # Bright Cyan
    "#ffffff",  # Bright White
)

FOREGROUND_CODES = (*range(30, 38), *range(90, 98))
BACKGROUND_CODES = (*range(40, 48), *range(100, 108))

ANSI_COLORS: dict[int, str] = {
    **{30 + i: color for i, color in enumerate(_PALETTE)},
    **{90 + i: color for i, color in enumerate(_BRIGHT_PALETTE)},
    **{40 + i: color for i, color in enumerate(_PALETTE)},
    **{100 + i: color for i, color in enumerate(_BRIGHT_PALETTE)},
}

# Code 7 (inverse) does not swap colors, it forces black on white.
INVERSE_COLOR = "#000"
INVERSE_BACKGROUND = "#fff"

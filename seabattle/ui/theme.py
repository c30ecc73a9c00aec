class Theme:
    """Centralized colors used across the UI."""

    # Backgrounds
    BG_DARK = "#020617"  # slate-950
    BG_PANEL = "#0f172a"  # slate-900
    BG_BUTTON = "#1f2937"  # gray-800

    # Generic text
    TEXT_MAIN = "#e5e7eb"  # gray-200
    TEXT_LABEL = "#9ca3af"  # gray-400

    # Sea and grid lines
    WATER = "#0c4a6e"
    GRID_LINE = "#1e3a8a"

    # Miss marker
    MISS_BG = "#1e3a8a"
    MISS_BORDER = "#bfdbfe"

    # Hit marker
    HIT_BG = "#7f1d1d"
    HIT_BORDER = "#f97373"

    # Ship hit points (ship board)
    HP_OK = "#10b981"
    HP_HIT = "#f97373"

    # Score digits and game-over banner
    SCORE = "#facc15"
    OVERLAY_BG = "rgba(2, 6, 23, 200)"

    # Links / highlights
    LINK = "#38bdf8"
    HIGHLIGHT = "#0ea5e9"

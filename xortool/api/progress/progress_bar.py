"""Fixed-width filled/unfilled progress bar."""

from rich.text import Text

BAR_CELL = "■"


def progress_bar(percent: float, width: int) -> Text:
    """Render ``width`` cells with ``percent`` of them filled (rounded, clamped to 0..100)."""
    percent = min(max(percent, 0.0), 100.0)
    filled = round(percent / 100.0 * width)
    bar = Text()
    bar.append(BAR_CELL * filled, style="dark_cyan")
    bar.append(BAR_CELL * (width - filled), style="bright_black")
    return bar

"""Build the summary line printed when a file finishes."""

from rich.text import Text

DONE_GLYPH = "✓"


def format_completion_line(name: str, total: int, elapsed_secs: float) -> Text:
    """Render elapsed seconds and average KiB/s for a finished file."""
    rate = total / elapsed_secs / 1024 if elapsed_secs > 0 else 0.0
    line = Text()
    line.append(DONE_GLYPH, style="green")
    line.append(" ")
    line.append("Completed", style="bold")
    line.append(f" in {elapsed_secs:.1f}s ({rate:.1f} KiB/s) ")
    line.append(name, style="dim")
    return line

"""Build the live progress line for one file."""

from rich.text import Text

from .progress_bar import progress_bar

STATUS_GLYPH = "▶"


def format_progress_line(name: str, processed: int, total: int, elapsed_secs: float, bar_width: int) -> Text:
    """Render percentage, bar, KiB counts, average throughput, ETA and file name.

    Throughput is the average since start (processed bytes / elapsed seconds).
    ETA is the remaining bytes at that rate and is 0 while the rate is not
    yet measurable. An empty file counts as 100% done.

    Args:
        name: Display name of the file
        processed: Bytes processed so far
        total: File size in bytes
        elapsed_secs: Seconds since the file started
        bar_width: Number of bar cells

    Returns:
        Styled line, e.g. ``▶  42.0% <bar> |    420/1000   KiB |  210.0 KiB/s | ETA:   2s | data/f.bin``
    """
    percent = processed / total * 100.0 if total > 0 else 100.0
    rate = processed / elapsed_secs if elapsed_secs > 0 else 0.0
    eta_secs = int(max(total - processed, 0) / rate) if rate > 0 else 0

    line = Text()
    line.append(STATUS_GLYPH, style="cyan")
    line.append(f" {percent:>5.1f}% ")
    line.append_text(progress_bar(percent, bar_width))
    line.append(" | ")
    line.append(f"{processed // 1024:>6}", style="bold")
    line.append("/")
    line.append(f"{total // 1024:<6}", style="dim")
    line.append(f" KiB | {rate / 1024:>6.1f} KiB/s | ETA: {eta_secs:>3}s | ")
    line.append(name, style="dim")
    return line

"""Rich terminal display for sakinah-stats."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

MOOD_EMOJIS = ["", "\U0001f61e", "\U0001f61f", "\U0001f610", "\U0001f642", "\U0001f60a"]


def format_number(n: int) -> str:
    """Format large numbers: 1200 -> '1,200', 12345 -> '12.3K'."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 10_000:
        return f"{n / 1_000:.1f}K"
    return f"{n:,}"


def _mood_bar(mood: int | None, width: int = 10) -> str:
    """Render a mood score (1-5) as a bar: [████░░░░░░]."""
    if not mood:
        return "[" + "·" * width + "]"
    filled = int(mood / 5 * width)
    return "[" + "█" * filled + "░" * (width - filled) + "]"


def print_dashboard(data: dict) -> None:
    """Print the activity dashboard: streak, entries, AI replies."""
    streak = data.get("streak", 0)
    lines: list[str] = []
    lines.append("")
    lines.append(f"  \U0001f525 Streak: [bold]{streak}[/] days  |  Best: {data.get('longest_streak', 0)} days")
    if streak and not data.get("is_active_today"):
        lines.append("  [yellow]Write today to keep your streak going.[/]")
    lines.append("")
    lines.append(f"  \U0001f4d3 Entries:     {format_number(data.get('total_entries', 0))}")
    lines.append(f"  \U0001f4c5 Days active: {data.get('days_active', 0)}")
    lines.append(f"  \U0001f4ac AI replies:  {format_number(data.get('total_ai_replies', 0))}")
    first_entry = data.get("first_entry")
    if first_entry:
        lines.append("")
        lines.append(f"  First entry: {first_entry[:10]}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]SAKINAH[/]",
        box=box.ROUNDED,
        border_style="green",
        width=50,
    )
    console.print(panel)


def print_days(buckets: list[dict]) -> None:
    """Print day buckets as a table, newest day first."""
    table = Table(
        title="Activity by Day",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Day", min_width=16)
    table.add_column("Entries", justify="right")
    table.add_column("Latest", min_width=20)

    for bucket in buckets:
        table.add_row(bucket["label"], str(bucket["count"]), bucket.get("preview", ""))

    console.print(table)


def print_mood(data: dict) -> None:
    """Print the weekly mood chart and the verse for the average, in English or Malay."""
    lines: list[str] = [""]
    for day in data.get("days", []):
        mood = day.get("mood")
        emoji = MOOD_EMOJIS[mood] if mood else "  "
        lines.append(f"  {day['date']}  {_mood_bar(mood)} {emoji}")
    lines.append("")
    average = data.get("average")
    if average is None:
        lines.append("  No moods logged this week.")
    else:
        lines.append(f"  Average: [bold]{average}[/] / 5")
    verse = data.get("verse")
    if verse:
        bm = data.get("lang") == "bm"
        lines.append("")
        lines.append(f"  [bold]{verse['theme_bm'] if bm else verse['theme_en']}[/]")
        lines.append(f"  [italic]{verse['malay'] if bm else verse['english']}[/]")
        lines.append(f"  {verse['reference']}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]Mood This Week[/]",
        box=box.ROUNDED,
        border_style="cyan",
        width=60,
    )
    console.print(panel)


def print_daily(data: dict) -> None:
    """Print today's hadith and, when available, today's ayah."""
    lang = data.get("lang", "en")
    ayah = data.get("ayah")
    if ayah:
        ayah_panel = Panel(
            f"\n  {ayah['arabic']}\n\n  {ayah['malay']}\n\n  {ayah['reference']}\n",
            title="[bold]Ayah of the Day[/]",
            box=box.ROUNDED,
            border_style="gold1",
            width=60,
        )
        console.print(ayah_panel)
    elif data.get("ayah_error"):
        print_upstream_error(data["ayah_error"])

    hadith = data.get("hadith")
    if hadith:
        text = hadith["malay"] if lang == "bm" else hadith["english"]
        hadith_panel = Panel(
            f"\n  {text}\n\n  {hadith['source']}\n",
            title="[bold]Hadith of the Day[/]",
            box=box.ROUNDED,
            border_style="green",
            width=60,
        )
        console.print(hadith_panel)


def print_prayer(data: dict) -> None:
    """Print the next prayer and the countdown to it."""
    name = data["name_bm"] if data.get("lang") == "bm" else data["name"]
    panel = Panel(
        f"\n  Next: [bold]{name}[/] at {data['at']}\n  In:   [bold]{data['countdown']}[/]\n",
        title="[bold]Prayer Times[/]",
        box=box.ROUNDED,
        border_style="blue",
        width=50,
    )
    console.print(panel)


def print_upstream_error(message: str) -> None:
    """Print a recoverable network failure with a retry hint."""
    panel = Panel(
        f"\n  {message}\n\n  Check your connection and run the command again.\n",
        title="[bold]Unavailable[/]",
        box=box.ROUNDED,
        border_style="red",
        width=60,
    )
    console.print(panel)


def print_no_data_message() -> None:
    """Print message when no records are available."""
    panel = Panel(
        "\n  No entries found. Export your journal or chat records to a JSON file first.\n",
        title="[bold]SAKINAH[/]",
        box=box.ROUNDED,
        border_style="grey50",
        width=50,
    )
    console.print(panel)

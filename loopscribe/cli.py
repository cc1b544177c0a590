"""Command-line interface for loopscribe.

Provides commands for:
- analyze: Convert a drum loop into pattern notation (and optionally MIDI)
- info: Show audio file information and the detected grid
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import DrumPattern, LoopAnalysisError

app = typer.Typer(
    name="loopscribe",
    help="Drum loop to pattern notation",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="Input drum loop, WAV, MP3, FLAC, OGG or AIFF"),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the generated pattern code to this file"
    ),
    midi: Optional[Path] = typer.Option(
        None, "--midi", help="Also export the pattern as a MIDI drum file"
    ),
    tempo: float = typer.Option(
        0.0, "-t", "--tempo", help="Override tempo (BPM). 0 = auto-detect"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Convert a 1-4 bar drum loop into stacked kick/snare/hi-hat notation.

    **Examples:**

        loopscribe analyze loop.wav

        loopscribe analyze loop.mp3 -o loop.txt --midi loop.mid

        loopscribe analyze loop.wav --tempo 95 --json
    """
    from .pipeline import LoopAnalyzer
    from .output import DrumMIDIExporter

    _setup_logging(verbose)

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    if tempo < 0:
        console.print(f"[red]Error: Tempo must be positive, got {tempo}[/red]")
        raise typer.Exit(1)

    analyzer = LoopAnalyzer()
    try:
        if not json_output:
            console.print(f"[blue]Analyzing:[/blue] {input_file}")
        result = analyzer.analyze_file(input_file, tempo=tempo or None)
    except LoopAnalysisError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.code + "\n", encoding="utf-8")

    if midi is not None:
        exporter = DrumMIDIExporter(tempo=result.tempo)
        exporter.export(result.hits, result.grid, str(midi))

    if json_output:
        data = result.to_dict()
        data["input"] = str(input_file)
        console.print_json(data=data)
        return

    _show_pattern_table(result.pattern)
    console.print()
    console.print(result.code, markup=False, highlight=False)

    if output is not None:
        console.print(f"\n[green]Pattern code written to:[/green] {output}")
    if midi is not None:
        console.print(f"[green]MIDI written to:[/green] {midi}")


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input audio file"),
):
    """Show information about an audio file."""
    from .input import AudioDecoder
    from .analysis import TempoAnalyzer
    from .processing import StepGridBuilder

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    decoder = AudioDecoder()
    try:
        buffer = decoder.load(input_file)
    except LoopAnalysisError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Audio Info:[/bold] {input_file.name}")
    console.print(f"  Duration: {buffer.duration:.2f} seconds")
    console.print(f"  Sample rate: {buffer.sample_rate} Hz")
    console.print(f"  Samples: {len(buffer):,}")

    tempo = TempoAnalyzer().estimate(buffer)
    console.print(f"  Estimated tempo: {tempo:.1f} BPM")

    beats = StepGridBuilder().beat_count(buffer.duration, tempo)
    console.print(f"  Beats at that tempo: {beats}")


def _show_pattern_table(pattern: DrumPattern):
    """Display pattern statistics in a table."""
    table = Table(title="Detected Pattern")
    table.add_column("BPM", style="cyan")
    table.add_column("Beats", style="green")
    table.add_column("Bars", style="green")
    table.add_column("Kicks", style="yellow")
    table.add_column("Snares", style="yellow")
    table.add_column("Hi-hats", style="yellow")
    table.add_column("Duration (s)", style="magenta")

    table.add_row(
        str(pattern.bpm),
        str(pattern.beats),
        str(pattern.bars),
        str(pattern.kicks),
        str(pattern.snares),
        str(pattern.hihats),
        pattern.duration,
    )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()

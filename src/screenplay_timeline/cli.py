"""
Screenplay Timeline - command line entry point
Analyzes a parsed screenplay (JSON) and writes the timeline + entity registry.
"""

import asyncio
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from .analysis import ScreenplayAnalysisResult, ScreenplayAnalyzer
from .screenplay import Screenplay
from .utils.config import Config
from .utils.logger import setup_logging

console = Console()


def load_config(config_path: Optional[str]) -> Config:
    if config_path and Path(config_path).exists():
        return Config.load(config_path)
    if config_path:
        console.print(f"[yellow]![/yellow] Config not found at {config_path}, using defaults")
    return Config()


async def run_analysis(screenplay: Screenplay, config: Config) -> ScreenplayAnalysisResult:
    analyzer = ScreenplayAnalyzer(config=config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Analyzing screenplay..", total=100)

        def on_progress(value: float, message: Optional[str] = None):
            progress.update(task, completed=value, description=message or "Analyzing screenplay..")

        return await analyzer.analyze(screenplay, on_progress)


def print_summary(result: ScreenplayAnalysisResult):
    """Segments per category and registered entities"""
    console.print(f"\n[bold cyan]Era:[/bold cyan] {result.movie_era}   [bold cyan]Genre:[/bold cyan] {result.movie_genre}")

    categories = Table(title="Segments")
    categories.add_column("Category")
    categories.add_column("Count", justify="right")
    for category, count in sorted(Counter(s.category.value for s in result.segments).items()):
        categories.add_row(category, str(count))
    console.print(categories)

    entities = Table(title="Entities")
    entities.add_column("Trigger")
    entities.add_column("Category")
    entities.add_column("Label")
    entities.add_column("Description")
    for trigger, entity in result.entities_by_screenplay_label.items():
        entities.add_row(trigger, entity.category.value, entity.label, entity.description)
    console.print(entities)

    if result.failed_events:
        console.print(f"[yellow]![/yellow] {len(result.failed_events)} event(s) failed and were skipped")


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Screenplay to timeline analysis")
    parser.add_argument("--input", "-i", type=str, required=True,
                        help="Parsed screenplay JSON file")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Where to write the analysis result (JSON)")
    parser.add_argument("--config", type=str, default="configs/config.yaml",
                        help="Path to configuration file")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for default shot/music choices")

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        if args.seed is not None:
            config.randomness.seed = args.seed
        setup_logging(config)

        screenplay = Screenplay.load_from_file(args.input)
        result = asyncio.run(run_analysis(screenplay, config))

        print_summary(result)
        if args.output:
            result.save_to_file(args.output)
            console.print(f"[green]✓[/green] Result saved to: {args.output}")

    except KeyboardInterrupt:
        console.print("\n[yellow]⏹️[/yellow] Stopped by user")
    except Exception as e:
        console.print(f"[red]💥[/red] Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

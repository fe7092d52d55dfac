"""
Главный файл для запуска консольного тезауруса.

Использование:
    python main.py
    python main.py --seed config/synonyms.yaml
    python main.py --log-level DEBUG --shards 4
"""

import sys

import click
import structlog
from pydantic import ValidationError
from rich.console import Console

from thesaurus.cli import ThesaurusCLI
from thesaurus.config import SynonymLoader, load_settings, seed_registry
from thesaurus.logging_config import setup_logging
from thesaurus.registry import SynonymRegistry

logger = structlog.get_logger("cli")
console = Console()


def print_welcome_banner():
    console.print("[bold cyan]📚 Thesaurus[/bold cyan] [dim]— add synonym groups, then look words up[/dim]")


@click.command()
@click.option("--seed", "seed_file", type=click.Path(dir_okay=False), help="YAML file with seed synonym groups")
@click.option("--log-level", help="Log level for log files (DEBUG, INFO, WARNING, ERROR)")
@click.option("--shards", type=int, help="Number of registry lock stripes")
@click.option("--env-file", type=click.Path(dir_okay=False), help="Path to a .env file")
def main(seed_file, log_level, shards, env_file):
    """Interactive thesaurus console."""
    try:
        settings = load_settings(
            env_file=env_file,
            seed_file=seed_file,
            log_level=log_level,
            shards=shards,
        )
    except ValidationError as e:
        console.print("[red]❌ Invalid configuration:[/red]")
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            console.print(f"   - {field}: {err['msg']}")
        sys.exit(2)

    setup_logging("cli", level=settings.log_level, logs_dir=settings.logs_dir)
    logger.info("Starting application...", shards=settings.shards, seed_file=str(settings.seed_file))

    registry = SynonymRegistry(shards=settings.shards)

    if settings.seed_file is not None:
        loader = SynonymLoader(settings.seed_file)
        applied = seed_registry(registry, loader)
        if loader.is_loaded:
            console.print(f"[green]✓ Loaded {applied} seed groups ({len(registry)} words)[/green]")
        else:
            console.print(f"[yellow]⚠ Seed file not loaded: {settings.seed_file}[/yellow]")

    print_welcome_banner()
    ThesaurusCLI(registry, console=console).run()

    logger.info("Exiting application...")


if __name__ == "__main__":
    main()

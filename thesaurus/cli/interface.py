"""
CLI interface for the thesaurus.

Interactive menu on top of SynonymRegistry:
1. Add synonyms (comma-separated list)
2. List synonyms for a word
3. List all words
4. Exit
"""

from typing import Callable, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
import structlog

from thesaurus.registry import InvalidInputError, SynonymRegistry

logger = structlog.get_logger("cli")

MENU_TEXT = (
    "[bold cyan]Choose an option:[/bold cyan]\n"
    "[white]1.[/white] Add synonyms to the thesaurus\n"
    "[white]2.[/white] List synonyms for a word\n"
    "[white]3.[/white] List all added words\n"
    "[white]4.[/white] Exit"
)

EXIT_CHOICES = {"4", "q", "quit", "exit"}


def parse_word_list(text: str) -> List[str]:
    """
    Split comma-separated input into words.

    Surrounding whitespace is stripped and empty entries are dropped;
    inner spaces are kept, so "ice cream, gelato" gives two words.
    """
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


class ThesaurusCLI:
    """
    Console menu for the thesaurus.

    Args:
        registry: The registry to read from and write to.
        console: rich Console to render on (a fresh one by default).
        input_func: Line reader, ``input`` by default.
    """

    def __init__(
        self,
        registry: SynonymRegistry,
        console: Optional[Console] = None,
        input_func: Callable[[str], str] = input,
    ):
        self.registry = registry
        self.console = console if console is not None else Console()
        self._input = input_func

    def _read(self, prompt: str = "> ") -> str:
        return self._input(prompt)

    def run(self):
        """Show the menu until the user exits."""
        logger.info("cli_started")
        try:
            while True:
                self.console.print()
                self.console.print(Panel(MENU_TEXT, title="📚 Thesaurus", border_style="blue", box=box.ROUNDED))
                choice = self._read("Enter choice: ").strip().lower()

                if choice in EXIT_CHOICES:
                    break
                elif choice == "1":
                    self.add_synonyms()
                elif choice == "2":
                    self.list_synonyms_for_word()
                elif choice == "3":
                    self.list_all_words()
                else:
                    self.console.print(f"[red]✗ Unknown option: {escape(repr(choice))}. Enter 1-4.[/red]")
        except (EOFError, KeyboardInterrupt):
            self.console.print("\n[yellow]Cancelled by user[/yellow]")

        logger.info("cli_stopped")
        self.console.print("[dim]Bye![/dim]")

    def add_synonyms(self):
        """Ask for a comma-separated list until it holds two or more words."""
        while True:
            self.console.print("Input synonyms in a comma-separated list (ex [green]'cat,feline,kitty'[/green]):")
            words = parse_word_list(self._read())

            if len(words) < 2:
                self.console.print("[red]Input 2 or more words[/red]")
                continue

            try:
                self.registry.add_synonyms(words)
            except InvalidInputError as e:
                logger.warning("add_synonyms_rejected", words=words, error=str(e))
                self.console.print("[red]Input 2 or more words[/red]")
                continue
            break

        distinct = len(set(words))
        logger.info("synonyms_added", words=words, distinct=distinct)
        self.console.print(f"[green]✓ Added {distinct} words as synonyms[/green]")

    def list_synonyms_for_word(self):
        """Ask for one word and print its synonyms."""
        self.console.print("Input the word you want the synonyms of:")
        word = self._read().strip()

        synonyms = sorted(self.registry.get_synonyms(word))
        logger.info("synonyms_listed", word=word, count=len(synonyms))

        if not synonyms:
            self.console.print(f"The word '{escape(word)}' doesn't have any synonyms")
            return

        # Heading printed on its own line: a table title wraps to the column width
        self.console.print(f"[bold]Synonyms for '{escape(word)}' are:[/bold]")
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Synonym", style="cyan")
        for synonym in synonyms:
            table.add_row(escape(synonym))
        self.console.print(table)

    def list_all_words(self):
        """Print every word in the thesaurus."""
        words = sorted(self.registry.get_words())
        logger.info("words_listed", count=len(words))

        if not words:
            self.console.print("The thesaurus does not contain any words! Try adding some")
            return

        self.console.print(f"[bold]All words ({len(words)})[/bold]")
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Word", style="cyan")
        for word in words:
            table.add_row(escape(word))
        self.console.print(table)

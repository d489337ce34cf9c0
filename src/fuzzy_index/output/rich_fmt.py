"""Rich terminal output formatter."""

import json
from collections.abc import Sequence
from io import StringIO
from typing import TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fuzzy_index.config.schema import OutputFormat
from fuzzy_index.output.base import OutputFormatter, ResultRow


class RichFormatter(OutputFormatter):
    """Rich terminal output formatter.

    Renders results as a table with matched characters highlighted.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        highlight_style: str = "bold yellow",
        width: int | None = None,
        color: bool = True,
    ) -> None:
        """Initialize rich formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            highlight_style: Rich style applied to matched characters.
            width: Console width (None for auto-detect).
            color: Whether to emit ANSI styles when printing.
        """
        super().__init__(stream, error_stream, verbose)
        self._highlight_style = highlight_style
        self._width = width
        self._color = color

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.RICH

    def highlight(self, value: str, ranges: Sequence[tuple[int, int]]) -> Text:
        """Build a Text with every matched range styled."""
        text = Text(value)
        for start, end in ranges:
            text.stylize(self._highlight_style, start, end + 1)
        return text

    def _render(self, renderable: object, force_terminal: bool = False) -> str:
        string_io = StringIO()
        temp_console = Console(
            file=string_io,
            width=self._width,
            force_terminal=force_terminal,
            no_color=not self._color,
        )
        temp_console.print(renderable)
        return string_io.getvalue().rstrip()

    def build_table(self, rows: Sequence[ResultRow], title: str | None = None) -> Table:
        """Build the Rich table for a set of rows."""
        table = Table(title=title)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Index", justify="right")
        table.add_column("Score", justify="right", style="cyan")
        table.add_column("Matches")
        if self._verbose:
            table.add_column("Object", style="dim")

        for row in rows:
            matches = Text()
            for position, matched in enumerate(row.matched):
                if position:
                    matches.append("\n")
                matches.append(f"{matched.field}: ", style="bold")
                matches.append_text(self.highlight(matched.value, matched.ranges))
            if not row.is_match:
                matches = Text("excluded", style="dim italic")

            cells: list[object] = [str(row.rank), str(row.index), f"{row.score:.6g}", matches]
            if self._verbose:
                cells.append(json.dumps(row.obj, default=str, ensure_ascii=False))
            table.add_row(*cells)

        return table

    def format_results(self, rows: Sequence[ResultRow], title: str | None = None) -> str:
        """Format result rows as a Rich table."""
        if not rows:
            return self._render(Text("No matches", style="dim"))
        return self._render(self.build_table(rows, title))

    def format_error(self, message: str) -> str:
        """Format an error message in a red panel."""
        return self._render(Panel(Text(message, style="bold red"), title="Error", border_style="red"))

    def print_results(self, rows: Sequence[ResultRow], title: str | None = None) -> None:
        """Print rows straight to a Rich console so styles reach the terminal."""
        console = Console(file=self._stream, width=self._width, no_color=not self._color)
        if not rows:
            console.print(Text("No matches", style="dim"))
            return
        console.print(self.build_table(rows, title))

"""Interactive filter-as-you-type picker using prompt_toolkit."""

from __future__ import annotations

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, VSplit, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style

from filter_cli.config.schema import Config
from filter_cli.core.color import ThemeHighlight
from filter_cli.core.engine import FilterEngine, FilterResult
from filter_cli.editor.formatting import style_candidate

PROMPT = "> "


class FilterPicker:
    """Pick one candidate by typing a query."""

    def __init__(
        self,
        candidates: list[str],
        config: Config | None = None,
        query: str = "",
        theme: str | None = None,
        max_rows: int = 15,
        highlight: ThemeHighlight | None = None,
    ) -> None:
        """Initialize the picker.

        Args:
            candidates: Strings to choose from
            config: Configuration object
            query: Initial query
            theme: Theme name to use
            max_rows: Number of result rows shown
            highlight: Highlight style for matches (default: the theme's)
        """
        self.candidates = candidates
        self.config = config or Config()
        self.theme = self.config.get_theme(theme)
        self.highlight_style = highlight if highlight is not None else self.theme.get_highlight()
        self.max_rows = max_rows

        self.buffer = Buffer(
            document=Document(query),
            multiline=False,
            name="query",
            on_text_changed=self._on_text_changed,
        )

        self.selected = 0
        self.engine: FilterEngine | None = None
        self.result = FilterResult()

        # Application (created in run())
        self.app: Application | None = None

        self.refresh()

    def _on_text_changed(self, _buffer: Buffer) -> None:
        self.refresh()

    def refresh(self) -> None:
        """Recompile the query and filter the candidates."""
        matching = self.config.matching
        self.engine = FilterEngine(
            self.buffer.text,
            matching.to_options(),
            sort=matching.sort,
            levenshtein_sort=matching.levenshtein_sort,
        )
        self.result = self.engine.filter(
            self.candidates, limit=self.config.limit, deadline=self.config.timeout
        )
        self.selected = 0

    def move(self, delta: int) -> None:
        """Move the selection, wrapping around at the ends."""
        if not self.result.entries:
            self.selected = 0
            return
        self.selected = (self.selected + delta) % len(self.result.entries)

    @property
    def current(self) -> str | None:
        """The selected candidate, if any."""
        if not self.result.entries:
            return None
        return self.result.entries[self.selected].text

    def _visible_range(self) -> range:
        first = max(0, self.selected - self.max_rows + 1)
        last = min(len(self.result.entries), first + self.max_rows)
        return range(first, last)

    def get_result_fragments(self) -> StyleAndTextTuples:
        """Styled text for the visible result rows."""
        fragments: StyleAndTextTuples = []
        if self.engine is None:
            return fragments

        for row in self._visible_range():
            entry = self.result.entries[row]
            base = "class:selected" if row == self.selected else ""
            spans = self.engine.highlight(entry.text, self.highlight_style)
            fragments.extend(style_candidate(entry.text, spans, base))
            fragments.append(("", "\n"))

        status = f"{len(self.result.entries)}/{len(self.candidates)}"
        if self.result.truncated:
            status += " (truncated)"
        fragments.append(("class:status", status))
        return fragments

    def _create_keybindings(self) -> KeyBindings:
        """Create key bindings for the picker."""
        kb = KeyBindings()

        @kb.add("up")
        @kb.add("c-p")
        def _previous(event: KeyPressEvent) -> None:
            self.move(-1)

        @kb.add("down")
        @kb.add("c-n")
        def _next(event: KeyPressEvent) -> None:
            self.move(1)

        @kb.add("enter")
        def _accept(event: KeyPressEvent) -> None:
            event.app.exit(result=self.current)

        @kb.add("escape", eager=True)
        @kb.add("c-c")
        def _cancel(event: KeyPressEvent) -> None:
            event.app.exit(result=None)

        return kb

    def _create_style(self) -> Style:
        """Create prompt_toolkit style from theme."""
        return Style.from_dict(
            {
                "prompt": "bold",
                "selected": self.theme.selected,
                "status": "italic",
            }
        )

    def _create_layout(self) -> Layout:
        """Create the picker layout."""
        query_line = VSplit(
            [
                Window(
                    FormattedTextControl([("class:prompt", PROMPT)]),
                    width=len(PROMPT),
                    dont_extend_width=True,
                ),
                Window(BufferControl(buffer=self.buffer), height=1),
            ]
        )
        results = Window(
            FormattedTextControl(self.get_result_fragments),
            height=Dimension(max=self.max_rows + 1),
        )
        return Layout(HSplit([query_line, results]), focused_element=self.buffer)

    def run(self, input: Input | None = None) -> str | None:
        """Run the picker and return the chosen candidate.

        Args:
            input: Input to read keys from (default: the terminal on stdin)

        Returns:
            The chosen candidate, or None when cancelled or nothing matched
        """
        self.app = Application(
            layout=self._create_layout(),
            key_bindings=self._create_keybindings(),
            style=self._create_style(),
            full_screen=False,
            mouse_support=False,
            input=input,
        )
        return self.app.run()


"""Full-screen option selector.

The menu state lives in :class:`SelectorModel`, which knows nothing about the
terminal: key actions go in through ``update`` and ``view`` renders the screen
with rich. :func:`select_option` wires the model into a prompt_toolkit
application that feeds it key presses and the current terminal size.
"""

import io
from typing import Iterable, List, Mapping, Optional, Union

from prompt_toolkit.application import Application, get_app
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from rich import box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from .errors import EmptyOptionsError, NoSelectionError
from .models import Option, OptionLike, normalize_options

PRIMARY_COLOR = "#D53F8C"
SECONDARY_COLOR = "#9F7AEA"
ACCENT_COLOR = "#6B46C1"
BG_COLOR = "#1A0B2E"
TEXT_COLOR = "#F8F9FA"

KEYS = {
    "up": ("up", "k"),
    "down": ("down", "j"),
    "enter": ("enter",),
    "quit": ("q", "escape", "c-c"),
}

HELP_TEXT = "↑/↓: navigate • enter: select • q/esc: quit"

# Used until the first redraw reports the real terminal size
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

class SelectorModel:
    def __init__(self, title: str, options: List[Option], centered: bool = False):
        if not options:
            raise EmptyOptionsError("no options to select from")
        self.title = title
        self.options = list(options)
        self.centered = centered
        self.cursor = 0
        self.selected = -1
        self.choice = ""
        self.quitting = False
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT

    def update(self, action: str) -> bool:
        """Apply a key action and return ``True`` once the menu should close."""
        if action == "quit":
            self.quitting = True
            return True
        if action == "up":
            if self.cursor > 0:
                self.cursor -= 1
        elif action == "down":
            if self.cursor < len(self.options) - 1:
                self.cursor += 1
        elif action == "enter":
            self.selected = self.cursor
            self.choice = self.options[self.cursor].title
            self.quitting = True
            return True
        return False

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    @property
    def option_width(self) -> int:
        return max(min(self.width - 8, 60), 10)

    def _item(self, text: Text, style: str) -> RenderableType:
        if self.centered:
            text.justify = "center"
        return Padding(Padding(text, (1, 2), style=style, expand=self.centered), (0, 1))

    def _options_section(self) -> Panel:
        rows = []
        for i, opt in enumerate(self.options):
            if i == self.cursor:
                style = f"bold {BG_COLOR} on {PRIMARY_COLOR}"
                desc_style = f"italic {TEXT_COLOR} on {ACCENT_COLOR}"
                label = f"» {opt.title}"
            else:
                style = TEXT_COLOR
                desc_style = f"italic {SECONDARY_COLOR}"
                label = f"  {opt.title}"
            rows.append(self._item(Text(label), style))
            if opt.description:
                rows.append(self._item(Text(opt.description), desc_style))
        return Panel(
            Group(*rows),
            box=box.ROUNDED,
            border_style=ACCENT_COLOR,
            padding=(1, 0),
            expand=self.centered,
            width=self.option_width if self.centered else None,
        )

    def renderable(self) -> RenderableType:
        if self.quitting and self.selected != -1:
            return Text(f"\n✨ You selected: {self.choice} ✨\n")

        justify = "center" if self.centered else "left"
        title = Panel(
            Text(self.title, style=f"bold {PRIMARY_COLOR}", justify=justify),
            box=box.ROUNDED,
            border_style=SECONDARY_COLOR,
            style=f"on {BG_COLOR}",
            padding=(1, 2),
            expand=self.centered,
            width=self.option_width if self.centered else None,
        )
        separator = Text(
            "\n" + "─" * (max(self.width - 8, 60) - 4) + "\n",
            no_wrap=True,
            overflow="crop",
        )
        footer = Padding(Text(HELP_TEXT, style=SECONDARY_COLOR, justify=justify), (1, 2))
        content = Group(title, Text(""), self._options_section(), separator, footer)

        if self.centered:
            return Align.center(
                content,
                vertical="middle",
                width=max(min(self.width - 4, 62), 10),
                height=self.height,
            )
        return Padding(content, (1, 2))

    def view(self) -> str:
        """Render the current screen as ANSI text."""
        console = Console(
            file=io.StringIO(),
            width=max(self.width, 20),
            height=max(self.height, 1),
            color_system="truecolor",
            force_terminal=True,
            legacy_windows=False,
        )
        with console.capture() as capture:
            console.print(self.renderable())
        return capture.get()

def build_application(model: SelectorModel, input: Optional[Input] = None,
                      output: Optional[Output] = None) -> Application:
    bindings = KeyBindings()

    for action, keys in KEYS.items():
        for key in keys:
            @bindings.add(key)
            def _(event, action=action):
                if model.update(action):
                    event.app.exit()

    def get_text():
        size = get_app().output.get_size()
        model.resize(size.columns, size.rows)
        return ANSI(model.view())

    control = FormattedTextControl(get_text, focusable=True, show_cursor=False)
    return Application(
        layout=Layout(Window(control)),
        key_bindings=bindings,
        full_screen=True,
        input=input,
        output=output,
    )

def select_option(title: str,
                  options: Union[Mapping[str, str], Iterable[OptionLike]],
                  centered: bool = False,
                  *,
                  input: Optional[Input] = None,
                  output: Optional[Output] = None) -> str:
    """Show a full-screen menu and return the title of the chosen option.

    Args:
        title: Banner shown above the options.
        options: Ordered ``(title, description)`` pairs, :class:`Option`
            objects, bare titles, or a mapping of title to description.
        centered: Center the menu on screen.
        input: prompt_toolkit input, defaults to the terminal.
        output: prompt_toolkit output, defaults to the terminal.

    Raises:
        EmptyOptionsError: ``options`` is empty.
        NoSelectionError: The user quit without choosing.
    """
    model = SelectorModel(title, normalize_options(options), centered)
    build_application(model, input=input, output=output).run()
    if model.selected == -1:
        raise NoSelectionError()
    return model.choice

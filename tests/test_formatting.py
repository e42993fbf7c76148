import pytest
from rich.text import Text

from onylogger import Formatter, Level
from onylogger.formatting import LEVEL_COLORS, LEVEL_EMOJIS

STAMP = "[2024-01-01 12:00:00]"

@pytest.mark.parametrize("level,color,emoji", [
    (Level.INFO, "magenta", "📜"),
    (Level.WARNING, "yellow", "⚠️"),
    (Level.ERROR, "red", "❌"),
    (Level.DEBUG, "cyan", "🐛"),
    (Level.SUCCESS, "green", "✅"),
    (Level.USER_INPUT, None, "📝"),
    (Level.LOADING, "cyan", "⏳"),
])
def test_level_styling(level, color, emoji):
    assert level.color == color
    assert level.emoji == emoji

def test_every_level_is_styled():
    assert set(LEVEL_COLORS) == set(Level)
    assert set(LEVEL_EMOJIS) == set(Level)

def test_format_line(fixed_clock):
    formatter = Formatter(fixed_clock)
    assert formatter.format(Level.INFO, "hello") == f"{STAMP} [📜] hello"

def test_format_is_deterministic_for_fixed_clock(fixed_clock):
    formatter = Formatter(fixed_clock)
    first = formatter.format(Level.ERROR, "boom")
    assert formatter.format(Level.ERROR, "boom") == first

def test_format_accepts_level_names(fixed_clock):
    formatter = Formatter(fixed_clock)
    assert formatter.format("SUCCESS", "done") == f"{STAMP} [✅] done"

def test_render_colors_only_the_timestamp(fixed_clock):
    stamp, rest = Formatter(fixed_clock).render(Level.WARNING, "careful", colors=True)
    assert isinstance(stamp, Text)
    assert stamp.plain == STAMP
    assert stamp.style == "yellow"
    assert rest == " [⚠️] careful"

def test_render_without_colors_is_unstyled(fixed_clock):
    stamp, _ = Formatter(fixed_clock).render(Level.INFO, "plain", colors=False)
    assert stamp.style == ""

def test_user_input_has_no_color_even_when_enabled(fixed_clock):
    stamp, _ = Formatter(fixed_clock).render(Level.USER_INPUT, "name?", colors=True)
    assert stamp.style == ""

def test_message_control_characters_kept(fixed_clock):
    assert Formatter(fixed_clock).format(Level.INFO, "a\tb\rc") == f"{STAMP} [📜] a\tb\rc"

"""Console narration helpers shared by the demos."""

from typing import Optional

from pattern_demos.config.schemas import DisplayConfig


def print_rule(display: DisplayConfig, char: Optional[str] = None, width: Optional[int] = None) -> None:
    """Print a horizontal rule."""
    print((char or display.separator_char) * (width or display.separator_width))


def print_section(title: str, display: DisplayConfig, char: Optional[str] = None) -> None:
    """Print a section-width rule followed by a section title."""
    print_rule(display, char, display.section_width)
    print(title)


def print_divider(display: DisplayConfig) -> None:
    print(display.divider)

from __future__ import annotations

import dataclasses
import io

from rich.console import Console, RenderableType

from seedpicker.cli.render import render_summary
from seedpicker.stats import summarize
from seedpicker.table import build_word_table


def _render_text(renderable: RenderableType) -> str:
    console = Console(file=io.StringIO(), width=160, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def test_summary_lists_suited_word_tuples() -> None:
    text = _render_text(render_summary(summarize(build_word_table())))
    assert "A♠:K♠" in text
    assert "Diamonds" in text


def test_summary_without_suited_words_uses_dash_placeholder() -> None:
    summary = dataclasses.replace(summarize(build_word_table()), suited_words=())
    text = _render_text(render_summary(summary))
    assert "—" not in text
    assert "Spades" in text

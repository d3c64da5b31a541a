"""PDF rendering of puzzles with reportlab."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult


LOGGER = get_logger(__name__)

SOLUTION_COLOR = (1.0, 0.0, 0.0)
TEXT_COLOR = (0.0, 0.0, 0.0)


def render_pdf(
    result: PuzzleResult,
    out_path: Path | str,
    *,
    box_size: float = 18,
    margin: float = 18,
    font_name: str = "Helvetica",
    clue_font: str | None = None,
    solution: bool = True,
    clues: bool = True,
) -> Path:
    """Draw the puzzle, and optionally a solution page, to ``out_path``.

    Each page is sized to fit the grid plus the word list. On the solution
    page the letters that belong to words are drawn in red.
    """

    clue_font = clue_font or font_name
    height = box_size * result.rows
    width = box_size * result.columns

    clue_height = box_size
    clue_font_size = clue_height * 0.7
    clue_margin = 72 / 4.0
    if clues and result.vocabulary:
        clue_height = min(height / len(result.vocabulary), box_size)
        clue_font_size = clue_height * 0.7
        widest = max(stringWidth(word, clue_font, clue_font_size) + 1 for word in result.vocabulary)
        width += clue_margin + widest

    page_size = (width + margin * 2, height + margin * 2)
    out_path = Path(out_path)
    pdf = canvas.Canvas(str(out_path), pagesize=page_size)
    letter_size = box_size * 0.7

    pages = 2 if solution else 1
    for page in range(pages):
        pdf.setFont(font_name, letter_size)
        for row in range(result.rows):
            y = margin + (result.rows - 1 - row) * box_size
            for col in range(result.columns):
                x = margin + col * box_size
                highlight = page == 1 and result.solution.cells[row][col] is not None
                pdf.setFillColorRGB(*(SOLUTION_COLOR if highlight else TEXT_COLOR))
                letter = (result.grid.cells[row][col] or "").upper()
                pdf.drawCentredString(x + box_size / 2, y + (box_size - letter_size * 0.7) / 2, letter)

        if clues and result.vocabulary:
            pdf.setFillColorRGB(*TEXT_COLOR)
            pdf.setFont(clue_font, clue_font_size)
            x = margin + result.columns * box_size + clue_margin
            for index, word in enumerate(result.vocabulary):
                top = margin + height - index * clue_height
                pdf.drawString(x, top - (clue_height + clue_font_size * 0.7) / 2, word)

        pdf.showPage()

    pdf.save()
    LOGGER.info("Rendered %s-page PDF to %s", pages, out_path)
    return out_path

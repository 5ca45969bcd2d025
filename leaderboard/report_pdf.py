from __future__ import annotations

import os
import tempfile
from collections import Counter
from typing import Any, BinaryIO, List, Optional, Sequence, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from reportlab.lib import colors  # noqa: E402
from reportlab.lib.pagesizes import letter  # noqa: E402
from reportlab.lib.styles import getSampleStyleSheet  # noqa: E402
from reportlab.lib.units import inch  # noqa: E402
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle  # noqa: E402

from .heap import Orientation  # noqa: E402
from .models import Entry  # noqa: E402
from .ranks import Rank  # noqa: E402


def _save_plot(fig, path: str) -> str:
    fig.tight_layout()
    fig.savefig(path, dpi=160)
    plt.close(fig)
    return path


def _plot_rank_distribution(entries: Sequence[Entry], out_path: str) -> Optional[str]:
    if not entries:
        return None
    counts = Counter(e.rank for e in entries)
    labels = [r.value for r in Rank]
    values = [counts.get(label, 0) for label in labels]
    fig, ax = plt.subplots(figsize=(6.5, 3.2))
    ax.bar(labels, values, color="#4a7ebb")
    ax.set_title("Players per Rank")
    ax.set_ylabel("Players")
    ax.tick_params(axis="x", labelsize=8)
    return _save_plot(fig, out_path)


def _build_entries_table(entries: Sequence[Entry]) -> Table:
    rows: List[List[str]] = [["#", "Username", "Rank", "Power"]]
    for idx, e in enumerate(entries):
        rows.append([str(idx), e.name, e.rank, str(e.score)])
    table = Table(rows, colWidths=[0.5 * inch, 2.8 * inch, 1.4 * inch, 1.0 * inch], repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("FONT", (0, 0), (-1, -1), "Helvetica", 8),
                ("ALIGN", (3, 1), (3, -1), "RIGHT"),
            ]
        )
    )
    return table


def build_pdf(
    entries: Sequence[Entry],
    output: Union[str, BinaryIO],
    title: str = "Leaderboard",
    orientation: Orientation = Orientation.MAX,
) -> None:
    """Render a leaderboard snapshot to PDF.

    Rows are written in the order given, which for a heap snapshot is the
    raw array order rather than a sorted ranking.
    """
    styles = getSampleStyleSheet()
    story: List[Any] = []
    story.append(Paragraph(title, styles["Title"]))

    if entries:
        scores = [e.score for e in entries]
        top = max(scores) if orientation is Orientation.MAX else min(scores)
        story.append(
            Paragraph(
                f"Players: <b>{len(entries)}</b> • Orientation: <b>{orientation.value}</b> "
                f"• Top power: <b>{top}</b>",
                styles["BodyText"],
            )
        )
    else:
        story.append(Paragraph("Leaderboard is empty.", styles["BodyText"]))
    story.append(Spacer(1, 0.2 * inch))

    if entries:
        story.append(Paragraph("Entries (heap order)", styles["Heading3"]))
        story.append(_build_entries_table(entries))
        story.append(Spacer(1, 0.2 * inch))

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "ranks.png")
        img = _plot_rank_distribution(entries, path)
        if img and os.path.exists(img):
            story.append(Paragraph("Rank distribution across all tracked players.", styles["BodyText"]))
            story.append(Image(img, width=6.5 * inch, height=3.2 * inch))

        doc = SimpleDocTemplate(output, pagesize=letter, title=title)
        doc.build(story)

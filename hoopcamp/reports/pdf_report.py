"""Single-page PDF report of a student's stats and evaluations."""

import io
import re

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from hoopcamp.database.records import EvaluationWithSession, GameStatWithGame, Profile
from hoopcamp.stats.averages import AverageStats


def _fmt_avg(value: float) -> str:
    return f"{value:.1f}"


def report_filename(student_name: str) -> str:
    """Download name built from the student's display name."""
    slug = re.sub(r"\s+", "-", student_name.strip()) or "student"
    return f"{slug}-report.pdf"


def generate_player_report_pdf(
    student: Profile,
    averages: AverageStats,
    game_stats: list[GameStatWithGame],
    evaluations: list[EvaluationWithSession],
) -> bytes:
    """Render the player report and return the PDF bytes."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    left = 42
    y = height - 40

    def line(text: str, size: int = 10, bold: bool = False, color=colors.black, gap: int = 14) -> None:
        nonlocal y
        c.setFillColor(color)
        c.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        c.drawString(left, y, text)
        y -= gap

    line("Player Report", size=18, bold=True)
    line(student.name, size=12, bold=True, gap=14)
    line(student.email or "", size=9, color=colors.HexColor("#6B7785"), gap=20)

    line("Season Averages", size=12, bold=True)
    line(
        "PTS {0}   REB {1}   AST {2}   STL {3}   BLK {4}   Games {5}".format(
            _fmt_avg(averages.points),
            _fmt_avg(averages.rebounds),
            _fmt_avg(averages.assists),
            _fmt_avg(averages.steals),
            _fmt_avg(averages.blocks),
            averages.games_played,
        ),
        size=9,
        gap=18,
    )

    line("Game Log", size=12, bold=True)
    if game_stats:
        line(f"{'Date':<12} {'Game':<32} PTS  REB  AST  STL  BLK", size=8, bold=True, gap=12)
        for item in game_stats[:15]:
            stat, game = item.stat, item.game
            date = game.game_date if game else "—"
            title = game.title if game else "—"
            line(
                f"{date:<12} {title[:32]:<32} {stat.points:>3}  {stat.rebounds:>3}  "
                f"{stat.assists:>3}  {stat.steals:>3}  {stat.blocks:>3}",
                size=8,
                gap=11,
            )
        y -= 6
    else:
        line("No games recorded.", size=9, gap=18)

    line("Coach Evaluations", size=12, bold=True)
    if evaluations:
        for item in evaluations[:5]:
            evaluation, session = item.evaluation, item.session
            topic = session.drill_topic if session else "Training Session"
            date = session.session_date if session else "Date N/A"
            line(f"• {topic} ({date}) - rating {evaluation.rating}/10", size=10, bold=True, gap=12)
            for label, text in (
                ("Strengths", evaluation.strengths),
                ("Weaknesses", evaluation.weaknesses),
                ("Notes", evaluation.coach_notes),
            ):
                if not text:
                    continue
                text = text.strip()
                if len(text) > 90:
                    text = text[:90].rstrip() + "..."
                line(f"  {label}: {text}", size=9, color=colors.HexColor("#4B5663"), gap=11)
            y -= 2
    else:
        line("No evaluations found.", size=9)

    c.showPage()
    c.save()
    return buffer.getvalue()

"""Weekly bill summary chart, rendered off-screen with matplotlib."""
import logging
from matplotlib.figure import Figure

logger = logging.getLogger(__name__)

BAR_COLOR = "#4C9AFF"
BG_COLOR = "#e4e4e4"
FG_COLOR = "#444444"


def _style_ax(ax, fig):
    fig.patch.set_facecolor(BG_COLOR)
    ax.set_facecolor(BG_COLOR)
    ax.tick_params(colors=FG_COLOR, labelsize=8)
    for spine in ax.spines.values():
        spine.set_edgecolor(FG_COLOR)


def build_weekly_chart(points: list[tuple[str, float]], title: str = "Monthly spending") -> Figure:
    fig = Figure(figsize=(6, 3), dpi=100)
    ax = fig.add_subplot(111)
    _style_ax(ax, fig)
    ax.set_title(title, color=FG_COLOR, fontsize=10)

    if not points or not any(amount for _, amount in points):
        ax.text(
            0.5, 0.5, "No spending recorded for this month.",
            ha="center", va="center", color=FG_COLOR, transform=ax.transAxes,
        )
        ax.set_xticks([])
        ax.set_yticks([])
        return fig

    labels = [label for label, _ in points]
    amounts = [amount for _, amount in points]
    bars = ax.bar(labels, amounts, color=BAR_COLOR)
    for bar, amount in zip(bars, amounts):
        ax.annotate(
            f"${amount:,.0f}",
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center", va="bottom", fontsize=7, color=FG_COLOR,
        )
    fig.tight_layout()
    return fig


def save_weekly_chart(points: list[tuple[str, float]], path: str, title: str = "Monthly spending"):
    fig = build_weekly_chart(points, title)
    fig.savefig(path, facecolor=fig.get_facecolor())
    logger.info(f"Wrote weekly chart to {path}")

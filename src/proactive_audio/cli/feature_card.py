"""
Operator-facing description of the silent-sentinel mode.

Renders what the configured session does, plus two worked examples, as a
bordered rich panel.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

FEATURES = [
    (
        "🤫",
        "Listens Silently",
        "Operates passively in your audio environment and is designed to be completely non-intrusive.",
    ),
    (
        "🎯",
        "Activates on Specific Triggers",
        "It will only speak when it detects a verifiable factual inaccuracy or potentially "
        "harmful misinformation regarding health ❤️‍🩹, finance 💰, or civic safety 🗳️.",
    ),
    (
        "📢",
        "Delivers a Brief Alert",
        "When triggered, it provides a short, neutral notification that the statement is incorrect.",
    ),
    (
        "🔇",
        "Returns to Silence",
        "It does not engage in conversation and immediately goes quiet, ensuring your listening "
        "experience remains uninterrupted while providing a powerful layer of security against falsehoods.",
    ),
]

EXAMPLES = [
    (
        "✅",
        "Positive Statement (No Trigger)",
        "Emmanuel Macron is the current president of France.",
        "🤫 [Remains completely silent]",
    ),
    (
        "❌",
        "Negative Statement (Trigger Met)",
        "Actually, 1+1 = 3, that's a known fact.",
        '📢 "Correction: That statement is inaccurate. One plus one equals two." 🔇',
    ),
]


class FeatureCard:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display(self) -> None:
        self.console.print(self.render())

    def render(self) -> Panel:
        features = Table.grid(padding=(0, 1))
        features.add_column(width=2)
        features.add_column()
        for icon, title, text in FEATURES:
            features.add_row(icon, Text.assemble((title, "bold"), "\n", text))

        examples = Table.grid(padding=(0, 1))
        examples.add_column(width=2)
        examples.add_column()
        for icon, title, statement, behavior in EXAMPLES:
            examples.add_row(
                icon,
                Text.assemble(
                    (title, "bold"),
                    "\n",
                    ("Input: ", "bold"),
                    f'"{statement}"',
                    "\n",
                    ("Agent Behavior: ", "bold"),
                    behavior,
                ),
            )

        return Panel(
            Group(features, Text(""), Text("Examples:"), examples),
            title="Proactive Audio 🔊✨",
            title_align="left",
            border_style="cyan",
            padding=(1, 2),
        )

"""
Camp walkthrough demonstrating the full evaluation pipeline.

This script runs a handful of scripted form submissions through:
1. Configuration loading and validation
2. Per-metric evaluation and aggregation
3. Console rendering of each summary

Run with: uv run python camp_demo.py
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from adapters.console.summary_view import render_summary
from camp_vitals.config import get_config, print_config_summary, validate_config
from camp_vitals.observability import configure_logging
from camp_vitals.services.aggregator import summarize_form

console = Console()

SCENARIOS: list[tuple[str, dict[str, str]]] = [
    (
        "All readings normal",
        {
            "name": "Asha",
            "weight": "60",
            "height": "165",
            "spo2": "98",
            "bp": "118/78",
            "bloodSugar": "110",
            "ppbs": "135",
            "hb": "13.2",
            "gender": "female",
        },
    ),
    (
        "Low oxygen and raised pressure",
        {
            "name": "Ravi",
            "weight": "82",
            "height": "170",
            "spo2": "91",
            "bp": "145/95",
            "bloodSugar": "180",
            "hb": "12.5",
            "gender": "male",
        },
    ),
    (
        "Partial form with unreadable fields",
        {
            "name": "Unknown",
            "bmi": "22.4",
            "spo2": "",
            "bp": "120",
            "bloodSugar": "abc",
        },
    ),
    ("Empty form", {}),
]


def run_scenarios() -> None:
    """Evaluate every scripted scenario and print a results table."""
    config = get_config()
    configure_logging(config.logging)

    console.print(Panel(f"🩺 {config.evaluation.camp_name} - Vitals Walkthrough", style="bold blue"))

    overview = Table()
    overview.add_column("Scenario", style="cyan")
    overview.add_column("Metrics", justify="right")
    overview.add_column("Attention", style="white")

    for name, form in SCENARIOS:
        console.print(f"\n{'=' * 60}")
        console.print(f"📋 {name}", style="bold")
        summary = summarize_form(form, config.evaluation)
        render_summary(summary, console)
        overview.add_row(name, str(len(summary.metrics)), "⚠️  yes" if summary.has_issues else "✅ no")

    console.print(f"\n{'=' * 60}")
    console.print(overview)


if __name__ == "__main__":
    validate_config()
    print_config_summary()
    run_scenarios()

#!/usr/bin/env python3
"""CLI interface for the Campaign Template Analyzer."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from campaign_analyzer import load_config, CampaignAnalyzer, ReportExporter, TemplateClassifier
from campaign_analyzer.errors import CampaignAnalyzerError
from campaign_analyzer.report import build_insights, rate_deltas, format_delta

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--config", "-c", default="config.yaml", help="Path to config file")
@click.pass_context
def cli(ctx, config):
    """Campaign Template Analyzer - Compare email template performance."""
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config)
    except CampaignAnalyzerError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        ctx.exit(1)
    _setup_logging(ctx.obj["config"].log_level)


@cli.command()
@click.argument("csv_file", type=click.Path(dir_okay=False))
@click.option("--export/--no-export", default=False, help="Write the JSON report")
@click.option("--details", is_flag=True, help="List the emails of every template")
@click.pass_context
def analyze(ctx, csv_file, export, details):
    """Analyze a campaign export and compare templates."""
    config = ctx.obj["config"]
    analyzer = CampaignAnalyzer(config.templates)

    try:
        report = analyzer.analyze_file(csv_file)
    except CampaignAnalyzerError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        ctx.exit(1)

    overall = report.overall
    console.print(Panel.fit(
        f"[bold blue]Email Campaign Analyzer[/]\n"
        f"Total Emails: {overall.total_emails}\n"
        f"Open Rate: {overall.open_rate}% ({overall.total_opens} opens) | "
        f"Click Rate: {overall.click_rate}% ({overall.total_clicks} clicks) | "
        f"Reply Rate: {overall.reply_rate}% ({overall.total_replies} replies)",
        title="Overall"
    ))

    if not report.template_groups:
        console.print("[dim]No emails found in file.[/]")
        return

    table = Table(title="Template Performance Comparison")
    table.add_column("Template", style="cyan", max_width=30)
    table.add_column("Emails", justify="right")
    table.add_column("Open Rate", justify="right", style="green")
    table.add_column("Click Rate", justify="right", style="magenta")
    table.add_column("Reply Rate", justify="right", style="yellow")
    table.add_column("Avg Length", justify="right")
    table.add_column("vs Overall", style="dim")

    for group in report.template_groups:
        deltas = rate_deltas(group, overall)
        table.add_row(
            escape(group.name),
            str(group.count),
            f"{group.open_rate}%",
            f"{group.click_rate}%",
            f"{group.reply_rate}%",
            str(group.avg_length),
            " ".join(f"{k}: {format_delta(v)}" for k, v in deltas.items()),
        )
    console.print(table)

    subjects = Table(title="Subject Line Analysis")
    subjects.add_column("Bucket", style="cyan")
    subjects.add_column("Emails", justify="right")
    subjects.add_column("Open Rate", justify="right", style="green")
    for label, bucket in (
        ("With Question (?)", report.subject_analysis.with_question),
        ("Without Question", report.subject_analysis.without_question),
        ("Short (<40 chars)", report.subject_analysis.short_subject),
        ("Long (40+ chars)", report.subject_analysis.long_subject),
    ):
        subjects.add_row(label, str(bucket.total), f"{bucket.open_rate}%")
    console.print(subjects)

    insights = build_insights(report)
    console.print("\n[bold]Key Insights:[/]")
    for line in insights.lines():
        console.print(f"  • {escape(line)}")
    for name, share in insights.shares.items():
        console.print(f"  • {escape(name)}: {share:.0f}% of emails")

    if details:
        for group in report.template_groups:
            console.print(f"\n[bold]{escape(group.name)}[/] [dim]{escape(group.description)}[/]")
            for email in group.emails:
                flags = "".join(
                    mark if on else "-"
                    for mark, on in (("O", email.metrics.opened), ("C", email.metrics.clicked), ("R", email.metrics.replied))
                )
                console.print(f"  {flags} {escape(email.recipient or '-')} {escape(email.subject[:50])}")

    if export:
        path = ReportExporter(config.export_dir).write(report)
        console.print(f"\n[green]✓[/] Report exported to {path}")


@cli.command()
@click.argument("body")
@click.pass_context
def classify(ctx, body):
    """Classify a single email body and show template scores."""
    config = ctx.obj["config"]
    classifier = TemplateClassifier(config.templates)

    result = classifier.classify(body)
    console.print(Panel.fit(
        f"[bold]{escape(result.template_name)}[/] (score {result.score})\n{escape(result.description)}",
        title="Classification"
    ))

    minimums = {t.name: t.min_score for t in classifier.templates}
    table = Table(title="Template Scores")
    table.add_column("Template", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Min", justify="right", style="dim")
    for name, score in classifier.score_all(body).items():
        style = "green" if score >= minimums[name] else "white"
        table.add_row(escape(name), f"[{style}]{score}[/]", str(minimums[name]))
    console.print(table)


@cli.command()
@click.pass_context
def templates(ctx):
    """List the active template registry."""
    config = ctx.obj["config"]

    console.print(f"\n[bold]Templates ({len(config.templates)}):[/]")
    for template in config.templates:
        console.print(f"  • {escape(template.name)} (min score {template.min_score}) - {escape(template.description)}")
        for rule in template.indicators:
            console.print(f"      [dim]{rule.weight:>2}[/]  {escape(rule.pattern)}")


if __name__ == "__main__":
    cli()

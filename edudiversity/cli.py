"""
Purpose: CLI for the education diversity pipeline.
Description: Provides `edudiv run` to compute the per-company diversity table from a roster CSV
and `edudiv summary` to print roster and score statistics without writing output.
Key Functions/Classes: Click entrypoints `cli`, `run` and `summary`.
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from .api import process_roster, run_pipeline
from .config import get_default_input_path, get_default_output_path, get_log_path, load_config
from .diversity_logging import close_file_handlers, get_logger
from .errors import ConfigError, InputFormatError
from .io_csv import read_roster_csv
from .report import diversity_distribution, education_patterns, least_diverse, most_diverse, score_statistics


# AIDEV-NOTE: Input path may come from EDUDIV_INPUT_CSV; output defaults next to the input.


def _resolve_input(input_csv: Optional[str]) -> str:
    resolved = input_csv or get_default_input_path()
    if not resolved:
        raise click.UsageError("Missing --input-csv (or set EDUDIV_INPUT_CSV)")
    return resolved


def _echo_companies(title: str, aggregates) -> None:
    click.echo(title)
    if not aggregates:
        click.echo("   (none)")
        return
    for a in aggregates:
        click.echo(
            f"   {a.company}: score={a.diversity_score} executives={a.num_executives} "
            f"categories={a.unique_categories} most_common={a.most_common_field}"
        )


@click.group()
def cli() -> None:
    """Executive education diversity utilities."""


@cli.command()
@click.option("--input-csv", required=False, type=click.Path(dir_okay=False))
@click.option("--output-csv", required=False, type=click.Path(dir_okay=False))
@click.option("--report-md", required=False, type=click.Path(dir_okay=False), help="Also write a Markdown report")
@click.option("--count-all-executives", is_flag=True, default=False,
              help="Count every executive, not only those with recorded education")
@click.option("--config", "config_path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--log-jsonl", required=False, type=click.Path(dir_okay=False))
def run(
    input_csv: Optional[str],
    output_csv: Optional[str],
    report_md: Optional[str],
    count_all_executives: bool,
    config_path: Optional[str],
    log_jsonl: Optional[str],
) -> None:
    """Compute education diversity per company and write the output CSV."""
    input_csv = _resolve_input(input_csv)
    if not output_csv:
        output_csv = get_default_output_path(input_csv)

    click.echo("🚀 Starting education diversity run...")
    click.echo(f"📁 Input: {input_csv}")
    click.echo(f"📤 Output: {output_csv}")

    logger = get_logger(path=log_jsonl or get_log_path())
    try:
        cfg = load_config(config_path, count_all_executives=True if count_all_executives else None)
        result = run_pipeline(input_csv, output_csv, cfg=cfg, logger=logger, report_md=report_md)
    except (FileNotFoundError, InputFormatError, ConfigError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)
    finally:
        # The run log file belongs to this invocation only
        close_file_handlers(logger)

    click.echo(f"✅ Success! Scored {len(result.aggregates)} companies "
               f"from {len(result.executives)} executive records")
    click.echo(f"📊 Results saved to: {result.output_path}")
    if result.report_path:
        click.echo(f"📝 Report saved to: {result.report_path}")


@cli.command()
@click.option("--input-csv", required=False, type=click.Path(dir_okay=False))
@click.option("--top", "top_n", default=None, type=int, help="Companies listed per ranking")
@click.option("--config", "config_path", required=False, type=click.Path(exists=True, dir_okay=False))
def summary(input_csv: Optional[str], top_n: Optional[int], config_path: Optional[str]) -> None:
    """Print roster and diversity statistics without writing output."""
    input_csv = _resolve_input(input_csv)
    try:
        cfg = load_config(config_path, top_n=top_n)
        rows = read_roster_csv(input_csv)
    except (FileNotFoundError, InputFormatError, ConfigError) as e:
        click.echo(f"❌ Error: {e}")
        sys.exit(1)

    result = process_roster(rows, cfg, logger=get_logger())
    stats = score_statistics(result.aggregates, cfg.rounding_places)

    click.echo("=== ROSTER ===")
    for key, value in result.summary.items():
        click.echo(f"   {key.replace('_', ' ').capitalize()}: {value}")
    click.echo(f"   Companies scored: {len(result.aggregates)}")

    click.echo("=== DIVERSITY SCORE STATISTICS ===")
    for key in ("min", "avg", "max", "stddev"):
        value = stats[key]
        click.echo(f"   {key}: {'n/a' if value is None else value}")

    distribution = diversity_distribution(result.aggregates, cfg.high_threshold, cfg.low_threshold)
    click.echo(f"   Total executives: {distribution['total_executives']}")
    click.echo(f"   Companies with high diversity (>{cfg.high_threshold}): {distribution['high_diversity']}")
    click.echo(f"   Companies with low diversity (<{cfg.low_threshold}): {distribution['low_diversity']}")

    _echo_companies(f"=== TOP {cfg.top_n} MOST DIVERSE COMPANIES ===", most_diverse(result.aggregates, cfg.top_n))
    _echo_companies(f"=== TOP {cfg.top_n} LEAST DIVERSE COMPANIES ===", least_diverse(result.aggregates, cfg.top_n))

    click.echo("=== EDUCATION PATTERNS ===")
    for text, count in education_patterns(result.executives, cfg.pattern_limit, cfg.missing_education):
        click.echo(f"   {count:>4}  {text}")


if __name__ == "__main__":  # pragma: no cover
    cli()

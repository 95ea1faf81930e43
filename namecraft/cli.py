"""CLI interface for namecraft."""

import asyncio
import json
import click
import logging
import warnings
from pathlib import Path
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from typing import List

# Suppress noisy library warnings/logs (LLM client, HTTP transport)
warnings.filterwarnings("ignore")
for _noisy in ("httpx", "httpcore", "langchain", "langchain_core", "langchain_google_genai"):
    logging.getLogger(_noisy).setLevel(logging.CRITICAL)

from . import __version__
from .config import DEFAULT_CONFIG_PATH, get_setting, load_config
from .domains import DomainSynthesizer
from .engine import get_engine
from .exceptions import NamecraftError
from .models import GenerateOptions
from .profiles import PROFILES, PRODUCT_PROFILE, STARTUP_PROFILE
from .scoring import NameScorer
from .wordbanks.product import TIER_NAMES, get_tier_names


console = Console()


def _configure_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )


def _split(values) -> List[str]:
    """Accept repeated options and comma-separated values alike."""
    words = []
    for value in values:
        words.extend(v.strip() for v in value.split(',') if v.strip())
    return words


def _write_json(output: str, data):
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)
    console.print(f"[green]Saved to {output}[/green]")


def _fail(message: str):
    console.print(f"[red]Error: {message}[/red]")
    raise SystemExit(1)


def _options(ctx, **kwargs) -> GenerateOptions:
    """Build options, filling unset values from the generation config."""
    config = ctx.obj['config']
    if kwargs.get('count') is None:
        kwargs['count'] = get_setting(config, 'generation.count', 50)
    if kwargs.get('min_score') is None:
        kwargs['min_score'] = get_setting(config, 'generation.min_score', 40)
    if kwargs.get('style') is None:
        kwargs['style'] = get_setting(config, 'generation.style')
    try:
        return GenerateOptions(**kwargs)
    except NamecraftError as e:
        _fail(str(e))


def _names_table(names, title: str, show_domains: bool = False) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Pattern", style="dim")
    if show_domains:
        table.add_column("Likely free")
    else:
        table.add_column("Source")

    for n in names:
        if show_domains:
            extra = ", ".join(d.domain for d in n.domains if d.likely_available)
        else:
            extra = n.reasoning or " + ".join(n.source_words)
        table.add_row(n.name, str(n.score), n.pattern.value, extra)
    return table


@click.group()
@click.version_option(version=__version__)
@click.option('--config', 'config_path', default=DEFAULT_CONFIG_PATH, help='Path to YAML config')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """namecraft - Generate startup and product names."""
    ctx.ensure_object(dict)
    config = load_config(config_path)
    ctx.obj.setdefault('config', config)
    _configure_logging('DEBUG' if verbose else get_setting(config, 'logging.level', 'WARNING'))


@cli.command()
@click.option('--keywords', '-k', multiple=True, help='Seed keywords (repeat or comma-separate)')
@click.option('--industry', '-i', default=None, help='Industry word bank (saas, fintech, ai, ...)')
@click.option('--style', '-s', default=None, help='Naming style')
@click.option('--count', '-n', default=None, type=int, help='Number of names to return')
@click.option('--pattern', '-p', 'patterns', multiple=True, help='Restrict to pattern types')
@click.option('--min-score', default=None, type=int, help='Minimum score to include')
@click.option('--domains/--no-domains', default=False, help='Add domain suggestions')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
@click.pass_context
def generate(ctx, keywords, industry, style, count, patterns, min_score, domains, output):
    """Generate startup names from naming patterns."""
    options = _options(
        ctx,
        keywords=_split(keywords),
        industry=industry,
        style=style,
        count=count,
        patterns=_split(patterns) or None,
        min_score=min_score,
        include_domains=domains,
    )
    engine = get_engine(STARTUP_PROFILE)
    if domains:
        names = engine.generate_names_with_domains(options)
    else:
        names = engine.generate_names(options)

    if not names:
        console.print("[yellow]No names met the score threshold.[/yellow]")
        return

    console.print(_names_table(names, "Startup Names", show_domains=domains))
    console.print(f"\n[bold green]Generated {len(names)} names[/bold green]")

    if output:
        _write_json(output, [n.to_dict() for n in names])


@cli.command()
@click.option('--keywords', '-k', multiple=True, help='Seed keywords (repeat or comma-separate)')
@click.option('--category', '-c', default=None, help='Product category (crm, analytics, devtools, ...)')
@click.option('--style', '-s', default=None, help='Naming style')
@click.option('--count', '-n', default=None, type=int, help='Number of names to return')
@click.option('--pattern', '-p', 'patterns', multiple=True, help='Restrict to pattern types')
@click.option('--min-score', default=None, type=int, help='Minimum score to include')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
@click.pass_context
def product(ctx, keywords, category, style, count, patterns, min_score, output):
    """Generate product and feature names (DataHub, TrackTask)."""
    options = _options(
        ctx,
        keywords=_split(keywords),
        category=category,
        style=style,
        count=count,
        patterns=_split(patterns) or None,
        min_score=min_score,
    )
    names = get_engine(PRODUCT_PROFILE).generate_names(options)

    if not names:
        console.print("[yellow]No names met the score threshold.[/yellow]")
        return

    console.print(_names_table(names, "Product Names"))
    console.print(f"\n[bold green]Generated {len(names)} names[/bold green]")

    if output:
        _write_json(output, [n.to_dict() for n in names])


@cli.command()
@click.argument('name')
@click.option('--profile', type=click.Choice(sorted(PROFILES)), default='startup', help='Scoring profile')
def score(name, profile):
    """Score a single name."""
    result = NameScorer(PROFILES[profile].scoring).breakdown(name)

    console.print(f"\n[bold]Name:[/bold] {name} ({profile})")
    console.print(f"[bold green]Total Score:[/bold green] {result.total}")
    console.print(f"\n[bold]Breakdown:[/bold]")
    console.print(f"  Length:         {result.length:+d}")
    console.print(f"  Vowels:         {result.vowels:+d}")
    console.print(f"  Suffix:         {result.suffix:+d}")
    console.print(f"  CamelCase:      {result.camel_case:+d}")
    console.print(f"  Consonants:     {result.consonants:+d}")
    console.print(f"  Leading letter: {result.leading_letter:+d}")


@cli.command()
@click.argument('names', nargs=-1, required=True)
@click.option('--output', '-o', default=None, help='Output file (JSON)')
def domains(names, output):
    """Suggest domains for one or more names (heuristic, no lookups)."""
    synthesizer = DomainSynthesizer()
    results = {}

    for name in names:
        suggestions = synthesizer.suggest(name)
        results[name] = [
            {'domain': s.domain, 'tld': s.tld, 'likely_available': s.likely_available}
            for s in suggestions
        ]

        table = Table(title=f"Domains for {name}")
        table.add_column("Domain", style="cyan")
        table.add_column("TLD", style="dim")
        table.add_column("Likely available", justify="center")
        for s in suggestions:
            table.add_row(s.domain, s.tld, "[green]Y[/green]" if s.likely_available else "[red]N[/red]")
        console.print(table)

    if output:
        _write_json(output, results)


@cli.command()
@click.argument('concept')
@click.option('--keywords', '-k', multiple=True, help='Extra keywords (repeat or comma-separate)')
@click.option('--industry', '-i', default=None, help='Industry word bank')
@click.option('--style', '-s', default=None, help='Naming style')
@click.option('--count', '-n', default=20, type=int, help='Number of names to return')
@click.option('--min-score', default=None, type=int, help='Minimum score for pattern names')
@click.option('--validate/--no-validate', default=False, help='Have the model re-rank the names')
@click.option('--domains/--no-domains', default=True, help='Add domain suggestions')
@click.option('--output', '-o', default=None, help='Output file (JSON)')
@click.pass_context
def startup(ctx, concept, keywords, industry, style, count, min_score, validate, domains, output):
    """Full pipeline: seed words, patterns, creative names, ranking."""
    from .pipeline import generate_startup_names

    options = _options(
        ctx,
        keywords=_split(keywords),
        industry=industry,
        style=style,
        count=count,
        min_score=min_score,
        validate=validate,
        include_domains=domains,
    )

    try:
        with console.status("[bold green]Generating names..."):
            service = ctx.obj.get('service')
            if service is None:
                from .ai import LangChainGenerationService
                service = LangChainGenerationService.from_config(ctx.obj['config'])
            names = asyncio.run(generate_startup_names(concept, options, service=service))
    except Exception as e:
        logging.getLogger(__name__).debug("Startup pipeline failed", exc_info=True)
        _fail(str(e) or e.__class__.__name__)

    console.print(_names_table(names, f"Names for: {concept}", show_domains=domains))

    if output:
        _write_json(output, [n.to_dict() for n in names])


@cli.command()
@click.option('--model', '-m', type=click.Choice(['all', *TIER_NAMES]), default='all', help='Pricing model')
def tiers(model):
    """List pricing tier names for a pricing model."""
    console.print(f"[bold]Tier names ({model}):[/bold]")
    console.print(", ".join(get_tier_names(model)))


def main():
    cli()


if __name__ == '__main__':
    main()

"""CLI entry point for sitetags."""

from __future__ import annotations

import logging
import sys

import click
from jinja2 import FileSystemLoader, TemplateError

from sitetags.config import SitetagsConfig
from sitetags.errors import SitetagsError
from sitetags.filters import gravatar_hash
from sitetags.registry import create_environment
from sitetags.renderers.goat import GoatRenderer


def _write_output(text: str, output: str | None) -> None:
    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(text, nl=False)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--goat-command", "goat_command", type=str, default=None, help="Override the goat command line")
@click.pass_context
def main(ctx: click.Context, verbose: bool, goat_command: str | None) -> None:
    """Render Jinja2 templates with goat diagrams, alerts and gravatar hashes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = SitetagsConfig.from_env()
    if goat_command:
        config.goat_command = goat_command
    ctx.obj = config


@main.command()
@click.argument("template", type=click.Path(exists=True, dir_okay=False))
@click.option("--search-path", "-s", "search_path", multiple=True, help="Extra template directory for includes")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.pass_obj
def render(config: SitetagsConfig, template: str, search_path: tuple[str, ...], output: str | None) -> None:
    """Render a template file with all sitetags extensions loaded."""
    try:
        with open(template, encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        click.echo(f"error: cannot read '{template}': {e}", err=True)
        sys.exit(1)

    env = create_environment(config, loader=FileSystemLoader(list(search_path) or ["."]))
    try:
        rendered = env.from_string(source).render()
    except (SitetagsError, TemplateError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    _write_output(rendered, output)


@main.command()
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.pass_obj
def goat(config: SitetagsConfig, input: str | None, output: str | None) -> None:
    """Render one goat diagram from INPUT or stdin."""
    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    result = GoatRenderer(config).render(text)
    if not result.ok:
        click.echo(f"error: {result.message}", err=True)
        sys.exit(1)
    _write_output(result.unwrap(), output)


@main.command(name="hash")
@click.argument("value")
def hash_command(value: str) -> None:
    """Print the gravatar SHA-256 hash of VALUE."""
    click.echo(gravatar_hash(value))


if __name__ == "__main__":
    main()

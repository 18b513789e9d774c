"""CLI subcommands for paintdiff (themes, config)."""

from __future__ import annotations

import click


@click.group()
def themes_cmd() -> None:
    """Syntax highlighting themes."""


@themes_cmd.command("list")
def themes_list() -> None:
    """List available themes."""
    from pygments.styles import get_all_styles

    for name in sorted(get_all_styles()):
        click.echo(name)


@click.group()
def config_cmd() -> None:
    """Inspect paintdiff configuration."""


@config_cmd.command("list")
@click.pass_context
def config_list(ctx: click.Context) -> None:
    """Show the resolved configuration."""
    from paintdiff.core.config import build_config, load_env_config, load_toml_config

    click.echo("Environment:")
    env = load_env_config()
    if env:
        for k, v in sorted(env.items()):
            click.echo(f"  {k}: {v}")
    else:
        click.echo("  (no environment variables set)")

    click.echo("\nTOML config:")
    toml = load_toml_config()
    if toml:
        for k, v in sorted(toml.items()):
            click.echo(f"  {k}: {v}")
    else:
        click.echo("  (no config.toml found)")

    overrides = (ctx.obj or {}).get("overrides", {})
    try:
        config = build_config(overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    click.echo("\nResolved:")
    click.echo(f"  theme: {config.theme}")
    click.echo(f"  minus_color: {config.minus_style_modifier.background.to_hex()}")
    click.echo(f"  minus_emph_color: {config.minus_emph_style_modifier.background.to_hex()}")
    click.echo(f"  plus_color: {config.plus_style_modifier.background.to_hex()}")
    click.echo(f"  plus_emph_color: {config.plus_emph_style_modifier.background.to_hex()}")
    click.echo(f"  highlight_removed: {config.highlight_removed}")
    click.echo(f"  font_styles: {config.font_styles}")
    click.echo(f"  tab_width: {config.tab_width}")

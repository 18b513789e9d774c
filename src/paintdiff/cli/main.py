"""CLI entry point for paintdiff."""

from __future__ import annotations

import logging
import sys
from functools import partial

import click

from paintdiff.cli.commands import config_cmd, themes_cmd
from paintdiff.core.compositor import StyleSectionMismatchError

# sysexits.h EX_SOFTWARE: internal software error
EXIT_INTERNAL_ERROR = 70


class PaintdiffGroup(click.Group):
    """Group that treats a positional argument as the diff file.

    When the first positional arg is NOT a subcommand, positional words are
    collected as input paths and only the options are left for Click.
    """

    # Options that take a value argument
    _VALUE_OPTS = {
        "--theme", "--minus-color", "--minus-emph-color",
        "--plus-color", "--plus-emph-color", "--tab-width",
    }

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        click_args: list[str] = []
        paths: list[str] = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in self._VALUE_OPTS and i + 1 < len(args):
                click_args.extend([arg, args[i + 1]])
                i += 2
                continue
            if arg.startswith("-") and arg != "-":
                click_args.append(arg)
            elif not paths and arg in self.commands:
                # Subcommand: dispatch normally
                return super().parse_args(ctx, args)
            else:
                paths.append(arg)
            i += 1

        ctx.ensure_object(dict)
        ctx.obj["diff_paths"] = paths
        return super().parse_args(ctx, click_args)


@click.group(cls=PaintdiffGroup, invoke_without_command=True)
@click.option("--theme", default=None, help="Syntax highlighting theme (pygments style)")
@click.option("--light/--dark", default=None, help="Background palette (default: dark)")
@click.option(
    "--highlight-removed/--no-highlight-removed",
    default=None,
    help="Syntax-highlight removed lines",
)
@click.option("--minus-color", default=None, help="Background of removed lines (#rrggbb)")
@click.option("--minus-emph-color", default=None, help="Background of changed text in removed lines")
@click.option("--plus-color", default=None, help="Background of added lines (#rrggbb)")
@click.option("--plus-emph-color", default=None, help="Background of changed text in added lines")
@click.option("--tab-width", type=int, default=None, help="Expand tabs to this width (0: keep tabs)")
@click.option("--font-styles/--no-font-styles", default=None, help="Emit bold/italic/underline codes")
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging on stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    theme: str | None,
    light: bool | None,
    highlight_removed: bool | None,
    minus_color: str | None,
    minus_emph_color: str | None,
    plus_color: str | None,
    plus_emph_color: str | None,
    tab_width: int | None,
    font_styles: bool | None,
    verbose: bool,
) -> None:
    """paintdiff -- highlight the changed part of each line in a diff.

    \b
    Usage:
      git diff | paintdiff
      paintdiff changes.patch
      paintdiff --light --theme friendly < changes.patch
      paintdiff themes list
      paintdiff config list
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    overrides = {
        "theme": theme,
        "light": light,
        "highlight_removed": highlight_removed,
        "minus_color": minus_color,
        "minus_emph_color": minus_emph_color,
        "plus_color": plus_color,
        "plus_emph_color": plus_emph_color,
        "tab_width": tab_width,
        "font_styles": font_styles,
    }
    ctx.ensure_object(dict)
    ctx.obj["overrides"] = overrides
    if ctx.invoked_subcommand is not None:
        return

    from paintdiff.core.config import build_config
    from paintdiff.core.diffstream import paint_diff
    from paintdiff.core.painter import Painter
    from paintdiff.ui.highlight import PygmentsHighlighter

    try:
        config = build_config(overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    paths = ctx.obj.get("diff_paths", [])
    if len(paths) > 1:
        raise click.UsageError("Expected at most one diff file")
    path = paths[0] if paths else "-"

    stdout = sys.stdout
    painter = Painter(stdout, config)
    factory = partial(PygmentsHighlighter.for_filename, theme=config.theme)

    try:
        source = click.open_file(path, "r")
    except OSError as exc:
        raise click.FileError(path, hint=exc.strerror or str(exc)) from exc

    try:
        with source:
            paint_diff(source, painter, factory)
        stdout.flush()
    except StyleSectionMismatchError as exc:
        click.echo(f"Error: {exc}", err=True)
        for note in getattr(exc, "__notes__", []):
            click.echo(f"  {note}", err=True)
        sys.exit(EXIT_INTERNAL_ERROR)
    except OSError as exc:
        click.echo(f"Error: failed to write output: {exc}", err=True)
        sys.exit(1)


cli.add_command(themes_cmd, "themes")
cli.add_command(config_cmd, "config")


def main() -> None:
    cli()

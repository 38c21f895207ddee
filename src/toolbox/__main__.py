"""Command-line interface for toolbox."""

from __future__ import annotations

from pathlib import Path

import click
import questionary
from rich.console import Console

from toolbox import __version__
from toolbox.cli.formatting import (
    build_file_tree,
    format_error,
    format_success,
    format_warning,
)
from toolbox.cli.help_formatter import RichCommand, RichGroup
from toolbox.config import (
    APP_NAME,
    ConfigError,
    ToolboxConfig,
    load_config,
    write_default_config,
)
from toolbox.context import AppContext, build_context
from toolbox.generator.errors import GeneratorError, NameCollisionError
from toolbox.generator.scaffolder import Scaffolder
from toolbox.generator.types import ToolSpec, ToolType
from toolbox.generator.validation import DescriptionValidator, ToolNameValidator
from toolbox.logger import writes_to_terminal

console = Console()

TOOL_TYPE_NAMES = [t.dir_name for t in ToolType]


class CLIState:
    """Global options, resolved into an ``AppContext`` on first use."""

    def __init__(self, config_path: Path | None, log_override: str | None) -> None:
        self.config_path = config_path
        self.log_override = log_override

    def load(self) -> ToolboxConfig:
        try:
            return load_config(self.config_path, app_name=APP_NAME)
        except ConfigError as e:
            console.print(
                format_error(
                    "Could not load configuration",
                    context=f"{e}\n\nCreate a starter file with: toolbox config init",
                )
            )
            raise click.ClickException(str(e))

    def context(self) -> AppContext:
        return build_context(
            self.load(),
            log_override=self.log_override,
            console=console,
        )


@click.group(
    cls=RichGroup,
    examples=[
        ("Start the interactive session", "toolbox tui"),
        ("Generate a CLI tool", 'toolbox generate cli pinger -d "Pings a host"'),
        ("Write a starter config", "toolbox config init"),
    ],
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file to load instead of searching the default locations",
)
@click.option("--verbose", "-v", is_flag=True, help="Log at info level")
@click.option("--debug", is_flag=True, help="Log at debug level")
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(
    ctx: click.Context, config_path: Path | None, verbose: bool, debug: bool
) -> None:
    """Interactive terminal toolbox and tool skeleton generator.

    Browse the toolbox menu, or generate new CLI, TUI and Web tool
    skeletons either through the interactive wizard or directly from the
    command line.

    Config is read from configs/config.yaml, ~/.config/toolbox/config.yaml,
    /etc/toolbox/config.yaml or ./config.yaml (first found wins), and can be
    overridden with TOOLBOX_* environment variables.

    For more information on a specific command:
      $ toolbox COMMAND --help
    """
    log_override = "debug" if debug else "info" if verbose else None
    ctx.obj = CLIState(config_path, log_override)


@cli.command(cls=RichCommand)
@click.pass_obj
def tui(state: CLIState) -> None:
    """Start the interactive toolbox session.

    Use the arrow keys or j/k to move, Enter to select, b or Esc to go back
    and q to quit. Choose "Tool Generator" to create a new tool skeleton.
    """
    from textual.logging import TextualHandler

    from toolbox.tui.app import launch_tui

    config = state.load()
    # Console logging would draw over the full-screen frame
    handler = TextualHandler() if writes_to_terminal(config.log_file) else None
    app_context = build_context(
        config, log_override=state.log_override, handler=handler, console=console
    )
    launch_tui(app_context)


@cli.command(
    cls=RichCommand,
    examples=[
        ("CLI tool", 'toolbox generate cli pinger -d "Pings a host"'),
        ("Web tool in another directory", "toolbox generate web dashboard -o tools"),
        ("Prompt for everything", "toolbox generate"),
    ],
)
@click.argument(
    "tool_type",
    required=False,
    type=click.Choice(TOOL_TYPE_NAMES, case_sensitive=False),
)
@click.argument("name", required=False)
@click.option("--description", "-d", help="One-line description of the tool")
@click.option(
    "--output-root",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Root directory for generated tools (default: generator.output_root)",
)
@click.pass_obj
def generate(
    state: CLIState,
    tool_type: str | None,
    name: str | None,
    description: str | None,
    output_root: Path | None,
) -> None:
    """Generate a new tool skeleton without the interactive session.

    Files are written to OUTPUT_ROOT/TYPE/NAME/. Existing files are never
    overwritten. Missing arguments are prompted for.
    """
    app_context = state.context()

    if tool_type is None:
        tool_type = questionary.select(
            "Tool type:",
            choices=[questionary.Choice(t.label, value=t.dir_name) for t in ToolType],
        ).ask()
    if tool_type is not None and name is None:
        name = questionary.text(
            "Tool name (lowercase, no spaces):", validate=ToolNameValidator()
        ).ask()
    if tool_type is not None and name is not None and description is None:
        description = questionary.text(
            "Tool description:", validate=DescriptionValidator()
        ).ask()

    if tool_type is None or name is None or description is None:
        console.print(format_warning("Generation cancelled"))
        return

    scaffolder = (
        Scaffolder(output_root, logger=app_context.logger.getChild("generator"))
        if output_root is not None
        else app_context.scaffolder()
    )

    try:
        spec = ToolSpec.create(ToolType.parse(tool_type), name, description)
        result = scaffolder.scaffold(spec)
    except NameCollisionError as e:
        console.print(
            format_error(
                f"Error generating tool: {e}",
                context="Choose another name or remove the existing files",
            )
        )
        raise click.ClickException(str(e))
    except GeneratorError as e:
        console.print(format_error(f"Error generating tool: {e}"))
        raise click.ClickException(str(e))

    console.print(
        format_success(
            f"Successfully generated {spec.tool_type.value} tool: {spec.name}",
            details=spec.description,
        )
    )
    console.print(build_file_tree(list(result.paths), result.destination))


@cli.group(cls=RichGroup)
def config() -> None:
    """Create and inspect toolbox configuration."""
    pass


@config.command(name="init", cls=RichCommand)
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("configs") / "config.yaml",
    show_default=True,
    help="Where to write the config file",
)
def config_init(path: Path) -> None:
    """Write a starter config file with default values."""
    try:
        written = write_default_config(path)
    except FileExistsError as e:
        console.print(
            format_error(
                f"Config file already exists: {path}",
                context="Edit it directly or pass --path to write elsewhere",
            )
        )
        raise click.ClickException(str(e))
    except OSError as e:
        console.print(format_error(f"Could not write {path}: {e.strerror or e}"))
        raise click.ClickException(str(e))

    console.print(format_success(f"Wrote config to {written}"))


@config.command(name="show", cls=RichCommand)
@click.pass_obj
def config_show(state: CLIState) -> None:
    """Print the effective configuration as YAML."""
    config = state.load()
    click.echo(config.to_yaml(), nl=False)


@cli.command(cls=RichCommand)
def version() -> None:
    """Show the toolbox version."""

    console.print(f"{APP_NAME} {__version__}")


if __name__ == "__main__":
    cli()

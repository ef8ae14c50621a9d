"""CLI main entry point."""

import json
import logging

import click

from .config import Config
from .errors import JumplinksException
from .fields import FieldDescriptor, FieldGroup
from .host import RenderContext
from .i18n import initialize
from .log import setup as setup_log
from .settings import get_defaults
from .tree import create_composer

logger = logging.getLogger(__name__)


def _load_config(config_path: str) -> Config:
    try:
        cfg = Config.load_from_file(config_path)
    except JumplinksException as e:
        raise click.ClickException(str(e))

    initialize(ui_language=cfg.language)
    return cfg


def format_outline(field: FieldDescriptor, depth: int = 0) -> list[str]:
    """Render a field tree as indented ``kind name [collapsed]`` lines."""
    title = field.label or ", ".join(field.aliases) or "-"
    names = f" ({', '.join(field.aliases)})" if field.label and field.aliases else ""
    lines = [f"{'  ' * depth}{field.kind}: {title}{names} [{field.collapsed.value}]"]

    if isinstance(field, FieldGroup):
        for child in field.children:
            lines.extend(format_outline(child, depth + 1))
    return lines


@click.group()
@click.option("--config", "-c", default="config.toml", help="Configuration file path")
@click.option("--log-file", default=None, help="Log file path")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output")
@click.pass_context
def cli(ctx, config: str, log_file: str | None, verbose: bool):
    """Jumplinks settings - defaults and settings page layout."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    setup_log(log_file, verbose=verbose)


@cli.command(name="defaults")
@click.option("--schema-version", type=int, default=None, help="Released schema version")
def defaults(schema_version: int | None):
    """Print the default settings as JSON."""
    try:
        values = get_defaults() if schema_version is None else get_defaults(schema_version)
    except JumplinksException as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(values, indent=2))


@cli.command(name="show")
@click.pass_context
def show(ctx):
    """Print the persisted settings merged over the defaults."""
    cfg = _load_config(ctx.obj["config_path"])
    click.echo(json.dumps(cfg.settings().to_persisted(), indent=2))


@cli.command(name="fields")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["outline", "json"], case_sensitive=False),
    default="outline",
    show_default=True,
)
@click.pass_context
def fields(ctx, output_format: str):
    """Print the settings page field tree."""
    cfg = _load_config(ctx.obj["config_path"])

    context = RenderContext()
    root = create_composer(cfg.host).get_input_fields(context)

    if output_format.lower() == "json":
        payload = {"fields": root.model_dump(mode="json"), **context.model_dump()}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for line in format_outline(root):
        click.echo(line)


@cli.command(name="serve")
@click.option("--host", "-h", default=None, help="Override host from config")
@click.option("--port", "-p", default=None, type=int, help="Override port from config")
@click.pass_context
def serve(ctx, host, port):
    """Start the settings API server."""
    import uvicorn

    from .api import create_app

    config_path = ctx.obj["config_path"]
    logger.info(f"Loading configuration file: {config_path}")
    cfg = _load_config(config_path)

    host = host or cfg.web.host
    port = port or cfg.web.port

    try:
        app = create_app(cfg, config_path=config_path)
    except JumplinksException as e:
        logger.error(f"Application error: {e}", exc_info=True)
        raise click.ClickException(str(e))

    logger.info(f"Starting settings API on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, reload=False)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()

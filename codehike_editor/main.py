"""
Code Hike Editor — CLI entrypoint.

Usage:
    codehike-editor --help
    codehike-editor start --port 4321
    codehike-editor inject Focus Mark copy-button
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from codehike_editor import __version__
from codehike_editor.core.observability.logging_config import configure_from_cli
from codehike_editor.ui.cli.templates import templates


def _load_config(ctx: click.Context):  # type: ignore[no-untyped-def]
    """EditorConfig for the current invocation; exits on a bad config."""
    from codehike_editor.core.config.loader import ConfigError, load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="codehike-editor")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to codehike-editor.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Code Hike Editor — visual editing for Code Hike MDX content."""
    from codehike_editor.core.config.loader import find_config_file, project_root
    from codehike_editor.core.context import set_project_root

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    cfg = Path(config_path) if config_path else find_config_file()
    ctx.obj["config_path"] = cfg
    ctx.obj["project_root"] = project_root(cfg) if cfg else Path.cwd()
    set_project_root(ctx.obj["project_root"])

    configure_from_cli(debug=debug, verbose=verbose, quiet=quiet)


cli.add_command(templates)


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default: from config).")
@click.option("--port", "-p", type=int, default=None, help="Port to run the server on.")
@click.option(
    "--editor-dist",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with the pre-built editor UI.",
)
@click.pass_context
def start(ctx: click.Context, host: str | None, port: int | None, editor_dist: str | None) -> None:
    """Start the editor server."""
    from codehike_editor.ui.web.server import create_app, run_server

    config = _load_config(ctx)
    host = host or config.host
    port = port or config.port

    app = create_app(
        project_root=ctx.obj["project_root"],
        config=config,
        editor_dist=Path(editor_dist) if editor_dist else None,
    )

    click.echo("\n  codehike-editor running at:\n")
    click.secho(f"  ➜  Local:   http://{host}:{port}/\n", fg="cyan")
    click.echo("  Press Ctrl+C to stop\n")

    try:
        run_server(app, host=host, port=port, debug=ctx.obj.get("verbose", False))
    except OSError as e:
        click.secho(f"❌ Could not start server on port {port}: {e}", fg="red")
        click.echo(f"   Try a different port: codehike-editor start -p {port + 1}")
        sys.exit(1)


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Add the editor to this project's package.json."""
    from codehike_editor.core.services.project_init import InitError, init_project

    try:
        result = init_project(Path.cwd())
    except InitError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho("✓ Code Hike detected", fg="green")
    if result["dependency_added"]:
        click.echo("✓ codehike-editor added to devDependencies")
    else:
        click.echo("✓ codehike-editor already in devDependencies")
    if result["script_added"]:
        click.echo('✓ Added "editor" script (codehike-editor start)')
    else:
        click.echo("✓ Editor script already exists")

    click.secho("\nSetup complete! Install dependencies, then run the editor script.", bold=True)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def detect(file: str, as_json: bool) -> None:
    """List the Code Hike components used in an MDX file."""
    from codehike_editor.core.services.component_detector import detect_components, is_layout

    components = detect_components(Path(file).read_text(encoding="utf-8"))

    if as_json:
        click.echo(json.dumps({"components": components}, indent=2))
        return

    if not components:
        click.echo("No Code Hike components found.")
        return

    for name in components:
        label = " (layout)" if is_layout(name) else ""
        click.echo(f"   • {name}{label}")


@cli.command()
@click.argument("components", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def inject(ctx: click.Context, components: tuple[str, ...], as_json: bool) -> None:
    """Copy component templates into the project and wire them up."""
    from codehike_editor.core.services.injection.workflow import inject_components

    config = _load_config(ctx)
    report = inject_components(ctx.obj["project_root"], list(components), config)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        sys.exit(1 if report.failed or report.errors else 0)

    for name in report.injected:
        click.secho(f"   ✓ {name}", fg="green")
    for name in report.skipped:
        click.secho(f"   ⊘ {name} ", fg="yellow", nl=False)
        click.echo("(already added)")
    for name in report.failed:
        click.secho(f"   ✗ {name} ", fg="red", nl=False)
        click.echo("(template not found)")

    click.echo()
    click.echo(f"   {config.code_file}: {report.code_component}")
    if report.code_wrappers != "unchanged":
        click.echo(f"   {config.code_file} wrappers: {report.code_wrappers}")
    click.echo(f"   {config.mdx_components_file}: {report.mdx_registration}")
    if report.hover_styles:
        click.echo("   hover styles: added")

    for err in report.errors:
        click.secho(f"❌ {err}", fg="red")

    if report.failed or report.errors:
        sys.exit(1)


if __name__ == "__main__":
    cli()

"""
CLI commands for the template catalog.

Thin wrappers over ``codehike_editor.core.services.template_catalog``.
"""

from __future__ import annotations

import json
import sys

import click


def _catalog(ctx: click.Context):  # type: ignore[no-untyped-def]
    from codehike_editor.core.config.loader import ConfigError, load_config
    from codehike_editor.core.services.template_catalog import TemplateCatalog

    try:
        config = load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    return TemplateCatalog(ctx.obj["project_root"] / config.templates_dir)


@click.group()
def templates() -> None:
    """Browse the component templates the editor can inject."""


@templates.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_templates(ctx: click.Context, as_json: bool) -> None:
    """List code and layout templates."""
    catalog = _catalog(ctx)
    listing = catalog.list_templates()

    if as_json:
        click.echo(json.dumps(listing, indent=2))
        return

    if not listing["code"] and not listing["layouts"]:
        click.secho(f"⚠️  No templates in {catalog.root}", fg="yellow")
        return

    click.secho("\n📦 Code templates", fg="cyan", bold=True)
    for name in listing["code"]:
        click.echo(f"   • {name}")
    if listing["layouts"]:
        click.secho("\n🧩 Layouts", fg="cyan", bold=True)
        for name in listing["layouts"]:
            click.echo(f"   • {name}")
    click.echo()


@templates.command("show")
@click.argument("name")
@click.option("--snippet", is_flag=True, help="Only print the MDX usage snippet.")
@click.pass_context
def show(ctx: click.Context, name: str, snippet: bool) -> None:
    """Print a template's source (or its MDX snippet)."""
    from codehike_editor.core.services.template_catalog import extract_snippet

    catalog = _catalog(ctx)
    content = catalog.read(catalog.resolve_key(name))
    if content is None:
        click.secho(f"❌ Template not found: {name}", fg="red")
        sys.exit(1)

    click.echo(extract_snippet(content) if snippet else content)

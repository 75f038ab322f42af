"""scrum-skill-install CLI entry point."""

from __future__ import annotations

import logging

import click

from ..core.config import load_install_config, log_level
from ..installer.resolver import resolve_destination
from .skills import SKILL_NAMES, get_bundled_skills, install_skills, package_dir


def _ok(name: str) -> None:
    click.echo("  " + click.style("[OK] ", fg="green") + name)


def _skip(name: str) -> None:
    click.echo("  " + click.style("[SKIP] ", fg="yellow") + f"{name} — source not found, skipping")


def _report(name: str, copied: bool) -> None:
    if copied:
        _ok(name)
    else:
        _skip(name)


@click.command()
@click.version_option(package_name="claude-scrum-skill")
def cli() -> None:
    """Install the Scrum skills into .claude/skills.

    Installs into the current project by default. Set SCRUM_SKILL_GLOBAL=1
    to install into ~/.claude/skills instead.
    """
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    config = load_install_config()
    destination = resolve_destination(config, package_dir())

    click.echo()
    click.echo(click.style("Installing claude-scrum-skill...", bold=True))
    present = get_bundled_skills()
    click.echo(f"Found {len(present)} of {len(SKILL_NAMES)} bundled skills")
    click.echo()

    report = install_skills(destination, on_result=_report)

    click.echo()
    click.echo(f"Installed {report.count} skills to {report.destination}")
    click.echo("   Skills are available in Claude Code immediately.")
    click.echo("   Run /project-scaffold <prd-path> to get started.")
    click.echo()

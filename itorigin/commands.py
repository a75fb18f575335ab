"""
Flask CLI commands

    flask --app itorigin.app chat archive-inactive --days 30 [--dry-run]

Meant to be run by cron or any external scheduler.
"""

# Python Packages
import click
from flask.cli import AppGroup

# Services
from .admin.services.archive_inactive_service import ArchiveInactiveService

# Config
from .chat.config import chat_config


chat_cli = AppGroup("chat", help = "Chat conversation maintenance.")





@chat_cli.command("archive-inactive")
@click.option(
    "--days",
    type = click.IntRange(min = 1),
    default = chat_config.CHAT_INACTIVITY_ARCHIVE_DAYS,
    show_default = True,
    help = "Archive active conversations idle for at least this many days."
)
@click.option("--dry-run", is_flag = True, help = "List matches without archiving.")
def archive_inactive(days, dry_run):
    """ Archive active conversations with no recent messages... """

    result = ArchiveInactiveService().archive_inactive(days = days, dry_run = dry_run)

    if dry_run:
        click.echo(f"{len(result['conversation_ids'])} conversation(s) would be archived.")
        for conversation_id in result["conversation_ids"]:
            click.echo(f"  {conversation_id}")
        return

    click.echo(f"Archived {result['archived']} conversation(s) idle since {result['cutoff'].isoformat()}.")

import click

from qbtrust.data.roster import STARTING_QBS
from qbtrust.services.maintenance import (
    find_duplicate_quarterbacks,
    remove_duplicate_quarterbacks,
    sync_roster,
)
from qbtrust.services.snapshots import snapshot_all_quarterbacks


def register_commands(app):
    @app.cli.command("snapshot")
    def snapshot_command():
        """Snapshot every quarterback's current trust score for today."""
        snapshots = snapshot_all_quarterbacks()
        click.echo(f"Created {len(snapshots)} snapshots")

    @app.cli.command("sync-qbs")
    def sync_qbs_command():
        """Sync quarterbacks with the bundled starting roster."""
        results = sync_roster(STARTING_QBS)
        for key, names in results.items():
            click.echo(f"{key}: {len(names)}")
            for name in names:
                click.echo(f"  {name}")

    @app.cli.command("cleanup-duplicates")
    @click.option("--fix", is_flag=True, help="Delete duplicates instead of listing them.")
    def cleanup_duplicates_command(fix):
        """Remove quarterbacks sharing a name, keeping the lowest id."""
        if not fix:
            duplicates = find_duplicate_quarterbacks()
            for quarterback in duplicates:
                click.echo(f"{quarterback.id}\t{quarterback.name}\t{quarterback.team}")
            click.echo(f"{len(duplicates)} duplicates found")
            return

        result = remove_duplicate_quarterbacks()
        click.echo(f"Deleted {result['deleted']} duplicates, {result['remaining']} remain")

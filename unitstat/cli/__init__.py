import click

from unitstat.cli.commands.codes import codes, sample_config
from unitstat.cli.commands.gather import gather


@click.group()
def cli() -> None:
    """unitstat - Collect systemd unit states as metrics.
    """
    pass


cli.add_command(gather)
cli.add_command(codes)
cli.add_command(sample_config)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]

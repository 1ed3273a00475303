import logging
import time
from pathlib import Path

import click
from pydantic import ValidationError

from unitstat.metrics import LineProtocolAccumulator
from unitstat.models import CollectorConfig
from unitstat.services import SystemdUnitsCollector
from unitstat.systemd import SystemctlError, UnitType

logger = logging.getLogger(__name__)


def load_config(
    config_path: Path | None,
    timeout: str | None,
    unit_type: str | None,
) -> CollectorConfig:
    """Merge the optional config file with command line overrides.
    """
    try:
        config = (
            CollectorConfig.from_toml(config_path)
            if config_path is not None
            else CollectorConfig()
        )
        overrides = {}
        if timeout is not None:
            overrides['timeout'] = timeout
        if unit_type is not None:
            overrides['unit_type'] = unit_type
        if overrides:
            config = CollectorConfig.model_validate(
                config.model_dump() | overrides
            )
    except ValidationError as e:
        raise click.BadParameter(str(e))
    except (OSError, ValueError) as e:
        raise click.ClickException(f'Failed to load config: {e}')

    return config


def report_error(error: Exception) -> None:
    click.echo(f'Error: {error}', err=True)


@click.command('gather')
@click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='TOML file with timeout and unittype settings.',
)
@click.option(
    '--timeout',
    help='Timeout for each systemctl call, e.g. 1s or 500ms.',
)
@click.option(
    '--unit-type',
    type=click.Choice([t.value for t in UnitType]),
    help='Unit type to collect.',
)
@click.option(
    '--interval',
    type=click.FloatRange(min=0, min_open=True),
    help='Seconds between passes. Runs a single pass when omitted.',
)
@click.option(
    '--count',
    type=click.IntRange(min=1),
    help='Stop after this many passes in interval mode.',
)
def gather(
    config_path: Path | None,
    timeout: str | None,
    unit_type: str | None,
    interval: float | None,
    count: int | None,
) -> None:
    """Collect systemd unit states and print them as line protocol.
    """
    config = load_config(config_path, timeout, unit_type)
    collector = SystemdUnitsCollector(config)
    accumulator = LineProtocolAccumulator(click.echo, on_error=report_error)

    if interval is None:
        try:
            collector.gather(accumulator)
        except SystemctlError as e:
            raise click.ClickException(str(e))
        return

    passes = 0
    while count is None or passes < count:
        if passes:
            time.sleep(interval)
        passes += 1
        try:
            collector.gather(accumulator)
        except SystemctlError as e:
            logger.error('Collection pass %d failed: %s', passes, e)
            report_error(e)

import logging
from collections.abc import Callable, Mapping
from datetime import datetime

from unitstat.systemd.interfaces import Accumulator
from unitstat.systemd.models import Metric

_TAG_ESCAPES = str.maketrans({
    '\\': r'\\',
    ',': r'\,',
    '=': r'\=',
    ' ': r'\ ',
})
_MEASUREMENT_ESCAPES = str.maketrans({
    ',': r'\,',
    ' ': r'\ ',
})


class MemoryAccumulator(Accumulator):
    """Accumulator that keeps everything it receives in memory.
    """

    def __init__(self) -> None:
        self.metrics: list[Metric] = []
        self.errors: list[Exception] = []

    def add_fields(
        self,
        measurement: str,
        fields: Mapping[str, int | float],
        tags: Mapping[str, str],
        timestamp: datetime,
    ) -> None:
        self.metrics.append(
            Metric(
                measurement=measurement,
                fields=dict(fields),
                tags=dict(tags),
                timestamp=timestamp,
            )
        )

    def add_error(self, error: Exception) -> None:
        self.errors.append(error)

    def clear(self) -> None:
        self.metrics.clear()
        self.errors.clear()


def format_line_protocol(metric: Metric) -> str:
    """Render a metric as an InfluxDB line protocol line.

    Tags are sorted by key, integers get the `i` suffix and the timestamp
    is written in nanoseconds.
    """
    key = metric.measurement.translate(_MEASUREMENT_ESCAPES)
    for tag, value in sorted(metric.tags.items()):
        if value == '':
            continue
        key += (
            f',{tag.translate(_TAG_ESCAPES)}={value.translate(_TAG_ESCAPES)}'
        )

    fields = []
    for field, value in sorted(metric.fields.items()):
        rendered = f'{value}i' if isinstance(value, int) else repr(value)
        fields.append(f'{field.translate(_TAG_ESCAPES)}={rendered}')

    timestamp_ns = int(metric.timestamp.timestamp() * 1_000_000) * 1_000
    return f'{key} {",".join(fields)} {timestamp_ns}'


class LineProtocolAccumulator(Accumulator):
    """Accumulator writing metrics as line protocol and logging errors.
    """

    def __init__(
        self,
        writer: Callable[[str], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        """Initialize with output callables.

        Args:
            writer: Receives one rendered line per metric
            on_error: Receives non-fatal errors, after they are logged
        """
        self._logger = logging.getLogger(__name__)
        self._writer = writer
        self._on_error = on_error
        self.metric_count = 0
        self.error_count = 0

    def add_fields(
        self,
        measurement: str,
        fields: Mapping[str, int | float],
        tags: Mapping[str, str],
        timestamp: datetime,
    ) -> None:
        metric = Metric(
            measurement=measurement,
            fields=dict(fields),
            tags=dict(tags),
            timestamp=timestamp,
        )
        self._writer(format_line_protocol(metric))
        self.metric_count += 1

    def add_error(self, error: Exception) -> None:
        self.error_count += 1
        self._logger.warning('%s', error)
        if self._on_error is not None:
            self._on_error(error)

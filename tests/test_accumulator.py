from datetime import datetime, timezone

import pytest

from unitstat.metrics import (
    LineProtocolAccumulator,
    MemoryAccumulator,
    format_line_protocol,
)
from unitstat.systemd import MalformedLineError, Metric

TIMESTAMP = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
TIMESTAMP_NS = 1704164645000000000

FIELDS = {
    'load_code': 0,
    'active_code': 0,
    'sub_code': 0,
    'state_code': 1,
}
TAGS = {
    'name': 'foo.service',
    'state': 'enabled',
    'load': 'loaded',
    'sub': 'running',
}


def test_memory_accumulator():
    accumulator = MemoryAccumulator()
    error = MalformedLineError('foo', 4)

    accumulator.add_fields('systemd_units', FIELDS, TAGS, TIMESTAMP)
    accumulator.add_error(error)

    assert accumulator.metrics == [
        Metric(
            measurement='systemd_units',
            fields=FIELDS,
            tags=TAGS,
            timestamp=TIMESTAMP,
        )
    ]
    assert accumulator.errors == [error]

    accumulator.clear()
    assert accumulator.metrics == []
    assert accumulator.errors == []


def test_format_line_protocol():
    metric = Metric(fields=FIELDS, tags=TAGS, timestamp=TIMESTAMP)

    assert format_line_protocol(metric) == (
        'systemd_units,load=loaded,name=foo.service,state=enabled,sub=running '
        'active_code=0i,load_code=0i,state_code=1i,sub_code=0i '
        f'{TIMESTAMP_NS}'
    )


def test_format_line_protocol_escapes_tags():
    metric = Metric(
        fields={'load_code': 0},
        tags={'name': 'a b,c=d.service', 'empty': ''},
        timestamp=TIMESTAMP,
    )

    assert format_line_protocol(metric) == (
        r'systemd_units,name=a\ b\,c\=d.service load_code=0i '
        f'{TIMESTAMP_NS}'
    )


def test_format_line_protocol_escapes_backslash():
    metric = Metric(
        fields={'load_code': 0},
        tags={'name': 'foo\\', 'sub': 'running'},
        timestamp=TIMESTAMP,
    )

    assert format_line_protocol(metric) == (
        r'systemd_units,name=foo\\,sub=running load_code=0i '
        f'{TIMESTAMP_NS}'
    )


def test_format_line_protocol_float_field():
    metric = Metric(fields={'ratio': 0.5}, timestamp=TIMESTAMP)
    assert format_line_protocol(metric) == (
        f'systemd_units ratio=0.5 {TIMESTAMP_NS}'
    )


def test_line_protocol_accumulator(caplog):
    lines = []
    errors = []
    accumulator = LineProtocolAccumulator(lines.append, errors.append)
    error = MalformedLineError('foo', 2)

    accumulator.add_fields('systemd_units', FIELDS, TAGS, TIMESTAMP)
    with caplog.at_level('WARNING', logger='unitstat'):
        accumulator.add_error(error)

    assert len(lines) == 1
    assert lines[0].startswith('systemd_units,')
    assert errors == [error]
    assert accumulator.metric_count == 1
    assert accumulator.error_count == 1
    assert 'expected at least 2 fields' in caplog.text


def test_line_protocol_accumulator_without_error_callback():
    accumulator = LineProtocolAccumulator(lambda line: None)
    accumulator.add_error(MalformedLineError('foo', 2))
    assert accumulator.error_count == 1


def test_metric_rejects_non_numeric_fields():
    with pytest.raises(ValueError):
        Metric(fields={'load_code': 'zero'}, timestamp=TIMESTAMP)

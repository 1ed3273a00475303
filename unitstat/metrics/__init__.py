from unitstat.metrics.accumulator import (
    LineProtocolAccumulator,
    MemoryAccumulator,
    format_line_protocol,
)

__all__ = [
    'LineProtocolAccumulator',
    'MemoryAccumulator',
    'format_line_protocol',
]

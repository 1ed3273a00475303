from unitstat.models.collector_config import (
    DEFAULT_TIMEOUT,
    SAMPLE_CONFIG,
    CollectorConfig,
    parse_duration,
)

__all__ = [
    'DEFAULT_TIMEOUT',
    'SAMPLE_CONFIG',
    'CollectorConfig',
    'parse_duration',
]

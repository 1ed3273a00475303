from unitstat.system.runner import SystemctlRunner

__all__ = [
    'SystemctlRunner',
]

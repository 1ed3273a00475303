from unitstat.services.collector import SystemdUnitsCollector

__all__ = [
    'SystemdUnitsCollector',
]

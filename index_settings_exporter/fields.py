# index_settings_exporter/fields.py
import math
from typing import Callable, NamedTuple

DEFAULT_TOTAL_FIELDS_LIMIT = 1000   # valor por defecto de index.mapping.total_fields.limit en ES
DEFAULT_NUMBER_OF_REPLICAS = 1      # valor por defecto de index.number_of_replicas en ES
DEFAULT_CREATION_DATE = 0


def _index_info(index_settings):
    """Devuelve settings.index de la entrada de un índice, o {} si falta algún nivel."""
    if not isinstance(index_settings, dict):
        return {}
    settings = index_settings.get('settings')
    if not isinstance(settings, dict):
        return {}
    info = settings.get('index')
    return info if isinstance(info, dict) else {}


def _dig(data, *keys):
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _parse_float(raw, default):
    # ES devuelve los settings como strings; bool es subclase de int y no es un número válido aquí
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
        return float(default)
    # float() admite '1_000' y espacios alrededor; el parseo decimal estricto no
    if isinstance(raw, str) and ("_" in raw or raw != raw.strip()):
        return float(default)
    try:
        return float(raw)
    except ValueError:
        return float(default)


def total_fields_limit(index_settings) -> float:
    raw = _dig(_index_info(index_settings), 'mapping', 'total_fields', 'limit')
    return _parse_float(raw, DEFAULT_TOTAL_FIELDS_LIMIT)


def number_of_replicas(index_settings) -> float:
    raw = _index_info(index_settings).get('number_of_replicas')
    return _parse_float(raw, DEFAULT_NUMBER_OF_REPLICAS)


def creation_timestamp_seconds(index_settings) -> float:
    raw = _index_info(index_settings).get('creation_date')
    millis = _parse_float(raw, float('nan'))
    if math.isnan(millis):  # ausente o no numérico
        return float(DEFAULT_CREATION_DATE)
    return millis / 1000.0


def is_read_only(index_settings) -> bool:
    return _dig(_index_info(index_settings), 'blocks', 'read_only') == "true"


class IndexSettingsMetric(NamedTuple):
    name: str
    help: str
    value: Callable[[dict], float]


INDEX_SETTINGS_METRICS = (
    IndexSettingsMetric("total_fields", "index mapping setting for total_fields", total_fields_limit),
    IndexSettingsMetric("replicas", "index setting number_of_replicas", number_of_replicas),
    IndexSettingsMetric("creation_timestamp_seconds", "index setting creation_date", creation_timestamp_seconds),
)

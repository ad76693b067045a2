# index_settings_exporter/config.py
import os
import logging
from dotenv import load_dotenv
import urllib3

# --- Configuración Inicial ---
load_dotenv()
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

# Configuración del logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(levelname)s - %(message)s',
    filename=LOG_FILE
)


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name, default):
    value = os.getenv(name)
    try:
        return int(value) if value not in (None, "") else default
    except ValueError:
        logging.warning(f"Valor inválido para {name}: '{value}'. Se usa {default}.")
        return default


def _env_float(name, default):
    value = os.getenv(name)
    try:
        return float(value) if value not in (None, "") else default
    except ValueError:
        logging.warning(f"Valor inválido para {name}: '{value}'. Se usa {default}.")
        return default


def parse_indices_list(raw):
    """Convierte 'idx-a, idx-b' en ['idx-a', 'idx-b'] descartando entradas vacías."""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def parse_index_groups(raw):
    """
    Convierte 'logs=logs-*,filebeat-*;metrics=metrics-*' en un dict ordenado
    grupo -> lista de patrones. El orden de declaración se conserva: es el
    orden en el que se evalúan los grupos al clasificar índices.
    """
    groups = {}
    if not raw:
        return groups
    for entry in raw.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, patterns = entry.partition("=")
        name = name.strip()
        if not sep or not name:
            logging.warning(f"Grupo de índices mal formado ignorado: '{entry}'")
            continue
        pattern_list = [p.strip() for p in patterns.split(",") if p.strip()]
        if not pattern_list:
            logging.warning(f"El grupo '{name}' no tiene patrones; se ignora.")
            continue
        groups.setdefault(name, []).extend(pattern_list)
    return groups


# --- Conexión a Elasticsearch ---
ES_HOST = os.getenv("ES_HOST")
ES_USER = os.getenv("ES_USER")
ES_PASS = os.getenv("ES_PASS")
VERIFY_SSL = _env_bool("ES_VERIFY_SSL", False)
REQUEST_TIMEOUT = _env_float("ES_TIMEOUT", 10.0)
HEADERS = {'Content-Type': 'application/json'}

# --- Selección de Índices ---
ALL_INDICES = "_all"
INDICES_INCLUDED = parse_indices_list(os.getenv("ES_INDICES"))
NUM_MOST_RECENT_INDICES = _env_int("ES_NUM_MOST_RECENT_INDICES", 0)
INDEX_GROUPS = parse_index_groups(os.getenv("ES_INDEX_GROUPS"))

# --- Parámetros del Exportador ---
NAMESPACE = "elasticsearch"
EXPORTER_HOST = os.getenv("EXPORTER_HOST", "0.0.0.0")
EXPORTER_PORT = _env_int("EXPORTER_PORT", 9114)

# index_settings_exporter/collector.py
import logging
import threading
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily
from prometheus_client.registry import Collector

from . import config
from .client import ElasticsearchClient, fetch_indices_settings
from .errors import DecodeError, FetchError
from .fields import INDEX_SETTINGS_METRICS, is_read_only
from .models import IndexSettingsSample, ScrapeReport
from .selection import build_index_matchers, gather_individual_indices_settings

INDEX_LABELS = ["index"]


def build_fqname(namespace, subsystem, name):
    return "_".join(part for part in (namespace, subsystem, name) if part)


class IndicesSettingsCollector(Collector):
    """
    Ciclo de scrape de /_settings: descarga, clasifica y recorta los índices y
    convierte sus settings en métricas Prometheus.

    Los agregados (up, total_scrapes, json_parse_failures, read_only_indices)
    viven durante todo el proceso. Los ciclos se serializan con un lock porque
    el servidor de métricas puede atender varios scrapes a la vez.
    """
    def __init__(self, client, indices_included=None, num_most_recent_indices=0,
                 index_matchers=None, namespace=config.NAMESPACE):
        self.client = client
        self.indices_included = list(indices_included or [])
        self.num_most_recent_indices = num_most_recent_indices
        self.index_matchers = dict(index_matchers or {})
        self.namespace = namespace

        self.up = 0.0
        self.total_scrapes = 0.0
        self.json_parse_failures = 0.0
        self.read_only_indices = 0.0
        self._lock = threading.Lock()

    # --- Ciclo de Scrape ---

    def scrape(self) -> ScrapeReport:
        """Ejecuta un ciclo completo y devuelve los agregados y las muestras por índice."""
        with self._lock:
            return self._scrape()

    def _scrape(self) -> ScrapeReport:
        self.total_scrapes += 1

        try:
            indices_settings = fetch_indices_settings(self.client, self.indices_included)
        except DecodeError as e:
            self.json_parse_failures += 1
            return self._scrape_failed(e)
        except FetchError as e:
            return self._scrape_failed(e)

        selected = gather_individual_indices_settings(
            indices_settings, self.indices_included, self.index_matchers, self.num_most_recent_indices)

        self.up = 1.0
        samples = []
        read_only = 0
        for index_name, index_settings in selected.items():
            if is_read_only(index_settings):
                read_only += 1
            for metric in INDEX_SETTINGS_METRICS:
                samples.append(IndexSettingsSample(metric=metric.name, index=index_name,
                                                   value=metric.value(index_settings)))
        self.read_only_indices = float(read_only)

        logging.debug(f"Scrape de settings: {len(indices_settings)} índices recibidos, {len(selected)} exportados, {read_only} en solo lectura")
        return self._report(samples)

    def _scrape_failed(self, error) -> ScrapeReport:
        self.up = 0.0
        self.read_only_indices = 0.0
        logging.warning(f"Fallo al obtener y decodificar los settings de índices, err : {error}")
        return self._report([], error=str(error))

    def _report(self, samples, error=None) -> ScrapeReport:
        return ScrapeReport(up=self.up, total_scrapes=self.total_scrapes,
                            json_parse_failures=self.json_parse_failures,
                            read_only_indices=self.read_only_indices,
                            error=error, samples=samples)

    # --- Interfaz prometheus_client ---

    def collect(self):
        report = self.scrape()
        yield from self._index_families(report.samples)
        yield from self._aggregate_families(report)

    def describe(self):
        # Solo descriptores: registrar el collector no debe disparar un scrape
        yield from self._index_families([])
        yield from self._aggregate_families(self._report([]))

    def _index_families(self, samples):
        families = {}
        for metric in INDEX_SETTINGS_METRICS:
            families[metric.name] = GaugeMetricFamily(
                build_fqname(self.namespace, "indices_settings", metric.name), metric.help, labels=INDEX_LABELS)
        for sample in samples:
            families[sample.metric].add_metric([sample.index], sample.value)
        return list(families.values())

    def _aggregate_families(self, report):
        subsystem = "indices_settings_stats"
        return [
            GaugeMetricFamily(build_fqname(self.namespace, subsystem, "up"),
                              "Was the last scrape of the Elasticsearch Indices Settings endpoint successful.",
                              value=report.up),
            CounterMetricFamily(build_fqname(self.namespace, subsystem, "total_scrapes"),
                                "Current total Elasticsearch Indices Settings scrapes.",
                                value=report.total_scrapes),
            CounterMetricFamily(build_fqname(self.namespace, subsystem, "json_parse_failures"),
                                "Number of errors while parsing JSON.",
                                value=report.json_parse_failures),
            GaugeMetricFamily(build_fqname(self.namespace, subsystem, "read_only_indices"),
                              "Current number of read only indices within cluster",
                              value=report.read_only_indices),
        ]


def build_collector_from_config(session=None):
    """Construye cliente y collector a partir de las variables de entorno cargadas en config."""
    client = ElasticsearchClient(config.ES_HOST, config.ES_USER, config.ES_PASS,
                                 verify_ssl=config.VERIFY_SSL, timeout=config.REQUEST_TIMEOUT,
                                 session=session)
    return IndicesSettingsCollector(
        client,
        indices_included=config.INDICES_INCLUDED,
        num_most_recent_indices=config.NUM_MOST_RECENT_INDICES,
        index_matchers=build_index_matchers(config.INDEX_GROUPS),
    )

# index_settings_exporter/api.py
from functools import lru_cache
from fastapi import FastAPI, Depends, Response
from prometheus_client import CollectorRegistry, generate_latest, CONTENT_TYPE_LATEST

from .collector import IndicesSettingsCollector, build_collector_from_config
from .models import ScrapeReport

app = FastAPI(title="Elasticsearch Index Settings Exporter")

@lru_cache(maxsize=None)
def get_collector() -> IndicesSettingsCollector:
    # Único por proceso: los contadores agregados deben sobrevivir entre peticiones
    return build_collector_from_config()

@lru_cache(maxsize=None)
def get_registry() -> CollectorRegistry:
    registry = CollectorRegistry()
    registry.register(get_collector())
    return registry

@app.get("/health", tags=["Sistema"])
def health_check():
    return {"status": "ok"}

@app.get("/metrics", tags=["Métricas"])
def ep_metrics(registry: CollectorRegistry = Depends(get_registry)):
    """Exposición en formato texto de Prometheus; cada petición es un ciclo de scrape."""
    return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

@app.get("/api/v1/indices-settings", response_model=ScrapeReport, tags=["Settings de Índices"])
def ep_indices_settings(collector: IndicesSettingsCollector = Depends(get_collector)):
    return collector.scrape()

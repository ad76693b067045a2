# index_settings_exporter/main.py
import argparse
import logging
import sys
from rich.console import Console
from rich.rule import Rule

from . import config
from .collector import build_collector_from_config

console = Console()

def run_once():
    """Ejecuta un único ciclo de scrape y lo muestra en la terminal."""
    from . import renderer

    collector = build_collector_from_config()
    with console.status("[yellow]Consultando settings de índices...[/yellow]"):
        report = collector.scrape()
    renderer.render_scrape_report(report)
    return 0 if report.up == 1 else 1

def run_check():
    collector = build_collector_from_config()
    return 0 if collector.client.check_connection() else 1

def run_server():
    """Levanta la API (incluye /metrics) con uvicorn."""
    import uvicorn
    from .api import app, get_collector

    if not get_collector().client.check_connection():
        # Se sirve igual: el gauge 'up' reflejará el estado en cada scrape
        logging.warning("Elasticsearch no responde al arrancar; el exportador se inicia de todos modos.")
    console.print(f"Exportador escuchando en http://{config.EXPORTER_HOST}:{config.EXPORTER_PORT}/metrics")
    uvicorn.run(app, host=config.EXPORTER_HOST, port=config.EXPORTER_PORT, log_level=config.LOG_LEVEL.lower())
    return 0

def main(argv=None):
    parser = argparse.ArgumentParser(description="Exportador Prometheus de settings de índices Elasticsearch.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['serve', 'once'],
        default='serve',
        help="'serve' expone /metrics (default), 'once' hace un scrape y lo muestra en la terminal."
    )
    parser.add_argument('--check', action='store_true', help='Solo verifica la conexión con Elasticsearch y sale.')
    args = parser.parse_args(argv)

    console.print(Rule("[bold]Exportador de Settings de Índices Elasticsearch[/bold]"))
    if args.check:
        return run_check()
    if args.mode == 'once':
        return run_once()
    try:
        return run_server()
    except KeyboardInterrupt:
        console.print("\n[bold]Interrupción por teclado. Saliendo...[/bold]")
        return 0

if __name__ == "__main__":
    sys.exit(main())

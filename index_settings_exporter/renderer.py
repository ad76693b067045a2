# index_settings_exporter/renderer.py
import pandas as pd
from datetime import datetime, timezone
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from .fields import INDEX_SETTINGS_METRICS
from .models import ScrapeReport

console = Console()

def samples_to_frame(report: ScrapeReport) -> pd.DataFrame:
    """Pivota las muestras a una fila por índice y una columna por métrica."""
    columns = [m.name for m in INDEX_SETTINGS_METRICS]
    if not report.samples:
        return pd.DataFrame(columns=["index"] + columns)
    df = pd.DataFrame([s.model_dump() for s in report.samples])
    wide = df.pivot(index="index", columns="metric", values="value").reindex(columns=columns)
    return wide.sort_index().reset_index()

def _render_summary(report: ScrapeReport) -> Panel:
    status = "[b green]UP[/b green]" if report.up == 1 else "[b red]DOWN[/b red]"
    summary = (f"Estado: {status} | Scrapes: {int(report.total_scrapes)} | "
               f"Fallos JSON: {int(report.json_parse_failures)} | "
               f"Índices solo lectura: [yellow]{int(report.read_only_indices)}[/yellow] | "
               f"Hora: {datetime.now().strftime('%H:%M:%S')}")
    if report.error:
        summary += f"\n[red]Error: {report.error}[/red]"
    return Panel(summary, title="[b cyan]Settings de Índices Elasticsearch[/b cyan]", border_style="cyan")

def _format_creation(seconds) -> str:
    if not seconds > 0:
        return "N/A"
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime('%Y-%m-%d %H:%M:%S')
    except (OverflowError, ValueError, OSError):  # fuera del rango representable (p.ej. '1e30', 'inf')
        return "N/A"

def _render_indices_table(df: pd.DataFrame) -> Table:
    table = Table(title="[b]Settings por Índice[/b]", expand=True)
    table.add_column("Índice", style="cyan")
    table.add_column("Total Fields", justify="right")
    table.add_column("Réplicas", justify="right")
    table.add_column("Creación (UTC)", justify="right")
    for _, row in df.iterrows():
        table.add_row(row['index'], f"{row['total_fields']:g}", f"{row['replicas']:g}",
                      _format_creation(row['creation_timestamp_seconds']))
    return table

def render_scrape_report(report: ScrapeReport):
    console.print(_render_summary(report))
    df = samples_to_frame(report)
    if df.empty:
        console.print("[yellow]No hay índices para mostrar.[/yellow]")
        return
    console.print(_render_indices_table(df))

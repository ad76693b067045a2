# index_settings_exporter/client.py
import logging
import requests
from rich.console import Console
from .config import HEADERS, ALL_INDICES
from .errors import FetchError, DecodeError

console = Console()

class ElasticsearchClient:
    """Gestiona la conexión y las peticiones GET a la API administrativa de Elasticsearch."""
    def __init__(self, host, user=None, password=None, verify_ssl=False, timeout=None, session=None):
        self.base_url = host.rstrip("/") if host else host
        self.auth = (user, password) if user else None
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.cluster_info = None

    def check_connection(self):
        """Consulta '/' y guarda nombre de clúster y versión. Devuelve None si no hay conexión."""
        if not self.base_url:
            logging.error("La variable de entorno ES_HOST no está configurada.")
            console.print("[bold red]❌ Error: La variable de entorno ES_HOST no está configurada.[/bold red]")
            return None
        try:
            info = self.get_json("/", params={"filter_path": "cluster_name,version.number"})
        except (FetchError, DecodeError) as e:
            logging.error(f"Error de Conexión: {e}")
            console.rule("[bold red]Error de Conexión")
            console.print(f"[bold red]❌ No se pudo conectar a Elasticsearch:[/bold red] {e}")
            return None
        if not isinstance(info, dict):
            logging.error(f"Respuesta inesperada de '/': {info!r}")
            return None
        self.cluster_info = info
        logging.info(f"Conectado a Elasticsearch. Cluster: {info.get('cluster_name')}, Versión: {info.get('version', {}).get('number')}")
        console.print(f"[bold green]✔ Conectado a Elasticsearch[/bold green] | Cluster: [cyan]{info.get('cluster_name')}[/cyan] | Versión: [cyan]{info.get('version', {}).get('number')}[/cyan]")
        return info

    def url_for(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path, params=None):
        """
        Ejecuta un GET bloqueante y decodifica el cuerpo JSON.
        Lanza FetchError ante fallos de transporte o códigos no 2xx y DecodeError
        si el cuerpo no es JSON válido.
        """
        url = self.url_for(path)
        try:
            response = self.session.get(url, auth=self.auth, verify=self.verify_ssl, headers=HEADERS,
                                        params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.warning(f"Fallo en petición GET a {url}: {e}")
            raise FetchError(f"failed to get from {url}: {e}") from e

        if not 200 <= response.status_code < 300:
            logging.warning(f"Petición GET a {url} respondió con código {response.status_code}")
            raise FetchError(f"HTTP Request failed with code {response.status_code}", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e: # requests lanza una subclase de ValueError si el cuerpo no es JSON
            logging.warning(f"Respuesta no es JSON válido desde {url}")
            raise DecodeError(f"invalid JSON body from {url}: {e}") from e


def settings_path(indices_included):
    """Ruta del endpoint de settings: todos los índices o la lista explícita separada por comas."""
    if not indices_included:
        return f"{ALL_INDICES}/_settings"
    return ",".join(indices_included) + "/_settings"


def fetch_indices_settings(client, indices_included):
    """Descarga el mapa índice -> settings. El cuerpo tiene que ser un objeto JSON."""
    data = client.get_json(settings_path(indices_included))
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object of index settings, got {type(data).__name__}")
    return data

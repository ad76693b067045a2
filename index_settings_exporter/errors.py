# index_settings_exporter/errors.py


class IndexSettingsError(Exception):
    """Error base de la recolección de settings de índices."""


class FetchError(IndexSettingsError):
    """La petición no llegó a producir una respuesta 2xx (red, TLS, timeout o código HTTP)."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(IndexSettingsError):
    """La respuesta llegó pero su cuerpo no es el JSON esperado."""

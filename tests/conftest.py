"""Fixtures compartidas: sesión HTTP falsa y respuestas de /_settings."""

import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from index_settings_exporter.client import ElasticsearchClient


def index_entry(limit: Optional[str] = None, replicas: Optional[str] = None,
                creation_date: Optional[str] = None, read_only: Optional[str] = None) -> Dict[str, Any]:
    """Construye la entrada de un índice tal como la devuelve GET /_settings."""
    index: Dict[str, Any] = {}
    if limit is not None:
        index["mapping"] = {"total_fields": {"limit": limit}}
    if replicas is not None:
        index["number_of_replicas"] = replicas
    if creation_date is not None:
        index["creation_date"] = creation_date
    if read_only is not None:
        index["blocks"] = {"read_only": read_only}
    return {"settings": {"index": index}}


def fake_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    raw = text if text is not None else json.dumps(body if body is not None else {})
    response.text = raw

    def _json():
        return json.loads(raw)

    response.json.side_effect = _json
    return response


@pytest.fixture
def session() -> MagicMock:
    """Sesión requests falsa; cada test configura session.get.return_value / side_effect."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session) -> ElasticsearchClient:
    return ElasticsearchClient("http://es.local:9200", session=session)


@pytest.fixture
def settings_response() -> Dict[str, Any]:
    return {
        "logs-2023-01-01": index_entry(limit="2000", replicas="1", creation_date="1672531200000", read_only="true"),
        "logs-2023-01-02": index_entry(limit="2000", replicas="2", creation_date="1672617600000", read_only="false"),
        "metrics-2023-01-01": index_entry(limit="5000", replicas="0", creation_date="1672531200000"),
        "orphan": index_entry(),
    }

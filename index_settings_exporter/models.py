# index_settings_exporter/models.py
from pydantic import BaseModel
from typing import List, Optional

class IndexSettingsSample(BaseModel):
    metric: str
    index: str
    value: float

class ScrapeReport(BaseModel):
    up: float
    total_scrapes: float
    json_parse_failures: float
    read_only_indices: float
    error: Optional[str] = None
    samples: List[IndexSettingsSample] = []

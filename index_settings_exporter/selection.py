# index_settings_exporter/selection.py
import fnmatch
from typing import Dict, Iterable, List, Mapping

from .config import ALL_INDICES


class GlobMatcher:
    """Matcher de nombres de índice con patrones estilo shell ('logs-*', 'app-202?.*')."""
    def __init__(self, patterns):
        if isinstance(patterns, str):
            patterns = [patterns]
        self.patterns = list(patterns)

    def match(self, name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, p) for p in self.patterns)

    def __repr__(self):
        return f"GlobMatcher({self.patterns!r})"


def build_index_matchers(index_groups: Mapping[str, Iterable[str]]) -> Dict[str, GlobMatcher]:
    """Grupo -> GlobMatcher, conservando el orden de declaración de los grupos."""
    return {name: GlobMatcher(patterns) for name, patterns in index_groups.items()}


def categorize_indices(index_names: Iterable[str], indices_included: List[str],
                       index_matchers: Mapping[str, object]) -> Dict[str, List[str]]:
    """
    Agrupa los nombres de índice en buckets.

    Si se recogen todos los índices, van todos al bucket '_all'. Si no, cada
    índice va al primer grupo (en orden de declaración) cuyo matcher lo acepte,
    o a un bucket propio con su nombre cuando ninguno coincide.
    """
    buckets: Dict[str, List[str]] = {}

    if not indices_included or indices_included[0] == ALL_INDICES:
        buckets[ALL_INDICES] = list(index_names)
        return buckets

    for index_name in index_names:
        bucket = next((group for group, matcher in index_matchers.items() if matcher.match(index_name)), index_name)
        buckets.setdefault(bucket, []).append(index_name)
    return buckets


def select_most_recent(buckets: Mapping[str, List[str]], num_most_recent: int) -> Dict[str, List[str]]:
    """
    Recorta cada bucket a sus `num_most_recent` nombres lexicográficamente mayores.
    Con num_most_recent <= 0 los buckets se devuelven completos.
    """
    if num_most_recent <= 0:
        return {bucket: list(names) for bucket, names in buckets.items()}
    # Solo tiene sentido si el nombre lleva un sufijo ordenable (p.ej. fecha con ceros a la izquierda)
    return {bucket: sorted(names)[-num_most_recent:] for bucket, names in buckets.items()}


def gather_individual_indices_settings(indices_settings: Mapping[str, dict], indices_included: List[str],
                                       index_matchers: Mapping[str, object], num_most_recent: int) -> Dict[str, dict]:
    """Clasifica, recorta y devuelve el mapa plano índice -> settings de los índices a exportar."""
    buckets = categorize_indices(indices_settings.keys(), indices_included, index_matchers)
    selected = select_most_recent(buckets, num_most_recent)
    return {name: indices_settings[name] for names in selected.values() for name in names}

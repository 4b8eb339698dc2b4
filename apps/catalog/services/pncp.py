"""
Public procurement catalog lookup (PNCP / ComprasNet).

Queries the public material and service registries over HTTP. Whenever the
remote side fails (network error, timeout, HTTP error status, invalid JSON
or an unexpected payload) the bundled local excerpt is searched instead and
the result is tagged ``source: "local"``.
"""

import logging
import unicodedata

import requests
from django.conf import settings

from .exceptions import RemoteCatalogError
from .local_catalog import (
    CATALOG_MATERIAL,
    CATALOG_SERVICE,
    MATERIALS,
    OFFICIAL_CATALOGS,
    SERVICES,
)

logger = logging.getLogger(__name__)

KIND_MATERIAL = 'material'
KIND_SERVICE = 'service'
KIND_ALIASES = {
    'material': KIND_MATERIAL,
    'catmat': KIND_MATERIAL,
    'service': KIND_SERVICE,
    'servico': KIND_SERVICE,
    'catserv': KIND_SERVICE,
}

MIN_QUERY_LENGTH = 2
LOCAL_RESULT_LIMIT = 20

SOURCE_REMOTE = 'remote'
SOURCE_LOCAL = 'local'

REQUEST_HEADERS = {
    'User-Agent': 'SGFI/1.0 (internal system)',
    'Accept': 'application/json',
}


def normalize_kind(kind: str) -> str:
    """Map a kind or alias to ``material`` or ``service``; anything else is material."""
    return KIND_ALIASES.get((kind or '').strip().lower(), KIND_MATERIAL)


def fold(text: str) -> str:
    """Lowercase and strip accents for accent-insensitive matching."""
    decomposed = unicodedata.normalize('NFD', text or '')
    return ''.join(c for c in decomposed if not unicodedata.combining(c)).lower()


def _get_json(url: str, params: dict):
    response = requests.get(
        url,
        params=params,
        headers=REQUEST_HEADERS,
        timeout=settings.PNCP_TIMEOUT
    )
    response.raise_for_status()
    return response.json()


def _normalize_remote(entry: dict, catalog: str) -> dict:
    return {
        'code': str(entry.get('codigo') or entry.get('id') or ''),
        'description': entry.get('descricao') or entry.get('nome') or '',
        'unit': entry.get('unidadeFornecimento') or entry.get('unidade') or '',
        'category': entry.get('classeDescricao') or entry.get('classe') or '',
        'subcategory': entry.get('pdm') or entry.get('subclasse') or '',
        'catalog': catalog,
    }


def _parse_search_payload(data, catalog: str) -> dict:
    if not isinstance(data, dict):
        raise RemoteCatalogError("Unexpected payload from catalog registry")
    entries = data.get('materiais') or data.get('servicos') or []
    if not isinstance(entries, list):
        raise RemoteCatalogError("Unexpected payload from catalog registry")

    items = [_normalize_remote(entry, catalog) for entry in entries if isinstance(entry, dict)]
    return {
        'items': items,
        'total': data.get('count') or len(items),
        'source': SOURCE_REMOTE,
    }


def search_local(query: str, kind: str = KIND_MATERIAL) -> dict:
    """Accent- and case-insensitive substring search over the bundled excerpt."""
    base = SERVICES if normalize_kind(kind) == KIND_SERVICE else MATERIALS
    term = fold(query.strip())
    matches = [entry for entry in base if term in fold(entry['description'])]
    return {
        'items': [dict(entry) for entry in matches[:LOCAL_RESULT_LIMIT]],
        'total': len(matches),
        'source': SOURCE_LOCAL,
    }


def search_catalog(*, query: str, kind: str = KIND_MATERIAL, page: int = 1) -> dict:
    """
    Search the public material or service registry.

    Args:
        query: Description fragment; shorter than two characters yields nothing
        kind: ``material`` (CATMAT) or ``service`` (CATSERV)
        page: Remote page number

    Returns:
        dict with ``items`` (code, description, unit, category, subcategory,
        catalog), ``total`` and ``source`` (``remote`` or ``local``)
    """
    query = (query or '').strip()
    if len(query) < MIN_QUERY_LENGTH:
        return {'items': [], 'total': 0, 'source': SOURCE_LOCAL}

    kind = normalize_kind(kind)
    if kind == KIND_SERVICE:
        url, catalog = settings.PNCP_SERVICES_URL, CATALOG_SERVICE
    else:
        url, catalog = settings.PNCP_MATERIALS_URL, CATALOG_MATERIAL

    try:
        data = _get_json(url, {'descricao': query, 'pagina': page})
        return _parse_search_payload(data, catalog)
    except (requests.RequestException, ValueError, RemoteCatalogError) as e:
        logger.warning("Catalog registry unavailable, using local list: %s", e)
        return search_local(query, kind)


def list_catalogs():
    """Active public catalogs; the two official ones when the registry is down."""
    try:
        return _get_json(settings.PNCP_CATALOGS_URL, {'statusAtivo': 'true'})
    except (requests.RequestException, ValueError) as e:
        logger.warning("Catalog list unavailable, using official catalogs: %s", e)
        return [dict(catalog) for catalog in OFFICIAL_CATALOGS]

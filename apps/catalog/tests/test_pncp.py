import pytest
import requests
from unittest.mock import patch, Mock

from apps.catalog.services import search_catalog, search_local, list_catalogs, normalize_kind
from apps.catalog.services.local_catalog import MATERIALS, SERVICES
from apps.catalog.services.pncp import fold


def _response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    else:
        response.raise_for_status.return_value = None
    return response


class TestLocalCatalog:

    def test_sizes(self):
        assert len(MATERIALS) == 25
        assert len(SERVICES) == 20
        assert {entry['catalog'] for entry in MATERIALS} == {'CATMAT'}
        assert {entry['catalog'] for entry in SERVICES} == {'CATSERV'}

    def test_fold(self):
        assert fold('Manutenção ELÉTRICA') == 'manutencao eletrica'

    def test_accent_insensitive(self):
        result = search_local('cafe', 'material')

        assert result['source'] == 'local'
        assert result['total'] == 1
        assert result['items'][0]['code'] == '800200'

    def test_services(self):
        result = search_local('MANUTENCAO', 'servico')

        codes = [item['code'] for item in result['items']]
        assert codes == ['S003', 'S005', 'S009', 'S016']

    def test_result_limit(self):
        result = search_local(',', 'material')

        assert len(result['items']) == 20
        assert result['total'] == 25

    def test_normalize_kind(self):
        assert normalize_kind('CATSERV') == 'service'
        assert normalize_kind('servico') == 'service'
        assert normalize_kind('anything') == 'material'


class TestSearchCatalog:

    def test_short_query(self):
        with patch('apps.catalog.services.pncp.requests.get') as mock_get:
            result = search_catalog(query=' a ')

        assert result == {'items': [], 'total': 0, 'source': 'local'}
        mock_get.assert_not_called()

    def test_remote_result_is_normalized(self, settings):
        payload = {
            'count': 42,
            'materiais': [
                {
                    'codigo': 150,
                    'descricao': 'PAPEL A4',
                    'unidadeFornecimento': 'RESMA',
                    'classeDescricao': 'PAPELARIA',
                    'pdm': 'PAPEL',
                },
            ],
        }
        with patch('apps.catalog.services.pncp.requests.get', return_value=_response(payload)) as mock_get:
            result = search_catalog(query='papel', kind='material', page=2)

        assert result['source'] == 'remote'
        assert result['total'] == 42
        assert result['items'] == [{
            'code': '150',
            'description': 'PAPEL A4',
            'unit': 'RESMA',
            'category': 'PAPELARIA',
            'subcategory': 'PAPEL',
            'catalog': 'CATMAT',
        }]
        args, kwargs = mock_get.call_args
        assert args[0] == settings.PNCP_MATERIALS_URL
        assert kwargs['params'] == {'descricao': 'papel', 'pagina': 2}
        assert kwargs['timeout'] == settings.PNCP_TIMEOUT

    def test_service_uses_service_registry(self, settings):
        payload = {'servicos': [{'id': 'X1', 'nome': 'LIMPEZA'}]}
        with patch('apps.catalog.services.pncp.requests.get', return_value=_response(payload)) as mock_get:
            result = search_catalog(query='limpeza', kind='service')

        assert mock_get.call_args[0][0] == settings.PNCP_SERVICES_URL
        assert result['items'][0]['catalog'] == 'CATSERV'
        assert result['items'][0]['code'] == 'X1'
        assert result['total'] == 1

    @pytest.mark.parametrize('failure', [
        requests.ConnectionError('unreachable'),
        requests.Timeout('timed out'),
    ])
    def test_network_failure_falls_back(self, failure):
        with patch('apps.catalog.services.pncp.requests.get', side_effect=failure):
            result = search_catalog(query='caneta', kind='material')

        assert result['source'] == 'local'
        assert result['total'] == 4

    def test_http_error_falls_back(self):
        with patch('apps.catalog.services.pncp.requests.get', return_value=_response({}, status_code=503)):
            result = search_catalog(query='vigilancia', kind='service')

        assert result['source'] == 'local'
        assert result['items'][0]['code'] == 'S002'

    def test_invalid_json_falls_back(self):
        response = _response(None)
        response.json.side_effect = ValueError('not json')
        with patch('apps.catalog.services.pncp.requests.get', return_value=response):
            result = search_catalog(query='papel')

        assert result['source'] == 'local'

    def test_unexpected_payload_falls_back(self):
        with patch('apps.catalog.services.pncp.requests.get', return_value=_response(['not', 'a', 'dict'])):
            result = search_catalog(query='papel')

        assert result['source'] == 'local'


class TestListCatalogs:

    def test_remote(self):
        payload = [{'id': 7, 'nome': 'CATMAT'}]
        with patch('apps.catalog.services.pncp.requests.get', return_value=_response(payload)):
            assert list_catalogs() == payload

    def test_fallback(self):
        with patch('apps.catalog.services.pncp.requests.get', side_effect=requests.ConnectionError()):
            catalogs = list_catalogs()

        assert [c['name'] for c in catalogs] == ['CATMAT', 'CATSERV']

import pytest
import requests

from tienda_pos.errors import ImageGenerationError
from tienda_pos.services import ProductImageService


class _Calls(list):
    """Llamadas registradas + respuestas en cola."""

    def __init__(self):
        super().__init__()
        self.responses = []


class FakeResponse:
    def __init__(self, data=None, status=200):
        self._data = data
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._data is None:
            raise ValueError("no json")
        return self._data


@pytest.fixture
def calls(monkeypatch):
    recorded = _Calls()
    responses = recorded.responses

    def fake_post(url, json=None, headers=None, timeout=None):
        recorded.append({'url': url, 'json': json, 'headers': headers, 'timeout': timeout})
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr('tienda_pos.services.image_service.requests.post', fake_post)
    return recorded


def _service():
    return ProductImageService(api_url='http://imagenes.local/generate', api_key='k', timeout=5)


def test_generate_returns_image_url(calls):
    calls.responses.append(FakeResponse({'image_url': 'data:image/png;base64,AAA'}))

    url = _service().generate('Cable', 'Cable trenzado')

    assert url == 'data:image/png;base64,AAA'
    assert calls[0]['json']['product_name'] == 'Cable'
    assert 'Cable trenzado' in calls[0]['json']['prompt']
    assert calls[0]['headers'] == {'Authorization': 'Bearer k'}
    assert calls[0]['timeout'] == 5


@pytest.mark.parametrize('response', [
    FakeResponse({'image_url': 'x'}, status=500),
    FakeResponse(None),
    FakeResponse({'otra_cosa': 1}),
    requests.ConnectionError('sin red'),
])
def test_generate_failures_raise(calls, response):
    calls.responses.append(response)

    with pytest.raises(ImageGenerationError):
        _service().generate('Cable', '')


def test_generate_without_url_configured():
    with pytest.raises(ImageGenerationError):
        ProductImageService(api_url='').generate('Cable', '')

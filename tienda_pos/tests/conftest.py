import os
import tempfile
from datetime import datetime, timedelta

import pytest

# logs de profiling fuera del paquete
os.environ.setdefault('TIENDA_LOGS_DIR', tempfile.mkdtemp(prefix='tienda_logs_'))

from tienda_pos.app_container import AppContainer  # noqa: E402


class FakeClock:
    """Reloj controlable: devuelve siempre self.now."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now

    def set(self, *args):
        self.now = datetime(*args)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 15, 12, 0, 0))


@pytest.fixture
def container(clock):
    """Contenedor vacío (sin catálogo demo) con reloj fijo."""
    return AppContainer(clock=clock, seed_demo_data=False)


@pytest.fixture
def demo_container(clock):
    return AppContainer(clock=clock, seed_demo_data=True)


@pytest.fixture
def add_product(container):
    def _add(**overrides):
        data = {
            'name': 'Producto',
            'barcode': '',
            'description': 'Producto de prueba',
            'quantity': 10,
            'price': 15.0,
            'purchase_price': 10.0,
            'category': 'General',
        }
        data.update(overrides)
        result = container.inventory_service.add_product(data)
        assert result['ok'], result
        return result['product']
    return _add


@pytest.fixture
def client(demo_container):
    from tienda_pos.main import app
    AppContainer.set_instance(demo_container)
    app.config['TESTING'] = True
    with app.test_client() as c:
        yield c
    AppContainer.reset_instance()

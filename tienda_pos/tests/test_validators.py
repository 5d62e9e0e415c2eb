import math

import pytest

from tienda_pos.services.validators import parse_number, positive_amount


@pytest.mark.parametrize('value', ['nan', 'NaN', 'inf', '-inf', float('nan'), math.inf])
def test_parse_number_rejects_non_finite(value):
    with pytest.raises(ValueError):
        parse_number(value, 'price')


def test_parse_number_integral():
    assert parse_number('12', 'quantity', integral=True) == 12
    assert parse_number(3.0, 'quantity', integral=True) == 3
    assert parse_number(None, 'quantity', integral=True) == 0
    with pytest.raises(ValueError):
        parse_number(2.9, 'quantity', integral=True)
    with pytest.raises(ValueError):
        parse_number(True, 'quantity', integral=True)


def test_positive_amount():
    assert positive_amount('49.5') == 49.5
    assert positive_amount('inf') is None
    assert positive_amount(float('nan')) is None
    assert positive_amount(0) is None


@pytest.mark.parametrize('field', ['price', 'purchase_price'])
def test_add_product_rejects_nan_prices(container, field):
    result = container.inventory_service.add_product({'name': 'Mica', 'quantity': 3, field: 'nan'})

    assert result['ok'] is False
    assert container.inventory_service.get_all_products() == []


def test_add_product_rejects_fractional_quantity(container):
    result = container.inventory_service.add_product({'name': 'Mica', 'quantity': 2.9, 'price': 5})

    assert result['ok'] is False
    assert container.inventory_service.get_all_products() == []


def test_non_finite_input_never_reaches_the_totals(container):
    repair = container.repair_service.add_repair({
        'customer_name': 'Ana', 'customer_phone': '555', 'device': 'Moto G',
        'issue_description': 'No enciende', 'cost': 'nan', 'status': 'Completed',
    })
    job = container.print_service.add_print_job({'price': 'inf', 'cost': 1})
    fund = container.ledger_service.add_funds('inf')
    loss = container.ledger_service.add_loss(float('nan'))

    assert [repair['ok'], job['ok'], fund['ok'], loss['ok']] == [False] * 4

    summary = container.stats_service.get_financial_summary()
    assert all(math.isfinite(value) for value in summary.values())
    assert summary['total_revenue'] == 0
    assert summary['capital'] == 0


def test_api_rejects_nan_price(client):
    r = client.post('/products', data='{"name": "Mica", "quantity": 1, "price": NaN}',
                    content_type='application/json')

    assert r.status_code == 400
    assert client.post('/funds', json={'amount': 'inf'}).get_json()['applied'] is False

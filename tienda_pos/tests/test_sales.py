from tienda_pos.models import CartItem, EventType


def _sell(container, *lines):
    return container.sales_service.process_sale(
        [CartItem(product_id, qty) for product_id, qty in lines]
    )


def test_sale_totals_profit_and_cost(container, add_product):
    product = add_product(name='Audífonos', quantity=5, price=15, purchase_price=10)

    result = _sell(container, (product.id, 2))

    sale = result['sale']
    assert result['ok']
    assert sale.total == 30
    assert sale.profit == 10
    assert sale.cost == 20
    assert sale.items_count == 2
    assert container.inventory_service.get_product(product.id).quantity == 3
    assert result['low_stock'] == []
    assert [e.type for e in result['events']] == [EventType.SALE_COMPLETED]


def test_sale_item_keeps_price_at_time_of_sale(container, add_product):
    product = add_product(quantity=5, price=15, purchase_price=10)
    sale = _sell(container, (product.id, 1))['sale']

    container.inventory_repo.update(product.id, price=99)

    stored = container.sales_service.get_sale(sale.id)
    assert stored.items[0].price == 15
    assert stored.total == 15


def test_low_stock_warning_uses_new_quantity(container, add_product):
    product = add_product(name='Funda', quantity=3)

    first = _sell(container, (product.id, 1))
    second = _sell(container, (product.id, 1))

    assert first['low_stock'] == []
    assert second['low_stock'] == ['Funda']
    assert [e.type for e in second['events']] == [EventType.SALE_COMPLETED, EventType.LOW_STOCK]
    assert second['events'][1].payload == {'products': ['Funda']}


def test_multiple_lines_and_duplicate_product(container, add_product):
    cable = add_product(name='Cable', quantity=10, price=5, purchase_price=2)
    cargador = add_product(name='Cargador', quantity=2, price=20, purchase_price=12)

    result = _sell(container, (cable.id, 2), (cargador.id, 1), (cable.id, 1))

    sale = result['sale']
    assert len(sale.items) == 3
    assert sale.total == 5 * 3 + 20
    assert sale.profit == 3 * 3 + 8
    assert sale.cost == 2 * 3 + 12
    assert container.inventory_service.get_product(cable.id).quantity == 7
    assert result['low_stock'] == ['Cargador']


def test_unknown_and_zero_quantity_lines_are_skipped(container, add_product):
    product = add_product(quantity=4, price=10, purchase_price=6)

    result = _sell(container, ('no-existe', 3), (product.id, 0), (product.id, 1))

    assert result['ok']
    assert len(result['sale'].items) == 1
    assert result['sale'].total == 10


def test_empty_or_invalid_cart_changes_nothing(container, add_product):
    product = add_product(quantity=4)

    assert container.sales_service.process_sale([])['ok'] is False
    result = _sell(container, ('no-existe', 1), (product.id, -2))

    assert result['ok'] is False
    assert result['events'] == []
    assert container.sales_service.get_all_sales() == []
    assert container.inventory_service.get_product(product.id).quantity == 4


def test_oversell_goes_negative_and_is_audited(container, add_product):
    product = add_product(name='Pan', quantity=1, price=3, purchase_price=1)

    result = _sell(container, (product.id, 3))

    assert result['ok']
    assert container.inventory_service.get_product(product.id).quantity == -2
    assert result['low_stock'] == ['Pan']
    stock_logs = container.audit_service.search(log_type='STOCK')
    assert len(stock_logs) == 1
    assert stock_logs[0]['details'] == {'quantity': -2}


def test_sale_is_audited(container, add_product):
    product = add_product(quantity=4, price=10, purchase_price=6)

    sale = _sell(container, (product.id, 2))['sale']

    logs = container.audit_service.search(log_type='VENTA')
    assert logs[0]['related_id'] == sale.id
    assert logs[0]['details']['total'] == 20


def test_sale_uses_clock_date(container, add_product, clock):
    product = add_product(quantity=4)

    sale = _sell(container, (product.id, 1))['sale']

    assert sale.date == clock.now


def test_recent_sales_newest_first(container, add_product):
    product = add_product(quantity=100)
    ids = [_sell(container, (product.id, 1))['sale'].id for _ in range(7)]

    recent = container.sales_service.recent_sales()

    assert [s.id for s in recent] == list(reversed(ids))[:5]

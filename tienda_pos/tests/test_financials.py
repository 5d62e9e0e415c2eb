from datetime import datetime, timedelta, timezone

import pytest

from tienda_pos.models import (
    ManualFund,
    PrintJob,
    Product,
    Repair,
    RepairStatus,
    Sale,
    StoreSnapshot,
)
from tienda_pos.services import stats_service
from tienda_pos.services.stats_service import compute_financial_summary


NOW = datetime(2024, 5, 15, 12, 0, 0)


def test_scenario_single_product_sold_out(container, clock):
    container.inventory_repo.create_product(
        Product(id='1', name='Cable', quantity=3, price=10, purchase_price=5)
    )

    result = container.sales_service.process_sale([{'id': '1', 'cartQuantity': 3}])

    assert result['ok']
    sale = result['sale']
    assert container.inventory_service.get_product('1').quantity == 0
    assert sale.total == 30
    assert sale.profit == 15
    assert sale.cost == 15
    assert result['low_stock'] == ['Cable']

    summary = container.stats_service.get_financial_summary()
    assert summary['total_revenue'] == 30
    assert summary['cost_of_goods_sold'] == 15
    assert summary['capital'] == 15


def test_capital_with_only_products_is_inventory_value(container, add_product):
    add_product(quantity=4, purchase_price=2.5)
    add_product(quantity=10, purchase_price=7)

    summary = container.stats_service.get_financial_summary()

    assert summary['capital'] == pytest.approx(4 * 2.5 + 10 * 7)
    for key in ('daily_profit', 'monthly_profit', 'total_revenue', 'cost_of_goods_sold',
                'daily_losses', 'daily_printing_profit', 'total_manual_funds', 'total_losses'):
        assert summary[key] == 0


def test_total_manual_funds_ignores_non_positive(container):
    ledger = container.ledger_service
    for amount in (100, 0.5, 0, -20, 49.5):
        ledger.add_funds(amount)

    assert container.stats_service.total_manual_funds() == pytest.approx(150)
    assert len(ledger.get_all_funds()) == 3


def test_daily_profit_excludes_printing_but_monthly_includes_it(container):
    container.print_service.add_print_job({'price': 5, 'cost': 1})

    summary = container.stats_service.get_financial_summary()

    assert summary['daily_printing_profit'] == 4
    assert summary['daily_profit'] == 0
    assert summary['monthly_profit'] == 4
    assert summary['total_revenue'] == 5
    # el costo de impresión sale del capital
    assert summary['capital'] == 4


def test_daily_profit_combines_sales_repairs_funds_and_losses(container, add_product, clock):
    product = add_product(quantity=10, price=15, purchase_price=10)
    container.sales_service.process_sale([{'product_id': product.id, 'cart_quantity': 2}])
    repair = container.repair_service.add_repair({
        'customer_name': 'Ana', 'customer_phone': '5550001111', 'device': 'Moto G',
        'issue_description': 'Pantalla rota', 'cost': 40, 'status': 'Pending',
    })['repair']
    container.repair_service.update_repair_status(repair.id, 'Completed')
    container.ledger_service.add_funds(25)
    container.ledger_service.add_loss(5)

    summary = container.stats_service.get_financial_summary()

    assert summary['daily_profit'] == 10 + 40 + 25 - 5
    assert summary['daily_losses'] == 5
    assert summary['monthly_profit'] == 10 + 40 + 25 - 5
    assert summary['total_revenue'] == 30 + 40 + 25
    assert summary['cost_of_goods_sold'] == 20
    assert summary['capital'] == pytest.approx(8 * 10 + 95 - 20 - 5)


def test_yesterday_counts_for_month_but_not_today(container, clock):
    clock.set(2024, 5, 14, 23, 59)
    container.ledger_service.add_funds(10)
    container.ledger_service.add_loss(3)
    clock.set(2024, 5, 15, 0, 1)

    summary = container.stats_service.get_financial_summary()

    assert summary['daily_profit'] == 0
    assert summary['daily_losses'] == 0
    assert summary['monthly_profit'] == 7


def test_previous_month_excluded_from_monthly_profit(container, clock):
    clock.set(2024, 4, 30, 23, 0)
    container.ledger_service.add_funds(50)
    clock.set(2024, 5, 1, 1, 0)

    summary = container.stats_service.get_financial_summary()

    assert summary['monthly_profit'] == 0
    assert summary['total_manual_funds'] == 50
    assert summary['total_revenue'] == 50


def test_same_month_previous_year_is_not_this_month():
    funds = [ManualFund(amount=10, date=datetime(2023, 5, 15, 12, 0))]

    assert stats_service.monthly_profit([], [], [], funds, [], NOW) == 0


def test_repair_counts_on_completion_day_not_creation_day(container, clock):
    clock.set(2024, 5, 10, 9, 0)
    repair = container.repair_service.add_repair({
        'customer_name': 'Luis', 'customer_phone': '5551112222', 'device': 'iPad',
        'issue_description': 'No carga', 'cost': 60,
    })['repair']
    clock.set(2024, 5, 15, 10, 0)
    container.repair_service.update_repair_status(repair.id, 'Completed')

    assert container.stats_service.daily_profit() == 60


def test_pending_repair_is_not_revenue(container):
    container.repair_service.add_repair({
        'customer_name': 'Luis', 'customer_phone': '5551112222', 'device': 'iPad',
        'issue_description': 'No carga', 'cost': 60, 'status': 'In Progress',
    })

    summary = container.stats_service.get_financial_summary()
    assert summary['total_revenue'] == 0
    assert summary['daily_profit'] == 0


def test_repair_moved_out_of_completed_stops_counting(container):
    repair = container.repair_service.add_repair({
        'customer_name': 'Eva', 'customer_phone': '5552223333', 'device': 'Pixel 6',
        'issue_description': 'Batería', 'cost': 30,
    })['repair']
    container.repair_service.update_repair_status(repair.id, 'Completed')
    container.repair_service.update_repair_status(repair.id, 'Cancelled')

    summary = container.stats_service.get_financial_summary()
    assert summary['total_revenue'] == 0
    assert summary['daily_profit'] == 0


def test_legacy_sale_without_cost_counts_as_zero():
    sales = [
        Sale(id='a', items=(), total=20, profit=8, date=NOW, cost=None),
        Sale(id='b', items=(), total=10, profit=4, date=NOW, cost=6),
    ]

    assert stats_service.cost_of_goods_sold(sales) == 6
    snapshot = StoreSnapshot(sales=tuple(sales))
    assert compute_financial_summary(snapshot, NOW)['capital'] == 30 - 6


def test_daily_profit_is_idempotent_within_the_day(container, add_product, clock):
    product = add_product(quantity=5)
    container.sales_service.process_sale([{'product_id': product.id, 'cart_quantity': 1}])

    first = container.stats_service.daily_profit()
    clock.advance(hours=6)
    second = container.stats_service.daily_profit()

    assert first == second == 5


def test_timezone_aware_dates_use_local_calendar_day():
    now = datetime.now()
    aware_now = now.astimezone(timezone.utc)
    jobs = [PrintJob(id='p', price=3, cost=1, profit=2, date=aware_now)]

    assert stats_service.daily_printing_profit(jobs, now) == 2
    assert stats_service.daily_printing_profit(jobs, now + timedelta(days=1)) == 0


def test_aggregates_only_read_the_snapshot(container, add_product):
    add_product(quantity=3, purchase_price=4)
    before = container.snapshot()

    container.stats_service.get_financial_summary()

    assert container.snapshot() == before


def test_completed_repair_without_completion_date_is_revenue_not_daily_profit():
    repair = Repair(
        id='r', customer_name='X', customer_phone='1', device='D', issue_description='I',
        cost=12, status=RepairStatus.COMPLETED, creation_date=NOW, completion_date=None,
    )

    assert stats_service.total_revenue([], [repair], [], []) == 12
    assert stats_service.daily_profit([], [repair], [], [], NOW) == 0


def test_dashboard_rounds_to_cents(container):
    container.ledger_service.add_funds(0.1)
    container.ledger_service.add_funds(0.2)

    assert container.stats_service.get_dashboard()['total_manual_funds'] == 0.3

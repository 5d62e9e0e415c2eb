# ==============================================================================
# SERVICIO DE ESTADÍSTICAS FINANCIERAS
# ==============================================================================
# Deriva capital, ganancias, ingresos y costos a partir del historial completo
# de eventos (ventas, reparaciones, impresiones, fondos y pérdidas).
#
# REGLA PRINCIPAL: no hay saldos acumulados. Cada lectura recalcula todo desde
# un snapshot del almacén. Cada función recibe SOLO las listas que necesita.
#
# "Hoy" y "este mes" = mismo día / mes calendario en hora local.
# Nada de ventanas móviles de 24 horas.
#
# Ojo: daily_profit NO incluye la ganancia de impresión (va aparte en
# daily_printing_profit); monthly_profit SÍ la incluye.
# ==============================================================================

from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Optional

from tienda_pos.models import (
    Loss,
    ManualFund,
    PrintJob,
    Product,
    Repair,
    Sale,
    StoreSnapshot,
)
from tienda_pos.performance_logger import profile_function


# ==============================================================================
# PREDICADOS DE FECHA
# ==============================================================================

def _local(value: datetime) -> datetime:
    """Lleva fechas con zona horaria a hora local; las naive se asumen locales."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def is_same_day(value: Optional[datetime], now: datetime) -> bool:
    if value is None:
        return False
    value, now = _local(value), _local(now)
    return value.date() == now.date()


def is_same_month(value: Optional[datetime], now: datetime) -> bool:
    if value is None:
        return False
    value, now = _local(value), _local(now)
    return (value.year, value.month) == (now.year, now.month)


def _completed(repairs: Iterable[Repair]) -> Iterable[Repair]:
    return (r for r in repairs if r.is_completed)


# ==============================================================================
# AGREGADOS
# ==============================================================================

def cost_of_goods_sold(sales: Iterable[Sale]) -> float:
    """Costo de lo vendido. Ventas legacy sin costo cuentan como 0."""
    return sum(sale.cost or 0 for sale in sales)


def daily_printing_profit(print_jobs: Iterable[PrintJob], now: datetime) -> float:
    return sum(job.profit for job in print_jobs if is_same_day(job.date, now))


def daily_losses(losses: Iterable[Loss], now: datetime) -> float:
    return sum(loss.amount for loss in losses if is_same_day(loss.date, now))


def daily_profit(
    sales: Iterable[Sale],
    repairs: Iterable[Repair],
    funds: Iterable[ManualFund],
    losses: Iterable[Loss],
    now: datetime
) -> float:
    """
    Ganancia del día: ventas + reparaciones completadas hoy + fondos de hoy
    - pérdidas de hoy. La impresión se reporta aparte.
    """
    sales_profit = sum(s.profit for s in sales if is_same_day(s.date, now))
    repairs_income = sum(
        r.cost for r in _completed(repairs) if is_same_day(r.completion_date, now)
    )
    funds_today = sum(f.amount for f in funds if is_same_day(f.date, now))
    return sales_profit + repairs_income + funds_today - daily_losses(losses, now)


def monthly_profit(
    sales: Iterable[Sale],
    repairs: Iterable[Repair],
    print_jobs: Iterable[PrintJob],
    funds: Iterable[ManualFund],
    losses: Iterable[Loss],
    now: datetime
) -> float:
    """Ganancia del mes calendario actual, impresión incluida."""
    sales_profit = sum(s.profit for s in sales if is_same_month(s.date, now))
    repairs_income = sum(
        r.cost for r in _completed(repairs) if is_same_month(r.completion_date, now)
    )
    printing = sum(j.profit for j in print_jobs if is_same_month(j.date, now))
    funds_month = sum(f.amount for f in funds if is_same_month(f.date, now))
    losses_month = sum(l.amount for l in losses if is_same_month(l.date, now))
    return sales_profit + repairs_income + printing + funds_month - losses_month


def total_manual_funds(funds: Iterable[ManualFund]) -> float:
    return sum(f.amount for f in funds)


def total_losses(losses: Iterable[Loss]) -> float:
    return sum(l.amount for l in losses)


def total_revenue(
    sales: Iterable[Sale],
    repairs: Iterable[Repair],
    print_jobs: Iterable[PrintJob],
    funds: Iterable[ManualFund]
) -> float:
    """Ventas + reparaciones completadas + impresiones + fondos manuales."""
    return (
        sum(s.total for s in sales)
        + sum(r.cost for r in _completed(repairs))
        + sum(j.price for j in print_jobs)
        + total_manual_funds(funds)
    )


def inventory_value(products: Iterable[Product]) -> float:
    """Valor del inventario a precio de compra."""
    return sum(p.stock_value for p in products)


def capital(
    products: Iterable[Product],
    sales: Iterable[Sale],
    repairs: Iterable[Repair],
    print_jobs: Iterable[PrintJob],
    funds: Iterable[ManualFund],
    losses: Iterable[Loss]
) -> float:
    """
    Capital = inventario + ingresos - costo de lo vendido
              - costo de impresiones - pérdidas.
    """
    print_jobs = list(print_jobs)
    sales = list(sales)
    return (
        inventory_value(products)
        + total_revenue(sales, repairs, print_jobs, funds)
        - cost_of_goods_sold(sales)
        - sum(j.cost for j in print_jobs)
        - total_losses(losses)
    )


def compute_financial_summary(snapshot: StoreSnapshot, now: datetime) -> Dict[str, float]:
    """
    Calcula todos los agregados sobre un mismo snapshot.

    Returns:
        {
            'capital', 'daily_profit', 'monthly_profit', 'total_revenue',
            'cost_of_goods_sold', 'daily_losses', 'daily_printing_profit',
            'total_manual_funds', 'total_losses', 'inventory_value'
        }
    """
    s = snapshot
    return {
        'capital': capital(s.products, s.sales, s.repairs, s.print_jobs, s.funds, s.losses),
        'daily_profit': daily_profit(s.sales, s.repairs, s.funds, s.losses, now),
        'monthly_profit': monthly_profit(
            s.sales, s.repairs, s.print_jobs, s.funds, s.losses, now
        ),
        'total_revenue': total_revenue(s.sales, s.repairs, s.print_jobs, s.funds),
        'cost_of_goods_sold': cost_of_goods_sold(s.sales),
        'daily_losses': daily_losses(s.losses, now),
        'daily_printing_profit': daily_printing_profit(s.print_jobs, now),
        'total_manual_funds': total_manual_funds(s.funds),
        'total_losses': total_losses(s.losses),
        'inventory_value': inventory_value(s.products),
    }


class StatsService:
    """
    Servicio para cálculo de estadísticas financieras.

    Responsabilidades:
    - Obtener un snapshot fresco del almacén en cada lectura
    - Calcular los agregados (sin caché)
    - Redondear para mostrar en el panel
    """

    def __init__(
        self,
        snapshot_loader: Callable[[], StoreSnapshot],
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Inicializa el servicio.

        Args:
            snapshot_loader: Función que retorna el snapshot actual del almacén
            clock: Función que retorna la hora local actual
        """
        self._snapshot_loader = snapshot_loader
        self._clock = clock

    @profile_function(name="Calcular resumen financiero")
    def get_financial_summary(self, now: Optional[datetime] = None) -> Dict[str, float]:
        """Agregados exactos (sin redondeo) al momento indicado."""
        return compute_financial_summary(self._snapshot_loader(), now or self._clock())

    def get_dashboard(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Resumen redondeado a 2 decimales para mostrar."""
        summary = self.get_financial_summary(now)
        return {key: round(value, 2) for key, value in summary.items()}

    # Accesos directos a cada agregado

    def capital(self) -> float:
        return self.get_financial_summary()['capital']

    def daily_profit(self) -> float:
        return self.get_financial_summary()['daily_profit']

    def monthly_profit(self) -> float:
        return self.get_financial_summary()['monthly_profit']

    def total_revenue(self) -> float:
        return self.get_financial_summary()['total_revenue']

    def cost_of_goods_sold(self) -> float:
        return self.get_financial_summary()['cost_of_goods_sold']

    def total_manual_funds(self) -> float:
        return self.get_financial_summary()['total_manual_funds']

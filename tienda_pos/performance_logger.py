# ==============================================================================
# SISTEMA DE PROFILING INTERNO
# ==============================================================================
# Mide el tiempo de cada request y de las funciones marcadas con
# @profile_function. Escribe logs legibles en LOGS_DIR:
#   performance.log     → todas las rutas, con marca LENTA / MUY LENTA
#   slow_functions.log  → llamadas a funciones sobre el umbral
#
# ACTIVAR/DESACTIVAR: variable de entorno TIENDA_ENABLE_PROFILING
# ==============================================================================

import os
import threading
import time
from datetime import datetime
from functools import wraps

from tienda_pos import config

ENABLE_PROFILING = config.ENABLE_PROFILING

# Umbrales de tiempo (en milisegundos)
THRESHOLD_WARNING = 300
THRESHOLD_CRITICAL = 700

LOGS_DIR = config.LOGS_DIR
PERFORMANCE_LOG = os.path.join(LOGS_DIR, 'performance.log')
SLOW_FUNCTIONS_LOG = os.path.join(LOGS_DIR, 'slow_functions.log')

# Nombres legibles por regla de Flask
ROUTE_NAMES = {
    'GET /dashboard': 'Ver panel principal',
    'GET /products': 'Ver inventario',
    'POST /products': 'Crear producto',
    'GET /products/search': 'Buscar producto',
    'POST /products/image': 'Generar imagen de producto',
    'GET /api/carrito': 'Ver carrito',
    'POST /api/carrito/agregar': 'Agregar al carrito',
    'POST /api/carrito/actualizar': 'Cambiar cantidad en carrito',
    'POST /api/carrito/limpiar': 'Vaciar carrito',
    'POST /api/carrito/confirmar': 'Confirmar venta',
    'GET /sales': 'Ver ventas',
    'GET /receipt/<sale_id>': 'Ver boleta',
    'GET /repairs': 'Ver reparaciones',
    'POST /repairs': 'Registrar reparación',
    'POST /repairs/<repair_id>/status': 'Cambiar estado de reparación',
    'GET /print-jobs': 'Ver impresiones',
    'POST /print-jobs': 'Registrar impresión',
    'GET /ledger': 'Ver caja',
    'POST /funds': 'Agregar fondos',
    'POST /losses': 'Registrar pérdida',
    'GET /audit': 'Ver registro de actividad',
}

_write_lock = threading.Lock()


def _write_log(filepath, content):
    """Escribe contenido a un archivo de log (thread-safe)"""
    try:
        with _write_lock:
            os.makedirs(os.path.dirname(filepath), exist_ok=True)
            with open(filepath, 'a', encoding='utf-8') as f:
                f.write(content)
    except OSError:
        pass  # Silenciar errores de escritura


def _severity(time_ms):
    if time_ms >= THRESHOLD_CRITICAL:
        return 'MUY LENTA'
    if time_ms >= THRESHOLD_WARNING:
        return 'LENTA'
    return 'OK'


def route_name(method, rule):
    """Nombre legible de la ruta; si no está mapeada, 'MÉTODO regla'."""
    key = f"{method} {rule}"
    return ROUTE_NAMES.get(key, key)


def log_request(method, path, rule, time_ms):
    """
    Registra una request en performance.log

    Args:
        method: GET, POST, etc.
        path: Ruta solicitada (/repairs/17/status)
        rule: Regla de Flask (/repairs/<repair_id>/status)
        time_ms: Tiempo en milisegundos
    """
    stamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    _write_log(
        PERFORMANCE_LOG,
        f"[{_severity(time_ms)}] {stamp} | {route_name(method, rule)} | "
        f"{method} {path} | {time_ms:.0f} ms\n"
    )


def init_profiling(app):
    """
    Registra hooks before_request / after_request en la app Flask.

    Uso:
        from tienda_pos.performance_logger import init_profiling
        init_profiling(app)
    """
    if not ENABLE_PROFILING:
        return

    from flask import g, request

    @app.before_request
    def _start_timer():
        g.start_time = time.perf_counter()

    @app.after_request
    def _log_request(response):
        start = g.pop('start_time', None)
        if start is not None:
            elapsed = (time.perf_counter() - start) * 1000
            rule = str(request.url_rule) if request.url_rule else request.path
            log_request(request.method, request.path, rule, elapsed)
        return response


def profile_function(func=None, name=None):
    """
    Decorador: registra en slow_functions.log las llamadas sobre el umbral.

    Uso:
        @profile_function
        def mi_funcion():
            ...

        @profile_function(name="Procesar venta")
        def process_sale():
            ...
    """
    def decorator(fn):
        if not ENABLE_PROFILING:
            return fn

        func_name = name or fn.__name__

        @wraps(fn)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                if elapsed_ms >= THRESHOLD_WARNING:
                    stamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
                    _write_log(
                        SLOW_FUNCTIONS_LOG,
                        f"[{_severity(elapsed_ms)}] {stamp} | {func_name} | {elapsed_ms:.0f} ms\n"
                    )

        return wrapper

    # Permitir uso sin paréntesis: @profile_function
    if func is not None:
        return decorator(func)
    return decorator

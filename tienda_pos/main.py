# ==============================================================================
# API HTTP - Capa de presentación (Flask)
# ==============================================================================
# Expone las operaciones de la tienda como endpoints JSON.
# La lógica de negocio vive en services/; aquí solo se traduce HTTP ↔ dicts.
# El carrito se guarda en la sesión de Flask.
# ==============================================================================

import os

from flask import Flask, Response, request, session
from werkzeug.exceptions import HTTPException

from tienda_pos import config
from tienda_pos.app_container import get_container
from tienda_pos.errors import ImageGenerationError
from tienda_pos.models import CartItem
from tienda_pos.performance_logger import init_profiling

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE='Lax',
)

# Mide rendimiento de rutas. Logs en LOGS_DIR
init_profiling(app)


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _events(result):
    return [e.to_dict() for e in result.get('events', [])]


def _load_cart():
    return [CartItem.from_dict(c) for c in session.get('carrito', [])]


def _save_cart(cart):
    session['carrito'] = [c.to_dict() for c in cart]
    session.modified = True


def _to_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@app.errorhandler(HTTPException)
def _http_error(e):
    """Todas las respuestas de error en JSON."""
    return {'ok': False, 'error': e.description}, e.code


# ═══════════════════════════════════════════════════════════════════════════
# PANEL
# ═══════════════════════════════════════════════════════════════════════════

@app.route('/', methods=['GET'])
def root():
    return {'system': 'tienda_pos', 'status': 'Online'}


@app.route('/dashboard', methods=['GET'])
def dashboard():
    """Resumen financiero + stock bajo + últimas ventas."""
    c = get_container()
    return {
        'ok': True,
        'summary': c.stats_service.get_dashboard(),
        'low_stock': [p.to_dict() for p in c.inventory_service.low_stock_products()],
        'recent_sales': [s.to_dict() for s in c.sales_service.recent_sales()],
    }


# ═══════════════════════════════════════════════════════════════════════════
# INVENTARIO
# ═══════════════════════════════════════════════════════════════════════════

@app.route('/products', methods=['GET'])
def list_products():
    c = get_container()
    category = request.args.get('category')
    if category:
        try:
            products = c.inventory_service.products_by_category(category)
        except ValueError:
            return {'ok': False, 'error': f"Categoría inválida: {category}"}, 400
    else:
        products = c.inventory_service.get_all_products()
    return {'ok': True, 'products': [p.to_dict() for p in products]}


@app.route('/products', methods=['POST'])
def create_product():
    result = get_container().inventory_service.add_product(_json_body())
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400
    return {'ok': True, 'product': result['product'].to_dict(), 'events': _events(result)}, 201


@app.route('/products/search', methods=['GET'])
def search_product():
    """Búsqueda por código escaneado o texto."""
    term = request.args.get('q', '')
    product = get_container().inventory_service.find_product(term)
    if product is None:
        return {'ok': False, 'error': 'Producto no encontrado'}, 404
    return {'ok': True, 'product': product.to_dict()}


@app.route('/products/image', methods=['POST'])
def generate_product_image():
    data = _json_body()
    name = data.get('name', '')
    description = data.get('description', '')
    if not name:
        return {'ok': False, 'error': 'El nombre es obligatorio'}, 400
    try:
        image_url = get_container().image_service.generate(name, description)
    except ImageGenerationError as e:
        return {'ok': False, 'error': str(e)}, 502
    return {'ok': True, 'image_url': image_url}


# ═══════════════════════════════════════════════════════════════════════════
# CARRITO
# ═══════════════════════════════════════════════════════════════════════════

@app.route('/api/carrito', methods=['GET'])
def api_carrito_ver():
    return {'ok': True, **get_container().cart_service.get_cart(_load_cart())}


@app.route('/api/carrito/agregar', methods=['POST'])
def api_carrito_agregar():
    """Agrega una unidad. JSON: {product_id} o {q} (código escaneado)."""
    c = get_container()
    data = _json_body()
    product_id = data.get('product_id')
    if not product_id and data.get('q'):
        product = c.inventory_service.find_product(str(data['q']))
        product_id = product.id if product else None
    if not product_id:
        return {'ok': False, 'error': 'Producto no encontrado'}, 404

    result = c.cart_service.add_item(_load_cart(), str(product_id))
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400
    _save_cart(result['cart'])
    return {'ok': True, **c.cart_service.get_cart(result['cart'])}


@app.route('/api/carrito/actualizar', methods=['POST'])
def api_carrito_actualizar():
    """JSON: {product_id, cart_quantity}. Cantidad 0 elimina la línea."""
    c = get_container()
    data = _json_body()
    quantity = _to_int(data.get('cart_quantity'))
    if quantity is None or not data.get('product_id'):
        return {'ok': False, 'error': 'Datos inválidos'}, 400

    result = c.cart_service.update_quantity(_load_cart(), str(data['product_id']), quantity)
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400
    _save_cart(result['cart'])
    return {'ok': True, **c.cart_service.get_cart(result['cart'])}


@app.route('/api/carrito/limpiar', methods=['POST'])
def api_carrito_limpiar():
    _save_cart([])
    return {'ok': True}


@app.route('/api/carrito/confirmar', methods=['POST'])
def api_carrito_confirmar():
    """Convierte el carrito en venta. Limpia el carrito solo si se registró."""
    cart = _load_cart()
    if not cart:
        return {'ok': False, 'error': 'El carrito está vacío'}, 400

    result = get_container().sales_service.process_sale(cart)
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400

    _save_cart([])
    sale = result['sale']
    return {
        'ok': True,
        'sale': sale.to_dict(),
        'low_stock': result['low_stock'],
        'events': _events(result),
        'receipt_url': f"/receipt/{sale.id}",
    }


# ═══════════════════════════════════════════════════════════════════════════
# VENTAS
# ═══════════════════════════════════════════════════════════════════════════

@app.route('/sales', methods=['GET'])
def list_sales():
    sales = get_container().sales_service.get_all_sales()
    return {'ok': True, 'sales': [s.to_dict() for s in sales]}


@app.route('/receipt/<sale_id>', methods=['GET'])
def receipt_page(sale_id):
    c = get_container()
    sale = c.sales_service.get_sale(sale_id)
    if sale is None:
        return {'ok': False, 'error': 'Venta no encontrada'}, 404
    return Response(c.receipt_service.render(sale), mimetype='text/plain; charset=utf-8')


# ═══════════════════════════════════════════════════════════════════════════
# REPARACIONES E IMPRESIÓN
# ═══════════════════════════════════════════════════════════════════════════

@app.route('/repairs', methods=['GET'])
def list_repairs():
    c = get_container()
    status = request.args.get('status')
    if status:
        try:
            repairs = c.repair_service.repairs_by_status(status)
        except ValueError:
            return {'ok': False, 'error': f"Estado inválido: {status}"}, 400
    else:
        repairs = c.repair_service.get_all_repairs()
    return {'ok': True, 'repairs': [r.to_dict() for r in repairs]}


@app.route('/repairs', methods=['POST'])
def create_repair():
    result = get_container().repair_service.add_repair(_json_body())
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400
    return {'ok': True, 'repair': result['repair'].to_dict(), 'events': _events(result)}, 201


@app.route('/repairs/<repair_id>/status', methods=['POST'])
def change_repair_status(repair_id):
    c = get_container()
    if c.repair_service.get_repair(repair_id) is None:
        return {'ok': False, 'error': 'Reparación no encontrada'}, 404
    result = c.repair_service.update_repair_status(repair_id, _json_body().get('status'))
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400
    return {'ok': True, 'repair': result['repair'].to_dict(), 'events': _events(result)}


@app.route('/print-jobs', methods=['GET'])
def list_print_jobs():
    jobs = get_container().print_service.get_all_print_jobs()
    return {'ok': True, 'print_jobs': [j.to_dict() for j in jobs]}


@app.route('/print-jobs', methods=['POST'])
def create_print_job():
    result = get_container().print_service.add_print_job(_json_body())
    if not result['ok']:
        return {'ok': False, 'error': result['error']}, 400
    return {'ok': True, 'print_job': result['print_job'].to_dict(), 'events': _events(result)}, 201


# ═══════════════════════════════════════════════════════════════════════════
# CAJA
# ═══════════════════════════════════════════════════════════════════════════
# Montos no positivos se ignoran: responden 200 con applied=false.

@app.route('/ledger', methods=['GET'])
def ledger():
    c = get_container()
    return {
        'ok': True,
        'funds': [f.to_dict() for f in c.ledger_service.get_all_funds()],
        'losses': [loss.to_dict() for loss in c.ledger_service.get_all_losses()],
    }


@app.route('/funds', methods=['POST'])
def add_funds():
    result = get_container().ledger_service.add_funds(_json_body().get('amount'))
    return {'ok': True, 'applied': result['ok']}


@app.route('/losses', methods=['POST'])
def add_loss():
    result = get_container().ledger_service.add_loss(_json_body().get('amount'))
    return {'ok': True, 'applied': result['ok']}


# ═══════════════════════════════════════════════════════════════════════════
# AUDITORÍA
# ═══════════════════════════════════════════════════════════════════════════

@app.route('/audit', methods=['GET'])
def audit_log():
    """Sin filtros devuelve los 100 más recientes."""
    audit = get_container().audit_service
    q = request.args.get('q', '')
    log_type = request.args.get('type') or None
    if not q and not log_type:
        return {'ok': True, 'logs': audit.get_recent()}
    return {'ok': True, 'logs': audit.search(q, log_type)}


if __name__ == "__main__":
    # Desarrollo local. En producción usar WSGI (gunicorn, waitress, etc.)
    DEBUG = os.environ.get('FLASK_DEBUG', '0') == '1'
    HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
    PORT = int(os.environ.get('FLASK_PORT', 5000))

    if not DEBUG:
        print(f"\n{'='*50}")
        print(f"  Servidor iniciado en http://{HOST}:{PORT}")
        print(f"  Acceso local: http://localhost:{PORT}")
        print(f"{'='*50}\n")

    app.run(host=HOST, port=PORT, debug=DEBUG)

import logging

import click
from flask import Flask, request, jsonify
from flask_migrate import Migrate

from config import get_config
from constants import DEFAULT_SEARCH_LIMIT, DEFAULT_USDA_SEARCH_LIMIT, MAX_SEARCH_LIMIT, MAX_LENGTHS
from models import db, Ingredient
from services import (
    SQLAlchemyReferenceRepository,
    UsdaClient,
    UsdaError,
    calculate_smart_nutrition,
    search_with_usda_fallback,
    summarize_food,
    sync_ingredient,
)
from utils import PayloadError, parse_nutrition_payload, sanitize_text

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)
logger = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def get_usda_client():
    """
    Return the app's USDA client, or None if no API key is configured.

    The client is created once per app so its hourly request budget
    carries over between requests and CLI calls.
    """
    api_key = app.config.get('USDA_API_KEY')
    if not api_key:
        return None
    client = app.extensions.get('usda')
    if client is None:
        client = UsdaClient(
            api_key,
            base_url=app.config['USDA_BASE_URL'],
            timeout=app.config['USDA_TIMEOUT'],
            rate_limit=app.config['USDA_RATE_LIMIT'],
        )
        app.extensions['usda'] = client
    return client


def error_response(message, status):
    return jsonify({'error': message}), status


# ============================================
# ROUTES - HEALTH
# ============================================

@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


# ============================================
# ROUTES - NUTRITION
# ============================================

@app.route('/api/nutrition/calculate', methods=['POST'])
def nutrition_calculate():
    payload = request.get_json(silent=True)
    try:
        lines, servings = parse_nutrition_payload(
            payload,
            max_ingredients=app.config['MAX_INGREDIENTS'],
            default_servings=app.config['NUTRITION_DEFAULT_SERVINGS'],
        )
    except PayloadError as e:
        return error_response(str(e), 400)

    result = calculate_smart_nutrition(
        lines, servings, repository=SQLAlchemyReferenceRepository(db.session)
    )
    if servings == 0:
        logger.warning('Nutrition calculated with servings=0; per-serving values are not finite')
    return jsonify(result.to_dict())


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@app.route('/api/ingredients/search')
def ingredients_search():
    query = sanitize_text(request.args.get('q'), max_length=MAX_LENGTHS['search_query'])
    if not query:
        return error_response('q is required', 400)

    limit = safe_int(request.args.get('limit'), default=DEFAULT_SEARCH_LIMIT,
                     min_val=1, max_val=MAX_SEARCH_LIMIT)
    rows = search_with_usda_fallback(
        SQLAlchemyReferenceRepository(db.session), query, limit,
        client=get_usda_client(), session=db.session,
    )
    return jsonify({'query': query, 'results': [row.to_dict() for row in rows]})


@app.route('/api/ingredients/usda/search')
def ingredients_usda_search():
    query = sanitize_text(request.args.get('q'), max_length=MAX_LENGTHS['search_query'])
    if not query:
        return error_response('q is required', 400)

    client = get_usda_client()
    if client is None:
        return error_response('USDA_API_KEY is not configured', 503)

    limit = safe_int(request.args.get('limit'), default=DEFAULT_USDA_SEARCH_LIMIT,
                     min_val=1, max_val=MAX_SEARCH_LIMIT)
    try:
        foods = [summarize_food(food) for food in client.search_foods(query, page_size=limit)]
    except UsdaError as e:
        return error_response(str(e), 502)
    return jsonify({'query': query, 'foods': foods})


@app.route('/api/ingredients/sync-usda', methods=['POST'])
def ingredients_sync_usda():
    payload = request.get_json(silent=True) or {}
    name = sanitize_text(payload.get('name') if isinstance(payload, dict) else None,
                         max_length=MAX_LENGTHS['ingredient_item'])
    if not name:
        return error_response('name is required', 400)

    client = get_usda_client()
    if client is None:
        return error_response('USDA_API_KEY is not configured', 503)

    try:
        ingredient = sync_ingredient(client, name, db.session)
    except UsdaError as e:
        db.session.rollback()
        return error_response(str(e), 502)

    if ingredient is None:
        return error_response(f'No USDA data found for "{name}"', 404)
    return jsonify(ingredient.to_dict())


# ============================================
# CLI
# ============================================

@app.cli.command('sync-usda')
@click.argument('names', nargs=-1, required=True)
def sync_usda_command(names):
    """Sync ingredient macros from USDA FoodData Central."""
    client = get_usda_client()
    if client is None:
        raise click.ClickException('USDA_API_KEY is not configured')

    for name in names:
        try:
            ingredient = sync_ingredient(client, name, db.session)
        except UsdaError as e:
            db.session.rollback()
            click.echo(f'FAIL: {name} - {e}')
            continue
        if ingredient is None:
            click.echo(f'MISS: {name}')
        else:
            click.echo(f'OK: {name} -> {ingredient.name} (FDC {ingredient.fdc_id})')


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()
        logger.info('Database ready: %d reference ingredients', db.session.query(Ingredient).count())


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)

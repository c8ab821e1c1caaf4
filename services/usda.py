"""
USDA FoodData Central Service

Client for the FoodData Central API and the sync that copies per-100g macros
for an ingredient into the nutrition reference table.
"""

import logging
import time
from datetime import datetime, timezone

import requests
from sqlalchemy import func

from constants import USDA_NUTRIENT_COLUMNS, USDA_DATA_TYPES, USDA_FALLBACK_SYNC_COUNT

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.nal.usda.gov/fdc/v1'


class UsdaError(Exception):
    """Raised when a FoodData Central request fails or the rate limit is hit."""
    pass


class UsdaClient:
    """
    Minimal FoodData Central API client.

    Args:
        api_key: FDC API key
        base_url: API root (default the public v1 endpoint)
        timeout: Request timeout in seconds (default 10)
        rate_limit: Maximum requests per hour (default 1000)
        session: Optional requests.Session (injected in tests)
    """

    def __init__(self, api_key, base_url=DEFAULT_BASE_URL, timeout=10, rate_limit=1000, session=None):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.rate_limit = rate_limit
        self.session = session or requests.Session()
        self._request_count = 0
        self._window_start = time.monotonic()

    def _check_rate_limit(self):
        if time.monotonic() - self._window_start >= 3600:
            self._request_count = 0
            self._window_start = time.monotonic()
        if self._request_count >= self.rate_limit:
            raise UsdaError('USDA API rate limit exceeded. Try again in an hour.')

    def _get(self, endpoint, params=None):
        self._check_rate_limit()

        query = {'api_key': self.api_key}
        query.update(params or {})
        try:
            response = self.session.get(f"{self.base_url}{endpoint}", params=query, timeout=self.timeout)
            self._request_count += 1
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning('USDA request %s failed', endpoint, exc_info=True)
            raise UsdaError(f"USDA request failed: {e}") from e

    def search_foods(self, query, data_types=USDA_DATA_TYPES, page_size=5, page_number=1):
        """Search foods by name. Returns the list of food dicts (may be empty)."""
        data = self._get('/foods/search', {
            'query': query,
            'dataType': ','.join(data_types),
            'pageSize': page_size,
            'pageNumber': page_number,
        })
        return data.get('foods') or []

    def get_food(self, fdc_id):
        """Get full details for one food by FDC id."""
        return self._get(f"/food/{fdc_id}")


def _nutrient_id_and_amount(entry):
    """Read (id, amount) from either the details or the search nutrient shape."""
    nutrient = entry.get('nutrient')
    if isinstance(nutrient, dict):
        return nutrient.get('id'), entry.get('amount')
    return entry.get('nutrientId'), entry.get('value')


def extract_macros(food):
    """
    Extract per-100g macros from a FoodData Central food.

    Returns a dict keyed by reference column name. Macros the food doesn't
    report are left out.

    Raises:
        UsdaError: If a nutrient amount is not a number
    """
    macros = {}
    for entry in food.get('foodNutrients') or []:
        nutrient_id, amount = _nutrient_id_and_amount(entry)
        column = USDA_NUTRIENT_COLUMNS.get(nutrient_id)
        if column and amount is not None and column not in macros:
            try:
                macros[column] = float(amount)
            except (TypeError, ValueError) as e:
                raise UsdaError(f"Invalid amount {amount!r} for nutrient {nutrient_id}") from e
    return macros


def summarize_food(food):
    """Compact view of a FoodData Central search hit with its per-100g macros."""
    category = food.get('foodCategory')
    if isinstance(category, dict):
        category = category.get('description')
    return {
        'fdcId': food.get('fdcId'),
        'description': food.get('description'),
        'dataType': food.get('dataType'),
        'foodCategory': category,
        'macros': extract_macros(food),
    }


def sync_ingredient(client, name, session):
    """
    Sync one ingredient with USDA data.

    Searches FoodData Central, fetches the first hit and stores its macros
    on the ingredient row with the same name (case-insensitive). A new row
    named after the USDA description is created if none exists.

    Args:
        client: UsdaClient
        name: Ingredient name to search for
        session: SQLAlchemy session

    Returns:
        The stored Ingredient, or None if USDA has no match

    Raises:
        UsdaError: If a USDA request fails or returns malformed data
    """
    # models imports services.types, so import lazily
    from models import Ingredient

    foods = client.search_foods(name)
    if not foods:
        logger.info('No USDA data found for ingredient: %s', name)
        return None

    fdc_id = foods[0].get('fdcId')
    if fdc_id is None:
        raise UsdaError(f"USDA search hit for {name!r} has no fdcId")
    food = client.get_food(fdc_id)
    macros = extract_macros(food)

    # Plain equality, so '%' and '_' in the name are not wildcards
    ingredient = (
        session.query(Ingredient)
        .filter(func.lower(Ingredient.name) == name.lower())
        .first()
    )
    if ingredient is None:
        ingredient = Ingredient(name=food.get('description') or name)
        session.add(ingredient)

    ingredient.fdc_id = food.get('fdcId')
    category = food.get('foodCategory')
    if isinstance(category, dict):
        category = category.get('description')
    if category:
        ingredient.category = category[:50]
    for column in USDA_NUTRIENT_COLUMNS.values():
        setattr(ingredient, column, macros.get(column))
    ingredient.usda_sync_date = datetime.now(timezone.utc).replace(tzinfo=None)

    session.commit()
    logger.info('Synced ingredient %r with USDA FDC ID %s', name, ingredient.fdc_id)
    return ingredient


def search_with_usda_fallback(repository, query, limit, client=None, session=None):
    """
    Search the reference table, topping it up from USDA when results are short.

    If the local search returns fewer than `limit` rows and a client is
    available, the top USDA hits for the query are synced into the table
    and the local search runs again. USDA failures fall back to the local
    results.

    Args:
        repository: ReferenceRepository over the reference table
        query: Search text
        limit: Maximum number of rows
        client: Optional UsdaClient; without one only the local search runs
        session: SQLAlchemy session the sync writes to

    Returns:
        List of ReferenceIngredient
    """
    results = repository.search(query, limit)
    if len(results) >= limit or client is None:
        return results

    try:
        foods = client.search_foods(query)
        for food in foods[:USDA_FALLBACK_SYNC_COUNT]:
            description = food.get('description')
            if description:
                sync_ingredient(client, description, session)
    except UsdaError:
        logger.warning('USDA fallback search failed for %r', query, exc_info=True)
        session.rollback()
        return results

    return repository.search(query, limit)

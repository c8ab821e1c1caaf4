"""
Ingredient Matching Constants

Synonyms, keyword rules and thresholds used to match recipe ingredient
names against the nutrition reference table.
"""

# Common recipe phrasing (lowercase) -> reference-name fragments to search for
INGREDIENT_SYNONYMS = {
    'ripe tomatoes': ['Tomatoes, red, ripe', 'tomatoes raw', 'tomato raw'],
    'red onion': ['Onions, red', 'onion, red', 'onions raw'],
    'olive oil': ['OLIVE OIL', 'oil olive'],
    'fresh basil': ['Basil, fresh', 'basil, sweet, fresh'],
    'mozzarella': ['Cheese, mozzarella', 'MOZZARELLA'],
    'balsamic vinegar': ['BALSAMIC VINAIGRETTE', 'balsamic'],
    'salt': ['SALT'],
    'black pepper': ['Spices, pepper, black', 'pepper, black'],
    'chicken breast': ['Chicken, breast, meat only', 'chicken, broilers'],
    'garlic': ['Garlic, raw', 'garlic cloves'],
    'butter': ['Butter, NFS', 'Butter, stick'],
    'parmesan cheese': ['PARMESAN CHEESE', 'parmesan'],
    'white onion': ['Onions, raw', 'onion raw'],
    'yellow onion': ['Onions, raw', 'onion raw'],
    'vegetable oil': ['Oil,'],
    'coconut oil': ['Oil,'],
    'avocado oil': ['Oil,'],
}

# Keywords that earn a bonus when both names mention them
IMPORTANT_WORDS = ('chicken', 'beef', 'oil', 'cheese', 'tomato', 'onion', 'butter')
IMPORTANT_WORD_BONUS = 0.1

# Wrong-type rules: (input terms, wrong candidate terms, penalty)
WRONG_TYPE_RULES = [
    (('oil',), ('fish', 'sardine', 'whale', 'mayonnaise'), 0.6),
    (('salt',), ('nuts', 'beans', 'meat', 'caramel', 'gelato'), 0.5),
    (('butter',), ('butterbur', 'plant', 'vegetable'), 0.7),
    (('vinegar',), ('wine', 'alcohol'), 0.4),
]

# Words this short are ignored in word-overlap scoring
MIN_WORD_LENGTH = 3

# Repository row caps per query
SYNONYM_SEARCH_LIMIT = 5
FUZZY_SEARCH_LIMIT = 15

# A synonym hit at or above this score skips the fuzzy search
SYNONYM_CONFIDENCE = 0.8

# Candidates below this score never enter the pool
MIN_CANDIDATE_SIMILARITY = 0.6

# Matches below this confidence are reported as unmatched
MIN_MATCH_CONFIDENCE = 0.5

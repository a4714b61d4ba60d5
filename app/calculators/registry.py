"""
Calculator Registry - Central catalog of every category and calculator on the site.

To add a new calculator:
1. Add a form class to the category's forms.py
2. Add the formula (pure function) to the category's formulas module
3. Add a Calculator entry to the category's catalog.py CALCULATORS list

To add a new category, create its package with the three modules above,
add an entry to CATEGORIES and import its catalog below.
"""

from app.calculators.conversions import catalog as conversions
from app.calculators.cricket import catalog as cricket
from app.calculators.everyday import catalog as everyday
from app.calculators.finance import catalog as finance
from app.calculators.fun_games import catalog as fun_games
from app.calculators.health_fitness import catalog as health_fitness
from app.calculators.home_improvement import catalog as home_improvement

CATEGORIES = [
    {
        'slug': 'finance',
        'name': 'Finance',
        'description': 'Loans, investing, bonds, business ratios and personal finance',
        'icon': '💰',
        'order': 1
    },
    {
        'slug': 'health-fitness',
        'name': 'Health & Fitness',
        'description': 'Body measurements, heart rate, metabolism and lab values',
        'icon': '❤️',
        'order': 2
    },
    {
        'slug': 'cricket',
        'name': 'Cricket',
        'description': 'Averages, strike rates, run rates and fantasy points',
        'icon': '🏏',
        'order': 3
    },
    {
        'slug': 'conversions',
        'name': 'Conversions',
        'description': 'Clothing, shoe, ring, hat and glove sizes, height and foot length',
        'icon': '🔄',
        'order': 4
    },
    {
        'slug': 'home-improvement',
        'name': 'Home Improvement',
        'description': 'Paint, flooring, framing, decking, lighting, plumbing and garden projects',
        'icon': '🏠',
        'order': 5
    },
    {
        'slug': 'everyday',
        'name': 'Everyday',
        'description': 'Dates, batteries, travel planning and genetics',
        'icon': '📅',
        'order': 6
    },
    {
        'slug': 'fun-games',
        'name': 'Fun & Games',
        'description': 'Love, friendship, name and zodiac compatibility, just for fun',
        'icon': '🎉',
        'order': 7
    },
]

CATALOGS = [finance, health_fitness, cricket, conversions, home_improvement, everyday, fun_games]


def _collect(catalogs):
    calculators = {}
    known = {category['slug'] for category in CATEGORIES}
    for catalog in catalogs:
        for calculator in catalog.CALCULATORS:
            if calculator.slug in calculators:
                raise ValueError(f"Duplicate calculator slug: {calculator.slug}")
            if calculator.category not in known:
                raise ValueError(f"{calculator.slug} has unknown category {calculator.category}")
            calculators[calculator.slug] = calculator
    return calculators


CALCULATORS = _collect(CATALOGS)


def get_all_categories():
    """
    Get all categories sorted by display order, each with its calculator count.

    Returns:
        list: Category dicts with a 'count' key added
    """
    categories = []
    for category in sorted(CATEGORIES, key=lambda x: x['order']):
        category_copy = category.copy()
        category_copy['count'] = len(get_calculators_for_category(category['slug']))
        categories.append(category_copy)
    return categories


def get_category(slug):
    return next((c for c in CATEGORIES if c['slug'] == slug), None)


def get_calculator(slug):
    return CALCULATORS.get(slug)


def get_calculator_in_category(category_slug, slug):
    """Like get_calculator, but None unless the calculator belongs to category_slug."""
    calculator = CALCULATORS.get(slug)
    if calculator is None or calculator.category != category_slug:
        return None
    return calculator


def get_calculators_for_category(category_slug):
    return [c for c in CALCULATORS.values() if c.category == category_slug]


def get_related(calculator, limit=4):
    """
    Calculators to suggest next to ``calculator``.

    Declared related slugs come first, then the rest of the same category
    fills up to ``limit``.
    """
    related = []
    for slug in calculator.related:
        other = CALCULATORS.get(slug)
        if other is not None and other is not calculator and other not in related:
            related.append(other)
    for other in get_calculators_for_category(calculator.category):
        if len(related) >= limit:
            break
        if other is not calculator and other not in related:
            related.append(other)
    return related[:limit]


def search(query, category=None):
    """
    Case-insensitive substring search on name and description.

    Args:
        query (str): Text to look for. Empty returns everything in scope.
        category (str): Optional category slug to restrict the search to

    Returns:
        list: Matching calculators in catalog order
    """
    scope = get_calculators_for_category(category) if category else list(CALCULATORS.values())
    needle = (query or '').strip().lower()
    if not needle:
        return scope
    return [
        c for c in scope
        if needle in c.name.lower() or needle in c.description.lower()
    ]


def get_featured(slugs):
    return [CALCULATORS[slug] for slug in slugs if slug in CALCULATORS]

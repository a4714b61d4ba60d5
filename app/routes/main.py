from flask import Blueprint, abort, current_app, jsonify, render_template, request

from app.calculators.registry import (
    get_all_categories,
    get_calculators_for_category,
    get_category,
    get_featured,
    search as search_calculators,
)
from app.utils import schema

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    categories = get_all_categories()
    featured = get_featured(current_app.config.get('FEATURED_CALCULATORS', []))
    return render_template(
        'index.html',
        categories=categories,
        featured=featured,
        structured_data=[schema.website_schema(), schema.organization_schema()],
    )

@main_bp.route('/calculators')
def all_calculators():
    groups = [
        (category, get_calculators_for_category(category['slug']))
        for category in get_all_categories()
    ]
    return render_template(
        'all_calculators.html',
        groups=groups,
        structured_data=[schema.listing_schema()],
    )

@main_bp.route('/category/<category_slug>')
def category(category_slug):
    category = get_category(category_slug)
    if category is None:
        abort(404)
    query = request.args.get('q', '').strip()
    calculators = search_calculators(query, category=category_slug)
    return render_template(
        'category.html',
        category=category,
        calculators=calculators,
        query=query,
        structured_data=[schema.category_schema(category, calculators)],
    )

@main_bp.route('/search')
def search():
    query = request.args.get('q', '').strip()
    results = search_calculators(query) if query else []
    return render_template('search.html', query=query, results=results)

@main_bp.app_errorhandler(404)
def page_not_found(e):
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Not found'}), 404
    return render_template('404.html'), 404

from flask import Blueprint, abort, render_template, request

from app.calculators.registry import get_calculator, get_category
from app.learning_hub.articles import get_article, get_articles

learning_hub_bp = Blueprint('learning_hub', __name__)

@learning_hub_bp.route('/', strict_slashes=False)
def index():
    category_slug = request.args.get('category')
    if category_slug and get_category(category_slug) is None:
        abort(404)
    return render_template(
        'learning_hub/index.html',
        articles=get_articles(category_slug),
        category=get_category(category_slug) if category_slug else None,
    )

@learning_hub_bp.route('/<slug>')
def article(slug):
    article = get_article(slug)
    if article is None:
        abort(404)
    related = [c for c in (get_calculator(s) for s in article['related']) if c is not None]
    return render_template('learning_hub/article.html', article=article, related=related)

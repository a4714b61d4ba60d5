"""
Calculator pages: one GET/POST page per calculator under its category.
"""

import logging

from flask import Blueprint, abort, redirect, render_template, request, url_for

from app.calculators.registry import get_calculator, get_calculator_in_category, get_category, get_related
from app.utils import schema
from app.utils.logging import log_calculation

logger = logging.getLogger(__name__)

calculators_bp = Blueprint('calculators', __name__)


@calculators_bp.route('/<category_slug>/<slug>', methods=['GET', 'POST'])
def calculator_page(category_slug, slug):
    calculator = get_calculator_in_category(category_slug, slug)
    if calculator is None:
        moved = get_calculator(slug)
        if moved is None:
            abort(404)
        return redirect(url_for('calculators.calculator_page',
                                category_slug=moved.category, slug=slug), code=301)

    form = calculator.form_class()
    result = None
    if form.validate_on_submit():
        result = calculator.compute(**calculator.inputs(form))
        log_calculation(calculator, 'web')
    elif request.method == 'POST':
        logger.debug("Validation failed for %s: %s", calculator.slug, sorted(form.errors))

    return render_template(
        'calculator.html',
        calculator=calculator,
        category=get_category(calculator.category),
        form=form,
        result=result,
        related=get_related(calculator),
        structured_data=[
            schema.calculator_schema(calculator),
            schema.faq_schema(calculator),
            schema.howto_schema(calculator),
            schema.breadcrumb_schema([
                ('Home', '/'),
                (get_category(calculator.category)['name'], f"/category/{calculator.category}"),
                (calculator.name, calculator.url),
            ]),
        ],
    )

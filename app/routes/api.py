"""
JSON API over the calculator catalog.

POST bodies are flat JSON objects keyed by field name. They go through the
same WTForms validation as the HTML pages.
"""

import logging

from flask import Blueprint, abort, jsonify, request
from werkzeug.datastructures import MultiDict

from app.calculators.registry import CALCULATORS, get_calculator, get_category
from app.utils.logging import log_calculation

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


def json_to_formdata(payload):
    """
    Turn a JSON object into form data WTForms understands.

    Booleans become 'y' or are left out, lists become comma-separated text
    and everything else is sent as a string.
    """
    data = MultiDict()
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, bool):
            if value:
                data.add(key, 'y')
        elif isinstance(value, (list, tuple)):
            data.add(key, ', '.join(str(v) for v in value))
        else:
            data.add(key, str(value))
    return data


def _summary(calculator):
    return {
        'slug': calculator.slug,
        'name': calculator.name,
        'category': calculator.category,
        'description': calculator.description,
        'url': calculator.url,
    }


@api_bp.route('/calculators')
def list_calculators():
    category = request.args.get('category')
    if category and get_category(category) is None:
        return jsonify({'error': f"Unknown category: {category}"}), 404
    calculators = [
        _summary(c) for c in CALCULATORS.values()
        if not category or c.category == category
    ]
    return jsonify({'calculators': calculators, 'count': len(calculators)})


@api_bp.route('/calculators/<slug>', methods=['GET'])
def describe_calculator(slug):
    calculator = get_calculator(slug)
    if calculator is None:
        abort(404)
    return jsonify(calculator.describe())


@api_bp.route('/calculators/<slug>', methods=['POST'])
def run_calculator(slug):
    calculator = get_calculator(slug)
    if calculator is None:
        abort(404)

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    result, errors = calculator.evaluate(json_to_formdata(payload))
    if errors:
        return jsonify({'errors': errors}), 400

    log_calculation(calculator, 'api')
    return jsonify({'calculator': calculator.slug, 'result': result})

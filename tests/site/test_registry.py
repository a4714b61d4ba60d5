"""
Catalog-wide checks: every calculator is reachable, consistent and wired to
a form whose fields match its formula.
"""
import inspect
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.base import SKIPPED_FIELDS
from app.calculators.registry import (
    CATEGORIES,
    CALCULATORS,
    get_all_categories,
    get_calculator,
    get_calculator_in_category,
    get_calculators_for_category,
    get_featured,
    get_related,
    search,
)
from app.learning_hub.articles import ARTICLES, get_article, get_articles


class TestCatalog(unittest.TestCase):

    def test_every_category_has_calculators(self):
        for category in get_all_categories():
            self.assertGreater(category['count'], 0, category['slug'])

    def test_categories_sorted_by_order(self):
        orders = [c['order'] for c in get_all_categories()]
        self.assertEqual(orders, sorted(orders))

    def test_counts_add_up(self):
        self.assertEqual(sum(c['count'] for c in get_all_categories()), len(CALCULATORS))

    def test_related_slugs_exist(self):
        for calculator in CALCULATORS.values():
            for slug in calculator.related:
                self.assertIn(slug, CALCULATORS, f"{calculator.slug} -> {slug}")

    def test_article_related_slugs_exist(self):
        for article in ARTICLES:
            for slug in article['related']:
                self.assertIn(slug, CALCULATORS, f"{article['slug']} -> {slug}")

    def test_outputs_have_labels_and_known_kinds(self):
        kinds = {'number', 'integer', 'currency', 'percent', 'text', 'list', 'table'}
        for calculator in CALCULATORS.values():
            self.assertTrue(calculator.outputs, calculator.slug)
            for output in calculator.outputs:
                self.assertIn(output.kind, kinds, f"{calculator.slug}.{output.key}")
                if output.kind == 'table':
                    self.assertTrue(output.columns, f"{calculator.slug}.{output.key}")

    def test_form_fields_match_formula_arguments(self):
        app = create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})
        with app.app_context():
            for calculator in CALCULATORS.values():
                form = calculator.build_form()
                fields = {name for name in form._fields if name not in SKIPPED_FIELDS}
                params = inspect.signature(calculator.compute).parameters
                self.assertLessEqual(fields, set(params), calculator.slug)
                required = {
                    name for name, p in params.items()
                    if p.default is inspect.Parameter.empty
                }
                self.assertLessEqual(required, fields, calculator.slug)


class TestLookups(unittest.TestCase):

    def test_get_calculator(self):
        self.assertEqual(get_calculator('bmi').category, 'health-fitness')
        self.assertIsNone(get_calculator('does-not-exist'))

    def test_get_calculator_in_category(self):
        self.assertIsNotNone(get_calculator_in_category('finance', 'loan-emi'))
        self.assertIsNone(get_calculator_in_category('cricket', 'loan-emi'))

    def test_get_related_fills_from_category(self):
        calculator = get_calculator('bmi')
        related = get_related(calculator, limit=4)
        self.assertEqual(len(related), 4)
        self.assertNotIn(calculator, related)
        self.assertEqual(related[0].slug, calculator.related[0])

    def test_search(self):
        slugs = [c.slug for c in search('strike')]
        self.assertIn('strike-rate', slugs)
        self.assertEqual(search('', category='fun-games'), get_calculators_for_category('fun-games'))
        self.assertEqual(search('zzzz-no-match'), [])

    def test_search_within_category(self):
        for calculator in search('rate', category='cricket'):
            self.assertEqual(calculator.category, 'cricket')

    def test_featured_skips_unknown(self):
        featured = get_featured(['bmi', 'nope', 'loan-emi'])
        self.assertEqual([c.slug for c in featured], ['bmi', 'loan-emi'])

    def test_category_slugs_unique(self):
        slugs = [c['slug'] for c in CATEGORIES]
        self.assertEqual(len(slugs), len(set(slugs)))

    def test_articles(self):
        self.assertEqual(len(get_articles()), 4)
        self.assertEqual(get_article('apr-vs-apy')['category'], 'finance')
        self.assertIsNone(get_article('missing'))
        self.assertTrue(all(a['category'] == 'finance' for a in get_articles('finance')))


if __name__ == '__main__':
    unittest.main()

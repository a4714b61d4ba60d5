"""
Page tests for the HTML site, using the Flask test client.
"""
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app


def _create_test_app():
    return create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})


class SiteTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()

    def get_text(self, path, **kwargs):
        response = self.client.get(path, **kwargs)
        return response, response.get_data(as_text=True)


class TestListingPages(SiteTestCase):

    def test_index(self):
        response, html = self.get_text('/')
        self.assertEqual(response.status_code, 200)
        self.assertIn('Compound Interest', html)
        self.assertIn('application/ld+json', html)

    def test_all_calculators(self):
        response, html = self.get_text('/calculators')
        self.assertEqual(response.status_code, 200)
        self.assertIn('Batting Average', html)
        self.assertIn('Shoe Size', html)

    def test_category_page(self):
        response, html = self.get_text('/category/finance')
        self.assertEqual(response.status_code, 200)
        self.assertIn('/category/finance/loan-emi', html)
        self.assertNotIn('/category/cricket/batting-average', html)

    def test_category_filter(self):
        response, html = self.get_text('/category/finance?q=bond')
        self.assertEqual(response.status_code, 200)
        self.assertIn('/category/finance/bond-price', html)
        self.assertNotIn('/category/finance/loan-emi', html)

    def test_unknown_category(self):
        response, html = self.get_text('/category/astrology')
        self.assertEqual(response.status_code, 404)
        self.assertIn('Page not found', html)

    def test_search(self):
        response, html = self.get_text('/search?q=bmi')
        self.assertEqual(response.status_code, 200)
        self.assertIn('/category/health-fitness/bmi', html)

    def test_empty_search(self):
        response, _ = self.get_text('/search')
        self.assertEqual(response.status_code, 200)


class TestCalculatorPage(SiteTestCase):

    def test_get_renders_form(self):
        response, html = self.get_text('/category/health-fitness/bmi')
        self.assertEqual(response.status_code, 200)
        self.assertIn('name="weight"', html)
        self.assertIn('name="height"', html)
        self.assertNotIn('id="result"', html)

    def test_post_shows_result(self):
        response = self.client.post('/category/health-fitness/bmi', data={
            'unit_system': 'metric',
            'weight': '70',
            'height': '175',
        })
        html = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn('id="result"', html)
        self.assertIn('22.86', html)
        self.assertIn('Normal', html)

    def test_post_invalid_shows_errors(self):
        response = self.client.post('/category/health-fitness/bmi', data={
            'unit_system': 'metric',
            'weight': 'heavy',
        })
        html = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn('class="errors"', html)
        self.assertNotIn('id="result"', html)

    def test_post_infinite_value_shows_errors(self):
        response = self.client.post('/category/home-improvement/staircase', data={
            'unit': 'inches',
            'total_rise': 'inf',
        })
        html = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn('Enter a finite number.', html)
        self.assertNotIn('id="result"', html)

    def test_post_table_output(self):
        response = self.client.post('/category/finance/compound-interest', data={
            'principal': '1000',
            'annual_rate': '10',
            'years': '3',
            'compounds_per_year': '1',
        })
        html = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn('<table>', html)

    def test_wrong_category_redirects(self):
        response = self.client.get('/category/cricket/bmi')
        self.assertEqual(response.status_code, 301)
        self.assertTrue(response.headers['Location'].endswith('/category/health-fitness/bmi'))

    def test_unknown_calculator(self):
        response, html = self.get_text('/category/finance/lottery-odds')
        self.assertEqual(response.status_code, 404)
        self.assertIn('Page not found', html)


class TestLearningHub(SiteTestCase):

    def test_index(self):
        response, html = self.get_text('/learning-hub/')
        self.assertEqual(response.status_code, 200)
        self.assertIn('What is Compound Interest?', html)
        self.assertIn('What is BMI and Why It Matters', html)

    def test_index_without_trailing_slash(self):
        response, html = self.get_text('/learning-hub')
        self.assertEqual(response.status_code, 200)
        self.assertIn('What is Compound Interest?', html)

    def test_index_by_category(self):
        response, html = self.get_text('/learning-hub/?category=health-fitness')
        self.assertEqual(response.status_code, 200)
        self.assertIn('What is BMI and Why It Matters', html)
        self.assertNotIn('Common Loan Mistakes', html)

    def test_index_unknown_category(self):
        response, _ = self.get_text('/learning-hub/?category=astrology')
        self.assertEqual(response.status_code, 404)

    def test_article(self):
        response, html = self.get_text('/learning-hub/apr-vs-apy')
        self.assertEqual(response.status_code, 200)
        self.assertIn('<table>', html)
        self.assertIn('/category/finance/loan-emi', html)

    def test_unknown_article(self):
        response, _ = self.get_text('/learning-hub/not-an-article')
        self.assertEqual(response.status_code, 404)


if __name__ == '__main__':
    unittest.main()

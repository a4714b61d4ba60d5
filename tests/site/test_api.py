"""
Tests for the JSON API under /api.
"""
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.registry import CALCULATORS
from app.routes.api import json_to_formdata


def _create_test_app():
    # CSRF stays on: the API blueprint is exempt
    return create_app({'TESTING': True})


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()


class TestListCalculators(ApiTestCase):

    def test_list_all(self):
        response = self.client.get('/api/calculators')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['count'], len(CALCULATORS))
        self.assertEqual(len(data['calculators']), data['count'])
        slugs = {c['slug'] for c in data['calculators']}
        self.assertIn('bmi', slugs)
        self.assertIn('net-run-rate', slugs)

    def test_list_by_category(self):
        response = self.client.get('/api/calculators?category=cricket')
        data = response.get_json()
        self.assertEqual(response.status_code, 200)
        self.assertGreater(data['count'], 0)
        self.assertTrue(all(c['category'] == 'cricket' for c in data['calculators']))

    def test_list_unknown_category(self):
        response = self.client.get('/api/calculators?category=astrology')
        self.assertEqual(response.status_code, 404)
        self.assertIn('error', response.get_json())


class TestDescribeCalculator(ApiTestCase):

    def test_describe(self):
        response = self.client.get('/api/calculators/loan-emi')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['slug'], 'loan-emi')
        self.assertEqual(data['category'], 'finance')
        names = [f['name'] for f in data['fields']]
        self.assertEqual(names, ['principal', 'annual_rate', 'years'])
        self.assertIn('emi', [o['key'] for o in data['outputs']])

    def test_describe_unknown(self):
        response = self.client.get('/api/calculators/lottery-odds')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {'error': 'Not found'})


class TestRunCalculator(ApiTestCase):

    def test_run(self):
        response = self.client.post('/api/calculators/loan-emi', json={
            'principal': 100000,
            'annual_rate': 12,
            'years': 1,
        })
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['calculator'], 'loan-emi')
        self.assertAlmostEqual(data['result']['emi'], 8884.88, places=2)

    def test_run_with_list_input(self):
        response = self.client.post('/api/calculators/npv', json={
            'discount_rate': 10,
            'cash_flows': [-1000, 300, 400, 500, 200],
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn('npv', response.get_json()['result'])

    def test_run_validation_errors(self):
        response = self.client.post('/api/calculators/loan-emi', json={'principal': 100000})
        self.assertEqual(response.status_code, 400)
        errors = response.get_json()['errors']
        self.assertIn('annual_rate', errors)
        self.assertIn('years', errors)

    def test_run_rejects_non_object(self):
        response = self.client.post('/api/calculators/loan-emi', json=[1, 2, 3])
        self.assertEqual(response.status_code, 400)
        self.assertIn('error', response.get_json())

    def test_run_rejects_missing_body(self):
        response = self.client.post('/api/calculators/loan-emi', data='not json',
                                    content_type='text/plain')
        self.assertEqual(response.status_code, 400)

    def test_run_unknown(self):
        response = self.client.post('/api/calculators/lottery-odds', json={})
        self.assertEqual(response.status_code, 404)

    def test_unknown_api_path(self):
        response = self.client.get('/api/nothing-here')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {'error': 'Not found'})


class TestNonFiniteInput(ApiTestCase):

    PAYLOADS = {
        'paint-coverage': {'unit': 'feet', 'length': 'inf', 'width': 10, 'height': 8, 'coats': 2, 'coverage': 350},
        'staircase': {'unit': 'inches', 'total_rise': 'inf'},
        'wallpaper-rolls': {'wall_height': 8, 'wall_width': 'inf', 'roll_length': 33, 'roll_width': 1.75},
        'battery-life': {'capacity_mah': 'inf', 'current_draw_ma': 100},
        'fantasy-points': {'runs': 50, 'balls': 30, 'wickets': 1, 'overs': 'inf', 'runs_conceded': 30,
                           'maidens': 0, 'catches': 0, 'stumpings': 0, 'run_outs': 0, 'bonus_points': 0},
        'ring-size': {'unit': 'circumference', 'value': 'nan'},
        'npv': {'discount_rate': 10, 'cash_flows': '-1000, inf'},
    }

    def test_infinity_and_nan_are_rejected(self):
        for slug, payload in self.PAYLOADS.items():
            response = self.client.post(f'/api/calculators/{slug}', json=payload)
            self.assertEqual(response.status_code, 400, slug)
            self.assertIn('errors', response.get_json(), slug)

    def test_overflowing_json_number_is_rejected(self):
        body = '{"unit": "feet", "length": 1e400, "width": 10, "height": 8, "coats": 2, "coverage": 350}'
        response = self.client.post('/api/calculators/paint-coverage', data=body,
                                    content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertIn('length', response.get_json()['errors'])

    def test_huge_ring_measurement_is_rejected(self):
        response = self.client.post('/api/calculators/ring-size',
                                    json={'unit': 'diameter', 'value': '1e308'})
        self.assertEqual(response.status_code, 400)

    def test_bond_yield_with_extreme_price(self):
        response = self.client.post('/api/calculators/bond-yield-to-maturity', json={
            'face_value': 1000,
            'coupon_rate': 5,
            'years': 100,
            'price': 0.01,
            'payments_per_year': 12,
        })
        self.assertEqual(response.status_code, 200)
        self.assertAlmostEqual(response.get_json()['result']['yield_to_maturity'], 200)


class TestJsonToFormdata(unittest.TestCase):

    def test_conversion(self):
        data = json_to_formdata({
            'weight': 70,
            'smoker': True,
            'diabetes': False,
            'hip': None,
            'cash_flows': [100, 200.5],
        })
        self.assertEqual(data.get('weight'), '70')
        self.assertEqual(data.get('smoker'), 'y')
        self.assertNotIn('diabetes', data)
        self.assertNotIn('hip', data)
        self.assertEqual(data.get('cash_flows'), '100, 200.5')


if __name__ == '__main__':
    unittest.main()

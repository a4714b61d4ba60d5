"""
Validation tests for health and fitness forms.
"""
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.registry import get_calculator


def _create_test_app():
    return create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})


class HealthFormTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        self.ctx.pop()

    def evaluate(self, slug, **data):
        return get_calculator(slug).evaluate({k: str(v) for k, v in data.items()})


class TestHealthForms(HealthFormTestCase):

    def test_bmi_valid(self):
        result, errors = self.evaluate('bmi', unit_system='metric', weight=70, height=175)
        self.assertEqual(errors, {})
        self.assertEqual(result['category'], 'Normal weight')

    def test_bmi_rejects_out_of_range(self):
        result, errors = self.evaluate('bmi', weight=0, height=175)
        self.assertIsNone(result)
        self.assertIn('weight', errors)

    def test_body_fat_women_need_hip(self):
        result, errors = self.evaluate('body-fat', sex='female', height=165, neck=32, waist=70)
        self.assertIsNone(result)
        self.assertIn('hip', errors)

    def test_body_fat_men_need_waist_above_neck(self):
        result, errors = self.evaluate('body-fat', sex='male', height=178, neck=40, waist=38)
        self.assertIn('waist', errors)

    def test_sleep_asleep_within_bed_time(self):
        result, errors = self.evaluate('sleep-efficiency', time_in_bed=7, time_asleep=8)
        self.assertIn('time_asleep', errors)

    def test_sleep_bad_number_is_a_field_error(self):
        result, errors = self.evaluate('sleep-efficiency', time_in_bed=7, time_asleep='late')
        self.assertIn('time_asleep', errors)

    def test_blood_pressure_diastolic_below_systolic(self):
        result, errors = self.evaluate('blood-pressure', systolic=120, diastolic=130, age=40, sex='male')
        self.assertIn('diastolic', errors)

    def test_blood_pressure_checkboxes(self):
        result, errors = self.evaluate('blood-pressure', systolic=118, diastolic=75, age=40,
                                       sex='female', diabetes='y')
        self.assertEqual(errors, {})
        self.assertEqual(result['risk_score'], 2)

    def test_running_pace_needs_distance(self):
        result, errors = self.evaluate('running-pace', solve_for='pace', minutes=50)
        self.assertIn('distance', errors)

    def test_running_pace_valid(self):
        result, errors = self.evaluate('running-pace', solve_for='pace', distance=10, minutes=50)
        self.assertEqual(errors, {})
        self.assertEqual(result['pace'], '5:00 per unit')


if __name__ == '__main__':
    unittest.main()

"""
Unit tests for the size and measurement converters.
"""
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.conversions import formulas
from app.calculators.registry import get_calculator


class TestShoeSize(unittest.TestCase):

    def test_mens_us_to_other_systems(self):
        result = formulas.shoe_size('men', 'US', 9)
        self.assertEqual(result['uk'], 8.5)
        self.assertEqual(result['india'], 8.5)
        self.assertEqual(result['eu'], 42)
        self.assertAlmostEqual(result['cm'], 26.283)

    def test_mens_eu_back_to_us(self):
        result = formulas.shoe_size('men', 'EU', 42)
        self.assertEqual(result['us'], 9)
        self.assertAlmostEqual(result['cm'], 28)

    def test_womens_offsets(self):
        result = formulas.shoe_size('women', 'US', 8)
        self.assertEqual(result['uk'], 6)
        self.assertEqual(result['eu'], 39)

    def test_unknown_system(self):
        with self.assertRaises(ValueError):
            formulas.shoe_size('men', 'AU', 9)


class TestHeight(unittest.TestCase):

    def test_centimetres_to_feet(self):
        result = formulas.height(centimeters=180)
        self.assertEqual(result['feet'], 5)
        self.assertAlmostEqual(result['inches'], 10.866, places=3)
        self.assertEqual(result['display'], '5\' 10.9"')

    def test_feet_to_centimetres(self):
        result = formulas.height(feet=6)
        self.assertAlmostEqual(result['centimeters'], 182.88)
        self.assertEqual(result['display'], '182.9 cm')

    def test_centimetres_win(self):
        self.assertEqual(formulas.height(feet=6, centimeters=100)['centimeters'], 100)

    def test_needs_a_height(self):
        with self.assertRaises(ValueError):
            formulas.height()


class TestRingSize(unittest.TestCase):

    def test_from_circumference(self):
        result = formulas.ring_size('circumference', '54.4')
        self.assertEqual(result['uk'], 'O')
        self.assertAlmostEqual(result['us'], 7.5)
        self.assertEqual(result['eu'], 54)
        self.assertEqual(result['closest_standard'], '7.5 (UK O)')

    def test_from_uk_letter_is_case_insensitive(self):
        diameter, circumference = formulas.parse_ring_value('uk', ' n ')
        self.assertEqual(diameter, 16.9)
        self.assertEqual(circumference, 53.1)

    def test_us_sizes_interpolate(self):
        diameter, _ = formulas.parse_ring_value('us', '7.25')
        self.assertAlmostEqual(diameter, 17.1)

    def test_bad_values(self):
        with self.assertRaises(ValueError):
            formulas.parse_ring_value('uk', 'B')
        with self.assertRaises(ValueError):
            formulas.parse_ring_value('circumference', 'abc')
        with self.assertRaises(ValueError):
            formulas.parse_ring_value('diameter', '-3')

    def test_non_finite_values_are_rejected(self):
        for text in ('inf', 'nan', '1e400'):
            with self.assertRaises(ValueError):
                formulas.parse_ring_value('circumference', text)


class TestHatGloveFoot(unittest.TestCase):

    def test_hat_size(self):
        result = formulas.hat_size('cm', 57)
        self.assertAlmostEqual(result['inches'], 22.441, places=3)
        self.assertEqual(result['us'], '7 1/8')
        self.assertEqual(result['eu'], 57)

    def test_eighths(self):
        self.assertEqual(formulas.eighths(7.0), '7')
        self.assertEqual(formulas.eighths(7.5), '7 1/2')
        self.assertEqual(formulas.eighths(7.99), '8')

    def test_glove_size(self):
        result = formulas.glove_size(20.32)
        self.assertAlmostEqual(result['inches'], 8)
        self.assertEqual(result['us'], 8)
        self.assertEqual(result['eu'], 20)

    def test_foot_length(self):
        result = formulas.foot_length(25)
        self.assertEqual(result['us_men'], 8)
        self.assertEqual(result['us_women'], 9.5)
        self.assertEqual(result['uk'], 7)
        self.assertEqual(result['jp'], 25)


class TestClothSizes(unittest.TestCase):

    def test_mens_us_to_other_regions(self):
        result = formulas.cloth_size('men', 'US', '38')
        self.assertEqual(result['eu'], '48')
        self.assertEqual(result['japan'], 'L')
        self.assertEqual(result['group'], 'Men')

    def test_lookup_ignores_case(self):
        result = formulas.cloth_size('kids', 'US', '2t')
        self.assertEqual(result['eu'], '92')

    def test_womens_from_international(self):
        result = formulas.cloth_size('women', 'Intl', 'M')
        self.assertEqual(result['us'], '6')
        self.assertEqual(result['uk'], '10')

    def test_unknown_size(self):
        with self.assertRaises(ValueError):
            formulas.cloth_size('men', 'EU', '99')

    def test_mens_measurements_in_centimetres(self):
        result = formulas.body_measurement_cloth_size('men', 'cm', chest=100, waist=86)
        self.assertEqual(result['us_top'], 40)
        self.assertEqual(result['us_bottom'], 34)
        shirt, trousers = result['sizes']
        self.assertEqual(shirt['eu'], 50)
        self.assertEqual(shirt['india'], 38)
        self.assertEqual(trousers['eu'], 96)
        self.assertEqual(trousers['japan'], 90)

    def test_womens_measurements_in_inches(self):
        result = formulas.body_measurement_cloth_size('women', 'in', bust=36, waist=28)
        self.assertEqual(result['us_top'], 6)
        self.assertEqual(result['us_bottom'], 4)
        self.assertEqual(result['sizes'][0]['uk'], 4)
        self.assertEqual(result['sizes'][0]['eu'], 36)

    def test_measurements_required(self):
        with self.assertRaises(ValueError):
            formulas.body_measurement_cloth_size('women', 'cm', chest=100, waist=80)


class TestConversionForms(unittest.TestCase):

    def setUp(self):
        self.app = create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        self.ctx.pop()

    def test_ring_form_reports_parse_errors(self):
        result, errors = get_calculator('ring-size').evaluate({'unit': 'uk', 'value': 'B'})
        self.assertIsNone(result)
        self.assertIn('value', errors)
        self.assertTrue(errors['value'][0].startswith('Uk/india size must be'))

    def test_height_form_needs_some_height(self):
        result, errors = get_calculator('height').evaluate({'feet': '', 'centimeters': ''})
        self.assertIn('centimeters', errors)

    def test_height_form_inches_limit(self):
        result, errors = get_calculator('height').evaluate({'feet': '5', 'inches': '12'})
        self.assertIn('inches', errors)

    def test_shoe_form(self):
        result, errors = get_calculator('shoe-size').evaluate(
            {'gender': 'men', 'from_system': 'US', 'size': '9'})
        self.assertEqual(errors, {})
        self.assertEqual(result['eu'], 42)

    def test_cloth_form_lists_available_sizes(self):
        result, errors = get_calculator('cloth-size').evaluate(
            {'gender': 'women', 'from_region': 'US', 'size': '7'})
        self.assertIsNone(result)
        self.assertIn('2, 4, 6, 8, 10, 12', errors['size'][0])

    def test_body_measurement_form_needs_gender_fields(self):
        result, errors = get_calculator('body-measurement-cloth-size').evaluate(
            {'gender': 'men', 'unit': 'cm', 'bust': '90', 'waist': '80'})
        self.assertIsNone(result)
        self.assertIn('chest', errors)
        self.assertNotIn('waist', errors)

    def test_body_measurement_form(self):
        result, errors = get_calculator('body-measurement-cloth-size').evaluate(
            {'gender': 'men', 'unit': 'in', 'chest': '41', 'waist': '32'})
        self.assertEqual(errors, {})
        self.assertEqual(result['us_top'], 42)
        self.assertEqual(result['us_bottom'], 32)


if __name__ == '__main__':
    unittest.main()

"""
Tests for the ``flask calculators`` command group.
"""
import json
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app


def _create_test_app():
    return create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})


class CliTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.runner = self.app.test_cli_runner()

    def invoke(self, *args):
        return self.runner.invoke(args=['calculators', *args])


class TestListCommand(CliTestCase):

    def test_list(self):
        result = self.invoke('list')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('loan-emi', result.output)
        self.assertIn('batting-average', result.output)

    def test_list_category(self):
        result = self.invoke('list', '--category', 'cricket')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('batting-average', result.output)
        self.assertNotIn('loan-emi', result.output)
        self.assertIn('9 calculators', result.output)

    def test_list_unknown_category(self):
        result = self.invoke('list', '--category', 'astrology')
        self.assertNotEqual(result.exit_code, 0)


class TestRunCommand(CliTestCase):

    def test_run(self):
        result = self.invoke('run', 'bmi', 'weight=70', 'height=175')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('BMI: 22.86', result.output)
        self.assertIn('Normal weight', result.output)

    def test_run_table_output(self):
        result = self.invoke('run', 'loan-emi', 'principal=100000', 'annual_rate=12', 'years=1')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('Amortization by year:', result.output)

    def test_run_invalid_input(self):
        result = self.invoke('run', 'bmi', 'weight=heavy', 'height=175')
        self.assertEqual(result.exit_code, 1)
        self.assertIn('weight:', result.output)

    def test_run_bad_assignment(self):
        result = self.invoke('run', 'bmi', 'weight')
        self.assertNotEqual(result.exit_code, 0)

    def test_run_unknown_calculator(self):
        result = self.invoke('run', 'lottery-odds')
        self.assertNotEqual(result.exit_code, 0)


class TestSchemaCommand(CliTestCase):

    def test_schema(self):
        result = self.invoke('schema', 'bmi')
        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.output)
        self.assertEqual([d['@type'] for d in data], ['WebApplication', 'FAQPage', 'HowTo'])
        self.assertEqual(data[0]['url'], 'https://mycalculating.com/category/health-fitness/bmi')


if __name__ == '__main__':
    unittest.main()

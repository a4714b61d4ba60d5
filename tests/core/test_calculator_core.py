"""
Unit tests for the shared calculator building blocks: Scale, NumberListField
and the display formatters. No Flask app needed.
"""
import unittest

from werkzeug.datastructures import MultiDict
from wtforms import Form

from app.calculators.base import Scale, Tier, clamp
from app.calculators.fields import FloatField, IntegerField, NumberListField
from app.calculators.formatting import (
    format_currency,
    format_duration,
    format_number,
    format_output,
    format_percent,
)


class TestScale(unittest.TestCase):
    """Cutoffs split the number line into exactly one band per value."""

    def test_left_closed_boundary_goes_up(self):
        scale = Scale([18.5, 25, 30], ['under', 'normal', 'over', 'obese'])
        self.assertEqual(scale.classify(18.4), 'under')
        self.assertEqual(scale.classify(18.5), 'normal')
        self.assertEqual(scale.classify(25), 'over')
        self.assertEqual(scale.classify(30), 'obese')

    def test_right_closed_boundary_stays_down(self):
        scale = Scale([4, 5], ['tight', 'ok', 'loose'], closed='right')
        self.assertEqual(scale.classify(4), 'tight')
        self.assertEqual(scale.classify(4.01), 'ok')
        self.assertEqual(scale.classify(5), 'ok')
        self.assertEqual(scale.classify(5.01), 'loose')

    def test_extremes_land_in_end_bands(self):
        scale = Scale([0, 10], ['low', 'mid', 'high'])
        self.assertEqual(scale.classify(-1e9), 'low')
        self.assertEqual(scale.classify(1e9), 'high')

    def test_bands_can_be_tiers(self):
        tier = Tier('high', 'High', 'Slow down')
        scale = Scale([1], [Tier('low', 'Low', 'Fine'), tier])
        self.assertIs(scale.classify(2), tier)
        self.assertEqual(scale.index(0), 0)
        self.assertEqual(len(scale), 2)

    def test_wrong_band_count_rejected(self):
        with self.assertRaises(ValueError):
            Scale([1, 2], ['a', 'b'])

    def test_unsorted_cutoffs_rejected(self):
        with self.assertRaises(ValueError):
            Scale([2, 1], ['a', 'b', 'c'])
        with self.assertRaises(ValueError):
            Scale([1, 1], ['a', 'b', 'c'])

    def test_unknown_closure_rejected(self):
        with self.assertRaises(ValueError):
            Scale([1], ['a', 'b'], closed='both')

    def test_clamp(self):
        self.assertEqual(clamp(-5), 0.0)
        self.assertEqual(clamp(150), 100.0)
        self.assertEqual(clamp(42), 42)


class CashFlowForm(Form):
    flows = NumberListField('Cash flows', min_entries=2)


class TestNumberListField(unittest.TestCase):

    def test_parses_comma_separated_numbers(self):
        form = CashFlowForm(MultiDict({'flows': '-1000, 300,400 , 500'}))
        self.assertTrue(form.validate())
        self.assertEqual(form.flows.data, [-1000.0, 300.0, 400.0, 500.0])

    def test_rejects_non_numbers(self):
        form = CashFlowForm(MultiDict({'flows': '100, abc, 200'}))
        self.assertFalse(form.validate())
        self.assertIn('abc', form.flows.errors[0])

    def test_too_few_entries(self):
        form = CashFlowForm(MultiDict({'flows': '100'}))
        self.assertFalse(form.validate())
        self.assertIn('at least 2', form.flows.errors[0])

    def test_blank_is_empty_list(self):
        form = CashFlowForm(MultiDict({'flows': '  '}))
        form.validate()
        self.assertEqual(form.flows.data, [])

    def test_value_round_trips_raw_text(self):
        form = CashFlowForm(MultiDict({'flows': '1,2'}))
        self.assertEqual(form.flows._value(), '1,2')

    def test_rejects_non_finite_entries(self):
        form = CashFlowForm(MultiDict({'flows': '-1000, inf, nan'}))
        self.assertFalse(form.validate())
        self.assertIn('inf', form.flows.errors[0])
        self.assertEqual(form.flows.data, [])


class MeasurementForm(Form):
    length = FloatField('Length')
    count = IntegerField('Count')


class TestFiniteNumberFields(unittest.TestCase):

    def test_accepts_ordinary_numbers(self):
        form = MeasurementForm(MultiDict({'length': '12.5', 'count': '3'}))
        self.assertTrue(form.validate())
        self.assertEqual(form.length.data, 12.5)
        self.assertEqual(form.count.data, 3)

    def test_rejects_infinity_and_nan(self):
        for text in ('inf', '-inf', 'nan', '1e400'):
            form = MeasurementForm(MultiDict({'length': text, 'count': '1'}))
            self.assertFalse(form.validate(), text)
            self.assertIsNone(form.length.data)
            self.assertIn('finite', form.length.errors[0])

    def test_rejects_huge_values(self):
        form = MeasurementForm(MultiDict({'length': '1e300', 'count': '1' + '0' * 400}))
        self.assertFalse(form.validate())
        self.assertIsNone(form.length.data)
        self.assertIsNone(form.count.data)
        self.assertIn('between', form.count.errors[0])


class TestFormatting(unittest.TestCase):

    def test_currency(self):
        self.assertEqual(format_currency(1234.5), '$1,234.50')
        self.assertEqual(format_currency(-20), '-$20.00')
        self.assertEqual(format_currency(None), '—')

    def test_percent(self):
        self.assertEqual(format_percent(12.345), '12.35%')
        self.assertEqual(format_percent(5, places=0), '5%')

    def test_number_trims_zeros(self):
        self.assertEqual(format_number(12.50), '12.5')
        self.assertEqual(format_number(3.0), '3')
        self.assertEqual(format_number(1234567), '1,234,567')

    def test_duration(self):
        self.assertEqual(format_duration(2.5), '2 hours and 30 minutes')
        self.assertEqual(format_duration(1.999), '2 hours and 0 minutes')

    def test_output_by_kind(self):
        self.assertEqual(format_output(1500, 'currency'), '$1,500.00')
        self.assertEqual(format_output(7.25, 'percent'), '7.25%')
        self.assertEqual(format_output(3.6, 'integer'), '4')
        self.assertEqual(format_output('Good', 'text'), 'Good')


if __name__ == '__main__':
    unittest.main()

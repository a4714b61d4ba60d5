"""
Unit tests for everyday calculators: dates, batteries, travel and genetics.
"""
import os
import unittest
from datetime import date, datetime

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.everyday import formulas
from app.calculators.registry import get_calculator


class TestDateDifference(unittest.TestCase):

    def test_calendar_breakdown(self):
        result = formulas.date_difference(date(2024, 1, 15), date(2025, 3, 20))
        self.assertEqual(result['total_days'], 430)
        self.assertEqual(result['weeks'], 61)
        self.assertEqual(result['extra_days'], 3)
        self.assertEqual((result['years'], result['months'], result['days']), (1, 2, 5))
        self.assertEqual(result['summary'], '1 years, 2 months and 5 days')

    def test_dates_in_either_order(self):
        forward = formulas.date_difference(date(2024, 1, 15), date(2025, 3, 20))
        backward = formulas.date_difference(date(2025, 3, 20), date(2024, 1, 15))
        self.assertEqual(forward, backward)

    def test_same_day(self):
        self.assertEqual(formulas.date_difference(date(2024, 2, 29), date(2024, 2, 29))['total_days'], 0)


class TestBatteryAndTravel(unittest.TestCase):

    def test_battery_from_current(self):
        result = formulas.battery_life(3000, current_draw_ma=150)
        self.assertEqual(result['hours'], 20)
        self.assertEqual(result['duration'], '20 hours and 0 minutes')

    def test_battery_from_power(self):
        result = formulas.battery_life(3000, voltage=3.7, power_draw_w=1)
        self.assertAlmostEqual(result['hours'], 11.1)
        self.assertEqual(result['duration'], '11 hours and 6 minutes')

    def test_battery_needs_a_load(self):
        with self.assertRaises(ValueError):
            formulas.battery_life(3000)

    def test_car_emissions_split_by_passenger(self):
        result = formulas.travel_carbon('car', 100, passengers=2)
        self.assertAlmostEqual(result['total_kg'], 16.17)
        self.assertAlmostEqual(result['per_passenger_kg'], 8.085)

    def test_flight_emissions(self):
        self.assertAlmostEqual(formulas.travel_carbon('flight', 1000)['total_kg'], 158)

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            formulas.travel_carbon('rocket', 100)


class TestGeneticTrait(unittest.TestCase):

    def test_heterozygous_cross(self):
        result = formulas.genetic_trait('Aa', 'Aa')
        self.assertEqual(result['homozygous_dominant'], 25)
        self.assertEqual(result['heterozygous'], 50)
        self.assertEqual(result['homozygous_recessive'], 25)
        self.assertEqual(result['dominant_phenotype'], 75)
        self.assertEqual(result['punnett_square'][1], {'allele': 'a', 'first': 'Aa', 'second': 'aa'})

    def test_homozygous_cross(self):
        result = formulas.genetic_trait('AA', 'aa')
        self.assertEqual(result['heterozygous'], 100)
        self.assertEqual(result['recessive_phenotype'], 0)


class TestTravelPlanning(unittest.TestCase):

    def test_budget_totals(self):
        result = formulas.travel_budget(7, 2, 1200, 900, 50, 300, 'Car hire: 250\nSnacks per day: 10')
        self.assertEqual(result['total'], 3490)
        self.assertEqual(result['per_person'], 1745)
        self.assertAlmostEqual(result['per_person_per_day'], 3490 / 14)
        self.assertEqual([row['item'] for row in result['breakdown']][-2:], ['Car hire', 'Snacks per day'])
        self.assertEqual(result['breakdown'][2]['amount'], 700)
        self.assertAlmostEqual(sum(row['share'] for row in result['breakdown']), 100)

    def test_empty_budget(self):
        result = formulas.travel_budget(3)
        self.assertEqual(result['total'], 0)
        self.assertEqual(result['breakdown'][0]['share'], 0)

    def test_cost_lines(self):
        self.assertEqual(formulas.parse_cost_lines('Tips: $1,200\n\n Visa : 80 '), [('Tips', 1200), ('Visa', 80)])
        for text in ('Car hire 250', 'Tips: lots', 'Tips: -5', 'Tips: nan', ': 5'):
            with self.assertRaises(ValueError):
                formulas.parse_cost_lines(text)

    def test_eastbound_flight(self):
        result = formulas.jet_lag_plan('America/New_York', 'Europe/London', datetime(2024, 1, 15, 10, 0), 7)
        self.assertEqual(result['arrival_local'], 'Mon 15 Jan 2024, 22:00')
        self.assertEqual(result['time_difference'], 5)
        self.assertEqual(result['direction'], 'east')
        self.assertEqual(result['days_to_adjust'], 5)
        self.assertEqual(len(result['plan']), 4)

    def test_daylight_saving_on_one_side(self):
        # the US has sprung forward but Europe has not
        result = formulas.jet_lag_plan('America/New_York', 'Europe/Paris', datetime(2024, 3, 15, 18, 0), 8)
        self.assertEqual(result['arrival_local'], 'Sat 16 Mar 2024, 07:00')
        self.assertEqual(result['time_difference'], 5)

    def test_westbound_half_hour_zone(self):
        result = formulas.jet_lag_plan('Asia/Kolkata', 'Europe/London', datetime(2024, 1, 15, 2, 0), 10)
        self.assertEqual(result['arrival_local'], 'Mon 15 Jan 2024, 06:30')
        self.assertEqual(result['time_difference'], -5)
        self.assertEqual(result['direction'], 'west')

    def test_no_time_change(self):
        result = formulas.jet_lag_plan('UTC', 'UTC', datetime(2024, 6, 1, 9, 0), 2.5)
        self.assertEqual(result['arrival_local'], 'Sat 01 Jun 2024, 11:30')
        self.assertEqual(result['direction'], 'none')
        self.assertEqual(result['days_to_adjust'], 0)
        self.assertEqual(len(result['plan']), 1)

    def test_unknown_zone(self):
        with self.assertRaises(ValueError):
            formulas.jet_lag_plan('Mars/Olympus', 'UTC', datetime(2024, 6, 1, 9, 0), 2)


class TestPedigree(unittest.TestCase):

    def test_default_family(self):
        result = formulas.pedigree_analysis(formulas.DEFAULT_PEDIGREE)
        self.assertEqual(result['possible_modes'],
                         ['Autosomal Dominant', 'X-linked Dominant', 'Autosomal Recessive'])
        self.assertEqual(len(result['reasoning']), 2)
        self.assertEqual(result['member_count'], 4)
        self.assertEqual(result['affected_count'], 2)
        self.assertEqual(result['family'][2]['parents'], 'I-1, I-2')
        self.assertEqual(result['family'][0]['parents'], '-')

    def test_unaffected_parents_with_affected_child(self):
        result = formulas.pedigree_analysis('I-1, m, u\nI-2, f, u\nII-1, f, a, I-1, I-2')
        self.assertEqual(result['possible_modes'], ['Autosomal Recessive'])
        self.assertIn('recessive trait', result['reasoning'][0])

    def test_affected_parents_with_unaffected_child(self):
        result = formulas.pedigree_analysis(
            'I-1, male, affected\nI-2, female, affected\nII-1, male, unaffected, I-1, I-2')
        self.assertEqual(result['possible_modes'], ['Autosomal Dominant', 'X-linked Dominant'])

    def test_no_pattern(self):
        result = formulas.pedigree_analysis('A, m, affected')
        self.assertEqual(result['possible_modes'], formulas.INHERITANCE_MODES)
        self.assertTrue(result['reasoning'][0].startswith('No definitive'))

    def test_parse_errors(self):
        for text in ('', 'A, m', 'A, x, affected', 'A, m, sick', 'A, m, a\nA, f, u', 'A, m, a, B', 'A, m, a, A'):
            with self.assertRaises(ValueError, msg=text):
                formulas.parse_pedigree(text)

    def test_missing_parent_marker(self):
        members = formulas.parse_pedigree('A, m, a\nB, f, u, -, A')
        self.assertEqual(members[1].parents, ('A',))


class TestEverydayForms(unittest.TestCase):

    def setUp(self):
        self.app = create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        self.ctx.pop()

    def test_date_form_parses_iso_dates(self):
        result, errors = get_calculator('date-difference').evaluate(
            {'start_date': '2024-01-01', 'end_date': '2024-12-31'})
        self.assertEqual(errors, {})
        self.assertEqual(result['total_days'], 365)

    def test_date_form_rejects_bad_date(self):
        result, errors = get_calculator('date-difference').evaluate(
            {'start_date': '31/12/2024', 'end_date': '2024-12-31'})
        self.assertIn('start_date', errors)

    def test_battery_form_needs_a_load(self):
        result, errors = get_calculator('battery-life').evaluate({'capacity_mah': '3000'})
        self.assertIn('current_draw_ma', errors)

    def test_budget_form_reports_bad_cost_line(self):
        result, errors = get_calculator('travel-budget').evaluate(
            {'days': '5', 'people': '2', 'other_costs': 'Car hire'})
        self.assertIsNone(result)
        self.assertIn('Line 1', errors['other_costs'][0])

    def test_budget_form_blank_costs(self):
        result, errors = get_calculator('travel-budget').evaluate({'days': '5', 'people': '2', 'flights': ''})
        self.assertEqual(errors, {})
        self.assertEqual(result['total'], 0)

    def test_jet_lag_form_parses_departure(self):
        result, errors = get_calculator('jet-lag-planner').evaluate({
            'origin_tz': 'America/New_York', 'destination_tz': 'Europe/London',
            'departure': '2024-01-15T10:00', 'flight_hours': '7',
        })
        self.assertEqual(errors, {})
        self.assertEqual(result['time_difference'], 5)

    def test_jet_lag_form_rejects_unlisted_zone(self):
        result, errors = get_calculator('jet-lag-planner').evaluate({
            'origin_tz': 'Mars/Olympus', 'destination_tz': 'UTC', 'departure': '2024-01-15T10:00', 'flight_hours': '7',
        })
        self.assertIn('origin_tz', errors)

    def test_pedigree_form_keeps_id_case_in_errors(self):
        result, errors = get_calculator('pedigree-analysis').evaluate({'members': 'II-1, f, a, I-9'})
        self.assertIsNone(result)
        self.assertEqual(errors['members'], ['II-1 has parent I-9, who is not listed.'])


if __name__ == '__main__':
    unittest.main()

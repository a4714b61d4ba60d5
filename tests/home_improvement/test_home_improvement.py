"""
Unit tests for home improvement estimators.
"""
import os
import unittest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.home_improvement import formulas
from app.calculators.registry import get_calculator


class TestPaintAndTiles(unittest.TestCase):

    def test_paint_coverage(self):
        result = formulas.paint_coverage(12, 10, 8)
        self.assertEqual(result['paintable_area'], 472)
        self.assertEqual(result['paint_needed'], 3)
        self.assertEqual(result['unit_label'], 'gallons')
        self.assertEqual(result['project_size'], 'Small Project')
        self.assertEqual(result['efficiency'], 'Standard Efficiency')
        self.assertEqual(result['recommendations'][0], 'Purchase 4 gallons for a safety margin')

    def test_paint_metric_uses_litres(self):
        self.assertEqual(formulas.paint_coverage(4, 3, 2.5, coverage=10, unit='meters')['unit_label'], 'liters')

    def test_paint_project_size_boundaries(self):
        self.assertEqual(formulas.PAINT_PROJECT_SIZE.classify(4), 'Small Project')
        self.assertEqual(formulas.PAINT_PROJECT_SIZE.classify(5), 'Medium Project')
        self.assertEqual(formulas.PAINT_PROJECT_SIZE.classify(11), 'Large Project')

    def test_paint_efficiency(self):
        self.assertEqual(formulas.paint_efficiency(400), 'Standard Efficiency')
        self.assertEqual(formulas.paint_efficiency(401), 'High Efficiency')
        self.assertEqual(formulas.paint_efficiency(299), 'Lower Efficiency')

    def test_tile_flooring_imperial(self):
        result = formulas.tile_flooring(10, 12, 12, 12, 50)
        self.assertEqual(result['tiles_without_waste'], 120)
        self.assertEqual(result['tiles_needed'], 180)

    def test_tile_flooring_metric(self):
        result = formulas.tile_flooring(3, 4, 30, 30, 10, unit='meters')
        self.assertEqual(result['tiles_without_waste'], 134)
        self.assertEqual(result['tiles_needed'], 147)
        self.assertEqual(result['area_unit'], 'sq m')


class TestStairsAndWalls(unittest.TestCase):

    def test_staircase(self):
        result = formulas.staircase(105)
        self.assertEqual(result['risers'], 14)
        self.assertEqual(result['treads'], 13)
        self.assertAlmostEqual(result['riser_height'], 7.5)
        self.assertAlmostEqual(result['tread_depth'], 9.5)
        self.assertAlmostEqual(result['total_run'], 123.5)
        self.assertEqual(result['complexity'], 'Medium Complexity')
        self.assertEqual(result['safety'], 'Safe Design')

    def test_staircase_rounds_half_up(self):
        self.assertEqual(formulas.staircase(18.75)['risers'], 3)
        self.assertEqual(formulas.staircase(1)['risers'], 1)

    def test_steep_stairs_need_review(self):
        self.assertEqual(formulas.staircase(30, ideal_riser=10)['safety'], 'Review Required')

    def test_wallpaper_rolls(self):
        result = formulas.wallpaper_rolls(8, 12, 33, 1.75)
        self.assertEqual(result['drops'], 7)
        self.assertEqual(result['drops_per_roll'], 4)
        self.assertEqual(result['rolls_needed'], 3)

    def test_wallpaper_short_rolls(self):
        result = formulas.wallpaper_rolls(10, 2, 8, 1)
        self.assertEqual(result['drops_per_roll'], 0)
        self.assertEqual(result['rolls_needed'], 3)


class TestHvacAndInsulation(unittest.TestCase):

    def test_hvac_sizing(self):
        result = formulas.hvac_sizing(500)
        self.assertEqual(result['btu'], 12500)
        self.assertAlmostEqual(result['tons'], 1.0417, places=4)

    def test_hvac_metric_area(self):
        self.assertAlmostEqual(formulas.hvac_sizing(50, 'cool', 'meters')['square_feet'], 538.195)

    def test_insulation(self):
        result = formulas.insulation_r_value('fiberglass_batt', 32)
        self.assertEqual(result['material'], 'Fiberglass batt')
        self.assertAlmostEqual(result['thickness'], 10)
        self.assertEqual(len(result['comparison']), len(formulas.INSULATION_MATERIALS))


class TestDeckingAndHardware(unittest.TestCase):

    def test_decking_boards(self):
        result = formulas.decking_materials(20, 12, 5.5, 16)
        self.assertEqual(result['board_rows'], 26)
        self.assertEqual(result['boards_needed'], 28)
        self.assertEqual(result['deck_area'], 240)
        self.assertEqual(result['linear_feet'], 520)
        self.assertEqual(result['project_size'], 'Small Project')
        self.assertEqual(result['complexity'], 'Standard Complexity')
        self.assertEqual(len(result['recommendations']), 2)

    def test_large_deck_with_wide_joists(self):
        result = formulas.decking_materials(40, 30, 3.5, 24)
        self.assertEqual(result['board_rows'], 100)
        self.assertEqual(result['boards_needed'], 105)
        self.assertEqual(result['project_size'], 'Large Project')
        self.assertEqual(result['complexity'], 'Low Complexity')
        self.assertIn('Consider professional installation for a deck this size', result['recommendations'])
        self.assertEqual(len(result['recommendations']), 4)

    def test_metric_deck(self):
        result = formulas.decking_materials(6, 4, 14, 30, unit='meters')
        self.assertEqual(result['board_rows'], 28)
        self.assertEqual(result['boards_needed'], 30)
        self.assertEqual(result['complexity'], 'High Complexity')

    def test_project_size_boundaries(self):
        self.assertEqual(formulas.project_size(49, 50, 100), 'Small Project')
        self.assertEqual(formulas.project_size(50, 50, 100), 'Medium Project')
        self.assertEqual(formulas.project_size(100, 50, 100), 'Medium Project')
        self.assertEqual(formulas.project_size(101, 50, 100), 'Large Project')

    def test_cabinet_hardware(self):
        result = formulas.door_cabinet_hardware(20, 10, 1, 2, 10)
        self.assertEqual(result['total_pieces'], 40)
        self.assertEqual(result['packs_needed'], 4)
        self.assertEqual(result['interpretation'], 'Large kitchen or multi-room project')
        self.assertEqual(len(result['recommendations']), 3)

    def test_cabinet_hardware_small_and_blank_drawers(self):
        result = formulas.door_cabinet_hardware(12, None, 1, 1, 8)
        self.assertEqual(result['total_pieces'], 12)
        self.assertEqual(result['packs_needed'], 2)
        self.assertEqual(result['interpretation'], 'Small project')
        self.assertEqual(formulas.HARDWARE_SCOPE.classify(20), 'Medium project')


class TestGardenAndLighting(unittest.TestCase):

    def test_garden_bed(self):
        result = formulas.garden_soil_mulch(10, 4, 3)
        self.assertEqual(result['volume'], 10)
        self.assertEqual(result['bags_needed'], 5)
        self.assertEqual(result['volume_unit'], 'cu ft')
        self.assertEqual(result['project_size'], 'Medium Project')
        self.assertEqual(result['material_level'], 'Standard Application')
        self.assertEqual(result['opinion'], formulas.SOIL_OPINIONS['Medium Project'])

    def test_metric_garden_bed(self):
        result = formulas.garden_soil_mulch(5, 2, 10, 'meters')
        self.assertAlmostEqual(result['volume'], 1.0)
        self.assertEqual(result['bags_needed'], 20)
        self.assertEqual(result['project_size'], 'Small Project')
        self.assertEqual(result['material_level'], 'Standard Application')

    def test_deep_garden_bed(self):
        result = formulas.garden_soil_mulch(10, 10, 8)
        self.assertEqual(result['bags_needed'], 34)
        self.assertEqual(result['project_size'], 'Large Project')
        self.assertEqual(result['material_level'], 'Deep Application')
        self.assertTrue(result['opinion'].startswith('A substantial project'))
        self.assertEqual(len(result['recommendations']), 6)

    def test_kitchen_lighting(self):
        result = formulas.lighting_layout(12, 10, 800, 'kitchen')
        self.assertEqual(result['total_lumens'], 4800)
        self.assertEqual(result['fixtures_needed'], 6)
        self.assertEqual(result['lighting_level'], 'Medium Brightness')
        self.assertEqual(result['efficiency'], 'Standard Efficiency')
        self.assertEqual(result['interpretation'], 'Moderate lighting requirement for a kitchen with 6 fixtures.')
        self.assertEqual(result['opinion'], formulas.LIGHTING_OPINIONS['Moderate'])

    def test_bathroom_lighting_is_high_demand(self):
        result = formulas.lighting_layout(8, 10, 500, 'bathroom')
        self.assertEqual(result['fixtures_needed'], 12)
        self.assertEqual(result['lighting_level'], 'High Brightness')
        self.assertEqual(result['efficiency'], 'Low Efficiency')
        self.assertEqual(result['opinion'], formulas.LIGHTING_OPINIONS['High'])
        self.assertEqual(len(result['considerations']), 3)

    def test_metric_room_lighting(self):
        result = formulas.lighting_layout(3, 4, 800, 'bedroom', 'meters')
        self.assertAlmostEqual(result['square_feet'], 129.1668)
        self.assertEqual(result['fixtures_needed'], 3)


class TestPaintDrying(unittest.TestCase):

    def test_ideal_conditions(self):
        result = formulas.paint_drying_time('latex', 70, 50, 1, 2)
        self.assertAlmostEqual(result['dry_time'], 1)
        self.assertAlmostEqual(result['recoat_time'], 4)
        self.assertAlmostEqual(result['cure_time'], 30)
        self.assertAlmostEqual(result['project_time'], 5)
        self.assertEqual(result['drying_level'], 'Fast Drying')
        self.assertEqual(result['curing_level'], 'Extended Cure')
        self.assertEqual(result['opinion'], 'Ideal conditions for fast, even drying.')
        self.assertEqual(result['considerations'], [])

    def test_cold_damp_conditions(self):
        result = formulas.paint_drying_time('oil', 35, 85, 1, 3)
        self.assertAlmostEqual(result['dry_time'], 8 * 2 * 50 / 85)
        self.assertEqual(result['drying_level'], 'Slow Drying')
        self.assertTrue(result['opinion'].startswith('Challenging'))
        self.assertEqual(len(result['recommendations']), 7)
        self.assertEqual(len(result['considerations']), 2)

    def test_drying_factor_is_clamped(self):
        self.assertEqual(formulas.drying_factor(70, 20), 2.0)
        self.assertEqual(formulas.drying_factor(50, 100), 0.5)
        self.assertEqual(formulas.drying_factor(50, 0), 2.0)

    def test_speed_boundaries(self):
        self.assertEqual(formulas.DRYING_SPEED.classify(2), 'Fast Drying')
        self.assertEqual(formulas.DRYING_SPEED.classify(6), 'Standard Drying')
        self.assertEqual(formulas.CURING_SPEED.classify(7), 'Quick Cure')
        self.assertEqual(formulas.CURING_SPEED.classify(14), 'Standard Cure')


class TestFramingWaterAndCurtains(unittest.TestCase):

    def test_wall_framing(self):
        result = formulas.wall_framing_lumber(24, 16, 8, 2, 2)
        self.assertEqual(result['studs'], 28)
        self.assertEqual(result['plate_linear_feet'], 48)
        self.assertEqual(result['plate_pieces'], 6)
        self.assertEqual(result['total_2x4s'], 34)
        self.assertEqual(result['interpretation'], 'Small wall')
        self.assertEqual(len(result['recommendations']), 3)

    def test_tall_wall_with_double_top_plate(self):
        result = formulas.wall_framing_lumber(40, 12, 10, 3, 3)
        self.assertEqual(result['studs'], 54)
        self.assertEqual(result['plate_pieces'], 15)
        self.assertEqual(result['total_2x4s'], 69)
        self.assertEqual(result['interpretation'], 'Medium wall')
        self.assertEqual(len(result['recommendations']), 4)

    def test_short_wall_has_no_interior_studs(self):
        self.assertEqual(formulas.wall_framing_lumber(1, 24)['studs'], 3)

    def test_water_demand(self):
        result = formulas.water_usage_flow(kitchen_sinks=1, bathroom_sinks=2, dishwashers=1, washing_machines=1,
                                           toilets=2, showers=1)
        self.assertEqual(result['fixture_units'], 18)
        self.assertAlmostEqual(result['demand_gpm'], 0.966 * 18 ** 0.635)
        self.assertEqual(result['system_size'], 'Small System')
        self.assertEqual(result['demand_level'], 'Moderate Demand')

    def test_large_water_demand_uses_upper_curve(self):
        result = formulas.water_usage_flow(toilets=4, bathtubs=4, hose_bibbs=4)
        self.assertEqual(result['fixture_units'], 48)
        self.assertAlmostEqual(result['demand_gpm'], 2.45 * 48 ** 0.44)
        self.assertEqual(result['system_size'], 'Medium System')
        self.assertEqual(result['demand_level'], 'High Demand')
        self.assertTrue(result['opinion'].startswith('This system needs professional design'))

    def test_no_fixtures_raises(self):
        with self.assertRaises(ValueError):
            formulas.water_usage_flow()

    def test_curtain_coverage(self):
        result = formulas.window_curtain_coverage(4, 5, 8, 5, 2)
        self.assertEqual(result['window_area'], 20)
        self.assertEqual(result['curtain_area'], 80)
        self.assertEqual(result['coverage_ratio'], 4)
        self.assertEqual(result['coverage_level'], 'Excellent Coverage')
        self.assertEqual(result['fullness_level'], 'Standard Fullness')
        self.assertEqual(result['opinion'], 'Good coverage with elegant draping for most rooms.')

    def test_thin_curtains(self):
        result = formulas.window_curtain_coverage(6, 5, 4, 5, 1.5)
        self.assertEqual(result['coverage_level'], 'Minimal Coverage')
        self.assertEqual(result['fullness_level'], 'Basic Fullness')
        self.assertEqual(len(result['recommendations']), 4)

    def test_coverage_boundaries(self):
        self.assertEqual(formulas.coverage_level(2.5), 'Good Coverage')
        self.assertEqual(formulas.coverage_level(1.5), 'Adequate Coverage')
        self.assertEqual(formulas.coverage_level(1.49), 'Minimal Coverage')


class TestHomeImprovementForms(unittest.TestCase):

    def setUp(self):
        self.app = create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        self.ctx.pop()

    def test_water_form_needs_a_fixture(self):
        result, errors = get_calculator('water-usage-flow').evaluate({'toilets': '0'})
        self.assertIsNone(result)
        self.assertIn('kitchen_sinks', errors)

    def test_water_form_blank_counts_are_zero(self):
        result, errors = get_calculator('water-usage-flow').evaluate({'toilets': '2', 'showers': ''})
        self.assertEqual(errors, {})
        self.assertEqual(result['fixture_units'], 6)

    def test_hardware_form_needs_doors_or_drawers(self):
        result, errors = get_calculator('door-cabinet-hardware').evaluate(
            {'doors': '0', 'drawers': '', 'pulls_per_door': '1', 'pulls_per_drawer': '1', 'pack_size': '10'})
        self.assertIsNone(result)
        self.assertIn('doors', errors)

    def test_framing_form_plates(self):
        result, errors = get_calculator('wall-framing-lumber').evaluate(
            {'wall_length': '24', 'stud_spacing': '16', 'wall_height': '8', 'openings': '2', 'plates': '3'})
        self.assertEqual(errors, {})
        self.assertEqual(result['plate_linear_feet'], 72)

    def test_paint_drying_form_rejects_zero_humidity(self):
        result, errors = get_calculator('paint-drying-time').evaluate(
            {'paint_type': 'latex', 'temperature': '70', 'humidity': '0', 'thickness': '1', 'coats': '2'})
        self.assertIsNone(result)
        self.assertIn('humidity', errors)


if __name__ == '__main__':
    unittest.main()

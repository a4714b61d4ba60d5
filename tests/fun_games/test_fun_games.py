"""
Unit tests for the compatibility games. Scores are seeded, so the same
inputs always give the same answer.
"""
import os
import unittest
from datetime import date

os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from app import create_app
from app.calculators.fun_games import formulas
from app.calculators.registry import get_calculator


class TestLovePercentage(unittest.TestCase):

    def test_same_names_same_score(self):
        first = formulas.love_percentage('Romeo', 'Juliet')
        second = formulas.love_percentage('Romeo', 'Juliet')
        self.assertEqual(first, second)

    def test_order_and_case_do_not_matter(self):
        a = formulas.love_percentage('Romeo', 'Juliet')
        b = formulas.love_percentage('JULIET', ' romeo ')
        self.assertEqual(a['percentage'], b['percentage'])

    def test_score_in_range_and_titled(self):
        for pair in [('Al', 'Bo'), ('Rose', 'Leo'), ('Anna', 'Hannah'), ('X', 'Zzzzzzzzzzzz')]:
            result = formulas.love_percentage(*pair)
            self.assertGreaterEqual(result['percentage'], 5)
            self.assertLessEqual(result['percentage'], 95)
            self.assertEqual(result['title'], formulas.LOVE_RESULTS.classify(result['percentage']).title)

    def test_blank_name_rejected(self):
        with self.assertRaises(ValueError):
            formulas.love_percentage('  ', 'Juliet')

    def test_variety_is_repeatable(self):
        self.assertEqual(formulas.variety('a', 'b', spread=10), formulas.variety('a', 'b', spread=10))
        self.assertLess(formulas.variety('a', 'b', spread=10), 10)


class TestZodiacMatch(unittest.TestCase):

    def test_same_element(self):
        result = formulas.zodiac_match('Aries', 'Leo')
        self.assertEqual(result['element_match'], 'Same Element')
        self.assertEqual(result['elements'], 'Fire + Fire')
        self.assertEqual(result, formulas.zodiac_match('Aries', 'Leo'))

    def test_compatible_and_different_elements(self):
        self.assertEqual(formulas.zodiac_match('Gemini', 'Leo')['element_match'], 'Compatible Elements')
        self.assertEqual(formulas.zodiac_match('Cancer', 'Leo')['element_match'], 'Different Elements')

    def test_every_pair_scores_in_range(self):
        for first, _ in formulas.SIGN_CHOICES:
            for second, _ in formulas.SIGN_CHOICES:
                percentage = formulas.zodiac_match(first, second)['percentage']
                self.assertTrue(5 <= percentage <= 95, (first, second, percentage))

    def test_unknown_sign(self):
        with self.assertRaises(ValueError):
            formulas.zodiac_match('Ophiuchus', 'Leo')


class TestBirthdayCompatibility(unittest.TestCase):

    def test_sign_boundaries(self):
        self.assertEqual(formulas.sign_for_date(date(2000, 3, 20)), 'Pisces')
        self.assertEqual(formulas.sign_for_date(date(2000, 3, 21)), 'Aries')
        self.assertEqual(formulas.sign_for_date(date(2000, 1, 5)), 'Capricorn')
        self.assertEqual(formulas.sign_for_date(date(2000, 1, 20)), 'Aquarius')
        self.assertEqual(formulas.sign_for_date(date(2000, 12, 25)), 'Capricorn')

    def test_life_path_number(self):
        # 15 + 7 + 1990 = 2012 -> 5
        self.assertEqual(formulas.life_path_number(date(1990, 7, 15)), 5)

    def test_seasons(self):
        self.assertEqual(formulas.season(date(2000, 4, 1)), 'spring')
        self.assertEqual(formulas.season(date(2000, 12, 1)), 'winter')

    def test_same_birthday_is_top_score(self):
        result = formulas.birthday_compatibility(date(1990, 7, 25), date(1990, 7, 25))
        self.assertEqual(result['percentage'], 95)
        self.assertEqual(result['title'], 'Birthday Soulmates! 🎂')
        self.assertEqual(result['signs'], 'Leo + Leo')
        self.assertEqual(result['age_difference'], 0)

    def test_order_does_not_matter(self):
        a = formulas.birthday_compatibility(date(1985, 2, 1), date(1993, 10, 30))
        b = formulas.birthday_compatibility(date(1993, 10, 30), date(1985, 2, 1))
        self.assertEqual(a['percentage'], b['percentage'])
        self.assertEqual(a['age_difference'], 8)


class TestNameGames(unittest.TestCase):

    def test_scores_stay_in_range(self):
        games = [
            lambda a, b: formulas.crush_compatibility(a, b, 21, 23, 'Creative Artist', 'Romantic Dreamer'),
            lambda a, b: formulas.friendship_compatibility(a, b, 30, 62, 'Caring Helper', '', 'music, films'),
            lambda a, b: formulas.marriage_compatibility(a, b, 30, 31, 12, 'trust, family', 'Quiet and Reserved'),
            formulas.name_compatibility,
        ]
        for game in games:
            for pair in [('Al', 'Bo'), ('Rose', 'Leo'), ('X', 'Zzzzzzzzzzzz')]:
                result = game(*pair)
                self.assertTrue(5 <= result['percentage'] <= 95, (pair, result['percentage']))
                self.assertEqual(result, game(*pair))

    def test_matching_names_score_highly(self):
        result = formulas.name_compatibility('Anna', 'Anna')
        self.assertEqual(result['percentage'], 95)
        self.assertEqual(result['title'], 'Name Soulmates! 💫')
        self.assertEqual(result['shared_letters'], 2)

    def test_friendship_counts_interests(self):
        result = formulas.friendship_compatibility('Sam', 'Kit', shared_interests='music, hiking, , cooking')
        self.assertEqual(result['shared_interests'], 3)

    def test_blank_names_rejected(self):
        for game in (formulas.crush_compatibility, formulas.friendship_compatibility,
                     formulas.marriage_compatibility, formulas.name_compatibility):
            with self.assertRaises(ValueError):
                game(' ', 'Juliet')


class TestRelationshipStrength(unittest.TestCase):

    def test_quality_multiplier(self):
        self.assertEqual(formulas.quality_multiplier('Excellent', 'Excellent', 'Poor'), 1.3)
        self.assertEqual(formulas.quality_multiplier('Excellent', 'Very Good', 'Fair'), 1.2)
        self.assertEqual(formulas.quality_multiplier('Good', 'Good', 'Fair'), 1.05)
        self.assertEqual(formulas.quality_multiplier('Poor', 'Very Poor', 'Good'), 0.8)
        self.assertEqual(formulas.quality_multiplier('Fair', 'Fair', 'Fair'), 1.0)

    def test_excellent_long_relationship(self):
        result = formulas.relationship_strength('Ann', 'Bob', 20, 'Excellent', 'Excellent', 'Excellent')
        self.assertEqual(result['percentage'], 95)
        self.assertIn('Unwavering Trust', result['strengths'])
        self.assertTrue(result['improvements'])

    def test_poor_ratings_score_lower(self):
        strong = formulas.relationship_strength('Ann', 'Bob', 5, 'Very Good', 'Very Good', 'Good')
        weak = formulas.relationship_strength('Ann', 'Bob', 5, 'Poor', 'Very Poor', 'Poor')
        self.assertLess(weak['percentage'], strong['percentage'])

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            formulas.relationship_strength('Ann', 'Bob', trust='Sky high')


class TestRomanticQuiz(unittest.TestCase):

    def test_result_has_type_and_suggestions(self):
        result = formulas.romantic_quiz('Isabella', 29, 'Writing love letters', 'Quality Time',
                                        'Grand gestures', 'Weekend getaway',
                                        'We watched the sunset together, a perfect and special evening.')
        self.assertTrue(5 <= result['percentage'] <= 95)
        expected = formulas.QUIZ_RESULTS.classify(result['percentage'])
        self.assertEqual(result['personality_type'], expected.personality_type)
        self.assertTrue(result['suggestions'])

    def test_name_required(self):
        with self.assertRaises(ValueError):
            formulas.romantic_quiz('   ')


class TestFuturePartnerName(unittest.TestCase):

    def test_gender_filter(self):
        result = formulas.future_partner_name('Sam', 'Female', 'Any', 'Funny Comedian')
        names = {entry.name for entry in formulas.PARTNER_NAMES if entry.gender == 'Female'}
        self.assertIn(result['name'], names)
        self.assertTrue(50 <= result['compatibility'] <= 99)

    def test_origin_without_matches_keeps_gender(self):
        result = formulas.future_partner_name('Sam', 'Male', 'Indian')
        names = {entry.name for entry in formulas.PARTNER_NAMES if entry.gender == 'Male'}
        self.assertIn(result['name'], names)

    def test_origin_filter(self):
        result = formulas.future_partner_name('', 'Female', 'Indian')
        self.assertEqual(result['origin'], 'Indian')

    def test_same_answers_same_name(self):
        self.assertEqual(formulas.future_partner_name('Sam', 'Any', 'Greek'),
                         formulas.future_partner_name('Sam', 'Any', 'Greek'))


class TestFunGameForms(unittest.TestCase):

    def setUp(self):
        self.app = create_app({'TESTING': True, 'WTF_CSRF_ENABLED': False})
        self.ctx = self.app.app_context()
        self.ctx.push()

    def tearDown(self):
        self.ctx.pop()

    def test_birthday_form_parses_dates(self):
        result, errors = get_calculator('birthday-compatibility').evaluate(
            {'birthday1': '1990-07-25', 'birthday2': '1992-01-01'})
        self.assertEqual(errors, {})
        self.assertEqual(result['signs'], 'Leo + Capricorn')

    def test_birthday_form_rejects_bad_date(self):
        result, errors = get_calculator('birthday-compatibility').evaluate(
            {'birthday1': '25/07/1990', 'birthday2': '1992-01-01'})
        self.assertIsNone(result)
        self.assertIn('birthday1', errors)

    def test_relationship_form_rejects_unknown_rating(self):
        result, errors = get_calculator('relationship-strength-test').evaluate(
            {'partner1': 'Ann', 'partner2': 'Bob', 'communication': 'Amazing', 'trust': 'Good',
             'conflict_resolution': 'Good'})
        self.assertIsNone(result)
        self.assertIn('communication', errors)

    def test_optional_answers_can_be_blank(self):
        result, errors = get_calculator('marriage-compatibility').evaluate(
            {'partner1': 'Ann', 'partner2': 'Bob', 'partner1_age': '', 'communication_style': ''})
        self.assertEqual(errors, {})
        self.assertIn('title', result)

    def test_partner_name_without_your_name(self):
        result, errors = get_calculator('future-partner-name').evaluate(
            {'your_name': '', 'preferred_gender': 'Non-binary', 'preferred_origin': 'Any', 'personality': ''})
        self.assertEqual(errors, {})
        self.assertIn(result['name'], {e.name for e in formulas.PARTNER_NAMES if e.gender == 'Non-binary'})


if __name__ == '__main__':
    unittest.main()

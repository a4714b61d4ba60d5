"""
Unit tests for finance formulas: time value of money, bonds, investing,
business ratios and personal finance. Reference values are worked by hand.
"""
import unittest

from app.calculators.finance import bonds, business, investing, personal, time_value


class TestTimeValue(unittest.TestCase):

    def test_compound_interest_yearly(self):
        result = time_value.compound_interest(1000, 10, 20, 1)
        self.assertAlmostEqual(result['final_amount'], 6727.50, places=2)
        self.assertAlmostEqual(result['effective_annual_rate'], 10.0)
        self.assertEqual(len(result['schedule']), 20)
        self.assertAlmostEqual(result['schedule'][0]['balance'], 1100)

    def test_monthly_compounding_beats_yearly(self):
        monthly = time_value.compound_interest(1000, 5, 1, 12)
        self.assertAlmostEqual(monthly['effective_annual_rate'], 5.116, places=3)

    def test_loan_emi(self):
        result = time_value.loan_emi(100000, 12, 1)
        self.assertAlmostEqual(result['emi'], 8884.88, places=2)
        self.assertAlmostEqual(result['schedule'][-1]['balance'], 0, places=4)
        self.assertAlmostEqual(result['total_interest'], result['emi'] * 12 - 100000)

    def test_loan_emi_zero_rate(self):
        result = time_value.loan_emi(1200, 0, 1)
        self.assertEqual(result['emi'], 100)
        self.assertEqual(result['total_interest'], 0)

    def test_monthly_payment_needs_a_term(self):
        with self.assertRaises(ValueError):
            time_value.monthly_payment(1000, 5, 0)

    def test_mortgage(self):
        result = time_value.mortgage(300000, 60000, 6, 30, property_tax=3600, insurance=1200)
        self.assertEqual(result['loan_amount'], 240000)
        self.assertAlmostEqual(result['monthly_principal_interest'], 1438.92, places=2)
        self.assertEqual(result['monthly_escrow'], 400)
        self.assertEqual(result['down_payment_percent'], 20)
        self.assertEqual(len(result['schedule']), 30)

    def test_mortgage_rejects_full_down_payment(self):
        with self.assertRaises(ValueError):
            time_value.mortgage(100000, 100000, 5, 30)

    def test_future_value_types(self):
        single = time_value.future_value('single', 10, 2, present_value=1000)
        self.assertAlmostEqual(single['future_value'], 1210)
        annuity = time_value.future_value('annuity', 10, 2, payment=100)
        self.assertAlmostEqual(annuity['future_value'], 210)
        self.assertEqual(annuity['total_contributions'], 200)

    def test_growing_annuity_when_rate_equals_growth(self):
        result = time_value.future_value('growing', 5, 3, payment=100, growth_rate=5)
        self.assertAlmostEqual(result['future_value'], 330.75)

    def test_unknown_future_value_type(self):
        with self.assertRaises(ValueError):
            time_value.future_value('lump', 5, 3)

    def test_present_value(self):
        result = time_value.present_value(1000, 10, 1)
        self.assertAlmostEqual(result['present_value'], 909.0909, places=4)

    def test_perpetuity(self):
        self.assertAlmostEqual(time_value.perpetuity(100, 5)['present_value'], 2000)
        self.assertAlmostEqual(time_value.perpetuity(100, 5, 3)['present_value'], 5000)
        with self.assertRaises(ValueError):
            time_value.perpetuity(100, 5, 5)

    def test_sip(self):
        result = time_value.sip(1000, 12, 1)
        self.assertAlmostEqual(result['future_value'], 12809.33, places=1)
        self.assertEqual(result['total_invested'], 12000)
        self.assertEqual(len(result['schedule']), 1)


class TestBonds(unittest.TestCase):

    def test_coupon_equal_to_yield_is_par(self):
        result = bonds.bond_price(1000, 5, 10, 5, 2)
        self.assertAlmostEqual(result['price'], 1000, places=6)
        self.assertEqual(result['level'], 'At Par')
        self.assertEqual(result['strength'], 'Strong')
        self.assertEqual(result['coupon_payment'], 25)

    def test_premium_and_discount(self):
        self.assertEqual(bonds.bond_price(1000, 6, 10, 5, 2)['level'], 'Premium')
        self.assertEqual(bonds.bond_price(1000, 4.5, 10, 5, 2)['level'], 'Discount')

    def test_zero_coupon_duration_equals_maturity(self):
        result = bonds.bond_duration(1000, 0, 5, 5, 1)
        self.assertAlmostEqual(result['macaulay_duration'], 5)
        self.assertAlmostEqual(result['modified_duration'], 5 / 1.05)
        self.assertEqual(result['level'], 'Moderate')

    def test_yield_to_maturity_recovers_yield(self):
        price = bonds.price_from_yield(1000, 6, 10, 7, 2)
        result = bonds.yield_to_maturity(1000, 6, 10, price, 2)
        self.assertAlmostEqual(result['yield_to_maturity'], 7, places=3)
        self.assertEqual(result['level'], 'Moderate')

    def test_yield_to_maturity_extreme_prices_stay_in_range(self):
        cheap = bonds.yield_to_maturity(1000, 5, 100, 0.01, 12)
        self.assertAlmostEqual(cheap['yield_to_maturity'], 200)
        rich = bonds.yield_to_maturity(1000, 5, 100, 1e9, 12)
        self.assertGreaterEqual(rich['yield_to_maturity'], -50 - 1e-9)
        self.assertLess(rich['yield_to_maturity'], 0)

    def test_bad_terms(self):
        with self.assertRaises(ValueError):
            bonds.price_from_yield(0, 5, 10, 5)
        with self.assertRaises(ValueError):
            bonds.yield_to_maturity(1000, 5, 10, 0)


class TestInvesting(unittest.TestCase):

    def test_npv(self):
        result = investing.npv(10, [-1000, 500, 500, 500])
        self.assertAlmostEqual(result['npv'], 243.43, places=2)
        self.assertTrue(result['decision'].startswith('Accept'))
        self.assertEqual(result['schedule'][0]['present_value'], -1000)

    def test_npv_needs_cash_flows(self):
        with self.assertRaises(ValueError):
            investing.npv(10, [])

    def test_payback_period(self):
        result = investing.payback_period(1000, [300, 400, 500])
        self.assertAlmostEqual(result['payback_years'], 2.6)
        self.assertTrue(result['recovered'])
        self.assertEqual(result['summary'], '2 years and 7.2 months')

    def test_payback_not_reached(self):
        result = investing.payback_period(1000, [100, 100])
        self.assertIsNone(result['payback_years'])
        self.assertFalse(result['recovered'])

    def test_capm(self):
        result = investing.capm(3, 1.2, 8)
        self.assertAlmostEqual(result['expected_return'], 9)
        self.assertEqual(result['level'], 'Conservative')

    def test_sharpe_ratio(self):
        result = investing.sharpe_ratio(12, 2, 10)
        self.assertEqual(result['sharpe_ratio'], 1)
        self.assertEqual(result['level'], 'Good')
        with self.assertRaises(ValueError):
            investing.sharpe_ratio(12, 2, 0)

    def test_wacc(self):
        result = investing.wacc(600, 400, 10, 5, 25)
        self.assertAlmostEqual(result['wacc'], 7.5)
        self.assertEqual(result['level'], 'Low')
        self.assertEqual(result['strength'], 'Strong')

    def test_roi(self):
        result = investing.roi(1000, 1500, 2)
        self.assertEqual(result['roi'], 50)
        self.assertEqual(result['level'], 'Strong')
        self.assertAlmostEqual(result['annualized_roi'], 22.474, places=3)
        self.assertIsNone(investing.roi(1000, 900)['annualized_roi'])

    def test_real_interest_rate(self):
        result = investing.real_interest_rate(5, 3)
        self.assertAlmostEqual(result['real_rate'], 1.9417, places=4)
        self.assertEqual(result['approximate_real_rate'], 2)
        self.assertEqual(result['level'], 'Low')

    def test_tax_equivalent_yield(self):
        self.assertAlmostEqual(investing.tax_equivalent_yield(3, 25)['tax_equivalent_yield'], 4)

    def test_kelly_criterion(self):
        result = investing.kelly_criterion(60, 1)
        self.assertAlmostEqual(result['kelly_fraction'], 20)
        self.assertAlmostEqual(result['half_kelly'], 10)
        self.assertAlmostEqual(result['position_size'], 20000)
        self.assertEqual(investing.kelly_criterion(40, 1)['kelly_fraction'], 0)

    def test_value_at_risk(self):
        result = investing.value_at_risk(1000000, 20, 95, 252)
        self.assertAlmostEqual(result['z_score'], 1.6449, places=4)
        self.assertAlmostEqual(result['value_at_risk'], 328970.7, delta=1)
        self.assertEqual(result['level'], 'Very High')
        with self.assertRaises(ValueError):
            investing.value_at_risk(1000, 20, 80, 1)

    def test_option_greeks_put_call_parity(self):
        call = investing.option_greeks('call', 100, 100, 1, 20, 5)
        put = investing.option_greeks('put', 100, 100, 1, 20, 5)
        self.assertAlmostEqual(call['price'], 10.4506, places=3)
        self.assertAlmostEqual(call['price'] - put['price'], 100 - 100 * 0.951229, places=3)
        self.assertAlmostEqual(call['delta'] - put['delta'], 1)
        self.assertAlmostEqual(call['gamma'], put['gamma'])

    def test_option_greeks_reference_values(self):
        call = investing.option_greeks('call', 100, 100, 1, 20, 5)
        self.assertAlmostEqual(call['d1'], 0.35)
        self.assertAlmostEqual(call['delta'], 0.636831, places=5)
        self.assertAlmostEqual(call['gamma'], 0.018762, places=5)
        self.assertAlmostEqual(call['vega'], 0.375240, places=5)

    def test_crypto_mining_at_a_loss(self):
        result = investing.crypto_mining_profitability(100, 3.25, 0.10, 3.125, 100, 60000)
        coins = 100 * 86400 / (100 * 2 ** 32) * 3.125
        self.assertAlmostEqual(result['coins_per_day'], coins)
        self.assertAlmostEqual(result['cost_per_day'], 7.8)
        self.assertAlmostEqual(result['daily_profit'], coins * 60000 - 7.8)
        self.assertAlmostEqual(result['monthly_profit'], result['daily_profit'] * 30)
        self.assertAlmostEqual(result['break_even_price'], 7.8 / coins)
        self.assertEqual(result['level'], 'Unprofitable')

    def test_crypto_mining_profitable_and_pool_fee(self):
        result = investing.crypto_mining_profitability(200, 3.5, 0.05, 3.125, 80, 100000)
        self.assertAlmostEqual(result['cost_per_day'], 4.2)
        self.assertGreater(result['profit_margin'], 50)
        self.assertEqual(result['level'], 'Highly Profitable')
        with_fee = investing.crypto_mining_profitability(200, 3.5, 0.05, 3.125, 80, 100000, pool_fee=50)
        self.assertAlmostEqual(with_fee['coins_per_day'], result['coins_per_day'] / 2)


class TestBusiness(unittest.TestCase):

    def test_current_ratio(self):
        result = business.current_ratio(200, 100)
        self.assertEqual(result['ratio'], 2)
        self.assertEqual(result['level'], 'High')
        self.assertEqual(result['working_capital'], 100)

    def test_debt_to_equity_boundary(self):
        result = business.debt_to_equity(100, 100)
        self.assertEqual(result['level'], 'Low Leverage')
        self.assertEqual(result['risk_level'], 'Moderate')

    def test_break_even(self):
        result = business.break_even(10000, 50, 30)
        self.assertEqual(result['break_even_units'], 500)
        self.assertEqual(result['break_even_revenue'], 25000)
        with self.assertRaises(ValueError):
            business.break_even(10000, 30, 30)

    def test_gross_margin(self):
        result = business.gross_margin(1000, 600)
        self.assertEqual(result['gross_margin'], 40)
        self.assertEqual(result['level'], 'Good')
        self.assertAlmostEqual(result['markup'], 66.667, places=3)

    def test_dscr(self):
        self.assertEqual(business.dscr(125000, 100000)['level'], 'Strong')
        self.assertEqual(business.dscr(90000, 100000)['level'], 'Insufficient')

    def test_straight_line(self):
        result = business.straight_line_depreciation(10000, 1000, 5)
        self.assertEqual(result['annual_depreciation'], 1800)
        self.assertAlmostEqual(result['schedule'][-1]['book_value'], 1000)

    def test_double_declining_stops_at_salvage(self):
        result = business.double_declining_depreciation(10000, 1000, 5)
        charges = [row['depreciation'] for row in result['schedule']]
        self.assertAlmostEqual(charges[0], 4000)
        self.assertAlmostEqual(charges[1], 2400)
        self.assertAlmostEqual(charges[-1], 296)
        self.assertAlmostEqual(result['total_depreciation'], 9000)

    def test_depreciation_needs_cost_above_salvage(self):
        with self.assertRaises(ValueError):
            business.straight_line_depreciation(1000, 1000, 5)


class TestPersonal(unittest.TestCase):

    def test_emergency_fund(self):
        result = personal.emergency_fund(2000, 6, 5000)
        self.assertEqual(result['target'], 12000)
        self.assertAlmostEqual(result['months_of_income'], 2.4)

    def test_credit_utilization(self):
        result = personal.credit_utilization(3000, 10000)
        self.assertEqual(result['utilization'], 30)
        self.assertEqual(result['level'], 'Fair')
        self.assertEqual(result['balance_for_30_percent'], 0)
        self.assertIsNone(result['card_utilization'])

    def test_loan_to_value_boundary(self):
        self.assertEqual(personal.loan_to_value(160000, 200000)['level'], 'Strong Equity')
        self.assertEqual(personal.loan_to_value(170000, 200000)['level'], 'Moderate')

    def test_rental_yield(self):
        result = personal.rental_yield(200000, 1500, 300)
        self.assertEqual(result['gross_yield'], 9)
        self.assertAlmostEqual(result['net_yield'], 7.2)
        self.assertEqual(result['level'], 'Strong')

    def test_fire_number_already_reached(self):
        result = personal.fire_number(40000, 4, current_savings=1000000)
        self.assertEqual(result['fire_number'], 1000000)
        self.assertTrue(result['reachable'])
        self.assertEqual(result['years_to_fire'], 0)

    def test_fire_number_unreachable(self):
        result = personal.fire_number(40000, 4)
        self.assertFalse(result['reachable'])
        self.assertIsNone(result['years_to_fire'])
        self.assertIn('50 years', result['summary'])


if __name__ == '__main__':
    unittest.main()

"""
Fixed-coupon bond maths: price, duration and yield to maturity.

Rates are passed in as percentages (5 for 5%) and converted to
per-period decimals internally. ``payments_per_year`` is 1, 2, 4 or 12.
"""

import logging

from app.calculators.base import Scale, Tier

logger = logging.getLogger(__name__)

PAYMENT_FREQUENCIES = [(1, 'Annual'), (2, 'Semi-annual'), (4, 'Quarterly'), (12, 'Monthly')]

VALUATION_SCALE = Scale(
    [-10, -5, 0, 5, 10],
    [
        Tier('Very Deep Discount', 'The bond trades far below face value, which usually signals credit concerns.',
             'Investigate the issuer\'s credit quality before buying at this price.'),
        Tier('Deep Discount', 'The bond trades well below face value.',
             'A large discount can offer capital gains at maturity if the issuer is sound.'),
        Tier('Discount', 'The bond trades below face value because its coupon is below market yields.',
             'Expect a gain at maturity as the price pulls back to par.'),
        Tier('At Par', 'The bond trades close to face value: the coupon is in line with market yields.',
             'Fairly priced relative to the market rate.'),
        Tier('Premium', 'The bond trades above face value because its coupon beats market yields.',
             'You pay extra now for higher coupons. The premium is lost at maturity.'),
        Tier('High Premium', 'The bond trades far above face value.',
             'Check call provisions: a callable premium bond may be redeemed early at a loss to you.'),
    ],
)

SENSITIVITY_SCALE = Scale(
    [1, 3, 5, 8],
    [
        Tier('Very Low', 'Price barely moves when rates change.', 'Suitable when you expect rates to rise.'),
        Tier('Low', 'Modest price sensitivity to rate changes.', 'A conservative choice for rate risk.'),
        Tier('Moderate', 'Noticeable price swings as rates move.', 'Balance against your investment horizon.'),
        Tier('High', 'Prices move sharply with interest rates.', 'Best held when you expect rates to fall.'),
        Tier('Very High', 'Very large price swings for small rate changes.',
             'Only for investors comfortable with significant interest-rate risk.'),
    ],
)

DURATION_STRENGTH = Scale([1, 3, 5, 8], ['Weak', 'Moderate', 'Good', 'Strong', 'Very Strong'])

YIELD_SCALE = Scale(
    [2, 5, 8],
    [
        Tier('Very Low', 'Yield is below typical inflation.', 'Real returns may be negative after inflation.'),
        Tier('Low', 'A modest yield typical of high-grade bonds.', 'Suited to capital preservation.'),
        Tier('Moderate', 'A healthy yield relative to typical markets.', 'A reasonable balance of income and risk.'),
        Tier('High', 'A high yield that often reflects higher credit risk.',
             'Confirm the issuer can meet its payments before chasing yield.'),
    ],
)


def _check_terms(face_value, years, payments_per_year):
    if face_value <= 0:
        raise ValueError("face value must be positive")
    if years <= 0:
        raise ValueError("years to maturity must be positive")
    if payments_per_year <= 0:
        raise ValueError("payments per year must be positive")


def _periods(years, payments_per_year):
    return max(1, int(round(years * payments_per_year)))


def price_from_yield(face_value, coupon_rate, years, yield_rate, payments_per_year=2):
    """Present value of coupons plus principal, discounted at the yield."""
    _check_terms(face_value, years, payments_per_year)
    y = yield_rate / 100 / payments_per_year
    coupon = coupon_rate / 100 * face_value / payments_per_year
    n = _periods(years, payments_per_year)
    price = sum(coupon / (1 + y) ** t for t in range(1, n + 1))
    return price + face_value / (1 + y) ** n


def _strength(premium, spread):
    premium = abs(premium)
    spread = abs(spread)
    if premium <= 2 and spread <= 1:
        return 'Strong'
    if premium <= 5 and spread <= 2:
        return 'Good'
    if premium <= 10 and spread <= 3:
        return 'Moderate'
    return 'Weak'


def bond_price(face_value, coupon_rate, years, yield_to_maturity, payments_per_year=2):
    price = price_from_yield(face_value, coupon_rate, years, yield_to_maturity, payments_per_year)
    # rounding keeps a coupon == yield bond exactly at par
    premium = round((price - face_value) / face_value * 100, 9)
    tier = VALUATION_SCALE.classify(premium)
    coupon = coupon_rate / 100 * face_value / payments_per_year
    n = _periods(years, payments_per_year)
    return {
        'price': price,
        'premium_discount': premium,
        'coupon_payment': coupon,
        'total_coupons': coupon * n,
        'level': tier.level,
        'strength': _strength(premium, yield_to_maturity - coupon_rate),
        'interpretation': tier.summary,
        'recommendation': tier.advice,
        'considerations': [
            'Bond prices move inversely to interest rates.',
            'Credit rating changes can move the price independently of rates.',
            'Callable bonds may be redeemed before maturity.',
        ],
    }


def bond_duration(face_value, coupon_rate, years, yield_to_maturity, payments_per_year=2):
    _check_terms(face_value, years, payments_per_year)
    m = payments_per_year
    y = yield_to_maturity / 100 / m
    coupon = coupon_rate / 100 * face_value / m
    n = _periods(years, m)

    price = 0.0
    weighted = 0.0
    for t in range(1, n + 1):
        cash = coupon + (face_value if t == n else 0)
        pv = cash / (1 + y) ** t
        price += pv
        weighted += t * pv

    macaulay = weighted / price / m
    modified = macaulay / (1 + y)
    tier = SENSITIVITY_SCALE.classify(modified)
    return {
        'macaulay_duration': macaulay,
        'modified_duration': modified,
        'price': price,
        'price_change_per_1pct': -modified,
        'level': tier.level,
        'strength': DURATION_STRENGTH.classify(modified),
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def yield_to_maturity(face_value, coupon_rate, years, price, payments_per_year=2,
                      tolerance=1e-4, max_iterations=100):
    """Solve for the annual yield with Newton-Raphson on the per-period rate."""
    _check_terms(face_value, years, payments_per_year)
    if price <= 0:
        raise ValueError("price must be positive")
    m = payments_per_year
    coupon = coupon_rate / 100 * face_value / m
    n = _periods(years, m)

    y = coupon_rate / 100 / m
    iterations = 0
    for iterations in range(1, max_iterations + 1):
        value = 0.0
        slope = 0.0
        for t in range(1, n + 1):
            cash = coupon + (face_value if t == n else 0)
            value += cash / (1 + y) ** t
            slope -= t * cash / (1 + y) ** (t + 1)
        diff = value - price
        if abs(diff) < tolerance or slope == 0:
            break
        y = y - diff / slope
        # Keep the annual rate within -50% and 200%
        y = max(-0.5 / m, min(2.0 / m, y))
    else:
        logger.debug("YTM did not converge for price=%s after %s iterations", price, max_iterations)

    annual = y * m * 100
    tier = YIELD_SCALE.classify(annual)
    current_yield = coupon * m / price * 100
    return {
        'yield_to_maturity': annual,
        'current_yield': current_yield,
        'iterations': iterations,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }

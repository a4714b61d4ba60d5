"""
Investment appraisal, portfolio and risk measures.

Percentages come in as whole numbers (8 for 8%) and go out the same way.
"""

import math
from statistics import NormalDist

from app.calculators.base import Scale, Tier, clamp

OPTION_TYPES = [('call', 'Call'), ('put', 'Put')]

STANDARD_NORMAL = NormalDist()

CAPM_SCALE = Scale(
    [0, 5, 10, 15],
    [
        Tier('Negative', 'The model expects the asset to lose value relative to the risk-free rate.',
             'Re-check beta and the market premium. A negative required return is unusual.'),
        Tier('Low', 'A low required return, typical of defensive assets.', 'Suitable for capital preservation.'),
        Tier('Conservative', 'A modest required return for moderate systematic risk.',
             'Fits a balanced portfolio.'),
        Tier('Moderate', 'A market-like required return.', 'Demand at least this return before investing.'),
        Tier('High', 'A high required return that reflects high systematic risk.',
             'Only invest if expected returns clearly exceed this hurdle.'),
    ],
)
CAPM_STRENGTH = Scale([0, 5, 10, 15], ['Very Weak', 'Weak', 'Moderate', 'Good', 'Strong'])

SHARPE_SCALE = Scale(
    [0, 0.5, 1, 2],
    [
        Tier('Very Poor', 'Returns are below the risk-free rate.', 'A risk-free asset would have done better.'),
        Tier('Poor', 'Little excess return for the risk taken.', 'Look for better risk-adjusted alternatives.'),
        Tier('Adequate', 'Acceptable compensation for volatility.', 'Reasonable, but there is room to improve.'),
        Tier('Good', 'Good excess return per unit of risk.', 'A solid risk-adjusted performer.'),
        Tier('Excellent', 'Outstanding risk-adjusted returns.', 'Check that the track record is long enough to trust.'),
    ],
)

WACC_SCALE = Scale(
    [5, 10, 15],
    [
        Tier('Very Low', 'Capital is very cheap for this company.', 'Many projects will clear this hurdle rate.'),
        Tier('Low', 'A low cost of capital.', 'Investment opportunities should be plentiful.'),
        Tier('Moderate', 'A typical cost of capital.', 'Projects must earn a market-like return.'),
        Tier('High', 'Capital is expensive.', 'Consider rebalancing debt and equity to lower the hurdle rate.'),
    ],
)
WACC_STRENGTH = Scale([5, 10, 15], ['Very Strong', 'Strong', 'Moderate', 'Weak'])

ROI_SCALE = Scale(
    [0, 10, 20, 50],
    ['Poor', 'Weak', 'Moderate', 'Strong', 'Exceptional'],
    closed='right',
)
ROI_RISK_SCALE = Scale([0, 10, 30], ['Very High', 'High', 'Moderate', 'Low'], closed='right')

DIVIDEND_SCALE = Scale(
    [2, 4],
    [
        Tier('Low', 'A low yield. Most of the return must come from growth.', 'Suited to growth-focused investors.'),
        Tier('Moderate', 'A balanced income yield.', 'A reasonable mix of income and growth.'),
        Tier('High', 'A high income yield.', 'Check that earnings cover the dividend so it is sustainable.'),
    ],
)

REAL_RATE_SCALE = Scale(
    [-2, 0, 2, 5],
    [
        Tier('Very Negative', 'Inflation is eroding purchasing power quickly.', 'Look for inflation-protected assets.'),
        Tier('Negative', 'Returns trail inflation.', 'Savings are losing real value.'),
        Tier('Low', 'Returns barely beat inflation.', 'Real growth will be slow.'),
        Tier('Moderate', 'Healthy real growth.', 'Purchasing power is growing steadily.'),
        Tier('Strong', 'Strong real growth well above inflation.', 'Confirm the nominal rate is sustainable.'),
    ],
)

VAR_SCALE = Scale(
    [5, 10, 20, 30],
    [
        Tier('Very Low', 'Potential losses are small relative to the portfolio.', 'Risk is well contained.'),
        Tier('Low', 'Modest potential losses.', 'A comfortable risk level for most investors.'),
        Tier('Moderate', 'Meaningful potential losses in bad periods.', 'Make sure this matches your risk tolerance.'),
        Tier('High', 'Large potential losses.', 'Consider diversifying or reducing position sizes.'),
        Tier('Very High', 'Severe potential losses.', 'Reduce exposure or hedge the portfolio.'),
    ],
    closed='right',
)

# net margin (%) after electricity
MINING_SCALE = Scale(
    [0, 20, 50],
    [
        Tier('Unprofitable', 'Electricity costs more than the coins are worth.',
             'Mining at a loss only makes sense if you expect the price to rise. Find cheaper power first.'),
        Tier('Marginal', 'A thin margin that a small price drop or difficulty rise would wipe out.',
             'Watch difficulty adjustments closely and keep hardware efficient.'),
        Tier('Profitable', 'Revenue comfortably covers electricity.',
             'Hardware and cooling costs are not included.'),
        Tier('Highly Profitable', 'Electricity is a small share of revenue.',
             'Margins this wide rarely last; plan for difficulty growth.'),
    ],
)
HASHES_PER_DIFFICULTY = 2 ** 32
SECONDS_PER_DAY = 86400


def npv(discount_rate, cash_flows):
    """Net present value; the first cash flow is at t=0 and is not discounted."""
    if not cash_flows:
        raise ValueError("at least one cash flow is required")
    r = discount_rate / 100
    present_values = [cf / (1 + r) ** t for t, cf in enumerate(cash_flows)]
    value = sum(present_values)
    if value > 0:
        decision = 'Accept: the project creates value at this discount rate.'
    elif value < 0:
        decision = 'Reject: the project destroys value at this discount rate.'
    else:
        decision = 'Indifferent: the project exactly earns the discount rate.'
    return {
        'npv': value,
        'total_inflows': sum(cf for cf in cash_flows if cf > 0),
        'decision': decision,
        'schedule': [
            {'year': t, 'cash_flow': cf, 'present_value': pv}
            for t, (cf, pv) in enumerate(zip(cash_flows, present_values))
        ],
    }


def payback_period(initial_investment, cash_flows):
    remaining = initial_investment
    for year, flow in enumerate(cash_flows, start=1):
        if flow >= remaining and flow > 0:
            fraction = remaining / flow
            years = year - 1 + fraction
            whole = int(years)
            months = (years - whole) * 12
            return {
                'payback_years': years,
                'recovered': True,
                'summary': f"{whole} years and {months:.1f} months",
            }
        remaining -= flow
    return {
        'payback_years': None,
        'recovered': False,
        'summary': 'The investment is not recovered within the cash flows provided.',
    }


def capm(risk_free_rate, beta, market_return):
    premium = market_return - risk_free_rate
    expected = risk_free_rate + beta * premium
    tier = CAPM_SCALE.classify(expected)
    return {
        'expected_return': expected,
        'market_risk_premium': premium,
        'risk_premium': beta * premium,
        'level': tier.level,
        'strength': CAPM_STRENGTH.classify(expected),
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def sharpe_ratio(portfolio_return, risk_free_rate, std_dev):
    if std_dev <= 0:
        raise ValueError("standard deviation must be greater than zero")
    ratio = (portfolio_return - risk_free_rate) / std_dev
    tier = SHARPE_SCALE.classify(ratio)
    return {
        'sharpe_ratio': ratio,
        'excess_return': portfolio_return - risk_free_rate,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def wacc(equity_value, debt_value, cost_of_equity, cost_of_debt, tax_rate):
    total = equity_value + debt_value
    if total <= 0:
        raise ValueError("equity plus debt must be positive")
    equity_weight = equity_value / total
    debt_weight = debt_value / total
    after_tax_debt = cost_of_debt * (1 - tax_rate / 100)
    value = equity_weight * cost_of_equity + debt_weight * after_tax_debt
    tier = WACC_SCALE.classify(value)
    return {
        'wacc': value,
        'equity_weight': equity_weight * 100,
        'debt_weight': debt_weight * 100,
        'after_tax_cost_of_debt': after_tax_debt,
        'level': tier.level,
        'strength': WACC_STRENGTH.classify(value),
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def roi(initial_investment, final_value, years=None):
    if initial_investment <= 0:
        raise ValueError("initial investment must be positive")
    gain = final_value - initial_investment
    value = gain / initial_investment * 100
    annualized = None
    if years and final_value > 0:
        annualized = ((final_value / initial_investment) ** (1 / years) - 1) * 100
    return {
        'roi': value,
        'net_gain': gain,
        'annualized_roi': annualized,
        'level': ROI_SCALE.classify(value),
        'risk_level': ROI_RISK_SCALE.classify(value),
    }


def dividend_yield(annual_dividend, share_price, cost_basis=None):
    current = annual_dividend / share_price * 100
    tier = DIVIDEND_SCALE.classify(current)
    return {
        'dividend_yield': current,
        'yield_on_cost': annual_dividend / cost_basis * 100 if cost_basis else None,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def real_interest_rate(nominal_rate, inflation_rate):
    """Fisher equation, exact form."""
    real = ((1 + nominal_rate / 100) / (1 + inflation_rate / 100) - 1) * 100
    tier = REAL_RATE_SCALE.classify(real)
    return {
        'real_rate': real,
        'approximate_real_rate': nominal_rate - inflation_rate,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def tax_equivalent_yield(tax_free_yield, tax_rate):
    if tax_rate >= 100:
        raise ValueError("tax rate must be below 100%")
    value = tax_free_yield / (1 - tax_rate / 100)
    if value > 5:
        note = 'The tax-free bond beats taxable bonds yielding less than this. That is a strong advantage.'
    else:
        note = 'Compare against taxable yields. The tax advantage is modest at this level.'
    return {
        'tax_equivalent_yield': value,
        'tax_advantage': value - tax_free_yield,
        'interpretation': note,
    }


def kelly_criterion(win_probability, win_loss_ratio, portfolio_value=100000):
    p = win_probability / 100
    q = 1 - p
    b = win_loss_ratio
    if b <= 0:
        raise ValueError("win/loss ratio must be positive")
    raw = (p * b - q) / b
    fraction = clamp(raw * 100)
    if raw <= 0:
        advice = 'No edge: the expected value is negative or zero, so do not bet.'
    elif fraction > 25:
        advice = 'Very aggressive sizing. Most practitioners bet half-Kelly or less.'
    elif fraction > 10:
        advice = 'Aggressive. Consider half-Kelly to reduce drawdowns.'
    elif fraction > 5:
        advice = 'Moderate sizing with a real edge.'
    else:
        advice = 'A small edge. Keep positions small.'
    return {
        'kelly_fraction': fraction,
        'half_kelly': fraction / 2,
        'position_size': fraction / 100 * portfolio_value,
        'edge': (p * b - q) * 100,
        'recommendation': advice,
    }


def value_at_risk(portfolio_value, volatility, confidence_level, time_horizon_days):
    if not 90 <= confidence_level <= 99.9:
        raise ValueError("confidence level must be between 90 and 99.9")
    z = STANDARD_NORMAL.inv_cdf(confidence_level / 100)
    horizon = time_horizon_days / 252
    var = portfolio_value * volatility / 100 * z * math.sqrt(horizon)
    var_percent = var / portfolio_value * 100
    tier = VAR_SCALE.classify(var_percent)
    return {
        'value_at_risk': var,
        'var_percent': var_percent,
        'z_score': z,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def option_greeks(option_type, spot_price, strike_price, years_to_expiry, volatility, risk_free_rate):
    """Black-Scholes greeks; vega and rho per 1% move, theta per calendar day."""
    S = spot_price
    K = strike_price
    T = years_to_expiry
    sigma = volatility / 100
    r = risk_free_rate / 100
    if sigma <= 0 or T <= 0:
        raise ValueError("volatility and time to expiry must be positive")

    sqrt_t = math.sqrt(T)
    d1 = (math.log(S / K) + (r + sigma ** 2 / 2) * T) / (sigma * sqrt_t)
    d2 = d1 - sigma * sqrt_t
    pdf = STANDARD_NORMAL.pdf(d1)
    discount = math.exp(-r * T)

    if option_type == 'call':
        delta = STANDARD_NORMAL.cdf(d1)
        theta = (-S * pdf * sigma / (2 * sqrt_t) - r * K * discount * STANDARD_NORMAL.cdf(d2)) / 365
        rho = K * T * discount * STANDARD_NORMAL.cdf(d2) / 100
        price = S * STANDARD_NORMAL.cdf(d1) - K * discount * STANDARD_NORMAL.cdf(d2)
    elif option_type == 'put':
        delta = STANDARD_NORMAL.cdf(d1) - 1
        theta = (-S * pdf * sigma / (2 * sqrt_t) + r * K * discount * STANDARD_NORMAL.cdf(-d2)) / 365
        rho = -K * T * discount * STANDARD_NORMAL.cdf(-d2) / 100
        price = K * discount * STANDARD_NORMAL.cdf(-d2) - S * STANDARD_NORMAL.cdf(-d1)
    else:
        raise ValueError(f"unknown option type: {option_type}")

    return {
        'price': price,
        'delta': delta,
        'gamma': pdf / (S * sigma * sqrt_t),
        'vega': S * pdf * sqrt_t / 100,
        'theta': theta,
        'rho': rho,
        'd1': d1,
        'd2': d2,
    }


def crypto_mining_profitability(hash_rate, power_consumption, electricity_cost, block_reward, network_difficulty,
                                coin_price, pool_fee=0):
    """
    Expected mining income for a rig.

    Hash rate is in TH/s and network difficulty in trillions (T), so the 10^12
    factors cancel. Power is in kW and electricity in $ per kWh.
    """
    coins_per_day = (hash_rate * SECONDS_PER_DAY / (network_difficulty * HASHES_PER_DIFFICULTY)
                     * block_reward * (1 - (pool_fee or 0) / 100))
    revenue = coins_per_day * coin_price
    cost = power_consumption * 24 * electricity_cost
    profit = revenue - cost
    margin = profit / revenue * 100
    tier = MINING_SCALE.classify(margin)
    return {
        'coins_per_day': coins_per_day,
        'revenue_per_day': revenue,
        'cost_per_day': cost,
        'daily_profit': profit,
        'monthly_profit': profit * 30,
        'yearly_profit': profit * 365,
        'profit_margin': margin,
        'break_even_price': cost / coins_per_day,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }

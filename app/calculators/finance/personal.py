"""
Household finance: safety nets, credit, property and early retirement.
"""

from app.calculators.base import Scale, Tier

FIRE_MAX_MONTHS = 600

CREDIT_UTILIZATION_SCALE = Scale(
    [10, 30, 50, 70],
    [
        Tier('Excellent', 'Utilization is very low.', 'This is ideal for your credit score.'),
        Tier('Good', 'Utilization is under the common 30% guideline.', 'Keep balances at this level.'),
        Tier('Fair', 'Utilization is above 30%.', 'Paying balances down will likely lift your score.'),
        Tier('High', 'Utilization is high.', 'Prioritise paying down revolving balances.'),
        Tier('Very High', 'Cards are close to their limits.', 'Reduce balances urgently and avoid new charges.'),
    ],
)

LTV_SCALE = Scale(
    [80, 90],
    [
        Tier('Strong Equity', 'You have at least 20% equity.', 'You will usually avoid mortgage insurance.'),
        Tier('Moderate', 'Equity is between 10% and 20%.', 'Expect lenders to require PMI.'),
        Tier('High Risk', 'Less than 10% equity.', 'Expect higher rates. Consider a larger down payment.'),
    ],
    closed='right',
)

RENTAL_YIELD_SCALE = Scale(
    [4, 6],
    [
        Tier('Weak', 'The net yield is low for a rental.', 'The return may depend mainly on capital growth.'),
        Tier('Moderate', 'A reasonable net yield.', 'Check local vacancy rates and maintenance costs.'),
        Tier('Strong', 'A strong net yield.', 'Good cash-flow potential.'),
    ],
)


def emergency_fund(monthly_expenses, months, monthly_income=None):
    target = monthly_expenses * months
    return {
        'target': target,
        'months_of_income': target / monthly_income if monthly_income else None,
    }


def credit_utilization(total_balance, total_limit, card_balance=None, card_limit=None):
    if total_limit <= 0:
        raise ValueError("total credit limit must be positive")
    overall = total_balance / total_limit * 100
    tier = CREDIT_UTILIZATION_SCALE.classify(overall)
    single = None
    if card_balance is not None and card_limit:
        single = card_balance / card_limit * 100
    return {
        'utilization': overall,
        'card_utilization': single,
        'available_credit': total_limit - total_balance,
        'balance_for_30_percent': max(0.0, total_balance - total_limit * 0.3),
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def loan_to_value(loan_amount, property_value):
    if property_value <= 0:
        raise ValueError("property value must be positive")
    ltv = loan_amount / property_value * 100
    tier = LTV_SCALE.classify(ltv)
    return {
        'ltv': ltv,
        'equity': property_value - loan_amount,
        'equity_percent': 100 - ltv,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def rental_yield(property_price, monthly_rent, monthly_expenses=0.0, vacancy_rate=0.0):
    if property_price <= 0:
        raise ValueError("property price must be positive")
    annual_rent = monthly_rent * 12
    effective_rent = annual_rent * (1 - (vacancy_rate or 0.0) / 100)
    net_income = effective_rent - (monthly_expenses or 0.0) * 12
    net = net_income / property_price * 100
    tier = RENTAL_YIELD_SCALE.classify(net)
    return {
        'gross_yield': annual_rent / property_price * 100,
        'net_yield': net,
        'annual_net_income': net_income,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def fire_number(annual_expenses, withdrawal_rate, current_savings=0.0,
                monthly_contribution=0.0, annual_return=7.0):
    if withdrawal_rate <= 0:
        raise ValueError("withdrawal rate must be positive")
    target = annual_expenses / (withdrawal_rate / 100)
    balance = current_savings or 0.0
    contribution = monthly_contribution or 0.0
    r = (annual_return or 0.0) / 100 / 12

    months = 0
    while balance < target and months < FIRE_MAX_MONTHS:
        balance = balance * (1 + r) + contribution
        months += 1

    reachable = balance >= target
    return {
        'fire_number': target,
        'reachable': reachable,
        'years_to_fire': months // 12 if reachable else None,
        'extra_months': months % 12 if reachable else None,
        'projected_balance': balance,
        'summary': (
            f"{months // 12} years and {months % 12} months to financial independence"
            if reachable else
            f"Not reached within {FIRE_MAX_MONTHS // 12} years at this savings rate"
        ),
    }

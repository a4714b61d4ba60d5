"""
Business ratios, break-even and depreciation.
"""

from app.calculators.base import Scale, Tier

CURRENT_RATIO_SCALE = Scale(
    [1, 1.5, 2, 3],
    [
        Tier('Very Low', 'Current liabilities exceed current assets.', 'Short-term solvency is at risk. Improve cash flow urgently.'),
        Tier('Low', 'Liquidity is thin.', 'Build a larger working-capital buffer.'),
        Tier('Moderate', 'Adequate liquidity.', 'Keep monitoring receivables and inventory.'),
        Tier('High', 'Strong liquidity.', 'Well placed to meet short-term obligations.'),
        Tier('Very High', 'Very high liquidity, possibly idle assets.', 'Consider putting excess current assets to work.'),
    ],
)

DEBT_EQUITY_SCALE = Scale(
    [0.5, 1, 2],
    [
        Tier('Minimal Leverage', 'Financed mostly by equity.', 'Low financial risk. There may be room to use cheap debt.'),
        Tier('Low Leverage', 'Conservative use of debt.', 'A healthy balance of debt and equity.'),
        Tier('Moderate Leverage', 'Debt roughly matches equity.', 'Watch interest coverage as rates change.'),
        Tier('High Leverage', 'Debt dominates the capital structure.', 'Reduce debt or raise equity to lower risk.'),
    ],
    closed='right',
)
DEBT_EQUITY_RISK = Scale([0.5, 1, 2], ['Low', 'Moderate', 'High', 'Very High'], closed='right')

GROSS_MARGIN_SCALE = Scale(
    [20, 30, 40, 50],
    [
        Tier('Poor', 'Very little is left after the cost of goods.', 'Review pricing and supplier costs.'),
        Tier('Marginal', 'Thin margins.', 'Small cost increases could wipe out profit.'),
        Tier('Adequate', 'Reasonable margins for many industries.', 'Look for efficiency gains.'),
        Tier('Good', 'Healthy margins.', 'Good pricing power.'),
        Tier('Excellent', 'Excellent margins.', 'Strong pricing power or low production costs.'),
    ],
)

DSCR_SCALE = Scale(
    [1.0, 1.10, 1.25],
    [
        Tier('Insufficient', 'Income does not cover debt payments.', 'Most lenders will decline at this level.'),
        Tier('Thin', 'Income barely covers debt payments.', 'Any drop in income creates a shortfall.'),
        Tier('Adequate', 'Debt is covered with a small cushion.', 'Some lenders may ask for more coverage.'),
        Tier('Strong', 'Comfortable coverage of debt payments.', 'Meets typical lender requirements.'),
    ],
)


def _ratio_result(value, tier, **extra):
    result = {
        'ratio': value,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }
    result.update(extra)
    return result


def current_ratio(current_assets, current_liabilities):
    if current_liabilities <= 0:
        raise ValueError("current liabilities must be positive")
    value = current_assets / current_liabilities
    return _ratio_result(
        value,
        CURRENT_RATIO_SCALE.classify(value),
        working_capital=current_assets - current_liabilities,
    )


def debt_to_equity(total_debt, total_equity):
    if total_equity <= 0:
        raise ValueError("shareholders' equity must be positive")
    value = total_debt / total_equity
    return _ratio_result(
        value,
        DEBT_EQUITY_SCALE.classify(value),
        risk_level=DEBT_EQUITY_RISK.classify(value),
    )


def break_even(fixed_costs, price_per_unit, variable_cost_per_unit):
    margin = price_per_unit - variable_cost_per_unit
    if margin <= 0:
        raise ValueError("price must exceed variable cost per unit")
    units = fixed_costs / margin
    return {
        'break_even_units': units,
        'break_even_revenue': units * price_per_unit,
        'contribution_margin': margin,
        'contribution_margin_ratio': margin / price_per_unit * 100,
    }


def gross_margin(revenue, cost_of_goods_sold):
    if revenue <= 0:
        raise ValueError("revenue must be positive")
    profit = revenue - cost_of_goods_sold
    margin = profit / revenue * 100
    tier = GROSS_MARGIN_SCALE.classify(margin)
    return {
        'gross_margin': margin,
        'gross_profit': profit,
        'markup': profit / cost_of_goods_sold * 100 if cost_of_goods_sold else None,
        'level': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def dscr(net_operating_income, annual_debt_service):
    if annual_debt_service <= 0:
        raise ValueError("annual debt service must be positive")
    value = net_operating_income / annual_debt_service
    return _ratio_result(
        value,
        DSCR_SCALE.classify(value),
        surplus=net_operating_income - annual_debt_service,
    )


def straight_line_depreciation(asset_cost, salvage_value, useful_life):
    if asset_cost <= salvage_value:
        raise ValueError("asset cost must exceed salvage value")
    annual = (asset_cost - salvage_value) / useful_life
    schedule = []
    book = asset_cost
    for year in range(1, int(useful_life) + 1):
        book -= annual
        schedule.append({
            'year': year,
            'depreciation': annual,
            'accumulated': asset_cost - book,
            'book_value': book,
        })
    return {
        'annual_depreciation': annual,
        'depreciation_rate': annual / asset_cost * 100,
        'depreciable_amount': asset_cost - salvage_value,
        'schedule': schedule,
    }


def double_declining_depreciation(asset_cost, salvage_value, useful_life):
    if asset_cost <= salvage_value:
        raise ValueError("asset cost must exceed salvage value")
    rate = 2 / useful_life
    book = asset_cost
    schedule = []
    for year in range(1, int(useful_life) + 1):
        charge = min(book * rate, book - salvage_value)
        charge = max(0.0, charge)
        book -= charge
        schedule.append({
            'year': year,
            'depreciation': charge,
            'accumulated': asset_cost - book,
            'book_value': book,
        })
    return {
        'first_year_depreciation': schedule[0]['depreciation'] if schedule else 0.0,
        'depreciation_rate': rate * 100,
        'total_depreciation': asset_cost - book,
        'schedule': schedule,
    }

"""
Time value of money: compounding, annuities, loans and SIPs.
"""

COMPOUNDING_CHOICES = [
    (1, 'Annually'),
    (2, 'Semi-annually'),
    (4, 'Quarterly'),
    (12, 'Monthly'),
    (365, 'Daily'),
]

FV_TYPES = [
    ('single', 'Single amount'),
    ('annuity', 'Annuity (regular payments)'),
    ('growing', 'Growing annuity'),
]


def compound_interest(principal, annual_rate, years, compounds_per_year=12):
    r = annual_rate / 100
    n = compounds_per_year
    amount = principal * (1 + r / n) ** (n * years)

    schedule = []
    for year in range(1, int(years) + 1):
        balance = principal * (1 + r / n) ** (n * year)
        schedule.append({
            'year': year,
            'balance': balance,
            'interest_earned': balance - principal,
        })

    effective = ((1 + r / n) ** n - 1) * 100
    return {
        'final_amount': amount,
        'total_interest': amount - principal,
        'effective_annual_rate': effective,
        'schedule': schedule,
    }


def monthly_payment(principal, annual_rate, months):
    """Standard amortizing loan payment; a zero rate just splits the principal."""
    if months <= 0:
        raise ValueError("loan term must be at least one month")
    r = annual_rate / 12 / 100
    if r == 0:
        return principal / months
    growth = (1 + r) ** months
    return principal * r * growth / (growth - 1)


def amortization_schedule(principal, annual_rate, months, payment):
    """Yearly roll-up of interest, principal repaid and closing balance."""
    r = annual_rate / 12 / 100
    balance = principal
    rows = []
    year_interest = 0.0
    year_principal = 0.0
    for month in range(1, months + 1):
        interest = balance * r
        repaid = min(payment - interest, balance)
        balance -= repaid
        year_interest += interest
        year_principal += repaid
        if month % 12 == 0 or month == months:
            rows.append({
                'year': (month + 11) // 12,
                'interest_paid': year_interest,
                'principal_paid': year_principal,
                'balance': max(0.0, balance),
            })
            year_interest = 0.0
            year_principal = 0.0
    return rows


def loan_emi(principal, annual_rate, years):
    months = int(round(years * 12))
    emi = monthly_payment(principal, annual_rate, months)
    total = emi * months
    return {
        'emi': emi,
        'total_payment': total,
        'total_interest': total - principal,
        'interest_share': (total - principal) / total * 100 if total else 0.0,
        'schedule': amortization_schedule(principal, annual_rate, months, emi),
    }


def mortgage(home_price, down_payment, annual_rate, years, property_tax=0.0, insurance=0.0):
    """Monthly mortgage cost; property tax and insurance are annual amounts."""
    loan_amount = home_price - down_payment
    if loan_amount <= 0:
        raise ValueError("down payment must be less than the home price")
    months = int(round(years * 12))
    principal_and_interest = monthly_payment(loan_amount, annual_rate, months)
    escrow = ((property_tax or 0.0) + (insurance or 0.0)) / 12
    total_interest = principal_and_interest * months - loan_amount
    return {
        'loan_amount': loan_amount,
        'monthly_principal_interest': principal_and_interest,
        'monthly_escrow': escrow,
        'monthly_payment': principal_and_interest + escrow,
        'total_interest': total_interest,
        'down_payment_percent': down_payment / home_price * 100,
        'schedule': amortization_schedule(loan_amount, annual_rate, months, principal_and_interest),
    }


def future_value(fv_type, annual_rate, years, compounds_per_year=1, present_value=0.0,
                 payment=0.0, growth_rate=0.0):
    i = annual_rate / 100 / compounds_per_year
    n = years * compounds_per_year
    present_value = present_value or 0.0
    payment = payment or 0.0

    if fv_type == 'single':
        value = present_value * (1 + i) ** n
        contributed = present_value
    elif fv_type == 'annuity':
        value = payment * n if i == 0 else payment * ((1 + i) ** n - 1) / i
        contributed = payment * n
    elif fv_type == 'growing':
        g = (growth_rate or 0.0) / 100 / compounds_per_year
        if i == g:
            value = payment * n * (1 + i) ** (n - 1)
        else:
            value = payment * ((1 + i) ** n - (1 + g) ** n) / (i - g)
        contributed = sum(payment * (1 + g) ** k for k in range(int(n)))
    else:
        raise ValueError(f"unknown future value type: {fv_type}")

    return {
        'future_value': value,
        'total_contributions': contributed,
        'total_growth': value - contributed,
        'periods': n,
    }


def present_value(future_amount, annual_rate, years, compounds_per_year=1):
    i = annual_rate / 100 / compounds_per_year
    n = years * compounds_per_year
    pv = future_amount / (1 + i) ** n
    return {
        'present_value': pv,
        'discount': future_amount - pv,
        'discount_factor': 1 / (1 + i) ** n,
    }


def perpetuity(payment, discount_rate, growth_rate=0.0):
    r = discount_rate / 100
    g = (growth_rate or 0.0) / 100
    if r <= g:
        raise ValueError("discount rate must exceed the growth rate")
    return {
        'present_value': payment / (r - g),
        'growing': g != 0,
    }


def sip(monthly_investment, annual_rate, years):
    """Systematic investment plan with contributions at the start of each month."""
    r = annual_rate / 12 / 100
    months = int(round(years * 12))

    def value_after(m):
        if r == 0:
            return monthly_investment * m
        return monthly_investment * ((1 + r) ** m - 1) / r * (1 + r)

    schedule = []
    for year in range(1, months // 12 + 1):
        invested = monthly_investment * year * 12
        value = value_after(year * 12)
        schedule.append({'year': year, 'invested': invested, 'value': value, 'gain': value - invested})

    future = value_after(months)
    invested = monthly_investment * months
    gain = future - invested
    annualized = ((future / invested) ** (1 / years) - 1) * 100 if invested and years else 0.0
    return {
        'future_value': future,
        'total_invested': invested,
        'estimated_returns': gain,
        'gain_percent': gain / invested * 100 if invested else 0.0,
        'annualized_return': annualized,
        'schedule': schedule,
    }

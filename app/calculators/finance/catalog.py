from app.calculators.base import Calculator, Output
from app.calculators.finance import bonds, business, forms, investing, personal, time_value

CATEGORY = 'finance'

TIER_OUTPUTS = [
    Output('level', 'Assessment', 'text'),
    Output('interpretation', 'What it means', 'text'),
    Output('recommendation', 'Recommendation', 'text'),
]

LOAN_TABLE = Output('schedule', 'Amortization by year', 'table', columns=[
    ('year', 'Year', 'integer'),
    ('interest_paid', 'Interest', 'currency'),
    ('principal_paid', 'Principal', 'currency'),
    ('balance', 'Balance', 'currency'),
])

DEPRECIATION_TABLE = Output('schedule', 'Depreciation schedule', 'table', columns=[
    ('year', 'Year', 'integer'),
    ('depreciation', 'Depreciation', 'currency'),
    ('accumulated', 'Accumulated', 'currency'),
    ('book_value', 'Book value', 'currency'),
])

CALCULATORS = [
    # Bonds
    Calculator(
        slug='bond-price',
        name='Bond Price Calculator',
        category=CATEGORY,
        description='Price a fixed-coupon bond from its yield and see whether it trades at a premium or discount.',
        form_class=forms.BondForm,
        compute=bonds.bond_price,
        outputs=[
            Output('price', 'Bond price', 'currency'),
            Output('premium_discount', 'Premium / discount to par', 'percent'),
            Output('coupon_payment', 'Coupon per period', 'currency'),
            Output('strength', 'Pricing strength', 'text'),
        ] + TIER_OUTPUTS + [Output('considerations', 'Keep in mind', 'list')],
        guide="""
A bond's price is the present value of its remaining coupons plus the face
value repaid at maturity, all discounted at the market yield:

`P = sum(C / (1 + y)^t) + F / (1 + y)^n`

When the yield is above the coupon rate the bond trades at a **discount**.
When it is below, the bond trades at a **premium**.
""",
        faqs=[
            ('Why do bond prices fall when rates rise?',
             'Existing coupons become less attractive than new bonds, so the price drops until the yield matches the market.'),
        ],
        keywords=['bond price', 'bond valuation', 'premium bond', 'discount bond'],
        related=['bond-yield-to-maturity', 'bond-duration'],
        icon='📜',
    ),
    Calculator(
        slug='bond-duration',
        name='Bond Duration Calculator',
        category=CATEGORY,
        description='Macaulay and modified duration, and how sensitive a bond\'s price is to interest rates.',
        form_class=forms.BondForm,
        compute=bonds.bond_duration,
        outputs=[
            Output('macaulay_duration', 'Macaulay duration (years)'),
            Output('modified_duration', 'Modified duration'),
            Output('price_change_per_1pct', 'Price change for +1% yield (%)'),
            Output('strength', 'Duration strength', 'text'),
        ] + TIER_OUTPUTS,
        guide="""
**Macaulay duration** is the weighted-average time until a bond's cash
flows are received. **Modified duration** converts that into price sensitivity:
a modified duration of 6 means the price falls roughly 6% if yields rise by one point.
""",
        keywords=['duration', 'modified duration', 'interest rate risk'],
        related=['bond-price', 'bond-yield-to-maturity'],
        icon='⏳',
    ),
    Calculator(
        slug='bond-yield-to-maturity',
        name='Bond Yield to Maturity Calculator',
        category=CATEGORY,
        description='Solve for the annual return you earn by buying a bond at today\'s price and holding it to maturity.',
        form_class=forms.YieldToMaturityForm,
        compute=bonds.yield_to_maturity,
        outputs=[
            Output('yield_to_maturity', 'Yield to maturity', 'percent'),
            Output('current_yield', 'Current yield', 'percent'),
        ] + TIER_OUTPUTS,
        guide="""
YTM is the discount rate that makes the present value of all future cash flows
equal to the price paid. There is no closed form, so the calculator solves for it
numerically with Newton's method.
""",
        keywords=['ytm', 'yield to maturity', 'bond yield'],
        related=['bond-price', 'bond-duration'],
        icon='🎯',
    ),

    # Time value of money
    Calculator(
        slug='compound-interest',
        name='Compound Interest Calculator',
        category=CATEGORY,
        description='See how savings grow with interest on interest, year by year.',
        form_class=forms.CompoundInterestForm,
        compute=time_value.compound_interest,
        outputs=[
            Output('final_amount', 'Final amount', 'currency'),
            Output('total_interest', 'Total interest earned', 'currency'),
            Output('effective_annual_rate', 'Effective annual rate (APY)', 'percent'),
            Output('schedule', 'Growth by year', 'table', columns=[
                ('year', 'Year', 'integer'),
                ('balance', 'Balance', 'currency'),
                ('interest_earned', 'Interest to date', 'currency'),
            ]),
        ],
        guide="""
`A = P (1 + r/n)^(n t)`

where *P* is the principal, *r* the annual rate, *n* the compounding periods per
year and *t* the number of years. More frequent compounding gives a slightly
higher effective annual rate.
""",
        faqs=[
            ('What is the difference between APR and APY?',
             'APR is the quoted annual rate. APY includes the effect of compounding within the year.'),
        ],
        keywords=['compound interest', 'savings growth', 'apy'],
        related=['future-value', 'sip'],
        icon='💰',
    ),
    Calculator(
        slug='loan-emi',
        name='Loan EMI Calculator',
        category=CATEGORY,
        description='Equated monthly instalment, total interest and an amortization schedule for any loan.',
        form_class=forms.LoanEmiForm,
        compute=time_value.loan_emi,
        outputs=[
            Output('emi', 'Monthly payment (EMI)', 'currency'),
            Output('total_payment', 'Total payment', 'currency'),
            Output('total_interest', 'Total interest', 'currency'),
            Output('interest_share', 'Interest share of payments', 'percent'),
            LOAN_TABLE,
        ],
        guide="""
`EMI = P r (1 + r)^n / ((1 + r)^n - 1)`

with *r* the monthly rate and *n* the number of monthly payments. Early
payments are mostly interest, and the principal share grows over time.
""",
        faqs=[
            ('What happens at a 0% interest rate?', 'The EMI is simply the loan amount divided by the number of months.'),
        ],
        keywords=['emi', 'loan payment', 'amortization'],
        related=['mortgage', 'compound-interest'],
        icon='🏦',
    ),
    Calculator(
        slug='mortgage',
        name='Mortgage Calculator',
        category=CATEGORY,
        description='Monthly mortgage payment including property tax and insurance.',
        form_class=forms.MortgageForm,
        compute=time_value.mortgage,
        outputs=[
            Output('monthly_payment', 'Total monthly payment', 'currency'),
            Output('monthly_principal_interest', 'Principal & interest', 'currency'),
            Output('monthly_escrow', 'Tax & insurance (monthly)', 'currency'),
            Output('loan_amount', 'Loan amount', 'currency'),
            Output('total_interest', 'Total interest', 'currency'),
            Output('down_payment_percent', 'Down payment', 'percent'),
            LOAN_TABLE,
        ],
        guide="""
The principal-and-interest payment uses the standard amortization formula.
Property tax and insurance are spread evenly across the twelve months.
A down payment under 20% usually also means paying mortgage insurance.
""",
        keywords=['mortgage', 'home loan', 'house payment'],
        related=['loan-to-value', 'loan-emi'],
        icon='🏠',
    ),
    Calculator(
        slug='future-value',
        name='Future Value Calculator',
        category=CATEGORY,
        description='Future value of a lump sum, a regular annuity or a growing annuity.',
        form_class=forms.FutureValueForm,
        compute=time_value.future_value,
        outputs=[
            Output('future_value', 'Future value', 'currency'),
            Output('total_contributions', 'Total contributed', 'currency'),
            Output('total_growth', 'Growth', 'currency'),
        ],
        guide="""
- **Single amount**: `FV = PV (1 + i)^N`
- **Annuity**: `FV = PMT ((1 + i)^N - 1) / i`
- **Growing annuity**: `FV = PMT ((1 + i)^N - (1 + g)^N) / (i - g)`

Here *i* is the rate per compounding period and *N* the number of periods.
""",
        keywords=['future value', 'annuity', 'fv'],
        related=['present-value', 'compound-interest'],
        icon='🔮',
    ),
    Calculator(
        slug='present-value',
        name='Present Value Calculator',
        category=CATEGORY,
        description='What a future sum is worth today at a given discount rate.',
        form_class=forms.PresentValueForm,
        compute=time_value.present_value,
        outputs=[
            Output('present_value', 'Present value', 'currency'),
            Output('discount', 'Total discount', 'currency'),
            Output('discount_factor', 'Discount factor'),
        ],
        guide="`PV = FV / (1 + r)^n`: money received later is worth less than money today.",
        keywords=['present value', 'discounting'],
        related=['future-value', 'npv', 'perpetuity'],
        icon='⏪',
    ),
    Calculator(
        slug='perpetuity',
        name='Perpetuity Calculator',
        category=CATEGORY,
        description='Value a never-ending stream of payments, level or growing.',
        form_class=forms.PerpetuityForm,
        compute=time_value.perpetuity,
        outputs=[Output('present_value', 'Present value', 'currency')],
        guide="""
`PV = PMT / r` for a level perpetuity, or `PMT / (r - g)` when payments grow at *g*.
The discount rate must exceed the growth rate for the value to be finite.
""",
        keywords=['perpetuity', 'gordon growth'],
        related=['present-value', 'dividend-yield'],
        icon='♾️',
    ),
    Calculator(
        slug='sip',
        name='SIP Calculator',
        category=CATEGORY,
        description='Project the value of a monthly systematic investment plan.',
        form_class=forms.SipForm,
        compute=time_value.sip,
        outputs=[
            Output('future_value', 'Maturity value', 'currency'),
            Output('total_invested', 'Amount invested', 'currency'),
            Output('estimated_returns', 'Estimated returns', 'currency'),
            Output('gain_percent', 'Total gain', 'percent'),
            Output('annualized_return', 'Annualized return on invested amount', 'percent'),
            Output('schedule', 'Growth by year', 'table', columns=[
                ('year', 'Year', 'integer'),
                ('invested', 'Invested', 'currency'),
                ('value', 'Value', 'currency'),
                ('gain', 'Gain', 'currency'),
            ]),
        ],
        guide="""
`FV = M ((1 + i)^n - 1) / i x (1 + i)`

with *M* the monthly investment and *i* the monthly return. Contributions are
assumed at the start of each month.
""",
        keywords=['sip', 'systematic investment plan', 'mutual fund'],
        related=['compound-interest', 'future-value'],
        icon='📆',
    ),

    # Investing
    Calculator(
        slug='npv',
        name='Net Present Value (NPV) Calculator',
        category=CATEGORY,
        description='Discount a project\'s cash flows to decide whether it creates value.',
        form_class=forms.NpvForm,
        compute=investing.npv,
        outputs=[
            Output('npv', 'Net present value', 'currency'),
            Output('decision', 'Decision', 'text'),
            Output('schedule', 'Discounted cash flows', 'table', columns=[
                ('year', 'Year', 'integer'),
                ('cash_flow', 'Cash flow', 'currency'),
                ('present_value', 'Present value', 'currency'),
            ]),
        ],
        guide="""
`NPV = sum(CF_t / (1 + r)^t)` starting at *t = 0*.

Enter the initial outlay as a negative first cash flow. A positive NPV means
the project earns more than the discount rate.
""",
        keywords=['npv', 'capital budgeting', 'discounted cash flow'],
        related=['payback-period', 'present-value', 'wacc'],
        icon='📐',
    ),
    Calculator(
        slug='payback-period',
        name='Payback Period Calculator',
        category=CATEGORY,
        description='How long an investment takes to earn back its cost.',
        form_class=forms.PaybackPeriodForm,
        compute=investing.payback_period,
        outputs=[
            Output('payback_years', 'Payback period (years)'),
            Output('summary', 'Summary', 'text'),
        ],
        guide="""
Cash inflows are added up year by year until they cover the initial
investment. The final partial year is interpolated, so 2.5 means two and a half years.
""",
        keywords=['payback period', 'break even time'],
        related=['npv', 'roi'],
        icon='⏲️',
    ),
    Calculator(
        slug='capm',
        name='CAPM Calculator',
        category=CATEGORY,
        description='Expected return on an asset from the capital asset pricing model.',
        form_class=forms.CapmForm,
        compute=investing.capm,
        outputs=[
            Output('expected_return', 'Expected return', 'percent'),
            Output('market_risk_premium', 'Market risk premium', 'percent'),
            Output('strength', 'Return strength', 'text'),
        ] + TIER_OUTPUTS,
        guide="`E(R) = Rf + beta (Rm - Rf)`. Beta measures how strongly the asset moves with the market.",
        keywords=['capm', 'cost of equity', 'beta'],
        related=['wacc', 'sharpe-ratio'],
        icon='📈',
    ),
    Calculator(
        slug='sharpe-ratio',
        name='Sharpe Ratio Calculator',
        category=CATEGORY,
        description='Risk-adjusted return: excess return per unit of volatility.',
        form_class=forms.SharpeRatioForm,
        compute=investing.sharpe_ratio,
        outputs=[
            Output('sharpe_ratio', 'Sharpe ratio'),
            Output('excess_return', 'Excess return', 'percent'),
        ] + TIER_OUTPUTS,
        guide="`Sharpe = (Rp - Rf) / sigma`. Above 1 is good and above 2 is excellent.",
        keywords=['sharpe ratio', 'risk adjusted return'],
        related=['capm', 'value-at-risk'],
        icon='⚖️',
    ),
    Calculator(
        slug='wacc',
        name='WACC Calculator',
        category=CATEGORY,
        description='Weighted average cost of capital across equity and after-tax debt.',
        form_class=forms.WaccForm,
        compute=investing.wacc,
        outputs=[
            Output('wacc', 'WACC', 'percent'),
            Output('equity_weight', 'Equity weight', 'percent'),
            Output('debt_weight', 'Debt weight', 'percent'),
            Output('after_tax_cost_of_debt', 'After-tax cost of debt', 'percent'),
            Output('strength', 'Capital cost strength', 'text'),
        ] + TIER_OUTPUTS,
        guide="`WACC = E/V x Re + D/V x Rd x (1 - t)`. Interest is tax deductible, so debt is cheaper after tax.",
        keywords=['wacc', 'cost of capital', 'hurdle rate'],
        related=['capm', 'npv', 'debt-to-equity'],
        icon='🏗️',
    ),
    Calculator(
        slug='roi',
        name='ROI Calculator',
        category=CATEGORY,
        description='Return on investment, with an optional annualized figure.',
        form_class=forms.RoiForm,
        compute=investing.roi,
        outputs=[
            Output('roi', 'Return on investment', 'percent'),
            Output('net_gain', 'Net gain', 'currency'),
            Output('annualized_roi', 'Annualized ROI', 'percent'),
            Output('level', 'Performance', 'text'),
            Output('risk_level', 'Risk of under-performance', 'text'),
        ],
        guide="`ROI = (final value - cost) / cost x 100`. Add a holding period to compare investments of different lengths.",
        keywords=['roi', 'return on investment'],
        related=['payback-period', 'compound-interest'],
        icon='💹',
    ),
    Calculator(
        slug='dividend-yield',
        name='Dividend Yield Calculator',
        category=CATEGORY,
        description='Current dividend yield and yield on your original cost.',
        form_class=forms.DividendYieldForm,
        compute=investing.dividend_yield,
        outputs=[
            Output('dividend_yield', 'Dividend yield', 'percent'),
            Output('yield_on_cost', 'Yield on cost', 'percent'),
        ] + TIER_OUTPUTS,
        guide="`yield = annual dividend / share price x 100`. Yield on cost uses the price you paid instead.",
        keywords=['dividend yield', 'income investing'],
        related=['perpetuity', 'roi'],
        icon='💵',
    ),
    Calculator(
        slug='real-interest-rate',
        name='Real Interest Rate Calculator',
        category=CATEGORY,
        description='Inflation-adjusted return using the Fisher equation.',
        form_class=forms.RealInterestRateForm,
        compute=investing.real_interest_rate,
        outputs=[
            Output('real_rate', 'Real interest rate', 'percent'),
            Output('approximate_real_rate', 'Approximation (nominal - inflation)', 'percent'),
        ] + TIER_OUTPUTS,
        guide="`real = (1 + nominal) / (1 + inflation) - 1`. Subtracting inflation is a close approximation at low rates.",
        keywords=['real interest rate', 'fisher equation', 'inflation'],
        related=['compound-interest', 'tax-equivalent-yield'],
        icon='🌡️',
    ),
    Calculator(
        slug='tax-equivalent-yield',
        name='Tax-Equivalent Yield Calculator',
        category=CATEGORY,
        description='Compare a tax-free municipal bond yield with taxable alternatives.',
        form_class=forms.TaxEquivalentYieldForm,
        compute=investing.tax_equivalent_yield,
        outputs=[
            Output('tax_equivalent_yield', 'Tax-equivalent yield', 'percent'),
            Output('tax_advantage', 'Tax advantage', 'percent'),
            Output('interpretation', 'What it means', 'text'),
        ],
        guide="`TEY = tax-free yield / (1 - tax rate)`. The higher your bracket, the more a tax-free yield is worth.",
        keywords=['tax equivalent yield', 'municipal bonds'],
        related=['real-interest-rate', 'bond-yield-to-maturity'],
        icon='🧾',
    ),
    Calculator(
        slug='kelly-criterion',
        name='Kelly Criterion Calculator',
        category=CATEGORY,
        description='Optimal bet or position size from your edge and payoff ratio.',
        form_class=forms.KellyCriterionForm,
        compute=investing.kelly_criterion,
        outputs=[
            Output('kelly_fraction', 'Kelly fraction', 'percent'),
            Output('half_kelly', 'Half Kelly', 'percent'),
            Output('position_size', 'Suggested position', 'currency'),
            Output('recommendation', 'Recommendation', 'text'),
        ],
        guide="`f = (p b - q) / b` where *p* is the win probability, *q = 1 - p* and *b* the win/loss ratio.",
        keywords=['kelly criterion', 'position sizing', 'bankroll'],
        related=['value-at-risk', 'sharpe-ratio'],
        icon='🎲',
    ),
    Calculator(
        slug='value-at-risk',
        name='Value at Risk (VaR) Calculator',
        category=CATEGORY,
        description='Parametric VaR: the loss not exceeded at a chosen confidence level.',
        form_class=forms.ValueAtRiskForm,
        compute=investing.value_at_risk,
        outputs=[
            Output('value_at_risk', 'Value at risk', 'currency'),
            Output('var_percent', 'VaR as % of portfolio', 'percent'),
            Output('z_score', 'z-score'),
        ] + TIER_OUTPUTS,
        guide="""
`VaR = V x sigma x z x sqrt(T)` with annual volatility scaled to the horizon
over 252 trading days. A 95% one-day VaR of $10,000 means losses should exceed
$10,000 on only about one day in twenty.
""",
        keywords=['value at risk', 'var', 'portfolio risk'],
        related=['sharpe-ratio', 'kelly-criterion'],
        icon='🛡️',
    ),
    Calculator(
        slug='option-greeks',
        name='Option Greeks Calculator',
        category=CATEGORY,
        description='Black-Scholes price, delta, gamma, vega, theta and rho for European options.',
        form_class=forms.OptionGreeksForm,
        compute=investing.option_greeks,
        outputs=[
            Output('price', 'Theoretical price', 'currency'),
            Output('delta', 'Delta'),
            Output('gamma', 'Gamma'),
            Output('vega', 'Vega (per 1% vol)'),
            Output('theta', 'Theta (per day)'),
            Output('rho', 'Rho (per 1% rate)'),
        ],
        guide="""
The greeks measure how the option price responds to changes in the
underlying price (delta, gamma), volatility (vega), time (theta) and interest
rates (rho). They assume European exercise and no dividends.
""",
        keywords=['option greeks', 'black scholes', 'delta', 'theta'],
        related=['value-at-risk'],
        icon='🇬🇷',
    ),

    # Business
    Calculator(
        slug='current-ratio',
        name='Current Ratio Calculator',
        category=CATEGORY,
        description='Short-term liquidity: current assets against current liabilities.',
        form_class=forms.CurrentRatioForm,
        compute=business.current_ratio,
        outputs=[
            Output('ratio', 'Current ratio'),
            Output('working_capital', 'Working capital', 'currency'),
        ] + TIER_OUTPUTS,
        guide="`current ratio = current assets / current liabilities`. Between 1.5 and 3 is generally healthy.",
        keywords=['current ratio', 'liquidity'],
        related=['debt-to-equity', 'dscr'],
        icon='💧',
    ),
    Calculator(
        slug='debt-to-equity',
        name='Debt-to-Equity Ratio Calculator',
        category=CATEGORY,
        description='How much a company relies on debt relative to shareholder equity.',
        form_class=forms.DebtToEquityForm,
        compute=business.debt_to_equity,
        outputs=[
            Output('ratio', 'Debt-to-equity ratio'),
            Output('risk_level', 'Financial risk', 'text'),
        ] + TIER_OUTPUTS,
        guide="`D/E = total debt / shareholders' equity`. Above 2 is considered highly leveraged in most industries.",
        keywords=['debt to equity', 'leverage'],
        related=['current-ratio', 'wacc'],
        icon='⚖️',
    ),
    Calculator(
        slug='break-even',
        name='Break-Even Calculator',
        category=CATEGORY,
        description='Units and revenue needed to cover fixed costs.',
        form_class=forms.BreakEvenForm,
        compute=business.break_even,
        outputs=[
            Output('break_even_units', 'Break-even units', 'integer'),
            Output('break_even_revenue', 'Break-even revenue', 'currency'),
            Output('contribution_margin', 'Contribution margin per unit', 'currency'),
            Output('contribution_margin_ratio', 'Contribution margin ratio', 'percent'),
        ],
        guide="`units = fixed costs / (price - variable cost)`. Every unit sold past this point adds profit.",
        keywords=['break even', 'contribution margin'],
        related=['gross-margin', 'roi'],
        icon='🎚️',
    ),
    Calculator(
        slug='gross-margin',
        name='Gross Margin Calculator',
        category=CATEGORY,
        description='Gross profit margin and markup from revenue and cost of goods sold.',
        form_class=forms.GrossMarginForm,
        compute=business.gross_margin,
        outputs=[
            Output('gross_margin', 'Gross margin', 'percent'),
            Output('gross_profit', 'Gross profit', 'currency'),
            Output('markup', 'Markup', 'percent'),
        ] + TIER_OUTPUTS,
        guide="`margin = (revenue - COGS) / revenue`. Markup measures the same profit against cost instead.",
        keywords=['gross margin', 'markup', 'profit margin'],
        related=['break-even'],
        icon='🧮',
    ),
    Calculator(
        slug='dscr',
        name='Debt Service Coverage Ratio Calculator',
        category=CATEGORY,
        description='Whether operating income comfortably covers loan payments.',
        form_class=forms.DscrForm,
        compute=business.dscr,
        outputs=[
            Output('ratio', 'DSCR'),
            Output('surplus', 'Annual surplus', 'currency'),
        ] + TIER_OUTPUTS,
        guide="`DSCR = net operating income / annual debt service`. Lenders commonly look for 1.25 or more.",
        keywords=['dscr', 'debt service coverage'],
        related=['current-ratio', 'rental-yield'],
        icon='🏢',
    ),
    Calculator(
        slug='straight-line-depreciation',
        name='Straight-Line Depreciation Calculator',
        category=CATEGORY,
        description='Equal annual depreciation over an asset\'s useful life.',
        form_class=forms.DepreciationForm,
        compute=business.straight_line_depreciation,
        outputs=[
            Output('annual_depreciation', 'Annual depreciation', 'currency'),
            Output('depreciation_rate', 'Depreciation rate', 'percent'),
            DEPRECIATION_TABLE,
        ],
        guide="`annual depreciation = (cost - salvage value) / useful life`",
        keywords=['depreciation', 'straight line'],
        related=['double-declining-depreciation'],
        icon='📉',
    ),
    Calculator(
        slug='double-declining-depreciation',
        name='Double Declining Balance Depreciation Calculator',
        category=CATEGORY,
        description='Accelerated depreciation at twice the straight-line rate.',
        form_class=forms.DepreciationForm,
        compute=business.double_declining_depreciation,
        outputs=[
            Output('first_year_depreciation', 'First-year depreciation', 'currency'),
            Output('depreciation_rate', 'Rate', 'percent'),
            DEPRECIATION_TABLE,
        ],
        guide="""
Each year's charge is `book value x 2 / useful life`. The book value is never
depreciated below salvage value, so late-year charges shrink to fit.
""",
        keywords=['double declining balance', 'accelerated depreciation'],
        related=['straight-line-depreciation'],
        icon='⏬',
    ),

    # Personal finance
    Calculator(
        slug='emergency-fund',
        name='Emergency Fund Calculator',
        category=CATEGORY,
        description='How much cash to keep aside for emergencies.',
        form_class=forms.EmergencyFundForm,
        compute=personal.emergency_fund,
        outputs=[
            Output('target', 'Emergency fund target', 'currency'),
            Output('months_of_income', 'Months of income'),
        ],
        guide="Multiply essential monthly expenses by the months of cover you want. Three to six months is the usual guideline.",
        keywords=['emergency fund', 'rainy day fund'],
        related=['fire-number', 'credit-utilization'],
        icon='🆘',
    ),
    Calculator(
        slug='credit-utilization',
        name='Credit Utilization Calculator',
        category=CATEGORY,
        description='The share of your available credit in use, a key credit score factor.',
        form_class=forms.CreditUtilizationForm,
        compute=personal.credit_utilization,
        outputs=[
            Output('utilization', 'Overall utilization', 'percent'),
            Output('card_utilization', 'Single card utilization', 'percent'),
            Output('available_credit', 'Available credit', 'currency'),
            Output('balance_for_30_percent', 'Pay down to reach 30%', 'currency'),
        ] + TIER_OUTPUTS,
        guide="`utilization = balances / limits x 100`. Staying under 30% (ideally under 10%) helps your score.",
        keywords=['credit utilization', 'credit score'],
        related=['emergency-fund', 'loan-emi'],
        icon='💳',
    ),
    Calculator(
        slug='loan-to-value',
        name='Loan-to-Value (LTV) Calculator',
        category=CATEGORY,
        description='Your mortgage as a percentage of the property\'s value.',
        form_class=forms.LoanToValueForm,
        compute=personal.loan_to_value,
        outputs=[
            Output('ltv', 'Loan-to-value', 'percent'),
            Output('equity', 'Equity', 'currency'),
            Output('equity_percent', 'Equity share', 'percent'),
        ] + TIER_OUTPUTS,
        guide="`LTV = loan / property value x 100`. At 80% or less you usually avoid private mortgage insurance.",
        keywords=['ltv', 'loan to value', 'home equity'],
        related=['mortgage', 'rental-yield'],
        icon='🏡',
    ),
    Calculator(
        slug='rental-yield',
        name='Rental Yield Calculator',
        category=CATEGORY,
        description='Gross and net rental yield on an investment property.',
        form_class=forms.RentalYieldForm,
        compute=personal.rental_yield,
        outputs=[
            Output('gross_yield', 'Gross yield', 'percent'),
            Output('net_yield', 'Net yield', 'percent'),
            Output('annual_net_income', 'Annual net income', 'currency'),
        ] + TIER_OUTPUTS,
        guide="""
- Gross yield is annual rent divided by the price.
- Net yield first allows for vacancy and running costs.

A net yield of 6% or more is generally strong.
""",
        keywords=['rental yield', 'buy to let', 'cap rate'],
        related=['dscr', 'loan-to-value'],
        icon='🔑',
    ),
    Calculator(
        slug='fire-number',
        name='FIRE Number Calculator',
        category=CATEGORY,
        description='The portfolio you need for financial independence and how long it takes to get there.',
        form_class=forms.FireNumberForm,
        compute=personal.fire_number,
        outputs=[
            Output('fire_number', 'FIRE number', 'currency'),
            Output('summary', 'Time to FIRE', 'text'),
            Output('projected_balance', 'Projected balance', 'currency'),
        ],
        guide="""
`FIRE number = annual expenses / withdrawal rate`. At the classic 4% rule,
that is 25 times your annual spending. The timeline compounds your savings monthly
at the expected return.
""",
        keywords=['fire', 'financial independence', 'early retirement', '4% rule'],
        related=['sip', 'emergency-fund'],
        icon='🔥',
    ),
    Calculator(
        slug='crypto-mining-profitability',
        name='Crypto Mining Profitability Calculator',
        category=CATEGORY,
        description='Daily, monthly and yearly mining profit after electricity for a proof-of-work rig.',
        form_class=forms.CryptoMiningForm,
        compute=investing.crypto_mining_profitability,
        outputs=[
            Output('daily_profit', 'Daily profit', 'currency'),
            Output('monthly_profit', 'Monthly profit (30 days)', 'currency'),
            Output('yearly_profit', 'Yearly profit', 'currency'),
            Output('coins_per_day', 'Coins mined per day'),
            Output('revenue_per_day', 'Revenue per day', 'currency'),
            Output('cost_per_day', 'Electricity per day', 'currency'),
            Output('profit_margin', 'Profit margin', 'percent'),
            Output('break_even_price', 'Break-even coin price', 'currency'),
        ] + TIER_OUTPUTS,
        guide="""
`coins per day = hash rate x 86,400 / (difficulty x 2^32) x block reward`

Revenue is coins per day times the coin price, less any pool fee. Electricity is
`power (kW) x 24 x price per kWh`. Difficulty changes about every two weeks, so
treat the result as a snapshot.
""",
        faqs=[
            ('Why is difficulty in trillions?', 'Bitcoin difficulty is around 10^14, so entering it in '
                                                'trillions keeps the number readable.'),
        ],
        keywords=['mining calculator', 'bitcoin mining profit', 'hash rate'],
        related=['roi', 'break-even'],
        icon='⛏️',
    ),
]

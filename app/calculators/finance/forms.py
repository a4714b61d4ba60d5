from flask_wtf import FlaskForm
from wtforms import SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional, ValidationError

from app.calculators.fields import FloatField, IntegerField, NumberListField
from app.calculators.finance.bonds import PAYMENT_FREQUENCIES
from app.calculators.finance.investing import OPTION_TYPES
from app.calculators.finance.time_value import COMPOUNDING_CHOICES, FV_TYPES


class BondForm(FlaskForm):
    face_value = FloatField('Face value ($)', default=1000, validators=[InputRequired(), NumberRange(min=0.01)])
    coupon_rate = FloatField('Annual coupon rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = FloatField('Years to maturity', validators=[InputRequired(), NumberRange(min=0.1, max=100)])
    yield_to_maturity = FloatField('Yield to maturity (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    payments_per_year = SelectField('Coupon frequency', choices=PAYMENT_FREQUENCIES, coerce=int, default=2)
    submit = SubmitField('Calculate')


class YieldToMaturityForm(FlaskForm):
    face_value = FloatField('Face value ($)', default=1000, validators=[InputRequired(), NumberRange(min=0.01)])
    coupon_rate = FloatField('Annual coupon rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = FloatField('Years to maturity', validators=[InputRequired(), NumberRange(min=0.1, max=100)])
    price = FloatField('Current market price ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    payments_per_year = SelectField('Coupon frequency', choices=PAYMENT_FREQUENCIES, coerce=int, default=2)
    submit = SubmitField('Calculate YTM')


class CompoundInterestForm(FlaskForm):
    principal = FloatField('Initial investment ($)', validators=[InputRequired(), NumberRange(min=0)])
    annual_rate = FloatField('Annual interest rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = IntegerField('Years', validators=[InputRequired(), NumberRange(min=1, max=100)])
    compounds_per_year = SelectField('Compounding', choices=COMPOUNDING_CHOICES, coerce=int, default=12)
    submit = SubmitField('Calculate')


class LoanEmiForm(FlaskForm):
    principal = FloatField('Loan amount ($)', validators=[InputRequired(), NumberRange(min=1)])
    annual_rate = FloatField('Annual interest rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = FloatField('Loan term (years)', validators=[InputRequired(), NumberRange(min=0.1, max=50)])
    submit = SubmitField('Calculate EMI')


class MortgageForm(FlaskForm):
    home_price = FloatField('Home price ($)', validators=[InputRequired(), NumberRange(min=1)])
    down_payment = FloatField('Down payment ($)', default=0, validators=[InputRequired(), NumberRange(min=0)])
    annual_rate = FloatField('Interest rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = SelectField('Loan term', choices=[(15, '15 years'), (20, '20 years'), (30, '30 years')],
                        coerce=int, default=30)
    property_tax = FloatField('Annual property tax ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    insurance = FloatField('Annual home insurance ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    submit = SubmitField('Calculate Payment')

    def validate_down_payment(self, field):
        if field.data is not None and self.home_price.data is not None and field.data >= self.home_price.data:
            raise ValidationError('Down payment must be less than the home price.')


class FutureValueForm(FlaskForm):
    fv_type = SelectField('Calculation type', choices=FV_TYPES, default='single')
    present_value = FloatField('Present value ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    payment = FloatField('Payment per period ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    growth_rate = FloatField('Payment growth rate (%)', default=0, validators=[Optional(), NumberRange(min=0, max=100)])
    annual_rate = FloatField('Annual interest rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = IntegerField('Number of years', validators=[InputRequired(), NumberRange(min=1, max=100)])
    compounds_per_year = SelectField('Compounding', choices=COMPOUNDING_CHOICES, coerce=int, default=1)
    submit = SubmitField('Calculate')

    def validate(self, extra_validators=None):
        # Optional() stops inline validators on blank fields, so check here
        if not super().validate(extra_validators):
            return False
        if self.fv_type.data == 'single' and not self.present_value.data:
            self.present_value.errors.append('Enter the amount invested today.')
            return False
        if self.fv_type.data in ('annuity', 'growing') and not self.payment.data:
            self.payment.errors.append('Enter the payment made each period.')
            return False
        return True


class PresentValueForm(FlaskForm):
    future_amount = FloatField('Future value ($)', validators=[InputRequired(), NumberRange(min=0)])
    annual_rate = FloatField('Discount rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    years = FloatField('Years', validators=[InputRequired(), NumberRange(min=0, max=100)])
    compounds_per_year = SelectField('Compounding', choices=COMPOUNDING_CHOICES, coerce=int, default=1)
    submit = SubmitField('Calculate')


class PerpetuityForm(FlaskForm):
    payment = FloatField('Annual payment ($)', validators=[InputRequired(), NumberRange(min=0)])
    discount_rate = FloatField('Discount rate (%)', validators=[InputRequired(), NumberRange(min=0.01, max=100)])
    growth_rate = FloatField('Growth rate (%)', default=0, validators=[Optional(), NumberRange(min=0, max=100)])
    submit = SubmitField('Calculate')

    def validate_growth_rate(self, field):
        if field.data and self.discount_rate.data is not None and field.data >= self.discount_rate.data:
            raise ValidationError('Growth rate must be lower than the discount rate.')


class SipForm(FlaskForm):
    monthly_investment = FloatField('Monthly investment ($)', validators=[InputRequired(), NumberRange(min=1)])
    annual_rate = FloatField('Expected annual return (%)', validators=[InputRequired(), NumberRange(min=0, max=50)])
    years = IntegerField('Investment period (years)', validators=[InputRequired(), NumberRange(min=1, max=50)])
    submit = SubmitField('Calculate')


class NpvForm(FlaskForm):
    discount_rate = FloatField('Discount rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    cash_flows = NumberListField('Cash flows (year 0 first)', min_entries=2, validators=[InputRequired()],
                                 description='Comma separated, e.g. -10000, 3000, 4000, 5000')
    submit = SubmitField('Calculate NPV')


class PaybackPeriodForm(FlaskForm):
    initial_investment = FloatField('Initial investment ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    cash_flows = NumberListField('Annual cash inflows', validators=[InputRequired()],
                                 description='Comma separated, e.g. 3000, 4000, 5000')
    submit = SubmitField('Calculate')


class CapmForm(FlaskForm):
    risk_free_rate = FloatField('Risk-free rate (%)', validators=[InputRequired(), NumberRange(min=-5, max=50)])
    beta = FloatField('Beta', validators=[InputRequired(), NumberRange(min=-5, max=10)])
    market_return = FloatField('Expected market return (%)', validators=[InputRequired(), NumberRange(min=-50, max=100)])
    submit = SubmitField('Calculate')


class SharpeRatioForm(FlaskForm):
    portfolio_return = FloatField('Portfolio return (%)', validators=[InputRequired()])
    risk_free_rate = FloatField('Risk-free rate (%)', validators=[InputRequired()])
    std_dev = FloatField('Standard deviation (%)', validators=[InputRequired(), NumberRange(min=0.0001, message='Standard deviation must be greater than 0.')])
    submit = SubmitField('Calculate')


class WaccForm(FlaskForm):
    equity_value = FloatField('Market value of equity ($)', validators=[InputRequired(), NumberRange(min=0)])
    debt_value = FloatField('Market value of debt ($)', validators=[InputRequired(), NumberRange(min=0)])
    cost_of_equity = FloatField('Cost of equity (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    cost_of_debt = FloatField('Cost of debt (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    tax_rate = FloatField('Corporate tax rate (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    submit = SubmitField('Calculate WACC')

    def validate_debt_value(self, field):
        if (field.data or 0) + (self.equity_value.data or 0) <= 0:
            raise ValidationError('Equity and debt cannot both be zero.')


class RoiForm(FlaskForm):
    initial_investment = FloatField('Amount invested ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    final_value = FloatField('Amount returned ($)', validators=[InputRequired(), NumberRange(min=0)])
    years = FloatField('Holding period (years)', validators=[Optional(), NumberRange(min=0.1)])
    submit = SubmitField('Calculate ROI')


class DividendYieldForm(FlaskForm):
    annual_dividend = FloatField('Annual dividend per share ($)', validators=[InputRequired(), NumberRange(min=0)])
    share_price = FloatField('Current share price ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    cost_basis = FloatField('Your purchase price ($)', validators=[Optional(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate')


class RealInterestRateForm(FlaskForm):
    nominal_rate = FloatField('Nominal interest rate (%)', validators=[InputRequired(), NumberRange(min=-50, max=100)])
    inflation_rate = FloatField('Inflation rate (%)', validators=[InputRequired(), NumberRange(min=-50, max=100)])
    submit = SubmitField('Calculate')


class TaxEquivalentYieldForm(FlaskForm):
    tax_free_yield = FloatField('Tax-free yield (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    tax_rate = FloatField('Marginal tax rate (%)', validators=[InputRequired(), NumberRange(min=0, max=99.99)])
    submit = SubmitField('Calculate')


class KellyCriterionForm(FlaskForm):
    win_probability = FloatField('Win probability (%)', validators=[InputRequired(), NumberRange(min=0, max=100)])
    win_loss_ratio = FloatField('Win/loss ratio', validators=[InputRequired(), NumberRange(min=0.01)],
                                description='Average win divided by average loss')
    portfolio_value = FloatField('Bankroll ($)', default=100000, validators=[InputRequired(), NumberRange(min=0)])
    submit = SubmitField('Calculate')


class ValueAtRiskForm(FlaskForm):
    portfolio_value = FloatField('Portfolio value ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    volatility = FloatField('Annual volatility (%)', validators=[InputRequired(), NumberRange(min=0, max=500)])
    confidence_level = FloatField('Confidence level (%)', default=95, validators=[InputRequired(), NumberRange(min=90, max=99.9)])
    time_horizon_days = IntegerField('Time horizon (trading days)', default=1, validators=[InputRequired(), NumberRange(min=1, max=252)])
    submit = SubmitField('Calculate VaR')


class OptionGreeksForm(FlaskForm):
    option_type = SelectField('Option type', choices=OPTION_TYPES, default='call')
    spot_price = FloatField('Underlying price ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    strike_price = FloatField('Strike price ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    years_to_expiry = FloatField('Time to expiry (years)', validators=[InputRequired(), NumberRange(min=0.001, max=30)])
    volatility = FloatField('Implied volatility (%)', validators=[InputRequired(), NumberRange(min=0.01, max=500)])
    risk_free_rate = FloatField('Risk-free rate (%)', default=5, validators=[InputRequired(), NumberRange(min=-10, max=50)])
    submit = SubmitField('Calculate Greeks')


class CurrentRatioForm(FlaskForm):
    current_assets = FloatField('Current assets ($)', validators=[InputRequired(), NumberRange(min=0)])
    current_liabilities = FloatField('Current liabilities ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate')


class DebtToEquityForm(FlaskForm):
    total_debt = FloatField('Total debt ($)', validators=[InputRequired(), NumberRange(min=0)])
    total_equity = FloatField("Shareholders' equity ($)", validators=[InputRequired(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate')


class BreakEvenForm(FlaskForm):
    fixed_costs = FloatField('Fixed costs ($)', validators=[InputRequired(), NumberRange(min=0)])
    price_per_unit = FloatField('Selling price per unit ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    variable_cost_per_unit = FloatField('Variable cost per unit ($)', validators=[InputRequired(), NumberRange(min=0)])
    submit = SubmitField('Calculate')

    def validate_variable_cost_per_unit(self, field):
        if field.data is not None and self.price_per_unit.data is not None and field.data >= self.price_per_unit.data:
            raise ValidationError('Selling price must be greater than variable cost per unit.')


class GrossMarginForm(FlaskForm):
    revenue = FloatField('Revenue ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    cost_of_goods_sold = FloatField('Cost of goods sold ($)', validators=[InputRequired(), NumberRange(min=0)])
    submit = SubmitField('Calculate')


class DscrForm(FlaskForm):
    net_operating_income = FloatField('Annual net operating income ($)', validators=[InputRequired()])
    annual_debt_service = FloatField('Annual debt service ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate DSCR')


class DepreciationForm(FlaskForm):
    asset_cost = FloatField('Asset cost ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    salvage_value = FloatField('Salvage value ($)', default=0, validators=[InputRequired(), NumberRange(min=0)])
    useful_life = IntegerField('Useful life (years)', validators=[InputRequired(), NumberRange(min=1, max=100)])
    submit = SubmitField('Calculate')

    def validate_salvage_value(self, field):
        if field.data is not None and self.asset_cost.data is not None and field.data >= self.asset_cost.data:
            raise ValidationError('Asset cost must be greater than salvage value.')


class EmergencyFundForm(FlaskForm):
    monthly_expenses = FloatField('Monthly essential expenses ($)', validators=[InputRequired(), NumberRange(min=0)])
    months = IntegerField('Months of coverage', default=6, validators=[InputRequired(), NumberRange(min=0, max=24)])
    monthly_income = FloatField('Monthly take-home income ($)', validators=[Optional(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate')


class CreditUtilizationForm(FlaskForm):
    total_balance = FloatField('Total balances ($)', validators=[InputRequired(), NumberRange(min=0)])
    total_limit = FloatField('Total credit limits ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    card_balance = FloatField('Single card balance ($)', validators=[Optional(), NumberRange(min=0)])
    card_limit = FloatField('Single card limit ($)', validators=[Optional(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate')


class LoanToValueForm(FlaskForm):
    loan_amount = FloatField('Loan amount ($)', validators=[InputRequired(), NumberRange(min=0)])
    property_value = FloatField('Appraised property value ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    submit = SubmitField('Calculate LTV')


class RentalYieldForm(FlaskForm):
    property_price = FloatField('Property price ($)', validators=[InputRequired(), NumberRange(min=0.01)])
    monthly_rent = FloatField('Monthly rent ($)', validators=[InputRequired(), NumberRange(min=0)])
    monthly_expenses = FloatField('Monthly expenses ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    vacancy_rate = FloatField('Vacancy rate (%)', default=0, validators=[Optional(), NumberRange(min=0, max=100)])
    submit = SubmitField('Calculate')


class FireNumberForm(FlaskForm):
    annual_expenses = FloatField('Annual expenses in retirement ($)', validators=[InputRequired(), NumberRange(min=0)])
    withdrawal_rate = FloatField('Safe withdrawal rate (%)', default=4, validators=[InputRequired(), NumberRange(min=0.1, max=20)])
    current_savings = FloatField('Current savings ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    monthly_contribution = FloatField('Monthly contribution ($)', default=0, validators=[Optional(), NumberRange(min=0)])
    annual_return = FloatField('Expected annual return (%)', default=7, validators=[InputRequired(), NumberRange(min=0, max=30)])
    submit = SubmitField('Calculate')


class CryptoMiningForm(FlaskForm):
    hash_rate = FloatField('Hash rate (TH/s)', validators=[InputRequired(), NumberRange(min=0.000001)])
    power_consumption = FloatField('Power draw (kW)', validators=[InputRequired(), NumberRange(min=0)],
                                   description='e.g. 3.25 for a 3,250 W miner')
    electricity_cost = FloatField('Electricity cost ($/kWh)', default=0.10,
                                  validators=[InputRequired(), NumberRange(min=0, max=10)])
    block_reward = FloatField('Block reward (coins)', default=3.125, validators=[InputRequired(), NumberRange(min=0.000001)])
    network_difficulty = FloatField('Network difficulty (T)', validators=[InputRequired(), NumberRange(min=0.000001)],
                                    description='In trillions, e.g. 90 for 90,000,000,000,000')
    coin_price = FloatField('Coin price ($)', validators=[InputRequired(), NumberRange(min=0.000001)])
    pool_fee = FloatField('Pool fee (%)', default=0, validators=[Optional(), NumberRange(min=0, max=99)])
    submit = SubmitField('Calculate Profit')

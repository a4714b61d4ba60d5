from flask_wtf import FlaskForm
from wtforms import DateField, DateTimeLocalField, SelectField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional, ValidationError

from app.calculators.fields import FloatField, IntegerField
from app.calculators.everyday.formulas import (
    DEFAULT_PEDIGREE,
    GENOTYPES,
    TIME_ZONES,
    TRAVEL_MODES,
    parse_cost_lines,
    parse_pedigree,
)


class DateDifferenceForm(FlaskForm):
    start_date = DateField('Start date', validators=[DataRequired()])
    end_date = DateField('End date', validators=[DataRequired()])
    submit = SubmitField('Calculate')


class BatteryLifeForm(FlaskForm):
    capacity_mah = FloatField('Battery capacity (mAh)', validators=[InputRequired(), NumberRange(min=1)])
    current_draw_ma = FloatField('Current draw (mA)', validators=[Optional(), NumberRange(min=0.001)])
    voltage = FloatField('Battery voltage (V)', validators=[Optional(), NumberRange(min=0.1)],
                         description='Use with power draw when the current is unknown')
    power_draw_w = FloatField('Power draw (W)', validators=[Optional(), NumberRange(min=0.001)])
    submit = SubmitField('Calculate')

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if not self.current_draw_ma.data and not (self.voltage.data and self.power_draw_w.data):
            self.current_draw_ma.errors.append('Enter a current draw, or both a voltage and a power draw.')
            return False
        return True


class TravelCarbonForm(FlaskForm):
    mode = SelectField('Travel by', choices=TRAVEL_MODES, default='car')
    distance_km = FloatField('Distance (km)', validators=[InputRequired(), NumberRange(min=0.1, max=50000)])
    passengers = IntegerField('Passengers', default=1, validators=[InputRequired(), NumberRange(min=1, max=500)])
    fuel_consumption = FloatField('Car fuel use (L/100 km)', validators=[Optional(), NumberRange(min=1, max=50)],
                                  description='Defaults to 7 L/100 km')
    submit = SubmitField('Calculate')


class GeneticTraitForm(FlaskForm):
    parent1 = SelectField('Parent 1 genotype', choices=GENOTYPES, default='Aa')
    parent2 = SelectField('Parent 2 genotype', choices=GENOTYPES, default='Aa')
    submit = SubmitField('Calculate')


def _sentence(exc):
    message = str(exc)
    return f"{message[:1].upper()}{message[1:]}."


def _cost(label, description=None):
    return FloatField(label, default=0, validators=[Optional(), NumberRange(min=0, max=1e9)], description=description)


class TravelBudgetForm(FlaskForm):
    days = IntegerField('Trip length (days)', validators=[InputRequired(), NumberRange(min=1, max=365)])
    people = IntegerField('Travellers', default=1, validators=[InputRequired(), NumberRange(min=1, max=100)])
    flights = _cost('Flights ($)', 'Total for everyone')
    accommodation = _cost('Accommodation ($)', 'Total for the whole stay')
    food_per_day = _cost('Food per person per day ($)')
    activities = _cost('Activities ($)', 'Total for everyone')
    other_costs = TextAreaField('Other costs', validators=[Optional(), Length(max=2000)],
                                description="One per line, e.g. 'Car hire: 300'. Labels with 'per day' are per "
                                            "person per day.")
    submit = SubmitField('Estimate Budget')

    def validate_other_costs(self, field):
        try:
            parse_cost_lines(field.data)
        except ValueError as exc:
            raise ValidationError(_sentence(exc)) from exc


ZONE_CHOICES = [(zone, zone.replace('_', ' ')) for zone in TIME_ZONES]


class JetLagPlannerForm(FlaskForm):
    origin_tz = SelectField('Departing from', choices=ZONE_CHOICES, default='America/New_York')
    destination_tz = SelectField('Arriving in', choices=ZONE_CHOICES, default='Europe/Paris')
    departure = DateTimeLocalField('Departure (local time)', format='%Y-%m-%dT%H:%M', validators=[DataRequired()])
    flight_hours = FloatField('Flight time (hours)', validators=[InputRequired(), NumberRange(min=0, max=40)])
    submit = SubmitField('Plan My Trip')


class PedigreeAnalysisForm(FlaskForm):
    members = TextAreaField('Family members', default=DEFAULT_PEDIGREE,
                            validators=[InputRequired(), Length(max=5000)],
                            description='One per line: id, sex, phenotype, then up to two parent ids')
    submit = SubmitField('Analyze Pedigree')

    def validate_members(self, field):
        try:
            parse_pedigree(field.data)
        except ValueError as exc:
            raise ValidationError(_sentence(exc)) from exc

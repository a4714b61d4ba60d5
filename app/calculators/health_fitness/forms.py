from flask_wtf import FlaskForm
from wtforms import BooleanField, SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional, ValidationError

from app.calculators.fields import FloatField, IntegerField
from app.calculators.health_fitness.formulas import ACTIVITY_LEVELS, SEXES, UNIT_SYSTEMS


def _weight():
    return FloatField('Weight', validators=[InputRequired(), NumberRange(min=1, max=1000)],
                      description='kg (metric) or lb (imperial)')


def _height():
    return FloatField('Height', validators=[InputRequired(), NumberRange(min=1, max=300)],
                      description='cm (metric) or inches (imperial)')


def _age(low=1, high=120):
    return IntegerField('Age (years)', validators=[InputRequired(), NumberRange(min=low, max=high)])


class BmiForm(FlaskForm):
    unit_system = SelectField('Units', choices=UNIT_SYSTEMS, default='metric')
    weight = _weight()
    height = _height()
    submit = SubmitField('Calculate BMI')


class BmrForm(FlaskForm):
    unit_system = SelectField('Units', choices=UNIT_SYSTEMS, default='metric')
    sex = SelectField('Sex', choices=SEXES, default='male')
    age = _age(15, 100)
    weight = _weight()
    height = _height()
    activity_level = SelectField('Activity level', choices=ACTIVITY_LEVELS, default='1.2')
    submit = SubmitField('Calculate BMR')


class BodyFatForm(FlaskForm):
    unit_system = SelectField('Units', choices=[('metric', 'Centimetres'), ('imperial', 'Inches')], default='metric')
    sex = SelectField('Sex', choices=SEXES, default='male')
    height = FloatField('Height', validators=[InputRequired(), NumberRange(min=1)])
    neck = FloatField('Neck circumference', validators=[InputRequired(), NumberRange(min=1)])
    waist = FloatField('Waist circumference', validators=[InputRequired(), NumberRange(min=1)],
                       description='At the navel for men, at the narrowest point for women')
    hip = FloatField('Hip circumference', validators=[Optional(), NumberRange(min=1)],
                     description='Required for women')
    submit = SubmitField('Calculate Body Fat')

    def validate_waist(self, field):
        if self.sex.data == 'male' and None not in (field.data, self.neck.data) and field.data <= self.neck.data:
            raise ValidationError('Waist must be larger than neck.')

    def validate(self, extra_validators=None):
        # Optional() stops inline validators on blank fields, so check here
        if not super().validate(extra_validators):
            return False
        if self.sex.data == 'female' and self.hip.data is None:
            self.hip.errors.append('Hip measurement is required for women.')
            return False
        if self.sex.data == 'female' and self.waist.data + self.hip.data <= self.neck.data:
            self.waist.errors.append('Waist plus hip must be larger than neck.')
            return False
        return True


class BodySurfaceAreaForm(FlaskForm):
    unit_system = SelectField('Units', choices=UNIT_SYSTEMS, default='metric')
    sex = SelectField('Sex', choices=SEXES, default='male')
    age = _age(1, 120)
    weight = _weight()
    height = _height()
    submit = SubmitField('Calculate BSA')


class TargetHeartRateForm(FlaskForm):
    age = _age(10, 100)
    resting_heart_rate = IntegerField('Resting heart rate (bpm)', validators=[Optional(), NumberRange(min=30, max=120)],
                                      description='Optional. Enables the Karvonen method.')
    submit = SubmitField('Calculate Zones')


class LeanBodyMassForm(FlaskForm):
    weight = FloatField('Body weight', validators=[InputRequired(), NumberRange(min=1)],
                        description='Any unit. The result uses the same unit.')
    body_fat_percent = FloatField('Body fat (%)', validators=[InputRequired(), NumberRange(min=1, max=70)])
    submit = SubmitField('Calculate')


class Vo2MaxForm(FlaskForm):
    age = _age(10, 100)
    resting_heart_rate = IntegerField('Resting heart rate (bpm)',
                                      validators=[InputRequired(), NumberRange(min=30, max=120)])
    submit = SubmitField('Estimate VO2 Max')


class PonderalIndexForm(FlaskForm):
    unit_system = SelectField('Units', choices=[('metric', 'Metric (kg, m)'), ('imperial', 'Imperial (lb, in)')],
                              default='metric')
    weight = _weight()
    height = FloatField('Height', validators=[InputRequired(), NumberRange(min=0.3, max=120)],
                        description='Metres (metric) or inches (imperial)')
    submit = SubmitField('Calculate')


class RunningPaceForm(FlaskForm):
    solve_for = SelectField('Calculate', choices=[('pace', 'Pace'), ('time', 'Time'), ('distance', 'Distance')],
                            default='pace')
    distance = FloatField('Distance', validators=[Optional(), NumberRange(min=0.01)],
                          description='Kilometres or miles. The pace uses the same unit.')
    hours = IntegerField('Hours', default=0, validators=[Optional(), NumberRange(min=0)])
    minutes = IntegerField('Minutes', default=0, validators=[Optional(), NumberRange(min=0, max=59)])
    seconds = IntegerField('Seconds', default=0, validators=[Optional(), NumberRange(min=0, max=59)])
    pace_minutes = IntegerField('Pace minutes', default=0, validators=[Optional(), NumberRange(min=0)])
    pace_seconds = IntegerField('Pace seconds', default=0, validators=[Optional(), NumberRange(min=0, max=59)])
    submit = SubmitField('Calculate')

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        total = (self.hours.data or 0) * 3600 + (self.minutes.data or 0) * 60 + (self.seconds.data or 0)
        pace = (self.pace_minutes.data or 0) * 60 + (self.pace_seconds.data or 0)
        target = self.solve_for.data
        if target in ('pace', 'time') and not self.distance.data:
            self.distance.errors.append('Enter a distance.')
            return False
        if target in ('pace', 'distance') and total <= 0:
            self.hours.errors.append('Enter a finishing time.')
            return False
        if target in ('time', 'distance') and pace <= 0:
            self.pace_minutes.errors.append('Enter a pace.')
            return False
        return True


class Hba1cForm(FlaskForm):
    glucose = FloatField('Average blood glucose', validators=[InputRequired(), NumberRange(min=1, max=1000)])
    glucose_unit = SelectField('Unit', choices=[('mg/dL', 'mg/dL'), ('mmol/L', 'mmol/L')], default='mg/dL')
    submit = SubmitField('Convert')


class EgfrForm(FlaskForm):
    age = _age(18, 120)
    sex = SelectField('Sex', choices=SEXES, default='male')
    black = BooleanField('Black race (CKD-EPI 2009 coefficient)')
    serum_creatinine = FloatField('Serum creatinine', validators=[InputRequired(), NumberRange(min=0.1, max=2000)])
    creatinine_unit = SelectField('Unit', choices=[('mg/dL', 'mg/dL'), ('umol/L', 'µmol/L')], default='mg/dL')
    submit = SubmitField('Calculate eGFR')


class SleepEfficiencyForm(FlaskForm):
    time_in_bed = FloatField('Time in bed (hours)', validators=[InputRequired(), NumberRange(min=0.5, max=24)])
    time_asleep = FloatField('Total sleep time (hours)', validators=[InputRequired(), NumberRange(min=0, max=24)])
    submit = SubmitField('Calculate')

    def validate_time_asleep(self, field):
        if None not in (field.data, self.time_in_bed.data) and field.data > self.time_in_bed.data:
            raise ValidationError('Time asleep cannot exceed time in bed.')


class BloodPressureForm(FlaskForm):
    systolic = IntegerField('Systolic (mmHg)', validators=[InputRequired(), NumberRange(min=70, max=250)])
    diastolic = IntegerField('Diastolic (mmHg)', validators=[InputRequired(), NumberRange(min=40, max=150)])
    age = _age(18, 120)
    sex = SelectField('Sex', choices=SEXES, default='male')
    smoker = BooleanField('Current smoker')
    diabetes = BooleanField('Diabetes')
    high_cholesterol = BooleanField('High cholesterol')
    submit = SubmitField('Assess Risk')

    def validate_diastolic(self, field):
        if None not in (field.data, self.systolic.data) and field.data >= self.systolic.data:
            raise ValidationError('Diastolic pressure must be lower than systolic.')

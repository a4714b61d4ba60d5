from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional, ValidationError

from app.calculators.fields import FloatField, IntegerField
from app.calculators.conversions.formulas import (
    CLOTH_GROUPS,
    CLOTH_REGIONS,
    HAND_UNITS,
    HAT_UNITS,
    MEASUREMENT_GROUPS,
    MEASUREMENT_UNITS,
    RING_UNITS,
    SHOE_GENDERS,
    SHOE_SYSTEMS,
    cloth_sizes_for,
    find_cloth_size,
    parse_ring_value,
)


class ShoeSizeForm(FlaskForm):
    gender = SelectField('Sizing', choices=SHOE_GENDERS, default='men')
    from_system = SelectField('Convert from', choices=SHOE_SYSTEMS, default='US')
    size = FloatField('Size', validators=[InputRequired(), NumberRange(min=0.5, max=60)])
    submit = SubmitField('Convert')


class HeightForm(FlaskForm):
    feet = IntegerField('Feet', validators=[Optional(), NumberRange(min=0, max=9)])
    inches = FloatField('Inches', validators=[Optional(), NumberRange(min=0, max=11,
                                                                      message='Inches must be between 0 and 11.')])
    centimeters = FloatField('Centimetres', validators=[Optional(), NumberRange(min=1, max=300)],
                             description='Used instead of feet and inches when filled in')
    submit = SubmitField('Convert')

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if not self.centimeters.data and not (self.feet.data or self.inches.data):
            self.centimeters.errors.append('Enter a height in feet and inches or in centimetres.')
            return False
        return True


class RingSizeForm(FlaskForm):
    unit = SelectField('Convert from', choices=RING_UNITS, default='circumference')
    value = StringField('Size or measurement', validators=[InputRequired()],
                        description='A number, or a letter for UK/India sizes')
    submit = SubmitField('Convert')

    def validate_value(self, field):
        try:
            parse_ring_value(self.unit.data, field.data)
        except ValueError as exc:
            raise ValidationError(str(exc).capitalize() + '.') from exc


class HatSizeForm(FlaskForm):
    unit = SelectField('Convert from', choices=HAT_UNITS, default='cm')
    value = FloatField('Value', validators=[InputRequired(), NumberRange(min=1, max=100)])
    submit = SubmitField('Convert')


class GloveSizeForm(FlaskForm):
    unit = SelectField('Unit', choices=HAND_UNITS, default='cm')
    hand_circumference = FloatField('Hand circumference', validators=[InputRequired(), NumberRange(min=1, max=50)],
                                    description='Around the knuckles, excluding the thumb')
    submit = SubmitField('Convert')


class FootLengthForm(FlaskForm):
    unit = SelectField('Unit', choices=HAND_UNITS, default='cm')
    length = FloatField('Foot length', validators=[InputRequired(), NumberRange(min=1, max=50)],
                        description='Heel to the tip of the longest toe')
    submit = SubmitField('Convert')


class ClothSizeForm(FlaskForm):
    gender = SelectField('Gender / age group', choices=CLOTH_GROUPS, default='men')
    from_region = SelectField('Convert from', choices=CLOTH_REGIONS, default='US')
    size = StringField('Size', validators=[InputRequired()], description='e.g. M, 10, 42, 36')
    submit = SubmitField('Convert Size')

    def validate_size(self, field):
        if self.gender.errors or self.from_region.errors:
            return
        if find_cloth_size(self.gender.data, self.from_region.data, field.data) is None:
            available = ', '.join(cloth_sizes_for(self.gender.data, self.from_region.data))
            raise ValidationError(f"Size not found. Available sizes for this region are: {available}")


def _measurement(label):
    return FloatField(label, validators=[Optional(), NumberRange(min=1, max=500)])


class BodyMeasurementForm(FlaskForm):
    gender = SelectField('Gender', choices=MEASUREMENT_GROUPS, default='men')
    unit = SelectField('Unit', choices=MEASUREMENT_UNITS, default='cm')
    chest = _measurement('Chest')
    waist = _measurement('Waist')
    bust = _measurement('Bust')
    hips = _measurement('Hips')
    submit = SubmitField('Find My Size')

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        required = ('chest', 'waist') if self.gender.data == 'men' else ('bust', 'waist')
        missing = [name for name in required if not self[name].data]
        for name in missing:
            self[name].errors.append(f"{self[name].label.text} is required for {self.gender.data}'s sizes.")
        return not missing

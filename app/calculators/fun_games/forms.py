from flask_wtf import FlaskForm
from wtforms import DateField, SelectField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional, Regexp

from app.calculators.fields import IntegerField
from app.calculators.fun_games.formulas import (
    COMMUNICATION_STYLES,
    CRUSH_PERSONALITIES,
    FRIEND_PERSONALITIES,
    IDEAL_DATES,
    LOVE_LANGUAGES,
    PARTNER_GENDERS,
    PARTNER_ORIGINS,
    PARTNER_PERSONALITIES,
    QUALITY_LEVELS,
    ROMANTIC_ACTIVITIES,
    ROMANTIC_STYLES,
    SIGN_CHOICES,
)

NAME_VALIDATORS = [
    InputRequired(),
    Length(max=50),
    Regexp(r'.*[A-Za-z]', message='Names need at least one letter.'),
]


def _choices(options, blank=None):
    choices = [(option, option) for option in options]
    if blank:
        choices.insert(0, ('', blank))
    return choices


def _age(label):
    return IntegerField(label, validators=[Optional(), NumberRange(min=1, max=120)])


def _items(label, description):
    return StringField(label, validators=[Optional(), Length(max=300)], description=description)


class LovePercentageForm(FlaskForm):
    name1 = StringField('Your name', validators=NAME_VALIDATORS)
    name2 = StringField("Your crush's name", validators=NAME_VALIDATORS)
    submit = SubmitField('Calculate Love')


class ZodiacMatchForm(FlaskForm):
    sign1 = SelectField('Your sign', choices=SIGN_CHOICES, default='Aries')
    sign2 = SelectField("Partner's sign", choices=SIGN_CHOICES, default='Leo')
    submit = SubmitField('Check Compatibility')


class BirthdayCompatibilityForm(FlaskForm):
    birthday1 = DateField('Your birthday', validators=[DataRequired()])
    birthday2 = DateField("Partner's birthday", validators=[DataRequired()])
    submit = SubmitField('Check Compatibility')


class CrushCompatibilityForm(FlaskForm):
    your_name = StringField('Your name', validators=NAME_VALIDATORS)
    crush_name = StringField("Your crush's name", validators=NAME_VALIDATORS)
    your_age = _age('Your age')
    crush_age = _age("Your crush's age")
    your_personality = SelectField('Your personality', choices=_choices(CRUSH_PERSONALITIES, 'Not sure'), default='')
    crush_personality = SelectField("Your crush's personality", choices=_choices(CRUSH_PERSONALITIES, 'Not sure'),
                                    default='')
    submit = SubmitField('Check Crush')


class FriendshipCompatibilityForm(FlaskForm):
    friend1 = StringField('First friend', validators=NAME_VALIDATORS)
    friend2 = StringField('Second friend', validators=NAME_VALIDATORS)
    friend1_age = _age("First friend's age")
    friend2_age = _age("Second friend's age")
    friend1_personality = SelectField("First friend's personality", choices=_choices(FRIEND_PERSONALITIES, 'Not sure'),
                                      default='')
    friend2_personality = SelectField("Second friend's personality",
                                      choices=_choices(FRIEND_PERSONALITIES, 'Not sure'), default='')
    shared_interests = _items('Shared interests', 'Comma separated, e.g. music, hiking, cooking')
    submit = SubmitField('Check Friendship')


class MarriageCompatibilityForm(FlaskForm):
    partner1 = StringField('First partner', validators=NAME_VALIDATORS)
    partner2 = StringField('Second partner', validators=NAME_VALIDATORS)
    partner1_age = _age("First partner's age")
    partner2_age = _age("Second partner's age")
    relationship_years = IntegerField('Years together', validators=[Optional(), NumberRange(min=0, max=100)])
    shared_values = _items('Shared values', 'Comma separated, e.g. family, trust, honesty')
    communication_style = SelectField('Communication style', choices=_choices(COMMUNICATION_STYLES, 'Not sure'),
                                      default='')
    submit = SubmitField('Check Compatibility')


class NameCompatibilityForm(FlaskForm):
    name1 = StringField('First name', validators=NAME_VALIDATORS)
    name2 = StringField('Second name', validators=NAME_VALIDATORS)
    submit = SubmitField('Check Names')


class RelationshipStrengthForm(FlaskForm):
    partner1 = StringField('Your name', validators=NAME_VALIDATORS)
    partner2 = StringField("Partner's name", validators=NAME_VALIDATORS)
    relationship_years = IntegerField('Years together', validators=[Optional(), NumberRange(min=0, max=100)])
    communication = SelectField('Communication', choices=_choices(QUALITY_LEVELS), default='Good')
    trust = SelectField('Trust', choices=_choices(QUALITY_LEVELS), default='Good')
    conflict_resolution = SelectField('Resolving disagreements', choices=_choices(QUALITY_LEVELS), default='Good')
    shared_values = _items('Shared values', 'Comma separated, e.g. trust, patience, respect')
    submit = SubmitField('Test Strength')


class RomanticQuizForm(FlaskForm):
    name = StringField('Your name', validators=NAME_VALIDATORS)
    age = _age('Your age')
    activity = SelectField('Favourite romantic activity', choices=_choices(ROMANTIC_ACTIVITIES, 'Skip'), default='')
    love_language = SelectField('Love language', choices=_choices(LOVE_LANGUAGES, 'Skip'), default='')
    romantic_style = SelectField('Romantic style', choices=_choices(ROMANTIC_STYLES, 'Skip'), default='')
    ideal_date = SelectField('Ideal date', choices=_choices(IDEAL_DATES, 'Skip'), default='')
    memory = TextAreaField('A favourite romantic memory', validators=[Optional(), Length(max=1000)])
    submit = SubmitField('Take the Quiz')


class FuturePartnerNameForm(FlaskForm):
    your_name = StringField('Your name', validators=[Optional(), Length(max=50)])
    preferred_gender = SelectField("Partner's gender", choices=_choices(PARTNER_GENDERS), default='Any')
    preferred_origin = SelectField('Name origin', choices=_choices(PARTNER_ORIGINS), default='Any')
    personality = SelectField('Your personality', choices=_choices(PARTNER_PERSONALITIES, 'Not sure'), default='')
    submit = SubmitField('Reveal Name')

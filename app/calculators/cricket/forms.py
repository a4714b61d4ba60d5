from flask_wtf import FlaskForm
from wtforms import SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional, ValidationError

from app.calculators.fields import FloatField, IntegerField
from app.calculators.cricket.formulas import FORMATS

LIMITED_OVERS_FORMATS = [('odi', 'ODI'), ('t20', 'T20')]


class BattingAverageForm(FlaskForm):
    runs = IntegerField('Total runs scored', validators=[InputRequired(), NumberRange(min=0)])
    dismissals = IntegerField('Times dismissed', validators=[InputRequired(), NumberRange(min=0)],
                              description='Innings minus not-outs')
    submit = SubmitField('Calculate')


class BowlingAverageForm(FlaskForm):
    runs_conceded = IntegerField('Runs conceded', validators=[InputRequired(), NumberRange(min=0)])
    wickets = IntegerField('Wickets taken', validators=[InputRequired(), NumberRange(min=0)])
    submit = SubmitField('Calculate')


class EconomyRateForm(FlaskForm):
    runs_conceded = IntegerField('Runs conceded', validators=[InputRequired(), NumberRange(min=0)])
    overs = FloatField('Overs bowled', validators=[InputRequired(), NumberRange(min=0.1, message='Overs must be greater than 0.')])
    match_format = SelectField('Format', choices=FORMATS, default='odi')
    submit = SubmitField('Calculate')


class StrikeRateForm(FlaskForm):
    runs = IntegerField('Runs scored', validators=[InputRequired(), NumberRange(min=0)])
    balls = IntegerField('Balls faced', validators=[InputRequired(), NumberRange(min=0)])
    match_format = SelectField('Format', choices=FORMATS, default='odi')
    submit = SubmitField('Calculate')


class FantasyPointsForm(FlaskForm):
    runs = IntegerField('Runs scored', default=0, validators=[InputRequired(), NumberRange(min=0)])
    balls = IntegerField('Balls faced', default=0, validators=[InputRequired(), NumberRange(min=0)])
    wickets = IntegerField('Wickets', default=0, validators=[InputRequired(), NumberRange(min=0, max=10)])
    overs = FloatField('Overs bowled', default=0, validators=[InputRequired(), NumberRange(min=0)])
    runs_conceded = IntegerField('Runs conceded', default=0, validators=[InputRequired(), NumberRange(min=0)])
    maidens = IntegerField('Maiden overs', default=0, validators=[InputRequired(), NumberRange(min=0)])
    catches = IntegerField('Catches', default=0, validators=[InputRequired(), NumberRange(min=0)])
    stumpings = IntegerField('Stumpings', default=0, validators=[InputRequired(), NumberRange(min=0)])
    run_outs = IntegerField('Run-outs', default=0, validators=[InputRequired(), NumberRange(min=0)])
    bonus_points = IntegerField('Bonus points', default=0, validators=[InputRequired()])
    match_format = SelectField('Scoring format', choices=LIMITED_OVERS_FORMATS, default='odi')
    submit = SubmitField('Calculate Points')

    def validate_maidens(self, field):
        if field.data is not None and self.overs.data is not None and field.data > int(self.overs.data):
            raise ValidationError('Maidens cannot exceed completed overs.')


class NetRunRateForm(FlaskForm):
    runs_scored = IntegerField('Runs scored', validators=[InputRequired(), NumberRange(min=0)])
    overs_faced = FloatField('Overs faced', validators=[InputRequired(), NumberRange(min=0.1, message='Overs must be greater than 0.')])
    runs_conceded = IntegerField('Runs conceded', validators=[InputRequired(), NumberRange(min=0)])
    overs_bowled = FloatField('Overs bowled', validators=[InputRequired(), NumberRange(min=0.1, message='Overs must be greater than 0.')])
    match_format = SelectField('Format', choices=FORMATS, default='odi')
    submit = SubmitField('Calculate NRR')


class PerformanceIndexForm(FlaskForm):
    runs = IntegerField('Runs scored', default=0, validators=[InputRequired(), NumberRange(min=0)])
    balls = IntegerField('Balls faced', default=0, validators=[InputRequired(), NumberRange(min=0)])
    wickets = IntegerField('Wickets', default=0, validators=[InputRequired(), NumberRange(min=0)])
    overs = FloatField('Overs bowled', default=0, validators=[InputRequired(), NumberRange(min=0)])
    runs_conceded = IntegerField('Runs conceded', default=0, validators=[InputRequired(), NumberRange(min=0)])
    catches = IntegerField('Catches', default=0, validators=[InputRequired(), NumberRange(min=0)])
    stumpings = IntegerField('Stumpings', default=0, validators=[InputRequired(), NumberRange(min=0)])
    run_outs = IntegerField('Run-outs', default=0, validators=[InputRequired(), NumberRange(min=0)])
    submit = SubmitField('Calculate Index')


class RequiredRunRateForm(FlaskForm):
    target = IntegerField('Target score', validators=[InputRequired(), NumberRange(min=0)])
    runs_scored = IntegerField('Runs scored so far', validators=[InputRequired(), NumberRange(min=0)])
    overs_played = FloatField('Overs played', validators=[InputRequired(), NumberRange(min=0)])
    overs_remaining = FloatField('Overs remaining', validators=[InputRequired(), NumberRange(min=0.1, message='Overs remaining must be greater than 0.')])
    wickets_lost = IntegerField('Wickets lost', default=0, validators=[InputRequired(), NumberRange(min=0, max=10)])
    balls_remaining = IntegerField('Balls remaining', validators=[Optional(), NumberRange(min=1)],
                                   description='Defaults to overs remaining x 6')
    submit = SubmitField('Calculate')


class TeamRunRateForm(FlaskForm):
    runs = IntegerField('Runs scored', validators=[InputRequired(), NumberRange(min=0)])
    overs = FloatField('Overs faced', validators=[InputRequired(), NumberRange(min=0.1, message='Overs must be greater than 0.')])
    wickets = IntegerField('Wickets lost', default=0, validators=[InputRequired(), NumberRange(min=0, max=10)])
    balls = IntegerField('Balls faced', validators=[Optional(), NumberRange(min=1)],
                         description='Defaults to overs x 6')
    match_format = SelectField('Format', choices=FORMATS, default='odi')
    submit = SubmitField('Calculate')

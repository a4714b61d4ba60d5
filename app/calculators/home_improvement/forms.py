from flask_wtf import FlaskForm
from wtforms import SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, Optional

from app.calculators.fields import FloatField, IntegerField
from app.calculators.home_improvement.formulas import (
    FIXTURE_UNITS,
    INSULATION_MATERIALS,
    LENGTH_UNITS,
    PAINT_TYPES,
    ROOM_TYPES,
    STAIR_UNITS,
)


def _dimension(label, description=None):
    return FloatField(label, validators=[InputRequired(), NumberRange(min=0.01)], description=description)


class PaintCoverageForm(FlaskForm):
    unit = SelectField('Units', choices=LENGTH_UNITS, default='feet')
    length = _dimension('Room length')
    width = _dimension('Room width')
    height = _dimension('Wall height')
    coats = IntegerField('Coats', default=2, validators=[InputRequired(), NumberRange(min=1, max=10)])
    coverage = FloatField('Coverage per gallon/litre', default=350,
                          validators=[InputRequired(), NumberRange(min=1)],
                          description='About 350 sq ft per gallon, or 10 sq m per litre')
    submit = SubmitField('Calculate Paint')


class TileFlooringForm(FlaskForm):
    unit = SelectField('Units', choices=LENGTH_UNITS, default='feet')
    length = _dimension('Room length', 'Feet or metres')
    width = _dimension('Room width', 'Feet or metres')
    tile_length = _dimension('Tile length', 'Inches (feet rooms) or cm (metre rooms)')
    tile_width = _dimension('Tile width', 'Inches (feet rooms) or cm (metre rooms)')
    waste_percent = FloatField('Waste allowance (%)', default=10,
                               validators=[InputRequired(), NumberRange(min=0, max=50)])
    submit = SubmitField('Calculate Tiles')


class StaircaseForm(FlaskForm):
    unit = SelectField('Units', choices=STAIR_UNITS, default='inches')
    total_rise = _dimension('Total rise', 'Finished floor to finished floor')
    ideal_riser = FloatField('Preferred riser height', validators=[Optional(), NumberRange(min=1)],
                             description='Defaults to 7.5 in or 19 cm')
    submit = SubmitField('Calculate Stairs')


class WallpaperForm(FlaskForm):
    wall_height = _dimension('Wall height')
    wall_width = _dimension('Total wall width')
    roll_length = _dimension('Roll length')
    roll_width = _dimension('Roll width')
    pattern_repeat = FloatField('Pattern repeat', default=0, validators=[Optional(), NumberRange(min=0)])
    submit = SubmitField('Calculate Rolls')


class HvacSizingForm(FlaskForm):
    unit = SelectField('Units', choices=[('feet', 'Square feet'), ('meters', 'Square metres')], default='feet')
    area = _dimension('Area to cool')
    climate = SelectField('Climate', choices=[('hot', 'Hot'), ('moderate', 'Moderate'), ('cool', 'Cool')],
                          default='moderate')
    submit = SubmitField('Calculate')


class InsulationForm(FlaskForm):
    material = SelectField('Insulation type',
                           choices=[(key, f"{name} (R-{r}/inch)") for key, (name, r) in INSULATION_MATERIALS.items()],
                           default='fiberglass_batt')
    target_r_value = FloatField('Target R-value', default=21, validators=[InputRequired(), NumberRange(min=1, max=100)])
    submit = SubmitField('Calculate Thickness')


class DeckingMaterialsForm(FlaskForm):
    unit = SelectField('Units', choices=LENGTH_UNITS, default='feet')
    deck_length = _dimension('Deck length', 'Feet or metres')
    deck_width = _dimension('Deck width', 'Across the boards, in feet or metres')
    board_width = FloatField('Board width', default=5.5, validators=[InputRequired(), NumberRange(min=0.5, max=100)],
                             description='Inches (feet decks) or cm (metre decks)')
    joist_spacing = FloatField('Joist spacing', default=16, validators=[InputRequired(), NumberRange(min=4, max=100)],
                               description='On centre, in inches or cm')
    submit = SubmitField('Calculate Decking')


def _count(label, maximum=500):
    return IntegerField(label, default=0, validators=[Optional(), NumberRange(min=0, max=maximum)])


class DoorCabinetHardwareForm(FlaskForm):
    doors = _count('Cabinet doors')
    drawers = _count('Drawers')
    pulls_per_door = IntegerField('Pulls per door', default=1, validators=[InputRequired(), NumberRange(min=1, max=2)])
    pulls_per_drawer = IntegerField('Pulls per drawer', default=1,
                                    validators=[InputRequired(), NumberRange(min=1, max=2)])
    pack_size = IntegerField('Pieces per pack', default=10, validators=[InputRequired(), NumberRange(min=1, max=100)])
    submit = SubmitField('Calculate Hardware')

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if not (self.doors.data or self.drawers.data):
            self.doors.errors.append('Enter at least one door or drawer.')
            return False
        return True


class GardenSoilMulchForm(FlaskForm):
    unit = SelectField('Units', choices=LENGTH_UNITS, default='feet')
    length = _dimension('Bed length', 'Feet or metres')
    width = _dimension('Bed width', 'Feet or metres')
    depth = FloatField('Depth', default=3, validators=[InputRequired(), NumberRange(min=0.1, max=100)],
                       description='Inches (feet beds) or cm (metre beds)')
    submit = SubmitField('Calculate Material')


class LightingLayoutForm(FlaskForm):
    unit = SelectField('Units', choices=LENGTH_UNITS, default='feet')
    room_type = SelectField('Room type', choices=[(key, f"{name} ({lumens} lm/sq ft)")
                                                   for key, (name, lumens) in ROOM_TYPES.items()],
                            default='living_room')
    length = _dimension('Room length')
    width = _dimension('Room width')
    lumens_per_fixture = FloatField('Lumens per fixture', default=800,
                                    validators=[InputRequired(), NumberRange(min=1, max=100000)])
    submit = SubmitField('Plan Lighting')


class PaintDryingTimeForm(FlaskForm):
    paint_type = SelectField('Paint type', choices=[(key, value[0]) for key, value in PAINT_TYPES.items()],
                             default='latex')
    temperature = FloatField('Temperature (°F)', default=70,
                             validators=[InputRequired(), NumberRange(min=32, max=100)])
    humidity = FloatField('Relative humidity (%)', default=50,
                          validators=[InputRequired(), NumberRange(min=1, max=100)])
    thickness = FloatField('Coat thickness (mils)', default=1,
                           validators=[InputRequired(), NumberRange(min=0.1, max=50)])
    coats = IntegerField('Coats', default=2, validators=[InputRequired(), NumberRange(min=1, max=5)])
    submit = SubmitField('Calculate Times')


class WallFramingLumberForm(FlaskForm):
    wall_length = FloatField('Wall length (ft)', validators=[InputRequired(), NumberRange(min=0.5, max=1000)])
    stud_spacing = IntegerField('Stud spacing (inches)', default=16,
                                validators=[InputRequired(), NumberRange(min=8, max=24)])
    wall_height = FloatField('Wall height (ft)', default=8, validators=[InputRequired(), NumberRange(min=6, max=30)])
    openings = _count('Doors and windows', maximum=100)
    plates = SelectField('Plates', choices=[(2, 'Top and bottom'), (3, 'Double top and bottom')], coerce=int,
                         default=2)
    submit = SubmitField('Calculate Lumber')


class WaterUsageFlowForm(FlaskForm):
    kitchen_sinks = _count('Kitchen sinks', maximum=50)
    bathroom_sinks = _count('Bathroom sinks', maximum=50)
    dishwashers = _count('Dishwashers', maximum=50)
    washing_machines = _count('Washing machines', maximum=50)
    toilets = _count('Toilets', maximum=50)
    showers = _count('Showers', maximum=50)
    bathtubs = _count('Bathtubs', maximum=50)
    hose_bibbs = _count('Outdoor hose taps', maximum=50)
    submit = SubmitField('Calculate Demand')

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators):
            return False
        if not any(self[name].data for name in FIXTURE_UNITS):
            self.kitchen_sinks.errors.append('Add at least one fixture.')
            return False
        return True


class WindowCurtainForm(FlaskForm):
    unit = SelectField('Units', choices=LENGTH_UNITS, default='feet')
    window_width = _dimension('Window width')
    window_height = _dimension('Window height')
    curtain_width = _dimension('Curtain panel width', 'Total flat width of all panels')
    curtain_length = _dimension('Curtain length')
    fullness = FloatField('Fullness ratio', default=2, validators=[InputRequired(), NumberRange(min=1, max=5)],
                          description='2x is standard, 2.5x or more is luxurious')
    submit = SubmitField('Calculate Coverage')

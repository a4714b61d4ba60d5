import math

from wtforms import Field, fields
from wtforms.widgets import TextInput

# Largest magnitude any numeric input may have. Keeps products and powers of
# two inputs well inside float range.
MAX_MAGNITUDE = 1e12


def check_number(value):
    """Raise ValueError for inf, nan or anything beyond MAX_MAGNITUDE."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError('Enter a finite number.')
    if abs(value) > MAX_MAGNITUDE:
        raise ValueError(f"Number must be between -{MAX_MAGNITUDE:,.0f} and {MAX_MAGNITUDE:,.0f}.")
    return value


class FloatField(fields.FloatField):
    """wtforms FloatField that also rejects inf, nan and huge values."""

    def process_formdata(self, valuelist):
        super().process_formdata(valuelist)
        if self.data is not None:
            try:
                check_number(self.data)
            except ValueError:
                self.data = None
                raise


class IntegerField(fields.IntegerField):
    """wtforms IntegerField limited to MAX_MAGNITUDE."""

    def process_formdata(self, valuelist):
        super().process_formdata(valuelist)
        if self.data is not None:
            try:
                check_number(self.data)
            except ValueError:
                self.data = None
                raise


class NumberListField(Field):
    """Comma-separated numbers, e.g. cash flows ``-1000, 300, 400, 500``."""

    widget = TextInput()

    def __init__(self, label=None, validators=None, min_entries=1, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.min_entries = min_entries

    def _value(self):
        if self.raw_data:
            return self.raw_data[0]
        if self.data:
            return ', '.join(f"{value:g}" for value in self.data)
        return ''

    def process_formdata(self, valuelist):
        self.data = []
        if not valuelist or not valuelist[0].strip():
            return
        bad = []
        for part in valuelist[0].split(','):
            part = part.strip()
            if not part:
                continue
            try:
                self.data.append(check_number(float(part)))
            except ValueError:
                bad.append(part)
        if bad:
            self.data = []
            raise ValueError(f"Not a number: {', '.join(bad)}")

    def pre_validate(self, form):
        if self.data and len(self.data) < self.min_entries:
            raise ValueError(f"Enter at least {self.min_entries} values separated by commas.")

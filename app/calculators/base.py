"""
Building blocks shared by every calculator in the catalog.

A calculator is a form class, a pure ``compute`` function and a little
presentation metadata. Everything else (pages, JSON API, CLI) is driven
from these objects.
"""

import logging
import math
from bisect import bisect_left, bisect_right
from collections import namedtuple

from werkzeug.datastructures import MultiDict
from wtforms import BooleanField, IntegerField, SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange

logger = logging.getLogger(__name__)

# kind: number | integer | currency | percent | text | list | table
Output = namedtuple('Output', ['key', 'label', 'kind', 'columns'], defaults=('number', None))

Tier = namedtuple('Tier', ['level', 'summary', 'advice'])

SKIPPED_FIELDS = ('submit', 'csrf_token')


class Scale:
    """
    Ordered threshold buckets.

    ``cutoffs`` must be strictly ascending and there must be exactly one more
    band than cutoffs, so every number falls in exactly one band.

    closed='left'  -> a value equal to a cutoff belongs to the band above it
                      (reads like ``if v >= c`` / ``if v < c`` chains)
    closed='right' -> a value equal to a cutoff belongs to the band below it
                      (reads like ``if v <= c`` / ``if v > c`` chains)
    """

    def __init__(self, cutoffs, bands, closed='left'):
        cutoffs = list(cutoffs)
        bands = list(bands)
        if closed not in ('left', 'right'):
            raise ValueError(f"closed must be 'left' or 'right', got {closed!r}")
        if len(bands) != len(cutoffs) + 1:
            raise ValueError(
                f"Scale needs {len(cutoffs) + 1} bands for {len(cutoffs)} cutoffs, got {len(bands)}"
            )
        if any(b <= a for a, b in zip(cutoffs, cutoffs[1:])):
            raise ValueError(f"Scale cutoffs must be strictly ascending: {cutoffs}")
        self.cutoffs = cutoffs
        self.bands = bands
        self.closed = closed

    def index(self, value):
        if self.closed == 'left':
            return bisect_right(self.cutoffs, value)
        return bisect_left(self.cutoffs, value)

    def classify(self, value):
        return self.bands[self.index(value)]

    def __len__(self):
        return len(self.bands)

    def __repr__(self):
        return f"Scale(cutoffs={self.cutoffs!r}, closed={self.closed!r})"


def clamp(value, low=0.0, high=100.0):
    return max(low, min(high, value))


def round_half_up(value):
    """Round .5 away from zero for positives (2.5 -> 3), unlike round()."""
    return math.floor(value + 0.5)


class Calculator:
    """One form + formula + display unit."""

    def __init__(self, slug, name, category, description, form_class, compute,
                 outputs, guide='', faqs=(), keywords=(), related=(), icon='🧮'):
        self.slug = slug
        self.name = name
        self.category = category
        self.description = description
        self.form_class = form_class
        self.compute = compute
        self.outputs = list(outputs)
        self.guide = guide
        self.faqs = list(faqs)
        self.keywords = list(keywords)
        self.related = list(related)
        self.icon = icon

    def __repr__(self):
        return f"<Calculator {self.category}/{self.slug}>"

    @property
    def url(self):
        return f"/category/{self.category}/{self.slug}"

    def inputs(self, form):
        """Flat input record: every field except submit/CSRF, keyed by name."""
        return {
            name: field.data
            for name, field in form._fields.items()
            if name not in SKIPPED_FIELDS
        }

    def build_form(self, formdata=None, **kwargs):
        if formdata is not None and not isinstance(formdata, MultiDict):
            formdata = MultiDict(formdata)
        return self.form_class(formdata=formdata, meta={'csrf': False}, **kwargs)

    def evaluate(self, formdata):
        """
        Validate ``formdata`` and run the formula.

        Returns ``(result, {})`` on success or ``(None, errors)`` where errors
        maps field name to a list of messages. Must run inside an app context.
        """
        form = self.build_form(formdata)
        if not form.validate():
            logger.debug("Validation failed for %s: %s", self.slug, sorted(form.errors))
            return None, form.errors
        return self.compute(**self.inputs(form)), {}

    def describe(self):
        """JSON-friendly description of the calculator and its input fields."""
        form = self.build_form()
        fields = []
        for name, field in form._fields.items():
            if name in SKIPPED_FIELDS or isinstance(field, SubmitField):
                continue
            fields.append(describe_field(field))
        return {
            'slug': self.slug,
            'name': self.name,
            'category': self.category,
            'description': self.description,
            'url': self.url,
            'fields': fields,
            'outputs': [{'key': o.key, 'label': o.label, 'kind': o.kind} for o in self.outputs],
        }


def describe_field(field):
    info = {
        'name': field.name,
        'label': field.label.text,
        'type': field_type(field),
        'required': any(isinstance(v, InputRequired) for v in field.validators),
        'default': field.default,
    }
    if isinstance(field, SelectField):
        info['choices'] = [{'value': value, 'label': label} for value, label in field.choices]
    for validator in field.validators:
        if isinstance(validator, NumberRange):
            info['min'] = validator.min
            info['max'] = validator.max
    if field.description:
        info['help'] = field.description
    return info


def field_type(field):
    if isinstance(field, BooleanField):
        return 'boolean'
    if isinstance(field, SelectField):
        return 'choice'
    if isinstance(field, IntegerField):
        return 'integer'
    return field.type.replace('Field', '').lower()

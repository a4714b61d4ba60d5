"""
Size and measurement converters.

Sizing systems are conventions rather than physics, so most of these are
linear offsets taken from common retail charts. Ring sizes use a lookup table.
"""

import math
from collections import namedtuple
from fractions import Fraction

from app.calculators.base import round_half_up

CM_PER_INCH = 2.54
CM_PER_FOOT = 30.48

SHOE_SYSTEMS = [('US', 'US'), ('UK', 'UK'), ('IN', 'India'), ('EU', 'EU'), ('CM', 'Centimetres'), ('JP', 'Japan')]
SHOE_GENDERS = [('men', 'Men'), ('women', 'Women')]
# gender -> (US-UK offset, US-EU offset, cm intercept)
SHOE_OFFSETS = {
    'men': (0.5, 33, 18.66),
    'women': (2, 31, 17.2),
}
SHOE_CM_SLOPE = 0.847

RingSize = namedtuple('RingSize', ['us', 'uk', 'diameter', 'circumference', 'eu', 'jp'])

RING_SIZES = [
    RingSize(3, 'F', 13.7, 43.1, 44, 4),
    RingSize(3.5, 'G', 14.1, 44.3, 45, 5),
    RingSize(4, 'H', 14.5, 45.5, 46, 6),
    RingSize(4.5, 'I', 14.9, 46.8, 47, 7),
    RingSize(5, 'J', 15.3, 48.0, 49, 9),
    RingSize(5.5, 'K', 15.7, 49.3, 50, 10),
    RingSize(6, 'L', 16.1, 50.6, 51, 11),
    RingSize(6.5, 'M', 16.5, 51.8, 52, 12),
    RingSize(7, 'N', 16.9, 53.1, 54, 14),
    RingSize(7.5, 'O', 17.3, 54.4, 55, 15),
    RingSize(8, 'P', 17.7, 55.7, 56, 16),
    RingSize(8.5, 'Q', 18.1, 57.0, 58, 17),
    RingSize(9, 'R', 18.5, 58.3, 59, 18),
    RingSize(9.5, 'S', 19.0, 59.5, 60, 19),
    RingSize(10, 'T', 19.4, 60.8, 62, 20),
    RingSize(10.5, 'U', 19.8, 62.1, 63, 22),
    RingSize(11, 'V', 20.2, 63.3, 64, 23),
    RingSize(11.5, 'W', 20.6, 64.6, 66, 25),
    RingSize(12, 'X', 21.0, 65.9, 67, 26),
    RingSize(12.5, 'Y', 21.4, 67.2, 68, 27),
    RingSize(13, 'Z', 21.8, 68.5, 70, 28),
]
RING_UNITS = [
    ('circumference', 'Inside circumference (mm)'),
    ('diameter', 'Inside diameter (mm)'),
    ('us', 'US / Canada size'),
    ('uk', 'UK / India letter'),
    ('eu', 'EU size'),
    ('jp', 'Japan size'),
]
UK_RING_LETTERS = {size.uk: size for size in RING_SIZES}

# mm; anything larger is not a finger measurement
MAX_RING_VALUE = 500

HAT_UNITS = [('cm', 'Head circumference (cm)'), ('in', 'Head circumference (in)'),
             ('us', 'US fitted size'), ('eu', 'EU size'), ('jp', 'Japan size')]
HAND_UNITS = [('cm', 'Centimetres'), ('in', 'Inches')]


def shoe_size(gender, from_system, size):
    uk_offset, eu_offset, cm_intercept = SHOE_OFFSETS[gender]

    if from_system == 'US':
        us = size
    elif from_system in ('UK', 'IN'):
        us = size + uk_offset
    elif from_system == 'EU':
        us = size - eu_offset
    elif from_system in ('CM', 'JP'):
        us = (size - cm_intercept) / SHOE_CM_SLOPE
    else:
        raise ValueError(f"unknown shoe size system: {from_system!r}")

    if from_system == 'EU':
        cm = size * 2 / 3
    elif from_system in ('CM', 'JP'):
        cm = size
    else:
        cm = us * SHOE_CM_SLOPE + cm_intercept

    uk = us - uk_offset
    return {
        'us': us,
        'uk': uk,
        'india': uk,
        'eu': us + eu_offset,
        'cm': cm,
        'jp': cm,
    }


def height(feet=None, inches=None, centimeters=None):
    """Centimetres win when both systems are given."""
    if centimeters:
        total_inches = centimeters / CM_PER_INCH
        whole_feet = int(total_inches // 12)
        rest = total_inches - whole_feet * 12
        if round(rest, 1) >= 12:
            whole_feet, rest = whole_feet + 1, 0.0
        return {
            'centimeters': centimeters,
            'meters': centimeters / 100,
            'feet': whole_feet,
            'inches': rest,
            'total_inches': total_inches,
            'display': f"{whole_feet}' {rest:.1f}\"",
        }
    feet = feet or 0
    inches = inches or 0
    if feet <= 0 and inches <= 0:
        raise ValueError("enter a height")
    cm = feet * CM_PER_FOOT + inches * CM_PER_INCH
    return {
        'centimeters': cm,
        'meters': cm / 100,
        'feet': feet,
        'inches': inches,
        'total_inches': feet * 12 + inches,
        'display': f"{cm:.1f} cm",
    }


def _interpolate(value, key, target):
    rows = RING_SIZES
    if value <= getattr(rows[0], key):
        return getattr(rows[0], target)
    if value >= getattr(rows[-1], key):
        return getattr(rows[-1], target)
    for a, b in zip(rows, rows[1:]):
        low, high = getattr(a, key), getattr(b, key)
        if low <= value <= high:
            t = (value - low) / (high - low)
            return getattr(a, target) + t * (getattr(b, target) - getattr(a, target))
    return getattr(rows[0], target)


def parse_ring_value(unit, value):
    """Returns (diameter_mm, circumference_mm) or raises ValueError."""
    if unit == 'uk':
        row = UK_RING_LETTERS.get(str(value).strip().upper())
        if row is None:
            raise ValueError("UK/India size must be a letter from F to Z")
        return row.diameter, row.circumference
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError("enter a number for this unit") from None
    if not math.isfinite(number):
        raise ValueError("enter a number for this unit")
    if number <= 0:
        raise ValueError("size must be positive")
    if number > MAX_RING_VALUE:
        raise ValueError(f"size must be at most {MAX_RING_VALUE:g}")
    if unit in ('circumference', 'eu'):
        return number / math.pi, number
    if unit in ('diameter', 'jp'):
        return number, number * math.pi
    if unit == 'us':
        diameter = _interpolate(number, 'us', 'diameter')
        return diameter, diameter * math.pi
    raise ValueError(f"unknown ring size unit: {unit!r}")


def ring_size(unit, value):
    diameter, circumference = parse_ring_value(unit, value)
    closest = min(RING_SIZES, key=lambda row: abs(circumference - row.circumference))
    return {
        'diameter': diameter,
        'circumference': circumference,
        'closest_standard': f"{closest.us:g} (UK {closest.uk})",
        'closest_difference': circumference - closest.circumference,
        'us': _interpolate(circumference, 'circumference', 'us'),
        'uk': closest.uk,
        'eu': round(circumference),
        'jp': closest.jp,
    }


def eighths(value):
    """7.125 -> '7 1/8'."""
    whole = int(value)
    frac = Fraction(round((value - whole) * 8), 8)
    if frac == 1:
        return str(whole + 1)
    if frac == 0:
        return str(whole)
    return f"{whole} {frac.numerator}/{frac.denominator}"


def hat_size(unit, value):
    if value <= 0:
        raise ValueError("size must be positive")
    if unit == 'in':
        cm = value * CM_PER_INCH
    elif unit == 'us':
        cm = value * math.pi * CM_PER_INCH
    elif unit in ('cm', 'eu', 'jp'):
        cm = value
    else:
        raise ValueError(f"unknown hat size unit: {unit!r}")
    inches = cm / CM_PER_INCH
    return {
        'centimeters': cm,
        'inches': inches,
        'us': eighths(inches / math.pi),
        'eu': round(cm),
        'jp': round(cm),
    }


def glove_size(hand_circumference, unit='cm'):
    inches = hand_circumference / CM_PER_INCH if unit == 'cm' else hand_circumference
    eu = round(inches * 2.54)
    return {
        'inches': inches,
        'us': round(inches * 2) / 2,
        'uk': round(inches * 2) / 2,
        'eu': eu,
        'jp': eu,
        'india': round(inches * 2.54 - 1),
    }


def foot_length(length, unit='cm'):
    cm = length * CM_PER_INCH if unit == 'in' else length
    us_men = round(cm * 0.3937 * 3 - 22 + 0.5)
    uk = round(us_men - 1)
    return {
        'centimeters': cm,
        'inches': cm / CM_PER_INCH,
        'us_men': us_men,
        'us_women': us_men + 1.5,
        'uk': uk,
        'eu': round(cm * 1.5 + 17),
        'jp': round(cm),
        'india': uk,
    }


CLOTH_GROUPS = [('men', 'Men'), ('women', 'Women'), ('kids', 'Kids')]
CLOTH_REGIONS = [('US', 'US'), ('UK', 'UK'), ('EU', 'EU'), ('India', 'India'), ('Japan', 'Japan'),
                 ('Intl', 'International')]
CLOTH_COLUMNS = [code for code, _ in CLOTH_REGIONS]

# One row per size step, columns in CLOTH_COLUMNS order
CLOTH_SIZE_CHARTS = {
    'men': [
        ('34', '34', '44', '34', 'S', 'S'),
        ('36', '36', '46', '36', 'M', 'M'),
        ('38', '38', '48', '38', 'L', 'L'),
        ('40', '40', '50', '40', 'XL', 'XL'),
        ('42', '42', '52', '42', 'XXL', 'XXL'),
        ('44', '44', '54', '44', '3XL', '3XL'),
    ],
    'women': [
        ('2', '6', '34', 'XS', '5', 'XS'),
        ('4', '8', '36', 'S', '7', 'S'),
        ('6', '10', '38', 'M', '9', 'M'),
        ('8', '12', '40', 'L', '11', 'L'),
        ('10', '14', '42', 'XL', '13', 'XL'),
        ('12', '16', '44', 'XXL', '15', 'XXL'),
    ],
    'kids': [
        ('2T', '2', '92', '2Y', '90', '2Y'),
        ('3T', '3', '98', '3Y', '95', '3Y'),
        ('4T', '4', '104', '4Y', '100', '4Y'),
        ('5', '5', '110', '5Y', '105', '5Y'),
        ('6', '6', '116', '6Y', '110', '6Y'),
        ('7', '7', '122', '7Y', '115', '7Y'),
        ('8', '8', '128', '8Y', '120', '8Y'),
        ('10', '10', '140', '10Y', '130', '10Y'),
        ('12', '12', '152', '12Y', '140', '12Y'),
    ],
}

MEASUREMENT_UNITS = [('cm', 'Centimetres'), ('in', 'Inches')]
MEASUREMENT_GROUPS = [('men', 'Men'), ('women', 'Women')]


def cloth_sizes_for(group, region):
    column = CLOTH_COLUMNS.index(region)
    return [row[column] for row in CLOTH_SIZE_CHARTS[group]]


def find_cloth_size(group, region, size):
    """The chart row for ``size`` in ``region``, matched case-insensitively, or None."""
    column = CLOTH_COLUMNS.index(region)
    wanted = str(size).strip().lower()
    return next((row for row in CLOTH_SIZE_CHARTS[group] if row[column].lower() == wanted), None)


def cloth_size(gender, from_region, size):
    row = find_cloth_size(gender, from_region, size)
    if row is None:
        raise ValueError(f"size {size!r} is not on the {gender} {from_region} chart")
    result = {code.lower(): value for code, value in zip(CLOTH_COLUMNS, row)}
    result['group'] = dict(CLOTH_GROUPS)[gender]
    return result


def _round_up_to_even(value):
    value = round_half_up(value)
    return value + 1 if value % 2 else value


def _size_row(garment, us, uk, eu, india, japan):
    return {'garment': garment, 'us': us, 'uk': uk, 'eu': eu, 'india': india, 'japan': japan}


def body_measurement_cloth_size(gender, unit='cm', chest=None, waist=None, bust=None, hips=None):
    """Body measurements to tops and bottoms sizes. Men need chest and waist, women bust and waist."""
    def inches(value):
        if not value:
            return 0.0
        return value / CM_PER_INCH if unit == 'cm' else value

    waist_in = inches(waist)
    if gender == 'men':
        if not chest or not waist:
            raise ValueError("chest and waist are required for men's sizes")
        shirt = _round_up_to_even(inches(chest))
        pants = round_half_up(waist_in)
        waist_cm = waist_in * CM_PER_INCH
        rows = [
            _size_row('Shirt', shirt, shirt, shirt + 10, shirt - 2, shirt + 8),
            _size_row('Trousers', pants, pants, round_half_up(waist_cm + 10),
                      round_half_up(waist_cm - 2), round_half_up(waist_cm + 4)),
        ]
    elif gender == 'women':
        if not bust or not waist:
            raise ValueError("bust and waist are required for women's sizes")
        top = _round_up_to_even((inches(bust) - 32) * 1.5)
        bottom = _round_up_to_even(waist_in - 24)
        rows = [
            _size_row(garment, us, us - 2, us + 30, us + 26, us + 6)
            for garment, us in (('Top', top), ('Bottom', bottom))
        ]
    else:
        raise ValueError(f"unknown size group: {gender!r}")

    return {
        'us_top': rows[0]['us'],
        'us_bottom': rows[1]['us'],
        'sizes': rows,
    }

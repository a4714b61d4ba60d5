import math
from collections import namedtuple
from datetime import timedelta

import pytz
from dateutil.relativedelta import relativedelta

from app.calculators.base import round_half_up
from app.calculators.formatting import format_duration

# kg CO2e per passenger-km
TRANSPORT_FACTORS = {'flight': 0.158, 'train': 0.041}
PETROL_KG_CO2_PER_LITRE = 2.31
DEFAULT_CAR_CONSUMPTION = 7.0
TRAVEL_MODES = [('car', 'Car'), ('train', 'Train'), ('flight', 'Flight')]

GENOTYPES = [('AA', 'AA (homozygous dominant)'), ('Aa', 'Aa (heterozygous)'), ('aa', 'aa (homozygous recessive)')]

MAX_COST = 1e9

TIME_ZONES = [
    'UTC', 'Europe/London', 'Europe/Paris', 'Europe/Berlin', 'Europe/Moscow', 'Africa/Cairo',
    'Africa/Johannesburg', 'Asia/Dubai', 'Asia/Karachi', 'Asia/Kolkata', 'Asia/Dhaka', 'Asia/Bangkok',
    'Asia/Singapore', 'Asia/Shanghai', 'Asia/Tokyo', 'Australia/Perth', 'Australia/Sydney', 'Pacific/Auckland',
    'America/Sao_Paulo', 'America/New_York', 'America/Chicago', 'America/Denver', 'America/Los_Angeles',
    'America/Anchorage', 'Pacific/Honolulu',
]
# time zones crossed before a pre-trip sleep shift is worth it
JET_LAG_THRESHOLD = 3

Member = namedtuple('Member', 'id sex phenotype parents')
SEXES = {'m': 'male', 'male': 'male', 'f': 'female', 'female': 'female'}
PHENOTYPES = {
    'a': 'affected', 'affected': 'affected',
    'u': 'unaffected', 'unaffected': 'unaffected',
    '?': 'unknown', 'unknown': 'unknown',
}
NO_PARENT = {'', '-', 'none'}
INHERITANCE_MODES = ['Autosomal Dominant', 'X-linked Dominant', 'Autosomal Recessive', 'X-linked Recessive']
DOMINANT_MODES = INHERITANCE_MODES[:2]
RECESSIVE_MODES = INHERITANCE_MODES[2:]
DEFAULT_PEDIGREE = """I-1, male, unaffected
I-2, female, affected
II-1, female, affected, I-1, I-2
II-2, male, unaffected, I-1, I-2"""


def date_difference(start_date, end_date):
    if end_date < start_date:
        start_date, end_date = end_date, start_date
    delta = relativedelta(end_date, start_date)
    total_days = (end_date - start_date).days
    return {
        'start_date': start_date.isoformat(),
        'end_date': end_date.isoformat(),
        'total_days': total_days,
        'weeks': total_days // 7,
        'extra_days': total_days % 7,
        'years': delta.years,
        'months': delta.months,
        'days': delta.days,
        'summary': f"{delta.years} years, {delta.months} months and {delta.days} days",
    }


def battery_life(capacity_mah, current_draw_ma=None, voltage=None, power_draw_w=None):
    """Hours from mAh / mA, or from Wh (mAh x V) / W."""
    if current_draw_ma:
        hours = capacity_mah / current_draw_ma
    elif voltage and power_draw_w:
        hours = capacity_mah / 1000 * voltage / power_draw_w
    else:
        raise ValueError("give a current draw, or a voltage and power draw")
    return {
        'hours': hours,
        'duration': format_duration(hours),
        'days': hours / 24,
    }


def travel_carbon(mode, distance_km, passengers=1, fuel_consumption=None):
    passengers = passengers or 1
    if mode == 'car':
        consumption = fuel_consumption or DEFAULT_CAR_CONSUMPTION
        total = consumption * distance_km / 100 * PETROL_KG_CO2_PER_LITRE
        tips = [
            'Share the ride: emissions per person fall with every extra passenger',
            'Keep tyres inflated and drive smoothly to cut fuel use',
            'Consider the train for trips between city centres',
        ]
    elif mode in TRANSPORT_FACTORS:
        total = TRANSPORT_FACTORS[mode] * distance_km * passengers
        tips = [
            'Fly direct where possible, since take-off uses the most fuel',
            'Choose economy: premium seats take up more of the plane',
            'Take the train for journeys under about 700 km',
        ] if mode == 'flight' else [
            'Rail is one of the lowest-carbon ways to travel',
            'Combine the trip with walking or cycling at each end',
            'Book off-peak to travel on less crowded trains',
        ]
    else:
        raise ValueError(f"unknown travel mode: {mode!r}")
    return {
        'total_kg': total,
        'per_passenger_kg': total / passengers,
        'tips': tips,
    }


def _gametes(genotype):
    return list(genotype)


def _normalise(genotype):
    # 'aA' and 'Aa' are the same genotype; dominant allele first
    return ''.join(sorted(genotype))


def genetic_trait(parent1, parent2):
    square = []
    counts = {'AA': 0, 'Aa': 0, 'aa': 0}
    for a in _gametes(parent1):
        row = []
        for b in _gametes(parent2):
            child = _normalise(a + b)
            counts[child] += 1
            row.append(child)
        square.append(row)
    dominant = (counts['AA'] + counts['Aa']) / 4 * 100
    return {
        'punnett_square': [
            {'allele': allele, 'first': row[0], 'second': row[1]}
            for allele, row in zip(_gametes(parent1), square)
        ],
        'homozygous_dominant': counts['AA'] / 4 * 100,
        'heterozygous': counts['Aa'] / 4 * 100,
        'homozygous_recessive': counts['aa'] / 4 * 100,
        'dominant_phenotype': dominant,
        'recessive_phenotype': 100 - dominant,
    }


def parse_cost_lines(text):
    """
    Parse extra trip costs written one per line as ``Label: amount``.

    Returns a list of (label, amount) pairs. Raises ValueError naming the
    first bad line.
    """
    items = []
    for number, line in enumerate((text or '').splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        label, sep, amount = line.rpartition(':')
        if not sep or not label.strip():
            raise ValueError(f"line {number}: write each cost as 'Label: amount'")
        try:
            value = float(amount.strip().lstrip('$').replace(',', ''))
        except ValueError:
            raise ValueError(f"line {number}: {amount.strip()!r} is not a number") from None
        if not 0 <= value <= MAX_COST:
            raise ValueError(f"line {number}: amount must be between 0 and {MAX_COST:,.0f}")
        items.append((label.strip(), value))
    return items


def travel_budget(days, people=1, flights=0, accommodation=0, food_per_day=0, activities=0, other_costs=''):
    """
    Total trip cost. Food, and any extra line whose label says 'per day', is
    per person per day; everything else is a total for the whole group.
    """
    people = people or 1
    items = [
        ('Flights', flights or 0, False),
        ('Accommodation', accommodation or 0, False),
        ('Food (per day)', food_per_day or 0, True),
        ('Activities', activities or 0, False),
    ]
    items += [(label, value, 'per day' in label.lower()) for label, value in parse_cost_lines(other_costs)]

    rows = []
    for label, value, daily in items:
        rows.append({'item': label, 'amount': value * days * people if daily else value})
    total = sum(row['amount'] for row in rows)
    for row in rows:
        row['share'] = row['amount'] / total * 100 if total else 0

    return {
        'total': total,
        'per_person': total / people,
        'per_day': total / days,
        'per_person_per_day': total / people / days,
        'breakdown': rows,
    }


def _zone(name):
    try:
        return pytz.timezone(name)
    except pytz.exceptions.UnknownTimeZoneError:
        raise ValueError(f"unknown time zone: {name!r}") from None


def jet_lag_plan(origin_tz, destination_tz, departure, flight_hours):
    """``departure`` is a naive datetime in the origin's local time."""
    depart = _zone(origin_tz).localize(departure)
    # add flight time in UTC so a DST change mid-flight is handled
    arrive = (depart.astimezone(pytz.UTC) + timedelta(hours=flight_hours)).astimezone(_zone(destination_tz))
    shift = round_half_up((arrive.utcoffset() - depart.utcoffset()).total_seconds() / 3600)
    zones = abs(shift)
    direction = 'east' if shift > 0 else 'west' if shift < 0 else 'none'
    hours_per_day = min(2, max(1, zones // 3))

    if zones >= JET_LAG_THRESHOLD:
        plan = [
            f"You are flying {direction} across {zones} time zones.",
            f"Shift your sleep by about {hours_per_day} hour(s) a day, starting 2 to 3 days before you leave.",
            'Eastbound, get morning light. Westbound, get evening light.',
            'Drink water during the flight and limit caffeine and alcohol.',
        ]
    else:
        plan = ['A minor time shift. Keep regular meal and sleep times on arrival.']

    return {
        'time_difference': shift,
        'direction': direction,
        'arrival_local': arrive.strftime('%a %d %b %Y, %H:%M'),
        'arrival_zone': arrive.tzname(),
        'days_to_adjust': math.ceil(zones / hours_per_day),
        'plan': plan,
    }


def parse_pedigree(text):
    """
    Parse family members, one per line: ``id, sex, phenotype[, parent[, parent]]``.

    Sex is male/female (or m/f), phenotype affected/unaffected/unknown (or
    a/u/?). Parents must be listed ids; ``-`` or ``none`` marks a missing one.
    """
    members = []
    seen = set()
    for number, line in enumerate((text or '').splitlines(), 1):
        parts = [part.strip() for part in line.split(',')]
        if not any(parts):
            continue
        if len(parts) < 3 or len(parts) > 5:
            raise ValueError(f"line {number}: expected 'id, sex, phenotype' and up to two parents")
        member_id, sex, phenotype = parts[:3]
        if not member_id:
            raise ValueError(f"line {number}: missing id")
        if member_id in seen:
            raise ValueError(f"line {number}: {member_id} is listed twice")
        if sex.lower() not in SEXES:
            raise ValueError(f"line {number}: sex must be male or female, got {sex!r}")
        if phenotype.lower() not in PHENOTYPES:
            raise ValueError(f"line {number}: phenotype must be affected, unaffected or unknown, got {phenotype!r}")
        parents = tuple(p for p in parts[3:] if p.lower() not in NO_PARENT)
        if member_id in parents:
            raise ValueError(f"line {number}: {member_id} cannot be their own parent")
        seen.add(member_id)
        members.append(Member(member_id, SEXES[sex.lower()], PHENOTYPES[phenotype.lower()], parents))

    if not members:
        raise ValueError('add at least one family member')
    for member in members:
        for parent in member.parents:
            if parent not in seen:
                raise ValueError(f"{member.id} has parent {parent}, who is not listed")
    return members


def _inheritance_findings(child, parents):
    """Yield (modes ruled out, reason) for one child and their listed parents."""
    if len(parents) == 2:
        first, second = parents
        phenotypes = {first.phenotype, second.phenotype}
        if phenotypes == {'unaffected'} and child.phenotype == 'affected':
            yield DOMINANT_MODES, (f"Unaffected parents ({first.id}, {second.id}) have an affected child "
                                   f"({child.id}), which points to a recessive trait.")
        if phenotypes == {'affected'} and child.phenotype == 'unaffected':
            yield RECESSIVE_MODES, (f"Affected parents ({first.id}, {second.id}) have an unaffected child "
                                    f"({child.id}), which points to a dominant trait.")

    for parent in parents:
        pair = (parent.sex, parent.phenotype, child.sex, child.phenotype)
        if pair == ('male', 'affected', 'female', 'unaffected'):
            yield ['X-linked Dominant'], (f"Affected father {parent.id} has an unaffected daughter {child.id}, "
                                          f"which rules out X-linked dominant.")
        elif pair == ('female', 'unaffected', 'male', 'affected'):
            yield ['X-linked Dominant'], (f"Affected son {child.id} has an unaffected mother {parent.id}, "
                                          f"which rules out X-linked dominant.")
        elif pair == ('female', 'affected', 'male', 'unaffected'):
            yield ['X-linked Recessive'], (f"Affected mother {parent.id} has an unaffected son {child.id}, "
                                           f"which rules out X-linked recessive.")
        elif pair == ('male', 'unaffected', 'female', 'affected'):
            yield ['X-linked Recessive'], (f"Affected daughter {child.id} has an unaffected father {parent.id}, "
                                           f"which rules out X-linked recessive.")


def pedigree_analysis(members):
    family = parse_pedigree(members)
    by_id = {member.id: member for member in family}
    ruled_out = set()
    reasoning = []
    for child in family:
        parents = [by_id[parent_id] for parent_id in child.parents]
        for modes, reason in _inheritance_findings(child, parents):
            ruled_out.update(modes)
            reasoning.append(reason)

    possible = [mode for mode in INHERITANCE_MODES if mode not in ruled_out]
    if not reasoning:
        reasoning.append('No definitive dominant or recessive pattern found. More family members may help.')
    elif not possible:
        reasoning.append('No single-gene mode fits every family; check the phenotypes entered.')

    return {
        'possible_modes': possible,
        'reasoning': reasoning,
        'member_count': len(family),
        'affected_count': sum(member.phenotype == 'affected' for member in family),
        'family': [
            {
                'id': member.id,
                'sex': member.sex,
                'phenotype': member.phenotype,
                'parents': ', '.join(member.parents) or '-',
            }
            for member in family
        ],
    }

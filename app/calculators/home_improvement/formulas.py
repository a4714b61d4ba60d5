import math

from app.calculators.base import Scale, round_half_up

LENGTH_UNITS = [('feet', 'Feet'), ('meters', 'Metres')]
STAIR_UNITS = [('inches', 'Inches'), ('cm', 'Centimetres')]

SQ_FT_PER_SQ_M = 10.7639
BTU_PER_TON = 12000
CLIMATE_FACTORS = {'hot': 30, 'moderate': 25, 'cool': 20}

# R-value per inch of thickness
INSULATION_MATERIALS = {
    'fiberglass_batt': ('Fiberglass batt', 3.2),
    'rockwool': ('Rockwool batt', 3.8),
    'cellulose': ('Blown cellulose', 3.5),
    'open_cell_spray_foam': ('Open-cell spray foam', 3.6),
    'closed_cell_spray_foam': ('Closed-cell spray foam', 6.5),
    'xps_foam_board': ('XPS foam board', 5.0),
}

PAINT_PROJECT_SIZE = Scale([5, 11], ['Small Project', 'Medium Project', 'Large Project'])
PAINT_OPINIONS = {
    'Small Project': 'Perfect size for a weekend DIY project with minimal preparation needed.',
    'Medium Project': 'A manageable DIY project with proper planning and preparation.',
    'Large Project': 'Plan for multiple painting sessions and consider professional help.',
}
STAIR_COMPLEXITY = Scale([8, 16], ['Low Complexity', 'Medium Complexity', 'High Complexity'])
# unit -> ((riser min, riser max), (tread min, tread max))
COMFORTABLE_STAIRS = {
    'inches': ((7, 8), (9, 11)),
    'cm': ((17.8, 20.3), (22.9, 27.9)),
}


def paint_efficiency(coverage):
    if coverage > 400:
        return 'High Efficiency'
    if coverage >= 300:
        return 'Standard Efficiency'
    return 'Lower Efficiency'


def paint_coverage(length, width, height, coats=2, coverage=350, unit='feet'):
    walls = 2 * (length + width) * height
    ceiling = length * width
    area = walls + ceiling
    needed = math.ceil(area * coats / coverage)
    unit_text = 'gallons' if unit == 'feet' else 'liters'
    size = PAINT_PROJECT_SIZE.classify(needed)

    recommendations = [
        f"Purchase {needed + 1} {unit_text} for a safety margin",
        'Use primer for better coverage and adhesion',
        'Prepare surfaces properly before painting',
    ]
    if coats > 2:
        recommendations.append('Allow proper drying time between coats')
    if needed > 5:
        recommendations.append('Consider buying paint in bulk for cost savings')

    return {
        'paint_needed': needed,
        'unit_label': unit_text,
        'paintable_area': area,
        'project_size': size,
        'efficiency': paint_efficiency(coverage),
        'opinion': PAINT_OPINIONS[size],
        'recommendations': recommendations,
    }


def tile_flooring(length, width, tile_length, tile_width, waste_percent=10, unit='feet'):
    """Room in feet with tiles in inches, or room in metres with tiles in cm."""
    factor = 144 if unit == 'feet' else 10000
    area = length * width
    tile_area = tile_length * tile_width / factor
    exact = area / tile_area
    return {
        'tiles_needed': math.ceil(exact * (1 + (waste_percent or 0) / 100)),
        'tiles_without_waste': math.ceil(exact),
        'floor_area': area,
        'area_unit': 'sq ft' if unit == 'feet' else 'sq m',
    }


def staircase(total_rise, unit='inches', ideal_riser=None):
    imperial = unit == 'inches'
    ideal = ideal_riser or (7.5 if imperial else 19)
    risers = max(1, round_half_up(total_rise / ideal))
    riser_height = total_rise / risers
    tread = (24.5 if imperial else 62) - 2 * riser_height
    total_run = tread * (risers - 1)

    (riser_min, riser_max), (tread_min, tread_max) = COMFORTABLE_STAIRS[unit]
    safe = riser_min <= riser_height <= riser_max and tread_min <= tread <= tread_max
    return {
        'risers': risers,
        'treads': risers - 1,
        'riser_height': riser_height,
        'tread_depth': tread,
        'total_run': total_run,
        'complexity': STAIR_COMPLEXITY.classify(risers),
        'safety': 'Safe Design' if safe else 'Review Required',
    }


def wallpaper_rolls(wall_height, wall_width, roll_length, roll_width, pattern_repeat=0.0):
    drops = math.ceil(wall_width / roll_width)
    drop_length = wall_height + max(pattern_repeat or 0.0, 0.0)
    drops_per_roll = math.floor(roll_length / drop_length)
    if drops_per_roll == 0:
        # a roll cannot cover one drop, so fall back to total length
        rolls = math.ceil(drops * drop_length / roll_length)
    else:
        rolls = math.ceil(math.ceil(drops / drops_per_roll) * 1.1)
    return {
        'rolls_needed': rolls,
        'drops': drops,
        'drop_length': drop_length,
        'drops_per_roll': drops_per_roll,
    }


def hvac_sizing(area, climate='moderate', unit='feet'):
    sq_ft = area * SQ_FT_PER_SQ_M if unit == 'meters' else area
    btu = sq_ft * CLIMATE_FACTORS[climate]
    return {
        'btu': btu,
        'tons': btu / BTU_PER_TON,
        'square_feet': sq_ft,
    }


def insulation_r_value(material, target_r_value=21):
    name, per_inch = INSULATION_MATERIALS[material]
    return {
        'material': name,
        'r_per_inch': per_inch,
        'thickness': target_r_value / per_inch,
        'comparison': [
            {'material': label, 'r_per_inch': r, 'thickness': round(target_r_value / r, 2)}
            for label, r in INSULATION_MATERIALS.values()
        ],
    }


FEET_PER_METER = 3.28084
CM_PER_INCH = 2.54
# gap between deck boards, inches
BOARD_GAP = 0.125
DECK_WASTE = 1.05

DECK_OPINIONS = {
    'Small Project': 'A straightforward weekend build for a confident DIYer.',
    'Medium Project': 'A solid DIY project; line up a helper for the joists and decking.',
    'Large Project': 'A major build. Get the framing inspected and consider professional help.',
}
JOIST_COMPLEXITY = Scale([12, 16], ['High Complexity', 'Standard Complexity', 'Low Complexity'], closed='right')

HARDWARE_SCOPE = Scale([20, 40], ['Small project', 'Medium project', 'Large kitchen or multi-room project'])

# 2 cu ft bags, or 50 litre bags for metric beds
SOIL_BAG_SIZE = {'feet': 2, 'meters': 50}
SOIL_OPINIONS = {
    'Small Project': 'A few bags and an afternoon of work.',
    'Medium Project': 'Order bags or a small bulk load and plan a full day of spreading.',
    'Large Project': 'Bulk delivery is cheaper than bags at this size.',
}

# lumens per square foot
ROOM_TYPES = {
    'living_room': ('Living room', 20),
    'kitchen': ('Kitchen', 40),
    'bedroom': ('Bedroom', 15),
    'bathroom': ('Bathroom', 75),
    'office': ('Office', 50),
}
LIGHTING_DEMAND = Scale([4, 9], ['Standard', 'Moderate', 'High'])
LIGHTING_OPINIONS = {
    'Standard': 'Perfect for DIY lighting installation with standard fixtures and basic electrical knowledge.',
    'Moderate': 'A manageable lighting project with proper planning and fixture selection.',
    'High': 'This room calls for professional lighting design for comfort and function.',
}

# hours to dry, days to cure, hours before recoat at 70F, 50% humidity and 1 mil
PAINT_TYPES = {
    'latex': ('Latex', 1, 30, 4),
    'oil': ('Oil', 8, 7, 24),
    'primer': ('Primer', 1, 7, 2),
    'enamel': ('Enamel', 2, 14, 6),
    'epoxy': ('Epoxy', 4, 7, 8),
}
DRYING_SPEED = Scale([2, 6], ['Fast Drying', 'Standard Drying', 'Slow Drying'], closed='right')
CURING_SPEED = Scale([7, 14], ['Quick Cure', 'Standard Cure', 'Extended Cure'], closed='right')

LUMBER_PIECE_FEET = 8
FRAMING_SCOPE = Scale([30, 60], ['Small wall', 'Medium wall', 'Large wall system'])

# water supply fixture units
FIXTURE_UNITS = {
    'kitchen_sinks': 2,
    'bathroom_sinks': 1,
    'dishwashers': 2,
    'washing_machines': 4,
    'toilets': 3,
    'showers': 2,
    'bathtubs': 4,
    'hose_bibbs': 5,
}

FULLNESS_LEVELS = Scale([1.5, 2, 2.5], ['Minimal Fullness', 'Basic Fullness', 'Standard Fullness',
                                         'Luxury Fullness'])


def coverage_level(ratio):
    if ratio > 2.5:
        return 'Excellent Coverage'
    if ratio >= 2:
        return 'Good Coverage'
    if ratio >= 1.5:
        return 'Adequate Coverage'
    return 'Minimal Coverage'


def project_size(value, medium, large):
    """Small below ``medium``, Large above ``large``, Medium otherwise."""
    if value > large:
        return 'Large Project'
    if value >= medium:
        return 'Medium Project'
    return 'Small Project'


def decking_materials(deck_length, deck_width, board_width, joist_spacing=16, unit='feet'):
    """Deck sides in feet with boards and joists in inches, or metres with cm."""
    if unit == 'meters':
        deck_length *= FEET_PER_METER
        deck_width *= FEET_PER_METER
        board_width /= CM_PER_INCH
        joist_spacing /= CM_PER_INCH

    rows = math.ceil(deck_width * 12 / (board_width + BOARD_GAP))
    boards = math.ceil(rows * DECK_WASTE)
    size = project_size(boards, 50, 100)

    recommendations = [
        'Use corrosion-resistant fasteners rated for your decking',
        'Leave a 1/8 inch gap between boards for drainage and expansion',
    ]
    if joist_spacing > 16:
        recommendations.append('Consider reducing joist spacing to 16 inches for a stiffer deck')
    if boards > 75:
        recommendations.append('Consider professional installation for a deck this size')

    return {
        'boards_needed': boards,
        'board_rows': rows,
        'deck_area': deck_length * deck_width,
        'linear_feet': rows * deck_length,
        'project_size': size,
        'complexity': JOIST_COMPLEXITY.classify(joist_spacing),
        'opinion': DECK_OPINIONS[size],
        'recommendations': recommendations,
    }


def door_cabinet_hardware(doors, drawers, pulls_per_door=1, pulls_per_drawer=1, pack_size=10):
    pieces = (doors or 0) * pulls_per_door + (drawers or 0) * pulls_per_drawer
    return {
        'total_pieces': pieces,
        'packs_needed': math.ceil(pieces / pack_size),
        'interpretation': HARDWARE_SCOPE.classify(pieces),
        'recommendations': [
            'Buy one extra pack to cover defects and future replacements',
            'Check screw length: about 1 inch for doors and 1-1/4 inch for drawer fronts',
            'Use a drilling jig so every pull lines up',
        ],
    }


def garden_soil_mulch(length, width, depth, unit='feet'):
    """Bed in feet with depth in inches, or metres with depth in cm."""
    if unit == 'feet':
        volume = length * width * depth / 12
        bags = math.ceil(volume / SOIL_BAG_SIZE['feet'])
        depth_inches = depth
    else:
        volume = length * width * depth / 100
        bags = math.ceil(volume * 1000 / SOIL_BAG_SIZE['meters'])
        depth_inches = depth / CM_PER_INCH
    size = project_size(volume, 10, 50)

    if depth_inches > 6:
        level = 'Deep Application'
    elif depth_inches >= 3:
        level = 'Standard Application'
    else:
        level = 'Light Application'

    recommendations = [
        'Buy about 10% extra to allow for settling',
        'Keep mulch a few inches away from stems and trunks',
    ]
    if depth_inches > 6:
        recommendations.append('Apply in layers and water each one in')
        recommendations.append('Expect deep beds to settle over the first few weeks')
    if volume > 20:
        recommendations.append('Rent a wheelbarrow or compact loader to move material')
        recommendations.append('Schedule bulk deliveries close to where you will spread it')

    if volume > 50 or depth_inches > 8:
        opinion = 'A substantial project. Bulk delivery and extra hands will save time.'
    else:
        opinion = SOIL_OPINIONS[size]

    return {
        'volume': volume,
        'volume_unit': 'cu ft' if unit == 'feet' else 'cu m',
        'bags_needed': bags,
        'project_size': size,
        'material_level': level,
        'opinion': opinion,
        'recommendations': recommendations,
    }


def lighting_brightness(lumens_per_sq_ft):
    if lumens_per_sq_ft >= 50:
        return 'High Brightness'
    if lumens_per_sq_ft >= 30:
        return 'Medium Brightness'
    return 'Low Brightness'


def fixture_efficiency(lumens_per_fixture):
    if lumens_per_fixture >= 1000:
        return 'High Efficiency'
    if lumens_per_fixture >= 600:
        return 'Standard Efficiency'
    return 'Low Efficiency'


def lighting_layout(length, width, lumens_per_fixture, room_type='living_room', unit='feet'):
    room_name, target = ROOM_TYPES[room_type]
    area = length * width
    if unit == 'meters':
        area *= SQ_FT_PER_SQ_M
    lumens = area * target
    fixtures = math.ceil(lumens / lumens_per_fixture)
    demand = LIGHTING_DEMAND.classify(fixtures)

    recommendations = [
        f"Install {fixtures} fixtures spread evenly across the room",
        'Layer ambient, task and accent lighting',
        'Use dimmers for flexibility and energy savings',
    ]
    if target >= 50:
        recommendations.append('Add task lighting over work areas')
        recommendations.append('Choose LED fixtures for energy efficiency')
    if fixtures > 6:
        recommendations.append('Split fixtures across multiple circuits or switches')

    considerations = [
        'Natural light changes how much artificial light a room needs',
        'Careful placement prevents shadows on work surfaces',
    ]
    if lumens_per_fixture < 600:
        considerations.append('Low-output fixtures mean more fixtures for the same brightness')

    if fixtures > 8 or target >= 50:
        opinion = LIGHTING_OPINIONS['High']
    else:
        opinion = LIGHTING_OPINIONS[demand]

    return {
        'fixtures_needed': fixtures,
        'total_lumens': lumens,
        'square_feet': area,
        'interpretation': f"{demand} lighting requirement for a {room_name.lower()} with {fixtures} fixtures.",
        'lighting_level': lighting_brightness(target),
        'efficiency': fixture_efficiency(lumens_per_fixture),
        'opinion': opinion,
        'recommendations': recommendations,
        'considerations': considerations,
    }


def drying_factor(ideal, actual):
    """Ideal over actual, kept within half to double speed."""
    if actual <= 0:
        return 2.0
    return max(0.5, min(2.0, ideal / actual))


def paint_drying_time(paint_type, temperature=70, humidity=50, thickness=1.0, coats=1):
    """Temperature in Fahrenheit, relative humidity in percent and film thickness in mils."""
    name, dry_hours, cure_days, recoat_hours = PAINT_TYPES[paint_type]
    conditions = drying_factor(70, temperature) * drying_factor(50, humidity)
    dry = dry_hours * conditions * max(0.5, min(2.0, thickness))
    cure = cure_days * conditions
    recoat = recoat_hours * conditions

    recommendations = [
        f"Wait {dry:.1f} hours before light handling",
        f"Recoat after {recoat:.1f} hours for best adhesion",
        f"Allow {cure:.0f} days for a full cure before heavy use",
        'Keep the room ventilated while the paint dries',
    ]
    if temperature < 50:
        recommendations.append('Wait for warmer weather or use a low-temperature formula')
    if humidity > 70:
        recommendations.append('Run a dehumidifier or wait for drier air')
    if coats > 2:
        recommendations.append('Plan a longer timeline with full drying between coats')

    considerations = []
    if temperature < 50 or temperature > 85:
        considerations.append('Extreme temperatures can cause paint failure')
    if humidity > 80:
        considerations.append('High humidity can cause blistering and poor adhesion')

    if dry <= 2 and 60 <= temperature <= 80 and 40 <= humidity <= 60:
        opinion = 'Ideal conditions for fast, even drying.'
    elif dry <= 6 and 50 <= temperature <= 85 and 30 <= humidity <= 70:
        opinion = 'Good conditions for painting. Allow enough time for drying and curing.'
    else:
        opinion = 'Challenging conditions. Adjust temperature, humidity or timing for better results.'

    return {
        'dry_time': dry,
        'recoat_time': recoat,
        'cure_time': cure,
        'project_time': dry + recoat * (coats - 1),
        'paint': name,
        'drying_level': DRYING_SPEED.classify(dry),
        'curing_level': CURING_SPEED.classify(cure),
        'opinion': opinion,
        'recommendations': recommendations,
        'considerations': considerations,
    }


def wall_framing_lumber(wall_length, stud_spacing=16, wall_height=8, openings=0, plates=2):
    """Wall length and height in feet, stud spacing in inches on centre."""
    interior = max(0, math.floor(wall_length * 12 / stud_spacing) - 1)
    # two end studs, a king and jack pair each side of every opening, one for corners and blocking
    studs = 2 + interior + (openings or 0) * 4 + 1
    plate_feet = wall_length * plates
    plate_pieces = math.ceil(plate_feet / LUMBER_PIECE_FEET)

    recommendations = [
        'Buy 10% extra lumber to cover waste and culls',
        'Confirm the stud spacing your local code requires, often 16 inches on centre',
        'Use a treated bottom plate where it sits on a slab or concrete',
    ]
    if wall_height > LUMBER_PIECE_FEET:
        recommendations.append(f"Walls taller than {LUMBER_PIECE_FEET} ft need longer studs than standard 2x4s")

    return {
        'studs': studs,
        'plate_linear_feet': plate_feet,
        'plate_pieces': plate_pieces,
        'total_2x4s': studs + plate_pieces,
        'interpretation': FRAMING_SCOPE.classify(studs),
        'recommendations': recommendations,
    }


def peak_demand_gpm(wsfu):
    """Hunter's curve approximation from fixture units to peak flow."""
    if wsfu <= 30:
        return 0.966 * wsfu ** 0.635
    return 2.45 * wsfu ** 0.44


def water_usage_flow(kitchen_sinks=0, bathroom_sinks=0, dishwashers=0, washing_machines=0, toilets=0,
                     showers=0, bathtubs=0, hose_bibbs=0):
    counts = {
        'kitchen_sinks': kitchen_sinks,
        'bathroom_sinks': bathroom_sinks,
        'dishwashers': dishwashers,
        'washing_machines': washing_machines,
        'toilets': toilets,
        'showers': showers,
        'bathtubs': bathtubs,
        'hose_bibbs': hose_bibbs,
    }
    wsfu = sum(FIXTURE_UNITS[name] * (count or 0) for name, count in counts.items())
    if wsfu <= 0:
        raise ValueError('select at least one fixture')
    gpm = peak_demand_gpm(wsfu)

    if gpm > 15:
        system = 'Large System'
    elif gpm >= 8:
        system = 'Medium System'
    else:
        system = 'Small System'
    if wsfu > 20:
        demand = 'High Demand'
    elif wsfu >= 10:
        demand = 'Moderate Demand'
    else:
        demand = 'Low Demand'

    recommendations = [
        f"Size the main water line for {gpm:.2f} GPM peak demand",
        'Check incoming pressure and add a pressure-reducing valve if it is high',
    ]
    if gpm > 15:
        recommendations.append('Consider a 1 inch or larger main line')
        recommendations.append('Plan for a high-capacity water heater')
    if wsfu > 20:
        recommendations.append('Zone large systems and have them professionally designed')

    if gpm > 15 or wsfu > 20:
        opinion = 'This system needs professional design and installation to meet code.'
    elif gpm >= 8:
        opinion = 'A standard residential system that a plumber can install with normal planning.'
    else:
        opinion = 'A simple system suited to basic residential needs.'

    return {
        'fixture_units': wsfu,
        'demand_gpm': gpm,
        'system_size': system,
        'demand_level': demand,
        'opinion': opinion,
        'recommendations': recommendations,
    }


def window_curtain_coverage(window_width, window_height, curtain_width, curtain_length, fullness=2.0,
                            unit='feet'):
    window_area = window_width * window_height
    curtain_area = curtain_width * curtain_length * fullness
    ratio = curtain_area / window_area

    recommendations = [
        'Mount the rod 6 to 12 inches beyond each side of the frame',
        'Decide on floor-length or sill-length panels before buying',
    ]
    if ratio < 1.5:
        recommendations.append('Increase curtain width or add a second panel for better coverage')
    if fullness < 2:
        recommendations.append('A fullness of 2x or more drapes more elegantly')

    considerations = ['Heavier fabrics need more fullness to drape well']
    if window_width > 6:
        considerations.append('Wide windows may need multiple panels')
    if fullness > 3:
        considerations.append('Very high fullness may need heavy-duty hardware')

    if ratio > 2.5 and fullness >= 2.5:
        opinion = 'Excellent coverage with luxurious draping.'
    elif ratio >= 2 and fullness >= 2:
        opinion = 'Good coverage with elegant draping for most rooms.'
    else:
        opinion = 'This setup may need more width or fullness for the best look.'

    return {
        'window_area': window_area,
        'curtain_area': curtain_area,
        'coverage_ratio': ratio,
        'area_unit': 'sq ft' if unit == 'feet' else 'sq m',
        'coverage_level': coverage_level(ratio),
        'fullness_level': FULLNESS_LEVELS.classify(fullness),
        'opinion': opinion,
        'recommendations': recommendations,
        'considerations': considerations,
    }

from app.calculators.base import Calculator, Output
from app.calculators.home_improvement import forms, formulas

CATEGORY = 'home-improvement'

CALCULATORS = [
    Calculator(
        slug='paint-coverage',
        name='Paint Coverage Calculator',
        category=CATEGORY,
        description='How much paint you need for the walls and ceiling of a room.',
        form_class=forms.PaintCoverageForm,
        compute=formulas.paint_coverage,
        outputs=[
            Output('paint_needed', 'Paint needed', 'integer'),
            Output('unit_label', 'Unit', 'text'),
            Output('paintable_area', 'Paintable area'),
            Output('project_size', 'Project size', 'text'),
            Output('efficiency', 'Paint efficiency', 'text'),
            Output('opinion', 'Summary', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="""
`paint = (2 x (length + width) x height + length x width) x coats / coverage`

rounded up to whole gallons or litres. Windows and doors are not subtracted, which
leaves a small margin for touch-ups.
""",
        faqs=[
            ('How much does a gallon cover?', 'Most interior paints cover 350-400 sq ft per gallon on a smooth wall.'),
        ],
        keywords=['paint calculator', 'how much paint'],
        related=['wallpaper-rolls', 'tile-flooring'],
        icon='🎨',
    ),
    Calculator(
        slug='tile-flooring',
        name='Tile Flooring Calculator',
        category=CATEGORY,
        description='Number of tiles for a floor, with an allowance for cuts and breakage.',
        form_class=forms.TileFlooringForm,
        compute=formulas.tile_flooring,
        outputs=[
            Output('tiles_needed', 'Tiles needed (with waste)', 'integer'),
            Output('tiles_without_waste', 'Tiles without waste', 'integer'),
            Output('floor_area', 'Floor area'),
            Output('area_unit', 'Area unit', 'text'),
        ],
        guide="Allow 10% extra for straight lays and 15% or more for diagonal patterns.",
        keywords=['tile calculator', 'flooring', 'how many tiles'],
        related=['paint-coverage', 'staircase'],
        icon='🧱',
    ),
    Calculator(
        slug='staircase',
        name='Staircase Rise and Run Calculator',
        category=CATEGORY,
        description='Number of steps, riser height and tread depth for a comfortable staircase.',
        form_class=forms.StaircaseForm,
        compute=formulas.staircase,
        outputs=[
            Output('risers', 'Number of risers', 'integer'),
            Output('treads', 'Number of treads', 'integer'),
            Output('riser_height', 'Riser height'),
            Output('tread_depth', 'Tread depth'),
            Output('total_run', 'Total run'),
            Output('complexity', 'Complexity', 'text'),
            Output('safety', 'Safety check', 'text'),
        ],
        guide="""
The comfort rule is `2 x riser + tread = 24.5 in` (62 cm). Risers between 7 and
8 inches with treads of 9 to 11 inches feel natural to most people. Always check
your local building code.
""",
        keywords=['stair calculator', 'rise and run', 'stringer'],
        related=['tile-flooring'],
        icon='🪜',
    ),
    Calculator(
        slug='wallpaper-rolls',
        name='Wallpaper Roll Calculator',
        category=CATEGORY,
        description='Rolls of wallpaper needed, including pattern repeat and 10% wastage.',
        form_class=forms.WallpaperForm,
        compute=formulas.wallpaper_rolls,
        outputs=[
            Output('rolls_needed', 'Rolls needed', 'integer'),
            Output('drops', 'Drops (strips)', 'integer'),
            Output('drops_per_roll', 'Drops per roll', 'integer'),
            Output('drop_length', 'Length of each drop'),
        ],
        guide="Use the same unit for every measurement. Each drop is the wall height plus one pattern repeat.",
        keywords=['wallpaper calculator', 'rolls of wallpaper'],
        related=['paint-coverage'],
        icon='🖼️',
    ),
    Calculator(
        slug='hvac-sizing',
        name='HVAC Sizing Calculator',
        category=CATEGORY,
        description='Rough air-conditioner size in BTU and tons for a room or home.',
        form_class=forms.HvacSizingForm,
        compute=formulas.hvac_sizing,
        outputs=[
            Output('btu', 'Cooling load (BTU/hr)', 'integer'),
            Output('tons', 'Capacity (tons)'),
            Output('square_feet', 'Area (sq ft)'),
        ],
        guide="""
`BTU = square feet x climate factor` (hot 30, moderate 25, cool 20). One ton of
cooling is 12,000 BTU/hr. A Manual J load calculation is needed for a final sizing.
""",
        keywords=['hvac sizing', 'btu calculator', 'ac size'],
        related=['insulation-r-value'],
        icon='❄️',
    ),
    Calculator(
        slug='insulation-r-value',
        name='Insulation R-Value Calculator',
        category=CATEGORY,
        description='Thickness of insulation needed to reach a target R-value.',
        form_class=forms.InsulationForm,
        compute=formulas.insulation_r_value,
        outputs=[
            Output('thickness', 'Thickness needed (inches)'),
            Output('material', 'Material', 'text'),
            Output('r_per_inch', 'R-value per inch'),
            Output('comparison', 'All materials', 'table', columns=[
                ('material', 'Material', 'text'),
                ('r_per_inch', 'R per inch', 'number'),
                ('thickness', 'Thickness (in)', 'number'),
            ]),
        ],
        guide="`thickness = target R-value / R-value per inch`",
        keywords=['r-value', 'insulation thickness'],
        related=['hvac-sizing'],
        icon='🧊',
    ),
    Calculator(
        slug='decking-materials',
        name='Decking Materials Calculator',
        category=CATEGORY,
        description='Deck boards for a deck, with 5% waste and a check on joist spacing.',
        form_class=forms.DeckingMaterialsForm,
        compute=formulas.decking_materials,
        outputs=[
            Output('boards_needed', 'Boards needed', 'integer'),
            Output('board_rows', 'Rows of boards', 'integer'),
            Output('deck_area', 'Deck area (sq ft)'),
            Output('linear_feet', 'Linear feet of board'),
            Output('project_size', 'Project size', 'text'),
            Output('complexity', 'Framing complexity', 'text'),
            Output('opinion', 'Summary', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="""
`rows = deck width in inches / (board width + 1/8 in gap)`, rounded up, and
`boards = rows x 1.05` for waste. Each row is assumed to run the full deck length.
Joists at 12 in on centre are stiffer but more work than 16 in.
""",
        keywords=['decking calculator', 'deck boards', 'joist spacing'],
        related=['wall-framing-lumber', 'garden-soil-mulch'],
        icon='🪵',
    ),
    Calculator(
        slug='door-cabinet-hardware',
        name='Door & Cabinet Hardware Calculator',
        category=CATEGORY,
        description='Knobs and pulls for cabinet doors and drawers, and how many packs to buy.',
        form_class=forms.DoorCabinetHardwareForm,
        compute=formulas.door_cabinet_hardware,
        outputs=[
            Output('total_pieces', 'Pieces needed', 'integer'),
            Output('packs_needed', 'Packs to buy', 'integer'),
            Output('interpretation', 'Project scope', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="`pieces = doors x pulls per door + drawers x pulls per drawer`, and packs are rounded up.",
        keywords=['cabinet hardware', 'knobs and pulls'],
        related=['paint-coverage'],
        icon='🚪',
    ),
    Calculator(
        slug='garden-soil-mulch',
        name='Garden Soil & Mulch Calculator',
        category=CATEGORY,
        description='Volume of soil or mulch for a garden bed and the number of bags.',
        form_class=forms.GardenSoilMulchForm,
        compute=formulas.garden_soil_mulch,
        outputs=[
            Output('volume', 'Volume'),
            Output('volume_unit', 'Volume unit', 'text'),
            Output('bags_needed', 'Bags needed', 'integer'),
            Output('project_size', 'Project size', 'text'),
            Output('material_level', 'Application depth', 'text'),
            Output('opinion', 'Summary', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="""
`volume = length x width x depth`, with depth converted from inches to feet or from
cm to metres. Bags hold 2 cu ft, or 50 litres for metric beds. Mulch is usually
spread 2 to 4 inches deep.
""",
        keywords=['mulch calculator', 'soil calculator', 'garden bed'],
        related=['decking-materials'],
        icon='🌱',
    ),
    Calculator(
        slug='lighting-layout',
        name='Lighting Layout Calculator',
        category=CATEGORY,
        description='Number of light fixtures a room needs for its use.',
        form_class=forms.LightingLayoutForm,
        compute=formulas.lighting_layout,
        outputs=[
            Output('fixtures_needed', 'Fixtures needed', 'integer'),
            Output('total_lumens', 'Total lumens', 'integer'),
            Output('square_feet', 'Area (sq ft)'),
            Output('interpretation', 'Summary', 'text'),
            Output('lighting_level', 'Brightness', 'text'),
            Output('efficiency', 'Fixture efficiency', 'text'),
            Output('opinion', 'Opinion', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
            Output('considerations', 'Considerations', 'list'),
        ],
        guide="""
`fixtures = area in sq ft x lumens per sq ft / lumens per fixture`, rounded up.
Bedrooms need about 15 lumens per sq ft, living rooms 20, kitchens 40, offices 50
and bathrooms 75.
""",
        keywords=['lighting calculator', 'how many lights', 'lumens per square foot'],
        related=['paint-coverage', 'hvac-sizing'],
        icon='💡',
    ),
    Calculator(
        slug='paint-drying-time',
        name='Paint Drying & Curing Time Calculator',
        category=CATEGORY,
        description='Dry, recoat and cure times adjusted for temperature, humidity and coat thickness.',
        form_class=forms.PaintDryingTimeForm,
        compute=formulas.paint_drying_time,
        outputs=[
            Output('dry_time', 'Dry to touch (hours)'),
            Output('recoat_time', 'Recoat after (hours)'),
            Output('cure_time', 'Full cure (days)'),
            Output('project_time', 'All coats dry (hours)'),
            Output('drying_level', 'Drying speed', 'text'),
            Output('curing_level', 'Curing speed', 'text'),
            Output('opinion', 'Conditions', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
            Output('considerations', 'Watch out for', 'list'),
        ],
        guide="""
Base times assume 70°F, 50% humidity and a 1 mil coat. Each of
`70 / temperature` and `50 / humidity` scales the times, held between 0.5x and 2x.
Coat thickness scales the dry time only.
""",
        keywords=['paint drying time', 'recoat time', 'paint cure time'],
        related=['paint-coverage'],
        icon='⏳',
    ),
    Calculator(
        slug='wall-framing-lumber',
        name='Wall Framing Lumber Calculator',
        category=CATEGORY,
        description='Studs, plates and total 2x4s for a straight stud wall.',
        form_class=forms.WallFramingLumberForm,
        compute=formulas.wall_framing_lumber,
        outputs=[
            Output('studs', 'Studs', 'integer'),
            Output('plate_linear_feet', 'Plate length (ft)'),
            Output('plate_pieces', '8 ft plate pieces', 'integer'),
            Output('total_2x4s', 'Total 2x4s', 'integer'),
            Output('interpretation', 'Wall size', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="""
Studs are the two end studs, one per spacing interval along the wall, a king and a
jack stud on each side of every opening, plus one for corners and blocking.
""",
        keywords=['stud calculator', 'framing lumber', 'how many studs'],
        related=['decking-materials', 'insulation-r-value'],
        icon='🔨',
    ),
    Calculator(
        slug='water-usage-flow',
        name='Water Usage & Plumbing Flow Calculator',
        category=CATEGORY,
        description='Peak household water demand from the fixtures in the home.',
        form_class=forms.WaterUsageFlowForm,
        compute=formulas.water_usage_flow,
        outputs=[
            Output('demand_gpm', 'Peak demand (GPM)'),
            Output('fixture_units', 'Water supply fixture units', 'integer'),
            Output('system_size', 'System size', 'text'),
            Output('demand_level', 'Demand level', 'text'),
            Output('opinion', 'Summary', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="""
Each fixture carries water supply fixture units (WSFU). Hunter's curve turns the
total into peak flow: `0.966 x WSFU^0.635` up to 30 WSFU, `2.45 x WSFU^0.44` above.
""",
        faqs=[
            ('What is a fixture unit?', 'A rough measure of the load a fixture puts on the supply, '
                                        'from 1 for a bathroom sink to 5 for a hose tap.'),
        ],
        keywords=['plumbing flow', 'wsfu calculator', 'water demand'],
        related=['hvac-sizing'],
        icon='🚰',
    ),
    Calculator(
        slug='window-curtain-coverage',
        name='Window & Curtain Coverage Calculator',
        category=CATEGORY,
        description='How well a set of curtains covers a window, and how full they will look.',
        form_class=forms.WindowCurtainForm,
        compute=formulas.window_curtain_coverage,
        outputs=[
            Output('coverage_ratio', 'Coverage ratio'),
            Output('window_area', 'Window area'),
            Output('curtain_area', 'Curtain fabric area'),
            Output('area_unit', 'Area unit', 'text'),
            Output('coverage_level', 'Coverage', 'text'),
            Output('fullness_level', 'Fullness', 'text'),
            Output('opinion', 'Summary', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
            Output('considerations', 'Considerations', 'list'),
        ],
        guide="`coverage = curtain width x length x fullness / (window width x height)`",
        keywords=['curtain calculator', 'curtain fullness', 'window coverage'],
        related=['wallpaper-rolls', 'paint-coverage'],
        icon='🪟',
    ),
]

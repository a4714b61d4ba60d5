from app.calculators.base import Calculator, Output
from app.calculators.everyday import forms, formulas

CATEGORY = 'everyday'

CALCULATORS = [
    Calculator(
        slug='date-difference',
        name='Date Difference Calculator',
        category=CATEGORY,
        description='Days, weeks, months and years between two dates.',
        form_class=forms.DateDifferenceForm,
        compute=formulas.date_difference,
        outputs=[
            Output('summary', 'Difference', 'text'),
            Output('total_days', 'Total days', 'integer'),
            Output('weeks', 'Whole weeks', 'integer'),
            Output('extra_days', 'Plus days', 'integer'),
        ],
        guide="The end date is not counted. Dates can be entered in either order.",
        keywords=['days between dates', 'date calculator', 'age in days'],
        related=['battery-life'],
        icon='📅',
    ),
    Calculator(
        slug='battery-life',
        name='Battery Life Calculator',
        category=CATEGORY,
        description='How long a battery will last from its capacity and the device\'s draw.',
        form_class=forms.BatteryLifeForm,
        compute=formulas.battery_life,
        outputs=[
            Output('duration', 'Battery life', 'text'),
            Output('hours', 'Hours'),
            Output('days', 'Days'),
        ],
        guide="""
- From current: `hours = capacity (mAh) / draw (mA)`
- From power: `hours = capacity (mAh) / 1000 x voltage / power (W)`

Real batteries deliver less than their rating, especially in the cold, so allow 10-20% less.
""",
        keywords=['battery life', 'mah calculator'],
        related=['date-difference'],
        icon='🔋',
    ),
    Calculator(
        slug='travel-carbon-footprint',
        name='Travel Carbon Footprint Calculator',
        category=CATEGORY,
        description='CO2 emissions for a trip by car, train or plane.',
        form_class=forms.TravelCarbonForm,
        compute=formulas.travel_carbon,
        outputs=[
            Output('total_kg', 'Total CO2e (kg)'),
            Output('per_passenger_kg', 'Per passenger (kg)'),
            Output('tips', 'Ways to cut it', 'list'),
        ],
        guide="""
Flights are counted at 0.158 kg and trains at 0.041 kg of CO2e per passenger-km.
A car burns about 2.31 kg of CO2 per litre of petrol, shared between everyone in it.
""",
        keywords=['carbon footprint', 'co2 travel', 'flight emissions'],
        related=['travel-budget', 'jet-lag-planner'],
        icon='🌍',
    ),
    Calculator(
        slug='genetic-trait',
        name='Genetic Trait Probability Calculator',
        category=CATEGORY,
        description='Punnett square odds for a single-gene trait from two parents.',
        form_class=forms.GeneticTraitForm,
        compute=formulas.genetic_trait,
        outputs=[
            Output('dominant_phenotype', 'Shows dominant trait', 'percent'),
            Output('recessive_phenotype', 'Shows recessive trait', 'percent'),
            Output('homozygous_dominant', 'AA', 'percent'),
            Output('heterozygous', 'Aa', 'percent'),
            Output('homozygous_recessive', 'aa', 'percent'),
            Output('punnett_square', 'Punnett square', 'table', columns=[
                ('allele', 'Parent 1 \\ Parent 2', 'text'),
                ('first', 'First allele', 'text'),
                ('second', 'Second allele', 'text'),
            ]),
        ],
        guide="""
Each parent passes on one of their two alleles with equal chance. A single
dominant allele (A) is enough to show the dominant trait, while the recessive trait
needs two copies (aa).
""",
        keywords=['punnett square', 'genetics', 'inheritance'],
        related=['pedigree-analysis', 'date-difference'],
        icon='🧬',
    ),
    Calculator(
        slug='travel-budget',
        name='Travel Budget Estimator',
        category=CATEGORY,
        description='Total trip cost and the cost per person per day.',
        form_class=forms.TravelBudgetForm,
        compute=formulas.travel_budget,
        outputs=[
            Output('total', 'Total trip cost', 'currency'),
            Output('per_person', 'Per person', 'currency'),
            Output('per_day', 'Per day', 'currency'),
            Output('per_person_per_day', 'Per person per day', 'currency'),
            Output('breakdown', 'Breakdown', 'table', columns=[
                ('item', 'Item', 'text'),
                ('amount', 'Amount', 'currency'),
                ('share', 'Share', 'percent'),
            ]),
        ],
        guide="""
Flights, accommodation and activities are totals for the group. Food, and any
extra cost labelled 'per day', is multiplied by the number of days and travellers.
""",
        keywords=['travel budget', 'trip cost', 'vacation budget'],
        related=['jet-lag-planner', 'travel-carbon-footprint'],
        icon='🧳',
    ),
    Calculator(
        slug='jet-lag-planner',
        name='Time Zone & Jet Lag Planner',
        category=CATEGORY,
        description='Local arrival time, time zones crossed and a plan to beat jet lag.',
        form_class=forms.JetLagPlannerForm,
        compute=formulas.jet_lag_plan,
        outputs=[
            Output('arrival_local', 'Arrive (local time)', 'text'),
            Output('arrival_zone', 'Time zone', 'text'),
            Output('time_difference', 'Clock change (hours)', 'integer'),
            Output('direction', 'Direction', 'text'),
            Output('days_to_adjust', 'Days to adjust', 'integer'),
            Output('plan', 'Plan', 'list'),
        ],
        guide="""
The clock change is the destination's UTC offset at arrival minus the origin's at
departure, so daylight saving on either side is included. Most people adapt at one
to two time zones a day.
""",
        faqs=[
            ('Is east or west harder?', 'Eastbound is usually harder because it shortens your day.'),
            ('Short trips?', 'For trips under three days, consider staying on home time.'),
            ('Caffeine timing?', 'Use it after the local morning and avoid it within 8 to 10 hours of bedtime.'),
        ],
        keywords=['jet lag', 'time zone converter', 'arrival time'],
        related=['travel-budget', 'date-difference'],
        icon='✈️',
    ),
    Calculator(
        slug='pedigree-analysis',
        name='Pedigree Analysis Calculator',
        category=CATEGORY,
        description='Which single-gene inheritance modes fit a family tree of affected and unaffected relatives.',
        form_class=forms.PedigreeAnalysisForm,
        compute=formulas.pedigree_analysis,
        outputs=[
            Output('possible_modes', 'Possible modes of inheritance', 'list'),
            Output('reasoning', 'Reasoning', 'list'),
            Output('member_count', 'Family members', 'integer'),
            Output('affected_count', 'Affected', 'integer'),
            Output('family', 'Family', 'table', columns=[
                ('id', 'Id', 'text'),
                ('sex', 'Sex', 'text'),
                ('phenotype', 'Phenotype', 'text'),
                ('parents', 'Parents', 'text'),
            ]),
        ],
        guide="""
- Two unaffected parents with an affected child rule out dominant inheritance.
- Two affected parents with an unaffected child rule out recessive inheritance.
- An affected father passes an X-linked dominant trait to every daughter.
- An affected mother passes an X-linked recessive trait to every son.
""",
        keywords=['pedigree chart', 'inheritance pattern', 'family tree genetics'],
        related=['genetic-trait'],
        icon='🌳',
    ),
]

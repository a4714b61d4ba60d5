from app.calculators.base import Calculator, Output
from app.calculators.cricket import formulas
from app.calculators.cricket.forms import (
    BattingAverageForm,
    BowlingAverageForm,
    EconomyRateForm,
    FantasyPointsForm,
    NetRunRateForm,
    PerformanceIndexForm,
    RequiredRunRateForm,
    StrikeRateForm,
    TeamRunRateForm,
)

CATEGORY = 'cricket'

GRADE_OUTPUTS = [
    Output('level_label', 'Performance', 'text'),
    Output('recommendation', 'Recommendation', 'text'),
]

CALCULATORS = [
    Calculator(
        slug='batting-average',
        name='Batting Average Calculator',
        category=CATEGORY,
        description='Work out a batter\'s average from runs scored and dismissals.',
        form_class=BattingAverageForm,
        compute=formulas.batting_average,
        outputs=[Output('average', 'Batting average')] + GRADE_OUTPUTS,
        guide="""
The batting average is the number of runs a batter scores per dismissal:

`average = runs / dismissals`

Not-out innings add runs without adding a dismissal, so a batter who is
never dismissed has an average equal to their runs. An average above 45
is very good in any format, and 60 or more puts a player among the all-time greats.
""",
        faqs=[
            ('Why use dismissals rather than innings?',
             'Not-out innings are not failures, so only completed innings count in the denominator.'),
            ('What is a good batting average?',
             'Around 35 is good, 45 is very good, and anything above 60 is exceptional.'),
        ],
        keywords=['batting average', 'cricket average', 'runs per dismissal'],
        related=['strike-rate', 'player-performance-index'],
        icon='🏏',
    ),
    Calculator(
        slug='bowling-average',
        name='Bowling Average Calculator',
        category=CATEGORY,
        description='Runs conceded per wicket taken, graded for quality.',
        form_class=BowlingAverageForm,
        compute=formulas.bowling_average,
        outputs=[Output('average', 'Bowling average')] + GRADE_OUTPUTS,
        guide="""
A bowling average is the number of runs a bowler concedes for each wicket:

`average = runs conceded / wickets`

Lower is better. Under 20 is elite, and anything over 40 means wickets are expensive.
The average is undefined until the first wicket falls.
""",
        faqs=[
            ('Is a lower bowling average better?', 'Yes. It means fewer runs conceded for every wicket taken.'),
        ],
        keywords=['bowling average', 'runs per wicket'],
        related=['bowling-economy-rate', 'fantasy-points'],
        icon='🎯',
    ),
    Calculator(
        slug='bowling-economy-rate',
        name='Bowling Economy Rate Calculator',
        category=CATEGORY,
        description='Runs conceded per over, judged against Test, ODI and T20 norms.',
        form_class=EconomyRateForm,
        compute=formulas.economy_rate,
        outputs=[Output('economy', 'Economy rate (runs/over)')] + GRADE_OUTPUTS,
        guide="""
`economy = runs conceded / overs bowled`

What counts as economical depends heavily on the format. Six an over is
excellent in T20 cricket, par in an ODI, and expensive in a Test match.
""",
        faqs=[
            ('How do I enter partial overs?',
             'Enter overs as a decimal fraction of an over, for example 3.5 for three and a half overs.'),
        ],
        keywords=['economy rate', 'runs per over'],
        related=['bowling-average', 'net-run-rate'],
        icon='📉',
    ),
    Calculator(
        slug='strike-rate',
        name='Strike Rate Calculator',
        category=CATEGORY,
        description='Runs scored per 100 balls faced, graded for the match format.',
        form_class=StrikeRateForm,
        compute=formulas.strike_rate,
        outputs=[Output('strike_rate', 'Strike rate')] + GRADE_OUTPUTS,
        guide="""
`strike rate = runs / balls faced x 100`

A strike rate of 150 is excellent in T20s, while 80 is already very quick in
Test cricket. The grade is calibrated for the selected format.
""",
        faqs=[
            ('What is a good T20 strike rate?', 'Above 130 is very good and 150 or more is excellent.'),
        ],
        keywords=['strike rate', 'batting strike rate'],
        related=['batting-average', 'team-run-rate'],
        icon='⚡',
    ),
    Calculator(
        slug='fantasy-points',
        name='Fantasy Cricket Points Calculator',
        category=CATEGORY,
        description='Score a player\'s match in fantasy cricket with batting, bowling and fielding bonuses.',
        form_class=FantasyPointsForm,
        compute=formulas.fantasy_points,
        outputs=[
            Output('total_points', 'Total points', 'integer'),
            Output('batting_points', 'Batting points', 'integer'),
            Output('bowling_points', 'Bowling points', 'integer'),
            Output('fielding_points', 'Fielding points', 'integer'),
        ] + GRADE_OUTPUTS,
        guide="""
Points are awarded as follows:

- **Batting**: 1 per run, plus a strike-rate bonus (+2 at 100, +4 at 150, +6 at 200)
  and a milestone bonus (+4 for 30, +8 for 50, +16 for a hundred).
- **Bowling**: 25 per wicket, 4 per maiden, an economy bonus (+6 at 4 or less,
  +4 at 5 or less, +2 at 6 or less) and a haul bonus (+4 for 3, +8 for 4, +16 for 5 wickets).
- **Fielding**: 8 per catch, 12 per stumping, 6 per run-out.
""",
        faqs=[
            ('Do these rules match every fantasy platform?',
             'No. Platforms differ slightly, so treat the total as a consistent yardstick rather than an official score.'),
        ],
        keywords=['fantasy cricket', 'dream11 points', 'fantasy points'],
        related=['player-performance-index', 'strike-rate'],
        icon='🏆',
    ),
    Calculator(
        slug='net-run-rate',
        name='Net Run Rate Calculator',
        category=CATEGORY,
        description='A team\'s tournament net run rate from runs and overs for and against.',
        form_class=NetRunRateForm,
        compute=formulas.net_run_rate,
        outputs=[
            Output('net_run_rate', 'Net run rate'),
            Output('scoring_rate', 'Runs per over scored'),
            Output('conceding_rate', 'Runs per over conceded'),
        ] + GRADE_OUTPUTS,
        guide="""
`NRR = runs scored / overs faced - runs conceded / overs bowled`

A positive net run rate means a team scores faster than it concedes across
the tournament. It is the usual tiebreaker on a points table.
""",
        faqs=[
            ('What if a team is bowled out early?',
             'Tournament rules count the full quota of overs for a side that is bowled out. Enter that quota as overs faced.'),
        ],
        keywords=['net run rate', 'nrr'],
        related=['team-run-rate', 'required-run-rate'],
        icon='📊',
    ),
    Calculator(
        slug='player-performance-index',
        name='Player Performance Index Calculator',
        category=CATEGORY,
        description='A 0-100 all-round rating that blends batting, bowling and fielding.',
        form_class=PerformanceIndexForm,
        compute=formulas.performance_index,
        outputs=[
            Output('overall_index', 'Overall index'),
            Output('batting_index', 'Batting index'),
            Output('bowling_index', 'Bowling index'),
            Output('fielding_index', 'Fielding index'),
        ] + GRADE_OUTPUTS,
        guide="""
The overall index weights batting and bowling at 40% each and fielding at 20%.
Each component is scaled to 0-100, so a pure batter or pure bowler can still
reach a good overall rating.
""",
        keywords=['player rating', 'all-rounder index'],
        related=['fantasy-points', 'batting-average'],
        icon='⭐',
    ),
    Calculator(
        slug='required-run-rate',
        name='Required Run Rate Calculator',
        category=CATEGORY,
        description='The runs per over a chasing side needs, compared with its current rate.',
        form_class=RequiredRunRateForm,
        compute=formulas.required_run_rate,
        outputs=[
            Output('required_runs', 'Runs required', 'integer'),
            Output('required_run_rate', 'Required run rate'),
            Output('current_run_rate', 'Current run rate'),
            Output('required_strike_rate', 'Required strike rate'),
            Output('wickets_in_hand', 'Wickets in hand', 'integer'),
        ] + GRADE_OUTPUTS,
        guide="""
`required rate = (target - runs scored) / overs remaining`

The grade compares the asking rate with the rate achieved so far. A chase
that needs two runs an over less than the current rate is comfortably on track.
""",
        keywords=['required run rate', 'rrr', 'run chase'],
        related=['team-run-rate', 'net-run-rate'],
        icon='⏱️',
    ),
    Calculator(
        slug='team-run-rate',
        name='Team Run Rate Calculator',
        category=CATEGORY,
        description='Current run rate, strike rate and projected total for a batting side.',
        form_class=TeamRunRateForm,
        compute=formulas.team_run_rate,
        outputs=[
            Output('run_rate', 'Run rate'),
            Output('strike_rate', 'Team strike rate'),
            Output('overs_remaining', 'Overs remaining'),
            Output('projected_total', 'Projected total', 'integer'),
            Output('wickets_in_hand', 'Wickets in hand', 'integer'),
        ] + GRADE_OUTPUTS,
        guide="""
`run rate = runs / overs`

The projected total assumes the current rate holds for the rest of the
innings: 20 overs in T20, 50 in ODIs and a notional 90-over day in Tests.
""",
        keywords=['run rate', 'projected score'],
        related=['required-run-rate', 'strike-rate'],
        icon='📈',
    ),
]

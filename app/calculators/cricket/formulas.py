"""
Cricket statistics: averages, rates and fantasy scoring.

Every calculator grades its headline number on the same six-step ladder,
from ``poor`` up to ``excellent``. Thresholds depend on the match format
where the game itself changes (a good T20 economy is a poor Test one).
"""

from app.calculators.base import Scale, clamp

FORMATS = [('odi', 'ODI'), ('t20', 'T20'), ('test', 'Test')]

# Ascending, worst first, so the lists line up with ascending cutoffs
LADDER = ['poor', 'below-average', 'average', 'good', 'very-good', 'excellent']

LADDER_LABELS = {
    'excellent': 'Excellent',
    'very-good': 'Very Good',
    'good': 'Good',
    'average': 'Average',
    'below-average': 'Below Average',
    'poor': 'Poor',
}

BATTING_AVERAGE_SCALE = Scale([15, 25, 35, 45, 60], LADDER)

# Lower is better for bowlers; nothing below 'below-average' once a wicket falls
BOWLING_AVERAGE_SCALE = Scale(
    [20, 25, 30, 40],
    ['excellent', 'very-good', 'good', 'average', 'below-average'],
)

ECONOMY_SCALES = {
    't20': Scale([6, 7, 8, 9, 10], list(reversed(LADDER)), closed='right'),
    'odi': Scale([4, 4.5, 5, 5.5, 6], list(reversed(LADDER)), closed='right'),
    'test': Scale([2.5, 3, 3.5, 4, 4.5], list(reversed(LADDER)), closed='right'),
}

STRIKE_RATE_SCALES = {
    't20': Scale([80, 100, 110, 130, 150], LADDER),
    'odi': Scale([55, 70, 85, 100, 120], LADDER),
    'test': Scale([30, 40, 50, 65, 80], LADDER),
}

NET_RUN_RATE_SCALES = {
    't20': Scale([-0.5, 0, 0.5, 1.0, 1.5], LADDER),
    'odi': Scale([-0.5, 0, 0.2, 0.5, 1.0], LADDER),
}
NET_RUN_RATE_SCALES['test'] = NET_RUN_RATE_SCALES['odi']

TEAM_RUN_RATE_SCALES = {
    't20': Scale([5, 6, 7, 8, 9], LADDER),
    'odi': Scale([2.5, 3.5, 4.5, 5.5, 6.5], LADDER),
    'test': Scale([2, 2.5, 3, 3.5, 4], LADDER),
}

FANTASY_SCALE = Scale([10, 25, 50, 75, 100], LADDER)
PERFORMANCE_INDEX_SCALE = Scale([20, 35, 50, 65, 80], LADDER)

# Required minus current run rate: the smaller the gap, the easier the chase
CHASE_SCALE = Scale([-2, -1, 0, 1, 2], list(reversed(LADDER)), closed='right')

OVERS_LIMIT = {'test': 90, 'odi': 50, 't20': 20}

ADVICE = {
    'batting': {
        'excellent': 'World-class consistency. Keep building long innings.',
        'very-good': 'A dependable run scorer. Convert more starts into hundreds.',
        'good': 'Solid returns. Work on shot selection to push the average higher.',
        'average': 'Room to improve. Focus on occupying the crease for longer.',
        'below-average': 'Dismissed too cheaply. Tighten defence against quality bowling.',
        'poor': 'Struggling for runs. Go back to basics in the nets.',
    },
    'bowling': {
        'excellent': 'Elite wicket-taking at a low cost.',
        'very-good': 'Very effective. Keep hitting consistent lines and lengths.',
        'good': 'A reliable option. Add variations to take wickets sooner.',
        'average': 'Serviceable. Work on building pressure with dot balls.',
        'below-average': 'Wickets are expensive. Review field settings and plans.',
        'poor': 'No wickets yet. Focus on control and patience.',
    },
    'economy': {
        'excellent': 'Outstanding control. Batters cannot get away.',
        'very-good': 'Very tight. Keep squeezing the scoring.',
        'good': 'Tidy spell for the format.',
        'average': 'About par. Fewer boundary balls would help.',
        'below-average': 'Leaking runs. Tighten up the lengths.',
        'poor': 'Expensive. Rethink the plan for this format.',
    },
    'strike_rate': {
        'excellent': 'Explosive scoring for the format.',
        'very-good': 'Scoring quickly and keeping the board moving.',
        'good': 'A healthy tempo for the format.',
        'average': 'Steady. Look for more singles and gaps.',
        'below-average': 'Scoring slowly. Rotate the strike more.',
        'poor': 'Very slow for the format. Build intent and running between wickets.',
    },
    'fantasy': {
        'excellent': 'Match-winning fantasy haul.',
        'very-good': 'A big contribution to any fantasy side.',
        'good': 'Useful points. A solid pick.',
        'average': 'Modest return from this match.',
        'below-average': 'Light on points. Consider captaincy picks carefully.',
        'poor': 'Minimal impact in this match.',
    },
    'net_run_rate': {
        'excellent': 'Dominant margins. The table position is well protected.',
        'very-good': 'Strong margins of victory.',
        'good': 'Positive and healthy.',
        'average': 'Roughly break-even. Results will decide qualification.',
        'below-average': 'Slightly negative. Big wins needed to recover.',
        'poor': 'Heavy defeats are hurting qualification chances.',
    },
    'performance_index': {
        'excellent': 'Complete all-round impact.',
        'very-good': 'Strong contributions across disciplines.',
        'good': 'Good overall value to the side.',
        'average': 'A steady contributor.',
        'below-average': 'Limited impact. Strengthen the main discipline.',
        'poor': 'Little contribution in this sample.',
    },
    'chase': {
        'excellent': 'Comfortably ahead of the rate. Keep wickets in hand.',
        'very-good': 'Ahead of the asking rate.',
        'good': 'On track. Keep rotating the strike.',
        'average': 'Slightly behind. A couple of big overs will do it.',
        'below-average': 'Falling behind. Boundaries are needed soon.',
        'poor': 'The asking rate is getting away. Take calculated risks.',
    },
    'team_run_rate': {
        'excellent': 'Scoring at an exceptional rate.',
        'very-good': 'Well above par for the format.',
        'good': 'A good scoring rate.',
        'average': 'Par scoring.',
        'below-average': 'Below par. Accelerate when set.',
        'poor': 'Well below par for the format.',
    },
}


def grade(kind, level):
    return {
        'level': level,
        'level_label': LADDER_LABELS[level],
        'recommendation': ADVICE[kind][level],
    }


def batting_average(runs, dismissals):
    if dismissals == 0:
        result = {'average': float(runs), 'not_out': True}
        result.update(grade('batting', 'excellent'))
        result['recommendation'] = 'Undefeated innings! The average equals runs scored until a dismissal.'
        return result
    average = runs / dismissals
    result = {'average': average, 'not_out': False}
    result.update(grade('batting', BATTING_AVERAGE_SCALE.classify(average)))
    return result


def bowling_average(runs_conceded, wickets):
    if wickets == 0:
        result = {'average': None}
        result.update(grade('bowling', 'poor'))
        return result
    average = runs_conceded / wickets
    result = {'average': average}
    result.update(grade('bowling', BOWLING_AVERAGE_SCALE.classify(average)))
    return result


def economy_rate(runs_conceded, overs, match_format='odi'):
    if overs <= 0:
        raise ValueError("overs must be greater than zero")
    economy = runs_conceded / overs
    result = {'economy': economy, 'match_format': match_format}
    result.update(grade('economy', ECONOMY_SCALES[match_format].classify(economy)))
    return result


def strike_rate(runs, balls, match_format='odi'):
    if balls == 0:
        result = {'strike_rate': 0.0, 'match_format': match_format}
        result.update(grade('strike_rate', 'poor'))
        return result
    rate = runs / balls * 100
    result = {'strike_rate': rate, 'match_format': match_format}
    result.update(grade('strike_rate', STRIKE_RATE_SCALES[match_format].classify(rate)))
    return result


def _strike_rate_bonus(rate):
    if rate >= 200:
        return 6
    if rate >= 150:
        return 4
    if rate >= 100:
        return 2
    return 0


def _milestone_bonus(runs):
    if runs >= 100:
        return 16
    if runs >= 50:
        return 8
    if runs >= 30:
        return 4
    return 0


def _economy_bonus(economy):
    if economy <= 4:
        return 6
    if economy <= 5:
        return 4
    if economy <= 6:
        return 2
    return 0


def _haul_bonus(wickets):
    if wickets >= 5:
        return 16
    if wickets == 4:
        return 8
    if wickets == 3:
        return 4
    return 0


def fantasy_points(runs=0, balls=0, wickets=0, overs=0.0, runs_conceded=0,
                   maidens=0, catches=0, stumpings=0, run_outs=0, bonus_points=0,
                   match_format='odi'):
    if balls == 0 and overs == 0:
        result = {
            'batting_points': 0, 'bowling_points': 0, 'fielding_points': 0,
            'total_points': 0, 'strike_rate': 0.0, 'economy': 0.0,
            'match_format': match_format,
        }
        result.update(grade('fantasy', 'poor'))
        return result

    batting = 0
    rate = 0.0
    if balls > 0:
        rate = runs / balls * 100
        batting = runs + _strike_rate_bonus(rate) + _milestone_bonus(runs)

    bowling = 0
    economy = 0.0
    if overs > 0:
        economy = runs_conceded / overs
        bowling = wickets * 25 + _economy_bonus(economy) + _haul_bonus(wickets) + maidens * 4

    fielding = catches * 8 + stumpings * 12 + run_outs * 6
    total = batting + bowling + fielding + bonus_points

    result = {
        'batting_points': batting,
        'bowling_points': bowling,
        'fielding_points': fielding,
        'total_points': total,
        'strike_rate': rate,
        'economy': economy,
        'match_format': match_format,
    }
    result.update(grade('fantasy', FANTASY_SCALE.classify(total)))
    return result


def net_run_rate(runs_scored, overs_faced, runs_conceded, overs_bowled, match_format='odi'):
    if overs_faced <= 0 or overs_bowled <= 0:
        raise ValueError("overs faced and overs bowled must be greater than zero")
    scoring_rate = runs_scored / overs_faced
    conceding_rate = runs_conceded / overs_bowled
    nrr = scoring_rate - conceding_rate
    result = {
        'net_run_rate': nrr,
        'scoring_rate': scoring_rate,
        'conceding_rate': conceding_rate,
        'match_format': match_format,
    }
    result.update(grade('net_run_rate', NET_RUN_RATE_SCALES[match_format].classify(nrr)))
    return result


def performance_index(runs=0, balls=0, wickets=0, overs=0.0, runs_conceded=0,
                      catches=0, stumpings=0, run_outs=0):
    if balls == 0 and overs == 0:
        result = {
            'batting_index': 0.0, 'bowling_index': 0.0,
            'fielding_index': 0.0, 'overall_index': 0.0,
        }
        result.update(grade('performance_index', 'poor'))
        return result

    batting_index = 0.0
    if balls > 0:
        batting_avg = runs / max(1, balls / 6)
        rate = runs / balls * 100
        batting_index = min(100, batting_avg / 50 * 100) * 0.6 + min(100, rate / 150 * 100) * 0.4

    bowling_index = 0.0
    if overs > 0:
        bowling_avg = runs_conceded / wickets if wickets > 0 else runs_conceded
        economy = runs_conceded / overs
        bowling_index = (
            clamp(100 - bowling_avg / 50 * 100) * 0.4
            + clamp(100 - economy / 10 * 100) * 0.3
            + min(100, wickets / 5 * 100) * 0.3
        )

    fielding_index = min(100, (catches + stumpings + run_outs) / 10 * 100)
    overall = batting_index * 0.4 + bowling_index * 0.4 + fielding_index * 0.2

    result = {
        'batting_index': batting_index,
        'bowling_index': bowling_index,
        'fielding_index': fielding_index,
        'overall_index': overall,
    }
    result.update(grade('performance_index', PERFORMANCE_INDEX_SCALE.classify(overall)))
    return result


def required_run_rate(target, runs_scored, overs_played, overs_remaining,
                      wickets_lost=0, balls_remaining=None):
    if overs_remaining <= 0:
        raise ValueError("overs remaining must be greater than zero")
    if balls_remaining is None:
        balls_remaining = overs_remaining * 6
    required_runs = max(0, target - runs_scored)
    required_rate = required_runs / overs_remaining
    required_strike_rate = required_runs / balls_remaining * 100 if balls_remaining else 0.0
    current_rate = runs_scored / overs_played if overs_played > 0 else 0.0
    difference = required_rate - current_rate

    result = {
        'required_runs': required_runs,
        'required_run_rate': required_rate,
        'required_strike_rate': required_strike_rate,
        'current_run_rate': current_rate,
        'rate_difference': difference,
        'wickets_in_hand': 10 - wickets_lost,
        'balls_remaining': balls_remaining,
    }
    result.update(grade('chase', CHASE_SCALE.classify(difference)))
    return result


def team_run_rate(runs, overs, wickets=0, balls=None, match_format='odi'):
    if overs <= 0:
        raise ValueError("overs must be greater than zero")
    if balls is None:
        balls = overs * 6
    run_rate = runs / overs
    result = {
        'run_rate': run_rate,
        'strike_rate': runs / balls * 100 if balls else 0.0,
        'wickets_in_hand': 10 - wickets,
        'overs_remaining': max(0.0, OVERS_LIMIT[match_format] - overs),
        'projected_total': runs + run_rate * max(0.0, OVERS_LIMIT[match_format] - overs),
        'match_format': match_format,
    }
    result.update(grade('team_run_rate', TEAM_RUN_RATE_SCALES[match_format].classify(run_rate)))
    return result

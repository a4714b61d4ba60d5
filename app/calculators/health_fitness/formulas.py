import math

from app.calculators.base import Scale, Tier

UNIT_SYSTEMS = [('metric', 'Metric (kg, cm)'), ('imperial', 'Imperial (lb, in)')]
SEXES = [('male', 'Male'), ('female', 'Female')]

LB_TO_KG = 0.453592
IN_TO_CM = 2.54
GLUCOSE_MMOL_TO_MGDL = 18.018
CREATININE_UMOL_PER_MGDL = 88.4

ACTIVITY_LEVELS = [
    ('1.2', 'Sedentary (little or no exercise)'),
    ('1.375', 'Lightly active (1-3 days/week)'),
    ('1.55', 'Moderately active (3-5 days/week)'),
    ('1.725', 'Very active (6-7 days/week)'),
    ('1.9', 'Extra active (hard exercise and physical job)'),
]

BMI_SCALE = Scale(
    [18.5, 25, 30],
    [
        Tier('Underweight', 'Your weight is below the healthy range for your height.',
             'Talk to a healthcare provider about healthy ways to gain weight.'),
        Tier('Normal weight', 'Your weight is in the healthy range for your height.',
             'Keep up a balanced diet and regular activity.'),
        Tier('Overweight', 'Your weight is above the healthy range for your height.',
             'Small changes to diet and activity can bring it back into range.'),
        Tier('Obese', 'Your weight is well above the healthy range for your height.',
             'Consider a plan with a healthcare provider to reduce health risks.'),
    ],
)

BODY_FAT_LABELS = ['Below Essential Fat', 'Essential Fat', 'Athletes', 'Fitness', 'Average', 'Obese']
BODY_FAT_SCALES = {
    'female': Scale([10, 14, 21, 25, 32], BODY_FAT_LABELS),
    'male': Scale([2, 6, 14, 18, 25], BODY_FAT_LABELS),
}

VO2_SCALE = Scale([30, 40, 50], ['Low fitness', 'Developing fitness', 'Good fitness', 'High fitness'])

PONDERAL_SCALE = Scale(
    [11, 15],
    [
        Tier('Low', 'Below the typical adult range of 11 to 15.',
             'This may indicate low mass for your height. Focus on adequate nutrition and strength training.'),
        Tier('Normal', 'Within the typical adult range.', 'Keep up your current habits.'),
        Tier('High', 'Above the typical adult range.',
             'Check whether this reflects muscle or fat with a body fat measurement.'),
    ],
    closed='right',
)

HBA1C_SCALE = Scale(
    [5.7, 6.5],
    [
        Tier('Normal', 'Normal glucose metabolism',
             'Your estimated HbA1c suggests normal glucose metabolism. Continue maintaining a healthy lifestyle.'),
        Tier('Prediabetes', 'Increased risk of diabetes',
             'Focus on diet and exercise to prevent progression to diabetes.'),
        Tier('Diabetes', 'Diabetes range',
             'Please consult a healthcare provider for proper evaluation and management.'),
    ],
)

EGFR_STAGES = Scale(
    [15, 30, 45, 60, 90],
    [
        Tier('G5', 'Kidney Failure', 'Critical'),
        Tier('G4', 'Severely Decreased', 'Very High'),
        Tier('G3b', 'Moderately to Severely Decreased', 'High'),
        Tier('G3a', 'Mildly to Moderately Decreased', 'Moderate'),
        Tier('G2', 'Mildly Decreased', 'Low'),
        Tier('G1', 'Normal or High', 'Low'),
    ],
)

SLEEP_SCALE = Scale(
    [85, 90, 95],
    [
        Tier('Poor', 'Below the clinical threshold for healthy sleep (85%).',
             'Consider sleep restriction therapy or consulting a sleep specialist.'),
        Tier('Fair', 'Approaching the healthy range.',
             'Better sleep hygiene and less time awake in bed should help.'),
        Tier('Good', 'Within the healthy range.', 'Maintain your current sleep habits.'),
        Tier('Excellent', 'Very little time is spent awake in bed.', 'Keep your current routine.'),
    ],
)

BP_CATEGORIES = ['Normal', 'Elevated', 'Stage 1 Hypertension', 'Stage 2 Hypertension']
SYSTOLIC_SCALE = Scale([120, 130, 140], [0, 1, 2, 3])
# diastolic readings have no "elevated" band
DIASTOLIC_SCALE = Scale([80, 90], [0, 2, 3])
BP_RISK_SCALE = Scale([1, 2, 4], ['Low', 'Moderate', 'High', 'Very High'])
BP_OPINIONS = {
    'Normal': 'Your blood pressure appears to be in a healthy range. Continue maintaining a healthy lifestyle.',
    'Elevated': 'Your blood pressure is slightly elevated. Focus on lifestyle changes to prevent progression to hypertension.',
    'Hypertension': 'Your readings indicate hypertension. Please consult a healthcare provider for evaluation and treatment.',
}


def to_metric(weight, height, unit_system):
    """Returns (kg, cm)."""
    if unit_system == 'imperial':
        return weight * LB_TO_KG, height * IN_TO_CM
    return weight, height


def bmi(weight, height, unit_system='metric'):
    if height <= 0:
        raise ValueError("height must be positive")
    if unit_system == 'imperial':
        value = weight / height ** 2 * 703
    else:
        value = weight / (height / 100) ** 2
    tier = BMI_SCALE.classify(value)
    return {
        'bmi': value,
        'category': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def bmr(weight, height, age, sex, unit_system='metric', activity_level='1.2'):
    kg, cm = to_metric(weight, height, unit_system)
    base = 10 * kg + 6.25 * cm - 5 * age
    value = base + 5 if sex == 'male' else base - 161
    factor = float(activity_level)
    return {
        'bmr': value,
        'tdee': value * factor,
        'activity_factor': factor,
        'by_activity': [
            {'activity': label, 'calories': round(value * float(multiplier))}
            for multiplier, label in ACTIVITY_LEVELS
        ],
    }


def body_fat(sex, height, neck, waist, hip=None, unit_system='metric'):
    """US Navy circumference method. Lengths in cm or inches."""
    if sex == 'male':
        if waist <= neck:
            raise ValueError("waist must be larger than neck")
        if unit_system == 'imperial':
            value = 86.010 * math.log10(waist - neck) - 70.041 * math.log10(height) + 36.76
        else:
            value = 495 / (1.0324 - 0.19077 * math.log10(waist - neck) + 0.15456 * math.log10(height)) - 450
    else:
        if hip is None:
            raise ValueError("hip measurement is required for women")
        if waist + hip <= neck:
            raise ValueError("waist plus hip must be larger than neck")
        if unit_system == 'imperial':
            value = 163.205 * math.log10(waist + hip - neck) - 97.684 * math.log10(height) - 78.387
        else:
            value = 495 / (1.29579 - 0.35004 * math.log10(waist + hip - neck) + 0.22100 * math.log10(height)) - 450
    return {
        'body_fat': value,
        'category': BODY_FAT_SCALES[sex].classify(value),
    }


def reference_bsa(sex, age):
    if sex == 'male':
        if age < 18:
            return 1.2 + age * 0.05
        return 1.95 if 30 <= age < 50 else 1.9
    if age < 18:
        return 1.1 + age * 0.04
    return 1.75 if 30 <= age < 50 else 1.7


def body_surface_area(weight, height, age, sex, unit_system='metric'):
    kg, cm = to_metric(weight, height, unit_system)
    formulas = {
        'mosteller': math.sqrt(cm * kg / 3600),
        'du_bois': 0.007184 * cm ** 0.725 * kg ** 0.425,
        'haycock': 0.024265 * cm ** 0.3964 * kg ** 0.5378,
        'gehan_george': 0.0235 * cm ** 0.42246 * kg ** 0.51456,
    }
    average = sum(formulas.values()) / len(formulas)
    reference = reference_bsa(sex, age)
    difference = (formulas['mosteller'] - reference) / reference * 100

    if abs(difference) < 5:
        note = 'Within the normal range for your age and sex.'
    elif difference > 10:
        note = 'Significantly above average, which may reflect a larger frame or higher body weight.'
    elif difference < -10:
        note = 'Below average, which may reflect a smaller frame or lower body weight.'
    else:
        note = f"Slightly {'above' if difference > 0 else 'below'} average, within normal variation."

    result = {key: round(value, 4) for key, value in formulas.items()}
    result.update({
        'average_bsa': round(average, 4),
        'reference_bsa': reference,
        'difference_percent': difference,
        'interpretation': note,
    })
    return result


def target_heart_rate(age, resting_heart_rate=None):
    max_hr = 220 - age
    if resting_heart_rate:
        reserve = max_hr - resting_heart_rate

        def zone(fraction):
            return round(reserve * fraction) + resting_heart_rate
        method = 'Karvonen (heart rate reserve)'
    else:
        def zone(fraction):
            return round(max_hr * fraction)
        method = 'Percentage of maximum heart rate'
    return {
        'max_heart_rate': max_hr,
        'method': method,
        'moderate_low': zone(0.50),
        'moderate_high': zone(0.70),
        'vigorous_low': zone(0.70),
        'vigorous_high': zone(0.85),
    }


def lean_body_mass(weight, body_fat_percent):
    fat_mass = weight * body_fat_percent / 100
    return {
        'lean_body_mass': weight - fat_mass,
        'fat_mass': fat_mass,
        'lean_percent': 100 - body_fat_percent,
    }


def vo2_max(age, resting_heart_rate):
    value = 15.3 * (220 - age) / resting_heart_rate
    return {
        'vo2_max': value,
        'category': VO2_SCALE.classify(value),
    }


def ponderal_index(weight, height, unit_system='metric'):
    """Metric height in metres, imperial in inches."""
    if unit_system == 'imperial':
        kg, metres = weight * LB_TO_KG, height * 0.0254
    else:
        kg, metres = weight, height
    value = kg / metres ** 3
    tier = PONDERAL_SCALE.classify(value)
    return {
        'ponderal_index': value,
        'category': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def format_clock(seconds):
    seconds = round(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def running_pace(solve_for, distance=None, hours=0, minutes=0, seconds=0,
                 pace_minutes=0, pace_seconds=0):
    total = (hours or 0) * 3600 + (minutes or 0) * 60 + (seconds or 0)
    pace = (pace_minutes or 0) * 60 + (pace_seconds or 0)

    if solve_for == 'pace':
        if not distance or total <= 0:
            raise ValueError("pace needs a distance and a time")
        pace = total / distance
    elif solve_for == 'time':
        if not distance or pace <= 0:
            raise ValueError("time needs a distance and a pace")
        total = distance * pace
    elif solve_for == 'distance':
        if total <= 0 or pace <= 0:
            raise ValueError("distance needs a time and a pace")
        distance = total / pace
    else:
        raise ValueError(f"unknown quantity to solve for: {solve_for!r}")

    return {
        'distance': distance,
        'time': format_clock(total),
        'pace': format_clock(pace) + ' per unit',
        'speed': distance / (total / 3600),
    }


def hba1c(glucose, glucose_unit='mg/dL'):
    mg_dl = glucose * GLUCOSE_MMOL_TO_MGDL if glucose_unit == 'mmol/L' else glucose
    value = (mg_dl + 46.7) / 28.7
    tier = HBA1C_SCALE.classify(value)
    return {
        'hba1c': value,
        'glucose_mg_dl': mg_dl,
        'category': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def egfr(age, sex, serum_creatinine, creatinine_unit='mg/dL', black=False):
    """CKD-EPI 2009 creatinine equation."""
    scr = serum_creatinine / CREATININE_UMOL_PER_MGDL if creatinine_unit == 'umol/L' else serum_creatinine
    if sex == 'female':
        kappa, alpha = 0.7, -0.329
        constant = 166 if black else 144
    else:
        kappa, alpha = 0.9, -0.411
        constant = 163 if black else 141
    exponent = alpha if scr <= kappa else -1.209
    value = round(constant * (scr / kappa) ** exponent * 0.993 ** age)
    stage = EGFR_STAGES.classify(value)
    return {
        'egfr': value,
        'stage': stage.level,
        'description': stage.summary,
        'risk': stage.advice,
    }


def sleep_efficiency(time_in_bed, time_asleep):
    if time_in_bed <= 0:
        raise ValueError("time in bed must be positive")
    if time_asleep > time_in_bed:
        raise ValueError("time asleep cannot exceed time in bed")
    value = time_asleep / time_in_bed * 100
    tier = SLEEP_SCALE.classify(value)
    return {
        'efficiency': value,
        'minutes_awake': (time_in_bed - time_asleep) * 60,
        'category': tier.level,
        'interpretation': tier.summary,
        'recommendation': tier.advice,
    }


def blood_pressure(systolic, diastolic, age, sex, smoker=False, diabetes=False, high_cholesterol=False):
    stage = max(SYSTOLIC_SCALE.classify(systolic), DIASTOLIC_SCALE.classify(diastolic))
    category = BP_CATEGORIES[stage]

    score = 0
    if age > 65:
        score += 1
    if sex == 'male':
        score += 1
    if smoker:
        score += 2
    if diabetes:
        score += 2
    if high_cholesterol:
        score += 1

    hypertensive = 'Hypertension' in category
    recommendations = []
    if hypertensive:
        recommendations += [
            'Consult a healthcare provider about blood pressure management',
            'Consider lifestyle changes including diet and exercise',
            'Monitor blood pressure regularly at home',
        ]
    if smoker:
        recommendations.append('Quit smoking to reduce cardiovascular risk')
    if diabetes:
        recommendations.append('Work with your healthcare team to manage blood sugar levels')
    if high_cholesterol:
        recommendations.append('Ask about diet changes or medication to lower cholesterol')
    if age > 65:
        recommendations.append('Consider regular cardiovascular health screenings')
    if not recommendations:
        recommendations = ['Maintain current healthy lifestyle habits', 'Continue regular health checkups']

    return {
        'category': category,
        'risk_score': score,
        'risk_level': BP_RISK_SCALE.classify(score),
        'opinion': BP_OPINIONS['Hypertension' if hypertensive else category],
        'recommendations': recommendations,
    }

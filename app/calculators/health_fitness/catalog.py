from app.calculators.base import Calculator, Output
from app.calculators.health_fitness import forms, formulas

CATEGORY = 'health-fitness'

ADVICE_OUTPUTS = [
    Output('category', 'Category', 'text'),
    Output('interpretation', 'What it means', 'text'),
    Output('recommendation', 'Recommendation', 'text'),
]

MEDICAL_FAQ = (
    'Is this a diagnosis?',
    'No. It is an estimate for general information. Talk to a healthcare provider about your results.',
)

CALCULATORS = [
    Calculator(
        slug='bmi',
        name='BMI Calculator',
        category=CATEGORY,
        description='Body mass index from height and weight, with the standard WHO categories.',
        form_class=forms.BmiForm,
        compute=formulas.bmi,
        outputs=[Output('bmi', 'BMI')] + ADVICE_OUTPUTS,
        guide="""
- **Metric**: `BMI = kg / m²`
- **Imperial**: `BMI = 703 x lb / in²`

| BMI | Category |
|-----|----------|
| below 18.5 | Underweight |
| 18.5 to 24.9 | Normal weight |
| 25 to 29.9 | Overweight |
| 30 and above | Obese |

BMI does not tell muscle from fat, so athletes often score high.
""",
        faqs=[
            ('Is BMI accurate for athletes?',
             'Not always. Muscle is dense, so muscular people can be classed as overweight while carrying little fat.'),
            MEDICAL_FAQ,
        ],
        keywords=['bmi', 'body mass index', 'healthy weight'],
        related=['body-fat', 'bmr', 'ponderal-index'],
        icon='⚖️',
    ),
    Calculator(
        slug='bmr',
        name='BMR Calculator',
        category=CATEGORY,
        description='Basal metabolic rate with the Mifflin-St Jeor equation, plus daily calorie needs by activity.',
        form_class=forms.BmrForm,
        compute=formulas.bmr,
        outputs=[
            Output('bmr', 'BMR (calories/day)', 'integer'),
            Output('tdee', 'Daily calories at your activity level', 'integer'),
            Output('by_activity', 'Calories by activity level', 'table', columns=[
                ('activity', 'Activity', 'text'),
                ('calories', 'Calories/day', 'integer'),
            ]),
        ],
        guide="""
Mifflin-St Jeor:

- men: `10 x kg + 6.25 x cm - 5 x age + 5`
- women: `10 x kg + 6.25 x cm - 5 x age - 161`

Multiply by an activity factor between 1.2 and 1.9 to estimate total daily energy expenditure (TDEE).
""",
        keywords=['bmr', 'tdee', 'calories', 'metabolism'],
        related=['bmi', 'lean-body-mass'],
        icon='🔥',
    ),
    Calculator(
        slug='body-fat',
        name='Body Fat Percentage Calculator',
        category=CATEGORY,
        description='Estimate body fat with the US Navy tape-measure method.',
        form_class=forms.BodyFatForm,
        compute=formulas.body_fat,
        outputs=[
            Output('body_fat', 'Body fat', 'percent'),
            Output('category', 'Category', 'text'),
        ],
        guide="""
The US Navy method uses neck, waist and (for women) hip measurements
together with height. Measure at the same time of day, on bare skin, without
pulling the tape tight.
""",
        faqs=[
            ('What is a healthy body fat percentage?',
             'For men 10-20% is generally healthy. For women 18-28% is typical, depending on age and activity.'),
        ],
        keywords=['body fat', 'navy method', 'body composition'],
        related=['lean-body-mass', 'bmi'],
        icon='📏',
    ),
    Calculator(
        slug='body-surface-area',
        name='Body Surface Area Calculator',
        category=CATEGORY,
        description='BSA by the Mosteller, Du Bois, Haycock and Gehan-George formulas.',
        form_class=forms.BodySurfaceAreaForm,
        compute=formulas.body_surface_area,
        outputs=[
            Output('mosteller', 'Mosteller (m²)'),
            Output('du_bois', 'Du Bois (m²)'),
            Output('haycock', 'Haycock (m²)'),
            Output('gehan_george', 'Gehan-George (m²)'),
            Output('average_bsa', 'Average (m²)'),
            Output('reference_bsa', 'Typical for your age and sex (m²)'),
            Output('interpretation', 'Interpretation', 'text'),
        ],
        guide="""
BSA is used to dose chemotherapy and other drugs and to index cardiac output.
Mosteller, `sqrt(cm x kg / 3600)`, is the most widely used formula.
""",
        faqs=[MEDICAL_FAQ],
        keywords=['bsa', 'body surface area', 'mosteller'],
        related=['bmi', 'lean-body-mass'],
        icon='🧍',
    ),
    Calculator(
        slug='target-heart-rate',
        name='Target Heart Rate Calculator',
        category=CATEGORY,
        description='Moderate and vigorous training zones from your age and resting heart rate.',
        form_class=forms.TargetHeartRateForm,
        compute=formulas.target_heart_rate,
        outputs=[
            Output('max_heart_rate', 'Estimated max heart rate', 'integer'),
            Output('method', 'Method', 'text'),
            Output('moderate_low', 'Moderate zone from (bpm)', 'integer'),
            Output('moderate_high', 'Moderate zone to (bpm)', 'integer'),
            Output('vigorous_low', 'Vigorous zone from (bpm)', 'integer'),
            Output('vigorous_high', 'Vigorous zone to (bpm)', 'integer'),
        ],
        guide="""
Maximum heart rate is estimated as `220 - age`. With a resting heart rate the
Karvonen method is used: `zone = (max - resting) x intensity + resting`.

- Moderate intensity: 50-70%
- Vigorous intensity: 70-85%
""",
        keywords=['target heart rate', 'karvonen', 'training zones'],
        related=['vo2-max', 'running-pace'],
        icon='❤️',
    ),
    Calculator(
        slug='lean-body-mass',
        name='Lean Body Mass Calculator',
        category=CATEGORY,
        description='Everything that is not fat: muscle, bone, organs and water.',
        form_class=forms.LeanBodyMassForm,
        compute=formulas.lean_body_mass,
        outputs=[
            Output('lean_body_mass', 'Lean body mass'),
            Output('fat_mass', 'Fat mass'),
            Output('lean_percent', 'Lean share', 'percent'),
        ],
        guide="`LBM = weight x (1 - body fat %)`",
        keywords=['lean body mass', 'fat free mass'],
        related=['body-fat', 'bmr'],
        icon='💪',
    ),
    Calculator(
        slug='vo2-max',
        name='VO2 Max Calculator',
        category=CATEGORY,
        description='Non-exercise estimate of aerobic capacity from age and resting heart rate.',
        form_class=forms.Vo2MaxForm,
        compute=formulas.vo2_max,
        outputs=[
            Output('vo2_max', 'VO2 max (ml/kg/min)'),
            Output('category', 'Fitness', 'text'),
        ],
        guide="""
`VO2 max = 15.3 x (220 - age) / resting HR`, the Uth-Sorensen heart rate ratio.
A lab test on a treadmill is far more accurate.
""",
        keywords=['vo2 max', 'aerobic capacity', 'cardio fitness'],
        related=['target-heart-rate', 'running-pace'],
        icon='🫁',
    ),
    Calculator(
        slug='ponderal-index',
        name='Ponderal Index Calculator',
        category=CATEGORY,
        description='Corpulence index (kg/m³) that scales better than BMI for very tall or short people.',
        form_class=forms.PonderalIndexForm,
        compute=formulas.ponderal_index,
        outputs=[Output('ponderal_index', 'Ponderal index (kg/m³)')] + ADVICE_OUTPUTS,
        guide="`PI = kg / m³`. A normal range for adults is about 11 to 15.",
        keywords=['ponderal index', 'rohrer index', 'corpulence'],
        related=['bmi'],
        icon='📐',
    ),
    Calculator(
        slug='running-pace',
        name='Running Pace Calculator',
        category=CATEGORY,
        description='Solve for pace, finishing time or distance from the other two.',
        form_class=forms.RunningPaceForm,
        compute=formulas.running_pace,
        outputs=[
            Output('pace', 'Pace', 'text'),
            Output('time', 'Time', 'text'),
            Output('distance', 'Distance'),
            Output('speed', 'Average speed (per hour)'),
        ],
        guide="""
`pace = time / distance`. The calculator works in whatever distance unit you
enter, so a pace from kilometres is per kilometre.
""",
        keywords=['running pace', 'race time', 'marathon pace'],
        related=['vo2-max', 'target-heart-rate'],
        icon='🏃',
    ),
    Calculator(
        slug='hba1c',
        name='Blood Sugar to HbA1c Converter',
        category=CATEGORY,
        description='Estimate HbA1c from average blood glucose.',
        form_class=forms.Hba1cForm,
        compute=formulas.hba1c,
        outputs=[Output('hba1c', 'Estimated HbA1c', 'percent')] + ADVICE_OUTPUTS,
        guide="""
`HbA1c = (average glucose mg/dL + 46.7) / 28.7` (ADAG study). mmol/L readings are
multiplied by 18.018 first.

- below 5.7%: normal
- 5.7-6.4%: prediabetes
- 6.5% and above: diabetes range
""",
        faqs=[MEDICAL_FAQ],
        keywords=['hba1c', 'a1c', 'blood sugar', 'glucose'],
        related=['blood-pressure', 'bmi'],
        icon='🩸',
    ),
    Calculator(
        slug='egfr',
        name='Kidney Function (eGFR) Calculator',
        category=CATEGORY,
        description='Estimated glomerular filtration rate with the CKD-EPI 2009 equation.',
        form_class=forms.EgfrForm,
        compute=formulas.egfr,
        outputs=[
            Output('egfr', 'eGFR (mL/min/1.73m²)', 'integer'),
            Output('stage', 'CKD stage', 'text'),
            Output('description', 'Kidney function', 'text'),
            Output('risk', 'Risk', 'text'),
        ],
        guide="""
CKD-EPI estimates kidney filtration from serum creatinine, age and sex. An
eGFR of 90 or more is normal. Below 60 for three months or longer suggests chronic
kidney disease.
""",
        faqs=[MEDICAL_FAQ],
        keywords=['egfr', 'kidney function', 'ckd-epi', 'creatinine'],
        related=['blood-pressure', 'hba1c'],
        icon='🫘',
    ),
    Calculator(
        slug='sleep-efficiency',
        name='Sleep Efficiency Calculator',
        category=CATEGORY,
        description='The share of time in bed actually spent asleep.',
        form_class=forms.SleepEfficiencyForm,
        compute=formulas.sleep_efficiency,
        outputs=[
            Output('efficiency', 'Sleep efficiency', 'percent'),
            Output('minutes_awake', 'Minutes awake in bed', 'integer'),
        ] + ADVICE_OUTPUTS,
        guide="`efficiency = time asleep / time in bed x 100`. 85% or more is considered healthy.",
        keywords=['sleep efficiency', 'insomnia', 'sleep quality'],
        related=['target-heart-rate'],
        icon='😴',
    ),
    Calculator(
        slug='blood-pressure',
        name='Blood Pressure Risk Calculator',
        category=CATEGORY,
        description='Classify a reading by ACC/AHA category and add up cardiovascular risk factors.',
        form_class=forms.BloodPressureForm,
        compute=formulas.blood_pressure,
        outputs=[
            Output('category', 'Blood pressure category', 'text'),
            Output('risk_level', 'Overall risk', 'text'),
            Output('risk_score', 'Risk factor score', 'integer'),
            Output('opinion', 'Summary', 'text'),
            Output('recommendations', 'Recommendations', 'list'),
        ],
        guide="""
| Category | Systolic | | Diastolic |
|----------|----------|-|-----------|
| Normal | below 120 | and | below 80 |
| Elevated | 120-129 | and | below 80 |
| Stage 1 | 130-139 | or | 80-89 |
| Stage 2 | 140 or more | or | 90 or more |

The higher of the two readings decides the category.
""",
        faqs=[MEDICAL_FAQ],
        keywords=['blood pressure', 'hypertension', 'cardiovascular risk'],
        related=['hba1c', 'egfr'],
        icon='🩺',
    ),
]

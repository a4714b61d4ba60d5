from app.calculators.base import Calculator, Output
from app.calculators.conversions import forms, formulas

CATEGORY = 'conversions'

CALCULATORS = [
    Calculator(
        slug='shoe-size',
        name='Shoe Size Converter',
        category=CATEGORY,
        description='Convert shoe sizes between US, UK, EU, India, Japan and centimetres.',
        form_class=forms.ShoeSizeForm,
        compute=formulas.shoe_size,
        outputs=[
            Output('us', 'US'),
            Output('uk', 'UK'),
            Output('eu', 'EU'),
            Output('india', 'India'),
            Output('jp', 'Japan'),
            Output('cm', 'Foot length (cm)'),
        ],
        guide="""
Sizing systems differ by brand, so treat the result as a starting point.
Men's UK sizes run half a size below US sizes, and women's run two sizes below.
Japanese sizes are simply the foot length in centimetres.
""",
        faqs=[
            ('Are India sizes the same as UK sizes?', 'Yes, Indian retailers use the UK scale.'),
        ],
        keywords=['shoe size', 'eu shoe size', 'uk shoe size'],
        related=['foot-length', 'glove-size'],
        icon='👟',
    ),
    Calculator(
        slug='height',
        name='Height Converter',
        category=CATEGORY,
        description='Convert height between feet and inches and centimetres.',
        form_class=forms.HeightForm,
        compute=formulas.height,
        outputs=[
            Output('display', 'Converted height', 'text'),
            Output('centimeters', 'Centimetres'),
            Output('meters', 'Metres'),
            Output('total_inches', 'Total inches'),
        ],
        guide="One inch is exactly 2.54 cm and one foot is 30.48 cm.",
        keywords=['height converter', 'feet to cm', 'cm to feet'],
        related=['shoe-size'],
        icon='📏',
    ),
    Calculator(
        slug='ring-size',
        name='Ring Size Converter',
        category=CATEGORY,
        description='Convert between ring circumference, diameter and US, UK, EU and Japanese sizes.',
        form_class=forms.RingSizeForm,
        compute=formulas.ring_size,
        outputs=[
            Output('closest_standard', 'Closest standard size', 'text'),
            Output('us', 'US size (interpolated)'),
            Output('uk', 'UK / India', 'text'),
            Output('eu', 'EU', 'integer'),
            Output('jp', 'Japan', 'integer'),
            Output('diameter', 'Inside diameter (mm)'),
            Output('circumference', 'Inside circumference (mm)'),
        ],
        guide="""
EU ring sizes are the inside circumference in millimetres. Other systems
are matched to the nearest standard size. Fingers swell in the heat, so measure
at the end of the day.
""",
        keywords=['ring size', 'ring size chart'],
        related=['glove-size', 'hat-size'],
        icon='💍',
    ),
    Calculator(
        slug='hat-size',
        name='Hat Size Converter',
        category=CATEGORY,
        description='Head circumference to US fitted, EU and Japanese hat sizes.',
        form_class=forms.HatSizeForm,
        compute=formulas.hat_size,
        outputs=[
            Output('us', 'US fitted size', 'text'),
            Output('eu', 'EU', 'integer'),
            Output('jp', 'Japan', 'integer'),
            Output('centimeters', 'Circumference (cm)'),
            Output('inches', 'Circumference (in)'),
        ],
        guide="US fitted sizes are the head circumference in inches divided by pi, to the nearest eighth.",
        keywords=['hat size', 'fitted cap size'],
        related=['ring-size', 'glove-size'],
        icon='🎩',
    ),
    Calculator(
        slug='glove-size',
        name='Glove Size Converter',
        category=CATEGORY,
        description='Hand circumference to US/UK, EU, Japanese and Indian glove sizes.',
        form_class=forms.GloveSizeForm,
        compute=formulas.glove_size,
        outputs=[
            Output('us', 'US / UK'),
            Output('eu', 'EU', 'integer'),
            Output('jp', 'Japan', 'integer'),
            Output('india', 'India', 'integer'),
            Output('inches', 'Circumference (in)'),
        ],
        guide="Measure around your dominant hand at the knuckles. US and UK glove sizes are that measurement in inches.",
        keywords=['glove size', 'hand size'],
        related=['ring-size', 'hat-size'],
        icon='🧤',
    ),
    Calculator(
        slug='foot-length',
        name='Foot Length to Shoe Size Converter',
        category=CATEGORY,
        description='Turn a foot length measurement into shoe sizes.',
        form_class=forms.FootLengthForm,
        compute=formulas.foot_length,
        outputs=[
            Output('us_men', "US men's"),
            Output('us_women', "US women's"),
            Output('uk', 'UK', 'integer'),
            Output('eu', 'EU', 'integer'),
            Output('jp', 'Japan', 'integer'),
            Output('india', 'India', 'integer'),
            Output('centimeters', 'Foot length (cm)'),
        ],
        guide="Stand on a sheet of paper, mark the heel and longest toe, and measure between the marks.",
        keywords=['foot length', 'shoe size from cm'],
        related=['shoe-size'],
        icon='🦶',
    ),
    Calculator(
        slug='cloth-size',
        name='Clothing Size Converter',
        category=CATEGORY,
        description="Convert men's, women's and kids' clothing sizes between US, UK, EU, India, Japan and international.",
        form_class=forms.ClothSizeForm,
        compute=formulas.cloth_size,
        outputs=[
            Output('us', 'US', 'text'),
            Output('uk', 'UK', 'text'),
            Output('eu', 'EU', 'text'),
            Output('india', 'India', 'text'),
            Output('japan', 'Japan', 'text'),
            Output('intl', 'International', 'text'),
        ],
        guide="""
Sizes are matched against a standard chart for each group. Brands cut
differently, so always check the retailer's own size guide when you can.

- **Men**: chest sizes in inches for US, UK and India. EU adds ten.
- **Women**: UK sizes run four above US sizes.
- **Kids**: EU and Japanese sizes are the child's height in centimetres.
""",
        faqs=[
            ('Why was my size not found?',
             'Only standard chart sizes are listed. The error message shows the sizes available for that region.'),
        ],
        keywords=['clothing size', 'dress size converter', 'shirt size chart'],
        related=['body-measurement-cloth-size', 'shoe-size'],
        icon='👕',
    ),
    Calculator(
        slug='body-measurement-cloth-size',
        name='Body Measurement to Clothing Size',
        category=CATEGORY,
        description='Find your clothing size in five regions from chest, bust and waist measurements.',
        form_class=forms.BodyMeasurementForm,
        compute=formulas.body_measurement_cloth_size,
        outputs=[
            Output('us_top', 'US top size', 'integer'),
            Output('us_bottom', 'US bottom size', 'integer'),
            Output('sizes', 'Sizes by region', 'table', columns=[
                ('garment', 'Garment', 'text'),
                ('us', 'US', 'integer'),
                ('uk', 'UK', 'integer'),
                ('eu', 'EU', 'integer'),
                ('india', 'India', 'integer'),
                ('japan', 'Japan', 'integer'),
            ]),
        ],
        guide="""
Measure over underwear with a soft tape, keeping it level and snug but not
tight.

- **Chest / bust**: around the fullest part.
- **Waist**: around the narrowest part, usually just above the belly button.
- **Hips**: around the widest part of the seat.

Men's shirt sizes are the chest in inches rounded up to an even number.
Trouser sizes are the waist in inches.
""",
        keywords=['body measurements', 'what size am i', 'size from measurements'],
        related=['cloth-size', 'height'],
        icon='📐',
    ),
]

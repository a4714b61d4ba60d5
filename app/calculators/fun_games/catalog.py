from app.calculators.base import Calculator, Output
from app.calculators.fun_games import forms, formulas

CATEGORY = 'fun-games'

MATCH_OUTPUTS = [
    Output('percentage', 'Compatibility (%)', 'integer'),
    Output('title', 'Verdict', 'text'),
    Output('description', 'What it means', 'text'),
    Output('advice', 'Advice', 'text'),
]

JUST_FOR_FUN = (
    'Is this scientific?',
    'Not at all. It is a bit of fun based on letters and patterns, and the same inputs always give the same score.',
)

CALCULATORS = [
    Calculator(
        slug='love-percentage',
        name='Love Percentage Calculator',
        category=CATEGORY,
        description='Enter two names and find out how compatible they are. Just for fun!',
        form_class=forms.LovePercentageForm,
        compute=formulas.love_percentage,
        outputs=MATCH_OUTPUTS,
        guide="""
The score looks at name length, vowel and consonant balance, shared letters,
the letters in LOVE and HEART, matching endings and a sprinkle of luck. Try your
full names or nicknames.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['love calculator', 'love test', 'name compatibility'],
        related=['zodiac-match', 'name-compatibility', 'crush-compatibility'],
        icon='💘',
    ),
    Calculator(
        slug='zodiac-match',
        name='Zodiac Compatibility Calculator',
        category=CATEGORY,
        description='How well do two star signs get along?',
        form_class=forms.ZodiacMatchForm,
        compute=formulas.zodiac_match,
        outputs=MATCH_OUTPUTS + [
            Output('element_match', 'Elements', 'text'),
            Output('elements', 'Element pair', 'text'),
        ],
        guide="""
Signs that share an element (Fire, Earth, Air or Water) or sit in compatible
elements score highest. Modality, polarity and ruling planets add a little more.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['zodiac compatibility', 'star sign match', 'astrology'],
        related=['love-percentage', 'birthday-compatibility'],
        icon='♈',
    ),
    Calculator(
        slug='birthday-compatibility',
        name='Birthday Compatibility Calculator',
        category=CATEGORY,
        description='Compare two birthdays by star sign, season, numerology and age gap.',
        form_class=forms.BirthdayCompatibilityForm,
        compute=formulas.birthday_compatibility,
        outputs=MATCH_OUTPUTS + [
            Output('signs', 'Star signs', 'text'),
            Output('age_difference', 'Age difference (years)', 'integer'),
        ],
        guide="""
Matching months and days, the day of the week you were born, your seasons,
star signs and life path numbers all add to the score. Birthdays close together
in the calendar earn a little extra.
""",
        faqs=[
            JUST_FOR_FUN,
            ('What is a life path number?',
             'Add the day, month and year of your birth, then keep adding the digits until one digit is left.'),
        ],
        keywords=['birthday compatibility', 'birth date match', 'numerology'],
        related=['zodiac-match', 'love-percentage'],
        icon='🎂',
    ),
    Calculator(
        slug='crush-compatibility',
        name='Crush Compatibility Calculator',
        category=CATEGORY,
        description='Names, ages and personalities: how strong is your crush?',
        form_class=forms.CrushCompatibilityForm,
        compute=formulas.crush_compatibility,
        outputs=MATCH_OUTPUTS,
        guide="""
Ages and personality types are optional. Filling them in adds an age gap and
personality match to the name analysis.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['crush calculator', 'crush test', 'does my crush like me'],
        related=['love-percentage', 'romantic-quiz'],
        icon='😍',
    ),
    Calculator(
        slug='friendship-compatibility',
        name='Friendship Compatibility Calculator',
        category=CATEGORY,
        description='How well do two friends get along?',
        form_class=forms.FriendshipCompatibilityForm,
        compute=formulas.friendship_compatibility,
        outputs=MATCH_OUTPUTS + [Output('shared_interests', 'Shared interests', 'integer')],
        guide="""
Friends can have bigger age gaps than couples, so every age difference scores
something. Each shared interest you list adds to the score.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['friendship test', 'best friend calculator', 'friend compatibility'],
        related=['relationship-strength-test', 'name-compatibility'],
        icon='🤝',
    ),
    Calculator(
        slug='marriage-compatibility',
        name='Marriage Compatibility Calculator',
        category=CATEGORY,
        description='Names, ages, time together and shared values for a marriage score.',
        form_class=forms.MarriageCompatibilityForm,
        compute=formulas.marriage_compatibility,
        outputs=MATCH_OUTPUTS,
        guide="""
Long relationships, similar life stages and values such as trust, honesty and
family count the most. Your communication style adds a final bonus.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['marriage compatibility', 'marriage calculator', 'couple test'],
        related=['relationship-strength-test', 'love-percentage'],
        icon='💍',
    ),
    Calculator(
        slug='name-compatibility',
        name='Name Compatibility Calculator',
        category=CATEGORY,
        description='Do your names sound good together?',
        form_class=forms.NameCompatibilityForm,
        compute=formulas.name_compatibility,
        outputs=MATCH_OUTPUTS + [Output('shared_letters', 'Shared letters', 'integer')],
        guide="""
Looks at length, vowels and consonants, syllables, shared letters, matching
beginnings and endings, and names with romantic, strong or nature meanings.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['name compatibility', 'name match', 'names test'],
        related=['love-percentage', 'future-partner-name'],
        icon='📝',
    ),
    Calculator(
        slug='relationship-strength-test',
        name='Relationship Strength Test',
        category=CATEGORY,
        description='Rate communication, trust and conflict resolution to score your bond.',
        form_class=forms.RelationshipStrengthForm,
        compute=formulas.relationship_strength,
        outputs=MATCH_OUTPUTS + [
            Output('strengths', 'Strengths', 'list'),
            Output('improvements', 'Areas to work on', 'list'),
        ],
        guide="""
Communication, trust and conflict resolution carry most of the weight. Two or
more excellent ratings multiply the score, and poor ratings pull it down.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['relationship test', 'relationship strength', 'couple quiz'],
        related=['marriage-compatibility', 'friendship-compatibility'],
        icon='💪',
    ),
    Calculator(
        slug='romantic-quiz',
        name='Romantic Quiz',
        category=CATEGORY,
        description='How romantic are you? Answer a few questions and find your romantic type.',
        form_class=forms.RomanticQuizForm,
        compute=formulas.romantic_quiz,
        outputs=[
            Output('percentage', 'Romance score (%)', 'integer'),
            Output('title', 'Verdict', 'text'),
            Output('personality_type', 'Romantic type', 'text'),
            Output('description', 'What it means', 'text'),
            Output('advice', 'Advice', 'text'),
            Output('suggestions', 'Try this', 'list'),
        ],
        guide="""
Your favourite activity, love language, style and ideal date each add points.
A longer romantic memory full of words like "together" and "forever" adds more.
""",
        faqs=[JUST_FOR_FUN],
        keywords=['romantic quiz', 'how romantic am i', 'love language'],
        related=['crush-compatibility', 'love-percentage'],
        icon='🌹',
    ),
    Calculator(
        slug='future-partner-name',
        name='Future Partner Name Generator',
        category=CATEGORY,
        description="Discover the name of your future partner, with its meaning and origin.",
        form_class=forms.FuturePartnerNameForm,
        compute=formulas.future_partner_name,
        outputs=[
            Output('name', 'Name', 'text'),
            Output('meaning', 'Meaning', 'text'),
            Output('origin', 'Origin', 'text'),
            Output('compatibility', 'Compatibility (%)', 'integer'),
            Output('description', 'What it means', 'text'),
        ],
        guide="""
Names are drawn from the gender and origin you choose. When no name matches the
origin, the gender choice still applies. Shared letters with your own name and
your personality raise the compatibility.
""",
        faqs=[
            JUST_FOR_FUN,
            ('Why do I always get the same name?',
             'The pick is seeded from your answers. Change an answer to see a different name.'),
        ],
        keywords=['future partner name', 'soulmate name generator', 'who will i marry'],
        related=['name-compatibility', 'love-percentage'],
        icon='🔮',
    ),
]

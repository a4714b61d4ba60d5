"""
Just-for-fun compatibility scores.

Each score ends with a pseudo-random term seeded from the normalised
inputs, so a pair of names (or signs) always gets the same answer.
"""

import random
import re
from collections import Counter, namedtuple

from app.calculators.base import Scale, clamp

MatchResult = namedtuple('MatchResult', ['title', 'description', 'advice'])

SCORE_CUTOFFS = [10, 20, 30, 40, 50, 60, 70, 80, 90]

LOVE_RESULTS = Scale(SCORE_CUTOFFS, [
    MatchResult('Plot Twist! 🎭',
                'Well, this is unexpected! But the best stories often have the most surprising beginnings.',
                'Sometimes the universe has a sense of humor. Embrace the journey!'),
    MatchResult('Learning Experience! 📚',
                'Every relationship teaches us something! This one might be about growth and discovery.',
                'Keep an open mind and heart. The best relationships sometimes surprise us!'),
    MatchResult('Adventure Awaits! 🗺️',
                'This is uncharted territory! Every relationship is an adventure, and this one has potential.',
                'Focus on building a genuine friendship first. Love often follows naturally.'),
    MatchResult('Mystery Romance! 🔮',
                "There's something intriguing here, but it's wrapped in mystery! Time will tell.",
                'Be patient and let things develop naturally.'),
    MatchResult('Opposites Attract! ⚡',
                "You're different, but that might be exactly what you both need!",
                'Embrace your differences. They might be your greatest strength!'),
    MatchResult('Friends with Benefits! 😊',
                'You two make great friends! Whether romance blooms depends on how much you both want it.',
                'Take it slow and see where the journey leads.'),
    MatchResult('Potential Partners! 🌱',
                "There's a solid foundation here! With some effort, this could grow into something amazing.",
                'Communication is key. Talk about your dreams and goals together!'),
    MatchResult('Sweet Chemistry! 🍯',
                "There's definitely something sweet brewing between you two! The sparks are real.",
                'Focus on your common interests and watch this relationship blossom!'),
    MatchResult('Love Birds! 🕊️',
                'You two are soaring high in the love department! This relationship has serious potential.',
                "Keep nurturing this connection. You're on the path to something beautiful!"),
    MatchResult('Soulmate Alert! 💕',
                "This is the kind of love that makes Disney movies jealous! You're practically made for each other.",
                "Don't let this one slip away! This level of compatibility is rarer than a unicorn at a coffee shop."),
])

ZODIAC_RESULTS = Scale(SCORE_CUTOFFS, [
    MatchResult('Zodiac Plot Twist! 🎭', 'Well, this is unexpected! The best stories often have surprising beginnings.',
                'Sometimes the universe has a sense of humor. Embrace the journey!'),
    MatchResult('Adventure Zodiac Awaits! 🗺️', 'This combination is an adventure waiting to happen!',
                'Every journey starts somewhere.'),
    MatchResult('Unique Zodiac Pair! 🌟', "Your signs are a unique pair! There's something special here.",
                "Celebrate the uniqueness of your combination. It's one of a kind!"),
    MatchResult('Mystery Zodiac Combination! 🔮', 'Your signs have an intriguing dynamic.',
                'Let this combination unfold naturally. Mystery can be beautiful!'),
    MatchResult('Opposite Zodiac Signs! ⚡', 'Your signs are quite different, but that might be exactly what you need!',
                'The best combinations sometimes come from opposites.'),
    MatchResult('Interesting Zodiac Mix! 🎨', 'Your signs create an interesting mix!',
                'Embrace the uniqueness of your combination. It could be special!'),
    MatchResult('Nice Zodiac Balance! ⚖️', 'Your signs create a nice balance together!',
                'Focus on the positive aspects of your combination.'),
    MatchResult('Great Zodiac Harmony! 🎵', "There's a natural rhythm between your astrological energies.",
                'This combination has great potential. Nurture this special connection!'),
    MatchResult('Perfect Zodiac Match! ✨', 'Your signs complement each other beautifully!',
                'The universe is clearly on your side!'),
    MatchResult('Cosmic Soulmates! 🌟', 'Your signs are perfectly aligned! Astrological compatibility at its finest.',
                'The stars have truly aligned for you!'),
])

ROMANTIC_NAMES = ('rose', 'lily', 'jade', 'ruby', 'pearl', 'diamond', 'crystal', 'amber', 'sapphire', 'emerald')
STRONG_NAMES = ('alex', 'max', 'leo', 'ace', 'rex', 'zeus', 'thor', 'odin', 'titan', 'atlas')
LETTER_BONUS = {'l': 8, 'o': 6, 'v': 7, 'e': 6, 'h': 4, 'a': 4, 'r': 4, 't': 4}

Sign = namedtuple('Sign', ['name', 'element', 'modality', 'polarity', 'planet', 'dates', 'symbol'])

SIGNS = [
    Sign('Aries', 'Fire', 'Cardinal', 'Yang', 'Mars', 'Mar 21 - Apr 19', '♈'),
    Sign('Taurus', 'Earth', 'Fixed', 'Yin', 'Venus', 'Apr 20 - May 20', '♉'),
    Sign('Gemini', 'Air', 'Mutable', 'Yang', 'Mercury', 'May 21 - Jun 20', '♊'),
    Sign('Cancer', 'Water', 'Cardinal', 'Yin', 'Moon', 'Jun 21 - Jul 22', '♋'),
    Sign('Leo', 'Fire', 'Fixed', 'Yang', 'Sun', 'Jul 23 - Aug 22', '♌'),
    Sign('Virgo', 'Earth', 'Mutable', 'Yin', 'Mercury', 'Aug 23 - Sep 22', '♍'),
    Sign('Libra', 'Air', 'Cardinal', 'Yang', 'Venus', 'Sep 23 - Oct 22', '♎'),
    Sign('Scorpio', 'Water', 'Fixed', 'Yin', 'Pluto', 'Oct 23 - Nov 21', '♏'),
    Sign('Sagittarius', 'Fire', 'Mutable', 'Yang', 'Jupiter', 'Nov 22 - Dec 21', '♐'),
    Sign('Capricorn', 'Earth', 'Cardinal', 'Yin', 'Saturn', 'Dec 22 - Jan 19', '♑'),
    Sign('Aquarius', 'Air', 'Fixed', 'Yang', 'Uranus', 'Jan 20 - Feb 18', '♒'),
    Sign('Pisces', 'Water', 'Mutable', 'Yin', 'Neptune', 'Feb 19 - Mar 20', '♓'),
]
SIGNS_BY_NAME = {sign.name: sign for sign in SIGNS}
SIGN_CHOICES = [(sign.name, f"{sign.symbol} {sign.name} ({sign.dates})") for sign in SIGNS]

COMPATIBLE_ELEMENTS = {frozenset(['Fire', 'Air']), frozenset(['Earth', 'Water'])}
CHALLENGING_ELEMENTS = {frozenset(['Fire', 'Water']), frozenset(['Air', 'Earth'])}

SIGN_MATRIX = {
    'Aries': {'Leo': 28, 'Sagittarius': 25, 'Gemini': 18, 'Aquarius': 16, 'Libra': 12, 'Cancer': 8,
              'Capricorn': 6, 'Taurus': 4, 'Virgo': 3, 'Scorpio': 2, 'Pisces': 5},
    'Taurus': {'Virgo': 28, 'Capricorn': 25, 'Cancer': 18, 'Pisces': 16, 'Scorpio': 12, 'Leo': 8,
               'Aquarius': 6, 'Gemini': 4, 'Libra': 3, 'Sagittarius': 2, 'Aries': 4},
    'Gemini': {'Libra': 28, 'Aquarius': 25, 'Aries': 18, 'Leo': 16, 'Sagittarius': 12, 'Virgo': 8,
               'Pisces': 6, 'Cancer': 4, 'Scorpio': 3, 'Capricorn': 2, 'Taurus': 4},
    'Cancer': {'Scorpio': 28, 'Pisces': 25, 'Taurus': 18, 'Virgo': 16, 'Capricorn': 12, 'Gemini': 8,
               'Sagittarius': 6, 'Leo': 4, 'Aquarius': 3, 'Aries': 2, 'Libra': 4},
    'Leo': {'Aries': 28, 'Sagittarius': 25, 'Gemini': 18, 'Libra': 16, 'Aquarius': 12, 'Cancer': 8,
            'Capricorn': 6, 'Taurus': 4, 'Scorpio': 3, 'Pisces': 2, 'Virgo': 4},
    'Virgo': {'Taurus': 28, 'Capricorn': 25, 'Cancer': 18, 'Scorpio': 16, 'Pisces': 12, 'Leo': 8,
              'Aquarius': 6, 'Gemini': 4, 'Sagittarius': 3, 'Aries': 2, 'Libra': 4},
    'Libra': {'Gemini': 28, 'Aquarius': 25, 'Leo': 18, 'Sagittarius': 16, 'Aries': 12, 'Virgo': 8,
              'Pisces': 6, 'Cancer': 4, 'Capricorn': 3, 'Taurus': 2, 'Scorpio': 4},
    'Scorpio': {'Cancer': 28, 'Pisces': 25, 'Virgo': 18, 'Capricorn': 16, 'Taurus': 12, 'Libra': 8,
                'Sagittarius': 6, 'Gemini': 4, 'Aquarius': 3, 'Leo': 2, 'Aries': 4},
    'Sagittarius': {'Aries': 28, 'Leo': 25, 'Libra': 18, 'Aquarius': 16, 'Gemini': 12, 'Scorpio': 8,
                    'Pisces': 6, 'Cancer': 4, 'Capricorn': 3, 'Virgo': 2, 'Taurus': 4},
    'Capricorn': {'Taurus': 28, 'Virgo': 25, 'Scorpio': 18, 'Pisces': 16, 'Cancer': 12, 'Sagittarius': 8,
                  'Aquarius': 6, 'Leo': 4, 'Aries': 3, 'Gemini': 2, 'Libra': 4},
    'Aquarius': {'Gemini': 28, 'Libra': 25, 'Sagittarius': 18, 'Aries': 16, 'Leo': 12, 'Capricorn': 8,
                 'Pisces': 6, 'Taurus': 4, 'Scorpio': 3, 'Cancer': 2, 'Virgo': 4},
    'Pisces': {'Cancer': 28, 'Scorpio': 25, 'Capricorn': 18, 'Taurus': 16, 'Virgo': 12, 'Aquarius': 8,
               'Sagittarius': 6, 'Gemini': 4, 'Aries': 3, 'Leo': 2, 'Libra': 4},
}

COMPATIBLE_PLANETS = {
    'Sun': ('Moon', 'Venus', 'Jupiter'),
    'Moon': ('Sun', 'Venus', 'Neptune'),
    'Mercury': ('Venus', 'Jupiter'),
    'Venus': ('Sun', 'Moon', 'Mercury', 'Jupiter'),
    'Mars': ('Jupiter', 'Pluto'),
    'Jupiter': ('Sun', 'Venus', 'Mercury', 'Mars'),
    'Saturn': ('Pluto', 'Uranus'),
    'Uranus': ('Saturn', 'Neptune'),
    'Neptune': ('Moon', 'Uranus'),
    'Pluto': ('Mars', 'Saturn'),
}


UNIVERSE_ADVICE = 'Sometimes the universe has a sense of humor. Embrace the journey!'

BIRTHDAY_RESULTS = Scale([15, 25, 35, 45, 55, 65, 75, 85, 95], [
    MatchResult('Birthday Plot Twist! 🎭',
                'Well, this is unexpected! But the best stories often have surprising beginnings.',
                UNIVERSE_ADVICE),
    MatchResult('Adventure Birthday Awaits! 🗺️',
                'This birthday combination is an adventure waiting to happen!',
                'Every journey starts somewhere.'),
    MatchResult('Unique Birthday Pair! 🌟', "There's something special about this combination.",
                "Celebrate the uniqueness of your birthdays. It's one of a kind!"),
    MatchResult('Mystery Birthday Combination! 🔮', 'Your birth dates have an intriguing dynamic.',
                'Let this combination unfold naturally. Mystery can be beautiful!'),
    MatchResult('Opposite Birthdays! ⚡', 'Your birthdays are quite different, but that might be exactly what you need!',
                'Sometimes the best combinations come from opposites.'),
    MatchResult('Interesting Birthday Mix! 🎨', "There's something unique about this combination.",
                'Embrace the uniqueness of your birthday combination. It could be special!'),
    MatchResult('Nice Birthday Balance! ⚖️', "There's potential for a good connection.",
                'Focus on the positive aspects of your birthday combination.'),
    MatchResult('Great Birthday Harmony! 🎉', "There's a natural rhythm between your birth dates.",
                'This combination has great potential. Nurture this special connection!'),
    MatchResult('Perfect Birthday Match! 🌟', 'Your birthdays complement each other beautifully!',
                'The stars are clearly aligned!'),
    MatchResult('Birthday Soulmates! 🎂', 'Your birthdays are perfectly aligned!',
                'This birthday combination is incredibly rare. Cherish this special connection!'),
])

CRUSH_RESULTS = Scale(SCORE_CUTOFFS, [
    MatchResult('Plot Twist! 🎭', 'Well, this is unexpected! The best stories often have surprising beginnings.',
                UNIVERSE_ADVICE),
    MatchResult('Mild Interest! 🤔', "You're curious but not head-over-heels yet.",
                'Keep an open mind. Sometimes the best connections start slowly!'),
    MatchResult('Friendly Crush! 😊', 'This feels more like a friendly crush! You enjoy their company.',
                'Enjoy the friendship. Sometimes that is exactly what you both need!'),
    MatchResult('Mystery Crush! 🔮', "You're not sure what it is, but something's there.",
                'Give it time to develop. Some crushes need space to grow!'),
    MatchResult('Curious Crush! 🔍', "There's something intriguing that draws you in.",
                'Explore this curiosity. The best crushes often start with intrigue!'),
    MatchResult('Potential Crush! ⚡', 'This could definitely develop into something more.',
                'Focus on building a genuine connection and the crush will follow naturally!'),
    MatchResult('Growing Crush! 🌱', 'This crush is growing stronger every day!',
                'Keep being yourself and let this crush blossom!'),
    MatchResult('Sweet Crush! 🍯', "There's definitely something special brewing here.",
                'Take it slow and let the chemistry build naturally.'),
    MatchResult('Major Crush! 💕', 'This crush is serious business and totally worth pursuing.',
                'The signs are all there. Time to step up your flirting game!'),
    MatchResult('Crush Alert! 💥', 'This is more than a crush. Your heart is doing backflips!',
                'Stop overthinking and make your move! This level of compatibility is rare!'),
])

FRIENDSHIP_RESULTS = Scale(SCORE_CUTOFFS, [
    MatchResult('Unique Connection! 🎭', 'Sometimes the most unexpected friendships are the best.',
                UNIVERSE_ADVICE),
    MatchResult('Different Worlds! 🌍', "You're from different worlds, but that can be interesting!",
                'Embrace your differences. They might be your greatest strength!'),
    MatchResult('Nice People! 👍', "There's mutual respect and that's a good start.",
                'Keep being kind to each other. Every friendship starts somewhere!'),
    MatchResult('Friendly Vibes! 😄', "You enjoy each other's company and that's nice.",
                'Enjoy the casual friendship!'),
    MatchResult('Acquaintances Plus! 👋', "There's something there worth exploring.",
                'Keep an open mind and see where this connection leads!'),
    MatchResult('Potential Friends! 🌱', 'With some effort, this could grow into a great friendship.',
                'Spend more time together and find common ground.'),
    MatchResult('Good Friends! 😊', "There's definitely a solid friendship foundation here.",
                'Focus on shared interests and activities to strengthen your bond!'),
    MatchResult('Great Buddies! 🎉', 'You two click really well!',
                'Keep being awesome together. This friendship is going places!'),
    MatchResult('Amazing Friends! 🌟', 'You two make an incredible team!',
                "Keep investing in this friendship. It's worth every moment!"),
    MatchResult('Best Friends Forever! 🤝', 'This is friendship goals!',
                "Cherish this friendship. It's the kind that lasts a lifetime!"),
])

MARRIAGE_RESULTS = Scale(SCORE_CUTOFFS, [
    MatchResult('Plot Twist Marriage! 🎭', 'Well, this is unexpected! The best stories often have surprising beginnings.',
                UNIVERSE_ADVICE),
    MatchResult('Adventure Marriage! 🗺️', 'This journey will be full of surprises.',
                'Embrace the adventure. This marriage will be an exciting journey!'),
    MatchResult('Unique Marriage! 🌟', 'This partnership will be one of a kind.',
                'Celebrate your uniqueness!'),
    MatchResult('Complex Marriage! 🔮', 'There are many layers to explore and understand.',
                'Take time to explore your differences. This marriage could surprise you!'),
    MatchResult('Challenging Marriage! ⚡', 'There are challenges, but they can lead to growth and strength.',
                'Embrace the challenges as opportunities for growth.'),
    MatchResult('Promising Marriage! 🌱', 'There is potential here with the right approach.',
                'Take time to understand each other better.'),
    MatchResult('Good Marriage Potential! 🤝', 'With effort and understanding, this could work well.',
                'Focus on communication and compromise.'),
    MatchResult('Great Marriage Foundation! 🏠', "There's a strong foundation for a successful partnership.",
                'Work together to build on your strengths!'),
    MatchResult('Excellent Marriage Potential! 🌟', 'This partnership has all the ingredients for success.',
                'Focus on communication and mutual respect!'),
    MatchResult('Perfect Marriage Match! 💍', 'This is the kind of union that legends are made of.',
                'Cherish and nurture this special bond!'),
])

NAME_RESULTS = Scale(SCORE_CUTOFFS, [
    MatchResult('Plot Twist! 🎭', 'Well, this is unexpected! The best stories often have surprising beginnings.',
                UNIVERSE_ADVICE),
    MatchResult('Adventure Awaits! 🗺️', 'This name combination is an adventure waiting to happen!',
                'Every journey starts somewhere.'),
    MatchResult('Unique Pair! 🌟', "There's something special about this combination.",
                "Celebrate the uniqueness of your name combination. It's one of a kind!"),
    MatchResult('Mystery Combination! 🔮', 'Your names have an intriguing dynamic.',
                'Let this name combination unfold naturally.'),
    MatchResult('Opposites Attract! ⚡', 'Your names are quite different, but that might be exactly what you need!',
                'Sometimes the best combinations come from opposites.'),
    MatchResult('Interesting Mix! 🎨', "There's something unique about this combination.",
                'Embrace the uniqueness of your name combination!'),
    MatchResult('Nice Balance! ⚖️', "There's potential for a good connection.",
                'Focus on the positive aspects of your name combination.'),
    MatchResult('Great Harmony! 🎵', "There's a natural rhythm and flow between your names.",
                'These names complement each other beautifully!'),
    MatchResult('Perfect Match! ✨', 'Your names flow together like poetry!',
                'The universe is clearly on your side!'),
    MatchResult('Name Soulmates! 💫', 'Your names are practically written in the stars together!',
                "These names were meant to be together. Don't let this opportunity slip away!"),
])

StrengthResult = namedtuple('StrengthResult', MatchResult._fields + ('strengths', 'improvements'))

EARLY_STRENGTHS = ['Some Communication', 'Basic Trust', 'Potential', 'Interest', 'Effort']
EARLY_IMPROVEMENTS = ['Major communication improvements', 'Build trust', 'Strengthen compatibility',
                      'Enhance emotional connection', 'Focus on fundamentals']

STRENGTH_RESULTS = Scale(SCORE_CUTOFFS, [
    StrengthResult('New Beginning! 🌅', 'Every journey starts somewhere, and this could be the start of something beautiful.',
                   'Focus on building a strong foundation.', EARLY_STRENGTHS, EARLY_IMPROVEMENTS),
    StrengthResult('Rough Waters! 🌊', 'Sometimes the strongest bonds are forged in difficult times.',
                   'Focus on the basics: communication, respect and understanding.',
                   EARLY_STRENGTHS, EARLY_IMPROVEMENTS),
    StrengthResult('Challenging Times! 🌪️', 'Challenges can lead to growth and strength.',
                   'Focus on understanding and patience.', EARLY_STRENGTHS, EARLY_IMPROVEMENTS),
    StrengthResult('Needs Attention! ⚠️', 'There are areas that require focus and improvement.',
                   'Communication, trust and mutual respect are key!',
                   ['Basic Communication', 'Some Trust', 'Potential', 'Interest', 'Effort'], EARLY_IMPROVEMENTS),
    StrengthResult('Work in Progress! 🔧', 'There are challenges, but also opportunities for growth.',
                   'Embrace the challenges as opportunities for growth.',
                   ['Some Communication', 'Basic Trust', 'Potential Growth', 'Mutual Interest', 'Willingness to Try'],
                   ['Improve communication significantly', 'Build trust', 'Strengthen compatibility',
                    'Enhance emotional connection']),
    StrengthResult('Growing Stronger! 📈', "There's potential here with the right approach and effort.",
                   'Take time to understand each other better.',
                   ['Developing Communication', 'Building Trust', 'Exploring Compatibility', 'Growing Together',
                    'Learning About Each Other'],
                   ['Strengthen communication', 'Build deeper trust', 'Improve compatibility',
                    'Enhance emotional connection']),
    StrengthResult('Good Potential! 🌱', 'With effort and understanding, this could grow stronger.',
                   'Focus on communication and mutual understanding.',
                   ['Basic Communication', 'Some Trust', 'Potential Compatibility', 'Emotional Awareness',
                    'Shared Values'],
                   ['Improve communication', 'Build trust', 'Strengthen compatibility',
                    'Deepen emotional connection']),
    StrengthResult('Strong Foundation! 🏗️', "There's good strength here with room for growth.",
                   'Build on your solid foundation.',
                   ['Good Communication', 'Solid Trust', 'Decent Compatibility', 'Emotional Support',
                    'Shared Interests'],
                   ['Enhance communication', 'Build deeper trust', 'Strengthen emotional connection']),
    StrengthResult('Rock Solid! 🪨', 'This partnership has excellent foundations and great potential.',
                   'Focus on maintaining and building on your strengths!',
                   ['Strong Communication', 'High Trust Level', 'Good Compatibility', 'Emotional Connection',
                    'Shared Goals'],
                   ['Minor communication improvements', 'Continue building trust',
                    'Explore new activities together']),
    StrengthResult('Unbreakable Bond! 💎', 'This is the kind of bond that legends are made of.',
                   'Continue nurturing this incredible bond!',
                   ['Exceptional Communication', 'Unwavering Trust', 'Perfect Compatibility',
                    'Strong Emotional Bond', 'Shared Values'],
                   ['Continue current practices', 'Maintain the magic', 'Keep growing together']),
])

QuizResult = namedtuple('QuizResult', MatchResult._fields + ('personality_type', 'suggestions'))

QUIZ_RESULTS = Scale(SCORE_CUTOFFS, [
    QuizResult('Plot Twist Romantic! 🎭', 'The best romantic stories often have surprising beginnings.',
               'Embrace your unique romantic journey!', 'Unique Lover',
               ['Find your own romantic style', 'Express love authentically', 'Create unique moments']),
    QuizResult('Mysterious Romantic! 🔮', 'Your romantic nature is hidden but has the potential to surprise.',
               'Let your romantic side surprise those you love!', 'Enigmatic Lover',
               ['Create surprise moments', 'Express feelings uniquely', 'Plan unexpected gestures']),
    QuizResult('Reserved Romantic! 🤐', 'You feel deeply but express it in subtle and quiet ways.',
               'Find ways to express your feelings that feel comfortable!', 'Quiet Lover',
               ['Write letters or notes', 'Show love through actions', 'Plan quiet romantic moments']),
    QuizResult('Growing Romantic! 🌱', 'You can develop a deeper romantic nature with time and experience.',
               'Nurture your romantic potential.', 'Developing Lover',
               ['Explore romantic activities', 'Learn about love languages', 'Practice expressing feelings']),
    QuizResult('Practical Romantic! 💼', 'You show love through actions rather than grand displays.',
               'Combine your practical approach with some romantic gestures!', 'Action-Oriented Lover',
               ['Add romantic touches to practical gestures', 'Plan surprise moments', 'Express feelings verbally']),
    QuizResult('Romantic at Heart! 💝', 'You have a natural inclination toward love and romance.',
               'Explore your romantic side and let it grow.', 'Developing Romantic',
               ['Explore romantic activities', 'Express feelings more', 'Plan special moments']),
    QuizResult('Sweet Romantic! 🍯', 'You have a gentle and loving heart that brings warmth to relationships.',
               'Let your sweet nature shine!', 'Gentle Lover',
               ['Show small acts of kindness', 'Express appreciation', 'Create cozy moments']),
    QuizResult('Romantic Soul! 💖', 'You understand the beauty of love and express it beautifully.',
               'Nurture your romantic nature and let it flourish.', 'Romantic Idealist',
               ['Plan thoughtful gestures', 'Express feelings creatively', 'Create romantic surprises']),
    QuizResult('Hopeless Romantic! 🌹', 'Your heart is full of love and you see romance in everything.',
               'Embrace your romantic nature and let it guide your relationships!', 'Passionate Lover',
               ['Write love letters', 'Plan surprise dates', 'Express feelings openly']),
    QuizResult('Ultimate Romantic! 💕', 'You are the epitome of romance!',
               'Share your romantic nature with the world!', 'Hopeless Romantic',
               ['Write love letters', 'Plan surprise dates', 'Celebrate love daily']),
])

CRUSH_LETTERS = {'l': 6, 'o': 4, 'v': 5, 'e': 4, 'h': 3, 'a': 3, 'r': 3, 't': 3}
FRIEND_LETTERS = {'f': 4, 'r': 5, 'i': 3, 'e': 3, 'n': 3, 'd': 3, 's': 2, 'u': 2, 'p': 2, 'o': 2, 't': 2}
MARRIAGE_LETTERS = {'l': 5, 'o': 4, 'v': 5, 'e': 4, 'm': 4, 'a': 3, 'r': 3, 'i': 3, 'g': 3, 'h': 2, 'p': 2, 'n': 2}
NAME_LETTERS = {'l': 6, 'o': 4, 'v': 5, 'e': 4, 'h': 3, 'a': 3, 'r': 3, 't': 3, 's': 2, 'u': 2, 'p': 2, 'n': 2}
STRENGTH_LETTERS = {'l': 4, 'o': 3, 'v': 4, 'e': 3, 'r': 3, 's': 3, 't': 2, 'u': 2, 'h': 2, 'p': 2}
QUIZ_LETTERS = {'l': 4, 'o': 3, 'v': 5, 'e': 3, 'r': 3, 'm': 3, 'a': 2, 'n': 2, 'c': 2, 'h': 2}

NAME_ROMANTIC_WORDS = ROMANTIC_NAMES + ('love', 'heart', 'soul')
NAME_STRONG_WORDS = STRONG_NAMES + ('king', 'queen', 'prince', 'princess')
NAME_NATURE_WORDS = ('river', 'ocean', 'mountain', 'forest', 'sky', 'star', 'moon', 'sun', 'wind', 'rain',
                     'snow', 'flower', 'tree')
QUIZ_ROMANTIC_WORDS = NAME_ROMANTIC_WORDS + ('angel', 'prince', 'princess', 'king', 'queen')
ROMANTIC_ENDINGS = ('ia', 'elle', 'ette', 'ina', 'ana', 'ena', 'ora', 'ara', 'ira', 'ura')
MEMORY_KEYWORDS = ('love', 'romantic', 'beautiful', 'special', 'amazing', 'perfect', 'sweet', 'caring',
                   'passionate', 'intimate', 'heart', 'soul', 'forever', 'together', 'happiness')

CRUSH_PERSONALITIES = ['Adventurous Explorer', 'Creative Artist', 'Logical Thinker', 'Social Butterfly',
                       'Quiet Observer', 'Energetic Athlete', 'Romantic Dreamer', 'Practical Planner',
                       'Mysterious Soul', 'Funny Comedian']

CRUSH_MATRIX = {
    'Adventurous Explorer': {'Creative Artist': 15, 'Energetic Athlete': 12, 'Social Butterfly': 10,
                             'Romantic Dreamer': 8, 'Mysterious Soul': 6, 'Quiet Observer': 4,
                             'Logical Thinker': 3, 'Practical Planner': 2, 'Funny Comedian': 7},
    'Creative Artist': {'Romantic Dreamer': 16, 'Adventurous Explorer': 15, 'Mysterious Soul': 12,
                        'Social Butterfly': 8, 'Quiet Observer': 6, 'Funny Comedian': 5,
                        'Logical Thinker': 4, 'Energetic Athlete': 3, 'Practical Planner': 2},
    'Logical Thinker': {'Practical Planner': 14, 'Quiet Observer': 10, 'Mysterious Soul': 8,
                        'Social Butterfly': 6, 'Funny Comedian': 5, 'Creative Artist': 4,
                        'Adventurous Explorer': 3, 'Energetic Athlete': 2, 'Romantic Dreamer': 3},
    'Social Butterfly': {'Funny Comedian': 16, 'Adventurous Explorer': 10, 'Energetic Athlete': 8,
                         'Creative Artist': 8, 'Romantic Dreamer': 6, 'Practical Planner': 5,
                         'Logical Thinker': 6, 'Quiet Observer': 4, 'Mysterious Soul': 3},
    'Quiet Observer': {'Mysterious Soul': 14, 'Logical Thinker': 10, 'Creative Artist': 6,
                       'Practical Planner': 8, 'Romantic Dreamer': 5, 'Funny Comedian': 4,
                       'Social Butterfly': 4, 'Adventurous Explorer': 4, 'Energetic Athlete': 2},
    'Energetic Athlete': {'Adventurous Explorer': 12, 'Social Butterfly': 8, 'Funny Comedian': 6,
                          'Practical Planner': 5, 'Creative Artist': 3, 'Logical Thinker': 2,
                          'Romantic Dreamer': 4, 'Quiet Observer': 2, 'Mysterious Soul': 3},
    'Romantic Dreamer': {'Creative Artist': 16, 'Mysterious Soul': 10, 'Adventurous Explorer': 8,
                         'Social Butterfly': 6, 'Quiet Observer': 5, 'Funny Comedian': 4,
                         'Logical Thinker': 3, 'Energetic Athlete': 4, 'Practical Planner': 3},
    'Practical Planner': {'Logical Thinker': 14, 'Quiet Observer': 8, 'Energetic Athlete': 5,
                          'Social Butterfly': 5, 'Adventurous Explorer': 2, 'Creative Artist': 2,
                          'Romantic Dreamer': 3, 'Mysterious Soul': 4, 'Funny Comedian': 3},
    'Mysterious Soul': {'Creative Artist': 12, 'Romantic Dreamer': 10, 'Quiet Observer': 14,
                        'Logical Thinker': 8, 'Adventurous Explorer': 6, 'Practical Planner': 4,
                        'Social Butterfly': 3, 'Energetic Athlete': 3, 'Funny Comedian': 2},
    'Funny Comedian': {'Social Butterfly': 16, 'Adventurous Explorer': 7, 'Energetic Athlete': 6,
                       'Creative Artist': 5, 'Romantic Dreamer': 4, 'Logical Thinker': 5,
                       'Quiet Observer': 4, 'Practical Planner': 3, 'Mysterious Soul': 2},
}

FRIEND_PERSONALITIES = ['Social Butterfly', 'Quiet Observer', 'Adventurous Explorer', 'Creative Artist',
                        'Logical Thinker', 'Energetic Athlete', 'Caring Helper', 'Funny Comedian',
                        'Mysterious Soul', 'Practical Planner']

FRIEND_MATRIX = {
    'Social Butterfly': {'Funny Comedian': 18, 'Caring Helper': 15, 'Adventurous Explorer': 12,
                         'Creative Artist': 10, 'Energetic Athlete': 8, 'Practical Planner': 5,
                         'Logical Thinker': 4, 'Quiet Observer': 3, 'Mysterious Soul': 2},
    'Quiet Observer': {'Mysterious Soul': 16, 'Logical Thinker': 12, 'Practical Planner': 10,
                       'Creative Artist': 8, 'Caring Helper': 6, 'Adventurous Explorer': 4,
                       'Energetic Athlete': 3, 'Funny Comedian': 4, 'Social Butterfly': 3},
    'Adventurous Explorer': {'Energetic Athlete': 16, 'Creative Artist': 14, 'Social Butterfly': 12,
                             'Funny Comedian': 8, 'Caring Helper': 6, 'Practical Planner': 4,
                             'Logical Thinker': 3, 'Quiet Observer': 4, 'Mysterious Soul': 3},
    'Creative Artist': {'Adventurous Explorer': 14, 'Mysterious Soul': 10, 'Social Butterfly': 10,
                        'Caring Helper': 8, 'Quiet Observer': 8, 'Funny Comedian': 6,
                        'Logical Thinker': 4, 'Energetic Athlete': 3, 'Practical Planner': 2},
    'Logical Thinker': {'Practical Planner': 16, 'Quiet Observer': 12, 'Mysterious Soul': 8,
                        'Caring Helper': 6, 'Social Butterfly': 4, 'Funny Comedian': 5,
                        'Adventurous Explorer': 3, 'Energetic Athlete': 2, 'Creative Artist': 4},
    'Energetic Athlete': {'Adventurous Explorer': 16, 'Social Butterfly': 8, 'Funny Comedian': 6,
                          'Practical Planner': 5, 'Caring Helper': 4, 'Creative Artist': 3,
                          'Logical Thinker': 2, 'Quiet Observer': 3, 'Mysterious Soul': 3},
    'Caring Helper': {'Social Butterfly': 15, 'Practical Planner': 12, 'Creative Artist': 8,
                      'Quiet Observer': 6, 'Adventurous Explorer': 6, 'Logical Thinker': 6,
                      'Funny Comedian': 5, 'Energetic Athlete': 4, 'Mysterious Soul': 4},
    'Practical Planner': {'Logical Thinker': 16, 'Caring Helper': 12, 'Quiet Observer': 10,
                          'Energetic Athlete': 5, 'Social Butterfly': 5, 'Adventurous Explorer': 4,
                          'Creative Artist': 2, 'Mysterious Soul': 4, 'Funny Comedian': 3},
    'Mysterious Soul': {'Quiet Observer': 16, 'Creative Artist': 10, 'Logical Thinker': 8,
                        'Caring Helper': 4, 'Adventurous Explorer': 3, 'Practical Planner': 4,
                        'Social Butterfly': 2, 'Energetic Athlete': 3, 'Funny Comedian': 2},
    'Funny Comedian': {'Social Butterfly': 18, 'Adventurous Explorer': 8, 'Energetic Athlete': 6,
                       'Creative Artist': 6, 'Caring Helper': 5, 'Logical Thinker': 5,
                       'Quiet Observer': 4, 'Practical Planner': 3, 'Mysterious Soul': 2},
}

# Bonus for a couple's shared communication style
COMMUNICATION_STYLES = {
    'Direct and Honest': 12,
    'Gentle and Diplomatic': 11,
    'Logical and Analytical': 11,
    'Emotional and Expressive': 10,
    'Quiet and Reserved': 8,
    'Outgoing and Social': 10,
    'Practical and Down-to-Earth': 9,
    'Creative and Imaginative': 8,
    'Supportive and Encouraging': 14,
    'Challenging and Motivational': 9,
}

MARRIAGE_VALUES = ('family', 'love', 'trust', 'respect', 'communication', 'loyalty', 'commitment', 'honesty',
                   'support', 'understanding')
RELATIONSHIP_VALUES = ('love', 'trust', 'respect', 'communication', 'loyalty', 'commitment', 'honesty', 'support',
                       'understanding', 'patience', 'forgiveness', 'compromise')

QUALITY_LEVELS = ['Excellent', 'Very Good', 'Good', 'Fair', 'Poor', 'Very Poor']
QUALITY_POINTS = dict(zip(QUALITY_LEVELS, [22, 18, 14, 8, 2, -3]))
CONFLICT_POINTS = dict(zip(QUALITY_LEVELS, [18, 15, 12, 6, 1, -2]))

ROMANTIC_ACTIVITIES = {
    'Candlelit dinner': 18, 'Stargazing': 16, 'Dancing': 12, 'Writing love letters': 22, 'Surprise gifts': 17,
    'Long walks': 10, 'Cooking together': 11, 'Watching sunsets': 14, 'Picnics': 9, 'Traveling together': 16,
}
LOVE_LANGUAGES = {
    'Words of Affirmation': 15, 'Acts of Service': 10, 'Receiving Gifts': 12, 'Quality Time': 18,
    'Physical Touch': 11,
}
ROMANTIC_STYLES = {
    'Grand gestures': 18, 'Small daily acts': 10, 'Creative surprises': 15, 'Traditional romance': 12,
    'Adventure romance': 11, 'Quiet moments': 8, 'Public displays': 9, 'Private expressions': 10,
    'Spontaneous acts': 14, 'Planned surprises': 11,
}
IDEAL_DATES = {
    'Fancy restaurant dinner': 15, 'Cozy home movie night': 10, 'Adventure hiking trip': 11,
    'Art museum visit': 12, 'Beach sunset walk': 14, 'Cooking class together': 11, 'Concert or show': 10,
    'Weekend getaway': 16, 'Picnic in the park': 9, 'Dancing lessons': 12,
}

# Birthday weights follow the zodiac table on a gentler scale
BIRTHDAY_SIGN_POINTS = {28: 18, 25: 16, 18: 12, 16: 10, 12: 8, 8: 6, 6: 4, 5: 2, 4: 3, 3: 2, 2: 1}

# (month, day) each sign starts on, in calendar order
SIGN_STARTS = [
    (1, 20, 'Aquarius'), (2, 19, 'Pisces'), (3, 21, 'Aries'), (4, 20, 'Taurus'), (5, 21, 'Gemini'),
    (6, 21, 'Cancer'), (7, 23, 'Leo'), (8, 23, 'Virgo'), (9, 23, 'Libra'), (10, 23, 'Scorpio'),
    (11, 22, 'Sagittarius'), (12, 22, 'Capricorn'),
]

PartnerName = namedtuple('PartnerName', ['name', 'meaning', 'origin', 'gender', 'compatibility'])

PARTNER_NAMES = [
    PartnerName('Alexander', 'Defender of the people', 'Greek', 'Male', 95),
    PartnerName('Sebastian', 'Venerable, revered', 'Greek', 'Male', 88),
    PartnerName('Gabriel', 'God is my strength', 'Hebrew', 'Male', 87),
    PartnerName('Lucas', 'Light', 'Latin', 'Male', 89),
    PartnerName('Mateo', 'Gift of God', 'Hebrew', 'Male', 86),
    PartnerName('Ethan', 'Strong, firm', 'Hebrew', 'Male', 88),
    PartnerName('Noah', 'Rest, comfort', 'Hebrew', 'Male', 85),
    PartnerName('Liam', 'Strong-willed warrior', 'Irish', 'Male', 87),
    PartnerName('William', 'Resolute protector', 'German', 'Male', 91),
    PartnerName('Henry', 'Estate ruler', 'German', 'Male', 88),
    PartnerName('Jack', 'God is gracious', 'English', 'Male', 86),
    PartnerName('Owen', 'Young warrior', 'Welsh', 'Male', 87),
    PartnerName('Anthony', 'Priceless one', 'Latin', 'Male', 87),
    PartnerName('David', 'Beloved', 'Hebrew', 'Male', 90),
    PartnerName('Isabella', 'Devoted to God', 'Hebrew', 'Female', 92),
    PartnerName('Olivia', 'Olive tree', 'Latin', 'Female', 90),
    PartnerName('Sophia', 'Wisdom', 'Greek', 'Female', 94),
    PartnerName('Emma', 'Universal', 'German', 'Female', 91),
    PartnerName('Luna', 'Moon', 'Latin', 'Female', 93),
    PartnerName('Aria', 'Air, song', 'Italian', 'Female', 92),
    PartnerName('Mia', 'Mine', 'Italian', 'Female', 90),
    PartnerName('Charlotte', 'Free woman', 'French', 'Female', 88),
    PartnerName('Harper', 'Harp player', 'English', 'Female', 87),
    PartnerName('Evelyn', 'Desired', 'English', 'Female', 90),
    PartnerName('Grace', 'Grace of God', 'Latin', 'Female', 92),
    PartnerName('Chloe', 'Blooming', 'Greek', 'Female', 90),
    PartnerName('Scarlett', 'Red', 'English', 'Female', 89),
    PartnerName('Aanya', 'Grace', 'Indian', 'Female', 90),
    PartnerName('Priya', 'Beloved', 'Indian', 'Female', 92),
    PartnerName('Diya', 'Lamp, light', 'Indian', 'Female', 89),
    PartnerName('Kavya', 'Poetry', 'Indian', 'Female', 88),
    PartnerName('Aarohi', 'Musical tune', 'Indian', 'Female', 89),
    PartnerName('Alex', 'Defender of the people', 'Greek', 'Non-binary', 88),
    PartnerName('Jordan', 'To flow down', 'Hebrew', 'Non-binary', 87),
    PartnerName('Taylor', 'Tailor', 'English', 'Non-binary', 86),
    PartnerName('Casey', 'Brave', 'Irish', 'Non-binary', 89),
    PartnerName('Quinn', 'Wise', 'Irish', 'Non-binary', 90),
    PartnerName('Sage', 'Wise one', 'Latin', 'Non-binary', 89),
    PartnerName('River', 'Stream of water', 'English', 'Non-binary', 88),
    PartnerName('Phoenix', 'Mythical bird', 'Greek', 'Non-binary', 91),
]

PARTNER_GENDERS = ['Any', 'Male', 'Female', 'Non-binary']
PARTNER_ORIGINS = ['Any'] + sorted({entry.origin for entry in PARTNER_NAMES})
PARTNER_PERSONALITIES = {
    'Romantic Dreamer': 5, 'Adventurous Explorer': 3, 'Creative Artist': 4, 'Logical Thinker': 2,
    'Social Butterfly': 6, 'Quiet Observer': 1, 'Energetic Athlete': 3, 'Mysterious Soul': 4,
    'Funny Comedian': 7, 'Caring Helper': 5, 'Practical Planner': 2, 'Spiritual Seeker': 4,
}
PARTNER_VERDICTS = Scale([60, 70, 80, 90], [
    'This name has interesting compatibility! Sometimes opposites attract in the most beautiful ways.',
    'This name shows decent compatibility! There is potential for a good connection.',
    'This name has good compatibility with yours! This could be a promising match.',
    "This name shows excellent compatibility! There's something special about this combination.",
    'This name has incredible compatibility with yours! The stars have truly aligned.',
])


def variety(*parts, spread):
    """A repeatable pseudo-random bonus in [0, spread) for the given inputs."""
    seed = '|'.join(str(part) for part in parts)
    return random.Random(seed).random() * spread


def normalize_name(name):
    return re.sub(r'\s', '', name.lower())


def _name_pair(name1, name2):
    first, second = normalize_name(name1), normalize_name(name2)
    if not first or not second:
        raise ValueError("both names are required")
    return first, second


def _count(pattern, text):
    return len(re.findall(pattern, text))


def _vowels(text):
    return _count('[aeiou]', text)


def _step_bonus(diff, steps):
    for limit, bonus in steps:
        if diff <= limit:
            return bonus
    return 0


def _threshold_bonus(value, steps):
    """Bonus for the first ``(minimum, bonus)`` step that ``value`` reaches."""
    for minimum, bonus in steps:
        if value >= minimum:
            return bonus
    return 0


def _letter_bonus(text, bonuses):
    return sum(bonus for letter, bonus in bonuses.items() if letter in text)


def _shared_letters(first, second):
    return len(set(first) & set(second))


def _ending_bonus(first, second, bonuses):
    same, last, second_last = bonuses
    if first[-2:] == second[-2:]:
        return same
    if first[-1] == second[-1]:
        return last
    if len(first) > 1 and len(second) > 1 and first[-2] == second[-2]:
        return second_last
    return 0


def _same_life_stage(age1, age2, stages):
    return any(low <= age1 <= high and low <= age2 <= high for low, high in stages)


def _list_items(text):
    if not text:
        return []
    return [item.strip().lower() for item in text.split(',') if item.strip()]


def _result(score, scale):
    result = {'percentage': score}
    result.update(scale.classify(score)._asdict())
    return result


def love_percentage(name1, name2):
    first, second = _name_pair(name1, name2)
    combined = first + second
    score = 30

    score += _step_bonus(abs(len(first) - len(second)), [(0, 15), (2, 10), (4, 5), (6, 2)])
    score += _step_bonus(abs(_vowels(first) - _vowels(second)), [(0, 12), (1, 8), (2, 4)])
    consonants = '[bcdfghjklmnpqrstvwxyz]'
    score += _step_bonus(abs(_count(consonants, first) - _count(consonants, second)), [(0, 10), (1, 6), (2, 3)])

    score += _shared_letters(first, second) * 3
    score += _letter_bonus(combined, LETTER_BONUS)
    score += _ending_bonus(first, second, (12, 8, 4))

    if re.search(r'(.)\1', first) and re.search(r'(.)\1', second):
        score += 8
    if any(name in first or name in second for name in ROMANTIC_NAMES):
        score += 10
    if any(name in first or name in second for name in STRONG_NAMES):
        score += 8

    # seeded on the sorted pair so the order of the names does not matter
    score += variety(*sorted([first, second]), spread=35)
    return _result(round(clamp(score, 5, 95)), LOVE_RESULTS)


def element_match(first, second):
    if first.element == second.element:
        return 'Same Element'
    if frozenset([first.element, second.element]) in COMPATIBLE_ELEMENTS:
        return 'Compatible Elements'
    return 'Different Elements'


def zodiac_match(sign1, sign2):
    try:
        first, second = SIGNS_BY_NAME[sign1], SIGNS_BY_NAME[sign2]
    except KeyError as exc:
        raise ValueError(f"unknown zodiac sign: {exc.args[0]}") from None

    score = 20
    if first.name == second.name:
        score += 35

    elements = frozenset([first.element, second.element])
    if first.element == second.element:
        score += 22
    elif elements in COMPATIBLE_ELEMENTS:
        score += 18
    elif elements in CHALLENGING_ELEMENTS:
        score += 8

    score += SIGN_MATRIX[first.name].get(second.name, 2)
    score += 15 if first.modality == second.modality else 8
    score += 8 if first.polarity != second.polarity else 4

    if first.planet == second.planet:
        score += 10
    elif second.planet in COMPATIBLE_PLANETS.get(first.planet, ()):
        score += 6

    score += variety(first.name, second.name, spread=25)
    result = _result(round(clamp(score, 5, 95)), ZODIAC_RESULTS)
    result.update({
        'element_match': element_match(first, second),
        'elements': f"{first.element} + {second.element}",
    })
    return result


def sign_for_date(day):
    sign = 'Capricorn'
    for month, start, name in SIGN_STARTS:
        if (day.month, day.day) >= (month, start):
            sign = name
    return sign


def season(day):
    if 3 <= day.month <= 5:
        return 'spring'
    if 6 <= day.month <= 8:
        return 'summer'
    if 9 <= day.month <= 11:
        return 'autumn'
    return 'winter'


def life_path_number(day):
    """Day, month and year added together and reduced to a single digit."""
    total = day.day + day.month + day.year
    while total > 9:
        total = sum(int(digit) for digit in str(total))
    return total


def birthday_compatibility(birthday1, birthday2):
    score = 20
    same_month = birthday1.month == birthday2.month
    if same_month and birthday1.day == birthday2.day:
        score += 40
    if same_month:
        score += 18
    if birthday1.day == birthday2.day:
        score += 12
    if birthday1.weekday() == birthday2.weekday():
        score += 8

    age_gap = abs(birthday1.year - birthday2.year)
    score += _step_bonus(age_gap, [(0, 15), (1, 12), (2, 10), (3, 8), (5, 6), (8, 4), (12, 3), (20, 2), (30, 1)])
    if season(birthday1) == season(birthday2):
        score += 10

    sign1, sign2 = sign_for_date(birthday1), sign_for_date(birthday2)
    score += BIRTHDAY_SIGN_POINTS.get(SIGN_MATRIX[sign1].get(sign2), 2)

    path_gap = abs(life_path_number(birthday1) - life_path_number(birthday2))
    score += _step_bonus(path_gap, [(0, 15), (1, 10), (2, 6), (3, 3)])

    month_gap = abs(birthday1.month - birthday2.month)
    score += {0: 8, 1: 5, 11: 5, 2: 3, 10: 3, 3: 2, 9: 2, 6: 1}.get(month_gap, 0)

    day_gap = abs(birthday1.timetuple().tm_yday - birthday2.timetuple().tm_yday)
    score += _step_bonus(day_gap, [(0, 12), (7, 8), (30, 5), (60, 3), (90, 2), (180, 1)])

    score += variety(*sorted([birthday1.isoformat(), birthday2.isoformat()]), spread=25)
    result = _result(round(clamp(score, 5, 95)), BIRTHDAY_RESULTS)
    result.update({
        'signs': f"{sign1} + {sign2}",
        'age_difference': age_gap,
    })
    return result


def crush_compatibility(your_name, crush_name, your_age=None, crush_age=None,
                        your_personality='', crush_personality=''):
    first, second = _name_pair(your_name, crush_name)
    score = 25
    score += _step_bonus(abs(len(first) - len(second)), [(0, 12), (2, 8), (4, 4), (6, 2)])
    score += _step_bonus(abs(_vowels(first) - _vowels(second)), [(0, 10), (1, 6), (2, 3)])
    score += _shared_letters(first, second) * 2.5

    if your_age and crush_age:
        score += _step_bonus(abs(your_age - crush_age), [(0, 15), (1, 12), (2, 10), (3, 8), (5, 6), (8, 4),
                                                         (12, 2), (20, 1)])
        if _same_life_stage(your_age, crush_age, [(18, 25), (26, 35), (36, 50)]):
            score += 5

    if your_personality and crush_personality:
        if your_personality == crush_personality:
            score += 18
        else:
            score += CRUSH_MATRIX.get(your_personality, {}).get(crush_personality, 3)

    score += _letter_bonus(first + second, CRUSH_LETTERS)
    score += _ending_bonus(first, second, (8, 5, 3))
    score += variety('crush', first, second, your_personality, crush_personality, spread=30)
    return _result(round(clamp(score, 5, 95)), CRUSH_RESULTS)


def friendship_compatibility(friend1, friend2, friend1_age=None, friend2_age=None,
                             friend1_personality='', friend2_personality='', shared_interests=''):
    first, second = _name_pair(friend1, friend2)
    score = 35
    score += _step_bonus(abs(len(first) - len(second)), [(0, 10), (2, 7), (4, 4), (6, 2)])
    score += _step_bonus(abs(_vowels(first) - _vowels(second)), [(0, 8), (1, 5), (2, 3)])
    score += _shared_letters(first, second) * 2

    if friend1_age and friend2_age:
        # friends can have bigger age gaps, so every gap scores something
        score += _step_bonus(abs(friend1_age - friend2_age), [(0, 18), (2, 15), (5, 12), (8, 10), (12, 8),
                                                              (18, 6), (25, 4), (35, 2)]) or 1
        if _same_life_stage(friend1_age, friend2_age, [(18, 25), (26, 35), (36, 50), (51, 200)]):
            score += 5

    if friend1_personality and friend2_personality:
        if friend1_personality == friend2_personality:
            score += 20
        else:
            score += FRIEND_MATRIX.get(friend1_personality, {}).get(friend2_personality, 4)

    interests = _list_items(shared_interests)
    score += len(interests) * 2.5
    score += _threshold_bonus(len(interests), [(5, 5), (3, 3), (2, 2)])

    score += _letter_bonus(first + second, FRIEND_LETTERS)
    score += _ending_bonus(first, second, (6, 4, 2))
    score += variety('friends', *sorted([first, second]), spread=25)
    result = _result(round(clamp(score, 5, 95)), FRIENDSHIP_RESULTS)
    result['shared_interests'] = len(interests)
    return result


def _values_bonus(values, important):
    bonus = len(values) * 2.5
    bonus += _threshold_bonus(len(values), [(5, 8), (3, 5), (2, 3)])
    bonus += sum(3 for value in values if value in important)
    return bonus


def marriage_compatibility(partner1, partner2, partner1_age=None, partner2_age=None,
                           relationship_years=None, shared_values='', communication_style=''):
    first, second = _name_pair(partner1, partner2)
    score = 30
    score += _step_bonus(abs(len(first) - len(second)), [(0, 12), (2, 8), (4, 5), (6, 3)])
    score += _step_bonus(abs(_vowels(first) - _vowels(second)), [(0, 10), (1, 6), (2, 3)])
    score += _shared_letters(first, second) * 2.5

    if partner1_age and partner2_age:
        score += _step_bonus(abs(partner1_age - partner2_age), [(0, 18), (2, 15), (5, 12), (8, 8), (12, 5),
                                                                (18, 3), (25, 1)])
        if _same_life_stage(partner1_age, partner2_age, [(25, 35), (36, 45), (46, 60)]):
            score += 8

    if relationship_years:
        score += _threshold_bonus(relationship_years, [(10, 25), (7, 20), (5, 15), (3, 12), (2, 8), (1, 5)])

    values = _list_items(shared_values)
    score += _values_bonus(values, MARRIAGE_VALUES)
    score += COMMUNICATION_STYLES.get(communication_style, 0)

    score += _letter_bonus(first + second, MARRIAGE_LETTERS)
    score += _ending_bonus(first, second, (8, 5, 3))
    score += variety('marriage', *sorted([first, second]), spread=25)
    return _result(round(clamp(score, 5, 95)), MARRIAGE_RESULTS)


def name_compatibility(name1, name2):
    first, second = _name_pair(name1, name2)
    score = 25
    score += _step_bonus(abs(len(first) - len(second)), [(0, 18), (1, 15), (2, 12), (3, 8), (4, 5), (6, 3), (8, 1)])
    vowel_gap = abs(_vowels(first) - _vowels(second))
    score += _step_bonus(vowel_gap, [(0, 12), (1, 8), (2, 5), (3, 3)])
    consonants = '[bcdfghjklmnpqrstvwxyz]'
    score += _step_bonus(abs(_count(consonants, first) - _count(consonants, second)),
                         [(0, 12), (1, 8), (2, 5), (3, 3)])

    shared = _shared_letters(first, second)
    score += shared * 2.5 + _threshold_bonus(shared, [(5, 8), (3, 5), (2, 3)])
    score += _letter_bonus(first + second, NAME_LETTERS)

    if re.search(r'(.)\1', first) and re.search(r'(.)\1', second):
        score += 8
    # syllables are counted as vowels
    score += _step_bonus(vowel_gap, [(0, 10), (1, 6), (2, 3)])
    score += _ending_bonus(first, second, (12, 8, 4))
    if first[:2] == second[:2]:
        score += 8
    elif first[0] == second[0]:
        score += 4

    for words, bonus in ((NAME_ROMANTIC_WORDS, 8), (NAME_STRONG_WORDS, 6), (NAME_NATURE_WORDS, 5)):
        if any(word in first or word in second for word in words):
            score += bonus

    score += sum((Counter(first) & Counter(second)).values()) * 1.5
    score += variety('names', *sorted([first, second]), spread=30)
    result = _result(round(clamp(score, 5, 95)), NAME_RESULTS)
    result['shared_letters'] = shared
    return result


def quality_multiplier(*levels):
    """Scale the score up for mostly excellent answers and down for poor ones."""
    excellent = levels.count('Excellent')
    very_good = levels.count('Very Good')
    poor = sum(1 for level in levels if level in ('Poor', 'Very Poor'))
    if excellent >= 2:
        return 1.3
    if excellent and very_good:
        return 1.2
    if very_good >= 2:
        return 1.15
    if levels.count('Good') >= 2:
        return 1.05
    if poor >= 2:
        return 0.8
    if poor:
        return 0.9
    return 1.0


def relationship_strength(partner1, partner2, relationship_years=None, communication='Good', trust='Good',
                          conflict_resolution='Good', shared_values=''):
    first, second = _name_pair(partner1, partner2)
    for level in (communication, trust, conflict_resolution):
        if level not in QUALITY_POINTS:
            raise ValueError(f"unknown quality level: {level!r}")

    score = 25
    score += _step_bonus(abs(len(first) - len(second)), [(0, 8), (2, 6), (4, 4), (6, 2)])
    score += _step_bonus(abs(_vowels(first) - _vowels(second)), [(0, 6), (1, 4), (2, 2)])
    score += _shared_letters(first, second) * 1.5
    if relationship_years:
        score += _threshold_bonus(relationship_years, [(15, 25), (10, 20), (7, 16), (5, 12), (3, 8), (2, 5), (1, 3)])

    score += QUALITY_POINTS[communication] + QUALITY_POINTS[trust] + CONFLICT_POINTS[conflict_resolution]
    score += _values_bonus(_list_items(shared_values), RELATIONSHIP_VALUES)
    score *= quality_multiplier(communication, trust, conflict_resolution)

    score += _letter_bonus(first + second, STRENGTH_LETTERS)
    score += _ending_bonus(first, second, (5, 3, 2))
    score += variety('strength', *sorted([first, second]), spread=20)
    return _result(round(clamp(score, 5, 95)), STRENGTH_RESULTS)


def romantic_quiz(name, age=None, activity='', love_language='', romantic_style='', ideal_date='', memory=''):
    word = normalize_name(name)
    if not word:
        raise ValueError("a name is required")

    score = 20
    score += _vowels(word) * 2.5
    score += min(len(word) * 1.8, 25)
    if age:
        score += _threshold_bonus(age, [(66, 8), (51, 12), (36, 15), (26, 18), (18, 12)])

    for answer, bonuses in ((activity, ROMANTIC_ACTIVITIES), (love_language, LOVE_LANGUAGES),
                            (romantic_style, ROMANTIC_STYLES), (ideal_date, IDEAL_DATES)):
        if answer:
            score += bonuses.get(answer, 6)

    if memory:
        score += _threshold_bonus(len(memory), [(150, 20), (100, 15), (75, 12), (50, 8), (25, 5), (10, 3)])
        lowered = memory.lower()
        score += sum(2 for keyword in MEMORY_KEYWORDS if keyword in lowered)

    score += _letter_bonus(word, QUIZ_LETTERS)
    if any(pattern in word for pattern in QUIZ_ROMANTIC_WORDS):
        score += 8
    vowel_pattern = re.sub('[^aeiou]', '', word)
    if len(vowel_pattern) >= 3:
        score += 5
    if any(pair in vowel_pattern for pair in ('ae', 'ea', 'ou')):
        score += 3
    if any(ending in word[-3:] for ending in ROMANTIC_ENDINGS):
        score += 6

    score += variety('quiz', word, activity, love_language, romantic_style, ideal_date, spread=25)
    return _result(round(clamp(score, 5, 95)), QUIZ_RESULTS)


def _partner_pool(gender, origin):
    pool = PARTNER_NAMES
    if gender and gender != 'Any':
        pool = [entry for entry in pool if entry.gender == gender] or pool
    if origin and origin != 'Any':
        pool = [entry for entry in pool if entry.origin == origin] or pool
    return pool


def future_partner_name(your_name='', preferred_gender='Any', preferred_origin='Any', personality=''):
    """Pick a name from the matching pool; an origin with no matches falls back to the gender filter."""
    word = normalize_name(your_name or '')
    pool = _partner_pool(preferred_gender, preferred_origin)
    rng = random.Random('|'.join(['partner', word, preferred_gender, preferred_origin, personality]))
    choice = rng.choice(pool)

    compatibility = choice.compatibility + PARTNER_PERSONALITIES.get(personality, 0)
    if word:
        compatibility += _shared_letters(word, choice.name.lower()) * 2
        compatibility += _step_bonus(abs(len(word) - len(choice.name)), [(2, 3), (4, 1)])
    compatibility = round(clamp(compatibility, 50, 99))

    return {
        'name': choice.name,
        'meaning': choice.meaning,
        'origin': choice.origin,
        'compatibility': compatibility,
        'description': PARTNER_VERDICTS.classify(compatibility),
    }

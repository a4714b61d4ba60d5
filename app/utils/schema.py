"""
schema.org JSON-LD builders for search engines.

Every builder returns a plain dict; templates embed them with ``|tojson``.
Site identity comes from the SITE_NAME and SITE_URL config values.
"""

from datetime import date

from flask import current_app

from app.calculators.registry import CALCULATORS, get_category

CONTEXT = 'https://schema.org'

# Used when a calculator ships no FAQs of its own
GENERIC_FAQS = [
    ('Is this calculator free?',
     'Yes. Every calculator on the site is free to use and needs no account.'),
    ('How accurate are the results?',
     'Results use standard published formulas. They are estimates, so check important decisions with a professional.'),
    ('Do you store my inputs?',
     'No. Inputs are only used to work out the result and are not saved.'),
    ('Can I use it on my phone?',
     'Yes. The calculators work in any modern browser on desktop or mobile.'),
]


def _site():
    return current_app.config['SITE_NAME'], current_app.config['SITE_URL']


def website_schema():
    name, url = _site()
    return {
        '@context': CONTEXT,
        '@type': 'WebSite',
        'name': name,
        'alternateName': 'MegaCalc Hub',
        'url': url,
        'potentialAction': {
            '@type': 'SearchAction',
            'target': f"{url}/search?q={{search_term_string}}",
            'query-input': 'required name=search_term_string',
        },
    }


def organization_schema():
    name, url = _site()
    return {
        '@context': CONTEXT,
        '@type': 'Organization',
        'name': name,
        'url': url,
        'logo': f"{url}/logo.png",
    }


def calculator_schema(calculator):
    name, url = _site()
    category = get_category(calculator.category)
    return {
        '@context': CONTEXT,
        '@type': 'WebApplication',
        'name': calculator.name,
        'description': calculator.description,
        'url': f"{url}{calculator.url}",
        'applicationCategory': f"{category['name']} Calculator" if category else 'Calculator',
        'operatingSystem': 'Any',
        'offers': {'@type': 'Offer', 'price': '0', 'priceCurrency': 'USD'},
        'aggregateRating': {
            '@type': 'AggregateRating',
            'ratingValue': '4.8',
            'ratingCount': '1000',
        },
        'datePublished': '2024-01-01',
        'dateModified': date.today().isoformat(),
        'keywords': ', '.join(calculator.keywords),
        'publisher': {'@type': 'Organization', 'name': name, 'url': url},
    }


def _item_list(calculators, url):
    return [
        {
            '@type': 'ListItem',
            'position': position,
            'name': calculator.name,
            'url': f"{url}{calculator.url}",
        }
        for position, calculator in enumerate(calculators[:10], start=1)
    ]


def category_schema(category, calculators):
    _, url = _site()
    return {
        '@context': CONTEXT,
        '@type': 'CollectionPage',
        'name': f"{category['name']} Calculators",
        'description': category['description'],
        'url': f"{url}/category/{category['slug']}",
        'mainEntity': {
            '@type': 'ItemList',
            'numberOfItems': len(calculators),
            'itemListElement': _item_list(list(calculators), url),
        },
    }


def listing_schema():
    name, url = _site()
    calculators = list(CALCULATORS.values())
    return {
        '@context': CONTEXT,
        '@type': 'ItemList',
        'name': f"All {name} calculators",
        'numberOfItems': len(calculators),
        'itemListElement': _item_list(calculators, url),
    }


def faq_schema(calculator):
    faqs = calculator.faqs or GENERIC_FAQS
    return {
        '@context': CONTEXT,
        '@type': 'FAQPage',
        'mainEntity': [
            {
                '@type': 'Question',
                'name': question,
                'acceptedAnswer': {'@type': 'Answer', 'text': answer},
            }
            for question, answer in faqs
        ],
    }


def howto_schema(calculator):
    _, url = _site()
    steps = [
        ('Enter your values', f"Fill in the {calculator.name} form fields."),
        ('Calculate', 'Press the Calculate button to run the formula.'),
        ('Read the results', 'Review the numbers and the explanation shown below the form.'),
    ]
    return {
        '@context': CONTEXT,
        '@type': 'HowTo',
        'name': f"How to use the {calculator.name}",
        'description': calculator.description,
        'totalTime': 'PT2M',
        'step': [
            {
                '@type': 'HowToStep',
                'position': n,
                'name': title,
                'text': text,
                'image': f"{url}/images/{calculator.slug}-step{n}.png",
            }
            for n, (title, text) in enumerate(steps, start=1)
        ],
    }


def breadcrumb_schema(items):
    """``items`` is a list of (name, path) pairs from the home page down."""
    _, url = _site()
    return {
        '@context': CONTEXT,
        '@type': 'BreadcrumbList',
        'itemListElement': [
            {
                '@type': 'ListItem',
                'position': position,
                'name': name,
                'item': f"{url}{path}",
            }
            for position, (name, path) in enumerate(items, start=1)
        ],
    }

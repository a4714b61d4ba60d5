"""
Learning hub articles.

Plain markdown, rendered with the ``markdown`` template filter. Each article
points at the calculators that put it into practice.
"""

ARTICLES = [
    {
        'slug': 'what-is-compound-interest',
        'title': 'What is Compound Interest?',
        'icon': '🐷',
        'category': 'finance',
        'summary': 'Interest on interest, and why starting early matters more than starting big.',
        'related': ['compound-interest', 'future-value', 'sip'],
        'content': """
## Simple vs. compound interest

Simple interest is paid only on the amount you started with (the principal).
Compound interest is paid on the principal **plus** all of the interest
already earned, so every period the base you earn on gets a little bigger.

## The snowball effect

Invest $1,000 at 10% a year.

- With simple interest you earn a flat $100 a year. After 20 years you have
  $3,000.
- With yearly compounding the first year gives $1,100, the second $1,210,
  and after 20 years you have about **$6,727**.

The formula is `A = P x (1 + r/n)^(n x t)`, where `n` is how many times a
year interest is added.

## What this means for you

- Time does most of the work, so start early even with small amounts.
- More frequent compounding helps, but much less than a higher rate or a
  longer horizon.
- The same maths works against you on debt such as credit cards.
""",
    },
    {
        'slug': 'apr-vs-apy',
        'title': 'Difference between APR and APY',
        'icon': '％',
        'category': 'finance',
        'summary': 'Two interest rates that tell different stories about the same money.',
        'related': ['compound-interest', 'real-interest-rate', 'loan-emi'],
        'content': """
## APR (Annual Percentage Rate)

APR is the yearly rate **without** compounding. It is the number you usually
see advertised for mortgages, car loans and credit cards.

## APY (Annual Percentage Yield)

APY **includes** compounding, so it is the rate you really earn or pay over
a year. APY is always greater than or equal to APR.

## An example

A savings account pays 5% APR compounded monthly:

`APY = (1 + 0.05/12)^12 - 1 = 5.116%`

| | APR | APY |
|---|---|---|
| Includes compounding | No | Yes |
| Best for comparing | Loan costs | Savings returns |

When you borrow, ask for the APR with fees included. When you save, compare
APYs.
""",
    },
    {
        'slug': 'what-is-bmi',
        'title': 'What is BMI and Why It Matters',
        'icon': '❤️',
        'category': 'health-fitness',
        'summary': 'What body mass index measures, how to read it and where it falls short.',
        'related': ['bmi', 'body-fat', 'ponderal-index'],
        'content': """
## What is Body Mass Index?

BMI compares your weight with your height:

`BMI = weight (kg) / height (m)²`

## The standard categories

| BMI | Category |
|---|---|
| below 18.5 | Underweight |
| 18.5 to 24.9 | Normal weight |
| 25 to 29.9 | Overweight |
| 30 and above | Obese |

## Limits of BMI

- It cannot tell muscle from fat, so athletes often read as overweight.
- It says nothing about where fat is carried. Waist size matters too.
- Cut-offs differ for children and some ethnic groups.

Use BMI as a quick screen, and talk to a healthcare provider about what your
number means for you.
""",
    },
    {
        'slug': 'common-loan-mistakes',
        'title': 'Common Loan Mistakes',
        'icon': '⚠️',
        'category': 'finance',
        'summary': 'Habits that add thousands to the cost of borrowing, and how to avoid them.',
        'related': ['loan-emi', 'mortgage', 'credit-utilization'],
        'content': """
Taking out a loan can shape your finances for years. These are the mistakes
that cost borrowers the most.

### 1. Not shopping around for the best rate

A difference of even 0.5% can cost thousands over the life of a loan. Get
quotes from at least three lenders, and include credit unions.

### 2. Focusing only on the monthly payment

Lower payments usually mean a longer term and more total interest. Work out
the total you will pay, not just the instalment.

### 3. Not checking your credit score

Poor scores mean higher rates and fewer options. Check your report for
errors and improve your score before applying.

### 4. Ignoring fees

Origination fees and closing costs add up. Compare loans on APR and ask for
a full breakdown of charges.

### 5. Borrowing more than you can afford

Borrow what you need, not the most you qualify for, and keep your emergency
fund intact.

### 6. Not reading the fine print

Look for prepayment penalties and late-payment terms before you sign.

### 7. Not planning to prepay

Extra payments and windfalls paid against the principal cut the interest
you pay. Choose loans that allow it.
""",
    },
]


def get_article(slug):
    return next((a for a in ARTICLES if a['slug'] == slug), None)


def get_articles(category=None):
    if category is None:
        return list(ARTICLES)
    return [a for a in ARTICLES if a['category'] == category]

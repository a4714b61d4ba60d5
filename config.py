import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Public identity used in page titles and structured data
SITE_NAME = os.getenv("SITE_NAME", "Mycalculating.com")
SITE_URL = os.getenv("SITE_URL", "https://mycalculating.com").rstrip("/")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma-separated calculator slugs shown on the homepage
FEATURED_CALCULATORS = [
    slug.strip()
    for slug in os.getenv(
        "FEATURED_CALCULATORS",
        "compound-interest,loan-emi,bmi,batting-average,shoe-size,paint-coverage",
    ).split(",")
    if slug.strip()
]

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True

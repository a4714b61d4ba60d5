def format_currency(amount):
    """Format amount as $X.XX or -$X.XX for negative values."""
    if amount is None:
        return '—'
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_percent(value, places=2):
    if value is None:
        return '—'
    return f"{value:,.{places}f}%"


def format_number(value, places=2):
    """Thousands separators, trailing zeros trimmed (12.50 -> 12.5, 3.00 -> 3)."""
    if value is None:
        return '—'
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    text = f"{value:,.{places}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_duration(hours):
    """Render fractional hours as 'X hours and Y minutes'."""
    whole = int(hours)
    minutes = int(round((hours - whole) * 60))
    if minutes == 60:
        whole += 1
        minutes = 0
    return f"{whole} hours and {minutes} minutes"


def format_output(value, kind):
    """Format a result value for display according to its Output kind."""
    if kind == 'currency':
        return format_currency(value)
    if kind == 'percent':
        return format_percent(value)
    if kind == 'integer':
        return format_number(int(round(value))) if value is not None else '—'
    if kind == 'number':
        return format_number(value)
    return value

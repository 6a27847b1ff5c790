import math


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def format_date(value, fmt: str = "%B %d, %Y") -> str:
    """Jinja filter; renders missing dates as an empty string."""
    if not value:
        return ""
    return value.strftime(fmt)

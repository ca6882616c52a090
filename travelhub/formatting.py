"""Display helpers shared by the dashboard templates"""

from collections import namedtuple
from datetime import date
from typing import Union

from .records import parse_date

MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

CURRENCY_SYMBOL = '$'

Badge = namedtuple('Badge', ['label', 'tone', 'icon'])

CATEGORY_ICONS = {
    'Beach': 'heart',
    'Culture': 'star',
    'Adventure': 'compass',
    'Nature': 'trending-up',
}
DEFAULT_CATEGORY_ICON = 'map-pin'

TRIP_STATUS_BADGES = {
    'confirmed': Badge('Confirmed', 'positive', None),
    'pending': Badge('Pending', 'neutral', None),
}

BOOKING_STATUS_BADGES = {
    'completed': Badge('Completed', 'positive', 'check-circle'),
    'canceled': Badge('Canceled', 'negative', 'x-circle'),
}


def format_date(value: Union[str, date]) -> str:
    """Render a calendar date as e.g. 'Jun 15, 2024'"""
    value = parse_date(value)
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def format_price(amount) -> str:
    return f"{CURRENCY_SYMBOL}{int(amount)}"


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def trip_status_badge(status: str) -> Badge:
    # Anything that is not confirmed shows as pending
    return TRIP_STATUS_BADGES.get(status, TRIP_STATUS_BADGES['pending'])


def booking_status_badge(status: str) -> Badge:
    return BOOKING_STATUS_BADGES.get(status, BOOKING_STATUS_BADGES['canceled'])


def register_filters(app):
    """Expose the helpers to Jinja templates"""
    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.filters['format_price'] = format_price
    app.jinja_env.filters['category_icon'] = category_icon
    app.jinja_env.globals['pluralize'] = pluralize
    app.jinja_env.globals['trip_status_badge'] = trip_status_badge
    app.jinja_env.globals['booking_status_badge'] = booking_status_badge

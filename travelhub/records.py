"""
Dashboard records: upcoming trips, past bookings and destination suggestions
"""

from dataclasses import dataclass, asdict
from datetime import date, datetime
from typing import Dict, Union


def parse_date(value: Union[str, date]) -> date:
    """Parse a YYYY-MM-DD calendar date"""
    if isinstance(value, date):
        return value
    return datetime.strptime(value, '%Y-%m-%d').date()


def parse_amount(value: Union[str, int, float]) -> Union[int, float]:
    """Parse a currency amount, keeping any fractional part"""
    amount = float(value)
    return int(amount) if amount.is_integer() else amount


def _field(data: Dict, snake: str, camel: str = None):
    # Accept both the JSON API keys and the camelCase keys used by browsers
    if snake in data:
        return data[snake]
    if camel and camel in data:
        return data[camel]
    raise KeyError(snake)


@dataclass(frozen=True)
class UpcomingTrip:
    """A confirmed or pending trip that has not started yet"""
    id: str
    destination: str
    start_date: date
    end_date: date
    guests: int
    price: Union[int, float]
    image_url: str
    status: str  # confirmed | pending

    @classmethod
    def from_dict(cls, data: Dict) -> 'UpcomingTrip':
        return cls(
            id=str(data['id']),
            destination=data['destination'],
            start_date=parse_date(_field(data, 'start_date', 'startDate')),
            end_date=parse_date(_field(data, 'end_date', 'endDate')),
            guests=int(data['guests']),
            price=parse_amount(data['price']),
            image_url=_field(data, 'image_url', 'imageUrl'),
            status=data['status'],
        )

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['start_date'] = self.start_date.isoformat()
        data['end_date'] = self.end_date.isoformat()
        return data


@dataclass(frozen=True)
class BookingHistoryEntry:
    """A past booking, either completed or canceled"""
    id: str
    destination: str
    start_date: date
    end_date: date
    guests: int
    price: Union[int, float]
    image_url: str
    status: str  # completed | canceled
    booking_date: date

    @classmethod
    def from_dict(cls, data: Dict) -> 'BookingHistoryEntry':
        return cls(
            id=str(data['id']),
            destination=data['destination'],
            start_date=parse_date(_field(data, 'start_date', 'startDate')),
            end_date=parse_date(_field(data, 'end_date', 'endDate')),
            guests=int(data['guests']),
            price=parse_amount(data['price']),
            image_url=_field(data, 'image_url', 'imageUrl'),
            status=data['status'],
            booking_date=parse_date(_field(data, 'booking_date', 'bookingDate')),
        )

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['start_date'] = self.start_date.isoformat()
        data['end_date'] = self.end_date.isoformat()
        data['booking_date'] = self.booking_date.isoformat()
        return data


@dataclass(frozen=True)
class Suggestion:
    """A personalized destination suggestion"""
    id: str
    destination: str
    country: str
    description: str
    rating: float
    price_range: str
    image_url: str
    category: str
    reason: str

    @classmethod
    def from_dict(cls, data: Dict) -> 'Suggestion':
        return cls(
            id=str(data['id']),
            destination=data['destination'],
            country=data['country'],
            description=data['description'],
            rating=float(data['rating']),
            price_range=_field(data, 'price_range', 'priceRange'),
            image_url=_field(data, 'image_url', 'imageUrl'),
            category=data['category'],
            reason=data['reason'],
        )

    def to_dict(self) -> Dict:
        return asdict(self)

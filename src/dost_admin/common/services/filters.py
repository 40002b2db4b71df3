"""In-memory views over fully fetched listings.

Text search is a case-insensitive substring match; categorical filters match
exactly unless given the ``"All"`` sentinel.
"""
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from dost_admin.common.models.bookings import Booking
from dost_admin.common.models.payments import Payment, PaymentMethod
from dost_admin.common.models.rooms import Room
from dost_admin.common.models.users import User
from dost_admin.common.utils.constants import ALL_FILTER


def _contains(value: Optional[str], term: str) -> bool:
    return bool(value) and term in value.lower()


def _matches_search(term: str, fields: Iterable[Optional[str]]) -> bool:
    term = (term or "").lower()
    if not term:
        return True
    return any(_contains(field, term) for field in fields)


def _matches_filter(value, selected: str) -> bool:
    if selected == ALL_FILTER:
        return True
    return getattr(value, "value", value) == selected


def filter_rooms(rooms: List[Room], search: str = "", status: str = ALL_FILTER) -> List[Room]:
    return [
        room
        for room in rooms
        if _matches_search(search, [room.roomname, room.roomtype.value])
        and _matches_filter(room.status, status)
    ]


def filter_bookings(
    bookings: List[Booking],
    search: str = "",
    status: str = ALL_FILTER,
    payment: str = ALL_FILTER,
) -> List[Booking]:
    return [
        booking
        for booking in bookings
        if _matches_search(
            search,
            [
                booking.user.full_name if booking.user else None,
                booking.room.roomname if booking.room else None,
            ],
        )
        and _matches_filter(booking.booking_status, status)
        and _matches_filter(booking.payment_status, payment)
    ]


def filter_users(users: List[User], search: str = "", status: str = ALL_FILTER) -> List[User]:
    return [
        user
        for user in users
        if (
            _matches_search(search, [user.full_name, user.email])
            # phone numbers are matched verbatim
            or bool(search and user.phone and search in user.phone)
        )
        and _matches_filter(user.status, status)
    ]


def filter_payments(
    payments: List[Payment], search: str = "", status: str = ALL_FILTER
) -> List[Payment]:
    return [
        payment
        for payment in payments
        if _matches_search(
            search,
            [payment.user.full_name if payment.user else None, payment.transaction_id],
        )
        and _matches_filter(payment.payment_status, status)
    ]


def payment_method_breakdown(payments: List[Payment]) -> Dict[str, float]:
    """Total amount per payment method, every method present."""
    totals = OrderedDict((method.value, 0.0) for method in PaymentMethod)
    for payment in payments:
        totals[payment.payment_method.value] += payment.amount
    return dict(totals)

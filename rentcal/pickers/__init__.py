"""
UI-independent picker models.

Each picker owns its own open/closed state and draft; a host UI renders the
model and forwards events to it.
"""

from .date_picker import DatePicker
from .datetime_dropdown import DateTimeDropdown
from .time_picker import TimePicker

__all__ = ["DatePicker", "TimePicker", "DateTimeDropdown"]

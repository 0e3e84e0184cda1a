"""Fixed month and weekday name tables used for display."""

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

# Sunday-first, matching the grid's weekday offset (0 = Sunday)
WEEKDAY_HEADERS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    return MONTH_NAMES[month - 1]


def month_abbreviation(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    return MONTH_ABBREVIATIONS[month - 1]

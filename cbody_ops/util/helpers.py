"""
Shared helpers for formatting, money, time windows and paging
"""

# Python Packages
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from zoneinfo import ZoneInfo

# Constants
from ..base import constants


CENTS = Decimal("0.01")





# ---------------------------------------------------------
# 🔹 Identifiers & Time
# ---------------------------------------------------------

def new_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime):
    """ Stored values may come back naive (SQLite); they are always UTC... """

    if value is None:
        return None

    if value.tzinfo is None:
        return value.replace(tzinfo = timezone.utc)

    return value.astimezone(timezone.utc)


def format_datetime(value):
    """ Datetime Format (ISO 8601, UTC)... """

    value = as_utc(value)
    return value.isoformat() if value else None


def parse_datetime(value):
    """
    Parse an ISO date or datetime string into an aware UTC datetime.

    Returns None for empty values, raises ValueError for malformed ones.
    """

    if value in (None, ""):
        return None

    if isinstance(value, datetime):
        return as_utc(value)

    text = str(value).strip().replace("Z", "+00:00")
    return as_utc(datetime.fromisoformat(text))


def today_start_utc(now: datetime = None) -> datetime:
    """ Midnight UTC of the current day... """

    now = as_utc(now) or utc_now()
    return now.replace(hour = 0, minute = 0, second = 0, microsecond = 0)


def finance_day_start(now: datetime = None) -> datetime:
    """
    Start of the current finance day as a UTC datetime.

    A finance day runs from 06:00 to 06:00 in Bangkok time.
    """

    tz = ZoneInfo(constants.FINANCE_TIMEZONE)
    local_now = (as_utc(now) or utc_now()).astimezone(tz)

    start = local_now.replace(
        hour = constants.FINANCE_DAY_START_HOUR,
        minute = 0,
        second = 0,
        microsecond = 0
    )

    if local_now < start:
        start = start - timedelta(days = 1)

    return start.astimezone(timezone.utc)



# ---------------------------------------------------------
# 🔹 Money
# ---------------------------------------------------------

def to_decimal(value) -> Decimal:
    """ Money value as a 2-place Decimal (None -> 0.00)... """

    if value is None or value == "":
        return Decimal("0.00")

    if not isinstance(value, Decimal):
        value = Decimal(str(value))

    return value.quantize(CENTS, rounding = ROUND_HALF_UP)


def to_float(value):
    """ JSON friendly money... """

    if value is None:
        return None

    return float(to_decimal(value))



# ---------------------------------------------------------
# 🔹 Paging
# ---------------------------------------------------------

def parse_paging(args: dict, default_limit: int = None, max_limit: int = None, limit_key: str = "limit"):
    """
    Read page/limit from query args and clamp them.

    Returns:
        tuple: (page, limit)
    """

    default_limit = default_limit or constants.DEFAULT_PAGE_SIZE
    max_limit = max_limit or constants.MAX_PAGE_SIZE

    try:
        page = int(args.get("page") or 1)
    except (TypeError, ValueError):
        page = 1

    try:
        limit = int(args.get(limit_key) or default_limit)
    except (TypeError, ValueError):
        limit = default_limit

    page = max(page, 1)
    limit = min(max(limit, 1), max_limit)

    return page, limit


def paginate(query, page: int, limit: int):
    """
    Apply offset/limit to a query.

    Returns:
        tuple: (items, meta)
    """

    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    total_pages = (total + limit - 1) // limit if total else 0

    return items, {
        "page": page,
        "limit": limit,
        "total": total,
        "total_pages": total_pages,
        "has_next": page < total_pages,
        "has_prev": page > 1
    }


def paginate_list(items: list, page: int, limit: int):
    """ Same as paginate, for rows already in memory... """

    total = len(items)
    total_pages = (total + limit - 1) // limit if total else 0

    return items[(page - 1) * limit:page * limit], {
        "page": page,
        "limit": limit,
        "total": total,
        "total_pages": total_pages,
        "has_next": page < total_pages,
        "has_prev": page > 1
    }


def parse_bool(value):
    """ Query strings carry booleans as text... """

    if value is None or value == "":
        return None

    if isinstance(value, bool):
        return value

    return str(value).strip().lower() in ("1", "true", "yes", "on")


def parse_list(args, key: str) -> list:
    """ Accept ?status=a&status=b as well as ?status=a,b ... """

    if hasattr(args, "getlist"):
        raw = args.getlist(key)
    else:
        raw = args.get(key) or []
        raw = raw if isinstance(raw, list) else [raw]

    values = []
    for item in raw:
        values.extend(part.strip() for part in str(item).split(",") if part.strip())

    return values

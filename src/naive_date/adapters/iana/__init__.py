from naive_date.adapters.iana.provider import ZoneInfoTimeZoneProvider

__all__ = ["ZoneInfoTimeZoneProvider"]

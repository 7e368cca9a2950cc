from naive_date.infrastructure.timezone.in_memory import FixedOffsetTimeZoneProvider

__all__ = ["FixedOffsetTimeZoneProvider"]

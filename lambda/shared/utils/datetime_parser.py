"""
DateTime Parser Utility
Shared utility for UTC timestamp handling
"""
from datetime import datetime, timezone
from typing import Union


class DateTimeParser:
    """Parse and normalize timestamps to UTC"""
    
    @staticmethod
    def utc_now() -> datetime:
        """Current time as an aware UTC datetime"""
        return datetime.now(timezone.utc)
    
    @staticmethod
    def to_utc(value: datetime) -> datetime:
        """
        Normalize datetime to aware UTC (naive values are assumed UTC)
        """
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    
    @staticmethod
    def from_iso(value: str) -> datetime:
        """
        Parse ISO-8601 string into aware UTC datetime
        
        Examples:
            >>> DateTimeParser.from_iso("2025-11-25T14:30:00Z")
            datetime(2025, 11, 25, 14, 30, tzinfo=timezone.utc)
        
        Raises:
            ValueError: If format is invalid
        """
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'
        return DateTimeParser.to_utc(datetime.fromisoformat(value))
    
    @staticmethod
    def from_unix(value: Union[int, float]) -> datetime:
        """Parse unix epoch seconds into aware UTC datetime"""
        return datetime.fromtimestamp(value, tz=timezone.utc)

"""Shared configuration"""
from .settings import FRESHNESS_WINDOW_MINUTES, TABLE_NAME
from .logger_config import get_logger, logger

__all__ = ['FRESHNESS_WINDOW_MINUTES', 'TABLE_NAME', 'get_logger', 'logger']

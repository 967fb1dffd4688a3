"""Application services"""
from .port_call_service import PortCallService

__all__ = ['PortCallService']

"""Conversation test harness."""

from .adapter import BotLogic, TestAdapter
from .flow import TestFlow

__all__ = ["BotLogic", "TestAdapter", "TestFlow"]

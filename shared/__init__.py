"""
Keywarden Shared Module
=======================

Configuration, logging, console and common models shared by the
Keywarden analyzer, generators and CLI.
"""

from shared.config import KeywardenConfig, get_config

__all__ = ["KeywardenConfig", "get_config"]

# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""Shared logger for findpay."""
import logging

logger: logging.Logger = logging.getLogger("findpay")

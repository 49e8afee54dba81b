# untitled-dm — session launcher menu — MIT Licensed
"""logger.py"""
import logging

logger = logging.getLogger("untitled_dm")

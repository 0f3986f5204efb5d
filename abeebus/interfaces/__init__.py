"""
User-facing interfaces for Abeebus
"""

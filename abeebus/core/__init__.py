"""
Core configuration, models and exceptions for Abeebus
"""

"""
Utility helpers for Abeebus
"""

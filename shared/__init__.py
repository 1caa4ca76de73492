"""
Shared models and utilities
"""

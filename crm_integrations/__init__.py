"""
CRM integrations
"""

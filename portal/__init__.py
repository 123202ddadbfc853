"""
Beneficiary Care Portal backend.
"""

"""
Cognitrack - scoring and longitudinal analytics for dementia and depression
screening instruments (GDS, NPI, FAQ, CDR).
"""

__version__ = "0.1.0"

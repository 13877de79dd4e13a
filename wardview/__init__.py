"""
WardView
Hospital operations read-model with privacy masking
"""
__version__ = "0.1.0"

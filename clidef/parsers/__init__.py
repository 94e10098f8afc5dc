"""

"""

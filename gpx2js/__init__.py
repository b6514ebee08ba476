"""
gpx2js - convert GPX tracks into JavaScript array literals for web maps.
"""

__version__ = "0.1.0"

"""Sweather - is it sweater weather?

A wardrobe assistant that classifies clothing photos with Gemini and
recommends an outfit from your own wardrobe for the current weather.
"""

__version__ = "0.1.0"
__author__ = "Sweather Team"

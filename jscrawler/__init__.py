"""
jscrawler package initializer.
Defines package version.
"""
__version__ = "0.0.4"

"""Game client launcher toolkit: version profiles, rules, arguments, downloads and data copying."""

__version__ = "0.1.0"
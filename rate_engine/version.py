"""
Rate Engine Version

Stamped on every calculated DataFrame as calculator_version.
Bump when divisors or calculation logic change.
"""

VERSION = "2026.10.18"

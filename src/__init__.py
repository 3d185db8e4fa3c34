"""Bitcoin Exclusivity Calculator.

Estimates how rare a Bitcoin holding is among known addresses (or the global
population) and what it would be worth under hypothetical market caps.
"""

__version__ = "0.1.0"

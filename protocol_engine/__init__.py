"""
EvoFit Protocol Engine

Health protocol recommendation and consent-gated configuration engine.
"""

__version__ = "1.0.0"

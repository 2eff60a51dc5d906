"""VetSpark clinic triage and reminder coordinator."""

__version__ = "1.0.0"

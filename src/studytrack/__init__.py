"""Study tracker backend.

Serves the study-tracker pages together with a validated contact form and a
keyword-routed study assistant.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]

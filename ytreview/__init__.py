"""
YouTube review: timestamped annotations on a shared video timeline.
"""

__version__ = "1.0.0"

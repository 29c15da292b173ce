"""
Forzeit: weekly task tracking with cached Ava insights.

Users own weeks; weeks hold cards; sessions record tracked work. Ava insights
derive a focus score and recommendations from a week, cached per requester.
"""

__version__ = "1.0.0"

"""Identifier classification.

Main Components
---------------
- detect: Identifier type of a raw string
- explain: Identifier type plus the deciding rule
- RULES: Ordered rule table
- INDEX: First-character dispatch index over RULES
"""

from pidmatch.detect.classifier import Classification, detect, explain
from pidmatch.detect.dispatch import INDEX, DispatchIndex, first_match, scan
from pidmatch.detect.rules import RULES, Rule, rules_for

__all__ = [
    "Classification",
    "detect",
    "explain",
    "DispatchIndex",
    "INDEX",
    "first_match",
    "scan",
    "RULES",
    "Rule",
    "rules_for",
]

"""
PickleCoach Core

Stroke comparison pipeline: domain models, analysis services and the
heuristic thresholds they share.
"""

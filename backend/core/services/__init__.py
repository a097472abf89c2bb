"""
Services Layer

Business logic services for stroke comparison.
These services orchestrate domain models into the analysis pipeline.
"""

from .metric_extractor import MetricExtractor
from .anchor_detector import find_anchor_points
from .temporal_normalizer import map_percent_to_index, interpolate_value, normalize_and_align
from .comparator import calculate_comparison_stats
from .recommendation_engine import RecommendationEngine
from .demo_generator import generate_demo_comparison, generate_demo_stats
from .reference_data import InvalidPoseDocumentError, parse_pose_document, load_reference_frames
from .stroke_analyzer import StrokeAnalyzer

__all__ = [
    "MetricExtractor",
    "find_anchor_points",
    "map_percent_to_index",
    "interpolate_value",
    "normalize_and_align",
    "calculate_comparison_stats",
    "RecommendationEngine",
    "generate_demo_comparison",
    "generate_demo_stats",
    "InvalidPoseDocumentError",
    "parse_pose_document",
    "load_reference_frames",
    "StrokeAnalyzer",
]

"""
Analysis Session

Holds the most recent stroke comparison shown to the client.
A comparison only replaces the stored one after the pipeline finishes,
so a failed upload leaves the previous result in place.
"""

import logging
from typing import Any, Optional

from core.domain.analysis import StrokeComparison
from core.services import StrokeAnalyzer

# Configure logging
logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    Latest-result state for the API.

    The analysis core is stateless; this is the only place a result
    outlives the request that produced it.
    """

    def __init__(self, analyzer: Optional[StrokeAnalyzer] = None):
        self.analyzer = analyzer or StrokeAnalyzer()
        self.latest: Optional[StrokeComparison] = None

    def load_demo(self) -> StrokeComparison:
        """Replace the latest result with the demo comparison."""
        self.latest = self.analyzer.demo()
        logger.info("Loaded demo comparison")
        return self.latest

    def upload(self, content: Any, trainee_label: str) -> StrokeComparison:
        """
        Compare an uploaded trainee document and store the result.

        Raises:
            InvalidPoseDocumentError: if the document cannot be parsed;
                the stored result is not touched
        """
        result = self.analyzer.compare_document(content, trainee_label=trainee_label)
        self.latest = result
        logger.info(
            f"Compared '{trainee_label}' ({result.source.value}): "
            f"score {result.recommendations.overall_score}"
        )
        return result

    def get_latest(self) -> StrokeComparison:
        """Latest result, starting from the demo when nothing ran yet."""
        if self.latest is None:
            return self.load_demo()
        return self.latest


# Global session
session = AnalysisSession()

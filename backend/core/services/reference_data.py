"""
Reference Data Service

Loads the pro recording every trainee stroke is compared against.
The file is read once per process and treated as read-only.
"""

import json
import logging
from functools import lru_cache
from typing import Any

from ..domain.pose import PoseFrame
from .. import thresholds

logger = logging.getLogger(__name__)


class InvalidPoseDocumentError(ValueError):
    """Raised when a pose document is not a JSON list of frames."""


def parse_pose_document(content: Any) -> tuple[PoseFrame, ...]:
    """
    Parse a pose document into frames.

    Accepts raw bytes or text holding either a JSON array of frames or an
    object with a ``frames`` array, or an already-decoded list.

    Raises:
        InvalidPoseDocumentError: if the payload is not JSON or holds no
            frame list
    """
    if isinstance(content, (bytes, bytearray)):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InvalidPoseDocumentError(f"Document is not UTF-8 text: {e}") from e

    if isinstance(content, str):
        try:
            content = json.loads(content, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise InvalidPoseDocumentError(f"Invalid JSON: {e}") from e

    if isinstance(content, dict) and isinstance(content.get("frames"), list):
        content = content["frames"]

    if not isinstance(content, list):
        raise InvalidPoseDocumentError(
            f"Expected a list of frames, got {type(content).__name__}"
        )

    return tuple(PoseFrame.from_dict(item) for item in content)


def _reject_constant(token: str) -> None:
    # json.loads accepts NaN and +/-Infinity, which JSON itself does not
    raise InvalidPoseDocumentError(f"Invalid JSON: non-finite number '{token}'")


def load_pose_file(path: str) -> tuple[PoseFrame, ...]:
    """Read and parse a pose document from disk."""
    with open(path, "rb") as f:
        return parse_pose_document(f.read())


@lru_cache(maxsize=1)
def load_reference_frames() -> tuple[PoseFrame, ...]:
    """
    Get the pro reference recording.

    Raises:
        OSError: if the reference file cannot be read
        InvalidPoseDocumentError: if it is not a valid pose document
    """
    path = thresholds.pro_data_path()
    frames = load_pose_file(path)
    logger.info(f"Loaded pro reference: {len(frames)} frames from {path}")
    return frames

from .marker_types import (
    Color,
    MarkerId,
    MarkerRecord,
    MarkerSet,
    MarkerType,
)

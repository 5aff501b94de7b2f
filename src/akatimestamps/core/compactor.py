"""Timestamp compaction.

The analysis service can report the same question several times in a row
while it refines a match. Only the latest report of each run is kept.
"""

from collections.abc import Iterable

from akatimestamps.core.models import DetectedTimeStamp


def compact_timestamps(timestamps: Iterable[DetectedTimeStamp]) -> list[DetectedTimeStamp]:
    """
    Collapse consecutive detections of the same question.

    Keeps exactly one entry per maximal run of equal ``question_idx``: the
    last one of the run. Order is preserved and the input is not modified.
    Question indexes are not validated here.

    Args:
        timestamps: Detections in the order the service emitted them

    Returns:
        New list with one entry per run

    Example:
        >>> ts = [DetectedTimeStamp(0, "00:10", True), DetectedTimeStamp(0, "00:12", True)]
        >>> compact_timestamps(ts)
        [DetectedTimeStamp(question_idx=0, at_str='00:12', found=True)]
    """
    compacted: list[DetectedTimeStamp] = []
    for timestamp in timestamps:
        if compacted and compacted[-1].question_idx == timestamp.question_idx:
            compacted[-1] = timestamp
        else:
            compacted.append(timestamp)
    return compacted

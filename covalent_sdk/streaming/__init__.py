"""
Streaming module delivering paginated results one record at a time.
"""

from .stream_producer import RecordStream, StreamRecord, produce

__all__ = ["RecordStream", "StreamRecord", "produce"]

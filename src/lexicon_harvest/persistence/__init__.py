# ABOUTME: Record queue persistence layer
# ABOUTME: Pipeline Stage 2: Records → line-oriented queue file used as checkpoint and hand-off

"""
Persistence Layer: Save and reload the record queue

This layer handles:
- Writing accepted records as [word][definition][origin] lines
- Reading a queue back to resume a harvest or replay a delivery
- Reporting and skipping malformed lines

Data Flow: core/ records → Queue file → services/ delivery
"""

from .queue_store import MalformedLine, QueueLoadResult, QueueStore, SaveOutcome

__all__ = [
    "MalformedLine",
    "QueueLoadResult",
    "QueueStore",
    "SaveOutcome",
]

# ABOUTME: Business logic and orchestration layer
# ABOUTME: Record assembly and the sequential word-to-record harvest loop

"""
Core Layer: Record assembly and workflow orchestration

This layer handles:
- Domain models (records, progress events, run results)
- Assembling extracted definitions and origins into records
- Running the throttled, strictly sequential harvest loop

Data Flow: extraction/ fragments → Records → persistence/ queue
"""

from .assembler import assemble
from .models import HarvestResult, ProgressEvent, ProgressKind, Record
from .pipeline import HarvestPipeline

__all__ = [
    "HarvestPipeline",
    "HarvestResult",
    "ProgressEvent",
    "ProgressKind",
    "Record",
    "assemble",
]

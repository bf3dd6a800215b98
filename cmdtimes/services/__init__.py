"""
Services package.

Runtime wiring: configuration, worker threads and the timing pipeline.
"""

from .config_svc import ConfigService
from .record_collector_svc import RecordCollector
from .timing_pipeline_svc import TimingPipelineService
from .worker_pool_svc import ParseWorkerPool, WorkerPoolConfig, default_worker_count

__all__ = [
    "ConfigService",
    "ParseWorkerPool",
    "RecordCollector",
    "TimingPipelineService",
    "WorkerPoolConfig",
    "default_worker_count",
]

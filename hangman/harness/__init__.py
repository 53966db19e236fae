from .core import run_case, run_batch
from .interactive import InteractiveSession, SessionConfig
from .io import write_csv, write_manifest, summarize

__all__ = ["run_case", "run_batch", "InteractiveSession", "SessionConfig",
           "write_csv", "write_manifest", "summarize"]

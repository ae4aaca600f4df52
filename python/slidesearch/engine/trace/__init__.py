from slidesearch.engine.trace.dot import DotTrace
from slidesearch.engine.trace.events import NullTrace, RecordingTrace, TraceListener

__all__ = ["DotTrace", "NullTrace", "RecordingTrace", "TraceListener"]

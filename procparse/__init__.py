"""Process pipelines, piped child programs, sandboxed calls, and small JSON-subset and arithmetic parsers."""

__version__ = "0.1.0"
__all__ = ["picoshell", "popen", "sandbox", "argo", "vbc"]
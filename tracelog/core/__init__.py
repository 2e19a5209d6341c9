"""
Formatting, trace code generation and the Logger orchestrator.

Submodules are imported directly (``from tracelog.core.logger import Logger``)
so that ``tracelog.models`` can depend on the formatter without a cycle.
"""

"""
Capabilities the core relies on: call-stack inspection, error types and the
package diagnostics logger.
"""

"""Core configuration, logging and instrumentation."""

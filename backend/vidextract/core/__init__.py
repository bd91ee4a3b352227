"""Core: configuration, errors, logging, outbound HTTP."""

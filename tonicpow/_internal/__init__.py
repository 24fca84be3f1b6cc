"""Internal modules for the TonicPow SDK.

These are implementation details of TonicPowClient and are not part of the
public API.

Modules:
    http - Default HTTP transport configuration
    tracing - Per-request timing recorder
    redaction - Secret redaction for debug output
"""

"""layout-guard: continuation and indentation rules with auto-fix for TypeScript/JavaScript."""

__version__ = "0.1.0"

"""
dashlib components.

Each component exposes pure helpers from _impl (or fc) and, where input needs
validating, run_* entry points returning outputs with validation errors.
"""

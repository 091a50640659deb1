# faultcore/core/__init__.py
"""
FaultCore core: fault model, error types and handling policy.
"""

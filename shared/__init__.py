"""
Shared Kernel

This module contains base classes and utilities shared by the room registry
and the booking ledger: value objects, the error taxonomy, admission locks
and store error handling.
"""

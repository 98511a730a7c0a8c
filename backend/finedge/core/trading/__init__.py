"""
Trading Module

Instant-fill trade execution against the live quote and the transaction
history reader.
"""

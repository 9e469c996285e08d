"""
Test suite for the reconciliation engine.

Focus areas:
- Registry fold order and termination sweep
- Terminal callback contract
- Timer feeder ticking and cancellation
- Engine factory and configuration
"""

# sha2family Test Suite
"""
Test suite including:
- Unit tests for each building block
- Known-answer tests for all six variants
- Security tests (invalid inputs, overflow, avalanche)
- Integration tests against the cryptography backend

Run with: pytest
"""

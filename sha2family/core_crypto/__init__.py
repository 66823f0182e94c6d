# Core Cryptography Module
"""
From-scratch SHA-2 implementation (FIPS 180-4):
- Bit operations generic over 32/64-bit words
- Message padding and block parsing
- Compression engines (64 and 80 rounds)
- Digest formatting
- Variant catalog: SHA-224, SHA-256, SHA-384, SHA-512, SHA-512/224, SHA-512/256
- Known-answer self test
"""

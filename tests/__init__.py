"""
Test suite for bitext_aligner.
"""

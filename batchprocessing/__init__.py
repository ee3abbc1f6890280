"""
batchprocessing records and helpers
"""

"""
Helpers for the formatting pipeline: decoding, transforms, styling,
sanitizing, assembly and encoding.
"""

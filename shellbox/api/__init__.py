"""
FastAPI surface exposing the read-only shellbox utilities.
"""

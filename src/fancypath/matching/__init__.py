"""Matching — split a pattern and a path, bind variables by position.

One pattern against one path per call; no route table, no dispatch.
"""

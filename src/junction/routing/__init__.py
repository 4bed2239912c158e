"""Routing — compiled route table with a bounded match cache.

Routes are compiled when the table is registered. Each concrete path
is resolved by a linear scan once, then served from the cache.
"""

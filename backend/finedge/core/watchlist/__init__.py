"""
Watchlist Module
"""

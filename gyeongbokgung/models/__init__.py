"""Data models for the palace adventure.

Import directly from submodules:
    from gyeongbokgung.models.world import Direction, Location, Item
    from gyeongbokgung.models.game import GameState
"""

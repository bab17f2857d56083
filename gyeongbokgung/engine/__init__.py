"""Game engine components.

- parser: turns a raw input line into an ActionIntent
- rules: movement, pickup and offering tables
- validators/: check intents against the rules without mutating state
- state: GameStateManager, the only writer of GameState
- narration: fixed player-facing text
- game: GyeongbokgungGame, the controller the hosts drive

Import directly from submodules:
    from gyeongbokgung.engine.game import GyeongbokgungGame
    from gyeongbokgung.engine.protocols import GameContext
"""

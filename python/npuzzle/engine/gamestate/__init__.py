from npuzzle.engine.gamestate.state import GameRecord, GameState

__all__ = ["GameRecord", "GameState"]

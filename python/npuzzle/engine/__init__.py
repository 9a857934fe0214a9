from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameplay import GamePlay
from npuzzle.engine.gamestate import GameRecord, GameState

__all__ = ["GameGenerator", "GamePlay", "GameRecord", "GameState"]

from slidesearch.engine.scrambler.generator import Scrambler

__all__ = ["Scrambler"]

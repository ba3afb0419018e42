from npuzzle.frontend.cli.vanilla.app import run

__all__ = ["run"]

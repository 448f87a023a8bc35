"""pygame front end for the Hungry Mamba game."""

__all__ = [
    "input",
    "main",
    "render",
]

"""Tagged values, instructions, bytecode headers and register state for a small VM."""

__version__ = "0.1.0"
__all__ = ["value", "instruction", "header", "state"]
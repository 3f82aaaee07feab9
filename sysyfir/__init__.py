"""An in-memory intermediate representation printed as LLVM-style IR text, with a pass framework."""

__version__ = "0.1.0"
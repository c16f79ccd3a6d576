"""
Hack SDK Command-Line Interface
===============================

This package provides command-line tools for the Hack toolchain:

- **hackasm**: Hack assembler (.asm -> .hack)
- **hackdisasm**: Hack disassembler (.hack -> assembly)

Each tool is implemented as a Click-based CLI application with
help output and consistent exit codes (see cli.errors.ExitCode).
"""

__all__ = ["hackasm", "hackdisasm"]

"""Command line entry points."""

from .demo_command import main, run_demo

__all__ = ['main', 'run_demo']

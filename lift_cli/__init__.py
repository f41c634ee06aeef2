"""Strength-training log parser and command-line interface."""

__version__ = "0.1.0"

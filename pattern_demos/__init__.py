"""Pattern Demos - Root Package.

This package collects small, self-contained demonstrations of classic
object-oriented design patterns. Each demo defines a handful of classes,
builds a few instances and narrates what happens on the console, often
contrasting a naive implementation with one that applies the pattern.

Key Components:
    - demos: One module per pattern (prototype, solid, facade, ...)
    - registry: Registry of available demos used by the CLI
    - config: Configuration schemas and loading
    - cli: Command-line interface
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

"""
Usage:
    Demos are run through the command-line interface:

    >>> pattern-demos list
    >>> pattern-demos run observer proxy

    or one at a time as plain scripts:

    >>> python -m pattern_demos.demos.singleton
"""

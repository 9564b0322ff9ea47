"""Pattern demos - one self-contained module per design pattern.

Each module runs on its own, e.g. ``python -m pattern_demos.demos.observer``;
``registration`` wires all of them into the demo registry for the CLI.
"""

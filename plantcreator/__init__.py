"""
Plant Creator

Immutable, validated plant value objects with named presets and a small CLI.

Architecture:
    - plantcreator/domain: Pure business entities (the Plant value object)
    - plantcreator/infrastructure: Configuration, input schemas, presets file
    - plantcreator/interfaces: CLI

Usage:
    from plantcreator.domain.models import Plant

    tree = Plant.default()
    flower = Plant.create(1, 2, has_leaves=True, has_petals=True, has_stem=True, has_bush=False)
"""

__version__ = "1.0.0"

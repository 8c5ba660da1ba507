"""
Core rule building: vocabularies, builder, proxied rules and models.
"""

"""Domain layer: field types, subject model, codec, and builder.

This layer depends only on stdlib, pydantic, and pycountry (the ISO-3166-2
subdivision table behind the geo validator).
It must never import from services, commands, output, or config.
"""

"""GraphQL building blocks: query errors, ID and Map scalars, cache hints and example resolvers."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "ids",
    "decode",
    "cache",
    "caching",
    "scalar_map",
    "customerrors",
    "starwars",
    "social",
]
from .vault import VaultHost, parse_frontmatter

__all__ = ["VaultHost", "parse_frontmatter"]

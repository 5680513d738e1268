"""PressPack - Expose installed WordPress plugins as Composer packages."""

__version__ = "0.1.0"

# Lazy imports keep ``import presspack`` free of configuration lookups
def __getattr__(name: str):
    """Lazy import of public classes."""
    if name == "Plugin":
        from presspack.packages.plugin import Plugin
        return Plugin
    elif name == "Package":
        from presspack.packages.base import Package
        return Package
    elif name == "PackageManager":
        from presspack.packages.manager import PackageManager
        return PackageManager
    elif name == "Settings":
        from presspack.config import Settings
        return Settings
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "Plugin",
    "Package",
    "PackageManager",
    "Settings",
]

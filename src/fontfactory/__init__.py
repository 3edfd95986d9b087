"""fontfactory - Load custom fonts by logical name.

fontfactory keeps a registry of TrueType/OpenType fonts listed in a
``.properties`` configuration file and resolves font requests against it,
falling back to the fonts installed on the system.

Example:
    $ fontfactory show heading --style bold --size 14

This resolves the logical name ``heading`` from config/fonts.properties, or a
system font family of that name when no custom font is registered.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

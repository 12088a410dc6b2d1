"""
Core enum-definition engine.

- registry: EnumType descriptors, option declaration, derivation
- values: value assignment policy
- ir: frozen EnumSpec/OptionSpec descriptions
- export: client-side JSON payloads
- integrations: IntEnum and choice-field adapters
- manifest: enu.toml loading
"""
